[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "macrokata"
version = "0.3.1"
description = "A runner that builds, expands and compares macro exercises against their solutions, plus the exercises' ideas as Python functions."
requires-python = ">=3.10"
dependencies = []
keywords = ["macros", "exercises", "kata", "education", "cargo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
macrokata = "macrokata.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["macrokata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
