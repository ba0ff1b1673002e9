"""Build an exercise and compare its expansion with the solution's."""

from __future__ import annotations

import os
import subprocess
import sys

from .diffing import unified_diff
from .paths import exercise_root


class BuildFailed(Exception):
    """The exercise did not build cleanly."""


def _expand(binary: str, color: str, cwd) -> bytes:
    return subprocess.run(
        ["cargo", "expand", "--color", color, "--bin", binary, "main"],
        capture_output=True,
        cwd=cwd,
    ).stdout


def run_test(exercise: str, root: str | os.PathLike[str] | None = None) -> str:
    """Build and expand the exercise, print the comparison, return the diff.

    An empty return value means the expansion matches the solution.
    """
    cwd = exercise_root(root)
    color = "always" if sys.stdout.isatty() else "never"

    build = subprocess.run(
        ["cargo", "build", "--color", color, "--quiet", "--bin", exercise],
        capture_output=True,
        cwd=cwd,
    )
    if build.stderr or build.returncode != 0:
        print("The following errors were encountered:")
        sys.stderr.write(build.stderr.decode(errors="replace"))
        raise BuildFailed("Build failed")

    produced = _expand(exercise, color, cwd).decode(errors="replace")
    print()
    print("This is the expansion you produced:")
    print()
    sys.stdout.write(produced)

    expected = _expand(f"{exercise}_soln", color, cwd).decode(errors="replace")
    print("\nThe expansion we expected is:\n")
    sys.stdout.write(expected)

    diff = unified_diff(produced, expected)
    if diff:
        print("\nThe diff is:\n")
        print(diff)
    else:
        print("\nCongratulations! You solved it.\n")
    return diff