"""A runner that builds, expands, diffs and checks macro exercises."""

__version__ = "0.3.1"