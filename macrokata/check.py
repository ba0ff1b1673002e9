"""Verify that every exercise's recorded diff and solution are in order."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from .diffing import unified_diff
from .paths import ExercisePaths, exercise_root


class CheckError(Exception):
    """An exercise failed its consistency check."""


class MainFileDoesNotExist(CheckError):
    """The exercise's ``main.rs`` could not be read."""


class SolutionFileDoesNotExist(CheckError):
    """The exercise's solution file could not be read."""


class DiffFileDoesNotExist(CheckError):
    """The exercise's recorded ``solution.diff`` could not be read."""


class DiffFileDoesNotMatch(CheckError):
    """The recorded diff differs from the diff between exercise and solution."""

    def __init__(self, actual: str, expected: str) -> None:
        super().__init__("recorded diff does not match")
        self.actual = actual
        self.expected = expected

    def __repr__(self) -> str:
        return f"DiffFileDoesNotMatch(actual={self.actual!r}, expected={self.expected!r})"


class SolutionFileDoesNotClippy(CheckError):
    """The solution does not pass ``cargo clippy``."""


def run_cargo_command(
    exercise: str, command: str, root: str | os.PathLike[str] | None = None
) -> subprocess.CompletedProcess:
    """Run ``cargo <command> --bin <exercise>_soln`` and capture its output."""
    return subprocess.run(
        ["cargo", command, "--bin", f"{exercise}_soln"],
        capture_output=True,
        cwd=exercise_root(root),
    )


def _read(path: Path, error: type[CheckError]) -> str:
    try:
        return path.read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise error(str(path)) from exc


def check(exercise: str, root: str | os.PathLike[str] | None = None) -> None:
    """Raise a :class:`CheckError` if the exercise is not consistent."""
    paths = ExercisePaths.for_exercise(exercise, root)
    main = _read(paths.main, MainFileDoesNotExist)
    solution = _read(paths.solution, SolutionFileDoesNotExist)
    recorded = _read(paths.diff, DiffFileDoesNotExist)

    actual = unified_diff(main, solution)
    if actual != recorded:
        raise DiffFileDoesNotMatch(actual=actual, expected=recorded)

    try:
        passed = run_cargo_command(exercise, "clippy", root).returncode == 0
    except OSError:
        passed = False
    if not passed:
        raise SolutionFileDoesNotClippy(exercise)


def check_all(root: str | os.PathLike[str] | None = None) -> bool:
    """Check every exercise, reporting failures on stderr; True if all pass."""
    ok = True
    for main in sorted((exercise_root(root) / "exercises").glob("*/main.rs")):
        name = main.parent.name
        try:
            check(name, root)
        except CheckError as exc:
            print(f"Check of {name!r} failed: {exc!r}", file=sys.stderr)
            ok = False
    return ok