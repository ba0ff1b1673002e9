"""Record the diff between an exercise and its solution."""

from __future__ import annotations

import os

from .diffing import unified_diff
from .paths import ExercisePaths


def update_diff(exercise: str, root: str | os.PathLike[str] | None = None) -> str:
    """Write the exercise's ``solution.diff`` and return its contents."""
    paths = ExercisePaths.for_exercise(exercise, root)
    diff = unified_diff(paths.main.read_text(), paths.solution.read_text())
    paths.diff.write_text(diff)
    return diff