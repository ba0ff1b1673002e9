"""Locations of exercise files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ROOT_ENV_VAR = "MACROKATA_ROOT"


def exercise_root(root: str | os.PathLike[str] | None = None) -> Path:
    """Return the project directory that holds ``exercises/``.

    An explicit ``root`` wins; otherwise ``$MACROKATA_ROOT``, then the
    current directory.
    """
    if root is not None:
        return Path(root)
    return Path(os.environ.get(ROOT_ENV_VAR) or os.getcwd())


@dataclass(frozen=True)
class ExercisePaths:
    """The starting file, solution and recorded diff of one exercise."""

    main: Path
    solution: Path
    diff: Path

    @classmethod
    def for_exercise(
        cls, exercise: str, root: str | os.PathLike[str] | None = None
    ) -> "ExercisePaths":
        base = exercise_root(root) / "exercises" / exercise
        solutions = base / "solutions"
        return cls(
            main=base / "main.rs",
            solution=solutions / "main.rs",
            diff=solutions / "solution.diff",
        )