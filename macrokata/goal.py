"""Show the expansion that an exercise's solution produces."""

from __future__ import annotations

import os
import subprocess

from .paths import exercise_root


def goal(exercise: str, root: str | os.PathLike[str] | None = None) -> int:
    """Run ``cargo expand`` on the solution binary; return its exit status."""
    return subprocess.run(
        ["cargo", "expand", "--bin", f"{exercise}_soln", "main"],
        stderr=subprocess.DEVNULL,
        cwd=exercise_root(root),
    ).returncode