"""Regenerating an exercise's stored solution diff."""

from __future__ import annotations

from pathlib import Path

from katarunner.diffing import unified_diff
from katarunner.layout import ExercisePaths


def update_diff(exercise: str, root: str | Path) -> str:
    """Write the diff from exercise to solution into the diff file and return it."""
    paths = ExercisePaths.for_exercise(root, exercise)
    main = paths.main.read_bytes().decode("utf-8")
    solution = paths.solution.read_bytes().decode("utf-8")
    diff = unified_diff(main, solution)
    paths.diff.write_bytes(diff.encode("utf-8"))
    return diff