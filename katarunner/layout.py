"""Where an exercise's files live inside a kata tree."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

EXERCISES_DIR = "exercises"
SOLUTIONS_DIR = "solutions"
MAIN_FILE = "main.rs"
DIFF_FILE = "solution.diff"


@dataclass(frozen=True)
class ExercisePaths:
    """The exercise file, its solution and the stored diff between them."""

    main: Path
    solution: Path
    diff: Path

    @classmethod
    def for_exercise(cls, root: str | Path, exercise: str) -> ExercisePaths:
        base = Path(root) / EXERCISES_DIR / exercise
        return cls(
            main=base / MAIN_FILE,
            solution=base / SOLUTIONS_DIR / MAIN_FILE,
            diff=base / SOLUTIONS_DIR / DIFF_FILE,
        )


def list_exercises(root: str | Path) -> list[str]:
    """Names of every exercise directory that holds a main file, sorted."""
    pattern = f"*/{MAIN_FILE}"
    return sorted(path.parent.name for path in (Path(root) / EXERCISES_DIR).glob(pattern))