"""Checking that exercises, solutions and stored diffs agree."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

from katarunner.cargo import run_cargo, solution_binary
from katarunner.diffing import unified_diff
from katarunner.layout import ExercisePaths, list_exercises

ClippyRunner = Callable[[str, Path], bool]


class CheckError(Exception):
    """An exercise failed its consistency check."""


class MainFileDoesNotExist(CheckError):
    """The exercise's main file could not be read."""


class SolutionFileDoesNotExist(CheckError):
    """The solution file could not be read."""


class DiffFileDoesNotExist(CheckError):
    """The stored diff file could not be read."""


class DiffFileDoesNotMatch(CheckError):
    """The stored diff differs from the diff of exercise and solution."""

    def __init__(self, actual: str, expected: str) -> None:
        super().__init__("stored diff does not match")
        self.actual = actual
        self.expected = expected


class SolutionFileDoesNotClippy(CheckError):
    """The solution does not pass clippy."""


def _read(path: Path, error: type[CheckError]) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise error(str(path)) from exc


def _cargo_clippy(exercise: str, root: Path) -> bool:
    try:
        return run_cargo("clippy", "--bin", solution_binary(exercise), cwd=root).returncode == 0
    except OSError:
        return False


def check(
    exercise: str, root: str | Path, clippy: ClippyRunner | None = None
) -> None:
    """Raise a :class:`CheckError` if the exercise is not consistent."""
    root = Path(root)
    paths = ExercisePaths.for_exercise(root, exercise)
    main = _read(paths.main, MainFileDoesNotExist)
    solution = _read(paths.solution, SolutionFileDoesNotExist)
    stored = _read(paths.diff, DiffFileDoesNotExist)

    actual = unified_diff(main, solution)
    if actual != stored:
        raise DiffFileDoesNotMatch(actual=actual, expected=stored)

    runner = clippy or _cargo_clippy
    if not runner(exercise, root):
        raise SolutionFileDoesNotClippy(exercise)


def check_all(
    root: str | Path, clippy: ClippyRunner | None = None
) -> list[tuple[str, CheckError]]:
    """Check every exercise, report failures on stderr and return them."""
    failures: list[tuple[str, CheckError]] = []
    for exercise in list_exercises(root):
        try:
            check(exercise, root, clippy)
        except CheckError as error:
            print(f"Check of {exercise!r} failed: {error!r}", file=sys.stderr)
            failures.append((exercise, error))
    return failures