"""Running an action when any of several conditions holds."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

SUCCESS_MESSAGE = "Yay, the if statement worked."


def _holds(condition: Any) -> bool:
    return bool(condition() if callable(condition) else condition)


def if_any(conditions: Iterable[Any], action: Callable[[], object]) -> bool:
    """Run ``action`` if any condition is true and report whether it ran.

    Conditions are checked in order and may be zero-argument callables,
    which are only called until one of them holds. At least one condition
    is required.
    """
    items = list(conditions)
    if not items:
        raise ValueError("if_any needs at least one condition")
    if any(_holds(condition) for condition in items):
        action()
        return True
    return False


def print_success() -> str:
    """Print the success message and return the line written."""
    line = SUCCESS_MESSAGE
    print(line)
    return line


def main() -> None:
    if_any([False, 0 == 1, True], print_success)


if __name__ == "__main__":
    main()