"""Nested loops over two ranges with typed loop variables."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

R = TypeVar("R")
C = TypeVar("C")


@dataclass
class Coordinate:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def show(self) -> str:
        """Print the coordinate as ``(x, y)`` and return that text."""
        text = str(self)
        print(text)
        return text


def for_2d(
    rows: Iterable[Any],
    cols: Iterable[Any],
    body: Callable[[R, C], object],
    row_type: Callable[[Any], R] = int,
    col_type: Callable[[Any], C] = int,
) -> None:
    """Call ``body(row, col)`` for every row and, inside it, every column.

    Each value is converted by its type before use; the columns are
    gathered once so that every row sees all of them.
    """
    columns = tuple(cols)
    for raw_row in rows:
        row = row_type(raw_row)
        for raw_col in columns:
            body(row, col_type(raw_col))


def main() -> None:
    for_2d(range(1, 5), range(2, 7), lambda row, col: Coordinate(x=col, y=row).show())

    values = [1, 3, 5]
    for_2d(values, values, lambda x, y: Coordinate(x=int(x), y=int(y)).show())


if __name__ == "__main__":
    main()