"""Flattening an adjacency list into edges."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from katarunner.katas.mappings import format_debug

N = TypeVar("N")


def graph(adjacency: Iterable[tuple[N, Iterable[N]]]) -> list[tuple[N, N]]:
    """Every ``(start, end)`` edge, in the order the adjacency list gives them."""
    return [(start, end) for start, ends in adjacency for end in ends]


def format_edges(edges: Iterable[tuple[Any, Any]]) -> str:
    """The edges in multi-line debug form."""
    return format_debug(list(edges))


def main() -> None:
    my_graph = graph(
        [
            (1, (2, 3, 4, 5)),
            (2, (1, 3)),
            (3, (2,)),
            (4, ()),
            (5, (1, 2, 3)),
        ]
    )
    print(format_edges(my_graph))


if __name__ == "__main__":
    main()