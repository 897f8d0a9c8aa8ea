"""Turning many-argument functions into chains of one-argument calls."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TextIO

from katarunner.katas.mappings import format_debug


def _inline_debug(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return format_debug(value)
    if isinstance(value, list):
        return "[" + ", ".join(_inline_debug(item) for item in value) + "]"
    if isinstance(value, tuple):
        return "(" + ", ".join(_inline_debug(item) for item in value) + ")"
    return repr(value)


def _print_curried_argument(value: Any, out: TextIO | None) -> None:
    stream = out if out is not None else sys.stdout
    print(f"Currying value {_inline_debug(value)}.", file=stream)


def curry(params: Iterable[str], body: Callable[..., Any], out: TextIO | None = None) -> Any:
    """Take ``params`` one call at a time, then run ``body`` with them as keywords.

    Each argument is reported on ``out`` as it arrives. With no parameters
    the body runs at once and its result is returned.
    """
    names = tuple(params)
    if len(set(names)) != len(names):
        raise ValueError("parameter names must be distinct")

    def collect(bound: tuple[Any, ...]) -> Any:
        if len(bound) == len(names):
            return body(**dict(zip(names, bound)))

        def take(value: Any) -> Any:
            _print_curried_argument(value, out)
            return collect((*bound, value))

        return take

    return collect(())


def curry_fn(arity: int, body: Callable[..., Any]) -> Callable[[Any], Any]:
    """A silent curried function of ``arity`` positional arguments (at least one)."""
    if arity < 1:
        raise ValueError("a curried function needs at least one argument")

    def collect(bound: tuple[Any, ...]) -> Any:
        if len(bound) == arity:
            return body(*bound)
        return lambda value: collect((*bound, value))

    return collect(())


def filter_between(values: Iterable[int], low: int, high: int) -> list[int]:
    """The values strictly between ``low`` and ``high``, in order."""
    return [value for value in values if low < value < high]


def _print_numbers(nums: Sequence[int]) -> None:
    print(f"Resulting Numbers: {format_debug(list(nums))}")


def main() -> None:
    print("=== defining functions ===")
    is_between = curry(
        ["low", "high", "item"], lambda low, high, item: low < item < high
    )
    curry_filter_between = curry(
        ["low", "high", "values"],
        lambda low, high, values: [
            item for item in values if is_between(low)(high)(item)
        ],
    )

    print("=== create between_3_7 ===")
    between_3_7 = curry_filter_between(3)(7)
    print("=== create between_5_10 ===")
    between_5_10 = curry_filter_between(5)(10)

    my_vec = [1, 3, 5, 6, 7, 9]

    print("=== call between_3_7 ===")
    _print_numbers(between_3_7(my_vec))

    print("=== call between_5_10 ===")
    _print_numbers(between_5_10(my_vec))

    add = curry_fn(4, lambda a, b, c, d: a + b + c + d)
    print(add(3)(2)(3)(4))


if __name__ == "__main__":
    main()