"""Arithmetic over arbitrary expressions."""

from __future__ import annotations

from typing import Any


def plus(a: Any, b: Any) -> Any:
    """The sum of two already evaluated expressions."""
    return a + b


def square(x: Any) -> Any:
    """The expression multiplied by itself; it is evaluated only once."""
    return x * x


def print_result(value: object) -> None:
    print(f"The result is {value}")


def main() -> None:
    var = 5
    print_result(plus(2 * 3, var))
    print_result(square(var))


if __name__ == "__main__":
    main()