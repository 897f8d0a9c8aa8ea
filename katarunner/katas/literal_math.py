"""Small arithmetic phrases over literal values."""

from __future__ import annotations

from typing import Union

Literal = Union[int, float, str, bytes, bool]
_LITERAL_TYPES = (int, float, str, bytes, bool)


def _is_literal(value: object) -> bool:
    return isinstance(value, _LITERAL_TYPES)


def math(*args: object) -> Literal:
    """Evaluate ``(a, "plus", b)`` or ``("square", x)`` where operands are literals."""
    if len(args) == 3:
        first, word, second = args
        if word == "plus" and _is_literal(first) and _is_literal(second):
            return first + second  # type: ignore[operator]
    elif len(args) == 2:
        word, operand = args
        if word == "square" and _is_literal(operand):
            return operand * operand  # type: ignore[operator]
    raise ValueError(f"no rule matches {args!r}")


def print_result(value: object) -> None:
    print(f"The result is {value}")


def main() -> None:
    print_result(math(3, "plus", 5))
    print_result(math("square", 2))


if __name__ == "__main__":
    main()