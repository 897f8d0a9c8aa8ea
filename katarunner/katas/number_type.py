"""Telling what sort of code produced a number."""

from __future__ import annotations

import ast
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Union

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_POSITIVE = re.compile(r"[0-9][0-9_]*")
_NEGATIVE = re.compile(r"-\s*([0-9][0-9_]*)")

Source = Union[str, Callable[[], int]]


class Kind(Enum):
    POSITIVE_NUMBER = "PositiveNumber"
    NEGATIVE_NUMBER = "NegativeNumber"
    UNKNOWN_BECAUSE_BLOCK = "UnknownBecauseBlock"
    UNKNOWN_BECAUSE_EXPR = "UnknownBecauseExpr"


@dataclass(frozen=True)
class NumberType:
    """A number together with the kind of code that was written for it."""

    kind: Kind
    value: int

    def __str__(self) -> str:
        return f"{self.kind.value}(\n    {self.value},\n)"

    def show(self) -> str:
        """Print the pretty form and return that text."""
        text = str(self)
        print(text)
        return text


def sum_numbers(first: int, second: int, *args: int) -> int:
    """The sum of at least two numbers."""
    total = first + second
    for value in args:
        total += value
    return total


def _checked_i32(value: int) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"{value} does not fit in a 32-bit signed integer")
    return value


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ValueError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _remainder(a: int, b: int) -> int:
    return a - b * _truncating_div(a, b)


_BINARY = {
    ast.Add: lambda a, b: a + b,
    ast.Sub: lambda a, b: a - b,
    ast.Mult: lambda a, b: a * b,
    ast.Div: _truncating_div,
    ast.Mod: _remainder,
}


def _evaluate(node: ast.AST) -> int:
    if isinstance(node, ast.Constant):
        if isinstance(node.value, int) and not isinstance(node.value, bool):
            return node.value
    elif isinstance(node, ast.UnaryOp) and isinstance(node.op, (ast.USub, ast.UAdd)):
        operand = _evaluate(node.operand)
        return -operand if isinstance(node.op, ast.USub) else operand
    elif isinstance(node, ast.BinOp) and type(node.op) in _BINARY:
        return _BINARY[type(node.op)](_evaluate(node.left), _evaluate(node.right))
    elif (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id == "sum_numbers"
        and not node.keywords
    ):
        values = [_evaluate(arg) for arg in node.args]
        if len(values) < 2:
            raise ValueError("sum_numbers needs at least two expressions")
        return sum_numbers(*values)
    raise ValueError(f"unsupported expression: {ast.dump(node)}")


def _literal(digits: str) -> int:
    return int(digits.replace("_", ""))


def get_number_type(source: Source) -> NumberType:
    """Classify code: a negative literal, a literal, a block or an expression.

    Strings are read as code; a zero-argument callable stands for a block
    and is called for its value. Rules are tried in that order.
    """
    if isinstance(source, str):
        text = source.strip()
        negative = _NEGATIVE.fullmatch(text)
        if negative:
            value = -_literal(negative.group(1))
            return NumberType(Kind.NEGATIVE_NUMBER, _checked_i32(value))
        if _POSITIVE.fullmatch(text):
            value = _literal(text)
            if value > _U32_MAX:
                raise ValueError(f"{value} does not fit in a 32-bit unsigned integer")
            return NumberType(Kind.POSITIVE_NUMBER, value)
        try:
            tree = ast.parse(text, mode="eval")
        except SyntaxError as exc:
            raise ValueError(f"cannot read {source!r}") from exc
        return NumberType(Kind.UNKNOWN_BECAUSE_EXPR, _checked_i32(_evaluate(tree.body)))
    if callable(source):
        value = source()
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"block produced {value!r}, not an integer")
        return NumberType(Kind.UNKNOWN_BECAUSE_BLOCK, _checked_i32(value))
    raise TypeError(f"expected code text or a block, got {type(source).__name__}")


def _block() -> int:
    x = 6
    return x


def main() -> None:
    get_number_type("5").show()
    get_number_type("-5").show()
    get_number_type(_block).show()
    get_number_type("sum_numbers(1, 2, 3, 4)").show()
    get_number_type("3 + 5 - 1").show()


if __name__ == "__main__":
    main()