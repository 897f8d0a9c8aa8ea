"""Building key/value pairs and maps, and pretty debug formatting."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

_INDENT = "    "
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def pair(key: Hashable, value: Any) -> tuple[Hashable, Any]:
    """A key and its value as one entry."""
    return (key, value)


def hashmap(*args: tuple[Hashable, Any]) -> dict[Hashable, Any]:
    """A mapping built from ``(key, value)`` entries; a later key wins."""
    result: dict[Hashable, Any] = {}
    for entry in args:
        if not isinstance(entry, tuple) or len(entry) != 2:
            raise TypeError(f"expected a (key, value) pair, got {entry!r}")
        key, value = pair(*entry)
        result[key] = value
    return result


def _quote(text: str) -> str:
    return '"' + "".join(_ESCAPES.get(char, char) for char in text) + '"'


def _container(opening: str, closing: str, lines: list[str], level: int) -> str:
    if not lines:
        return opening + closing
    pad = _INDENT * (level + 1)
    body = "".join(f"{pad}{line},\n" for line in lines)
    return f"{opening}\n{body}{_INDENT * level}{closing}"


def _pretty(value: Any, level: int) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, dict):
        lines = [
            f"{_pretty(key, level + 1)}: {_pretty(item, level + 1)}"
            for key, item in value.items()
        ]
        return _container("{", "}", lines, level)
    if isinstance(value, list):
        return _container("[", "]", [_pretty(item, level + 1) for item in value], level)
    if isinstance(value, tuple):
        return _container("(", ")", [_pretty(item, level + 1) for item in value], level)
    if isinstance(value, (set, frozenset)):
        return _container("{", "}", [_pretty(item, level + 1) for item in value], level)
    return repr(value)


def format_debug(value: Any) -> str:
    """Multi-line debug form: one item per line, indented, with trailing commas."""
    return _pretty(value, 0)


def main() -> None:
    value = "my_string"
    my_hashmap = hashmap(pair("hash", "map"), pair("Key", value))
    print(format_debug(my_hashmap))

    print(format_debug(pair("a", 1)))
    other = "value"
    print(format_debug(hashmap(pair("Hash", "map"), pair("Key", other))))


if __name__ == "__main__":
    main()