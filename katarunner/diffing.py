"""Line-based unified diffs without file headers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from difflib import SequenceMatcher

_CONTEXT_LINES = 3


def _range(start: int, stop: int) -> str:
    length = stop - start
    first = start + 1 if length else start
    return f"{first},{length}"


def _prefixed(prefix: str, lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield prefix + (line if line.endswith("\n") else line + "\n")


def unified_diff(before: str, after: str) -> str:
    """Return the hunks that turn ``before`` into ``after``.

    The result holds only ``@@`` hunks with three lines of context and is
    empty when both texts are the same.
    """
    old = before.splitlines(keepends=True)
    new = after.splitlines(keepends=True)
    matcher = SequenceMatcher(None, old, new, autojunk=False)

    parts: list[str] = []
    for group in matcher.get_grouped_opcodes(_CONTEXT_LINES):
        _, i1, _, j1, _ = group[0]
        _, _, i2, _, j2 = group[-1]
        parts.append(f"@@ -{_range(i1, i2)} +{_range(j1, j2)} @@\n")
        for tag, a1, a2, b1, b2 in group:
            if tag == "equal":
                parts.extend(_prefixed(" ", old[a1:a2]))
                continue
            if tag in {"replace", "delete"}:
                parts.extend(_prefixed("-", old[a1:a2]))
            if tag in {"replace", "insert"}:
                parts.extend(_prefixed("+", new[b1:b2]))
    return "".join(parts)