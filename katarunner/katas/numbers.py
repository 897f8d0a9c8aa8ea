"""Turning number words into numbers."""

from __future__ import annotations

_WORDS = {"one": 1, "two": 2, "three": 3}


def num(word: str) -> int:
    """The number a word names; only ``one``, ``two`` and ``three`` are known."""
    try:
        return _WORDS[word]
    except (KeyError, TypeError):
        raise ValueError(f"no rule expected {word!r}") from None


def print_result(value: int) -> None:
    print(f"The result is {value}")


def main() -> None:
    print_result(num("one") + num("two") + num("three"))


if __name__ == "__main__":
    main()