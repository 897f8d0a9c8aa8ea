"""Spelling numbers out digit by digit."""

from __future__ import annotations

_DIGITS = {
    "zero": "0",
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}


def digit(name: str) -> str:
    """The digit character a word names."""
    try:
        return _DIGITS[name]
    except (KeyError, TypeError):
        raise ValueError(f"no rule expected {name!r}") from None


def number(*args: str) -> str:
    """The digits of one or more words joined into a numeral."""
    if not args:
        raise ValueError("number needs at least one digit")
    return "".join(digit(name) for name in args)


def main() -> None:
    my_number = int(number("nine", "three", "seven", "two", "zero"))
    my_other_number = int(number("one", "two", "four", "six", "eight", "zero"))
    print(my_number + my_other_number)


if __name__ == "__main__":
    main()