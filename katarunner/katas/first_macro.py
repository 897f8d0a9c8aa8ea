"""The smallest kata: a named shortcut that calls a function."""

from __future__ import annotations

MESSAGE = "I should appear as the output."


def show_output() -> str:
    """Print the kata's fixed message and return the line written."""
    line = MESSAGE
    print(line)
    return line


def main() -> None:
    show_output()


if __name__ == "__main__":
    main()