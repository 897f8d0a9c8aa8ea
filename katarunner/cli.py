"""Command line for working through the macro exercises."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from katarunner.check import check_all
from katarunner.goal import goal
from katarunner.trial import BuildFailed, run_test
from katarunner.update_diff import update_diff


def build_parser() -> argparse.ArgumentParser:
    """The argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="katarunner",
        description="A set of exercises for learning to use macros well.",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory holding the exercises (default: the current directory).",
    )
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    test = commands.add_parser("test", help="Build an exercise and compare its expansion.")
    test.add_argument("exercise", help="The name of the exercise to run.")

    goal_cmd = commands.add_parser("goal", help="Show the expansion of the solution.")
    goal_cmd.add_argument("exercise", help="The name of the exercise to run.")

    update = commands.add_parser("update-diff", help="Regenerate an exercise's diff.")
    update.add_argument("exercise", help="The name of the exercise to create a diff for.")

    commands.add_parser("check-all", help="Check every exercise for consistency.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one subcommand and return the exit status."""
    args = build_parser().parse_args(argv)
    root = args.root if args.root is not None else Path.cwd()

    if args.command == "test":
        try:
            run_test(args.exercise, root)
        except BuildFailed as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        return 0
    if args.command == "goal":
        goal(args.exercise, root)
        return 0
    if args.command == "update-diff":
        try:
            update_diff(args.exercise, root)
        except (OSError, UnicodeDecodeError) as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        return 0
    return 1 if check_all(root) else 0


if __name__ == "__main__":
    sys.exit(main())