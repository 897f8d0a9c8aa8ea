"""Building an exercise and comparing its expansion with the solution's."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from katarunner.cargo import run_cargo, solution_binary
from katarunner.diffing import unified_diff


class BuildFailed(Exception):
    """The exercise did not build cleanly."""


def color_mode(stream: TextIO) -> str:
    """The cargo colour setting that suits a stream."""
    isatty = getattr(stream, "isatty", None)
    return "always" if isatty is not None and isatty() else "never"


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def run_test(
    exercise: str,
    root: str | Path | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> str:
    """Build the exercise, show both expansions and return their diff.

    An empty result means the exercise is solved.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    color = color_mode(out)

    build = run_cargo("build", "--color", color, "--quiet", "--bin", exercise, cwd=root)
    if build.stderr or build.returncode != 0:
        print("The following errors were encountered:", file=out)
        err.write(_decode(build.stderr))
        raise BuildFailed("Build failed")

    produced = run_cargo("expand", "--color", color, "--bin", exercise, "main", cwd=root)
    print(file=out)
    print("This is the expansion you produced:", file=out)
    print(file=out)
    before = _decode(produced.stdout)
    out.write(before)

    expected = run_cargo(
        "expand", "--color", color, "--bin", solution_binary(exercise), "main", cwd=root
    )
    print("\nThe expansion we expected is:\n", file=out)
    after = _decode(expected.stdout)
    out.write(after)

    diff = unified_diff(before, after)
    if diff:
        print("\nThe diff is:\n", file=out)
        print(diff, file=out)
    else:
        print("\nCongratulations! You solved it.\n", file=out)
    return diff