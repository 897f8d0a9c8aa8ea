"""Building and running cargo command lines."""

from __future__ import annotations

import subprocess
from pathlib import Path

CARGO = "cargo"
SOLUTION_SUFFIX = "_soln"


def cargo_command(subcommand: str, *args: str) -> list[str]:
    """The argument vector for one cargo invocation."""
    return [CARGO, subcommand, *args]


def run_cargo(
    subcommand: str, *args: str, cwd: str | Path | None = None
) -> subprocess.CompletedProcess[bytes]:
    """Run cargo, capturing its output, and return the finished process."""
    return subprocess.run(
        cargo_command(subcommand, *args),
        cwd=cwd,
        capture_output=True,
        check=False,
    )


def solution_binary(exercise: str) -> str:
    """Name of the binary that builds an exercise's solution."""
    return f"{exercise}{SOLUTION_SUFFIX}"