"""Showing the expansion an exercise's solution produces."""

from __future__ import annotations

import subprocess
from pathlib import Path

from katarunner.cargo import cargo_command, solution_binary


def goal(exercise: str, root: str | Path | None = None) -> int:
    """Print the expanded solution to stdout and return cargo's exit status."""
    completed = subprocess.run(
        cargo_command("expand", "--bin", solution_binary(exercise), "main"),
        cwd=root,
        stderr=subprocess.DEVNULL,
        check=False,
    )
    return completed.returncode