import subprocess
from unittest import mock

from katarunner.cargo import cargo_command, run_cargo, solution_binary


def test_cargo_command_builds_vector():
    assert cargo_command("build", "--bin", "x") == ["cargo", "build", "--bin", "x"]


def test_cargo_command_without_args():
    assert cargo_command("clippy") == ["cargo", "clippy"]


def test_solution_binary():
    assert solution_binary("06_repetition") == "06_repetition_soln"


def test_run_cargo_captures_output(tmp_path):
    finished = subprocess.CompletedProcess(["cargo"], 0, b"out", b"")
    with mock.patch("subprocess.run", return_value=finished) as run:
        result = run_cargo("clippy", "--bin", "a_soln", cwd=tmp_path)
    assert result is finished
    run.assert_called_once_with(
        ["cargo", "clippy", "--bin", "a_soln"],
        cwd=tmp_path,
        capture_output=True,
        check=False,
    )