import io
import subprocess
from unittest import mock

import pytest

from katarunner.diffing import unified_diff
from katarunner.trial import BuildFailed, color_mode, run_test

PRODUCED = b"fn main() {\n    1 + 2;\n}\n"
EXPECTED = b"fn main() {\n    3;\n}\n"


class _Tty(io.StringIO):
    def isatty(self):
        return True


def _fake_cargo(produced, expected, build_code=0, build_err=b""):
    calls = []

    def run(cmd, **kwargs):
        calls.append(cmd)
        if cmd[1] == "build":
            return subprocess.CompletedProcess(cmd, build_code, b"", build_err)
        output = expected if any(arg.endswith("_soln") for arg in cmd) else produced
        return subprocess.CompletedProcess(cmd, 0, output, b"")

    return run, calls


def test_color_mode_for_plain_stream():
    assert color_mode(io.StringIO()) == "never"


def test_color_mode_for_terminal():
    assert color_mode(_Tty()) == "always"


def test_solved_exercise(tmp_path):
    run, calls = _fake_cargo(PRODUCED, PRODUCED)
    out, err = io.StringIO(), io.StringIO()
    with mock.patch("subprocess.run", side_effect=run):
        diff = run_test("02_numbers", tmp_path, out, err)
    assert diff == ""
    text = out.getvalue()
    assert "Congratulations! You solved it." in text
    assert "This is the expansion you produced:" in text
    assert calls[0] == ["cargo", "build", "--color", "never", "--quiet", "--bin", "02_numbers"]
    assert calls[2][-2:] == ["02_numbers_soln", "main"]


def test_unsolved_exercise_shows_diff(tmp_path):
    run, _ = _fake_cargo(PRODUCED, EXPECTED)
    out, err = io.StringIO(), io.StringIO()
    with mock.patch("subprocess.run", side_effect=run):
        diff = run_test("02_numbers", tmp_path, out, err)
    assert diff == unified_diff(PRODUCED.decode(), EXPECTED.decode())
    text = out.getvalue()
    assert "The diff is:" in text
    assert diff in text
    assert "Congratulations" not in text


def test_expansions_appear_in_order(tmp_path):
    run, _ = _fake_cargo(PRODUCED, EXPECTED)
    out = io.StringIO()
    with mock.patch("subprocess.run", side_effect=run):
        run_test("e", tmp_path, out, io.StringIO())
    text = out.getvalue()
    assert text.index(PRODUCED.decode()) < text.index("The expansion we expected is:")
    assert text.index("The expansion we expected is:") < text.index(EXPECTED.decode())


def test_build_errors_raise(tmp_path):
    run, calls = _fake_cargo(PRODUCED, EXPECTED, build_err=b"error: no rules expected\n")
    out, err = io.StringIO(), io.StringIO()
    with mock.patch("subprocess.run", side_effect=run):
        with pytest.raises(BuildFailed):
            run_test("e", tmp_path, out, err)
    assert "The following errors were encountered:" in out.getvalue()
    assert err.getvalue() == "error: no rules expected\n"
    assert len(calls) == 1


def test_nonzero_build_status_raises(tmp_path):
    run, _ = _fake_cargo(PRODUCED, EXPECTED, build_code=101)
    with mock.patch("subprocess.run", side_effect=run):
        with pytest.raises(BuildFailed):
            run_test("e", tmp_path, io.StringIO(), io.StringIO())