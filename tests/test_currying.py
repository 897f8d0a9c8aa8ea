import io

import pytest

from katarunner.katas.currying import curry, curry_fn, filter_between, main


def test_curry_passes_arguments_by_name():
    buffer = io.StringIO()
    curried = curry(["a", "b"], lambda a, b: (a, b), out=buffer)
    assert curried(5)(2) == (5, 2)


def test_curry_reports_each_argument():
    buffer = io.StringIO()
    curry(["a", "b"], lambda a, b: None, out=buffer)(5)(2)
    assert buffer.getvalue() == "Currying value 5.\nCurrying value 2.\n"


def test_curry_reports_strings_quoted():
    buffer = io.StringIO()
    curry(["s"], lambda s: s, out=buffer)("hi")
    assert buffer.getvalue() == 'Currying value "hi".\n'


def test_curry_without_params_runs_body():
    assert curry([], lambda: 42) == 42


def test_partial_application_is_reusable():
    buffer = io.StringIO()
    start = curry(["x", "y"], lambda x, y: (x, y), out=buffer)(1)
    assert start(2) == (1, 2)
    assert start(3) == (1, 3)


def test_curry_rejects_duplicate_names():
    with pytest.raises(ValueError):
        curry(["a", "a"], lambda a: a)


def test_curry_fn_collects_positionally():
    add = curry_fn(4, lambda a, b, c, d: (a, b, c, d))
    assert add(3)(2)(3)(4) == (3, 2, 3, 4)


def test_curry_fn_needs_an_argument():
    with pytest.raises(ValueError):
        curry_fn(0, lambda: 1)


def test_filter_between_is_strict():
    assert filter_between([1, 3, 5, 6, 7, 9], 3, 7) == [5, 6]


def test_filter_between_empty_range():
    assert filter_between([1, 2, 3], 2, 3) == []


def test_main_output(capsys):
    main()
    out = capsys.readouterr().out
    assert out.index("=== defining functions ===") == 0
    assert out.count("Resulting Numbers:") == 2
    assert "Currying value [1, 3, 5, 6, 7, 9]." in out