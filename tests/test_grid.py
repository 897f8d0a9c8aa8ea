from itertools import product

import pytest

from katarunner.katas.grid import Coordinate, for_2d, main


def test_show_format(capsys):
    Coordinate(x=3, y=4).show()
    assert capsys.readouterr().out == "(3, 4)\n"


def test_for_2d_visits_product_in_order():
    seen = []
    for_2d(range(1, 5), range(2, 7), lambda r, c: seen.append((r, c)))
    assert seen == list(product(range(1, 5), range(2, 7)))


def test_for_2d_applies_types():
    seen = []
    for_2d(["1", "2"], ["7"], lambda r, c: seen.append((r, c)), row_type=int, col_type=float)
    assert seen == [(1, 7.0), (2, 7.0)]
    assert all(isinstance(c, float) for _, c in seen)


def test_for_2d_generator_columns_reused_for_every_row():
    seen = []
    for_2d([1, 2, 3], (c for c in [10, 20]), lambda r, c: seen.append((r, c)))
    assert seen == list(product([1, 2, 3], [10, 20]))


def test_for_2d_empty_rows_never_calls_body():
    seen = []
    for_2d([], [1, 2], lambda r, c: seen.append((r, c)))
    assert seen == []


def test_for_2d_bad_conversion_raises():
    with pytest.raises(ValueError):
        for_2d(["x"], [1], lambda r, c: None)


def test_main_output(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    first = [f"({c}, {r})" for r, c in product(range(1, 5), range(2, 7))]
    second = [f"({x}, {y})" for x, y in product([1, 3, 5], [1, 3, 5])]
    assert lines == first + second
    assert lines[0] == "(2, 1)"