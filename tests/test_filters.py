import math
from datetime import datetime

import pytest

from momentum_core.indicators import any_missing, drop_na, filter_rows, is_missing, time_trim

from conftest import make_table, monthly_dates


@pytest.mark.parametrize(
    "value, expected",
    [(None, True), (math.nan, True), (math.inf, True), (-math.inf, True), (0.0, False), (3, False)],
)
def test_is_missing(value, expected):
    assert is_missing(value) is expected


def test_drop_na_keeps_order():
    table = make_table({
        "a": [0.0, 1.0, 2.0, 3.0, 4.0],
        "b": [10.0, 11.0, None, 13.0, 14.0],
    })
    out = drop_na(table)
    assert out.n_rows == 4
    assert out.values("a") == [0.0, 1.0, 3.0, 4.0]
    assert out.times == [monthly_dates(5)[i] for i in (0, 1, 3, 4)]
    assert out.names == ["a", "b"]
    assert table.n_rows == 5


def test_drop_na_treats_nan_and_inf_as_missing():
    table = make_table({"a": [1.0, math.nan, math.inf, 4.0]})
    assert drop_na(table).values("a") == [1.0, 4.0]


def test_drop_na_does_not_deduplicate():
    table = make_table({"a": [1.0, 1.0, 1.0]})
    assert drop_na(table).n_rows == 3


def test_drop_na_in_place():
    table = make_table({"a": [1.0, None, 3.0]})
    out = drop_na(table, in_place=True)
    assert out is table
    assert table.values("a") == [1.0, 3.0]


def test_custom_predicate():
    table = make_table({"a": [1.0, -2.0, 3.0, -4.0]})
    out = filter_rows(table, lambda vals: vals["a"] < 0)
    assert out.values("a") == [1.0, 3.0]


def test_any_missing():
    assert any_missing({"a": 1.0, "b": None})
    assert not any_missing({"a": 1.0, "b": 2.0})


def test_time_trim():
    table = make_table({"a": [1.0, 2.0, 3.0, 4.0, 5.0]})
    out = time_trim(table, datetime(2021, 3, 1), datetime(2021, 12, 1))
    assert out.values("a") == [3.0, 4.0, 5.0]

    time_trim(table, datetime(2021, 1, 1), datetime(2021, 2, 1), in_place=True)
    assert table.values("a") == [1.0, 2.0]
