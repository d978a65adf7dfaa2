import math

import pytest

from momentum_core.indicators import arg_max, row_max

from conftest import make_table


def test_row_max():
    table = make_table({"a": [1.0, 5.0, None], "b": [2.0, 3.0, 9.0]})
    out = row_max(table)
    assert out.names == ["max"]
    assert out.values("max") == [2.0, 5.0, None]


def test_row_max_nan_is_missing():
    table = make_table({"a": [math.nan], "b": [1.0]})
    assert row_max(table).values("max") == [None]


def test_arg_max():
    table = make_table({"SPY": [1.0, 5.0, None, None], "TLT": [2.0, 3.0, 1.0, None]})
    assert arg_max(table).to_list() == ["TLT", "SPY", "TLT", None]


def test_arg_max_needs_two_columns():
    with pytest.raises(ValueError):
        arg_max(make_table({"a": [1.0]}))
