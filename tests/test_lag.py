import pytest

from momentum_core import ColumnNotFound, InvalidLookback
from momentum_core.indicators import lag, lag_name

from conftest import make_table


def test_lag_shifts_values_back():
    table = make_table({"a": [1.0, 2.0, 3.0, 4.0, 5.0]})
    lagged = lag(table, 2)
    assert lagged.names == ["a_LAG2"]
    assert lagged.values("a_LAG2") == [None, None, 1.0, 2.0, 3.0]
    assert lagged.times == table.times


def test_lagged_columns_coexist_with_source():
    table = make_table({"a": [1.0, 2.0, 3.0], "b": [4.0, 5.0, 6.0]})
    lagged = lag(table, 1)
    both = table.with_columns({name: lagged.column(name) for name in lagged.names})
    assert both.names == ["a", "b", "a_LAG1", "b_LAG1"]
    assert both.values("b_LAG1") == [None, 4.0, 5.0]


def test_lag_selected_columns():
    table = make_table({"a": [1.0, 2.0], "b": [3.0, 4.0]})
    lagged = lag(table, 1, columns=["b"])
    assert lagged.names == [lag_name("b", 1)]


def test_lag_longer_than_table_is_all_missing():
    table = make_table({"a": [1.0, 2.0, 3.0]})
    assert lag(table, 12).values("a_LAG12") == [None, None, None]


@pytest.mark.parametrize("periods", [0, -3])
def test_lag_invalid_shift(periods):
    with pytest.raises(InvalidLookback):
        lag(make_table({"a": [1.0]}), periods)


def test_lag_unknown_column():
    with pytest.raises(ColumnNotFound):
        lag(make_table({"a": [1.0]}), 1, columns=["zzz"])
