from datetime import datetime
from typing import Dict, List, Sequence

import pytest

from momentum_core import TimeSeriesTable


def monthly_dates(n: int, start_year: int = 2021) -> List[datetime]:
    """First-of-month timestamps, n of them, starting January start_year"""
    return [datetime(start_year + (m // 12), (m % 12) + 1, 1) for m in range(n)]


def make_table(columns: Dict[str, Sequence[float]]) -> TimeSeriesTable:
    n = len(next(iter(columns.values())))
    return TimeSeriesTable.from_columns(monthly_dates(n), columns)


@pytest.fixture
def five_row_table() -> TimeSeriesTable:
    return make_table({"col1": [1.0, 2.0, 3.0, 4.0, 5.0]})


@pytest.fixture
def doubling_table() -> TimeSeriesTable:
    """16 monthly points, price doubling every month"""
    return make_table({"AAA": [float(2 ** t) for t in range(16)]})


@pytest.fixture
def geometric_table() -> TimeSeriesTable:
    """Two assets growing at a constant rate per period"""
    n = 24
    return make_table({
        "VFINX": [100.0 * (1.01 ** t) for t in range(n)],
        "PRIDX": [50.0 * (0.98 ** t) for t in range(n)],
    })
