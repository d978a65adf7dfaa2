"""
Lag Operator

Time-shifted copies of columns for period-over-period comparison
"""

import logging
from typing import Optional, Sequence

import polars as pl

from ..errors import InvalidLookback
from ..table import TimeSeriesTable

logger = logging.getLogger(__name__)


def lag_name(name: str, periods: int) -> str:
    """Column name used for `name` lagged by `periods` rows"""
    return f"{name}_LAG{periods}"


def lag(table: TimeSeriesTable, periods: int, columns: Optional[Sequence[str]] = None) -> TimeSeriesTable:
    """
    Shift columns back in time by a fixed number of rows

    Output row i holds the input value at row i - periods. The first `periods`
    rows have no predecessor and are missing (null).

    Args:
        table: Source table
        periods: Shift in rows (>= 1)
        columns: Columns to lag (default: every value column)

    Returns:
        Table with the original time axis and one '<name>_LAG<periods>' column per
        lagged column, so it can be combined with the un-lagged source

    Raises:
        InvalidLookback: if periods < 1
        ColumnNotFound: if a requested column is absent
    """
    if periods < 1:
        logger.error("lag periods must be >= 1 (periods=%d)", periods)
        raise InvalidLookback(periods)

    names = list(columns) if columns is not None else table.names
    for name in names:
        table.column(name)

    df = table.to_polars().select([
        pl.col(table.date_column),
        *[pl.col(name).shift(periods).alias(lag_name(name, periods)) for name in names],
    ])
    return TimeSeriesTable(df, date_column=table.date_column)
