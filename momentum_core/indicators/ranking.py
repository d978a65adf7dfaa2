"""
Cross-Asset Ranking

Row-wise selection across the asset columns of a table
"""

from typing import List, Optional

import polars as pl

from ..table import TimeSeriesTable
from .filters import is_missing


def row_max(table: TimeSeriesTable, name: str = 'max') -> TimeSeriesTable:
    """
    Largest value across all value columns, per row

    A row with any missing value yields a missing max.

    Returns:
        Table with the time axis and a single `name` column
    """
    cols = [pl.col(c).cast(pl.Float64) for c in table.names]
    has_missing = pl.any_horizontal([c.is_null() | c.is_nan() for c in cols])
    df = table.to_polars().select([
        pl.col(table.date_column),
        pl.when(has_missing).then(None).otherwise(pl.max_horizontal(cols)).alias(name),
    ])
    return TimeSeriesTable(df, date_column=table.date_column)


def arg_max(table: TimeSeriesTable, name: str = 'argmax') -> pl.Series:
    """
    Name of the column holding the largest value, per row

    Missing values never win; a row with no values at all yields None. Ties go to
    the first column in table order.
    """
    if len(table.names) < 2:
        raise ValueError("table must contain at-least 2 value columns")

    out: List[Optional[str]] = []
    for _, vals in table.iter_rows():
        best_name = None
        best_val = None
        for col, val in vals.items():
            if is_missing(val):
                continue
            if best_val is None or val > best_val:
                best_name, best_val = col, val
        out.append(best_name)
    return pl.Series(name, out, dtype=pl.Utf8)
