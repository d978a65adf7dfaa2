"""
Rolling Window Indicators

Trailing-window aggregations over TimeSeriesTable columns
"""

import logging
import math
from collections import deque
from typing import Any, Callable, List, Optional

import polars as pl

from ..errors import EvaluationFailure, InvalidLookback
from ..table import TableBuilder, TimeSeriesTable

logger = logging.getLogger(__name__)

DEFAULT_SMA_SUFFIX = '_SMA'

# fn(window_values, first_row, final_row) -> aggregate
AggregateFn = Callable[[List[Any], int, int], float]


def _as_float(value: Optional[float]) -> float:
    return math.nan if value is None else float(value)


def _require_numeric(table: TimeSeriesTable, names: List[str]) -> None:
    for name in names:
        dtype = table.column(name).dtype
        if not dtype.is_numeric():
            logger.error("column %s has non-numeric dtype %s", name, dtype)
            raise EvaluationFailure(name, None, f"dtype {dtype} is not numeric")


def sma(table: TimeSeriesTable, lookback: int, suffix: str = DEFAULT_SMA_SUFFIX) -> TimeSeriesTable:
    """
    Calculate the Simple Moving Average of every value column

    Each column keeps a fixed-size circular buffer of its last `lookback` values,
    written at slot row % lookback. Rows before the buffer is full are warm-up and
    produce no output; every later row emits the raw value and the plain mean of
    the buffer.

    Always returns a new table; the source table is only read.

    Args:
        table: Source table
        lookback: Window length in rows (0 < lookback <= table.n_rows)
        suffix: Suffix for the average columns (default: '_SMA')

    Returns:
        Table with n_rows - lookback + 1 rows holding, per asset, '<asset>' and
        '<asset><suffix>'

    Raises:
        InvalidLookback: if lookback is out of range
        EvaluationFailure: if a value column is not numeric
    """
    n_rows = table.n_rows
    if lookback <= 0 or lookback > n_rows:
        logger.error("lookback must be: 0 < lookback <= n_rows (lookback=%d, n_rows=%d)", lookback, n_rows)
        raise InvalidLookback(lookback, n_rows)

    assets = table.names
    _require_numeric(table, assets)

    buffers = {name: [0.0] * lookback for name in assets}
    out_names = []
    for name in assets:
        out_names.extend([name, f"{name}{suffix}"])
    builder = TableBuilder(out_names, date_column=table.date_column, time_dtype=table.time_dtype)

    for row, (ts, vals) in enumerate(table.iter_rows()):
        idx = row % lookback
        for name in assets:
            buffers[name][idx] = _as_float(vals[name])

        # row is 0 based, lookback is 1 based
        if row < lookback - 1:
            continue

        out = {}
        for name in assets:
            out[name] = vals[name]
            out[f"{name}{suffix}"] = sum(buffers[name]) / lookback
        builder.append(ts, out)

    logger.debug("sma(%d): %d rows in, %d rows out", lookback, n_rows, len(builder))
    return builder.build()


def rolling(series: pl.Series, n: int, fn: AggregateFn) -> pl.Series:
    """
    Apply an aggregate function to every trailing window of n values

    Args:
        series: Input values
        n: Window length
        fn: Called as fn(window_values, first_row, final_row)

    Returns:
        Float series of the same length and name; warm-up rows are NaN
    """
    if fn is None:
        raise ValueError("fn is required")
    if n <= 0:
        raise InvalidLookback(n)

    window: deque = deque(maxlen=n)
    out: List[float] = []
    for row, val in enumerate(series.to_list()):
        window.append(val)
        if len(window) == n:
            out.append(fn(list(window), row - n + 1, row))
        else:
            out.append(math.nan)
    return pl.Series(series.name, out, dtype=pl.Float64)


def rolling_sum_scaled(table: TimeSeriesTable, n: int, scalar: float) -> TimeSeriesTable:
    """
    Calculate sum(window of n) * scalar for every value column

    Warm-up rows (fewer than n values seen) are missing.
    """
    if n <= 0 or n > table.n_rows:
        logger.error("rolling window must be: 0 < n <= n_rows (n=%d, n_rows=%d)", n, table.n_rows)
        raise InvalidLookback(n, table.n_rows)

    df = table.to_polars().with_columns([
        (pl.col(name).cast(pl.Float64).rolling_sum(window_size=n) * scalar).alias(name)
        for name in table.names
    ])
    return TimeSeriesTable(df, date_column=table.date_column)
