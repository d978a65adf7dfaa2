"""
Row Filters

Drop rows from a TimeSeriesTable without reordering or deduplicating.

Every filter returns a new table by default. With in_place=True the source table
object is updated to the filtered rows and returned; use it only when no other
reader holds the table.
"""

import logging
import math
from typing import Any, Callable, Mapping

from ..table import TimeSeriesTable

logger = logging.getLogger(__name__)

# predicate(row_values) -> True when the row should be dropped
RowPredicate = Callable[[Mapping[str, Any]], bool]


def is_missing(value: Any) -> bool:
    """None, NaN and +/-inf count as missing"""
    if value is None:
        return True
    if isinstance(value, (int, float)):
        return not math.isfinite(value)
    return False


def any_missing(values: Mapping[str, Any]) -> bool:
    return any(is_missing(v) for v in values.values())


def _finish(table: TimeSeriesTable, filtered: TimeSeriesTable, in_place: bool) -> TimeSeriesTable:
    logger.debug("filter kept %d of %d rows", filtered.n_rows, table.n_rows)
    if in_place:
        table._replace_frame(filtered)
        return table
    return filtered


def filter_rows(
    table: TimeSeriesTable,
    predicate: RowPredicate = any_missing,
    in_place: bool = False,
) -> TimeSeriesTable:
    """
    Keep only the rows for which predicate is False

    Args:
        table: Source table
        predicate: Called with {column: value} for each row (date excluded)
        in_place: Update `table` itself instead of returning a new table

    Returns:
        Filtered table, rows in original order
    """
    mask = [not predicate(vals) for _, vals in table.iter_rows()]
    return _finish(table, table.filter_mask(mask), in_place)


def drop_na(table: TimeSeriesTable, in_place: bool = False) -> TimeSeriesTable:
    """Remove rows holding any missing or non-finite value"""
    return filter_rows(table, any_missing, in_place=in_place)


def time_trim(table: TimeSeriesTable, begin: Any, end: Any, in_place: bool = False) -> TimeSeriesTable:
    """Keep rows with begin <= time <= end"""
    return _finish(table, table.trim(begin, end), in_place)
