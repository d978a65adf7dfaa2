"""
Time Series Table

Ordered, date-aligned columnar store backed by a Polars DataFrame.
Row i of every column refers to the same instant times[i].
"""

import logging
import threading
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import polars as pl

from .errors import ColumnNotFound, TableAlignmentError

logger = logging.getLogger(__name__)

DATE_COLUMN = 'date'

ColumnData = Union[pl.Series, Sequence[Optional[float]]]


class TimeSeriesTable:
    """
    Date column plus any number of named numeric columns

    Transforms never mutate a table; they return a new one. The only exception is
    in-place filtering (see indicators.filters), which swaps the backing frame in a
    single assignment so readers never observe a half-filtered table.
    """

    def __init__(self, df: pl.DataFrame, date_column: str = DATE_COLUMN):
        if date_column not in df.columns:
            logger.error("date column %r missing from columns %s", date_column, df.columns)
            raise ColumnNotFound(date_column)
        if df.height > 1 and not df.get_column(date_column).is_sorted():
            raise TableAlignmentError(f"'{date_column}' must be sorted ascending")

        others = [c for c in df.columns if c != date_column]
        self._df = df.select([date_column, *others])
        self.date_column = date_column

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_columns(
        cls,
        times: Sequence[Any],
        columns: Mapping[str, Sequence[Optional[float]]],
        date_column: str = DATE_COLUMN,
        time_dtype: Optional[pl.DataType] = None,
    ) -> 'TimeSeriesTable':
        """
        Build a table from a time axis and a mapping of column name -> values

        Args:
            times: Ordered timestamps (non-decreasing)
            columns: Column name -> values, each the same length as times
            date_column: Name of the time axis column (default: 'date')
            time_dtype: Explicit dtype for the time axis (needed for empty tables)

        Returns:
            New TimeSeriesTable
        """
        n_rows = len(times)
        data = [pl.Series(date_column, list(times), dtype=time_dtype)]
        for name, values in columns.items():
            if len(values) != n_rows:
                raise TableAlignmentError(
                    f"column '{name}' has {len(values)} values, expected {n_rows}"
                )
            data.append(pl.Series(name, list(values), dtype=pl.Float64))
        return cls(pl.DataFrame(data), date_column=date_column)

    @classmethod
    def from_polars(cls, df: pl.DataFrame, date_column: str = DATE_COLUMN) -> 'TimeSeriesTable':
        """Wrap an existing Polars DataFrame (sorted by date_column)"""
        return cls(df, date_column=date_column)

    def to_polars(self) -> pl.DataFrame:
        return self._df.clone()

    # ------------------------------------------------------------------
    # Lookup / iteration
    # ------------------------------------------------------------------

    @property
    def n_rows(self) -> int:
        return self._df.height

    def __len__(self) -> int:
        return self._df.height

    @property
    def names(self) -> List[str]:
        """Value column names, in order, excluding the date column"""
        return [c for c in self._df.columns if c != self.date_column]

    @property
    def times(self) -> List[Any]:
        return self._df.get_column(self.date_column).to_list()

    @property
    def time_dtype(self) -> pl.DataType:
        return self._df.schema[self.date_column]

    def __contains__(self, name: str) -> bool:
        return name in self._df.columns

    def column(self, name: str) -> pl.Series:
        """
        Look up a column by name

        Raises:
            ColumnNotFound: if the table has no such column
        """
        if name not in self._df.columns:
            logger.error("column %r not found in %s", name, self._df.columns)
            raise ColumnNotFound(name)
        return self._df.get_column(name)

    def values(self, name: str) -> List[Optional[float]]:
        return self.column(name).to_list()

    def iter_rows(self) -> Iterator[Tuple[Any, Dict[str, Any]]]:
        """Yield (timestamp, {column: value}) in index order"""
        for row in self._df.iter_rows(named=True):
            ts = row.pop(self.date_column)
            yield ts, row

    # ------------------------------------------------------------------
    # New tables
    # ------------------------------------------------------------------

    def with_columns(self, columns: Mapping[str, ColumnData]) -> 'TimeSeriesTable':
        """Return a new table with the given columns added (or replaced)"""
        series = []
        for name, values in columns.items():
            if len(values) != self.n_rows:
                raise TableAlignmentError(
                    f"column '{name}' has {len(values)} values, expected {self.n_rows}"
                )
            if isinstance(values, pl.Series):
                series.append(values.alias(name))
            else:
                series.append(pl.Series(name, list(values), dtype=pl.Float64))
        return TimeSeriesTable(self._df.with_columns(series), date_column=self.date_column)

    def append_rows(
        self, times: Sequence[Any], rows: Sequence[Mapping[str, Optional[float]]]
    ) -> 'TimeSeriesTable':
        """
        Return a new table with rows appended after the existing ones

        Every row must supply a value for every column; appended times must not
        precede the last existing time.
        """
        if len(times) != len(rows):
            raise TableAlignmentError(f"{len(times)} times given for {len(rows)} rows")

        data: Dict[str, List[Any]] = {self.date_column: list(times)}
        for name in self.names:
            data[name] = []
            for idx, row in enumerate(rows):
                if name not in row:
                    raise TableAlignmentError(f"row {idx} has no value for '{name}'")
                data[name].append(row[name])

        extra = pl.DataFrame(data, schema=self._df.schema)
        return TimeSeriesTable(pl.concat([self._df, extra], how='vertical'), date_column=self.date_column)

    def select(self, names: Sequence[str]) -> 'TimeSeriesTable':
        """Return date column plus the named columns"""
        for name in names:
            if name not in self._df.columns:
                logger.error("cannot select %r: not in %s", name, self._df.columns)
                raise ColumnNotFound(name)
        return TimeSeriesTable(self._df.select([self.date_column, *names]), date_column=self.date_column)

    def split(self, *columns: str) -> Tuple['TimeSeriesTable', 'TimeSeriesTable']:
        """Split into (requested columns, remaining columns), both keeping the time axis"""
        wanted = set(columns)
        one = [n for n in self.names if n in wanted]
        two = [n for n in self.names if n not in wanted]
        return self.select(one), self.select(two)

    def breakout(self) -> Dict[str, 'TimeSeriesTable']:
        """One single-column table per value column"""
        return {name: self.select([name]) for name in self.names}

    def trim(self, begin: Any, end: Any) -> 'TimeSeriesTable':
        """Rows with begin <= time <= end; empty when the range is inverted"""
        trimmed = self._df.filter(pl.col(self.date_column).is_between(begin, end, closed='both'))
        return TimeSeriesTable(trimmed, date_column=self.date_column)

    def filter_mask(self, mask: Sequence[bool]) -> 'TimeSeriesTable':
        """Keep rows where mask is True, order preserved"""
        if len(mask) != self.n_rows:
            raise TableAlignmentError(f"mask has {len(mask)} entries, expected {self.n_rows}")
        kept = self._df.filter(pl.Series('mask', list(mask), dtype=pl.Boolean))
        return TimeSeriesTable(kept, date_column=self.date_column)

    def _replace_frame(self, other: 'TimeSeriesTable') -> None:
        self._df = other._df

    # ------------------------------------------------------------------
    # Display / comparison
    # ------------------------------------------------------------------

    def equals(self, other: 'TimeSeriesTable') -> bool:
        return self.date_column == other.date_column and self._df.equals(other._df)

    def to_string(self, precision: int = 4) -> str:
        """Render the full table with fixed float precision"""
        with pl.Config(float_precision=precision, tbl_rows=-1, tbl_cols=-1):
            return str(self._df)

    def __repr__(self) -> str:
        return f"TimeSeriesTable(rows={self.n_rows}, columns={self.names})"


class TableBuilder:
    """
    Assembles a TimeSeriesTable one row at a time

    The writer holds the builder's lock while appending; a row is validated in full
    before any of its values are stored, and the table only becomes visible through
    build().
    """

    def __init__(
        self,
        names: Sequence[str],
        date_column: str = DATE_COLUMN,
        time_dtype: Optional[pl.DataType] = None,
    ):
        self.date_column = date_column
        self.time_dtype = time_dtype
        self._lock = threading.Lock()
        self._times: List[Any] = []
        self._columns: Dict[str, List[Optional[float]]] = {name: [] for name in names}
        self._built = False

    def __len__(self) -> int:
        return len(self._times)

    def append(self, time: Any, values: Mapping[str, Optional[float]]) -> None:
        with self._lock:
            if self._built:
                raise RuntimeError("table already built")
            missing = [name for name in self._columns if name not in values]
            if missing:
                raise TableAlignmentError(f"row at {time} is missing {missing}")
            self._times.append(time)
            for name, col in self._columns.items():
                col.append(values[name])

    def build(self) -> TimeSeriesTable:
        with self._lock:
            self._built = True
            logger.debug("built table with %d rows, %d columns", len(self._times), len(self._columns))
            return TimeSeriesTable.from_columns(
                self._times,
                self._columns,
                date_column=self.date_column,
                time_dtype=self.time_dtype,
            )


def combine(tables: Sequence[TimeSeriesTable]) -> TimeSeriesTable:
    """
    Join tables column-wise on an identical time axis

    Per-ticker tables from the price provider share the same calendar; this does
    not reconcile heterogeneous calendars.

    Raises:
        TableAlignmentError: if the time axes differ or column names collide
    """
    if not tables:
        raise ValueError("combine() needs at least one table")

    first = tables[0]
    first_times = first.column(first.date_column)
    seen = set(first.names)
    frames = [first.to_polars()]
    for table in tables[1:]:
        times = table.column(table.date_column)
        if not times.equals(first_times):
            logger.error("date indexes do not align: %r vs %r", first, table)
            raise TableAlignmentError("date indexes do not align")
        dupes = seen.intersection(table.names)
        if dupes:
            raise TableAlignmentError(f"duplicate columns: {sorted(dupes)}")
        seen.update(table.names)
        frames.append(table.to_polars().drop(table.date_column))

    return TimeSeriesTable(pl.concat(frames, how='horizontal'), date_column=first.date_column)
