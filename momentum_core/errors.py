"""
Typed Errors

Every failure the engine can hit is raised as one of these, never logged and skipped
"""

from typing import Optional


class MomentumCoreError(Exception):
    """Base class for all momentum_core errors"""


class InvalidLookback(MomentumCoreError, ValueError):
    """Lookback/shift outside the range the table can support"""

    def __init__(self, lookback: int, n_rows: Optional[int] = None):
        self.lookback = lookback
        self.n_rows = n_rows
        if n_rows is None:
            msg = f"invalid lookback {lookback}: must be >= 1"
        else:
            msg = f"invalid lookback {lookback}: must satisfy 0 < lookback <= {n_rows}"
        super().__init__(msg)


class ColumnNotFound(MomentumCoreError, KeyError):
    """Referenced asset/date column is absent from the table"""

    def __init__(self, column: str):
        self.column = column
        super().__init__(column)

    def __str__(self) -> str:
        return f"column not found: {self.column!r}"


class EvaluationFailure(MomentumCoreError):
    """A period-return or score formula could not be computed for an asset"""

    def __init__(self, asset: str, period: Optional[int], reason: str):
        self.asset = asset
        self.period = period
        self.reason = reason
        where = f"{asset} (period {period})" if period is not None else f"{asset} (score)"
        super().__init__(f"could not evaluate {where}: {reason}")


class TableAlignmentError(MomentumCoreError, ValueError):
    """Time axes or column lengths do not line up"""
