"""
Indicators Module

Rolling averages, lags, momentum scores, row filters and cross-asset ranking
over TimeSeriesTable
"""

from .rolling import sma, rolling, rolling_sum_scaled, DEFAULT_SMA_SUFFIX
from .lag import lag, lag_name
from .filters import filter_rows, drop_na, time_trim, any_missing, is_missing
from .momentum import (
    period_return,
    period_returns,
    composite_score,
    momentum_scores,
    risk_adjusted_momentum,
    mom_name,
)
from .ranking import row_max, arg_max

__all__ = [
    'sma',
    'rolling',
    'rolling_sum_scaled',
    'DEFAULT_SMA_SUFFIX',
    'lag',
    'lag_name',
    'filter_rows',
    'drop_na',
    'time_trim',
    'any_missing',
    'is_missing',
    'period_return',
    'period_returns',
    'composite_score',
    'momentum_scores',
    'risk_adjusted_momentum',
    'mom_name',
    'row_max',
    'arg_max',
]
