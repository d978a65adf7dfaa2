"""
Momentum Core - rolling averages and momentum scores

A pip-installable package containing:
- Time series table (date-aligned columnar store on Polars)
- Rolling averages (circular-buffer SMA, generic rolling aggregates)
- Lag operator and multi-period momentum scores (1/3/6/12 composite)
- Row filters (drop incomplete rows, date trimming)
- Cross-asset ranking and a risk-free adjusted momentum indicator
- MomentumEngine tying smoothing and scoring to environment settings

Used by:
- Strategy / backtesting layer: ranks assets on the score table per rebalance date
"""

__version__ = "0.1.0"

from .errors import (
    MomentumCoreError, InvalidLookback, ColumnNotFound, EvaluationFailure,
    TableAlignmentError,
)
from .table import TimeSeriesTable, TableBuilder, combine, DATE_COLUMN
from .models import SMAConfig, MomentumConfig, RiskAdjustedMomentumConfig
from .indicators import (
    sma, rolling, rolling_sum_scaled, lag, filter_rows, drop_na, time_trim,
    period_returns, composite_score, momentum_scores, risk_adjusted_momentum,
    row_max, arg_max,
)
from .settings import Settings, load_settings, configure_logging
from .engine import MomentumEngine, EngineResult

__all__ = [
    # Errors
    'MomentumCoreError',
    'InvalidLookback',
    'ColumnNotFound',
    'EvaluationFailure',
    'TableAlignmentError',
    # Table
    'TimeSeriesTable',
    'TableBuilder',
    'combine',
    'DATE_COLUMN',
    # Models
    'SMAConfig',
    'MomentumConfig',
    'RiskAdjustedMomentumConfig',
    # Indicators
    'sma',
    'rolling',
    'rolling_sum_scaled',
    'lag',
    'filter_rows',
    'drop_na',
    'time_trim',
    'period_returns',
    'composite_score',
    'momentum_scores',
    'risk_adjusted_momentum',
    'row_max',
    'arg_max',
    # Settings / engine
    'Settings',
    'load_settings',
    'configure_logging',
    'MomentumEngine',
    'EngineResult',
]
