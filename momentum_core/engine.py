"""
Momentum Engine

Runs the smoothing and scoring steps over a price table with one Settings object
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from .errors import InvalidLookback
from .indicators.momentum import momentum_scores
from .indicators.rolling import sma
from .models import SMAConfig
from .settings import Settings, configure_logging, load_settings
from .table import TimeSeriesTable

logger = logging.getLogger(__name__)


@dataclass
class EngineResult:
    """Output of MomentumEngine.run()"""
    scores: TimeSeriesTable
    smoothed: Optional[TimeSeriesTable] = None


class MomentumEngine:
    """
    Rolling average and momentum scoring over an asset price table

    The price table is expected from the price-history provider: one column per
    ticker, trading dates ascending, the same dates for every ticker.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings if settings is not None else load_settings()
        configure_logging(self.settings.log_level)

    def smooth(self, prices: TimeSeriesTable, lookback: int) -> TimeSeriesTable:
        """Raw and rolling-mean column per asset, suffixed per settings"""
        try:
            config = SMAConfig(lookback=lookback, suffix=self.settings.sma_suffix)
        except ValidationError as e:
            logger.error("invalid smoothing config (lookback=%r, n_rows=%d): %s", lookback, prices.n_rows, e)
            raise InvalidLookback(lookback, prices.n_rows) from e
        return sma(prices, config.lookback, suffix=config.suffix)

    def score(self, prices: TimeSeriesTable) -> TimeSeriesTable:
        """Momentum score per asset, dense rows only"""
        return momentum_scores(prices, self.settings.momentum)

    def run(self, prices: TimeSeriesTable, smooth_lookback: Optional[int] = None) -> EngineResult:
        """
        Score the price table, optionally producing the smoothed table as well

        Both steps read the same un-smoothed prices.

        Args:
            prices: Asset price table
            smooth_lookback: Rolling average window; None skips smoothing

        Returns:
            EngineResult with the score table and the smoothed table (or None)
        """
        smoothed = None
        if smooth_lookback is not None:
            smoothed = self.smooth(prices, smooth_lookback)

        scores = self.score(prices)
        logger.info(
            "scored %d assets over %d rows (%d dense)",
            len(prices.names), prices.n_rows, scores.n_rows,
        )
        return EngineResult(scores=scores, smoothed=smoothed)
