"""
Momentum Indicators

Multi-period momentum scores built from lagged prices.
Formulas are applied as direct column arithmetic; any per-asset failure is raised
as EvaluationFailure naming the asset and period.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

import polars as pl

from ..errors import EvaluationFailure
from ..models import MomentumConfig, RiskAdjustedMomentumConfig
from ..table import TimeSeriesTable
from .filters import drop_na, is_missing
from .lag import lag, lag_name
from .ranking import row_max
from .rolling import rolling

logger = logging.getLogger(__name__)


def mom_name(asset: str, period: int) -> str:
    return f"{asset}_MOM{period}"


def period_return(prices: pl.Series, lagged: pl.Series, asset: str, period: int) -> pl.Series:
    """
    Calculate MOM_p = (price / lagged_price) - 1

    Missing wherever the lagged price is missing.

    Raises:
        EvaluationFailure: on non-numeric input or a zero lagged price
    """
    for series in (prices, lagged):
        if not series.dtype.is_numeric():
            logger.error("could not calculate momentum for %s period %d: dtype %s", asset, period, series.dtype)
            raise EvaluationFailure(asset, period, f"dtype {series.dtype} is not numeric")

    if (lagged == 0).any():
        logger.error("could not calculate momentum for %s period %d: division by zero", asset, period)
        raise EvaluationFailure(asset, period, "division by zero")

    try:
        ret = prices.cast(pl.Float64) / lagged.cast(pl.Float64) - 1.0
    except pl.exceptions.PolarsError as e:
        logger.error("could not calculate momentum for %s period %d: %s", asset, period, e)
        raise EvaluationFailure(asset, period, str(e)) from e
    return ret.alias(mom_name(asset, period))


def composite_score(
    moms: Mapping[int, pl.Series],
    weights: Mapping[int, float],
    scale: float,
    asset: str,
) -> pl.Series:
    """
    Calculate (sum of weights[p] * MOM_p) * scale, row-wise

    The weights are not normalised: with the default 12/4/2/1 and scale 0.25 the
    result is a scaled weighted sum, not an average. Missing wherever any MOM_p is.

    Args:
        moms: Period -> period-return series
        weights: Period -> weight
        scale: Final multiplier
        asset: Asset name, used for the output series and errors

    Returns:
        Score series named after the asset
    """
    missing = sorted(set(weights) - set(moms))
    if missing:
        logger.error("could not calculate score for %s: no returns for periods %s", asset, missing)
        raise EvaluationFailure(asset, None, f"no period returns for {missing}")

    try:
        total: Optional[pl.Series] = None
        for period in sorted(weights):
            term = moms[period] * weights[period]
            total = term if total is None else total + term
        if total is None:
            raise EvaluationFailure(asset, None, "no weights configured")
        return (total * scale).alias(asset)
    except pl.exceptions.PolarsError as e:
        logger.error("could not calculate score for %s: %s", asset, e)
        raise EvaluationFailure(asset, None, str(e)) from e


def period_returns(table: TimeSeriesTable, periods: Sequence[int]) -> TimeSeriesTable:
    """
    Period returns for every asset column and period

    Returns:
        Table with the time axis and one '<asset>_MOM<p>' column per asset/period
    """
    lagged = {p: lag(table, p) for p in periods}
    cols: Dict[str, pl.Series] = {}
    for asset in table.names:
        prices = table.column(asset)
        for p in periods:
            cols[mom_name(asset, p)] = period_return(prices, lagged[p].column(lag_name(asset, p)), asset, p)
    return table.select([]).with_columns(cols)


def momentum_scores(table: TimeSeriesTable, config: Optional[MomentumConfig] = None) -> TimeSeriesTable:
    """
    Calculate the multi-period momentum score of every asset

    For each asset A and period p: MOM_p = A / Lag(p)(A) - 1, then
    SCORE_A = (12*MOM_1 + 4*MOM_3 + 2*MOM_6 + MOM_12) * 0.25 with the default
    config. Rows where any asset's score is missing are dropped, so the result
    starts at the first row where the longest lag is available.

    Args:
        table: Asset prices, one column per asset
        config: Periods, weights and scale (default: 1/3/6/12 score)

    Returns:
        Table with the time axis and one score column per asset, named after it

    Raises:
        EvaluationFailure: if a period return or score cannot be computed
    """
    if config is None:
        config = MomentumConfig()

    lagged = {p: lag(table, p) for p in config.periods}
    scores: Dict[str, pl.Series] = {}
    for asset in table.names:
        prices = table.column(asset)
        moms = {
            p: period_return(prices, lagged[p].column(lag_name(asset, p)), asset, p)
            for p in config.periods
        }
        scores[asset] = composite_score(moms, config.weights, config.scale, asset)

    result = drop_na(table.select([]).with_columns(scores))
    logger.debug("momentum scores: %d assets, %d of %d rows defined", len(scores), result.n_rows, table.n_rows)
    return result


def _sum_present(vals: List[Any], first_row: int, final_row: int) -> float:
    return sum(v for v in vals if not is_missing(v))


def risk_adjusted_momentum(
    table: TimeSeriesTable,
    config: Optional[RiskAdjustedMomentumConfig] = None,
    name: str = 'indicator',
) -> TimeSeriesTable:
    """
    Risk-free adjusted momentum indicator

    Per asset and period: MOM_p = ((A / Lag(p)(A)) - 1) * 100 - RISKFREE_p / 12,
    where RISKFREE_p is the trailing p-row sum of the risk-free column. The asset
    score is the mean of its MOM_p and the indicator is the largest asset score
    on each row. Rows with any missing input are dropped.

    Args:
        table: Asset prices plus the risk-free rate column
        config: Assets, periods and risk-free column name
        name: Name of the indicator column

    Returns:
        Table with the time axis and the indicator column
    """
    if config is None:
        config = RiskAdjustedMomentumConfig()

    rfr = table.column(config.risk_free_column)
    assets = config.assets or [n for n in table.names if n != config.risk_free_column]
    prices = table.select(assets)

    riskfree = {p: rolling(rfr, p, _sum_present) for p in config.periods}
    lagged = {p: lag(prices, p) for p in config.periods}

    scores: Dict[str, pl.Series] = {}
    for asset in assets:
        moms = []
        for p in config.periods:
            ret = period_return(prices.column(asset), lagged[p].column(lag_name(asset, p)), asset, p)
            moms.append(ret * 100.0 - riskfree[p] / 12.0)
        total = moms[0]
        for mom in moms[1:]:
            total = total + mom
        scores[asset] = (total / len(moms)).alias(asset)

    score_table = prices.select([]).with_columns(scores)
    return drop_na(row_max(score_table, name=name))
