"""
Pydantic Models for Indicator Configuration

Validates lookbacks, periods and weights before they reach the engine
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field, validator


DEFAULT_PERIODS = [1, 3, 6, 12]
DEFAULT_WEIGHTS = {1: 12.0, 3: 4.0, 6: 2.0, 12: 1.0}


def _check_periods(v: List[int]) -> List[int]:
    if not v:
        raise ValueError('at least one period is required')
    if any(p < 1 for p in v):
        raise ValueError('periods must be >= 1')
    if sorted(set(v)) != list(v):
        raise ValueError('periods must be strictly increasing')
    return v


class SMAConfig(BaseModel):
    """Rolling average configuration"""
    lookback: int = Field(..., gt=0, description="Window length in rows")
    suffix: str = Field('_SMA', min_length=1, description="Suffix for average columns")


class MomentumConfig(BaseModel):
    """
    Composite momentum score configuration

    score = (sum of weight[p] * MOM_p over periods) * scale

    Defaults give the 1/3/6/12 score (12*MOM1 + 4*MOM3 + 2*MOM6 + MOM12) * 0.25.
    """
    periods: List[int] = Field(default_factory=lambda: list(DEFAULT_PERIODS), description="Lookback periods in rows")
    weights: Dict[int, float] = Field(default_factory=lambda: dict(DEFAULT_WEIGHTS), description="Weight per period")
    scale: float = Field(0.25, description="Multiplier applied to the weighted sum")

    @validator('periods')
    def periods_increasing(cls, v):
        return _check_periods(v)

    @validator('weights')
    def weights_match_periods(cls, v, values):
        periods = values.get('periods')
        if periods is not None and set(v) != set(periods):
            raise ValueError('weights must name exactly the configured periods')
        return v


class RiskAdjustedMomentumConfig(BaseModel):
    """Risk-free adjusted momentum indicator configuration"""
    assets: Optional[List[str]] = Field(None, description="Asset columns (default: all but the risk-free column)")
    periods: List[int] = Field(default_factory=lambda: [1, 3, 6], description="Lookback periods in rows")
    risk_free_column: str = Field('DGS3MO', description="Annualised risk-free rate column, in percent")

    @validator('periods')
    def periods_increasing(cls, v):
        return _check_periods(v)
