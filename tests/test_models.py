import pytest
from pydantic import ValidationError

from momentum_core import MomentumConfig, RiskAdjustedMomentumConfig, SMAConfig


def test_momentum_defaults():
    config = MomentumConfig()
    assert config.periods == [1, 3, 6, 12]
    assert config.weights == {1: 12.0, 3: 4.0, 6: 2.0, 12: 1.0}
    assert config.scale == 0.25


def test_defaults_are_not_shared():
    a = MomentumConfig()
    a.periods.append(24)
    assert MomentumConfig().periods == [1, 3, 6, 12]


@pytest.mark.parametrize("periods", [[], [0, 1], [3, 1], [1, 1]])
def test_bad_periods(periods):
    with pytest.raises(ValidationError):
        MomentumConfig(periods=periods, weights={p: 1.0 for p in periods})


def test_weights_must_match_periods():
    with pytest.raises(ValidationError):
        MomentumConfig(periods=[1, 3], weights={1: 1.0})


def test_sma_config():
    assert SMAConfig(lookback=10).suffix == "_SMA"
    with pytest.raises(ValidationError):
        SMAConfig(lookback=0)


def test_risk_adjusted_defaults():
    config = RiskAdjustedMomentumConfig()
    assert config.periods == [1, 3, 6]
    assert config.risk_free_column == "DGS3MO"
    assert config.assets is None
