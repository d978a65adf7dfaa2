import logging

import pytest
from pydantic import ValidationError

from momentum_core import Settings, configure_logging, load_settings


def test_defaults_from_empty_environment():
    settings = load_settings({})
    assert settings.log_level == "INFO"
    assert settings.sma_suffix == "_SMA"
    assert settings.momentum.periods == [1, 3, 6, 12]


def test_environment_overrides():
    settings = load_settings({
        "MOMENTUM_CORE_LOG_LEVEL": "debug",
        "MOMENTUM_CORE_SMA_SUFFIX": "_MA",
        "MOMENTUM_CORE_WEIGHTS": "1:1, 3:1, 6:1",
        "MOMENTUM_CORE_SCORE_SCALE": "0.5",
    })
    assert settings.log_level == "DEBUG"
    assert settings.sma_suffix == "_MA"
    assert settings.momentum.periods == [1, 3, 6]
    assert settings.momentum.weights == {1: 1.0, 3: 1.0, 6: 1.0}
    assert settings.momentum.scale == 0.5


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("MOMENTUM_CORE_SMA_SUFFIX", "_X")
    assert load_settings().sma_suffix == "_X"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        load_settings({"MOMENTUM_CORE_LOG_LEVEL": "LOUD"})


@pytest.mark.parametrize("raw", ["1", "a:1", "1:b"])
def test_invalid_weights(raw):
    with pytest.raises(ValueError):
        load_settings({"MOMENTUM_CORE_WEIGHTS": raw})


def test_configure_logging_adds_one_handler():
    logger = configure_logging("WARNING")
    configure_logging("DEBUG")
    assert logger.name == "momentum_core"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_settings_model_defaults():
    assert Settings().momentum.scale == 0.25
