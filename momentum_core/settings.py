"""
Runtime Settings

Environment-driven configuration and logging setup
"""

import logging
import os
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field, validator

from .models import MomentumConfig

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Settings(BaseModel):
    """Engine settings; see load_settings() for the environment variables"""
    log_level: str = Field('INFO', description="Log level for the momentum_core logger")
    sma_suffix: str = Field('_SMA', min_length=1, description="Suffix for rolling average columns")
    momentum: MomentumConfig = Field(default_factory=MomentumConfig, description="Momentum score configuration")

    @validator('log_level')
    def known_level(cls, v):
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f'log_level must be one of {LOG_LEVELS}')
        return v


def _parse_weights(raw: str) -> Dict[int, float]:
    """'1:12,3:4,6:2,12:1' -> {1: 12.0, 3: 4.0, 6: 2.0, 12: 1.0}"""
    weights = {}
    for item in raw.split(','):
        item = item.strip()
        if not item:
            continue
        period, _, weight = item.partition(':')
        if not weight:
            raise ValueError(f"weight entry {item!r} must look like '<period>:<weight>'")
        weights[int(period)] = float(weight)
    return weights


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables

    MOMENTUM_CORE_LOG_LEVEL: log level (default: INFO)
    MOMENTUM_CORE_SMA_SUFFIX: rolling average column suffix (default: _SMA)
    MOMENTUM_CORE_WEIGHTS: '<period>:<weight>' pairs, e.g. '1:12,3:4,6:2,12:1'
    MOMENTUM_CORE_SCORE_SCALE: multiplier for the weighted sum (default: 0.25)

    Raises:
        ValueError: on invalid values (pydantic.ValidationError for anything that
            parses but fails validation)
    """
    env = os.environ if environ is None else environ

    momentum = {}
    if env.get('MOMENTUM_CORE_WEIGHTS'):
        weights = _parse_weights(env['MOMENTUM_CORE_WEIGHTS'])
        momentum['periods'] = sorted(weights)
        momentum['weights'] = weights
    if env.get('MOMENTUM_CORE_SCORE_SCALE'):
        momentum['scale'] = env['MOMENTUM_CORE_SCORE_SCALE']

    return Settings(
        log_level=env.get('MOMENTUM_CORE_LOG_LEVEL', 'INFO'),
        sma_suffix=env.get('MOMENTUM_CORE_SMA_SUFFIX', '_SMA'),
        momentum=MomentumConfig(**momentum),
    )


def configure_logging(level: str = 'INFO') -> logging.Logger:
    """Set the package log level and attach a stream handler once"""
    logger = logging.getLogger('momentum_core')
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
        logger.addHandler(handler)
    return logger
