"""Streaming technical analysis indicators with constant-time updates."""

from .indicators import (
    BaseIndicator,
    RingHistory,
    SMA,
    EMA,
    MACD,
    MovingVariance,
    MovingStdDev,
    ATR,
    BollingerBands,
    RSI,
    StochasticOscillator,
    OBV,
)
from .core.types import NAN, is_no_value, MACDResult, BollingerBandsResult

__version__ = "0.1.0"

__all__ = [
    'BaseIndicator', 'RingHistory',
    'SMA', 'EMA', 'MACD',
    'MovingVariance', 'MovingStdDev', 'ATR',
    'BollingerBands', 'RSI', 'StochasticOscillator', 'OBV',
    'NAN', 'is_no_value', 'MACDResult', 'BollingerBandsResult',
]
