"""Indicators module - Streaming technical analysis indicators."""

from .base import BaseIndicator, RingHistory
from .trend import SMA, EMA, MACD
from .volatility import MovingVariance, MovingStdDev, ATR
from .bollinger import BollingerBands
from .momentum import RSI, StochasticOscillator
from .volume import OBV

__all__ = [
    'BaseIndicator', 'RingHistory',
    'SMA', 'EMA', 'MACD',
    'MovingVariance', 'MovingStdDev', 'ATR',
    'BollingerBands',
    'RSI', 'StochasticOscillator',
    'OBV',
]
