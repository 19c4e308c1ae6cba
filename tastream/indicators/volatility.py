"""Volatility indicators: moving variance, moving standard deviation, ATR."""

import math

import numpy as np

from ..core.config import (
    VarianceConfig, ATRConfig,
    check_positive_int, check_dof,
    DEFAULT_MEM_SIZE, DEFAULT_SMA_PERIOD, DEFAULT_ATR_PERIOD,
)
from ..core.types import NAN
from .base import BaseIndicator
from .kernels import sum_squared_deviations
from .trend import SMA


class MovingVariance(BaseIndicator[float]):
    """
    Simple Moving Variance.

    The sum of squared deviations from the current mean is recomputed
    over the full window on every step. Use dof=0 for the population
    variance and dof=1 for the sample variance.
    """

    config_class = VarianceConfig

    def __init__(self, period: int = DEFAULT_SMA_PERIOD, dof: int = 0, mem_size: int = DEFAULT_MEM_SIZE):
        self._period = check_positive_int("period", period)
        self._dof = check_dof(dof, period)
        super().__init__(mem_size)
        self._mean = SMA(period, 1)
        self._window = np.full(period, np.nan)
        self._cursor = 0
        self._filled = 0

    @property
    def period(self) -> int:
        return self._period

    @property
    def dof(self) -> int:
        return self._dof

    @property
    def mean(self) -> float:
        """Current window mean (NaN while warming up)."""
        return self._mean.curr()

    def update(self, value: float) -> None:
        value = float(value)
        if self._filled < self._period:
            self._filled += 1
        self._window[self._cursor] = value
        self._mean.update(value)
        self._cursor = (self._cursor + 1) % self._period

        if self._filled < self._period:
            self._history.push(NAN)
            return

        total = sum_squared_deviations(self._window, self._mean.curr())
        self._history.push(total / (self._period - self._dof))

    def reset(self) -> None:
        super().reset()
        self._mean.reset()
        self._window.fill(np.nan)
        self._cursor = 0
        self._filled = 0


class MovingStdDev(BaseIndicator[float]):
    """
    Simple Moving Standard Deviation.

    Same scale as the input. NaN propagates from the variance.
    """

    config_class = VarianceConfig

    def __init__(self, period: int = DEFAULT_SMA_PERIOD, dof: int = 0, mem_size: int = DEFAULT_MEM_SIZE):
        super().__init__(mem_size)
        self._variance = MovingVariance(period, dof, 1)

    @property
    def period(self) -> int:
        return self._variance.period

    @property
    def dof(self) -> int:
        return self._variance.dof

    def update(self, value: float) -> None:
        self._variance.update(value)
        self._history.push(math.sqrt(self._variance.curr()))

    def reset(self) -> None:
        super().reset()
        self._variance.reset()


class ATR(BaseIndicator[float]):
    """
    Average True Range indicator.

    Simple moving average of the true range of each bar, where the true
    range is the greatest of high - low, |high - close| and |low - close|.
    """

    inputs = ('high', 'low', 'close')
    config_class = ATRConfig

    def __init__(self, period: int = DEFAULT_ATR_PERIOD, mem_size: int = DEFAULT_MEM_SIZE):
        """Initialize ATR with period."""
        super().__init__(mem_size)
        self._average = SMA(period, 1)

    @property
    def period(self) -> int:
        return self._average.period

    @staticmethod
    def true_range(high: float, low: float, close: float) -> float:
        """Largest spread of the bar; ties resolve to high-low, then high-close."""
        high_low = high - low
        high_close = abs(high - close)
        low_close = abs(low - close)
        if high_low >= high_close and high_low >= low_close:
            return high_low
        if high_close >= low_close:
            return high_close
        return low_close

    def update(self, high: float, low: float, close: float) -> None:
        """
        Update with OHLC data.

        Args:
            high: High price
            low: Low price
            close: Close price
        """
        self._average.update(self.true_range(high, low, close))
        self._history.push(self._average.curr())

    def reset(self) -> None:
        super().reset()
        self._average.reset()
