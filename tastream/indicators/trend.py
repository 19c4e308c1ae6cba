"""Trend indicators: simple and exponential moving averages, MACD."""

import numpy as np

from ..core.config import (
    WindowConfig, ExponentialConfig, MACDConfig,
    check_positive_int, check_finite,
    DEFAULT_MEM_SIZE, DEFAULT_SMA_PERIOD, DEFAULT_EMA_PERIOD, DEFAULT_SMOOTHING,
    DEFAULT_MACD_SHORT, DEFAULT_MACD_LONG, DEFAULT_MACD_SIGNAL,
)
from ..core.types import NAN, MACDResult
from .base import BaseIndicator


class SMA(BaseIndicator[float]):
    """
    Simple Moving Average.

    Keeps a running sum over a window of raw inputs. The window is only
    used to evict the value leaving it, the mean is never recomputed.
    """

    config_class = WindowConfig

    def __init__(self, period: int = DEFAULT_SMA_PERIOD, mem_size: int = DEFAULT_MEM_SIZE):
        """
        Initialize SMA.

        Args:
            period: Number of samples averaged
            mem_size: Number of past averages kept for get()
        """
        self._period = check_positive_int("period", period)
        super().__init__(mem_size)
        self._window = np.full(period, np.nan)
        self._cursor = 0
        self._filled = 0
        self._sum = 0.0

    @property
    def period(self) -> int:
        return self._period

    def update(self, value: float) -> None:
        value = float(value)
        if self._filled < self._period:
            self._filled += 1
        else:
            # Evict the oldest sample before it is overwritten
            self._sum -= float(self._window[self._cursor])
        self._window[self._cursor] = value
        self._sum += value
        self._cursor = (self._cursor + 1) % self._period

        if self._filled < self._period:
            self._history.push(NAN)
        else:
            self._history.push(self._sum / self._period)

    def reset(self) -> None:
        super().reset()
        self._window.fill(np.nan)
        self._cursor = 0
        self._filled = 0
        self._sum = 0.0


class EMA(BaseIndicator[float]):
    """
    Exponential Moving Average.

    Seeded with the simple mean of the first ``period`` samples, then
    blended with alpha = smoothing / (1 + period).
    """

    config_class = ExponentialConfig

    def __init__(
        self,
        period: int = DEFAULT_EMA_PERIOD,
        smoothing: float = DEFAULT_SMOOTHING,
        mem_size: int = DEFAULT_MEM_SIZE
    ):
        """
        Initialize EMA.

        Args:
            period: Seed length and span of the average
            smoothing: Smoothing factor (2.0 is the textbook value)
            mem_size: Number of past values kept for get()
        """
        self._period = check_positive_int("period", period)
        self._smoothing = check_finite("smoothing", smoothing, strict=True)
        super().__init__(mem_size)
        self._alpha = self._smoothing / (1 + self._period)
        self._prev = 0.0
        self._seen = 0

    @property
    def period(self) -> int:
        return self._period

    @property
    def smoothing(self) -> float:
        return self._smoothing

    @property
    def alpha(self) -> float:
        return self._alpha

    def update(self, value: float) -> None:
        value = float(value)
        self._seen += 1
        if self._seen < self._period:
            # Plain sum until the seed is available
            self._prev += value
            self._history.push(NAN)
        elif self._seen == self._period:
            self._prev = (self._prev + value) / self._period
            self._history.push(self._prev)
        else:
            self._prev = value * self._alpha + self._prev * (1.0 - self._alpha)
            self._history.push(self._prev)

    def reset(self) -> None:
        super().reset()
        self._prev = 0.0
        self._seen = 0


class MACD(BaseIndicator[MACDResult]):
    """
    Moving Average Convergence Divergence.

    The signal EMA only starts once both the short and long EMAs are
    seeded, so ``signal`` and ``hist`` become available
    ``signal_period - 1`` samples after ``macd``.
    """

    config_class = MACDConfig

    def __init__(
        self,
        short_period: int = DEFAULT_MACD_SHORT,
        long_period: int = DEFAULT_MACD_LONG,
        signal_period: int = DEFAULT_MACD_SIGNAL,
        smoothing: float = DEFAULT_SMOOTHING,
        mem_size: int = DEFAULT_MEM_SIZE
    ):
        super().__init__(mem_size, sentinel=MACDResult())
        self._short = EMA(short_period, smoothing, 1)
        self._long = EMA(long_period, smoothing, 1)
        self._signal = EMA(signal_period, smoothing, 1)
        self._start = max(short_period, long_period)
        self._counter = 0

    @property
    def short_period(self) -> int:
        return self._short.period

    @property
    def long_period(self) -> int:
        return self._long.period

    @property
    def signal_period(self) -> int:
        return self._signal.period

    @property
    def smoothing(self) -> float:
        return self._short.smoothing

    def update(self, value: float) -> None:
        self._counter += 1
        self._short.update(value)
        self._long.update(value)

        if self._counter < self._start:
            self._history.push(MACDResult())
            return

        diff = self._short.curr() - self._long.curr()
        self._signal.update(diff)
        signal = self._signal.curr()
        self._history.push(MACDResult(macd=diff, signal=signal, hist=diff - signal))

    def reset(self) -> None:
        super().reset()
        self._short.reset()
        self._long.reset()
        self._signal.reset()
        self._counter = 0
