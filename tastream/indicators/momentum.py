"""Momentum indicators (RSI, Stochastic Oscillator)."""

import numpy as np

from ..core.config import (
    RSIConfig, StochasticConfig, check_positive_int,
    DEFAULT_MEM_SIZE, DEFAULT_RSI_PERIOD, DEFAULT_STOCHASTIC_PERIOD,
)
from ..core.types import NAN, is_no_value
from .base import BaseIndicator
from .kernels import ieee_divide, window_min_max
from .trend import SMA


class RSI(BaseIndicator[float]):
    """
    Relative Strength Index indicator.

    Measures the speed and magnitude of price changes from the simple
    averages of per-bar gains and losses. A window without losses gives
    an infinite ratio and an RSI of 100.
    """

    inputs = ('open', 'close')
    config_class = RSIConfig

    def __init__(self, period: int = DEFAULT_RSI_PERIOD, mem_size: int = DEFAULT_MEM_SIZE):
        """Initialize RSI with period."""
        super().__init__(mem_size)
        self._gains = SMA(period, 1)
        self._losses = SMA(period, 1)

    @property
    def period(self) -> int:
        return self._gains.period

    def update(self, open_price: float, close_price: float) -> None:
        """
        Update with one bar.

        Args:
            open_price: Bar open
            close_price: Bar close
        """
        diff = close_price - open_price
        if diff > 0:
            self._gains.update(diff)
            self._losses.update(0.0)
        else:
            self._gains.update(0.0)
            self._losses.update(-diff)

        losses = self._losses.curr()
        if is_no_value(losses):
            self._history.push(NAN)
            return

        rs = ieee_divide(self._gains.curr(), losses)
        self._history.push(100.0 - 100.0 / (1.0 + rs))

    def reset(self) -> None:
        super().reset()
        self._gains.reset()
        self._losses.reset()


class StochasticOscillator(BaseIndicator[float]):
    """
    Stochastic Oscillator (%K).

    Position of the new sample inside the min/max range of the previous
    ``period`` samples, scaled to 0-100. The sample is added to the
    window after the value is computed, so it can fall outside 0-100.
    """

    config_class = StochasticConfig

    def __init__(self, period: int = DEFAULT_STOCHASTIC_PERIOD, mem_size: int = DEFAULT_MEM_SIZE):
        self._period = check_positive_int("period", period)
        super().__init__(mem_size)
        self._window = np.full(period, np.nan)
        self._cursor = 0
        self._filled = 0

    @property
    def period(self) -> int:
        return self._period

    def update(self, value: float) -> None:
        value = float(value)
        if self._filled < self._period:
            self._history.push(NAN)
            self._filled += 1
        else:
            lo, hi = window_min_max(self._window)
            self._history.push(100.0 * ieee_divide(value - lo, hi - lo))

        self._window[self._cursor] = value
        self._cursor = (self._cursor + 1) % self._period

    def reset(self) -> None:
        super().reset()
        self._window.fill(np.nan)
        self._cursor = 0
        self._filled = 0
