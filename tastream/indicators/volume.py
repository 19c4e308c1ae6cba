"""Volume indicators."""

from typing import Optional

from ..core.config import VolumeConfig, DEFAULT_MEM_SIZE
from .base import BaseIndicator


class OBV(BaseIndicator[float]):
    """
    On-Balance Volume.

    Running total of volume signed by the direction of the close. The
    first sample only seeds the previous close, so the total starts at 0.
    """

    inputs = ('close', 'volume')
    config_class = VolumeConfig

    def __init__(self, mem_size: int = DEFAULT_MEM_SIZE):
        super().__init__(mem_size)
        self._total = 0.0
        self._prev_close: Optional[float] = None

    def update(self, close: float, volume: float) -> None:
        if self._prev_close is not None:
            if close > self._prev_close:
                self._total += volume
            elif close < self._prev_close:
                self._total -= volume
        self._prev_close = close
        self._history.push(float(self._total))

    def reset(self) -> None:
        super().reset()
        self._total = 0.0
        self._prev_close = None
