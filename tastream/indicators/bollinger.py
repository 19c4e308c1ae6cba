"""Bollinger Bands indicator."""

from ..core.config import (
    BollingerConfig, check_finite,
    DEFAULT_MEM_SIZE, DEFAULT_BOLLINGER_PERIOD, DEFAULT_BOLLINGER_Z, DEFAULT_BOLLINGER_DOF,
)
from ..core.types import BollingerBandsResult
from .base import BaseIndicator
from .trend import SMA
from .volatility import MovingStdDev


class BollingerBands(BaseIndicator[BollingerBandsResult]):
    """
    Bollinger Bands indicator.

    Three values per step:
        sma:   simple moving average over the period
        upper: sma + z * moving standard deviation
        lower: sma - z * moving standard deviation

    The bands widen when the price becomes more volatile and contract
    when it is stable. A price near the upper band is commonly read as
    overbought, near the lower band as oversold.
    """

    config_class = BollingerConfig

    def __init__(
        self,
        period: int = DEFAULT_BOLLINGER_PERIOD,
        z: float = DEFAULT_BOLLINGER_Z,
        dof: int = DEFAULT_BOLLINGER_DOF,
        mem_size: int = DEFAULT_MEM_SIZE
    ):
        """
        Initialize Bollinger Bands.

        Args:
            period: SMA lookback period
            z: Number of standard deviations
            dof: Degrees of freedom of the standard deviation
            mem_size: Number of past band triples kept for get()
        """
        self._z = check_finite("z", z)
        super().__init__(mem_size, sentinel=BollingerBandsResult())
        self._sma = SMA(period, 1)
        self._std = MovingStdDev(period, dof, 1)
        self._counter = 0

    @property
    def period(self) -> int:
        return self._sma.period

    @property
    def z(self) -> float:
        return self._z

    @property
    def dof(self) -> int:
        return self._std.dof

    def update(self, price: float) -> None:
        """
        Update with new price.

        Args:
            price: Close price (or other source)
        """
        self._counter += 1
        self._sma.update(price)
        self._std.update(price)

        if self._counter < self._sma.period:
            self._history.push(BollingerBandsResult())
            return

        middle = self._sma.curr()
        width = self._std.curr() * self._z
        self._history.push(BollingerBandsResult(
            sma=middle,
            upper=middle + width,
            lower=middle - width
        ))

    def reset(self) -> None:
        super().reset()
        self._sma.reset()
        self._std.reset()
        self._counter = 0
