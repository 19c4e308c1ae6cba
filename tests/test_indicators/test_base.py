"""
Tests for the ring history and the indicator base class.
"""
import math
from abc import ABC

import pytest

from tastream.core.types import MACDResult, OHLC
from tastream.indicators.base import BaseIndicator, RingHistory
from tastream.indicators import SMA, EMA, MACD, MovingVariance, MovingStdDev, ATR, BollingerBands, RSI, StochasticOscillator, OBV


class TestRingHistory:
    """Test circular history lookups."""

    def test_push_and_lookup(self):
        """Latest value at offset 0, older values behind it."""
        ring = RingHistory(3)
        ring.push(1.0)
        ring.push(2.0)
        ring.push(3.0)
        assert ring.curr() == 3.0
        assert ring.get(0) == 3.0
        assert ring.get(1) == 2.0
        assert ring.get(2) == 1.0
        assert math.isnan(ring.get(3))

    def test_overwrites_oldest(self):
        ring = RingHistory(3)
        for value in (1.0, 2.0, 3.0, 4.0):
            ring.push(value)
        assert ring.curr() == 4.0
        assert ring.get(1) == 3.0
        assert ring.get(2) == 2.0
        assert math.isnan(ring.get(3))

    def test_unwritten_slots_are_sentinel(self):
        ring = RingHistory(4)
        assert math.isnan(ring.curr())
        ring.push(7.0)
        assert ring.get(0) == 7.0
        assert all(math.isnan(ring.get(k)) for k in range(1, 4))

    def test_lookup_past_capacity_saturates(self):
        """Offsets at or beyond capacity return the sentinel no matter how many pushes."""
        ring = RingHistory(2)
        for value in range(50):
            ring.push(float(value))
            assert math.isnan(ring.get(2))
            assert math.isnan(ring.get(100))
            assert ring.get(0) == ring.curr()

    def test_capacity_one(self):
        ring = RingHistory(1)
        ring.push(1.0)
        ring.push(2.0)
        assert ring.curr() == 2.0
        assert math.isnan(ring.get(1))

    def test_zero_capacity_rejected(self):
        with pytest.raises(ValueError, match="capacity"):
            RingHistory(0)

    def test_negative_offset_rejected(self):
        ring = RingHistory(2)
        with pytest.raises(IndexError):
            ring.get(-1)

    def test_custom_sentinel(self):
        ring = RingHistory(2, sentinel=MACDResult())
        ring.push(MACDResult(1.0, 2.0, -1.0))
        assert ring.curr().macd == 1.0
        assert not ring.get(1).is_defined
        assert ring.get(5) is ring.sentinel

    def test_clear(self):
        ring = RingHistory(3)
        ring.push(1.0)
        ring.push(2.0)
        ring.clear()
        assert len(ring) == 3
        assert all(math.isnan(ring.get(k)) for k in range(3))


class TestIndicatorInterface:
    """Test BaseIndicator abstract base class."""

    ALL = (SMA, EMA, MACD, MovingVariance, MovingStdDev, ATR, BollingerBands, RSI, StochasticOscillator, OBV)

    def test_indicator_is_abstract(self):
        assert issubclass(BaseIndicator, ABC)
        with pytest.raises(TypeError):
            BaseIndicator(1)

    def test_concrete_indicators_implement_update(self):
        for cls in self.ALL:
            assert cls.update is not BaseIndicator.update

    def test_default_construction(self):
        """Every indicator builds with defaults and starts without a value."""
        for cls in self.ALL:
            indicator = cls()
            assert indicator.mem_size == 1
            assert not indicator.is_ready

    def test_update_bar_uses_inputs(self):
        bar = OHLC(timestamp=None, open=1.0, high=3.0, low=0.5, close=2.0, volume=10.0)
        rsi = RSI(period=1)
        rsi.update_bar(bar)
        assert rsi.curr() == pytest.approx(100.0)

        atr = ATR(period=1)
        atr.update_bar(bar)
        assert atr.curr() == pytest.approx(2.5)

        obv = OBV()
        obv.update_bar(bar)
        assert obv.curr() == 0.0

    def test_parameters_are_read_only(self):
        sma = SMA(period=3)
        with pytest.raises(AttributeError):
            sma.period = 5
