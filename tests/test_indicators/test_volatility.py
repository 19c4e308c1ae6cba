"""
Tests for moving variance, moving standard deviation, ATR and Bollinger Bands.
"""
import math

import numpy as np
import pytest

from tastream.indicators import MovingVariance, MovingStdDev, ATR, BollingerBands


@pytest.fixture
def noisy_prices():
    rng = np.random.default_rng(7)
    return 50 + rng.normal(0, 3, 200)


class TestMovingVariance:
    """Test moving variance recomputed over the window."""

    def test_arithmetic_progression(self):
        """Population variance of three consecutive integers is 2/3."""
        mv = MovingVariance(period=3, dof=0, mem_size=5)
        mv.update(1.0)
        mv.update(2.0)
        assert math.isnan(mv.curr())
        mv.update(3.0)
        assert mv.mean == pytest.approx(2.0)
        assert mv.curr() == pytest.approx(2.0 / 3.0)
        for value, mean in ((4.0, 3.0), (5.0, 4.0), (6.0, 5.0)):
            mv.update(value)
            assert mv.mean == pytest.approx(mean)
            assert mv.curr() == pytest.approx(2.0 / 3.0)

    def test_sample_variance(self):
        mv = MovingVariance(period=3, dof=1)
        for value in (1.0, 2.0, 3.0):
            mv.update(value)
        assert mv.curr() == pytest.approx(1.0)

    @pytest.mark.parametrize("dof", [0, 1])
    def test_matches_numpy(self, noisy_prices, dof):
        period = 10
        mv = MovingVariance(period=period, dof=dof)
        for i, value in enumerate(noisy_prices):
            mv.update(value)
            if i >= period - 1:
                window = noisy_prices[i - period + 1:i + 1]
                assert mv.curr() == pytest.approx(np.var(window, ddof=dof), rel=1e-9)

    def test_constant_input_has_zero_variance(self):
        mv = MovingVariance(period=4)
        for _ in range(10):
            mv.update(1e6 + 0.1)
        assert mv.curr() == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("dof", [3, 4, -1])
    def test_invalid_dof(self, dof):
        with pytest.raises(ValueError, match="dof"):
            MovingVariance(period=3, dof=dof)

    def test_reset(self):
        mv = MovingVariance(period=2)
        mv.update(1.0)
        mv.update(3.0)
        assert mv.curr() == pytest.approx(1.0)
        mv.reset()
        assert math.isnan(mv.curr())
        assert math.isnan(mv.mean)


class TestMovingStdDev:
    """Test moving standard deviation."""

    def test_arithmetic_progression(self):
        sd = MovingStdDev(period=3, dof=0, mem_size=5)
        for value in (1.0, 2.0, 3.0, 4.0, 5.0, 6.0):
            sd.update(value)
        assert sd.curr() == pytest.approx(math.sqrt(2.0 / 3.0))
        assert sd.get(3) == pytest.approx(math.sqrt(2.0 / 3.0))
        assert math.isnan(sd.get(4))

    def test_warmup_propagates_nan(self):
        sd = MovingStdDev(period=3)
        sd.update(1.0)
        sd.update(2.0)
        assert math.isnan(sd.curr())

    def test_matches_numpy(self, noisy_prices):
        sd = MovingStdDev(period=20, dof=1)
        for value in noisy_prices:
            sd.update(value)
        assert sd.curr() == pytest.approx(np.std(noisy_prices[-20:], ddof=1), rel=1e-9)


class TestATR:
    """Test average true range."""

    def test_known_values(self):
        atr = ATR(period=3, mem_size=2)
        atr.update(10.0, 5.0, 7.0)
        atr.update(12.0, 6.0, 8.0)
        assert math.isnan(atr.curr())
        atr.update(14.0, 7.0, 9.0)
        assert atr.curr() == pytest.approx(6.0)
        atr.update(16.0, 8.0, 10.0)
        assert atr.curr() == pytest.approx(7.0)
        assert atr.get(1) == pytest.approx(6.0)

    @pytest.mark.parametrize("high,low,close,expected", [
        (10.0, 5.0, 7.0, 5.0),     # high - low
        (10.0, 9.0, 4.0, 6.0),     # |high - close|
        (10.0, 9.0, 15.0, 6.0),    # |low - close| is larger: 6 vs 5
        (10.0, 8.0, 12.0, 4.0),    # |low - close|
        (10.0, 10.0, 10.0, 0.0),
    ])
    def test_true_range(self, high, low, close, expected):
        assert ATR.true_range(high, low, close) == pytest.approx(expected)

    def test_reset(self):
        atr = ATR(period=1)
        atr.update(3.0, 1.0, 2.0)
        assert atr.curr() == pytest.approx(2.0)
        atr.reset()
        assert math.isnan(atr.curr())
        assert not atr.is_ready


class TestBollingerBands:
    """Test Bollinger Bands composition."""

    def test_known_values(self):
        bands = BollingerBands(period=3, z=2.0, mem_size=3)
        bands.update(1.0)
        bands.update(2.0)
        assert not bands.curr().is_defined
        bands.update(3.0)
        result = bands.curr()
        assert result.sma == pytest.approx(2.0)
        assert result.upper == pytest.approx(4.0)
        assert result.lower == pytest.approx(0.0)

        bands.update(7.0)
        half_width = 2 * math.sqrt(7.0)
        result = bands.curr()
        assert result.sma == pytest.approx(4.0)
        assert result.upper == pytest.approx(4.0 + half_width)
        assert result.lower == pytest.approx(4.0 - half_width)
        assert bands.get(1).sma == pytest.approx(2.0)
        assert not bands.get(2).is_defined

    def test_bands_are_symmetric(self, noisy_prices):
        bands = BollingerBands(period=20, z=2.5)
        for price in noisy_prices:
            bands.update(price)
            result = bands.curr()
            if result.is_defined:
                assert result.upper - result.sma == pytest.approx(result.sma - result.lower)
                assert result.upper >= result.lower

    def test_population_dof(self):
        bands = BollingerBands(period=3, z=1.0, dof=0)
        for value in (1.0, 2.0, 3.0):
            bands.update(value)
        assert bands.curr().upper == pytest.approx(2.0 + math.sqrt(2.0 / 3.0))

    def test_bandwidth(self):
        bands = BollingerBands(period=3)
        for value in (1.0, 2.0, 3.0):
            bands.update(value)
        assert bands.curr().bandwidth == pytest.approx(2.0)

    def test_invalid_parameters(self):
        with pytest.raises(ValueError, match="z"):
            BollingerBands(period=3, z=-1.0)
        with pytest.raises(ValueError, match="dof"):
            BollingerBands(period=1)
