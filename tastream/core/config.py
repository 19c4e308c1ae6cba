"""Indicator parameters and their validation.

Parameters are fixed for the lifetime of an indicator. Invalid values
are rejected when the config (or the indicator) is built, never when a
sample is fed.
"""

from dataclasses import dataclass
import math

DEFAULT_MEM_SIZE = 1
DEFAULT_SMA_PERIOD = 20
DEFAULT_EMA_PERIOD = 12
DEFAULT_SMOOTHING = 2.0
DEFAULT_RSI_PERIOD = 14
DEFAULT_ATR_PERIOD = 14
DEFAULT_STOCHASTIC_PERIOD = 14
DEFAULT_BOLLINGER_PERIOD = 20
DEFAULT_BOLLINGER_Z = 2.0
DEFAULT_BOLLINGER_DOF = 1  # sample estimator
DEFAULT_MACD_SHORT = 12
DEFAULT_MACD_LONG = 26
DEFAULT_MACD_SIGNAL = 9


def check_positive_int(name: str, value: int) -> int:
    """Reject non-integers and values below 1."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


def check_dof(dof: int, period: int) -> int:
    """Degrees of freedom must leave a positive divisor (period - dof)."""
    if isinstance(dof, bool) or not isinstance(dof, int):
        raise ValueError(f"dof must be an integer, got {dof!r}")
    if dof < 0 or dof >= period:
        raise ValueError(f"dof must satisfy 0 <= dof < period ({period}), got {dof}")
    return dof


def check_finite(name: str, value: float, minimum: float = 0.0, strict: bool = False) -> float:
    """Reject NaN/inf and values below ``minimum`` (or equal, if strict)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    if value < minimum or (strict and value == minimum):
        op = ">" if strict else ">="
        raise ValueError(f"{name} must be {op} {minimum}, got {value}")
    return float(value)


@dataclass(frozen=True)
class WindowConfig:
    """Single-period window (SMA)."""
    period: int = DEFAULT_SMA_PERIOD
    mem_size: int = DEFAULT_MEM_SIZE

    def __post_init__(self):
        check_positive_int("period", self.period)
        check_positive_int("mem_size", self.mem_size)


@dataclass(frozen=True)
class RSIConfig(WindowConfig):
    """Relative Strength Index."""
    period: int = DEFAULT_RSI_PERIOD


@dataclass(frozen=True)
class ATRConfig(WindowConfig):
    """Average True Range."""
    period: int = DEFAULT_ATR_PERIOD


@dataclass(frozen=True)
class StochasticConfig(WindowConfig):
    """Stochastic Oscillator."""
    period: int = DEFAULT_STOCHASTIC_PERIOD


@dataclass(frozen=True)
class ExponentialConfig:
    """Exponential moving average."""
    period: int = DEFAULT_EMA_PERIOD
    smoothing: float = DEFAULT_SMOOTHING
    mem_size: int = DEFAULT_MEM_SIZE

    def __post_init__(self):
        check_positive_int("period", self.period)
        check_finite("smoothing", self.smoothing, strict=True)
        check_positive_int("mem_size", self.mem_size)


@dataclass(frozen=True)
class VarianceConfig:
    """Moving variance / standard deviation."""
    period: int = DEFAULT_SMA_PERIOD
    dof: int = 0
    mem_size: int = DEFAULT_MEM_SIZE

    def __post_init__(self):
        check_positive_int("period", self.period)
        check_dof(self.dof, self.period)
        check_positive_int("mem_size", self.mem_size)


@dataclass(frozen=True)
class BollingerConfig:
    """Bollinger Bands configuration."""
    period: int = DEFAULT_BOLLINGER_PERIOD
    z: float = DEFAULT_BOLLINGER_Z
    dof: int = DEFAULT_BOLLINGER_DOF
    mem_size: int = DEFAULT_MEM_SIZE

    def __post_init__(self):
        check_positive_int("period", self.period)
        check_finite("z", self.z)
        check_dof(self.dof, self.period)
        check_positive_int("mem_size", self.mem_size)


@dataclass(frozen=True)
class MACDConfig:
    """MACD configuration (short/long/signal EMAs)."""
    short_period: int = DEFAULT_MACD_SHORT
    long_period: int = DEFAULT_MACD_LONG
    signal_period: int = DEFAULT_MACD_SIGNAL
    smoothing: float = DEFAULT_SMOOTHING
    mem_size: int = DEFAULT_MEM_SIZE

    def __post_init__(self):
        check_positive_int("short_period", self.short_period)
        check_positive_int("long_period", self.long_period)
        check_positive_int("signal_period", self.signal_period)
        check_finite("smoothing", self.smoothing, strict=True)
        check_positive_int("mem_size", self.mem_size)


@dataclass(frozen=True)
class VolumeConfig:
    """Windowless volume accumulators (OBV)."""
    mem_size: int = DEFAULT_MEM_SIZE

    def __post_init__(self):
        check_positive_int("mem_size", self.mem_size)
