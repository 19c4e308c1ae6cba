"""Core module - Types, configurations and validation."""

from .types import (
    NAN,
    is_no_value,
    MACDResult,
    BollingerBandsResult,
    OHLC,
    Order,
    Side,
    OrderType,
    OrderStatus,
)
from .config import (
    WindowConfig,
    RSIConfig,
    ATRConfig,
    StochasticConfig,
    ExponentialConfig,
    VarianceConfig,
    BollingerConfig,
    MACDConfig,
    VolumeConfig,
)

__all__ = [
    'NAN', 'is_no_value', 'MACDResult', 'BollingerBandsResult', 'OHLC',
    'Order', 'Side', 'OrderType', 'OrderStatus',
    'WindowConfig', 'RSIConfig', 'ATRConfig', 'StochasticConfig', 'ExponentialConfig', 'VarianceConfig',
    'BollingerConfig', 'MACDConfig', 'VolumeConfig',
]
