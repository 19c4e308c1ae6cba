"""Core data types for the indicator toolkit."""

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
import math

NAN = float("nan")


def is_no_value(value) -> bool:
    """Check whether a float or a result record is the "no value" sentinel."""
    if isinstance(value, (int, float)):
        return math.isnan(value)
    return not value.is_defined


@dataclass(frozen=True, slots=True)
class MACDResult:
    """MACD values at a point in time."""
    macd: float = NAN
    signal: float = NAN
    hist: float = NAN  # macd - signal

    @property
    def is_defined(self) -> bool:
        """All three lines are available."""
        return not any(math.isnan(getattr(self, f.name)) for f in fields(self))


@dataclass(frozen=True, slots=True)
class BollingerBandsResult:
    """Bollinger Bands values at a point in time."""
    sma: float = NAN
    upper: float = NAN
    lower: float = NAN

    @property
    def bandwidth(self) -> float:
        """(upper - lower) / sma, NaN while warming up."""
        if self.sma == 0:
            return NAN
        return (self.upper - self.lower) / self.sma

    @property
    def is_defined(self) -> bool:
        """All three bands are available."""
        return not any(math.isnan(getattr(self, f.name)) for f in fields(self))


@dataclass(frozen=True, slots=True)
class OHLC:
    """OHLC candle data."""
    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0


class Side(Enum):
    """Order direction."""
    NO_SIDE = "no_side"
    BUY = "buy"
    SELL = "sell"
    BOTH = "both"


class OrderType(Enum):
    """Order execution types."""
    NO_ORDER = "no_order"
    MARKET = "market"
    LIMIT = "limit"
    STOP = "stop"
    STOP_LIMIT = "stop_limit"
    TAKE_PROFIT = "take_profit"
    TAKE_PROFIT_LIMIT = "take_profit_limit"
    TRAILING_STOP = "trailing_stop"
    FILL_OR_KILL = "fill_or_kill"
    IMMEDIATE_OR_CANCEL = "immediate_or_cancel"
    POST_ONLY = "post_only"


class OrderStatus(Enum):
    """Order lifecycle states."""
    DRAFT = "draft"
    NEW = "new"
    FILLED = "filled"
    PARTIAL = "partial"
    CANCELLED = "cancelled"
    REJECTED = "rejected"


@dataclass
class Order:
    """Exchange order record. Not used by the indicators."""
    creation_time: datetime
    update_time: datetime
    order_id: int = 0
    symbol: str = ""
    exchange: str = ""
    side: Side = Side.NO_SIDE
    order_type: OrderType = OrderType.NO_ORDER
    status: OrderStatus = OrderStatus.DRAFT
    quantity: float = 0.0
    price: float = 0.0

    @classmethod
    def default(cls) -> "Order":
        """Create an empty draft order stamped with the current time."""
        now = datetime.now()
        return cls(creation_time=now, update_time=now)

    def touch(self) -> None:
        """Refresh the update timestamp."""
        self.update_time = datetime.now()
