"""Base class for indicators with a fixed-size output history."""

from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import ClassVar, Generic, TypeVar
import logging

from ..core.config import check_positive_int
from ..core.types import NAN, OHLC, is_no_value

T = TypeVar('T')

logger = logging.getLogger(__name__)


class RingHistory(Generic[T]):
    """
    Circular store of the last ``capacity`` values.

    The cursor moves backwards on every push, so slot ``pos`` is always
    the latest value and ``(pos + k) % capacity`` the value pushed k
    steps earlier. Unwritten slots hold the sentinel.
    """

    __slots__ = ('_data', '_pos', '_sentinel')

    def __init__(self, capacity: int, sentinel: T = NAN):
        check_positive_int("capacity", capacity)
        self._sentinel = sentinel
        self._data: list[T] = [sentinel] * capacity
        self._pos = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def sentinel(self) -> T:
        return self._sentinel

    def __len__(self) -> int:
        return len(self._data)

    def push(self, value: T) -> None:
        """Insert a value, overwriting the oldest one."""
        self._pos = (self._pos - 1) % len(self._data)
        self._data[self._pos] = value

    def get(self, offset: int) -> T:
        """Value pushed ``offset`` steps before the latest; sentinel past capacity."""
        if offset < 0:
            raise IndexError(f"offset must be non-negative, got {offset}")
        size = len(self._data)
        if offset >= size:
            return self._sentinel
        return self._data[(self._pos + offset) % size]

    def curr(self) -> T:
        """Latest value."""
        return self._data[self._pos]

    def clear(self) -> None:
        """Reset every slot to the sentinel."""
        self._data = [self._sentinel] * len(self._data)
        self._pos = 0


class BaseIndicator(ABC, Generic[T]):
    """Base class for all indicators."""

    # Names of the per-step inputs, in update() argument order
    inputs: ClassVar[tuple[str, ...]] = ('close',)
    config_class: ClassVar[type]

    def __init__(self, mem_size: int, sentinel: T = NAN):
        """Initialize with the number of past outputs to retain."""
        self._history: RingHistory[T] = RingHistory(mem_size, sentinel)
        logger.debug(f"Created {type(self).__name__} (mem_size={mem_size})")

    @classmethod
    def from_config(cls, config):
        """Build the indicator from its parameter dataclass."""
        if not isinstance(config, cls.config_class):
            raise TypeError(
                f"{cls.__name__} expects {cls.config_class.__name__}, got {type(config).__name__}"
            )
        return cls(**asdict(config))

    @property
    def mem_size(self) -> int:
        return self._history.capacity

    @property
    def history(self) -> RingHistory[T]:
        return self._history

    @property
    def is_ready(self) -> bool:
        """Check if indicator has produced a defined value."""
        return not is_no_value(self._history.curr())

    @abstractmethod
    def update(self, *values: float) -> None:
        """Feed one sample. Read the result back with curr()/get()."""
        pass

    def update_bar(self, bar: OHLC) -> None:
        """Feed the fields of a bar named by ``inputs``."""
        self.update(*(getattr(bar, name) for name in self.inputs))

    def curr(self) -> T:
        return self._history.curr()

    def get(self, offset: int) -> T:
        return self._history.get(offset)

    def reset(self) -> None:
        """Reset indicator state, keeping its parameters."""
        self._history.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(curr={self.curr()!r})"
