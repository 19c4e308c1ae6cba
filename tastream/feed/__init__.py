"""Feed module - Pushing data through indicators."""

from .series import feed_series, feed_bars

__all__ = ['feed_series', 'feed_bars']
