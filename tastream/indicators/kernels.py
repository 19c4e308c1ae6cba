"""Numba-compiled window passes used on the update path."""

import numpy as np
from numba import njit


@njit(cache=True)
def sum_squared_deviations(window: np.ndarray, mean: float) -> float:
    """Full pass over the window: sum of (x - mean)^2."""
    total = 0.0
    for i in range(len(window)):
        diff = window[i] - mean
        total += diff * diff
    return total


@njit(cache=True)
def window_min_max(window: np.ndarray) -> tuple:
    """Return (min, max) of a non-empty window; a NaN in any slot gives (nan, nan)."""
    lo = window[0]
    hi = window[0]
    for i in range(len(window)):
        if np.isnan(window[i]):
            return np.nan, np.nan
        if window[i] < lo:
            lo = window[i]
        if window[i] > hi:
            hi = window[i]
    return lo, hi


@njit(cache=True, error_model='numpy')
def ieee_divide(a: float, b: float) -> float:
    """Division with IEEE semantics: x/0 -> +-inf, 0/0 -> nan."""
    return a / b
