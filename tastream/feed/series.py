"""Push in-memory pandas data through a streaming indicator, one row per step."""

from dataclasses import asdict, fields, is_dataclass
from typing import Iterable
import logging

import pandas as pd

from ..indicators.base import BaseIndicator

logger = logging.getLogger(__name__)


def _resolve_columns(bars: pd.DataFrame, names: tuple[str, ...]) -> list:
    """Match input names to columns, ignoring case (Close/close)."""
    by_lower = {str(c).lower(): c for c in bars.columns}
    missing = [n for n in names if n not in by_lower]
    if missing:
        raise KeyError(f"Bars are missing columns {missing}. Found: {bars.columns.tolist()}")
    return [by_lower[n] for n in names]


def _collect(
    indicator: BaseIndicator,
    rows: Iterable[tuple],
    index: pd.Index,
    name: str
) -> pd.Series | pd.DataFrame:
    outputs = []
    for row in rows:
        indicator.update(*row)
        outputs.append(indicator.curr())

    sentinel = indicator.history.sentinel
    if is_dataclass(sentinel):
        columns = [f.name for f in fields(sentinel)]
        result = pd.DataFrame([asdict(o) for o in outputs], index=index, columns=columns)
        warmup = int(result.isna().any(axis=1).sum())
    else:
        result = pd.Series(outputs, index=index, name=name, dtype=float)
        warmup = int(result.isna().sum())

    logger.debug(f"{name}: {warmup:,} of {len(outputs):,} rows without a value")
    return result


def feed_series(indicator: BaseIndicator, values: pd.Series) -> pd.Series | pd.DataFrame:
    """
    Feed every value of a series to a single-input indicator.

    Args:
        indicator: Indicator taking one input per step
        values: Samples in time order

    Returns:
        One output per input, aligned on the input index. Record
        indicators (MACD, Bollinger Bands) give one column per field.
    """
    if len(indicator.inputs) != 1:
        raise ValueError(
            f"{type(indicator).__name__} takes {indicator.inputs}, use feed_bars instead"
        )
    name = str(values.name) if values.name is not None else type(indicator).__name__.lower()
    logger.info(f"Feeding {len(values):,} samples to {type(indicator).__name__}")
    rows = ((v,) for v in values.to_numpy(dtype=float))
    return _collect(indicator, rows, values.index, name)


def feed_bars(indicator: BaseIndicator, bars: pd.DataFrame) -> pd.Series | pd.DataFrame:
    """
    Feed OHLCV rows to an indicator, selecting the columns it needs.

    Args:
        indicator: Any indicator; its ``inputs`` name the columns used
        bars: Frame with open/high/low/close/volume columns (any case)

    Returns:
        One output per row, aligned on the frame index.
    """
    columns = _resolve_columns(bars, indicator.inputs)
    logger.info(f"Feeding {len(bars):,} bars to {type(indicator).__name__} ({', '.join(map(str, columns))})")
    rows = bars[columns].astype(float).itertuples(index=False, name=None)
    return _collect(indicator, rows, bars.index, type(indicator).__name__.lower())
