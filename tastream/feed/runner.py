"""Indicator runner - CLI interface for feeding literal samples to an indicator."""

import argparse
import logging
from dataclasses import fields

from ..indicators import (
    BaseIndicator, SMA, EMA, MACD, MovingVariance, MovingStdDev, ATR,
    BollingerBands, RSI, StochasticOscillator, OBV,
)

INDICATORS: dict[str, type[BaseIndicator]] = {
    'sma': SMA,
    'ema': EMA,
    'macd': MACD,
    'variance': MovingVariance,
    'stddev': MovingStdDev,
    'atr': ATR,
    'bollinger': BollingerBands,
    'rsi': RSI,
    'stochastic': StochasticOscillator,
    'obv': OBV,
}


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def build_indicator(name: str, **params) -> BaseIndicator:
    """Create an indicator from its name, ignoring parameters it does not take."""
    cls = INDICATORS[name]
    accepted = {f.name for f in fields(cls.config_class)}
    config = cls.config_class(**{
        key: value for key, value in params.items()
        if key in accepted and value is not None
    })
    logging.debug(f"Building {cls.__name__} from {config}")
    return cls.from_config(config)


def parse_sample(text: str, arity: int) -> tuple[float, ...]:
    """Parse one sample; multi-input samples are comma separated ("10,5,7")."""
    parts = text.split(',')
    if len(parts) != arity or any(not p.strip() for p in parts):
        raise ValueError(f"expected {arity} comma-separated value(s), got {text!r}")
    return tuple(float(p) for p in parts)


def run_indicator(indicator: BaseIndicator, samples: list[str]) -> BaseIndicator:
    """Feed the parsed samples in order."""
    arity = len(indicator.inputs)
    parsed = [parse_sample(s, arity) for s in samples]
    logging.info(f"Feeding {len(parsed)} samples to {type(indicator).__name__}")
    for values in parsed:
        indicator.update(*values)
    return indicator


def main(argv: list[str] | None = None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Feed samples to a streaming indicator")
    parser.add_argument("indicator", choices=sorted(INDICATORS))
    parser.add_argument("values", nargs="+",
                        help="Samples in time order. Multi-input indicators take "
                             "comma-separated samples: rsi open,close; atr high,low,close; obv close,volume")
    parser.add_argument("--period", type=int, default=None)
    parser.add_argument("--mem-size", type=int, default=None)
    parser.add_argument("--dof", type=int, default=None)
    parser.add_argument("--smoothing", type=float, default=None)
    parser.add_argument("--z", type=float, default=None)
    parser.add_argument("--short", type=int, default=None, help="MACD short EMA period")
    parser.add_argument("--long", type=int, default=None, help="MACD long EMA period")
    parser.add_argument("--signal", type=int, default=None, help="MACD signal EMA period")
    parser.add_argument("--history", action="store_true", help="Print every retained past value")
    parser.add_argument("--verbose", "-v", action="store_true")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        indicator = build_indicator(
            args.indicator,
            period=args.period,
            mem_size=args.mem_size,
            dof=args.dof,
            smoothing=args.smoothing,
            z=args.z,
            short_period=args.short,
            long_period=args.long,
            signal_period=args.signal,
        )
        run_indicator(indicator, args.values)
    except ValueError as e:
        parser.error(str(e))

    print(f"{type(indicator).__name__}: {indicator.curr()}")
    if args.history:
        for offset in range(indicator.mem_size):
            print(f"  [{offset}] {indicator.get(offset)}")


if __name__ == "__main__":
    main()
