"""Main entry point - moving average demo."""

from tastream import SMA


def main():
    """Feed a short price series to an SMA and print the latest average."""
    period = 3
    mem_size = 1
    ma = SMA(period, mem_size)
    serie = [112.15, 116.72, 119.21, 117.05, 119.01]
    for value in serie:
        ma.update(value)
    print(f"Moving average: {ma.curr()}")
    print("""
Other indicators from the command line:
  python -m tastream.feed.runner ema --period 3 1 2 3 4
  python -m tastream.feed.runner rsi --period 3 1,2 2,4 4,3
  python -m tastream.feed.runner atr --period 3 10,5,7 12,6,8 14,7,9
  python -m tastream.feed.runner bollinger --period 3 --z 2 1 2 3 7 --mem-size 2 --history
""")


if __name__ == "__main__":
    main()
