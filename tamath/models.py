"""Core value types: moving-average kinds and candlesticks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class MAType(IntEnum):
    """Moving-average kinds, numbered as in the classic indicator library."""

    SMA = 0
    EMA = 1
    WMA = 2
    DEMA = 3
    TEMA = 4
    TRIMA = 5
    KAMA = 6
    MAMA = 7
    T3 = 8

    def default_period(self) -> int:
        """Default period for this average."""
        return 14

    def min_period(self) -> int:
        """Minimum number of data points this average needs."""
        return _MIN_PERIODS[self]

    def __str__(self) -> str:
        return self.name


_MIN_PERIODS = {
    MAType.SMA: 1,
    MAType.EMA: 1,
    MAType.WMA: 1,
    MAType.DEMA: 2,
    MAType.TEMA: 3,
    MAType.TRIMA: 1,
    MAType.KAMA: 2,
    MAType.MAMA: 32,
    MAType.T3: 6,
}


@dataclass(frozen=True)
class OHLC:
    """One candlestick: open, high, low and close prices."""

    open: float
    high: float
    low: float
    close: float

    def typical_price(self) -> float:
        """(high + low + close) / 3."""
        return (self.high + self.low + self.close) / 3.0

    def median_price(self) -> float:
        """(high + low) / 2."""
        return (self.high + self.low) / 2.0

    def weighted_close_price(self) -> float:
        """(high + low + 2 * close) / 4."""
        return (self.high + self.low + 2.0 * self.close) / 4.0

    def average_price(self) -> float:
        """(open + high + low + close) / 4."""
        return (self.open + self.high + self.low + self.close) / 4.0

    def true_range(self, prev_close: float | None = None) -> float:
        """True range, using the previous close when one is given."""
        hl = self.high - self.low
        if prev_close is None:
            return hl
        return max(hl, abs(self.high - prev_close), abs(self.low - prev_close))

    def body_size(self) -> float:
        """Absolute distance between open and close."""
        return abs(self.close - self.open)

    def upper_shadow(self) -> float:
        """Distance from the top of the body to the high."""
        return self.high - max(self.open, self.close)

    def lower_shadow(self) -> float:
        """Distance from the low to the bottom of the body."""
        return min(self.open, self.close) - self.low

    def is_bullish(self) -> bool:
        """True when close is above open."""
        return self.close > self.open

    def is_bearish(self) -> bool:
        """True when close is below open."""
        return self.close < self.open

    def is_doji(self, threshold: float) -> bool:
        """True when the body is no larger than ``threshold``."""
        return abs(self.close - self.open) <= threshold


@dataclass(frozen=True)
class OHLCV:
    """A candlestick with its traded volume."""

    ohlc: OHLC
    volume: float

    def money_flow(self) -> float:
        """Typical price times volume."""
        return self.ohlc.typical_price() * self.volume