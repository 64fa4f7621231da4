"""Validation helpers and small numeric utilities shared by the indicators."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from tamath.errors import (
    InsufficientDataError,
    InvalidInputError,
    InvalidParameterError,
    MismatchedInputsError,
)


def validate_not_empty(data: Sequence[Any], name: str) -> None:
    """Raise ``InvalidInputError`` if ``data`` is empty."""
    if len(data) == 0:
        raise InvalidInputError(f"{name} cannot be empty")


def validate_sufficient_data(data: Sequence[Any], period: int, name: str) -> None:
    """Raise ``InsufficientDataError`` if ``data`` holds fewer than ``period`` items."""
    if len(data) < period:
        raise InsufficientDataError(period, len(data))


def validate_period(period: int, name: str) -> None:
    """Raise ``InvalidParameterError`` if ``period`` is not positive."""
    if period <= 0:
        raise InvalidParameterError(name, "period must be greater than 0")


def validate_same_length(
    data1: Sequence[Any], data2: Sequence[Any], name1: str, name2: str
) -> None:
    """Raise ``MismatchedInputsError`` if the two sequences differ in length."""
    if len(data1) != len(data2):
        raise MismatchedInputsError(
            f"{name1} length ({len(data1)}) != {name2} length ({len(data2)})"
        )


def validate_prices(prices: Sequence[float], name: str) -> None:
    """Raise ``InvalidInputError`` on the first NaN or infinite value."""
    for index, price in enumerate(prices):
        if not math.isfinite(price):
            raise InvalidInputError(
                f"{name} contains invalid value at index {index}: {price}"
            )


def validate_ohlc(
    open_: Sequence[float],
    high: Sequence[float],
    low: Sequence[float],
    close: Sequence[float],
) -> None:
    """Check that OHLC series match in length and every bar is consistent."""
    length = len(open_)
    if len(high) != length or len(low) != length or len(close) != length:
        raise MismatchedInputsError("OHLC arrays must have the same length")

    for index, (o, h, l, c) in enumerate(zip(open_, high, low, close)):
        if not all(math.isfinite(v) for v in (o, h, l, c)):
            raise InvalidInputError(
                f"Invalid OHLC values at index {index}: O={o}, H={h}, L={l}, C={c}"
            )
        if h < l:
            raise InvalidInputError(f"High ({h}) < Low ({l}) at index {index}")
        if h < o or h < c:
            raise InvalidInputError(
                f"High ({h}) is not the highest value at index {index} (O={o}, C={c})"
            )
        if l > o or l > c:
            raise InvalidInputError(
                f"Low ({l}) is not the lowest value at index {index} (O={o}, C={c})"
            )


def ema_multiplier(period: int) -> float:
    """Smoothing factor of an exponential moving average: 2 / (period + 1)."""
    return 2.0 / (period + 1.0)


def wilders_multiplier(period: int) -> float:
    """Wilder's smoothing factor: 1 / period."""
    return 1.0 / period


def highest(data: Sequence[float]) -> float:
    """Largest value, ignoring NaN; ``-inf`` when there is none."""
    return max((x for x in data if not math.isnan(x)), default=-math.inf)


def lowest(data: Sequence[float]) -> float:
    """Smallest value, ignoring NaN; ``inf`` when there is none."""
    return min((x for x in data if not math.isnan(x)), default=math.inf)


def highest_in_period(data: Sequence[float], start: int, period: int) -> float:
    """Largest value in ``data[start:start + period]``, clipped to the data."""
    return highest(data[start : min(start + period, len(data))])


def lowest_in_period(data: Sequence[float], start: int, period: int) -> float:
    """Smallest value in ``data[start:start + period]``, clipped to the data."""
    return lowest(data[start : min(start + period, len(data))])


def highest_index(data: Sequence[float]) -> int:
    """Index of the largest value (the last one on ties); 0 when empty."""
    if len(data) == 0:
        return 0
    return max(reversed(range(len(data))), key=data.__getitem__)


def lowest_index(data: Sequence[float]) -> int:
    """Index of the smallest value (the first one on ties); 0 when empty."""
    if len(data) == 0:
        return 0
    return min(range(len(data)), key=data.__getitem__)


def sum_values(data: Sequence[float]) -> float:
    """Sum of all values."""
    return float(sum(data, 0.0))


def mean(data: Sequence[float]) -> float:
    """Arithmetic mean; NaN for empty data."""
    if len(data) == 0:
        return math.nan
    return sum_values(data) / len(data)


def variance(data: Sequence[float]) -> float:
    """Sample variance (n - 1 denominator); NaN for fewer than two values."""
    if len(data) < 2:
        return math.nan
    centre = mean(data)
    return sum((x - centre) ** 2 for x in data) / (len(data) - 1)


def std_dev(data: Sequence[float]) -> float:
    """Sample standard deviation."""
    return math.sqrt(variance(data))


def mean_absolute_deviation(data: Sequence[float], mean_value: float) -> float:
    """Mean absolute distance from ``mean_value``; NaN for empty data."""
    if len(data) == 0:
        return math.nan
    return sum(abs(x - mean_value) for x in data) / len(data)


def approx_equal(a: float, b: float, tolerance: float) -> bool:
    """True when ``a`` and ``b`` differ by at most ``tolerance``."""
    return abs(a - b) <= tolerance


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    truncated = float(math.trunc(value))
    if abs(value - truncated) >= 0.5:
        truncated += math.copysign(1.0, value)
    return truncated


def round_to_decimals(value: float, decimals: int) -> float:
    """Round to ``decimals`` places, halves away from zero."""
    multiplier = 10.0**decimals
    return _round_half_away(value * multiplier) / multiplier


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit ``value`` to the range [``lower``, ``upper``]."""
    return _fmin(_fmax(value, lower), upper)