"""Rolling-window extremes and sums over price series."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

from tamath.utils import (
    highest_in_period,
    highest_index,
    lowest_in_period,
    lowest_index,
    validate_not_empty,
    validate_period,
    validate_sufficient_data,
)

_T = TypeVar("_T")


def _validate(data: Sequence[float], period: int) -> None:
    validate_not_empty(data, "data")
    validate_period(period, "period")
    validate_sufficient_data(data, period, "data")


def _window_starts(data: Sequence[float], period: int) -> Iterator[int]:
    return iter(range(len(data) - period + 1))


def _rolling(
    data: Sequence[float],
    period: int,
    fill: _T,
    compute: Callable[[int], _T],
) -> list[_T]:
    """Apply ``compute`` to each window start; pad the warm-up with ``fill``."""
    _validate(data, period)
    return [fill] * (period - 1) + [compute(start) for start in _window_starts(data, period)]


def rolling_max(data: Sequence[float], period: int) -> list[float]:
    """Highest value over each window of ``period`` items; NaN during warm-up."""
    return _rolling(
        data, period, math.nan, lambda start: highest_in_period(data, start, period)
    )


def max_index(data: Sequence[float], period: int) -> list[int]:
    """Absolute index of the highest value in each window; 0 during warm-up."""
    return _rolling(
        data,
        period,
        0,
        lambda start: start + highest_index(data[start : start + period]),
    )


def rolling_min(data: Sequence[float], period: int) -> list[float]:
    """Lowest value over each window of ``period`` items; NaN during warm-up."""
    return _rolling(
        data, period, math.nan, lambda start: lowest_in_period(data, start, period)
    )


def min_index(data: Sequence[float], period: int) -> list[int]:
    """Absolute index of the lowest value in each window; 0 during warm-up."""
    return _rolling(
        data,
        period,
        0,
        lambda start: start + lowest_index(data[start : start + period]),
    )


def minmax(data: Sequence[float], period: int) -> tuple[list[float], list[float]]:
    """Rolling lowest and highest values as ``(mins, maxes)``."""
    _validate(data, period)
    return rolling_min(data, period), rolling_max(data, period)


def minmax_index(data: Sequence[float], period: int) -> tuple[list[int], list[int]]:
    """Rolling indices of the lowest and highest values as ``(mins, maxes)``."""
    _validate(data, period)
    return min_index(data, period), max_index(data, period)


def rolling_sum(data: Sequence[float], period: int) -> list[float]:
    """Sum over each window of ``period`` items, kept as a running total."""
    _validate(data, period)
    total = 0.0
    for value in data[:period]:
        total += value
    output = [math.nan] * (period - 1) + [total]
    for leaving, entering in zip(data, data[period:]):
        total = total - leaving + entering
        output.append(total)
    return output


def sum_rolling(data: Sequence[float], period: int) -> list[float]:
    """Running-total rolling sum; identical results to :func:`rolling_sum`."""
    return rolling_sum(data, period)