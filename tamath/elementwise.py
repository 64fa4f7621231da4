"""Element-wise square root, absolute value and power."""

from __future__ import annotations

import math
from collections.abc import Sequence

from tamath.errors import InvalidInputError
from tamath.utils import validate_not_empty, validate_prices


def _validate(values: Sequence[float]) -> None:
    validate_not_empty(values, "input")
    validate_prices(values, "input")


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y == math.floor(y) and math.fmod(y, 2.0) != 0.0


def _powf(x: float, y: float) -> float:
    """IEEE-style power: never raises, yields inf or NaN instead."""
    try:
        return math.pow(x, y)
    except OverflowError:
        return -math.inf if x < 0.0 and _is_odd_integer(y) else math.inf
    except ValueError:
        if x == 0.0:
            negative_zero = math.copysign(1.0, x) < 0.0
            return -math.inf if negative_zero and _is_odd_integer(y) else math.inf
        return math.nan


def sqrt(values: Sequence[float]) -> list[float]:
    """Square root of each value; every value must be non-negative."""
    _validate(values)
    for x in values:
        if x < 0.0:
            raise InvalidInputError(f"SQRT input value {x} must be non-negative")
    return [math.sqrt(x) for x in values]


def absolute(values: Sequence[float]) -> list[float]:
    """Absolute value of each value."""
    _validate(values)
    return [abs(x) for x in values]


def power(values: Sequence[float], exponent: float) -> list[float]:
    """Each value raised to ``exponent``; undefined results are NaN."""
    _validate(values)
    return [_powf(x, exponent) for x in values]