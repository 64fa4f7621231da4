"""Element-wise rounding functions."""

from __future__ import annotations

import math
from collections.abc import Sequence

from tamath.utils import round_to_decimals, validate_not_empty, validate_prices


def _validate(values: Sequence[float]) -> None:
    validate_not_empty(values, "input")
    validate_prices(values, "input")


def ceil(values: Sequence[float]) -> list[float]:
    """Smallest integer not below each value, as floats."""
    _validate(values)
    return [float(math.ceil(x)) for x in values]


def floor(values: Sequence[float]) -> list[float]:
    """Largest integer not above each value, as floats."""
    _validate(values)
    return [float(math.floor(x)) for x in values]


def round_nearest(values: Sequence[float]) -> list[float]:
    """Nearest integer to each value, halves rounded away from zero."""
    _validate(values)
    return [round_to_decimals(x, 0) for x in values]