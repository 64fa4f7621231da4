"""Element-wise trigonometric functions over series of radians."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from tamath.errors import InvalidInputError
from tamath.utils import validate_not_empty, validate_prices


def _apply(values: Sequence[float], name: str, fn: Callable[[float], float]) -> list[float]:
    validate_not_empty(values, name)
    validate_prices(values, name)
    return [fn(x) for x in values]


def _check_unit_range(values: Sequence[float], label: str) -> None:
    for x in values:
        if x < -1.0 or x > 1.0:
            raise InvalidInputError(
                f"{label} input value {x} is outside valid range [-1, 1]"
            )


def sin(values: Sequence[float]) -> list[float]:
    """Sine of each value."""
    return _apply(values, "input", math.sin)


def cos(values: Sequence[float]) -> list[float]:
    """Cosine of each value."""
    return _apply(values, "input", math.cos)


def tan(values: Sequence[float]) -> list[float]:
    """Tangent of each value."""
    return _apply(values, "input", math.tan)


def asin(values: Sequence[float]) -> list[float]:
    """Arcsine of each value; every value must lie in [-1, 1]."""
    validate_not_empty(values, "input")
    validate_prices(values, "input")
    _check_unit_range(values, "ASIN")
    return [math.asin(x) for x in values]


def acos(values: Sequence[float]) -> list[float]:
    """Arccosine of each value; every value must lie in [-1, 1]."""
    validate_not_empty(values, "input")
    validate_prices(values, "input")
    _check_unit_range(values, "ACOS")
    return [math.acos(x) for x in values]


def atan(values: Sequence[float]) -> list[float]:
    """Arctangent of each value."""
    return _apply(values, "input", math.atan)


def sin_cos(values: Sequence[float]) -> tuple[list[float], list[float]]:
    """Sines and cosines of the values, as ``(sines, cosines)``."""
    validate_not_empty(values, "input")
    validate_prices(values, "input")
    return [math.sin(x) for x in values], [math.cos(x) for x in values]


def deg_to_rad(degrees: Sequence[float]) -> list[float]:
    """Convert degrees to radians."""
    return _apply(degrees, "degrees", math.radians)


def rad_to_deg(radians: Sequence[float]) -> list[float]:
    """Convert radians to degrees."""
    return _apply(radians, "radians", math.degrees)