"""Element-wise arithmetic on price series."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from tamath.errors import InvalidParameterError
from tamath.utils import validate_not_empty, validate_same_length


def _pairwise(
    array1: Sequence[float],
    array2: Sequence[float],
    op: Callable[[float, float], float],
) -> list[float]:
    validate_not_empty(array1, "array1")
    validate_not_empty(array2, "array2")
    validate_same_length(array1, array2, "array1", "array2")
    return [op(a, b) for a, b in zip(array1, array2)]


def add(array1: Sequence[float], array2: Sequence[float]) -> list[float]:
    """Element-wise sum of two equally long series."""
    return _pairwise(array1, array2, lambda a, b: a + b)


def add_scalar(array: Sequence[float], scalar: float) -> list[float]:
    """Add ``scalar`` to every element."""
    validate_not_empty(array, "array")
    return [x + scalar for x in array]


def sub(array1: Sequence[float], array2: Sequence[float]) -> list[float]:
    """Element-wise difference of two equally long series."""
    return _pairwise(array1, array2, lambda a, b: a - b)


def sub_scalar(array: Sequence[float], scalar: float) -> list[float]:
    """Subtract ``scalar`` from every element."""
    validate_not_empty(array, "array")
    return [x - scalar for x in array]


def mult(array1: Sequence[float], array2: Sequence[float]) -> list[float]:
    """Element-wise product of two equally long series."""
    return _pairwise(array1, array2, lambda a, b: a * b)


def mult_scalar(array: Sequence[float], scalar: float) -> list[float]:
    """Multiply every element by ``scalar``."""
    validate_not_empty(array, "array")
    return [x * scalar for x in array]


def div(array1: Sequence[float], array2: Sequence[float]) -> list[float]:
    """Element-wise quotient; a zero divisor yields NaN at that position."""
    return _pairwise(array1, array2, lambda a, b: math.nan if b == 0.0 else a / b)


def div_scalar(array: Sequence[float], scalar: float) -> list[float]:
    """Divide every element by ``scalar``, which must not be zero."""
    validate_not_empty(array, "array")
    if scalar == 0.0:
        raise InvalidParameterError("scalar", "division by zero")
    return [x / scalar for x in array]