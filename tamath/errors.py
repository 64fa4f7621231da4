"""Exceptions raised by the analysis functions."""

from __future__ import annotations


class TAError(Exception):
    """Base class for every error raised by this package."""

    _fields: tuple[str, ...] = ()

    def _key(self) -> tuple:
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class InsufficientDataError(TAError):
    """Too few data points for the requested calculation."""

    _fields = ("required", "provided")

    def __init__(self, required: int, provided: int) -> None:
        self.required = required
        self.provided = provided
        super().__init__(
            f"Insufficient data: need at least {required} data points, got {provided}"
        )


class InvalidParameterError(TAError):
    """A parameter has a value the calculation cannot use."""

    _fields = ("parameter", "reason")

    def __init__(self, parameter: str, reason: str) -> None:
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Invalid parameter '{parameter}': {reason}")


class EmptyInputError(TAError):
    """The input data is empty."""

    def __init__(self) -> None:
        super().__init__("Input data is empty")


class MismatchedInputsError(TAError):
    """Input sequences that must match in length do not."""

    _fields = ("details",)

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Input arrays have different lengths: {details}")


class InvalidInputError(TAError):
    """Input values are invalid (NaN, infinite, out of range, ...)."""

    _fields = ("details",)

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid input values detected: {details}")


class NumericalError(TAError):
    """A calculation overflowed, underflowed or otherwise broke down."""

    _fields = ("details",)

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Numerical error during calculation: {details}")


class UnsupportedOperationError(TAError):
    """The requested operation is not supported."""

    _fields = ("operation",)

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Unsupported operation: {operation}")


class InternalError(TAError):
    """An unexpected internal failure."""

    _fields = ("details",)

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Internal error: {details}")