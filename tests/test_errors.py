import pytest

from tamath.errors import (
    EmptyInputError,
    InsufficientDataError,
    InternalError,
    InvalidInputError,
    InvalidParameterError,
    MismatchedInputsError,
    NumericalError,
    TAError,
    UnsupportedOperationError,
)


def test_error_creation():
    err = InsufficientDataError(10, 5)
    assert err.required == 10
    assert err.provided == 5

    err = InvalidParameterError("period", "must be positive")
    assert isinstance(err, TAError)
    assert err.parameter == "period"
    assert err.reason == "must be positive"

    err = MismatchedInputsError("arrays have different lengths")
    assert isinstance(err, TAError)
    assert err.details == "arrays have different lengths"


def test_error_display():
    msg = str(InsufficientDataError(10, 5))
    assert "Insufficient data" in msg
    assert "10" in msg
    assert "5" in msg
    assert msg == "Insufficient data: need at least 10 data points, got 5"


def test_error_equality():
    err1 = InsufficientDataError(10, 5)
    err2 = InsufficientDataError(10, 5)
    err3 = InsufficientDataError(10, 6)
    assert err1 == err2
    assert err1 != err3
    assert hash(err1) == hash(err2)


def test_different_kinds_are_not_equal():
    assert InvalidInputError("x") != NumericalError("x")


@pytest.mark.parametrize(
    "err, expected",
    [
        (InvalidParameterError("scalar", "division by zero"),
         "Invalid parameter 'scalar': division by zero"),
        (EmptyInputError(), "Input data is empty"),
        (MismatchedInputsError("a length (2) != b length (3)"),
         "Input arrays have different lengths: a length (2) != b length (3)"),
        (InvalidInputError("bad"), "Invalid input values detected: bad"),
        (NumericalError("overflow"), "Numerical error during calculation: overflow"),
        (UnsupportedOperationError("pattern"), "Unsupported operation: pattern"),
        (InternalError("oops"), "Internal error: oops"),
    ],
)
def test_messages(err, expected):
    assert str(err) == expected


def test_subclass_of_base_and_exception():
    err = InvalidInputError("values")
    assert isinstance(err, TAError)
    assert isinstance(err, Exception)
    assert err.details == "values"
    assert str(err) == "Invalid input values detected: values"