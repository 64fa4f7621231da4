import math

import pytest

from tamath.arithmetic import (
    add,
    add_scalar,
    div,
    div_scalar,
    mult,
    mult_scalar,
    sub,
    sub_scalar,
)
from tamath.errors import InvalidInputError, InvalidParameterError, MismatchedInputsError


def test_add_basic():
    assert add([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == pytest.approx([5.0, 7.0, 9.0], abs=1e-8)


def test_add_negative_numbers():
    assert add([-1.0, 2.0, -3.0], [4.0, -5.0, 6.0]) == pytest.approx(
        [3.0, -3.0, 3.0], abs=1e-8
    )


def test_add_scalar():
    assert add_scalar([1.0, 2.0, 3.0], 10.0) == pytest.approx([11.0, 12.0, 13.0], abs=1e-8)


def test_add_mismatched_lengths():
    with pytest.raises(MismatchedInputsError):
        add([1.0, 2.0, 3.0], [4.0, 5.0])


def test_add_empty_arrays():
    with pytest.raises(InvalidInputError):
        add([], [])


def test_sub():
    assert sub([5.0, 7.0, 9.0], [4.0, 5.0, 6.0]) == [1.0, 2.0, 3.0]
    assert sub_scalar([11.0, 12.0], 10.0) == [1.0, 2.0]


def test_sub_add_round_trip():
    a = [1.5, -2.25, 3.0]
    b = [0.5, 4.0, -1.0]
    assert sub(add(a, b), b) == pytest.approx(a)


def test_mult():
    assert mult([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == [4.0, 10.0, 18.0]
    assert mult_scalar([1.0, -2.0], 3.0) == [3.0, -6.0]


def test_div():
    assert div([4.0, 10.0, 18.0], [4.0, 5.0, 6.0]) == [1.0, 2.0, 3.0]


def test_div_by_zero_element_is_nan():
    result = div([1.0, 2.0], [0.0, 4.0])
    assert math.isnan(result[0])
    assert result[1] == 0.5


def test_div_scalar():
    assert div_scalar([2.0, 4.0], 2.0) == [1.0, 2.0]


def test_div_scalar_zero():
    with pytest.raises(InvalidParameterError) as info:
        div_scalar([1.0, 2.0], 0.0)
    assert info.value.parameter == "scalar"
    assert info.value.reason == "division by zero"


def test_scalar_empty():
    with pytest.raises(InvalidInputError):
        add_scalar([], 1.0)
    with pytest.raises(InvalidInputError):
        mult_scalar([], 1.0)


def test_mismatched_other_ops():
    with pytest.raises(MismatchedInputsError):
        sub([1.0], [1.0, 2.0])
    with pytest.raises(MismatchedInputsError):
        mult([1.0], [1.0, 2.0])
    with pytest.raises(MismatchedInputsError):
        div([1.0], [1.0, 2.0])