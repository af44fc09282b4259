import pytest

from stlkit.compute import (
    NumKind,
    average,
    average_as,
    count,
    count_if,
    sum_as,
    sum_of,
)
from stlkit.generate import range_of

POS = [1, 2, 3, 4, 5]
NEG = [-1, -2, -3, -4, -5]
MIX = [1, -2, 3, -4, 5]


def is_negative(n):
    return n < 0


def test_sum_as_small_to_int():
    assert sum_as(range_of(1, 101), NumKind.INT) == 5050


def test_sum_as_int_to_uint8_wraps():
    assert sum_as(range_of(1, 101), NumKind.UINT8) == 5050 % 256


def test_sum_as_int_to_float64():
    result = sum_as(range_of(1, 101), NumKind.FLOAT64)
    assert result == 5050.0
    assert isinstance(result, float)


def test_sum_as_float_to_int_truncates():
    assert sum_as(range_of(1.1, 101.1), NumKind.INT) == 5060


def test_sum():
    assert sum_of(range_of(1, 101)) == 5050


def test_average():
    assert average(range_of(1, 101)) == 50


def test_average_as():
    assert average_as([1, 0], NumKind.FLOAT64) == 0.5


def test_average_unsigned_range():
    assert average(range_of(0, 101)) == 50


def test_average_float():
    assert average(range_of(0.0, 101.0)) == 50.0


def test_average_signed():
    assert average([-2, 1, -1, 2, 1, -1, 0]) == 0


def test_average_truncates_toward_zero():
    assert average([-3, 0]) == -1
    assert average_as([-3, 0], NumKind.INT) == -1


def test_average_empty_integer_raises():
    with pytest.raises(ZeroDivisionError):
        average([])
    with pytest.raises(ZeroDivisionError):
        average_as([], NumKind.INT)


def test_count():
    assert count([1, 2, 3, 4, 3], 3) == 2
    assert count_if(POS, is_negative) == 0
    assert count_if(NEG, is_negative) == 5
    assert count_if(MIX, is_negative) == 2


@pytest.mark.parametrize("kind", list(NumKind))
def test_convert_is_idempotent(kind):
    once = NumKind.convert(kind, 5050)
    assert NumKind.convert(kind, once) == once


def test_convert_uint8_wraps():
    assert NumKind.convert(NumKind.UINT8, 5050) == 5050 % 256