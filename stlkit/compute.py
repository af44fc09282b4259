"""Numeric reductions over sequences."""

from __future__ import annotations

import math
import struct
from enum import Enum
from typing import Any, Callable, Iterable, Sequence, Union

Number = Union[int, float]


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class NumKind(Enum):
    """A fixed-width numeric type that a result is converted to."""

    INT8 = ("int8", 8, True, False)
    INT16 = ("int16", 16, True, False)
    INT32 = ("int32", 32, True, False)
    INT64 = ("int64", 64, True, False)
    INT = ("int", 64, True, False)
    UINT8 = ("uint8", 8, False, False)
    UINT16 = ("uint16", 16, False, False)
    UINT32 = ("uint32", 32, False, False)
    UINT64 = ("uint64", 64, False, False)
    UINT = ("uint", 64, False, False)
    UINTPTR = ("uintptr", 64, False, False)
    FLOAT32 = ("float32", 32, True, True)
    FLOAT64 = ("float64", 64, True, True)

    def __init__(self, label: str, bits: int, signed: bool, is_float: bool) -> None:
        self.label = label
        self.bits = bits
        self.signed = signed
        self.is_float = is_float

    def convert(self, value: Number) -> Number:
        """Convert a value to this kind, truncating and wrapping integers."""
        if self.is_float:
            return float(value) if self.bits == 64 else _to_float32(float(value))
        n = int(value) & ((1 << self.bits) - 1)
        if self.signed and n >> (self.bits - 1):
            n -= 1 << self.bits
        return n


def _is_float_sequence(a: Iterable[Number]) -> bool:
    return any(isinstance(v, float) for v in a)


def _accumulate(a: Sequence[Number]) -> Number:
    # Plain left-to-right addition, so float results match sequential summing.
    total: Number = 0.0 if _is_float_sequence(a) else 0
    for v in a:
        total += v
    return total


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def sum_as(a: Sequence[Number], kind: NumKind) -> Number:
    """Sum all elements and convert the total to ``kind``."""
    return kind.convert(_accumulate(a))


def sum_of(a: Sequence[Number]) -> Number:
    """Sum all elements."""
    return _accumulate(a)


def average_as(a: Sequence[Number], kind: NumKind) -> Number:
    """Return the average of ``a`` computed in ``kind``.

    Integer kinds use division truncated toward zero.
    """
    total = kind.convert(_accumulate(a))
    n = kind.convert(len(a))
    if kind.is_float:
        if n == 0:
            return math.nan if total == 0 else math.copysign(math.inf, total)
        return kind.convert(total / n)
    if n == 0:
        raise ZeroDivisionError("average of an empty sequence")
    return kind.convert(_trunc_div(int(total), int(n)))


def average(a: Sequence[Number]) -> Number:
    """Return the average of ``a``; integer input averages with truncation."""
    total = _accumulate(a)
    if isinstance(total, float):
        if not a:
            return math.nan
        return total / len(a)
    if not a:
        raise ZeroDivisionError("average of an empty sequence")
    return _trunc_div(total, len(a))


def count(a: Iterable[Any], x: Any) -> int:
    """Return the number of elements equal to ``x``."""
    return sum(1 for v in a if v == x)


def count_if(a: Iterable[Any], pred: Callable[[Any], bool]) -> int:
    """Return the number of elements for which ``pred`` is true."""
    return sum(1 for v in a if pred(v))