"""
Narrowing conversions from engine values into host numbers.

Integer targets follow the engine's get_si/get_ui conventions:
- the value is first rounded to an integer with the given directive;
- out-of-range results saturate at the target bounds (-inf/+inf included);
- NaN converts to 0.
Float targets round into the IEEE binary32/binary64 envelope: overflow goes to
+/-inf, tiny values become subnormal or zero as the directive dictates.
"""

from __future__ import annotations

from typing import Tuple

import gmpy2 as gmp

from . import engine
from .constants import (
    INT8_MIN, INT8_MAX, INT16_MIN, INT16_MAX, INT32_MIN, INT32_MAX, INT64_MIN, INT64_MAX,
    UINT8_MAX, UINT16_MAX, UINT32_MAX, UINT64_MAX,
    FLOAT32_PRECISION, FLOAT32_EMIN, FLOAT32_EMAX,
    FLOAT64_PRECISION, FLOAT64_EMIN, FLOAT64_EMAX,
)
from .exc import IncompatibleTypeError
from .rounding import Rounding

#: name -> (min, max)
INTEGER_RANGES = {
    "int8": (INT8_MIN, INT8_MAX),
    "int16": (INT16_MIN, INT16_MAX),
    "int32": (INT32_MIN, INT32_MAX),
    "int64": (INT64_MIN, INT64_MAX),
    "uint8": (0, UINT8_MAX),
    "uint16": (0, UINT16_MAX),
    "uint32": (0, UINT32_MAX),
    "uint64": (0, UINT64_MAX),
}


def to_bounded_int(x, rounding: Rounding, lo: int, hi: int) -> int:
    """Round to an integer and saturate into [lo, hi]; NaN -> 0."""
    if gmp.is_nan(x):
        return 0
    if gmp.is_infinite(x):
        return lo if gmp.is_signed(x) else hi
    n = engine.to_integer(x, rounding)
    if n < lo:
        return lo
    if n > hi:
        return hi
    return n


def to_named_int(x, rounding: Rounding, name: str) -> int:
    lo, hi = INTEGER_RANGES[name]
    return to_bounded_int(x, rounding, lo, hi)


def to_float32(x, rounding: Rounding) -> float:
    """Nearest binary32 value under `rounding`, returned as a host float (exactly representable)."""
    return engine.round_to_envelope(x, FLOAT32_PRECISION, FLOAT32_EMIN, FLOAT32_EMAX, rounding)


def to_float64(x, rounding: Rounding) -> float:
    return engine.round_to_envelope(x, FLOAT64_PRECISION, FLOAT64_EMIN, FLOAT64_EMAX, rounding)


def integer_ratio(x) -> Tuple[int, int]:
    """Exact (numerator, denominator) of a finite value."""
    if not gmp.is_finite(x):
        raise IncompatibleTypeError(f"cannot express {x} as an integer ratio")
    num, den = x.as_integer_ratio()
    return int(num), int(den)


def truncate(x) -> int:
    """Exact integer part (Python int() semantics); NaN and infinities are rejected."""
    if not gmp.is_finite(x):
        raise IncompatibleTypeError(f"cannot convert {x} to int")
    return engine.to_integer(x, Rounding.TOWARD_ZERO)


__all__ = [
    "INTEGER_RANGES",
    "to_bounded_int",
    "to_named_int",
    "to_float32",
    "to_float64",
    "integer_ratio",
    "truncate",
]
