"""Engine adapter: every call into gmpy2 (MPFR) that can round goes through here.

Each call runs inside a fresh gmpy2 context carrying the target precision, an
explicit rounding directive and the widest exponent range the engine supports.
Traps are disabled: NaN, infinities and inexact results are data, not errors.
"""

from __future__ import annotations

from fractions import Fraction

import gmpy2 as gmp

from .constants import BASE_MIN, BASE_MAX, PRECISION_MIN
from .exc import ArgumentError, IncompatibleTypeError, ParseError
from .rounding import Rounding


def context(precision: int, rounding: Rounding, *, emin=None, emax=None, subnormalize=False):
    return gmp.context(
        precision=precision,
        round=rounding.value,
        emin=gmp.get_emin_min() if emin is None else emin,
        emax=gmp.get_emax_max() if emax is None else emax,
        subnormalize=subnormalize,
        trap_underflow=False,
        trap_overflow=False,
        trap_inexact=False,
        trap_invalid=False,
        trap_erange=False,
        trap_divzero=False,
    )


def compute(precision: int, rounding: Rounding, fn, *args):
    """Evaluate fn(*args) with results rounded to `precision` bits under `rounding`."""
    with context(precision, rounding):
        return fn(*args)


def nan(precision: int):
    """A NaN of the given precision (fresh storage content)."""
    with context(precision, Rounding.NEAREST):
        return gmp.nan()


def exact(x):
    """Exact engine operand for a Python int or float."""
    if isinstance(x, gmp.mpfr):
        return x
    if isinstance(x, int):
        return gmp.mpfr(x, precision=max(PRECISION_MIN, abs(x).bit_length()))
    if isinstance(x, float):
        return gmp.mpfr(x, precision=53)
    raise IncompatibleTypeError(f"no exact engine operand for {type(x).__name__}")


def convert(x, precision: int, rounding: Rounding):
    """Round a Python number (int, float, Fraction) into `precision` bits."""
    if isinstance(x, Fraction):
        x = gmp.mpq(x.numerator, x.denominator)
    elif isinstance(x, (int, float)):
        x = exact(x)
    with context(precision, rounding):
        return gmp.mpfr(x, precision=precision)


def validate_base(base: int) -> int:
    if isinstance(base, bool) or not isinstance(base, int):
        raise ArgumentError(f"base must be int, got {type(base).__name__}")
    if base < BASE_MIN or base > BASE_MAX:
        raise ArgumentError(f"base out of range: {base} (allowed {BASE_MIN}..{BASE_MAX})")
    return base


def from_string(text: str, base: int, precision: int, rounding: Rounding):
    """Parse `text` in `base`; malformed input raises ParseError."""
    validate_base(base)
    if not isinstance(text, str):
        raise IncompatibleTypeError(f"expected str, got {type(text).__name__}")
    s = text.strip()
    if not s:
        raise ParseError(text, base)
    with context(precision, rounding):
        try:
            return gmp.mpfr(s, precision=precision, base=base)
        except ValueError as e:
            raise ParseError(text, base) from e


def from_decimal(d, precision: int, rounding: Rounding):
    """Round a decimal.Decimal into `precision` bits; quiet and signaling NaN both map to NaN."""
    if d.is_nan():
        return nan(precision)
    return from_string(str(d), 10, precision, rounding)


def round_to_envelope(x, precision: int, emin: int, emax: int, rounding: Rounding) -> float:
    """Round into a fixed IEEE format (subnormals honoured, overflow to inf) and return a host float."""
    with context(precision, rounding, emin=emin, emax=emax, subnormalize=True):
        y = gmp.mpfr(x, precision=precision)
    return float(y)


def to_integer(x, rounding: Rounding):
    """Round a finite value to an integral Python int using `rounding`."""
    with context(max(PRECISION_MIN, x.precision), rounding):
        y = gmp.rint(x)
    return int(y)


def clear_cache() -> None:
    """Release the engine's per-thread constant caches.

    Call once per worker thread before it exits; skipping it only retains memory.
    """
    gmp.free_cache()


__all__ = [
    "context",
    "compute",
    "nan",
    "exact",
    "convert",
    "validate_base",
    "from_string",
    "from_decimal",
    "round_to_envelope",
    "to_integer",
    "clear_cache",
]
