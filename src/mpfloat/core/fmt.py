"""
String emission for engine values (display and round-trip I/O).

The digit string itself comes from the engine (`mpfr.digits(base)`); this
module only lays it out. Output always re-parses, at the same base and
precision, to the same value:

  1.5        -> '1.5'
  1e-30      -> '1e-30'
  255 (b16)  -> 'ff'
  2**100 (b16) -> '1@25'
"""

from __future__ import annotations

from typing import Optional

import gmpy2 as gmp

from .constants import DEFAULT_BASE
from .engine import validate_base
from .exc import ArgumentError

#: Radix-point positions rendered positionally; outside this window use scientific form.
POSITIONAL_MIN: int = -6
POSITIONAL_MAX: int = 21


def exponent_marker(base: int) -> str:
    """'e' is a digit above base 10, so wider bases use MPFR's '@' marker."""
    return "e" if base <= 10 else "@"


def layout_digits(digits: str, exp: int, base: int) -> str:
    """Lay out 0.<digits> * base**exp (digits may carry a leading '-')."""
    sign = ""
    if digits.startswith("-"):
        sign, digits = "-", digits[1:]
    digits = digits.rstrip("0") or "0"
    k = exp
    if POSITIONAL_MIN < k <= POSITIONAL_MAX:
        if k <= 0:
            body = "0." + "0" * (-k) + digits
        elif k >= len(digits):
            body = digits + "0" * (k - len(digits))
        else:
            body = digits[:k] + "." + digits[k:]
    else:
        body = digits[0]
        if len(digits) > 1:
            body += "." + digits[1:]
        body += f"{exponent_marker(base)}{k - 1}"
    return sign + body


def fmt_mpfr(x, base: int = DEFAULT_BASE, format_spec: Optional[str] = None) -> str:
    """Render an engine value in `base`, or through a Python format spec (base 10 only)."""
    base = validate_base(base)
    if format_spec:
        if base != 10:
            raise ArgumentError("format_spec is only supported for base 10")
        return format(x, format_spec)
    if gmp.is_nan(x):
        return "nan"
    if gmp.is_infinite(x):
        return "-inf" if gmp.is_signed(x) else "inf"
    if gmp.is_zero(x):
        return "-0" if gmp.is_signed(x) else "0"
    digits, exp, _ = x.digits(base)
    return layout_digits(digits, exp, base)


__all__ = [
    "POSITIONAL_MIN",
    "POSITIONAL_MAX",
    "exponent_marker",
    "layout_digits",
    "fmt_mpfr",
]
