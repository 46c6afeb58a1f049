"""
mpfloat Core Constants
======================

Integer constants shared by the value layer: precision bounds, numeric bases,
integer conversion ranges and the IEEE binary32/binary64 envelopes used when
narrowing into host floats.
"""

# NOTE: PRECISION_MAX is whatever the linked MPFR build reports; everything else is fixed.

import gmpy2

# ---------------------------------------------------------------------------
# Precision (bits of significand)
# ---------------------------------------------------------------------------

#: Initial process-wide default precision; matches a double-precision significand.
DEFAULT_PRECISION: int = 53

#: Smallest precision accepted by the value layer.
PRECISION_MIN: int = 2

#: Largest precision the engine can allocate.
PRECISION_MAX: int = gmpy2.get_max_precision()


# ---------------------------------------------------------------------------
# Numeric bases for string I/O
# ---------------------------------------------------------------------------

BASE_MIN: int = 2
BASE_MAX: int = 62
DEFAULT_BASE: int = 10


# ---------------------------------------------------------------------------
# Integer conversion targets (two's complement widths)
# ---------------------------------------------------------------------------

INT8_MIN: int = -(2 ** 7)
INT8_MAX: int = 2 ** 7 - 1
INT16_MIN: int = -(2 ** 15)
INT16_MAX: int = 2 ** 15 - 1
INT32_MIN: int = -(2 ** 31)
INT32_MAX: int = 2 ** 31 - 1
INT64_MIN: int = -(2 ** 63)
INT64_MAX: int = 2 ** 63 - 1

UINT8_MAX: int = 2 ** 8 - 1
UINT16_MAX: int = 2 ** 16 - 1
UINT32_MAX: int = 2 ** 32 - 1
UINT64_MAX: int = 2 ** 64 - 1


# ---------------------------------------------------------------------------
# IEEE 754 envelopes (MPFR exponent convention: value = 0.m * 2^e)
# ---------------------------------------------------------------------------

FLOAT32_PRECISION: int = 24
FLOAT32_EMIN: int = -148
FLOAT32_EMAX: int = 128

FLOAT64_PRECISION: int = 53
FLOAT64_EMIN: int = -1073
FLOAT64_EMAX: int = 1024


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "DEFAULT_PRECISION",
    "PRECISION_MIN",
    "PRECISION_MAX",
    "BASE_MIN",
    "BASE_MAX",
    "DEFAULT_BASE",
    "INT8_MIN",
    "INT8_MAX",
    "INT16_MIN",
    "INT16_MAX",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "UINT8_MAX",
    "UINT16_MAX",
    "UINT32_MAX",
    "UINT64_MAX",
    "FLOAT32_PRECISION",
    "FLOAT32_EMIN",
    "FLOAT32_EMAX",
    "FLOAT64_PRECISION",
    "FLOAT64_EMIN",
    "FLOAT64_EMAX",
]
