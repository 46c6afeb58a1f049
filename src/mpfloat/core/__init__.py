"""
mpfloat Core
============

Unified exports for the value layer over the gmpy2 (MPFR) engine: the BigFloat
value type, rounding directives, process-wide defaults and the error taxonomy.
Numeric kernels belong to the engine; this package owns precision, storage
lifetime, operator semantics and the conversion/comparison contract.
"""

# NOTE:
#   `engine` is the only module that opens gmpy2 contexts for rounding work.
#   `storage` counts allocations so lazy acquisition can be observed in tests.

# Constants
from .constants import (
    DEFAULT_PRECISION,
    PRECISION_MIN,
    PRECISION_MAX,
    BASE_MIN,
    BASE_MAX,
    DEFAULT_BASE,
)

# Rounding directives
from .rounding import Rounding

# Process-wide defaults
from .config import (
    FloatContext,
    PrecisionCombiner,
    get_context,
    set_context,
    local_context,
    get_default_rounding,
    set_default_rounding,
    get_default_precision,
    set_default_precision,
    get_precision_combiner,
    set_precision_combiner,
)

# Storage handles
from .storage import StorageHandle, StorageStats

# Value type
from .value import BigFloat

# Engine maintenance
from .engine import clear_cache

# Core exceptions
from .exc import (
    ParseError,
    IncompatibleTypeError,
    InvalidCastError,
    ArgumentError,
    UnsupportedConversion,
    UseAfterDispose,
)

__all__ = [
    # constants
    "DEFAULT_PRECISION",
    "PRECISION_MIN",
    "PRECISION_MAX",
    "BASE_MIN",
    "BASE_MAX",
    "DEFAULT_BASE",
    # rounding
    "Rounding",
    # config
    "FloatContext",
    "PrecisionCombiner",
    "get_context",
    "set_context",
    "local_context",
    "get_default_rounding",
    "set_default_rounding",
    "get_default_precision",
    "set_default_precision",
    "get_precision_combiner",
    "set_precision_combiner",
    # storage
    "StorageHandle",
    "StorageStats",
    # value
    "BigFloat",
    # engine
    "clear_cache",
    # exceptions
    "ParseError",
    "IncompatibleTypeError",
    "InvalidCastError",
    "ArgumentError",
    "UnsupportedConversion",
    "UseAfterDispose",
]
