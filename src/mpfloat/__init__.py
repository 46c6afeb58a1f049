"""
Top-level API for mpfloat.

This module exposes the stable interface of the value layer:
  - BigFloat: mutable, fluent arbitrary-precision binary float
  - Rounding: rounding directives
  - FloatContext and the process-wide default accessors
  - the error taxonomy and the engine cache maintenance call

Example:
    >>> from mpfloat import BigFloat
    >>> x = BigFloat(3, 64) / BigFloat(2, 64)
    >>> str(x)
    '1.5'
    >>> x.precision
    64
"""

from __future__ import annotations

from .core import (
    BigFloat,
    Rounding,
    FloatContext,
    get_context,
    set_context,
    local_context,
    get_default_rounding,
    set_default_rounding,
    get_default_precision,
    set_default_precision,
    get_precision_combiner,
    set_precision_combiner,
    clear_cache,
    ParseError,
    IncompatibleTypeError,
    InvalidCastError,
    ArgumentError,
    UnsupportedConversion,
    UseAfterDispose,
)

__version__ = "0.1.0"

__all__ = [
    "BigFloat",
    "Rounding",
    "FloatContext",
    "get_context",
    "set_context",
    "local_context",
    "get_default_rounding",
    "set_default_rounding",
    "get_default_precision",
    "set_default_precision",
    "get_precision_combiner",
    "set_precision_combiner",
    "clear_cache",
    "ParseError",
    "IncompatibleTypeError",
    "InvalidCastError",
    "ArgumentError",
    "UnsupportedConversion",
    "UseAfterDispose",
]
