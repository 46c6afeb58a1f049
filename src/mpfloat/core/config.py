"""
Process-wide defaults and the precision-combination policy.

A `FloatContext` bundles the default rounding directive, the default precision
and the optional precision-combination function. One context is installed as
the process-wide default; a `BigFloat` may instead be bound to its own context.
Every default-taking operation reads the context at call time, so changing a
default affects future operations but never rewrites existing instances.

Known hazard: the process-wide cell is a plain module global. Concurrent
writers racing with readers are not synchronised.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Callable, Iterator, Optional

from .constants import DEFAULT_PRECISION, PRECISION_MIN, PRECISION_MAX
from .exc import ArgumentError
from .rounding import Rounding

#: (left_precision, right_precision) -> result_precision
PrecisionCombiner = Callable[[int, int], int]


def check_precision(precision: int) -> int:
    """Validate a precision in bits and return it as int."""
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ArgumentError(f"precision must be int, got {type(precision).__name__}")
    if precision < PRECISION_MIN or precision > PRECISION_MAX:
        raise ArgumentError(
            f"precision out of range: {precision} (allowed {PRECISION_MIN}..{PRECISION_MAX})"
        )
    return precision


def check_rounding(rounding) -> Rounding:
    if isinstance(rounding, Rounding):
        return rounding
    if rounding is None:
        raise ArgumentError("rounding must not be None")
    return Rounding.parse(rounding)


@dataclass
class FloatContext:
    """Mutable default configuration consulted by value instances.

    Fields:
    - default_rounding: directive used when a call does not supply one.
    - default_precision: bits used when a construction does not supply one.
    - combine_precision: optional policy deciding a binary result's precision;
      None means max(left, right).
    """

    default_rounding: Rounding = Rounding.NEAREST
    default_precision: int = DEFAULT_PRECISION
    combine_precision: Optional[PrecisionCombiner] = None

    # Validation runs for dataclass __init__ assignments as well.
    def __setattr__(self, name, value):
        if name == "default_precision":
            value = check_precision(value)
        elif name == "default_rounding":
            value = check_rounding(value)
        elif name == "combine_precision" and value is not None and not callable(value):
            raise ArgumentError("combine_precision must be callable or None")
        super().__setattr__(name, value)

    def combine(self, left: int, right: int) -> int:
        """Result precision of a binary operation on operands of `left` and `right` bits."""
        op = self.combine_precision
        if op is None:
            return max(left, right)
        return check_precision(op(left, right))

    def copy(self, **overrides) -> "FloatContext":
        return replace(self, **overrides)


# ---------------------------------------------------------------------------
# Process-wide cell
# ---------------------------------------------------------------------------

_current: FloatContext = FloatContext()


def get_context() -> FloatContext:
    return _current


def set_context(ctx: FloatContext) -> FloatContext:
    """Install `ctx` as the process-wide context; returns the previous one."""
    global _current
    if not isinstance(ctx, FloatContext):
        raise ArgumentError("set_context expects a FloatContext")
    previous = _current
    _current = ctx
    return previous


@contextmanager
def local_context(**overrides) -> Iterator[FloatContext]:
    """Install a fresh context (initial defaults plus `overrides`) for the block."""
    ctx = FloatContext(**overrides)
    previous = set_context(ctx)
    try:
        yield ctx
    finally:
        set_context(previous)


def get_default_rounding() -> Rounding:
    return _current.default_rounding


def set_default_rounding(rounding) -> None:
    _current.default_rounding = rounding


def get_default_precision() -> int:
    return _current.default_precision


def set_default_precision(precision: int) -> None:
    _current.default_precision = precision


def get_precision_combiner() -> Optional[PrecisionCombiner]:
    return _current.combine_precision


def set_precision_combiner(op: Optional[PrecisionCombiner]) -> None:
    _current.combine_precision = op


__all__ = [
    "PrecisionCombiner",
    "FloatContext",
    "check_precision",
    "check_rounding",
    "get_context",
    "set_context",
    "local_context",
    "get_default_rounding",
    "set_default_rounding",
    "get_default_precision",
    "set_default_precision",
    "get_precision_combiner",
    "set_precision_combiner",
]
