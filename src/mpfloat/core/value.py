"""
BigFloat: a mutable, fluent floating-point value with an explicitly sized significand.

- Precision is set before any value is stored; storage is acquired lazily on the
  first value-touching call (`ensure_allocated`).
- Changing the precision of an instance that already holds storage erases its
  value (it becomes NaN). Use `with_precision` to re-round into a new instance.
- Instance methods mutate the receiver and return it, so calls chain:
  `x.neg().abs().rint()`.
- Python operators never mutate their operands. The result is a fresh instance
  at `combine(left.precision, right.precision)` (default: max).
- Comparisons with NaN never raise: `compare` reports 0, `is_not_comparable`
  reports True.
- `dispose()` releases storage exactly once; any later value access raises
  UseAfterDispose.

Every engine call goes through `engine`, with the rounding directive taken from
the call, then the instance override, then the bound or process-wide context.
"""

from __future__ import annotations

import operator
from decimal import Decimal
from fractions import Fraction
from typing import Optional, Tuple

import gmpy2 as gmp

from . import config, conversions, engine, storage
from .config import FloatContext, check_precision, check_rounding
from .constants import DEFAULT_BASE
from .exc import (
    ArgumentError,
    IncompatibleTypeError,
    UnsupportedConversion,
    UseAfterDispose,
)
from .fmt import fmt_mpfr
from .rounding import Rounding

# Debug printing control
DEBUG_VALUE = False

def _dbg(msg: str) -> None:
    if DEBUG_VALUE:
        print(msg)


# ----------------------------
# Engine helpers without a direct gmpy2 counterpart
# ----------------------------

def _dim(x, y):
    """Positive difference: x - y if x > y, +0 otherwise; NaN in -> NaN out."""
    if gmp.is_nan(x) or gmp.is_nan(y):
        return gmp.nan()
    if x > y:
        return gmp.sub(x, y)
    return gmp.zero(1)


def _round_away(x):
    """Ties-away integer rounding kept in mpfr form; NaN, infinities and zeros pass through."""
    if not gmp.is_regular(x):
        return x
    r = gmp.mpfr(gmp.round_away(x), precision=x.precision)
    if gmp.is_zero(r) and gmp.is_signed(x):
        return -abs(r)
    return r


def _check_order(n, what: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ArgumentError(f"{what} must be int, got {type(n).__name__}")
    return n


class BigFloat:
    """Arbitrary-precision binary floating-point value (see module docstring)."""

    __slots__ = ("_precision", "_storage", "_disposed", "_context", "_rounding")

    # Mutable value: not hashable.
    __hash__ = None

    # ------------- construction -------------

    def __init__(self, value=None, precision: Optional[int] = None, *,
                 base: int = DEFAULT_BASE,
                 context: Optional[FloatContext] = None,
                 rounding=None):
        if context is not None and not isinstance(context, FloatContext):
            raise ArgumentError("context must be a FloatContext")
        self._context = context
        self._rounding = None if rounding is None else check_rounding(rounding)
        self._storage = None
        self._disposed = False
        if precision is None:
            if isinstance(value, BigFloat):
                precision = value.precision
            else:
                precision = self._config().default_precision
        self._precision = check_precision(precision)
        if value is not None:
            self.set(value, base=base)

    @classmethod
    def create(cls, precision: Optional[int] = None, context: Optional[FloatContext] = None) -> "BigFloat":
        """Empty instance; no storage is acquired until first use."""
        return cls(None, precision, context=context)

    @classmethod
    def parse(cls, text: str, base: int = DEFAULT_BASE, precision: Optional[int] = None,
              context: Optional[FloatContext] = None) -> "BigFloat":
        if not isinstance(text, str):
            raise IncompatibleTypeError(f"parse expects str, got {type(text).__name__}")
        return cls(text, precision, base=base, context=context)

    # ------------- named values -------------

    @classmethod
    def nan(cls, precision=None, context=None) -> "BigFloat":
        return cls.create(precision, context).set_nan()

    @classmethod
    def infinity(cls, sign: int = 1, precision=None, context=None) -> "BigFloat":
        return cls.create(precision, context).set_inf(sign)

    @classmethod
    def positive_infinity(cls, precision=None, context=None) -> "BigFloat":
        return cls.infinity(1, precision, context)

    @classmethod
    def negative_infinity(cls, precision=None, context=None) -> "BigFloat":
        return cls.infinity(-1, precision, context)

    @classmethod
    def zero(cls, sign: int = 1, precision=None, context=None) -> "BigFloat":
        return cls.create(precision, context).set_zero(sign)

    @classmethod
    def positive_zero(cls, precision=None, context=None) -> "BigFloat":
        return cls.zero(1, precision, context)

    @classmethod
    def negative_zero(cls, precision=None, context=None) -> "BigFloat":
        return cls.zero(-1, precision, context)

    @classmethod
    def pi(cls, rounding=None, precision=None, context=None) -> "BigFloat":
        return cls.create(precision, context).set_pi(rounding)

    @classmethod
    def ln2(cls, rounding=None, precision=None, context=None) -> "BigFloat":
        return cls.create(precision, context).set_ln2(rounding)

    @classmethod
    def euler(cls, rounding=None, precision=None, context=None) -> "BigFloat":
        return cls.create(precision, context).set_euler(rounding)

    @classmethod
    def catalan(cls, rounding=None, precision=None, context=None) -> "BigFloat":
        return cls.create(precision, context).set_catalan(rounding)

    # ------------- configuration & lifecycle -------------

    def _config(self) -> FloatContext:
        return self._context if self._context is not None else config.get_context()

    def _resolve(self, rounding) -> Rounding:
        if rounding is not None:
            return check_rounding(rounding)
        if self._rounding is not None:
            return self._rounding
        return self._config().default_rounding

    def _check_alive(self, op: str) -> None:
        if self._disposed:
            raise UseAfterDispose(op)

    def ensure_allocated(self) -> storage.StorageHandle:
        """Acquire storage at the current precision if not yet held."""
        if self._disposed:
            raise UseAfterDispose("value access")
        if self._storage is None:
            self._storage = storage.allocate(self._precision)
        return self._storage

    @property
    def is_allocated(self) -> bool:
        return self._storage is not None

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def context(self) -> Optional[FloatContext]:
        """Bound context, or None when the process-wide context applies."""
        return self._context

    @property
    def rounding(self) -> Optional[Rounding]:
        """Per-instance rounding override (None: use the context default)."""
        return self._rounding

    @rounding.setter
    def rounding(self, rounding) -> None:
        self._check_alive("rounding")
        self._rounding = None if rounding is None else check_rounding(rounding)

    @property
    def precision(self) -> int:
        self._check_alive("precision")
        return self._precision

    @precision.setter
    def precision(self, precision: int) -> None:
        self.set_precision(precision)

    def set_precision(self, precision) -> "BigFloat":
        """Set the precision in bits (or copy it from another BigFloat).

        A different precision erases the held value; the same precision is a no-op.
        """
        self._check_alive("set_precision")
        if isinstance(precision, BigFloat):
            precision = precision.precision
        precision = check_precision(precision)
        if precision != self._precision:
            self._precision = precision
            if self._storage is not None:
                self._storage.resize(precision)
        return self

    def dispose(self) -> None:
        """Release storage. Idempotent."""
        if self._disposed:
            return
        if self._storage is not None:
            self._storage.release()
            self._storage = None
        self._disposed = True
        _dbg(f"BigFloat.dispose: {self._precision} bits")

    close = dispose

    def __enter__(self) -> "BigFloat":
        self._check_alive("__enter__")
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.dispose()
        return False

    # ------------- engine plumbing -------------

    def _value(self):
        return self.ensure_allocated().value

    def _assign(self, v) -> "BigFloat":
        self.ensure_allocated().value = v
        return self

    def _foreign(self, y):
        """Engine value for Decimal/Fraction: implicit conversion at the default precision."""
        p = self._config().default_precision
        r = self._resolve(None)
        if isinstance(y, Decimal):
            return engine.from_decimal(y, p, r)
        return engine.convert(y, p, r)

    def _operand(self, y):
        if y is None:
            raise ArgumentError("operand must not be None")
        if isinstance(y, BigFloat):
            return y._value()
        if isinstance(y, (int, float)):
            return engine.exact(y)
        if isinstance(y, (Decimal, Fraction)):
            return self._foreign(y)
        raise IncompatibleTypeError(f"unsupported operand type: {type(y).__name__}")

    def _apply(self, fn, *args, rounding=None) -> "BigFloat":
        """Replace the value with fn(value, *args) at this precision."""
        h = self.ensure_allocated()
        operands = [self._operand(a) for a in args]
        h.value = engine.compute(h.precision, self._resolve(rounding), fn, h.value, *operands)
        return self

    def _fill(self, fn, *args, rounding=None) -> "BigFloat":
        """Replace the value with fn(*args) (value-independent setters)."""
        h = self.ensure_allocated()
        h.value = engine.compute(h.precision, self._resolve(rounding), fn, *args)
        return self

    # ------------- setters -------------

    def set(self, value, rounding=None, base: int = DEFAULT_BASE) -> "BigFloat":
        """Overwrite the value, rounding it into the current precision."""
        if value is None:
            raise ArgumentError("value must not be None")
        h = self.ensure_allocated()
        r = self._resolve(rounding)
        p = h.precision
        if isinstance(value, BigFloat):
            h.value = engine.convert(value._value(), p, r)
        elif isinstance(value, str):
            h.value = engine.from_string(value, base, p, r)
        elif isinstance(value, Decimal):
            h.value = engine.from_decimal(value, p, r)
        elif isinstance(value, (int, float, Fraction)):
            h.value = engine.convert(value, p, r)
        else:
            raise IncompatibleTypeError(f"cannot set BigFloat from {type(value).__name__}")
        return self

    def set_nan(self) -> "BigFloat":
        return self._fill(gmp.nan)

    def set_inf(self, sign: int = 1) -> "BigFloat":
        return self._fill(gmp.inf, -1 if sign < 0 else 1)

    def set_zero(self, sign: int = 1) -> "BigFloat":
        return self._fill(gmp.zero, -1 if sign < 0 else 1)

    def set_pi(self, rounding=None) -> "BigFloat":
        return self._fill(gmp.const_pi, rounding=rounding)

    def set_ln2(self, rounding=None) -> "BigFloat":
        return self._fill(gmp.const_log2, rounding=rounding)

    def set_euler(self, rounding=None) -> "BigFloat":
        return self._fill(gmp.const_euler, rounding=rounding)

    def set_catalan(self, rounding=None) -> "BigFloat":
        return self._fill(gmp.const_catalan, rounding=rounding)

    def set_factorial(self, n: int, rounding=None) -> "BigFloat":
        """Set to n! rounded into this precision."""
        if _check_order(n, "n") < 0:
            raise ArgumentError(f"factorial of negative n={n}")
        return self._fill(lambda k: gmp.mpfr(gmp.factorial(k)), n, rounding=rounding)

    def set_zeta_int(self, n: int, rounding=None) -> "BigFloat":
        """Set to zeta(n) for a non-negative integer n."""
        if _check_order(n, "n") < 0:
            raise ArgumentError(f"zeta_int expects n >= 0, got {n}")
        return self._fill(lambda k: gmp.zeta(engine.exact(k)), n, rounding=rounding)

    def swap(self, other: "BigFloat") -> "BigFloat":
        """Exchange value and precision with `other`."""
        if not isinstance(other, BigFloat):
            raise ArgumentError("swap expects a BigFloat")
        self._check_alive("swap")
        other._check_alive("swap")
        self._storage, other._storage = other._storage, self._storage
        self._precision, other._precision = other._precision, self._precision
        return self

    # ------------- value-preserving copies -------------

    @staticmethod
    def _lvalue(x: "BigFloat", y: Optional["BigFloat"] = None) -> "BigFloat":
        """Fresh copy of x; with y, sized to the combined precision before x's value is stored."""
        result = BigFloat.create(x.precision, context=x._context)
        result._rounding = x._rounding
        if y is not None:
            combined = x._config().combine(x.precision, y.precision)
            _dbg(f"BigFloat._lvalue: combine({x.precision}, {y.precision}) -> {combined}")
            result.set_precision(combined)
        return result.set(x)

    def clone(self) -> "BigFloat":
        return BigFloat._lvalue(self)

    def with_precision(self, precision: int) -> "BigFloat":
        """New instance at `precision` holding this value rounded into it."""
        result = BigFloat.create(precision, context=self._context)
        result._rounding = self._rounding
        return result.set(self)

    # ------------- arithmetic (in place) -------------

    def neg(self, rounding=None) -> "BigFloat":
        return self._apply(operator.neg, rounding=rounding)

    def abs(self, rounding=None) -> "BigFloat":
        return self._apply(operator.abs, rounding=rounding)

    def add(self, y, rounding=None) -> "BigFloat":
        return self._apply(gmp.add, y, rounding=rounding)

    def sub(self, y, rounding=None) -> "BigFloat":
        return self._apply(gmp.sub, y, rounding=rounding)

    def mul(self, y, rounding=None) -> "BigFloat":
        return self._apply(gmp.mul, y, rounding=rounding)

    def div(self, y, rounding=None) -> "BigFloat":
        return self._apply(gmp.div, y, rounding=rounding)

    def pow(self, y, rounding=None) -> "BigFloat":
        return self._apply(operator.pow, y, rounding=rounding)

    def sqrt(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.sqrt, rounding=rounding)

    def rec_sqrt(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.rec_sqrt, rounding=rounding)

    def cbrt(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.cbrt, rounding=rounding)

    def root(self, n: int, rounding=None) -> "BigFloat":
        """n-th root (n >= 1)."""
        if _check_order(n, "n") < 1:
            raise ArgumentError(f"root order must be >= 1, got {n}")
        return self._apply(lambda v: gmp.rootn(v, n), rounding=rounding)

    def dim(self, y, rounding=None) -> "BigFloat":
        """Positive difference max(x - y, +0)."""
        return self._apply(_dim, y, rounding=rounding)

    def fmod(self, y, rounding=None) -> "BigFloat":
        """Remainder of x / y truncated toward zero (sign of x)."""
        return self._apply(gmp.fmod, y, rounding=rounding)

    def remainder(self, y, rounding=None) -> "BigFloat":
        """IEEE remainder: x - n*y with n = x / y rounded to nearest even."""
        return self._apply(gmp.remainder, y, rounding=rounding)

    # ------------- special functions (in place) -------------

    def ln(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.log, rounding=rounding)

    def log2(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.log2, rounding=rounding)

    def log10(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.log10, rounding=rounding)

    def log1p(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.log1p, rounding=rounding)

    def exp(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.exp, rounding=rounding)

    def exp2(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.exp2, rounding=rounding)

    def exp10(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.exp10, rounding=rounding)

    def expm1(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.expm1, rounding=rounding)

    def sin(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.sin, rounding=rounding)

    def cos(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.cos, rounding=rounding)

    def tan(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.tan, rounding=rounding)

    def sec(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.sec, rounding=rounding)

    def csc(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.csc, rounding=rounding)

    def cot(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.cot, rounding=rounding)

    def asin(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.asin, rounding=rounding)

    def acos(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.acos, rounding=rounding)

    def atan(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.atan, rounding=rounding)

    def atan2(self, x, rounding=None) -> "BigFloat":
        """Arc-tangent of self / x, using both signs for the quadrant."""
        return self._apply(gmp.atan2, x, rounding=rounding)

    def sinh(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.sinh, rounding=rounding)

    def cosh(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.cosh, rounding=rounding)

    def tanh(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.tanh, rounding=rounding)

    def sech(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.sech, rounding=rounding)

    def csch(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.csch, rounding=rounding)

    def coth(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.coth, rounding=rounding)

    def asinh(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.asinh, rounding=rounding)

    def acosh(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.acosh, rounding=rounding)

    def atanh(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.atanh, rounding=rounding)

    def eint(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.eint, rounding=rounding)

    def li2(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.li2, rounding=rounding)

    def gamma(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.gamma, rounding=rounding)

    def lngamma(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.lngamma, rounding=rounding)

    def lgamma(self, rounding=None) -> Tuple["BigFloat", int]:
        """Set to log|gamma(x)|; returns (self, sign of gamma(x))."""
        h = self.ensure_allocated()
        v, sign = engine.compute(h.precision, self._resolve(rounding), gmp.lgamma, h.value)
        h.value = v
        return self, int(sign)

    def digamma(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.digamma, rounding=rounding)

    def zeta(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.zeta, rounding=rounding)

    def erf(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.erf, rounding=rounding)

    def erfc(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.erfc, rounding=rounding)

    def j0(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.j0, rounding=rounding)

    def j1(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.j1, rounding=rounding)

    def jn(self, n: int, rounding=None) -> "BigFloat":
        _check_order(n, "n")
        return self._apply(lambda v: gmp.jn(n, v), rounding=rounding)

    def y0(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.y0, rounding=rounding)

    def y1(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.y1, rounding=rounding)

    def yn(self, n: int, rounding=None) -> "BigFloat":
        _check_order(n, "n")
        return self._apply(lambda v: gmp.yn(n, v), rounding=rounding)

    def agm(self, y, rounding=None) -> "BigFloat":
        return self._apply(gmp.agm, y, rounding=rounding)

    def hypot(self, y, rounding=None) -> "BigFloat":
        return self._apply(gmp.hypot, y, rounding=rounding)

    def ai(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.ai, rounding=rounding)

    # ------------- integer and remainder related -------------
    # rint*: integer rounding follows the directive.
    # round_away/ceil/floor/trunc: fixed integer rounding, directive ignored.

    def rint(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.rint, rounding=rounding)

    def rint_ceil(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.rint_ceil, rounding=rounding)

    def rint_floor(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.rint_floor, rounding=rounding)

    def rint_trunc(self, rounding=None) -> "BigFloat":
        return self._apply(gmp.rint_trunc, rounding=rounding)

    def round_away(self) -> "BigFloat":
        """Nearest integer, halfway cases away from zero."""
        return self._apply(_round_away, rounding=Rounding.NEAREST)

    def ceil(self) -> "BigFloat":
        return self._apply(gmp.rint_ceil, rounding=Rounding.TOWARD_POSITIVE)

    def floor(self) -> "BigFloat":
        return self._apply(gmp.rint_floor, rounding=Rounding.TOWARD_NEGATIVE)

    def trunc(self) -> "BigFloat":
        return self._apply(gmp.rint_trunc, rounding=Rounding.TOWARD_ZERO)

    # math.floor/ceil/trunc and round() go through the engine, not float().

    def __floor__(self) -> int:
        return int(self.clone().floor())

    def __ceil__(self) -> int:
        return int(self.clone().ceil())

    def __trunc__(self) -> int:
        return int(self)

    def __round__(self, ndigits=None) -> int:
        """round(x): nearest integer, halfway cases away from zero."""
        if ndigits is not None:
            raise ArgumentError("round() with ndigits is not supported; use rint or with_precision")
        return int(self.clone().round_away())

    def frac(self, rounding=None) -> "BigFloat":
        """Fractional part, carrying the sign of x."""
        return self._apply(gmp.frac, rounding=rounding)

    def modf(self, rounding=None) -> Tuple["BigFloat", "BigFloat"]:
        """Return (fractional, integral) as two new instances at this precision.

        The receiver is left untouched.
        """
        src = self._value()
        p = self._precision
        r = self._resolve(rounding)
        fraction = BigFloat.create(p, context=self._context)
        integral = BigFloat.create(p, context=self._context)
        integral._assign(engine.compute(p, r, gmp.rint_trunc, src))
        if gmp.is_infinite(src):
            fraction._assign(engine.compute(p, r, gmp.zero, -1 if gmp.is_signed(src) else 1))
        else:
            fraction._assign(engine.compute(p, r, gmp.frac, src))
        return fraction, integral

    # ------------- comparison -------------

    def _comparand(self, other):
        """Engine value for a comparison operand, or None for unsupported types."""
        if isinstance(other, BigFloat):
            return other._value()
        if isinstance(other, (int, float)):
            return engine.exact(other)
        if isinstance(other, (Decimal, Fraction)):
            return self._foreign(other)
        return None

    def compare(self, y) -> int:
        """Three-way comparison; 0 when either side is NaN."""
        a = self._value()
        b = self._operand(y)
        if gmp.is_nan(a) or gmp.is_nan(b):
            return 0
        return int(gmp.cmp(a, b))

    def compare_abs(self, y) -> int:
        """Three-way comparison of magnitudes; 0 when either side is NaN."""
        a = self._value()
        b = self._operand(y)
        if gmp.is_nan(a) or gmp.is_nan(b):
            return 0
        return int(gmp.cmp_abs(a, b))

    def compare_to(self, other) -> int:
        """Ordering against an arbitrary object: None sorts below every value."""
        self._check_alive("compare_to")
        if other is None:
            return 1
        if other is self:
            return 0
        if self._comparand_type_ok(other):
            return self.compare(other)
        raise ArgumentError(f"the given value is not comparable: {type(other).__name__}")

    @staticmethod
    def _comparand_type_ok(other) -> bool:
        return isinstance(other, (BigFloat, int, float, Decimal, Fraction))

    def equals(self, other) -> bool:
        """compare_to(other) == 0; NaN therefore equals everything here."""
        self._check_alive("equals")
        if other is None:
            return False
        if other is self:
            return True
        if not self._comparand_type_ok(other):
            return False
        return self.compare_to(other) == 0

    def is_greater(self, y) -> bool:
        return self._value() > self._operand(y)

    def is_greater_or_equal(self, y) -> bool:
        return self._value() >= self._operand(y)

    def is_less(self, y) -> bool:
        return self._value() < self._operand(y)

    def is_less_or_equal(self, y) -> bool:
        return self._value() <= self._operand(y)

    def is_equal(self, y) -> bool:
        return self._value() == self._operand(y)

    def is_not_equal(self, y) -> bool:
        """Ordered and different (false when NaN is involved)."""
        return bool(gmp.is_lessgreater(self._value(), self._operand(y)))

    def is_not_comparable(self, y) -> bool:
        """Unordered: at least one side is NaN."""
        return bool(gmp.is_unordered(self._value(), self._operand(y)))

    def sign(self) -> int:
        v = self._value()
        if gmp.is_nan(v):
            return 0
        return int(gmp.sign(v))

    def is_positive(self) -> bool:
        return self.sign() > 0

    def is_negative(self) -> bool:
        return self.sign() < 0

    def is_signed(self) -> bool:
        """Sign bit set (true for -0 and -inf)."""
        return bool(gmp.is_signed(self._value()))

    def is_nan(self) -> bool:
        return bool(gmp.is_nan(self._value()))

    def is_infinity(self) -> bool:
        return bool(gmp.is_infinite(self._value()))

    def is_number(self) -> bool:
        """Neither NaN nor infinite."""
        return bool(gmp.is_finite(self._value()))

    def is_zero(self) -> bool:
        return bool(gmp.is_zero(self._value()))

    def is_regular(self) -> bool:
        """Finite and non-zero."""
        return bool(gmp.is_regular(self._value()))

    def is_integer(self) -> bool:
        return bool(gmp.is_integer(self._value()))

    def __eq__(self, other):
        c = self._comparand(other)
        if c is None:
            return NotImplemented
        return self._value() == c

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __lt__(self, other):
        c = self._comparand(other)
        if c is None:
            return NotImplemented
        return self._value() < c

    def __le__(self, other):
        c = self._comparand(other)
        if c is None:
            return NotImplemented
        return self._value() <= c

    def __gt__(self, other):
        c = self._comparand(other)
        if c is None:
            return NotImplemented
        return self._value() > c

    def __ge__(self, other):
        c = self._comparand(other)
        if c is None:
            return NotImplemented
        return self._value() >= c

    # ------------- operators (value-preserving) -------------

    def _coerce(self, other) -> Optional["BigFloat"]:
        """Implicit conversion of an operator operand (default precision for host numbers)."""
        if other is None:
            raise ArgumentError("operand must not be None")
        if isinstance(other, BigFloat):
            return other
        if isinstance(other, (int, float, Decimal, Fraction)):
            return BigFloat(other, context=self._context)
        return None

    def __pos__(self) -> "BigFloat":
        return BigFloat._lvalue(self)

    def __neg__(self) -> "BigFloat":
        return BigFloat._lvalue(self).neg()

    def __abs__(self) -> "BigFloat":
        return BigFloat._lvalue(self).abs()

    def incremented(self) -> "BigFloat":
        """x + 1 as a new instance."""
        return BigFloat._lvalue(self).add(1)

    def decremented(self) -> "BigFloat":
        """x - 1 as a new instance."""
        return BigFloat._lvalue(self).sub(1)

    def __add__(self, other):
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return BigFloat._lvalue(self, y).add(y)

    def __radd__(self, other):
        x = self._coerce(other)
        if x is None:
            return NotImplemented
        return BigFloat._lvalue(x, self).add(self)

    def __sub__(self, other):
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return BigFloat._lvalue(self, y).sub(y)

    def __rsub__(self, other):
        x = self._coerce(other)
        if x is None:
            return NotImplemented
        return BigFloat._lvalue(x, self).sub(self)

    def __mul__(self, other):
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return BigFloat._lvalue(self, y).mul(y)

    def __rmul__(self, other):
        x = self._coerce(other)
        if x is None:
            return NotImplemented
        return BigFloat._lvalue(x, self).mul(self)

    def __truediv__(self, other):
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return BigFloat._lvalue(self, y).div(y)

    def __rtruediv__(self, other):
        x = self._coerce(other)
        if x is None:
            return NotImplemented
        return BigFloat._lvalue(x, self).div(self)

    # % is the fractional part of the quotient, not the engine remainder.
    def __mod__(self, other):
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return BigFloat._lvalue(self, y).div(y).frac()

    def __rmod__(self, other):
        x = self._coerce(other)
        if x is None:
            return NotImplemented
        return BigFloat._lvalue(x, self).div(self).frac()

    def __pow__(self, other):
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return BigFloat._lvalue(self, y).pow(y)

    def __rpow__(self, other):
        x = self._coerce(other)
        if x is None:
            return NotImplemented
        return BigFloat._lvalue(x, self).pow(self)

    # ------------- conversions -------------

    def to_int8(self, rounding=None) -> int:
        return conversions.to_named_int(self._value(), self._resolve(rounding), "int8")

    def to_int16(self, rounding=None) -> int:
        return conversions.to_named_int(self._value(), self._resolve(rounding), "int16")

    def to_int32(self, rounding=None) -> int:
        return conversions.to_named_int(self._value(), self._resolve(rounding), "int32")

    def to_int64(self, rounding=None) -> int:
        return conversions.to_named_int(self._value(), self._resolve(rounding), "int64")

    def to_uint8(self, rounding=None) -> int:
        return conversions.to_named_int(self._value(), self._resolve(rounding), "uint8")

    def to_uint16(self, rounding=None) -> int:
        return conversions.to_named_int(self._value(), self._resolve(rounding), "uint16")

    def to_uint32(self, rounding=None) -> int:
        return conversions.to_named_int(self._value(), self._resolve(rounding), "uint32")

    def to_uint64(self, rounding=None) -> int:
        return conversions.to_named_int(self._value(), self._resolve(rounding), "uint64")

    def to_single(self, rounding=None) -> float:
        return conversions.to_float32(self._value(), self._resolve(rounding))

    def to_double(self, rounding=None) -> float:
        return conversions.to_float64(self._value(), self._resolve(rounding))

    def to_decimal(self, rounding=None) -> Decimal:
        """Exact fixed-point decimal output is not defined for this type."""
        self._check_alive("to_decimal")
        raise UnsupportedConversion("BigFloat -> Decimal conversion is not supported")

    def as_integer_ratio(self) -> Tuple[int, int]:
        return conversions.integer_ratio(self._value())

    def to_fraction(self) -> Fraction:
        num, den = self.as_integer_ratio()
        return Fraction(num, den)

    def to_type(self, target):
        """Convert to a host type: int, float, str, Fraction or BigFloat."""
        self._check_alive("to_type")
        if target is BigFloat:
            return self.clone()
        if target is bool:
            raise IncompatibleTypeError("BigFloat cannot be converted to bool")
        if target is int:
            return int(self)
        if target is float:
            return self.to_double()
        if target is str:
            return self.to_string()
        if target is Fraction:
            return self.to_fraction()
        if target is Decimal:
            return self.to_decimal()
        raise IncompatibleTypeError(
            f"BigFloat cannot be converted to {getattr(target, '__name__', target)!s}"
        )

    def __int__(self) -> int:
        return conversions.truncate(self._value())

    def __float__(self) -> float:
        return self.to_double()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------- string I/O -------------

    def to_string(self, base: int = DEFAULT_BASE, format_spec: Optional[str] = None) -> str:
        return fmt_mpfr(self._value(), base, format_spec)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.to_string()
        return self.to_string(format_spec=format_spec)

    def __repr__(self) -> str:
        if self._disposed:
            return "BigFloat(<disposed>)"
        if self._storage is None:
            return f"BigFloat(<unset>, precision={self._precision})"
        return f"BigFloat('{self.to_string()}', precision={self._precision})"

    # ------------- maintenance -------------

    @staticmethod
    def clear_cache() -> None:
        engine.clear_cache()


__all__ = [
    "BigFloat",
]
