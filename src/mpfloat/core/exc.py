"""
Core exception types for mpfloat.core.

These are dependency-free and may be imported by all core modules.
NaN and unordered comparisons are reported as data (predicates), never raised.
"""

__all__ = [
    "ParseError",
    "IncompatibleTypeError",
    "InvalidCastError",
    "ArgumentError",
    "UnsupportedConversion",
    "UseAfterDispose",
]


class ParseError(Exception):
    """Raised when a numeral string is malformed for the requested base.

    Attributes
    ----------
    text : str
        The offending input.
    base : int
        The base the input was parsed against.
    """

    def __init__(self, text, base):
        super().__init__(f"invalid numeral {text!r} for base {base}")
        self.text = text
        self.base = base


class IncompatibleTypeError(Exception):
    """Raised when converting to, or operating with, an incompatible external type."""
    pass


InvalidCastError = IncompatibleTypeError


class ArgumentError(Exception):
    """Raised for a None operand or an out-of-domain argument (precision, base, comparand)."""
    pass


class UnsupportedConversion(Exception):
    """Raised for the exact fixed-point decimal conversion, which is not defined here."""
    pass


class UseAfterDispose(Exception):
    """Raised when a released instance is used."""

    def __init__(self, op: str = "operation"):
        super().__init__(f"{op} on a disposed BigFloat")
        self.op = op
