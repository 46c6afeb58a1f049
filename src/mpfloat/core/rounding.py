"""
Rounding directives passed to every engine call that can round.

Values are the engine's own rounding constants, so a `Rounding` member can be
handed to `gmpy2.context(round=...)` as-is.
"""

from __future__ import annotations

from enum import Enum

import gmpy2

from .exc import ArgumentError


class Rounding(Enum):
    """IEEE-754 style rounding directive."""

    NEAREST = gmpy2.RoundToNearest          # ties to even
    TOWARD_ZERO = gmpy2.RoundToZero
    TOWARD_POSITIVE = gmpy2.RoundUp
    TOWARD_NEGATIVE = gmpy2.RoundDown
    AWAY_FROM_ZERO = gmpy2.RoundAwayZero

    @classmethod
    def parse(cls, name: str) -> "Rounding":
        """Resolve a directive from its member name or long descriptive name.

        Accepts e.g. "NEAREST", "nearest", "NearestTiesToEven", "TowardZero".
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ArgumentError(f"rounding name must be str, got {type(name).__name__}")
        key = name.strip()
        member = cls.__members__.get(key.upper())
        if member is not None:
            return member
        member = _LONG_NAMES.get(key.replace("_", "").lower())
        if member is None:
            raise ArgumentError(f"unknown rounding directive: {name!r}")
        return member


_LONG_NAMES = {
    "nearesttiestoeven": Rounding.NEAREST,
    "tonearest": Rounding.NEAREST,
    "towardzero": Rounding.TOWARD_ZERO,
    "zero": Rounding.TOWARD_ZERO,
    "towardpositive": Rounding.TOWARD_POSITIVE,
    "up": Rounding.TOWARD_POSITIVE,
    "towardnegative": Rounding.TOWARD_NEGATIVE,
    "down": Rounding.TOWARD_NEGATIVE,
    "awayfromzero": Rounding.AWAY_FROM_ZERO,
}


__all__ = [
    "Rounding",
]
