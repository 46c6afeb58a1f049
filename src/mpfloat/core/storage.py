"""
Storage handles: one engine value per live BigFloat.

- A handle is owned by exactly one BigFloat and is never aliased.
- Fresh storage holds NaN, as MPFR's init2 does.
- Resizing reallocates at the new precision and erases the value (back to NaN).
- Release happens at most once; a second release is a no-op.

Allocation and release are counted in `stats` so tests can observe when
storage is actually acquired.
"""

from __future__ import annotations

from dataclasses import dataclass

import gmpy2 as gmp

from . import engine

# Debug printing control
DEBUG_STORAGE = False

def _dbg(msg: str) -> None:
    if DEBUG_STORAGE:
        print(msg)


@dataclass
class StorageStats:
    allocated: int = 0
    released: int = 0

    @property
    def live(self) -> int:
        return self.allocated - self.released


stats = StorageStats()


def reset_stats() -> None:
    stats.allocated = 0
    stats.released = 0


class StorageHandle:
    """Exclusively owned engine cell sized to a precision."""

    __slots__ = ("_value", "_precision", "_released")

    def __init__(self, precision: int):
        self._precision = precision
        self._value = engine.nan(precision)
        self._released = False

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def released(self) -> bool:
        return self._released

    @property
    def value(self):
        if self._released:
            raise RuntimeError("storage handle read after release")
        return self._value

    @value.setter
    def value(self, v) -> None:
        if self._released:
            raise RuntimeError("storage handle written after release")
        if not isinstance(v, gmp.mpfr):
            raise TypeError(f"storage holds mpfr values only, got {type(v).__name__}")
        self._value = v

    def resize(self, precision: int) -> None:
        """Reallocate at `precision`; the held value is erased."""
        _dbg(f"storage.resize: {self._precision} -> {precision} bits (value erased)")
        self._precision = precision
        self._value = engine.nan(precision)

    def release(self) -> bool:
        """Drop the engine value. Returns False if already released."""
        if self._released:
            return False
        self._released = True
        self._value = None
        stats.released += 1
        _dbg(f"storage.release: {self._precision} bits (live={stats.live})")
        return True


def allocate(precision: int) -> StorageHandle:
    handle = StorageHandle(precision)
    stats.allocated += 1
    _dbg(f"storage.allocate: {precision} bits (live={stats.live})")
    return handle


__all__ = [
    "DEBUG_STORAGE",
    "StorageStats",
    "StorageHandle",
    "stats",
    "reset_stats",
    "allocate",
]
