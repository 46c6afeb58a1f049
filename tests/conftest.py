from __future__ import annotations
from typing import Iterator

import pytest

# Import project primitives
from mpfloat import BigFloat, FloatContext, local_context
from mpfloat.core import storage


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


def bf(x, precision: int = 64) -> BigFloat:
    """Build a BigFloat at an explicit precision (default 64 bits)."""
    return BigFloat(x, precision)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture(autouse=True)
def isolated_context() -> Iterator[FloatContext]:
    """Every test runs against fresh process-wide defaults and zeroed storage counters."""
    storage.reset_stats()
    with local_context() as ctx:
        yield ctx
    storage.reset_stats()


@pytest.fixture()
def stats() -> storage.StorageStats:
    return storage.stats


@pytest.fixture()
def three_and_two() -> tuple[BigFloat, BigFloat]:
    return bf(3), bf(2)
