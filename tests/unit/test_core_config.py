import pytest

from mpfloat import (
    BigFloat,
    FloatContext,
    Rounding,
    ArgumentError,
    get_context,
    set_context,
    local_context,
    get_default_precision,
    set_default_precision,
    get_default_rounding,
    set_default_rounding,
    get_precision_combiner,
    set_precision_combiner,
)


# -----------------------------
# Rounding directives
# -----------------------------

@pytest.mark.parametrize(
    "name,expected",
    [
        ("NEAREST", Rounding.NEAREST),
        ("nearest", Rounding.NEAREST),
        ("NearestTiesToEven", Rounding.NEAREST),
        ("TowardZero", Rounding.TOWARD_ZERO),
        ("toward_zero", Rounding.TOWARD_ZERO),
        ("TowardPositive", Rounding.TOWARD_POSITIVE),
        ("up", Rounding.TOWARD_POSITIVE),
        ("TowardNegative", Rounding.TOWARD_NEGATIVE),
        ("down", Rounding.TOWARD_NEGATIVE),
        ("AwayFromZero", Rounding.AWAY_FROM_ZERO),
        (Rounding.TOWARD_ZERO, Rounding.TOWARD_ZERO),
    ],
)
def test_rounding_parse(name, expected):
    assert Rounding.parse(name) is expected


@pytest.mark.parametrize("bad", ["sideways", "", 3, None])
def test_rounding_parse_rejects_unknown(bad):
    with pytest.raises(ArgumentError):
        Rounding.parse(bad)


# -----------------------------
# Process-wide defaults
# -----------------------------

def test_initial_defaults():
    assert get_default_precision() == 53
    assert get_default_rounding() is Rounding.NEAREST
    assert get_precision_combiner() is None


def test_default_precision_affects_future_instances_only():
    before = BigFloat(1)
    set_default_precision(100)
    after = BigFloat(1)
    print("[default-precision] before ->", before.precision, "; after ->", after.precision)
    assert before.precision == 53
    assert after.precision == 100


@pytest.mark.parametrize("bad", [1, 0, -1, 2.5, True, "53"])
def test_default_precision_validated(bad):
    with pytest.raises(ArgumentError):
        set_default_precision(bad)
    assert get_default_precision() == 53


def test_default_rounding_used_by_operations():
    set_default_rounding(Rounding.TOWARD_POSITIVE)
    up = BigFloat(1, 8).div(3)
    set_default_rounding("TowardNegative")
    down = BigFloat(1, 8).div(3)
    assert get_default_rounding() is Rounding.TOWARD_NEGATIVE
    assert down.is_less(up)


def test_default_rounding_validated():
    with pytest.raises(ArgumentError):
        set_default_rounding("bogus")
    with pytest.raises(ArgumentError):
        set_default_rounding(None)


def test_precision_combiner_round_trip():
    op = lambda a, b: min(a, b)  # noqa: E731
    set_precision_combiner(op)
    assert get_precision_combiner() is op
    assert (BigFloat(1, 16) + BigFloat(1, 64)).precision == 16
    set_precision_combiner(None)
    assert (BigFloat(1, 16) + BigFloat(1, 64)).precision == 64
    with pytest.raises(ArgumentError):
        set_precision_combiner(42)


def test_local_context_restores_previous():
    outer = get_context()
    with local_context(default_precision=200) as ctx:
        assert get_context() is ctx
        assert BigFloat(1).precision == 200
    assert get_context() is outer
    assert BigFloat(1).precision == 53


def test_local_context_restores_on_error():
    outer = get_context()
    with pytest.raises(RuntimeError):
        with local_context(default_precision=80):
            raise RuntimeError("boom")
    assert get_context() is outer


def test_set_context_returns_previous():
    mine = FloatContext(default_precision=77)
    previous = set_context(mine)
    try:
        assert BigFloat(1).precision == 77
    finally:
        set_context(previous)
    with pytest.raises(ArgumentError):
        set_context("not a context")


# -----------------------------
# Injected contexts
# -----------------------------

def test_bound_context_is_independent_of_process_default():
    ctx = FloatContext(default_precision=80)
    x = BigFloat(1, context=ctx)
    assert x.precision == 80
    assert x.context is ctx
    assert BigFloat(1).precision == 53
    ctx.default_precision = 90
    assert BigFloat.create(context=ctx).precision == 90
    assert x.precision == 80


def test_bound_context_governs_operator_results():
    ctx = FloatContext(combine_precision=lambda a, b: min(a, b))
    x = BigFloat(1, 80, context=ctx)
    z = x + BigFloat(2, 10)
    print("[bound-combine] min policy: 80 + 10 ->", z.precision)
    assert z.precision == 10
    assert z.context is ctx
    # Host operands are coerced at the bound context's default precision.
    assert (x + 1).precision == 53
    ctx.default_precision = 20
    assert (x + 1).precision == 20


def test_bound_context_rounding():
    ctx = FloatContext(default_rounding=Rounding.TOWARD_POSITIVE)
    up = BigFloat(1, 8, context=ctx).div(3)
    down = BigFloat(1, 8, context=FloatContext(default_rounding=Rounding.TOWARD_NEGATIVE)).div(3)
    assert down.is_less(up)


def test_context_copy_and_validation():
    ctx = FloatContext(default_precision=64)
    twin = ctx.copy(default_rounding="TowardZero")
    assert twin.default_precision == 64
    assert twin.default_rounding is Rounding.TOWARD_ZERO
    assert ctx.default_rounding is Rounding.NEAREST
    with pytest.raises(ArgumentError):
        FloatContext(default_precision=1)
    with pytest.raises(ArgumentError):
        BigFloat(1, context="ctx")


def test_combine_defaults_to_max():
    ctx = FloatContext()
    assert ctx.combine(10, 20) == 20
    assert ctx.combine(64, 64) == 64
