import decimal
from decimal import Decimal

import pytest

from planner_core.domain.amount import AMOUNT_CONTEXT, format_amount, plain_string, to_amount
from planner_core.domain.models import CashFlowEvent, EventCategory, Frequency
from planner_core.services.events import apply_events, classify_events, net_amount
from planner_core.services.rates import monthly_rate


def _event(amount, category="INCOME", frequency="MONTHLY", description=""):
    return CashFlowEvent(
        amount=Decimal(amount),
        category=EventCategory(category),
        frequency=Frequency(frequency),
        description=description,
    )


def test_monthly_rate_is_zero_for_zero_annual_rate():
    assert monthly_rate(0) == 0


@pytest.mark.parametrize("annual_rate", [1, 4, "7.3", 10, 25])
def test_twelve_months_of_compounding_reproduce_annual_rate(annual_rate):
    m = monthly_rate(annual_rate)
    with decimal.localcontext(AMOUNT_CONTEXT):
        annual = (1 + m) ** 12
        expected = 1 + Decimal(str(annual_rate)) / 100
        assert abs(annual - expected) < Decimal("1e-25")


def test_monthly_rate_is_decimal_and_increases_with_annual_rate():
    low, high = monthly_rate(4), monthly_rate(10)
    assert isinstance(low, Decimal)
    assert 0 < low < high
    # Effective monthly rate is below the nominal annual/12 split.
    assert low < Decimal(4) / 100 / 12


def test_monthly_rate_accepts_float_without_binary_noise():
    assert monthly_rate(7.3) == monthly_rate("7.3")


def test_classify_events_preserves_input_order_per_bucket():
    events = [
        _event(1, frequency="MONTHLY", description="a"),
        _event(2, frequency="UNIQUE", description="b"),
        _event(3, frequency="ANNUAL", description="c"),
        _event(4, frequency="MONTHLY", description="d"),
        _event(5, frequency="UNIQUE", description="e"),
    ]
    buckets = classify_events(events)

    assert [e.description for e in buckets.unique] == ["b", "e"]
    assert [e.description for e in buckets.monthly] == ["a", "d"]
    assert [e.description for e in buckets.annual] == ["c"]
    assert len(buckets.unique) + len(buckets.monthly) + len(buckets.annual) == len(events)
    assert classify_events(events) == buckets


def test_classify_events_empty():
    buckets = classify_events([])
    assert buckets.unique == [] and buckets.monthly == [] and buckets.annual == []


def test_net_amount_signs_income_and_expense():
    events = [_event("1000.50", "INCOME"), _event("300.25", "EXPENSE"), _event(0, "EXPENSE")]
    assert net_amount(events) == Decimal("700.25")
    assert net_amount([]) == 0
    assert apply_events(Decimal(-100), events) == Decimal("600.25")


def test_to_amount_conversions():
    assert to_amount(0.1) == Decimal("0.1")
    assert to_amount(" 12.50 ") == Decimal("12.50")
    assert to_amount(7) == Decimal(7)
    with pytest.raises(ValueError):
        to_amount("abc")
    with pytest.raises(ValueError):
        to_amount(float("nan"))
    with pytest.raises(TypeError):
        to_amount(True)


def test_amount_rendering():
    assert plain_string(Decimal("10.0")) == "10"
    assert plain_string(Decimal("1E+2")) == "100"
    assert plain_string(Decimal("-0.50")) == "-0.5"
    assert plain_string(Decimal("0E-33")) == "0"
    assert format_amount(Decimal("1.005")) == "1.01"
    assert format_amount(Decimal("-5000")) == "-5000.00"
