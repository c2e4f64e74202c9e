import math
from datetime import date

import pytest

from payoff.calculators import (
    add_months,
    aggregate_series,
    effective_budget,
    month_labels,
    months_until_paid_off,
    payoff_order,
    per_loan_series,
    project,
    schedule_frame,
    to_number,
    total_interest,
    weighted_average_rate,
)
from payoff.models import Loan

TODAY = date(2026, 1, 15)


def _loan(lid, amount, rate, payment=0.0, name=None):
    return Loan(id=lid, name=name or f"Loan {lid}", amount=amount, rate=rate, payment=payment)


def test_single_loan_scenario():
    p = project([_loan("1", 10000, 5.0)], 500, today=TODAY)
    assert p.total_principal == 10000
    assert p.weighted_average_rate == pytest.approx(5.0)
    assert p.months_until_paid_off == 20
    assert round(p.total_interest, 2) == 833.33
    assert p.paid_off_date == date(2027, 9, 15)


def test_two_loan_weighted_rate():
    p = project([_loan("a", 6000, 4.0), _loan("b", 4000, 8.0)], 500, today=TODAY)
    assert p.total_principal == 10000
    assert round(p.weighted_average_rate, 2) == 5.60


def test_weighted_rate_between_min_and_max():
    loans = [_loan("a", 1200, 3.5), _loan("b", 50, 19.9), _loan("c", 8000, 6.25)]
    rate = weighted_average_rate(loans)
    assert 3.5 <= rate <= 19.9


def test_empty_loan_set_does_not_crash():
    p = project([], 500, today=TODAY)
    assert p.total_principal == 0
    assert p.weighted_average_rate == 0.0
    assert p.months_until_paid_off == 0
    assert p.total_interest == 0.0
    assert p.paid_off_date == TODAY
    assert p.labels == ["Jan 26"]
    assert p.series == []
    assert p.is_finite


def test_zero_budget_uses_floor():
    assert effective_budget(0) == 10
    assert months_until_paid_off(10000, 0) == 1000
    assert months_until_paid_off(10005, 0) == 1001


@pytest.mark.parametrize("total,budget", [(1, 500), (999.99, 10), (250000, 2000), (7, 3)])
def test_months_is_ceiling_of_floored_budget(total, budget):
    months = months_until_paid_off(total, budget)
    assert months == math.ceil(total / max(budget, 10))
    assert months >= 1


def test_non_positive_total_has_no_horizon():
    assert months_until_paid_off(0, 500) == 0
    assert months_until_paid_off(-500, 500) == 0
    assert months_until_paid_off(math.nan, 500) == 0


def test_add_months_clamps_day():
    assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
    assert add_months(date(2026, 11, 30), 3) == date(2027, 2, 28)


def test_month_labels_start_at_current_month():
    assert month_labels(3, date(2026, 11, 2)) == ["Nov 26", "Dec 26", "Jan 27", "Feb 27"]


def test_aggregate_series_ends_at_zero():
    s = aggregate_series(10000, 300, months_until_paid_off(10000, 300))
    assert len(s.data) == 35
    assert s.data[0] == 10000
    assert s.data[-1] == 0
    assert s.name == "Principal Remaining"


def test_per_loan_series_share_horizon():
    loans = [_loan("a", 1000, 5.0, payment=500), _loan("b", 1000, 5.0, payment=100)]
    series = per_loan_series(loans, 4)
    assert [s.loan_id for s in series] == ["a", "b"]
    assert series[0].data == [1000, 500, 0, 0, 0]
    assert series[1].data == [1000, 900, 800, 700, 600]


def test_project_series_policies():
    loans = [_loan("a", 6000, 4.0, payment=300), _loan("b", 4000, 8.0, payment=200)]
    per_loan = project(loans, 500, today=TODAY)
    total = project(loans, 500, series_policy="aggregate", today=TODAY)
    assert len(per_loan.series) == 2
    assert len(total.series) == 1
    assert len(total.labels) == total.months_until_paid_off + 1 == 21
    with pytest.raises(ValueError):
        project(loans, 500, series_policy="stacked")


def test_strategy_changes_order_not_figures():
    loans = [
        _loan("small", 500, 3.0),
        _loan("big", 9000, 12.0),
        _loan("mid", 2000, 7.0),
    ]
    avalanche = project(loans, 400, strategy="avalanche", today=TODAY)
    snowball = project(loans, 400, strategy="snowball", today=TODAY)
    assert avalanche.payoff_order == ["big", "mid", "small"]
    assert snowball.payoff_order == ["small", "mid", "big"]
    a = avalanche.model_dump(exclude={"strategy", "payoff_order"})
    b = snowball.model_dump(exclude={"strategy", "payoff_order"})
    assert a == b


def test_payoff_order_puts_nan_last_and_rejects_unknown():
    loans = [_loan("x", math.nan, math.nan), _loan("y", 10, 1.0)]
    assert payoff_order(loans, "avalanche") == ["y", "x"]
    assert payoff_order(loans, "snowball") == ["y", "x"]
    with pytest.raises(ValueError):
        payoff_order(loans, "highest_balance")


def test_invalid_input_propagates_nan():
    p = project([{"id": "1", "name": "Bad", "amount": math.nan, "rate": 5.0, "payment": 0}], 500, today=TODAY)
    assert math.isnan(p.total_principal)
    assert math.isnan(p.weighted_average_rate)
    assert math.isnan(p.total_interest)
    assert p.months_until_paid_off == 0
    assert not p.is_finite


def test_to_number():
    assert to_number("12.5") == 12.5
    assert to_number("") == 0.0
    assert to_number("  ") == 0.0
    assert to_number(7) == 7.0
    assert math.isnan(to_number("12abc"))


def test_total_interest_flat_rate():
    assert total_interest(12000, 6.0, 12) == pytest.approx(720.0)


def test_schedule_frame_columns():
    loans = [_loan("a", 300, 5.0, payment=100, name="Car"), _loan("b", 200, 5.0, payment=100, name="Car")]
    p = project(loans, 100, today=TODAY)
    df = schedule_frame(p)
    assert list(df.columns) == ["Month", "Car", "Car (b)"]
    assert len(df) == p.months_until_paid_off + 1
    assert df["Car"].iloc[-1] == 0


def test_horizon_at_cap_is_not_truncated():
    p = project([_loan("1", 12000, 5.0)], 0, today=TODAY)
    assert p.months_until_paid_off == 1200
    assert p.horizon_months == 1200
    assert not p.horizon_truncated
    assert len(p.labels) == 1201
    assert p.paid_off_date == date(2126, 1, 15)


def test_horizon_past_cap_is_truncated():
    loans = [_loan("1", 1_000_000, 5.0, payment=0.0, name="House")]
    p = project(loans, 0, today=TODAY)
    assert p.months_until_paid_off == 100000
    assert p.horizon_months == 1200
    assert p.horizon_truncated
    assert p.paid_off_date == date(2126, 1, 15)
    assert len(p.labels) == 1201
    assert len(p.series[0].data) == 1201
    assert p.total_interest == pytest.approx(1_000_000 * 0.05 * 100000 / 12)


def test_enormous_amount_stays_bounded():
    p = project([_loan("1", 1e12, 5.0)], 0, series_policy="aggregate", today=TODAY)
    assert p.horizon_truncated
    assert len(p.series[0].data) == 1201
