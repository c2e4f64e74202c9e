from __future__ import annotations
import logging
import math
from datetime import date
from typing import Iterable, List, Optional, Union

import pandas as pd
from pydantic import BaseModel

from payoff.models import Loan
from payoff.presets import (
    AGGREGATE_SERIES_NAME,
    DEFAULT_SERIES_POLICY,
    DEFAULT_STRATEGY,
    MAX_MONTHS,
    MIN_PAYMENT,
    SERIES_POLICIES,
    STRATEGIES,
)

logger = logging.getLogger(__name__)

LoanLike = Union[Loan, dict]


class Series(BaseModel):
    name: str
    data: List[float]
    loan_id: Optional[str] = None


class Projection(BaseModel):
    total_principal: float
    weighted_average_rate: float
    effective_budget: float
    months_until_paid_off: int
    horizon_months: int
    horizon_truncated: bool
    paid_off_date: date
    total_interest: float
    labels: List[str]
    series: List[Series]
    strategy: str
    payoff_order: List[str]
    series_policy: str
    is_finite: bool


def as_loans(loans: Iterable[LoanLike]) -> List[Loan]:
    """Validate session dicts (or ``Loan`` instances) into ``Loan`` models."""

    return [l if isinstance(l, Loan) else Loan.model_validate(l) for l in loans]


def to_number(value) -> float:
    """Coerce form input to a float the way a browser number field would.

    Blank text counts as ``0``.  Text that does not parse becomes ``nan`` so
    that bad input is visible in every figure derived from it rather than
    silently replaced.
    """

    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        return 0.0
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan


def total_principal(loans: Iterable[Loan]) -> float:
    return float(sum(loan.amount for loan in loans))


def weighted_average_rate(loans: Iterable[Loan], total: Optional[float] = None) -> float:
    """Average annual rate weighted by each loan's share of total principal.

    Returns ``0.0`` when the total principal is zero, which covers the empty
    loan set as well as amounts that cancel out.
    """

    loans = list(loans)
    if total is None:
        total = total_principal(loans)
    if total == 0:
        return 0.0
    return float(sum(loan.rate * (loan.amount / total) for loan in loans))


def effective_budget(monthly_budget, min_payment: float = MIN_PAYMENT) -> float:
    """Floor the monthly budget at ``min_payment`` so it is always a safe divisor."""

    b = to_number(monthly_budget)
    if not math.isfinite(b):
        return float(min_payment)
    return max(b, float(min_payment))


def months_until_paid_off(total: float, monthly_budget, min_payment: float = MIN_PAYMENT) -> int:
    """Whole months needed to retire ``total`` at the floored budget.

    A horizon cannot be fractional or undefined, so a non-finite or
    non-positive total yields ``0``.
    """

    if not math.isfinite(total) or total <= 0:
        return 0
    return int(math.ceil(total / effective_budget(monthly_budget, min_payment)))


def chart_horizon(months: int, max_months: int = MAX_MONTHS) -> int:
    """Months actually dated and drawn; capped so labels and series stay bounded."""

    return min(months, max_months)


def add_months(start: date, months: int) -> date:
    """Calendar month arithmetic; the day clamps to the end of short months."""

    return (pd.Timestamp(start) + pd.DateOffset(months=int(months))).date()


def paid_off_date(months: int, today: Optional[date] = None) -> date:
    return add_months(today or date.today(), months)


def total_interest(total: float, rate_pct: float, months: int) -> float:
    """Flat-rate interest estimate over the payoff horizon.

    This is intentionally not an amortization schedule: interest accrues on the
    full starting principal for every month of the horizon.
    """

    return total * (rate_pct / 100) * months / 12


def month_labels(months: int, today: Optional[date] = None) -> List[str]:
    start = today or date.today()
    return [add_months(start, i).strftime("%b %y") for i in range(months + 1)]


def aggregate_series(total: float, monthly_budget, months: int, min_payment: float = MIN_PAYMENT) -> Series:
    b = effective_budget(monthly_budget, min_payment)
    data = [max(total - b * i, 0.0) for i in range(months + 1)]
    return Series(name=AGGREGATE_SERIES_NAME, data=data)


def per_loan_series(loans: Iterable[Loan], months: int) -> List[Series]:
    """One series per loan, each paid down by that loan's own payment.

    Every series spans the shared horizon, so a loan with a large payment
    flattens at zero early while one with a small payment may still carry a
    balance on the last point.
    """

    return [
        Series(
            name=loan.name,
            data=[max(loan.amount - loan.payment * i, 0.0) for i in range(months + 1)],
            loan_id=loan.id,
        )
        for loan in loans
    ]


def _sort_key(value: float, descending: bool):
    if not math.isfinite(value):
        return (1, 0.0)
    return (0, -value if descending else value)


def payoff_order(loans: Iterable[Loan], strategy: str = DEFAULT_STRATEGY) -> List[str]:
    """Loan ids in the order the strategy would target them.

    ``avalanche`` ranks by rate, highest first; ``snowball`` ranks by balance,
    smallest first.  Ties keep loan-set order and non-finite values go last.
    """

    if strategy not in STRATEGIES:
        raise ValueError(f"unknown payment strategy: {strategy!r}")
    loans = list(loans)
    if strategy == "avalanche":
        ranked = sorted(loans, key=lambda l: _sort_key(l.rate, descending=True))
    else:
        ranked = sorted(loans, key=lambda l: _sort_key(l.amount, descending=False))
    return [l.id for l in ranked]


def project(
    loans: Iterable[LoanLike],
    monthly_budget,
    *,
    strategy: str = DEFAULT_STRATEGY,
    series_policy: str = DEFAULT_SERIES_POLICY,
    today: Optional[date] = None,
    min_payment: float = MIN_PAYMENT,
) -> Projection:
    """Derive every summary figure and chart series from the loans and budget.

    All figures are recomputed from scratch; the total principal is derived
    once and reused by the rate, horizon and interest calculations.  Interest
    uses the full month count, while the payoff date, labels and series stop
    at ``MAX_MONTHS`` and ``horizon_truncated`` is set.
    """

    if series_policy not in SERIES_POLICIES:
        raise ValueError(f"unknown series policy: {series_policy!r}")
    loans = as_loans(loans)
    today = today or date.today()

    total = total_principal(loans)
    rate = weighted_average_rate(loans, total)
    budget = effective_budget(monthly_budget, min_payment)
    months = months_until_paid_off(total, budget, min_payment)
    interest = total_interest(total, rate, months)
    horizon = chart_horizon(months)

    if series_policy == "aggregate":
        series = [aggregate_series(total, budget, horizon, min_payment)]
    else:
        series = per_loan_series(loans, horizon)

    finite = all(
        math.isfinite(v)
        for l in loans
        for v in (l.amount, l.rate, l.payment)
    )
    logger.debug(
        "projection: %d loans, principal=%s rate=%s months=%d interest=%s",
        len(loans),
        total,
        rate,
        months,
        interest,
    )
    return Projection(
        total_principal=total,
        weighted_average_rate=rate,
        effective_budget=budget,
        months_until_paid_off=months,
        horizon_months=horizon,
        horizon_truncated=horizon < months,
        paid_off_date=paid_off_date(horizon, today),
        total_interest=interest,
        labels=month_labels(horizon, today),
        series=series,
        strategy=strategy,
        payoff_order=payoff_order(loans, strategy),
        series_policy=series_policy,
        is_finite=finite,
    )


def schedule_frame(projection: Projection) -> pd.DataFrame:
    """Tabulate the chart series by month for download."""

    data = {"Month": projection.labels}
    for s in projection.series:
        col = s.name or "Unnamed"
        if col in data:
            col = f"{col} ({s.loan_id})"
        data[col] = s.data
    return pd.DataFrame(data)
