from __future__ import annotations
import math
from typing import Literal, List, Dict, Any
from pydantic import BaseModel, Field

from payoff.calculators import Projection, as_loans, to_number
from payoff.presets import MIN_PAYMENT


class RuleResult(BaseModel):
    code: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def evaluate_rules(
    loans: list,
    monthly_budget,
    projection: Projection,
    min_payment: float = MIN_PAYMENT,
) -> List[RuleResult]:
    res: List[RuleResult] = []
    loans = as_loans(loans)

    if not loans:
        res.append(
            RuleResult(
                code="NO_LOANS",
                severity="warn",
                message="No loans entered; add a loan to see a payoff projection.",
            )
        )

    bad = [
        l.name or l.id
        for l in loans
        if not all(math.isfinite(v) for v in (l.amount, l.rate, l.payment))
    ]
    if bad:
        res.append(
            RuleResult(
                code="INVALID_INPUT",
                severity="critical",
                message="Some loan fields are not valid numbers; totals cannot be projected.",
                context={"loans": bad},
            )
        )

    negative = [
        l.name or l.id
        for l in loans
        if l.amount < 0 or l.rate < 0 or l.payment < 0
    ]
    if negative:
        res.append(
            RuleResult(
                code="NEGATIVE_VALUES",
                severity="warn",
                message="Some loans have a negative amount, rate or payment.",
                context={"loans": negative},
            )
        )

    if loans and projection.total_principal == 0:
        res.append(
            RuleResult(
                code="ZERO_PRINCIPAL",
                severity="info",
                message="Total principal is zero; average rate is shown as 0.00%.",
            )
        )

    budget = to_number(monthly_budget)
    if not math.isfinite(budget) or budget < min_payment:
        res.append(
            RuleResult(
                code="BUDGET_FLOORED",
                severity="info",
                message=f"Monthly payment below ${min_payment:,.0f}; the minimum is used instead.",
                context={"budget": budget, "minimum": min_payment},
            )
        )

    if projection.series_policy == "per_loan":
        months = projection.months_until_paid_off
        unpaid = [
            l.name or l.id
            for l in loans
            if l.amount - l.payment * months > 0
        ]
        if unpaid:
            res.append(
                RuleResult(
                    code="LOAN_NOT_PAID_IN_HORIZON",
                    severity="warn",
                    message="Some loans still carry a balance when the total budget would pay everything off.",
                    context={"loans": unpaid, "months": projection.months_until_paid_off},
                )
            )

    if projection.horizon_truncated:
        res.append(
            RuleResult(
                code="HORIZON_CAPPED",
                severity="warn",
                message=f"Payoff takes longer than {projection.horizon_months // 12} years; the chart and payoff date stop there.",
                context={"months": projection.months_until_paid_off, "shown": projection.horizon_months},
            )
        )

    loan_payments = sum(l.payment for l in loans)
    if loans and math.isfinite(loan_payments) and projection.effective_budget < loan_payments:
        res.append(
            RuleResult(
                code="BUDGET_BELOW_LOAN_PAYMENTS",
                severity="info",
                message="Monthly payment is less than the sum of the individual loan payments.",
                context={"budget": projection.effective_budget, "loan_payments": loan_payments},
            )
        )

    return res


def has_blocking(res: List[RuleResult]) -> bool:
    return any(r.severity == "critical" for r in res)
