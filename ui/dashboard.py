import streamlit as st
import pandas as pd

from core.rules import RuleResult
from core.utils import fmt_currency, fmt_payoff_date, fmt_pct
from payoff.calculators import Projection, as_loans
from payoff.presets import STRATEGIES


def render_summary(projection: Projection) -> None:
    """Render the four headline figures."""
    cols = st.columns(4)
    cols[0].metric("Principal Remaining", fmt_currency(projection.total_principal, 0))
    cols[0].caption("Total amount left to pay")
    cols[1].metric("Paid Off Date", fmt_payoff_date(projection))
    cols[1].caption(f"{projection.months_until_paid_off} months to go")
    cols[2].metric("Total Interest", fmt_currency(projection.total_interest))
    cols[2].caption("Total interest paid")
    cols[3].metric("Average Rate", fmt_pct(projection.weighted_average_rate))
    cols[3].caption("Weighted average interest rate")


def render_warnings(rule_results: list[RuleResult]) -> None:
    for r in rule_results:
        if r.severity == "critical":
            st.error(f"[{r.code}] {r.message}")
        elif r.severity == "warn":
            st.warning(f"[{r.code}] {r.message}")
        else:
            st.info(f"[{r.code}] {r.message}")


def payoff_order_frame(projection: Projection, loans: list) -> pd.DataFrame:
    by_id = {l.id: l for l in as_loans(loans)}
    rows = [
        {
            "Priority": pos,
            "Loan": by_id[lid].name,
            "Amount": by_id[lid].amount,
            "Rate %": by_id[lid].rate,
        }
        for pos, lid in enumerate(projection.payoff_order, start=1)
    ]
    return pd.DataFrame(rows, columns=["Priority", "Loan", "Amount", "Rate %"])


def render_payoff_order(projection: Projection, loans: list) -> None:
    if not projection.payoff_order:
        return
    st.write(f"**Payoff order: {STRATEGIES[projection.strategy]}**")
    st.dataframe(payoff_order_frame(projection, loans), hide_index=True, use_container_width=True)
    st.caption("Strategy sets the order loans are targeted; the flat-rate estimates above do not depend on it.")
