import logging

import streamlit as st

from core.config import settings
from core.rules import evaluate_rules
from core.state import (
    BUDGET_KEY,
    LOANS_KEY,
    SERIES_POLICY_KEY,
    STRATEGY_KEY,
    init_state,
)
from payoff.calculators import project
from payoff.presets import DISCLAIMER
from ui.chart import render_payoff_chart
from ui.dashboard import render_payoff_order, render_summary, render_warnings
from ui.exports import render_exports
from ui.loans import render_loan_cards
from ui.sidebar import render_sidebar

logger = logging.getLogger(__name__)


def compute_results():
    """Project the current session loans and budget; also evaluate warnings."""
    ss = st.session_state
    loans = ss[LOANS_KEY]
    projection = project(
        loans,
        ss[BUDGET_KEY],
        strategy=ss[STRATEGY_KEY],
        series_policy=ss[SERIES_POLICY_KEY],
        min_payment=settings.min_payment,
    )
    rule_results = evaluate_rules(loans, ss[BUDGET_KEY], projection, settings.min_payment)
    return {"loans": loans, "projection": projection, "rule_results": rule_results}


def render_results_column() -> None:
    data = compute_results()
    projection = data["projection"]
    render_summary(projection)
    render_warnings(data["rule_results"])
    render_payoff_chart(projection)
    render_payoff_order(projection, data["loans"])
    st.divider()
    render_exports(projection, data["loans"], data["rule_results"])
    st.caption(DISCLAIMER)


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    st.set_page_config(page_title="Loan Payoff Calculator", layout="wide")
    init_state()
    render_sidebar()
    st.title("Loan Payoff Calculator")
    left, right = st.columns([1, 3])
    with left:
        render_loan_cards()
    with right:
        render_results_column()


if __name__ == "__main__":
    main()
