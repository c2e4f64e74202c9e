import streamlit as st

from core.config import settings
from core.state import BUDGET_KEY, SERIES_POLICY_KEY, STRATEGY_KEY
from payoff import __version__
from payoff.presets import BUDGET_MIN, SERIES_POLICIES, STRATEGIES


def render_sidebar() -> None:
    """Strategy, monthly payment and chart controls, bound to session keys."""
    st.sidebar.header("Payment Strategy")
    st.sidebar.radio(
        "Payment Strategy",
        list(STRATEGIES.keys()),
        format_func=STRATEGIES.get,
        key=STRATEGY_KEY,
        label_visibility="collapsed",
    )
    st.sidebar.header("Monthly Payment")
    st.sidebar.slider(
        "Monthly Payment",
        min_value=BUDGET_MIN,
        max_value=settings.budget_max,
        step=settings.budget_step,
        key=BUDGET_KEY,
        format="$%d",
        label_visibility="collapsed",
    )
    st.sidebar.radio(
        "Chart",
        list(SERIES_POLICIES.keys()),
        format_func=SERIES_POLICIES.get,
        key=SERIES_POLICY_KEY,
        horizontal=True,
    )
    st.sidebar.caption(f"Loan Payoff v{__version__}")
