import copy
import logging
from typing import Any

import streamlit as st

from core.config import settings
from payoff.loans import add_loan, remove_loan, update_loan_field
from payoff.presets import SEED_LOAN

logger = logging.getLogger(__name__)

# The loan set is owned by ``st.session_state["loans"]`` and only changes
# through the helpers below. Widgets bind to the scalar keys directly.
LOANS_KEY = "loans"
BUDGET_KEY = "monthly_budget"
STRATEGY_KEY = "payment_strategy"
SERIES_POLICY_KEY = "series_policy"


def init_state() -> None:
    """Seed session defaults on first run; existing values are left alone."""
    ss = st.session_state
    ss.setdefault(LOANS_KEY, [copy.deepcopy(SEED_LOAN)])
    ss.setdefault(BUDGET_KEY, settings.default_budget)
    ss.setdefault(STRATEGY_KEY, settings.default_strategy)
    ss.setdefault(SERIES_POLICY_KEY, settings.default_series_policy)


def add_loan_to_session() -> None:
    st.session_state[LOANS_KEY] = add_loan(st.session_state[LOANS_KEY])
    logger.debug("added loan %s", st.session_state[LOANS_KEY][-1]["id"])


def remove_loan_from_session(loan_id: str) -> None:
    st.session_state[LOANS_KEY] = remove_loan(st.session_state[LOANS_KEY], loan_id)
    logger.debug("removed loan %s", loan_id)


def update_loan_in_session(loan_id: str, field: str, value: Any) -> None:
    st.session_state[LOANS_KEY] = update_loan_field(
        st.session_state[LOANS_KEY], loan_id, field, value
    )
    logger.debug("loan %s: %s=%r", loan_id, field, value)
