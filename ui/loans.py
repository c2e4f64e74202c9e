import math

import streamlit as st

from core.state import (
    LOANS_KEY,
    add_loan_to_session,
    remove_loan_from_session,
    update_loan_in_session,
)

NUMBER_FIELDS = (
    ("amount", "Amount", 100.0),
    ("rate", "Interest Rate", 0.1),
    ("payment", "Monthly Payment", 10.0),
)


def render_loan_cards() -> None:
    head, btn = st.columns([3, 1])
    head.subheader("My Loans")
    if btn.button("Add Loan", key="add_loan"):
        add_loan_to_session()
    for loan in list(st.session_state[LOANS_KEY]):
        lid = loan["id"]
        # The name widget holds this run's edit before the loan dict does.
        label = st.session_state.get(f"loan_name_{lid}", loan["name"])
        with st.expander(label or "Unnamed loan", expanded=True):
            c1, c2 = st.columns([3, 1])
            name = c1.text_input("Name", value=loan["name"], key=f"loan_name_{lid}")
            if name != loan["name"]:
                update_loan_in_session(lid, "name", name)
            if c2.button("Remove", key=f"loan_remove_{lid}"):
                remove_loan_from_session(lid)
                st.rerun()
            cols = st.columns(len(NUMBER_FIELDS))
            for col, (field, label, step) in zip(cols, NUMBER_FIELDS):
                current = float(loan[field])
                v = col.number_input(
                    label,
                    value=current if math.isfinite(current) else None,
                    step=step,
                    key=f"loan_{field}_{lid}",
                )
                if v is not None and v != current:
                    update_loan_in_session(lid, field, v)
