import streamlit as st

from core.rules import has_blocking
from export.pdf_export import build_payoff_pdf
from payoff.calculators import schedule_frame


def render_exports(projection, loans, rule_results) -> None:
    c1, c2 = st.columns(2)
    csv_bytes = schedule_frame(projection).to_csv(index=False).encode("utf-8")
    c1.download_button(
        "Download Schedule (CSV)",
        data=csv_bytes,
        file_name="payoff_schedule.csv",
        mime="text/csv",
    )
    if has_blocking(rule_results):
        c2.button("Download Summary (PDF)", disabled=True, key="pdf_disabled")
        c2.caption("Fix invalid loan values to enable the PDF summary.")
        return
    c2.download_button(
        "Download Summary (PDF)",
        data=build_payoff_pdf(projection, loans, rule_results),
        file_name="payoff_summary.pdf",
        mime="application/pdf",
    )
