from __future__ import annotations
import io
from typing import List

from reportlab.lib.pagesizes import LETTER
from reportlab.lib import colors
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.styles import getSampleStyleSheet

from core.rules import RuleResult, has_blocking
from core.utils import fmt_currency, fmt_payoff_date, fmt_pct
from payoff.calculators import Projection, as_loans
from payoff.presets import DISCLAIMER, STRATEGIES

_GRID = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
    ("BOX", (0, 0), (-1, -1), 1, colors.black),
    ("INNERGRID", (0, 0), (-1, -1), 0.5, colors.grey),
])


def build_payoff_pdf(
    projection: Projection,
    loans: list,
    warnings: List[RuleResult],
    title: str = "Loan Payoff Summary",
) -> bytes:
    """Render the payoff summary, loan table and warnings to PDF bytes.

    Raises ``ValueError`` if any warning is critical, since the figures would
    be meaningless.
    """

    if has_blocking(warnings):
        raise ValueError("cannot export a payoff summary while critical warnings exist")

    loans = as_loans(loans)
    styles = getSampleStyleSheet()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=LETTER, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    story = [Paragraph(f"<b>{title}</b>", styles["Title"]), Spacer(1, 12)]

    summary_rows = [
        ["Summary", ""],
        ["Principal Remaining", fmt_currency(projection.total_principal, 0)],
        ["Paid Off Date", fmt_payoff_date(projection)],
        ["Months to Go", str(projection.months_until_paid_off)],
        ["Total Interest", fmt_currency(projection.total_interest)],
        ["Average Rate", fmt_pct(projection.weighted_average_rate)],
        ["Monthly Payment", fmt_currency(projection.effective_budget, 0)],
        ["Strategy", STRATEGIES.get(projection.strategy, projection.strategy)],
    ]
    t = Table(summary_rows, hAlign="LEFT", colWidths=[200, 320])
    t.setStyle(_GRID)
    story += [t, Spacer(1, 12)]

    if loans:
        by_id = {l.id: l for l in loans}
        rows = [["#", "Loan", "Amount", "Rate", "Payment"]]
        for pos, loan_id in enumerate(projection.payoff_order, start=1):
            l = by_id[loan_id]
            rows.append([str(pos), l.name, fmt_currency(l.amount), fmt_pct(l.rate), fmt_currency(l.payment)])
        t = Table(rows, hAlign="LEFT")
        t.setStyle(_GRID)
        story += [Paragraph("<b>Payoff Order</b>", styles["Heading3"]), Spacer(1, 6), t, Spacer(1, 12)]

    if warnings:
        w_rows = [["Code", "Severity", "Message"]] + [[w.code, w.severity, w.message] for w in warnings]
        t = Table(w_rows, hAlign="LEFT")
        t.setStyle(_GRID)
        story += [Paragraph("<b>Warnings</b>", styles["Heading3"]), Spacer(1, 6), t, Spacer(1, 12)]

    story += [Spacer(1, 12), Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles["Normal"])]
    doc.build(story)
    return buf.getvalue()
