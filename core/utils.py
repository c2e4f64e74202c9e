"""Assorted formatting helpers."""
import math

MISSING = "—"


def fmt_currency(value, decimals: int = 2) -> str:
    """Format ``value`` as dollars, or ``—`` when it is not a finite number."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return MISSING
    if not math.isfinite(v):
        return MISSING
    return f"${v:,.{decimals}f}"


def fmt_pct(value, decimals: int = 2) -> str:
    try:
        v = float(value)
    except (TypeError, ValueError):
        return MISSING
    if not math.isfinite(v):
        return MISSING
    return f"{v:.{decimals}f}%"


def fmt_payoff_date(projection) -> str:
    """Payoff month, prefixed with ``After`` when the horizon was cut short."""
    label = projection.paid_off_date.strftime("%b %Y")
    if projection.horizon_truncated:
        return f"After {label}"
    return label
