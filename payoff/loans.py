"""Loan set mutations.

Each operation returns a new list and leaves its input untouched.  None of them
validate amounts or rates; whatever the user typed is carried into the
projection.
"""
from __future__ import annotations
import uuid
from typing import Any, Dict, List

from payoff.calculators import to_number
from payoff.models import EDITABLE_FIELDS, NUMERIC_FIELDS, Loan


def new_loan_id() -> str:
    return uuid.uuid4().hex


def add_loan(loans: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Append a zero-valued loan named after its position in the set."""
    loan = Loan(id=new_loan_id(), name=f"Loan {len(loans) + 1}")
    return list(loans) + [loan.model_dump()]


def remove_loan(loans: List[Dict[str, Any]], loan_id: str) -> List[Dict[str, Any]]:
    return [l for l in loans if l["id"] != loan_id]


def update_loan_field(
    loans: List[Dict[str, Any]], loan_id: str, field: str, value: Any
) -> List[Dict[str, Any]]:
    """Replace one field of the loan with ``loan_id``.

    ``name`` is stored verbatim; numeric fields go through ``to_number`` so
    unparseable text becomes ``nan``.  An unknown ``loan_id`` leaves the set
    unchanged.
    """

    if field not in EDITABLE_FIELDS:
        raise ValueError(f"loan field {field!r} is not editable")
    new_value = to_number(value) if field in NUMERIC_FIELDS else value
    return [
        {**l, field: new_value} if l["id"] == loan_id else l
        for l in loans
    ]
