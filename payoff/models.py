from pydantic import BaseModel


class Loan(BaseModel):
    id: str
    name: str = ""
    amount: float = 0.0
    rate: float = 0.0
    payment: float = 0.0


NUMERIC_FIELDS = ("amount", "rate", "payment")
EDITABLE_FIELDS = ("name",) + NUMERIC_FIELDS
