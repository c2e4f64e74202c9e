MIN_PAYMENT = 10.0

# Longest horizon (100 years) drawn or dated; longer payoffs are truncated.
MAX_MONTHS = 1200

BUDGET_MIN = 0
BUDGET_MAX = 2000
BUDGET_STEP = 10
DEFAULT_BUDGET = 500

STRATEGIES = {
    "avalanche": "Highest Interest Rate (Avalanche)",
    "snowball": "Lowest Principal (Snowball)",
}
DEFAULT_STRATEGY = "avalanche"

SERIES_POLICIES = {
    "per_loan": "Per loan",
    "aggregate": "Total",
}
DEFAULT_SERIES_POLICY = "per_loan"

AGGREGATE_SERIES_NAME = "Principal Remaining"

SEED_LOAN = {"id": "1", "name": "Loan 1", "amount": 10000.0, "rate": 5.0, "payment": 200.0}

# Line colors cycle when there are more loans than entries.
SERIES_COLORS = [
    "rgb(53, 162, 235)",
    "rgb(255, 99, 132)",
    "rgb(75, 192, 192)",
    "rgb(255, 159, 64)",
    "rgb(153, 102, 255)",
    "rgb(201, 203, 207)",
]

DISCLAIMER = (
    "Figures are flat-rate estimates: total interest is principal × weighted rate × months / 12, "
    "not an amortization schedule. Payoff order reflects the selected strategy but does not change "
    "the estimated totals."
)
