from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings

from payoff.presets import (
    BUDGET_MAX,
    BUDGET_STEP,
    DEFAULT_BUDGET,
    DEFAULT_SERIES_POLICY,
    DEFAULT_STRATEGY,
    MIN_PAYMENT,
)


class Settings(BaseSettings):
    model_config = {"env_prefix": "PAYOFF_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    log_level: str = "INFO"

    # Budget slider and floor
    min_payment: float = MIN_PAYMENT
    budget_max: int = BUDGET_MAX
    budget_step: int = BUDGET_STEP
    default_budget: int = DEFAULT_BUDGET

    default_strategy: Literal["avalanche", "snowball"] = DEFAULT_STRATEGY
    default_series_policy: Literal["per_loan", "aggregate"] = DEFAULT_SERIES_POLICY

    @model_validator(mode="after")
    def check_budget_bounds(self):
        if self.min_payment <= 0:
            raise ValueError("min_payment must be positive")
        if self.budget_step <= 0:
            raise ValueError("budget_step must be positive")
        if not 0 <= self.default_budget <= self.budget_max:
            raise ValueError("default_budget must lie between 0 and budget_max")
        return self


settings = Settings()
