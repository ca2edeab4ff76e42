from __future__ import annotations

import math
from dataclasses import dataclass, fields
from numbers import Real

AGE_FIELDS = (
    "current_age",
    "start_year",
    "end_age",
    "jamie_start_age",
    "jamie_end_age",
    "move_out_age",
    "mortgage_paid_off_age",
    "margin_start_age",
    "land_purchase_1_age",
    "land_purchase_2_age",
)


class ConfigurationError(ValueError):
    """Raised when an assumption value is not a number the engine can use."""

    def __init__(self, field: str, value, reason: str = "must be numeric") -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid assumption {field}={value!r}: {reason}")


@dataclass(frozen=True)
class Assumptions:
    # timeline
    current_age: int = 31
    start_year: int = 2026
    end_age: int = 85

    # milestones
    jamie_start_age: int = 36
    jamie_end_age: int = 45
    move_out_age: int = 34
    mortgage_paid_off_age: int = 64
    margin_start_age: int = 36

    # starting balances
    primary_start: float = 100000.0
    retirement_start: float = 15000.0
    ira_start: float = 5000.0
    home_equity_start: float = 30000.0
    jamie_investments_start: float = 0.0
    venture_start: float = 0.0
    initial_acres: float = 20.0
    land_price_per_acre: float = 6000.0

    # returns and appreciation (%)
    primary_return: float = 10.0
    retirement_return: float = 8.0
    jamie_return: float = 10.0
    venture_return: float = 1.0
    home_appreciation: float = 6.0
    new_home_appreciation: float = 5.0
    land_appreciation: float = 4.0

    # rental economics
    gross_rent: float = 72000.0
    rent_growth: float = 2.5
    rental_maintenance_rate: float = 10.0
    mortgage_payment: float = 67200.0
    home_principal_paydown: float = 18000.0
    new_home_principal: float = 15000.0

    # land acquisitions
    land_purchase_1_age: int = 34
    land_purchase_1_acres: float = 15.0
    land_purchase_2_age: int = 40
    land_purchase_2_acres: float = 100.0

    # margin loan (%)
    margin_rate: float = 4.5
    margin_ratio: float = 32.5

    # recurring
    living_expenses: float = 60000.0
    retirement_contribution: float = 12000.0
    safe_withdrawal_rate: float = 4.0

    # phase 1: current
    current_earner_income: float = 200000.0
    current_jamie_income: float = 100000.0
    current_primary_contribution: float = 180000.0

    # phase 2: transition
    transition_earner_income: float = 150000.0
    transition_jamie_income: float = 100000.0
    transition_primary_contribution: float = 90000.0
    venture_contribution: float = 50000.0
    staff_expense_base: float = 50000.0

    # phase 3: gap year
    gap_earner_income: float = 50000.0

    # phase 4: peak
    peak_earner_income: float = 50000.0
    peak_jamie_income: float = 300000.0
    peak_primary_contribution: float = 100000.0
    jamie_contribution: float = 70000.0
    staff_expense_step: float = 10000.0
    staff_expense_max: float = 100000.0
    business_income_step: float = 15000.0

    # phase 5: coast
    coast_earner_income: float = 50000.0
    coast_business_income_step: float = 5000.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ConfigurationError(f.name, value)
            if f.name in AGE_FIELDS:
                if not math.isfinite(value) or value != int(value):
                    raise ConfigurationError(f.name, value, "must be a whole number")
                object.__setattr__(self, f.name, int(value))

    def land_purchases(self) -> tuple[tuple[int, float], ...]:
        """(age, acres) for each configured acquisition."""
        return (
            (self.land_purchase_1_age, self.land_purchase_1_acres),
            (self.land_purchase_2_age, self.land_purchase_2_acres),
        )

    def age_range(self) -> range:
        return range(self.current_age, self.end_age + 1)


def assumption_names() -> list[str]:
    return [f.name for f in fields(Assumptions)]
