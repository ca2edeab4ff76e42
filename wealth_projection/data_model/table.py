from __future__ import annotations

from dataclasses import fields
from typing import List

from .assumptions import AGE_FIELDS, Assumptions
from .base import AssumptionField, TableModel

# (field, label, group, step, suffix)
_FIELD_SPECS: List[tuple[str, str, str, float, str | None]] = [
    ("current_age", "Current Age", "Timeline", 1, None),
    ("start_year", "Start Year", "Timeline", 1, None),
    ("end_age", "Final Age", "Timeline", 1, None),
    ("jamie_start_age", "Jamie Attending Start", "Milestones", 1, None),
    ("jamie_end_age", "Jamie Attending End", "Milestones", 1, None),
    ("move_out_age", "Move Out & Rent", "Milestones", 1, None),
    ("mortgage_paid_off_age", "Mortgage Paid Off", "Milestones", 1, None),
    ("margin_start_age", "Margin Start", "Milestones", 1, None),
    ("primary_start", "C-Corp Start", "Starting Balances", 10000, None),
    ("retirement_start", "401k Start", "Starting Balances", 1000, None),
    ("ira_start", "IRA Start", "Starting Balances", 1000, None),
    ("home_equity_start", "Seattle Equity Start", "Starting Balances", 1000, None),
    ("jamie_investments_start", "Jamie's Investments Start", "Starting Balances", 1000, None),
    ("venture_start", "Ventures Start", "Starting Balances", 1000, None),
    ("initial_acres", "Initial Acres", "Starting Balances", 1, None),
    ("land_price_per_acre", "Land Price / Acre", "Starting Balances", 500, None),
    ("primary_return", "C-Corp Return", "Returns", 0.5, "%"),
    ("retirement_return", "401k Return", "Returns", 0.5, "%"),
    ("jamie_return", "Jamie's Return", "Returns", 0.5, "%"),
    ("venture_return", "Ventures Return", "Returns", 0.5, "%"),
    ("home_appreciation", "Seattle Apprec.", "Returns", 0.5, "%"),
    ("new_home_appreciation", "New Home Apprec.", "Returns", 0.5, "%"),
    ("land_appreciation", "Land Apprec.", "Returns", 0.5, "%"),
    ("gross_rent", "Gross Rent (first year)", "Rental", 1000, None),
    ("rent_growth", "Rent Growth", "Rental", 0.5, "%"),
    ("rental_maintenance_rate", "Maintenance", "Rental", 1, "%"),
    ("mortgage_payment", "Mortgage Payment", "Rental", 1000, None),
    ("home_principal_paydown", "Seattle Principal Paydown", "Rental", 1000, None),
    ("new_home_principal", "New Home Principal", "Rental", 1000, None),
    ("land_purchase_1_age", "Land Purchase 1 Age", "Land", 1, None),
    ("land_purchase_1_acres", "Land Purchase 1 Acres", "Land", 1, None),
    ("land_purchase_2_age", "Land Purchase 2 Age", "Land", 1, None),
    ("land_purchase_2_acres", "Land Purchase 2 Acres", "Land", 1, None),
    ("margin_rate", "Margin Rate", "Margin", 0.25, "%"),
    ("margin_ratio", "Margin Used", "Margin", 2.5, "%"),
    ("living_expenses", "Living Expenses", "Recurring", 1000, None),
    ("retirement_contribution", "401k Contribution", "Recurring", 500, None),
    ("safe_withdrawal_rate", "Safe Withdrawal", "Recurring", 0.25, "%"),
    ("current_earner_income", "Ayoola Income", "Current", 5000, None),
    ("current_jamie_income", "Jamie Income", "Current", 5000, None),
    ("current_primary_contribution", "C-Corp Contribution", "Current", 5000, None),
    ("transition_earner_income", "Ayoola Income", "Transition", 5000, None),
    ("transition_jamie_income", "Jamie Income", "Transition", 5000, None),
    ("transition_primary_contribution", "C-Corp Contribution", "Transition", 5000, None),
    ("venture_contribution", "Ventures Contribution", "Transition", 5000, None),
    ("staff_expense_base", "Homestead Staff", "Transition", 5000, None),
    ("gap_earner_income", "Ayoola Income", "Gap Year", 5000, None),
    ("peak_earner_income", "Ayoola Income", "Peak", 5000, None),
    ("peak_jamie_income", "Jamie Income", "Peak", 5000, None),
    ("peak_primary_contribution", "C-Corp Contribution", "Peak", 5000, None),
    ("jamie_contribution", "Jamie's Contribution", "Peak", 5000, None),
    ("staff_expense_step", "Staff Increase / Year", "Peak", 1000, None),
    ("staff_expense_max", "Staff Maximum", "Peak", 5000, None),
    ("business_income_step", "Homestead Income Growth", "Peak", 1000, None),
    ("coast_earner_income", "Ayoola Income", "Coast", 5000, None),
    ("coast_business_income_step", "Homestead Income Growth", "Coast", 1000, None),
]


def _assumption_fields() -> List[AssumptionField]:
    defaults = {f.name: f.default for f in fields(Assumptions)}
    return [
        AssumptionField(
            field=name,
            label=label,
            group=group,
            kind="age" if name in AGE_FIELDS else "number",
            default=defaults[name],
            step=step,
            suffix=suffix,
        )
        for name, label, group, step, suffix in _FIELD_SPECS
    ]


def default_assumption_rows() -> List[dict]:
    return [
        {"Field": col.field, "Label": col.label, "Group": col.group, "Value": col.default}
        for col in _assumption_fields()
    ]


class AssumptionTableModel(TableModel):
    """Schema + defaults for the assumptions editor."""

    def __init__(self) -> None:
        super().__init__("assumptions", _assumption_fields(), default_assumption_rows())
