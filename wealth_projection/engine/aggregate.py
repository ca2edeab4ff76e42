from __future__ import annotations

from typing import Dict

from ..data_model import LEDGER_SOURCES, Assumptions, Balances, MarginResult, PhaseBundle, YearTotals
from .transition import applied_contributions, compound


def rental_net(age: int, cfg: Assumptions) -> float:
    """Rent less mortgage and maintenance; zero until the household moves out."""
    if age < cfg.move_out_age:
        return 0.0
    gross = cfg.gross_rent * compound(cfg.rent_growth, age - cfg.move_out_age)
    mortgage = cfg.mortgage_payment if age < cfg.mortgage_paid_off_age else 0.0
    maintenance = gross * (cfg.rental_maintenance_rate / 100)
    return gross - mortgage - maintenance


def net_worth(balances: Balances) -> float:
    return (
        balances.primary
        + balances.retirement
        + balances.ira
        + balances.home_equity
        + balances.new_home_equity
        + balances.land_equity
        + balances.jamie_investments
        + balances.venture
        + balances.margin_invested
        - balances.margin_loan
    )


def cash_ledger(bundle: PhaseBundle, margin: MarginResult, rental: float, cfg: Assumptions) -> Dict[str, float]:
    """Signed sources and uses of the year's cash, in ``LEDGER_SOURCES`` order.

    The retirement contribution comes out of payroll and is not a use here.
    """
    ledger = {
        "earner_income": bundle.earner_income,
        "jamie_income": bundle.jamie_income,
        "rental_income": max(0.0, rental),
        "margin_net": margin.net_arbitrage,
        "business_income": bundle.business_income,
        "living_expenses": -cfg.living_expenses,
        "staff_expense": -bundle.staff_expense,
        "primary_contribution": -bundle.primary_contribution,
        "jamie_contribution": -bundle.jamie_contribution,
        "venture_contribution": -bundle.venture_contribution,
        "rental_shortfall": min(0.0, rental),
    }
    return {source: ledger[source] for source in LEDGER_SOURCES}


def aggregate(
    balances: Balances,
    bundle: PhaseBundle,
    margin: MarginResult,
    age: int,
    cfg: Assumptions,
) -> YearTotals:
    rental = rental_net(age, cfg)
    ledger = cash_ledger(applied_contributions(age, bundle, cfg), margin, rental, cfg)
    worth = net_worth(balances)
    safe_withdrawal = worth * (cfg.safe_withdrawal_rate / 100)
    return YearTotals(
        net_worth=worth,
        free_cash=sum(ledger.values()),
        cash_sources=ledger,
        rental_net=rental,
        safe_withdrawal=safe_withdrawal,
        passive_income=rental + bundle.business_income + safe_withdrawal,
    )
