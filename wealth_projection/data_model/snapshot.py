from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Phase(str, Enum):
    CURRENT = "current"
    TRANSITION = "transition"
    GAP = "gap"
    PEAK = "peak"
    COAST = "coast"


# Ledger sources in display order; incomes first, then uses.
LEDGER_SOURCES: tuple[str, ...] = (
    "earner_income",
    "jamie_income",
    "rental_income",
    "margin_net",
    "business_income",
    "living_expenses",
    "staff_expense",
    "primary_contribution",
    "jamie_contribution",
    "venture_contribution",
    "rental_shortfall",
)


@dataclass(frozen=True)
class PhaseBundle:
    """Income, contribution and expense figures active for one year."""

    phase: Phase
    earner_income: float = 0.0
    jamie_income: float = 0.0
    primary_contribution: float = 0.0
    retirement_contribution: float = 0.0
    jamie_contribution: float = 0.0
    venture_contribution: float = 0.0
    staff_expense: float = 0.0
    business_income: float = 0.0


@dataclass(frozen=True)
class Balances:
    primary: float
    retirement: float
    ira: float
    home_equity: float
    new_home_equity: float
    land_equity: float
    acres: float
    jamie_investments: float
    venture: float
    margin_loan: float = 0.0
    margin_invested: float = 0.0


@dataclass(frozen=True)
class MarginResult:
    loan: float
    invested: float
    net_arbitrage: float


@dataclass(frozen=True)
class YearTotals:
    net_worth: float
    free_cash: float
    cash_sources: Mapping[str, float]
    rental_net: float
    safe_withdrawal: float
    passive_income: float


@dataclass(frozen=True)
class YearSnapshot:
    """Everything known about the household at one age.

    Balances are end-of-year figures except for the first snapshot, which
    holds the opening balances. ``cash_sources`` is a read-only view whose
    values sum to ``free_cash``. It always reports the phase's cash flows
    for the age, so on the first snapshot the contribution uses are the
    year's planned outflows and have not yet reached the balances; they land
    in the next snapshot's holdings.
    """

    age: int
    year: int
    phase: Phase

    primary: float
    retirement: float
    ira: float
    home_equity: float
    new_home_equity: float
    land_equity: float
    acres: float
    jamie_investments: float
    venture: float
    margin_loan: float
    margin_invested: float

    earner_income: float
    jamie_income: float
    business_income: float
    rental_net: float
    margin_net: float

    net_worth: float
    free_cash: float
    cash_sources: Mapping[str, float]
    passive_income: float
    safe_withdrawal: float

    @classmethod
    def build(
        cls,
        age: int,
        year: int,
        bundle: PhaseBundle,
        balances: Balances,
        margin: MarginResult,
        totals: YearTotals,
    ) -> "YearSnapshot":
        return cls(
            age=age,
            year=year,
            phase=bundle.phase,
            primary=balances.primary,
            retirement=balances.retirement,
            ira=balances.ira,
            home_equity=balances.home_equity,
            new_home_equity=balances.new_home_equity,
            land_equity=balances.land_equity,
            acres=balances.acres,
            jamie_investments=balances.jamie_investments,
            venture=balances.venture,
            margin_loan=balances.margin_loan,
            margin_invested=balances.margin_invested,
            earner_income=bundle.earner_income,
            jamie_income=bundle.jamie_income,
            business_income=bundle.business_income,
            rental_net=totals.rental_net,
            margin_net=margin.net_arbitrage,
            net_worth=totals.net_worth,
            free_cash=totals.free_cash,
            cash_sources=MappingProxyType(dict(totals.cash_sources)),
            passive_income=totals.passive_income,
            safe_withdrawal=totals.safe_withdrawal,
        )

    def to_record(self) -> dict:
        record = {name: getattr(self, name) for name in self.__dataclass_fields__}
        record["phase"] = self.phase.value
        record["cash_sources"] = dict(self.cash_sources)
        return record
