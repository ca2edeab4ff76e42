from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Tuple

from ..data_model import Assumptions, Balances, MarginResult, PhaseBundle, YearSnapshot
from .aggregate import aggregate
from .margin import apply_margin
from .phases import classify
from .transition import advance, opening_balances

logger = logging.getLogger(__name__)

_NO_MARGIN = MarginResult(loan=0.0, invested=0.0, net_arbitrage=0.0)


def step_year(prior: Balances, age: int, bundle: PhaseBundle, cfg: Assumptions) -> Tuple[Balances, MarginResult]:
    """One year of the fold: holdings first, then margin on the new primary value."""
    balances = advance(prior, age, bundle, cfg)
    margin = apply_margin(prior.margin_invested, balances.primary, age, cfg)
    balances = replace(balances, margin_loan=margin.loan, margin_invested=margin.invested)
    return balances, margin


def project(cfg: Assumptions) -> Tuple[YearSnapshot, ...]:
    """Project the household from ``current_age`` through ``end_age``.

    The first snapshot carries the opening balances; every later age is one
    ``step_year`` applied to the age before it.
    """
    if cfg.end_age < cfg.current_age:
        return ()

    snapshots: List[YearSnapshot] = []
    balances = opening_balances(cfg)
    margin = _NO_MARGIN
    for age in cfg.age_range():
        bundle = classify(age, cfg)
        if age > cfg.current_age:
            balances, margin = step_year(balances, age, bundle, cfg)
        totals = aggregate(balances, bundle, margin, age, cfg)
        year = cfg.start_year + (age - cfg.current_age)
        snapshots.append(YearSnapshot.build(age, year, bundle, balances, margin, totals))

    logger.debug(
        "Projected ages %s-%s, final net worth %.0f",
        cfg.current_age,
        cfg.end_age,
        snapshots[-1].net_worth,
    )
    return tuple(snapshots)
