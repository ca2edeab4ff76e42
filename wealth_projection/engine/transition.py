from __future__ import annotations

import math
from dataclasses import replace

from ..data_model import Assumptions, Balances, PhaseBundle


def grow(balance: float, rate_pct: float, contribution: float = 0.0) -> float:
    """Compound one year at ``rate_pct`` then add the contribution."""
    return balance * (1 + rate_pct / 100) + contribution


def compound(rate_pct: float, years: int) -> float:
    """Growth factor after ``years`` at ``rate_pct``; overflow saturates to a signed infinity."""
    base = 1 + rate_pct / 100
    try:
        return base ** years
    except OverflowError:
        if base < 0 and years % 2:
            return -math.inf
        return math.inf


def land_acquisition_value(cfg: Assumptions, purchase_age: int, acres: float) -> float:
    """Acquired acreage valued as if it had appreciated since the first year."""
    return acres * cfg.land_price_per_acre * compound(cfg.land_appreciation, purchase_age - cfg.current_age)


def applied_contributions(age: int, bundle: PhaseBundle, cfg: Assumptions) -> PhaseBundle:
    """Contributions actually paid in this year.

    Jamie's account only takes money inside the attending window and the
    venture fund stops taking money after it.
    """
    changes = {}
    if not cfg.jamie_start_age <= age <= cfg.jamie_end_age:
        changes["jamie_contribution"] = 0.0
    if age > cfg.jamie_end_age:
        changes["venture_contribution"] = 0.0
    return replace(bundle, **changes) if changes else bundle


def opening_balances(cfg: Assumptions) -> Balances:
    acres = cfg.initial_acres
    land_equity = acres * cfg.land_price_per_acre
    for purchase_age, bought in cfg.land_purchases():
        if purchase_age == cfg.current_age:
            acres += bought
            land_equity += land_acquisition_value(cfg, purchase_age, bought)
    return Balances(
        primary=cfg.primary_start,
        retirement=cfg.retirement_start,
        ira=cfg.ira_start,
        home_equity=cfg.home_equity_start,
        new_home_equity=0.0,
        land_equity=land_equity,
        acres=acres,
        jamie_investments=cfg.jamie_investments_start,
        venture=cfg.venture_start,
    )


def advance(prior: Balances, age: int, bundle: PhaseBundle, cfg: Assumptions) -> Balances:
    """Advance every non-margin holding from ``age - 1`` to ``age``.

    Margin balances are carried through unchanged; see ``margin.apply_margin``.
    """
    moved_out = age >= cfg.move_out_age

    home_equity = grow(
        prior.home_equity,
        cfg.home_appreciation,
        cfg.home_principal_paydown if moved_out else 0.0,
    )

    # principal goes in at the start of the year, so it appreciates too
    if moved_out:
        new_home_equity = (prior.new_home_equity + cfg.new_home_principal) * (
            1 + cfg.new_home_appreciation / 100
        )
    else:
        new_home_equity = 0.0

    land_equity = grow(prior.land_equity, cfg.land_appreciation)
    acres = prior.acres
    for purchase_age, bought in cfg.land_purchases():
        if age == purchase_age:
            land_equity += land_acquisition_value(cfg, purchase_age, bought)
            acres += bought

    applied = applied_contributions(age, bundle, cfg)

    return replace(
        prior,
        primary=grow(prior.primary, cfg.primary_return, applied.primary_contribution),
        retirement=grow(prior.retirement, cfg.retirement_return, applied.retirement_contribution),
        ira=grow(prior.ira, cfg.primary_return),
        home_equity=home_equity,
        new_home_equity=new_home_equity,
        land_equity=land_equity,
        acres=acres,
        jamie_investments=grow(prior.jamie_investments, cfg.jamie_return, applied.jamie_contribution),
        venture=grow(prior.venture, cfg.venture_return, applied.venture_contribution),
    )
