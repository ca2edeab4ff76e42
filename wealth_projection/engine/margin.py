"""Margin loan against the primary holding.

The loan is marked to its ceiling every year rather than tracked as a
running debt. The invested balance compounds at the primary return and is
topped up by whatever the ceiling implies was borrowed beyond last year's
stake. Order matters: reset ceiling, grow prior, back-solve increment, add.
"""
from __future__ import annotations

from ..data_model import Assumptions, MarginResult


def margin_ceiling(primary_value: float, cfg: Assumptions) -> float:
    return primary_value * (cfg.margin_ratio / 100)


def net_arbitrage(loan: float, invested: float, cfg: Assumptions) -> float:
    """Return on the invested stake less interest on the whole loan."""
    gain = invested * (cfg.primary_return / 100)
    interest = loan * (cfg.margin_rate / 100)
    return gain - interest


def apply_margin(prior_invested: float, primary_value: float, age: int, cfg: Assumptions) -> MarginResult:
    if age < cfg.margin_start_age:
        loan = 0.0
        invested = 0.0
    else:
        growth = 1 + cfg.primary_return / 100
        loan = margin_ceiling(primary_value, cfg)
        invested = prior_invested * growth
        # a -100% return wipes the stake; nothing to back-solve from
        prior_stake = invested / growth if growth else prior_invested
        new_borrowing = max(0.0, loan - prior_stake)
        invested += new_borrowing
    return MarginResult(loan=loan, invested=invested, net_arbitrage=net_arbitrage(loan, invested, cfg))
