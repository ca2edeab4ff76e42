import pytest

from wealth_projection.data_model import LEDGER_SOURCES, Assumptions, Balances, MarginResult
from wealth_projection.engine.aggregate import aggregate, cash_ledger, net_worth, rental_net
from wealth_projection.engine.phases import classify

NO_MARGIN = MarginResult(loan=0.0, invested=0.0, net_arbitrage=0.0)


def _balances():
    return Balances(
        primary=100.0,
        retirement=20.0,
        ira=3.0,
        home_equity=40.0,
        new_home_equity=5.0,
        land_equity=60.0,
        acres=20.0,
        jamie_investments=7.0,
        venture=2.0,
        margin_loan=30.0,
        margin_invested=33.0,
    )


def test_rental_net_zero_before_move_out():
    assert rental_net(33, Assumptions()) == 0.0


def test_rental_net_first_year_is_a_shortfall():
    # 72000 rent - 67200 mortgage - 7200 maintenance
    assert rental_net(34, Assumptions()) == pytest.approx(-2400.0)


def test_rental_net_after_mortgage_is_paid_off():
    cfg = Assumptions()
    gross = 72000.0 * 1.025 ** 30

    assert rental_net(63, cfg) == pytest.approx(72000.0 * 1.025 ** 29 * 0.9 - 67200.0)
    assert rental_net(64, cfg) == pytest.approx(gross * 0.9)


def test_net_worth_nets_margin_loan():
    assert net_worth(_balances()) == pytest.approx(100 + 20 + 3 + 40 + 5 + 60 + 7 + 2 + 33 - 30)


def test_ledger_keeps_source_order_and_signs():
    cfg = Assumptions()
    margin = MarginResult(loan=100.0, invested=100.0, net_arbitrage=5.5)

    ledger = cash_ledger(classify(40, cfg), margin, -2400.0, cfg)

    assert tuple(ledger) == LEDGER_SOURCES
    assert ledger["jamie_income"] == 300000.0
    assert ledger["rental_income"] == 0.0
    assert ledger["rental_shortfall"] == -2400.0
    assert ledger["margin_net"] == 5.5
    assert ledger["business_income"] == 60000.0
    assert ledger["living_expenses"] == -60000.0
    assert ledger["staff_expense"] == -90000.0
    assert ledger["jamie_contribution"] == -70000.0
    assert "retirement_contribution" not in ledger


def test_free_cash_in_current_phase():
    cfg = Assumptions()

    totals = aggregate(_balances(), classify(32, cfg), NO_MARGIN, 32, cfg)

    # 200000 + 100000 - 60000 living - 180000 contribution
    assert totals.free_cash == pytest.approx(60000.0)
    assert sum(totals.cash_sources.values()) == totals.free_cash


def test_transition_year_spends_everything():
    cfg = Assumptions()

    totals = aggregate(_balances(), classify(33, cfg), NO_MARGIN, 33, cfg)

    assert totals.free_cash == pytest.approx(0.0)


def test_positive_rental_counts_as_income():
    cfg = Assumptions(mortgage_payment=0.0)

    totals = aggregate(_balances(), classify(34, cfg), NO_MARGIN, 34, cfg)

    assert totals.rental_net == pytest.approx(64800.0)
    assert totals.cash_sources["rental_income"] == pytest.approx(64800.0)
    assert totals.cash_sources["rental_shortfall"] == 0.0


def test_passive_income_uses_uncapped_rental():
    cfg = Assumptions()
    balances = _balances()

    totals = aggregate(balances, classify(34, cfg), NO_MARGIN, 34, cfg)

    assert totals.safe_withdrawal == pytest.approx(net_worth(balances) * 0.04)
    assert totals.passive_income == pytest.approx(-2400.0 + 0.0 + totals.safe_withdrawal)
