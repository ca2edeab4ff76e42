"""Life-phase classification.

Guards run top to bottom and the first match wins; with degenerate
milestones a later phase can fire before an earlier one across years.
"""
from __future__ import annotations

from ..data_model import Assumptions, Phase, PhaseBundle


def phase_for_age(age: int, cfg: Assumptions) -> Phase:
    if age <= cfg.current_age + 1:
        return Phase.CURRENT
    if age < cfg.jamie_start_age - 1:
        return Phase.TRANSITION
    if age == cfg.jamie_start_age - 1:
        return Phase.GAP
    if cfg.jamie_start_age <= age <= cfg.jamie_end_age:
        return Phase.PEAK
    return Phase.COAST


def coast_business_income_base(cfg: Assumptions) -> float:
    """Business income the peak ramp reaches one year past its last peak year."""
    peak_years = cfg.jamie_end_age - cfg.jamie_start_age + 1
    return max(0.0, peak_years * cfg.business_income_step)


def _current(age: int, cfg: Assumptions) -> PhaseBundle:
    return PhaseBundle(
        phase=Phase.CURRENT,
        earner_income=cfg.current_earner_income,
        jamie_income=cfg.current_jamie_income,
        primary_contribution=cfg.current_primary_contribution,
        retirement_contribution=cfg.retirement_contribution,
    )


def _transition(age: int, cfg: Assumptions) -> PhaseBundle:
    return PhaseBundle(
        phase=Phase.TRANSITION,
        earner_income=cfg.transition_earner_income,
        jamie_income=cfg.transition_jamie_income,
        primary_contribution=cfg.transition_primary_contribution,
        retirement_contribution=cfg.retirement_contribution,
        venture_contribution=cfg.venture_contribution,
        staff_expense=cfg.staff_expense_base,
    )


def _gap(age: int, cfg: Assumptions) -> PhaseBundle:
    return PhaseBundle(
        phase=Phase.GAP,
        earner_income=cfg.gap_earner_income,
        retirement_contribution=cfg.retirement_contribution,
        venture_contribution=cfg.venture_contribution,
        staff_expense=cfg.staff_expense_base,
    )


def _peak(age: int, cfg: Assumptions) -> PhaseBundle:
    years_in = age - cfg.jamie_start_age
    staff_ramp = min(years_in * cfg.staff_expense_step, cfg.staff_expense_max - cfg.staff_expense_base)
    return PhaseBundle(
        phase=Phase.PEAK,
        earner_income=cfg.peak_earner_income,
        jamie_income=cfg.peak_jamie_income,
        primary_contribution=cfg.peak_primary_contribution,
        retirement_contribution=cfg.retirement_contribution,
        jamie_contribution=cfg.jamie_contribution,
        venture_contribution=cfg.venture_contribution,
        staff_expense=cfg.staff_expense_base + staff_ramp,
        business_income=max(0.0, years_in * cfg.business_income_step),
    )


def _coast(age: int, cfg: Assumptions) -> PhaseBundle:
    years_out = age - cfg.jamie_end_age
    return PhaseBundle(
        phase=Phase.COAST,
        earner_income=cfg.coast_earner_income,
        staff_expense=cfg.staff_expense_max,
        business_income=coast_business_income_base(cfg) + years_out * cfg.coast_business_income_step,
    )


_BUILDERS = {
    Phase.CURRENT: _current,
    Phase.TRANSITION: _transition,
    Phase.GAP: _gap,
    Phase.PEAK: _peak,
    Phase.COAST: _coast,
}


def classify(age: int, cfg: Assumptions) -> PhaseBundle:
    return _BUILDERS[phase_for_age(age, cfg)](age, cfg)
