"""Read-only views over a projection: lookups, table filters and breakdowns."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import pandas as pd

from ..data_model import LEDGER_SOURCES, YearSnapshot

REQUIRED_COLUMNS = {"age", "year", "net_worth", "free_cash"}

NET_WORTH_LABELS = (
    ("C-Corp", lambda s: s.primary),
    ("401k/IRA", lambda s: s.retirement + s.ira),
    ("Seattle Equity", lambda s: s.home_equity),
    ("New Home Equity", lambda s: s.new_home_equity),
    ("Land", lambda s: s.land_equity),
    ("Jamie's Investments", lambda s: s.jamie_investments),
    ("Ventures", lambda s: s.venture),
    ("Margin (net)", lambda s: s.margin_invested - s.margin_loan),
)

LEDGER_LABELS = {
    "earner_income": "Ayoola's Income",
    "jamie_income": "Jamie's Income",
    "rental_income": "Rental Net",
    "margin_net": "Margin Arbitrage",
    "business_income": "Homestead Income",
    "living_expenses": "Living Expenses",
    "staff_expense": "Homestead Staff",
    "primary_contribution": "C-Corp Contribution",
    "jamie_contribution": "Jamie's Contribution",
    "venture_contribution": "Ventures Contribution",
    "rental_shortfall": "Rental Shortfall",
}


def to_frame(snapshots: Iterable[YearSnapshot]) -> pd.DataFrame:
    """One row per age; ledger entries become ``cash_<source>`` columns."""
    records = []
    for snap in snapshots:
        record = snap.to_record()
        sources = record.pop("cash_sources")
        for source in LEDGER_SOURCES:
            record[f"cash_{source}"] = sources.get(source, 0.0)
        records.append(record)
    return pd.DataFrame(records)


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    return df.sort_values("age").copy()


def table_rows(df: pd.DataFrame, dense_through: int = 50, every: int = 5) -> pd.DataFrame:
    """Every age up to ``dense_through``, then only multiples of ``every``."""
    if df.empty:
        return df
    df = _prepare(df)
    mask = df["age"] <= dense_through
    if every > 0:
        mask |= df["age"] % every == 0
    return df.loc[mask].reset_index(drop=True)


def snapshot_at(snapshots: Iterable[YearSnapshot], age: int) -> Optional[YearSnapshot]:
    return next((snap for snap in snapshots if snap.age == age), None)


def _labelled(items: Iterable[tuple[str, float]]) -> List[Dict[str, float]]:
    return [{"label": label, "value": value} for label, value in items if value != 0]


def net_worth_breakdown(snap: Optional[YearSnapshot]) -> List[Dict[str, float]]:
    if snap is None:
        return []
    return _labelled((label, getter(snap)) for label, getter in NET_WORTH_LABELS)


def free_cash_breakdown(snap: Optional[YearSnapshot]) -> List[Dict[str, float]]:
    if snap is None:
        return []
    return _labelled((LEDGER_LABELS[source], value) for source, value in snap.cash_sources.items())


def passive_income_breakdown(snap: Optional[YearSnapshot]) -> List[Dict[str, float]]:
    if snap is None:
        return []
    return _labelled(
        [
            ("Safe Withdrawal", snap.safe_withdrawal),
            ("Rental Net", snap.rental_net),
            ("Homestead Income", snap.business_income),
        ]
    )


def allocation(snap: Optional[YearSnapshot]) -> pd.DataFrame:
    """Positive holdings (margin excluded) with their share of the total."""
    if snap is None:
        return pd.DataFrame(columns=["label", "value", "share"])
    rows = [
        {"label": label, "value": getter(snap)}
        for label, getter in NET_WORTH_LABELS
        if label != "Margin (net)" and getter(snap) > 0
    ]
    df = pd.DataFrame(rows, columns=["label", "value"])
    total = df["value"].sum()
    df["share"] = df["value"] / total if total else 0.0
    return df


def land_value_per_acre(snap: Optional[YearSnapshot]) -> float:
    if snap is None:
        return 0.0
    return snap.land_equity / (snap.acres or 1)


def legacy_split(snap: Optional[YearSnapshot], heirs: int = 5) -> Dict[str, object]:
    """Each heir's share of net worth and the income that share would support."""
    if snap is None or heirs <= 0:
        return {"heirs": heirs, "share": 0.0, "share_income": 0.0, "breakdown": []}
    share = snap.net_worth / heirs
    return {
        "heirs": heirs,
        "share": share,
        "share_income": snap.safe_withdrawal / heirs,
        "breakdown": [
            {"label": item["label"], "value": item["value"] / heirs}
            for item in net_worth_breakdown(snap)
        ],
    }
