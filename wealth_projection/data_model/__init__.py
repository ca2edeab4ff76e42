from .assumptions import AGE_FIELDS, Assumptions, ConfigurationError, assumption_names
from .base import AssumptionField, TableModel
from .overrides import apply_overrides, dataframe_to_overrides, normalize_key
from .snapshot import (
    LEDGER_SOURCES,
    Balances,
    MarginResult,
    Phase,
    PhaseBundle,
    YearSnapshot,
    YearTotals,
)
from .table import AssumptionTableModel, default_assumption_rows

__all__ = [
    "AGE_FIELDS",
    "LEDGER_SOURCES",
    "AssumptionField",
    "AssumptionTableModel",
    "Assumptions",
    "Balances",
    "ConfigurationError",
    "MarginResult",
    "Phase",
    "PhaseBundle",
    "TableModel",
    "YearSnapshot",
    "YearTotals",
    "apply_overrides",
    "assumption_names",
    "dataframe_to_overrides",
    "default_assumption_rows",
    "normalize_key",
]
