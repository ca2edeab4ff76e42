from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

import pandas as pd


@dataclass
class AssumptionField:
    """Lightweight schema descriptor for one editable assumption."""

    field: str
    label: str
    group: str
    kind: str = "number"  # number | age
    default: Any = 0.0
    step: float | None = None
    suffix: str | None = None


@dataclass
class TableModel:
    """Container for a table schema plus default rows."""

    name: str
    columns: List[AssumptionField]
    default_rows: List[dict[str, Any]] = field(default_factory=list)

    def create_default_df(self) -> pd.DataFrame:
        if self.default_rows:
            return pd.DataFrame(self.default_rows)
        seed = {col.field: col.default for col in self.columns}
        return pd.DataFrame([seed])

    def groups(self) -> List[str]:
        seen: List[str] = []
        for col in self.columns:
            if col.group not in seen:
                seen.append(col.group)
        return seen
