"""Field-level overrides for the assumptions record.

The editor hands us loosely typed values keyed by parameter name. Anything
that does not coerce to a number keeps its prior value, so the engine only
ever sees a well-formed ``Assumptions``.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import replace
from typing import Any, Dict, Mapping

import pandas as pd

from .assumptions import AGE_FIELDS, Assumptions, assumption_names

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[a-z])(?=[0-9])")

# Dashboard spellings that do not follow the field names.
KEY_ALIASES = {
    "c_corp_start": "primary_start",
    "c_corp_return": "primary_return",
    "k_401_return": "retirement_return",
    "expenses": "living_expenses",
}


def normalize_key(key: str) -> str:
    """Map ``jamieStartAge`` / ``landPurchase1Age`` style keys to field names."""
    name = _CAMEL_BOUNDARY.sub("_", str(key).strip()).lower()
    return KEY_ALIASES.get(name, name)


def coerce_value(name: str, raw: Any) -> float | int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip().replace(",", "")
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    if name in AGE_FIELDS:
        if value != int(value):
            return None
        return int(value)
    return value


def apply_overrides(base: Assumptions, overrides: Mapping[str, Any] | None) -> Assumptions:
    known = set(assumption_names())
    changes: Dict[str, Any] = {}
    for key, raw in (overrides or {}).items():
        name = normalize_key(key)
        if name not in known:
            logger.warning("Ignoring unknown assumption %r", key)
            continue
        value = coerce_value(name, raw)
        if value is None:
            logger.warning("Keeping %s=%r; could not use %r", name, getattr(base, name), raw)
            continue
        changes[name] = value
    if not changes:
        return base
    return replace(base, **changes)


def dataframe_to_overrides(df: pd.DataFrame) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for row in df.to_dict("records"):
        name = str(row.get("Field", "")).strip()
        if not name:
            continue
        overrides[name] = row.get("Value")
    return overrides
