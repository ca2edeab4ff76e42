"""REST backend for the household wealth projection."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List

from flask import Flask, jsonify, request

from wealth_projection.data_model import (
    Assumptions,
    AssumptionTableModel,
    ConfigurationError,
    apply_overrides,
)
from wealth_projection.engine.query import (
    free_cash_breakdown,
    land_value_per_acre,
    legacy_split,
    net_worth_breakdown,
    passive_income_breakdown,
    snapshot_at,
    table_rows,
    to_frame,
)
from wealth_projection.engine.simulator import project

logger = logging.getLogger(__name__)

app = Flask(__name__)

ASSUMPTION_MODEL = AssumptionTableModel()


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    clean_rows: List[Dict[str, Any]] = []
    for row in records:
        clean_rows.append({key: (None if _is_nan(value) else value) for key, value in row.items()})
    return clean_rows


def _model_payload(model: AssumptionTableModel) -> Dict[str, Any]:
    groups: Dict[str, List[Dict[str, Any]]] = {name: [] for name in model.groups()}
    for col in model.columns:
        groups[col.group].append(
            {
                "field": col.field,
                "label": col.label,
                "kind": col.kind,
                "default": col.default,
                "step": col.step,
                "suffix": col.suffix,
            }
        )
    return {
        "name": model.name,
        "groups": [{"name": name, "fields": cols} for name, cols in groups.items()],
        "defaults": _sanitize_records(model.create_default_df().to_dict("records")),
    }


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _view_int(payload: dict, *keys: str, default: int) -> int:
    value = _extract_payload_value(payload, *keys, default=default)
    if isinstance(value, bool):
        raise ValueError(f"{keys[0]} must be a whole number")
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"{keys[0]} must be a whole number")
    return int(number)


def _target_payload(snapshots, age: int, heirs: int) -> Dict[str, Any] | None:
    snap = snapshot_at(snapshots, age)
    if snap is None:
        return None
    return {
        "age": snap.age,
        "year": snap.year,
        "phase": snap.phase.value,
        "netWorth": snap.net_worth,
        "freeCash": snap.free_cash,
        "passiveIncome": snap.passive_income,
        "acres": snap.acres,
        "landValuePerAcre": land_value_per_acre(snap),
        "netWorthBreakdown": net_worth_breakdown(snap),
        "freeCashBreakdown": free_cash_breakdown(snap),
        "passiveIncomeBreakdown": passive_income_breakdown(snap),
        "legacy": legacy_split(snap, heirs=heirs),
    }


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/schema")
def get_schema():
    return jsonify({"assumptions": _model_payload(ASSUMPTION_MODEL)})


@app.post("/api/projection")
def run_projection():
    payload = request.get_json(silent=True) or {}
    overrides = payload.get("assumptions") or {}
    if not isinstance(overrides, dict):
        return jsonify({"error": "Assumptions must be an object."}), 400
    try:
        target_age = _view_int(payload, "targetAge", "target_age", default=40)
        dense_through = _view_int(payload, "denseThrough", "dense_through", default=50)
        every = _view_int(payload, "every", default=5)
        heirs = _view_int(payload, "heirs", default=5)
    except (TypeError, ValueError):
        logger.warning("Rejected projection request with bad view parameters: %r", payload)
        return jsonify({"error": "Invalid view parameters."}), 400

    try:
        cfg = apply_overrides(Assumptions(), overrides)
    except ConfigurationError as exc:
        return jsonify({"error": str(exc)}), 400

    snapshots = project(cfg)
    frame = to_frame(snapshots)
    return jsonify(
        {
            "data": _sanitize_records(frame.to_dict(orient="records")),
            "table": _sanitize_records(table_rows(frame, dense_through, every).to_dict(orient="records")),
            "target": _target_payload(snapshots, target_age, heirs),
        }
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=False, port=8000)
