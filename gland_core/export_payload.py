from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

import pandas as pd

from .runner import CalculationOutcome

PAYLOAD_VERSION = "0.1"

RESULT_COLUMNS = ["role", "temp_c", "compression_pct", "gland_fill_pct"]


def _roles_by_temp(outcome: CalculationOutcome) -> dict[float, list[str]]:
    by_temp: dict[float, list[str]] = {}
    for role, entry in outcome.roles.items():
        by_temp.setdefault(entry.temp_c, []).append(role)
    return by_temp


def results_frame(outcome: CalculationOutcome) -> pd.DataFrame:
    """One row per temperature, in calculation order; role is '/'-joined when shared."""
    by_temp = _roles_by_temp(outcome)
    rows = [
        {
            "role": "/".join(by_temp.get(entry.temp_c, [])),
            "temp_c": entry.temp_c,
            "compression_pct": entry.compression_pct,
            "gland_fill_pct": entry.gland_fill_pct,
        }
        for entry in outcome.result.temperature_results
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def build_payload(outcome: CalculationOutcome, *, generated_at: str | None = None) -> dict[str, Any]:
    if generated_at is None:
        generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    result = outcome.result
    return {
        "version": PAYLOAD_VERSION,
        "generated_at": generated_at,
        "inputs": {
            "material": outcome.material,
            "alpha": outcome.alpha,
            "seal": asdict(outcome.seal),
            "gland": asdict(outcome.gland),
            "temperatures_c": list(outcome.temperatures),
        },
        "results": {
            "stretch_pct": result.stretch_pct,
            "seal_volume_mm3": result.seal_volume,
            "gland_volume_mm3": result.gland_volume,
            "temperatures": results_frame(outcome).to_dict(orient="records"),
        },
        "warnings": [
            {"code": w.code, "message": w.message, "temp_c": w.temp_c}
            for w in outcome.warnings
        ],
        "advisories": [
            {"code": a.code, "field": a.field, "severity": a.severity, "message": a.message}
            for a in outcome.advisories
        ],
    }
