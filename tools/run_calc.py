#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]

# Allow running as "python tools/run_calc.py" (so repo root is importable)
sys.path.insert(0, str(ROOT))

from app.forms import to_canonical  # noqa: E402
from app.logging_config import get_logger, setup_logging  # noqa: E402
from gland_core import GlandCoreError, run_calculation  # noqa: E402
from gland_core.export_payload import build_payload  # noqa: E402
from gland_core.materials import material_names  # noqa: E402

EXIT_CODES = {
    "validation": 2,
    "degenerate_geometry": 3,
    "catalog_load_failure": 4,
    "unsupported_unit_pair": 5,
}

# (argparse dest, request field)
ARG_FIELDS = (
    ("width", "gland_width"),
    ("depth", "gland_depth"),
    ("angle", "gland_angle"),
    ("r_top", "gland_top_r"),
    ("r_bottom", "gland_bottom_r"),
    ("gap", "gap"),
    ("centerline", "gland_centerline"),
    ("cs", "oring_cs"),
    ("id", "oring_id"),
    ("alpha", "alpha"),
    ("t_min", "temp_min"),
    ("t_nom", "temp_nom"),
    ("t_max", "temp_max"),
)


def request_from_values(
    values: dict[str, Any],
    *,
    material: str | None,
    unit: str,
    temp_unit: str,
) -> dict[str, Any]:
    """Convert raw values given in (unit, temp_unit) into a canonical request."""
    request: dict[str, Any] = {"material": material or ""}
    for _, field in ARG_FIELDS:
        raw = values.get(field)
        if field == "alpha" and raw is None and material:
            # 0 defers to the material table
            raw = 0.0
        request[field] = to_canonical(field, raw, unit, temp_unit)
    return request


def exit_code_for(exc: GlandCoreError) -> int:
    return EXIT_CODES.get(exc.kind, 1)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="O-ring in dovetail gland: stretch, compression and gland fill per temperature."
    )
    ap.add_argument("--material", default=None, help=f"Material group ({', '.join(material_names())}).")
    ap.add_argument("--unit", choices=("in", "mm"), default="mm", help="Length unit of the inputs (default: mm).")
    ap.add_argument("--temp-unit", choices=("C", "F"), default="C", help="Temperature unit of the inputs (default: C).")
    ap.add_argument("--width", type=float, default=None, help="Gland width.")
    ap.add_argument("--depth", type=float, default=None, help="Gland depth.")
    ap.add_argument("--angle", type=float, default=None, help="Dovetail angle, degrees.")
    ap.add_argument("--r-top", type=float, default=None, help="Top corner radius.")
    ap.add_argument("--r-bottom", type=float, default=None, help="Bottom corner radius.")
    ap.add_argument("--gap", type=float, default=None, help="Axial gap.")
    ap.add_argument("--centerline", type=float, default=None, help="Gland centerline diameter.")
    ap.add_argument("--cs", type=float, default=None, help="O-ring cross-section.")
    ap.add_argument("--id", type=float, default=None, help="O-ring inner diameter.")
    ap.add_argument("--alpha", type=float, default=None, help="CTE override, 1/°C (default: material table).")
    ap.add_argument("--t-min", type=float, default=None, help="Minimum operating temperature.")
    ap.add_argument("--t-nom", type=float, default=None, help="Nominal operating temperature.")
    ap.add_argument("--t-max", type=float, default=None, help="Maximum operating temperature.")
    ap.add_argument("--json", action="store_true", help="Print the JSON report instead of the text summary.")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging()
    logger = get_logger("run_calc")

    values = {field: getattr(args, dest) for dest, field in ARG_FIELDS}
    request = request_from_values(
        values,
        material=args.material,
        unit=args.unit,
        temp_unit=args.temp_unit,
    )

    try:
        outcome = run_calculation(request)
    except GlandCoreError as exc:
        logger.error("%s: %s", exc.kind, exc.message)
        print(json.dumps(exc.to_dict(), ensure_ascii=False), file=sys.stderr)
        return exit_code_for(exc)

    if args.json:
        print(json.dumps(build_payload(outcome), ensure_ascii=False, indent=2))
        return 0

    result = outcome.result
    print("OK")
    print("material:", outcome.material)
    print("alpha:", f"{outcome.alpha:.3e}")
    print("stretch_pct:", round(result.stretch_pct, 4))
    print("seal_volume_mm3:", round(result.seal_volume, 4))
    print("gland_volume_mm3:", round(result.gland_volume, 4))
    for entry in result.temperature_results:
        print(
            "temp_c:",
            round(entry.temp_c, 4),
            "compression_pct=",
            round(entry.compression_pct, 4),
            "gland_fill_pct=",
            round(entry.gland_fill_pct, 4),
        )
    for warning in outcome.warnings:
        print("warning:", warning.message)
    for advisory in outcome.advisories:
        print("advisory:", advisory.message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
