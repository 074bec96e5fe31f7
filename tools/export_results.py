#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.logging_config import get_logger, setup_logging  # noqa: E402
from gland_core import GlandCoreError, run_calculation  # noqa: E402
from gland_core.export_payload import build_payload, results_frame  # noqa: E402
from tools.run_calc import ARG_FIELDS, exit_code_for, request_from_values  # noqa: E402


def load_request(path: Path) -> dict:
    """
    Request file: JSON object with `material`, the input fields, and
    optional `unit` ("in"/"mm", default mm) and `temp_unit` ("C"/"F", default C).
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Request root must be an object: {path}")
    values = {field: data.get(field) for _, field in ARG_FIELDS}
    return request_from_values(
        values,
        material=data.get("material"),
        unit=str(data.get("unit") or "mm"),
        temp_unit=str(data.get("temp_unit") or "C"),
    )


def export_json(request: dict, out_path: Path) -> None:
    payload = build_payload(run_calculation(request))
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")


def export_csv(request: dict, out_path: Path) -> None:
    frame = results_frame(run_calculation(request))
    out_path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(out_path, index=False, encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Export a gland calculation report (JSON or CSV).")
    ap.add_argument("--request", required=True, help="Path to the JSON request file.")
    ap.add_argument("--out", required=True, help="Output path (.json or .csv).")
    ap.add_argument(
        "--format",
        choices=("json", "csv"),
        default=None,
        help="Output format (default: from --out suffix).",
    )
    args = ap.parse_args(argv)
    setup_logging()
    logger = get_logger("export_results")

    out_path = Path(args.out)
    fmt = args.format or ("csv" if out_path.suffix.lower() == ".csv" else "json")

    try:
        request = load_request(Path(args.request))
        if fmt == "csv":
            export_csv(request, out_path)
        else:
            export_json(request, out_path)
    except GlandCoreError as exc:
        logger.error("%s: %s", exc.kind, exc.message)
        return exit_code_for(exc)
    except (OSError, ValueError) as exc:
        logger.error("cannot export: %s", exc)
        return 1

    print("OK")
    print("format:", fmt)
    print("out:", str(out_path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
