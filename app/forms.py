"""
Input bookkeeping for the Calculate page.

Values are stored canonically (mm, °C) in session state and converted only
for display, so switching in/mm or °C/°F is lossless. Text that is not a
number is kept verbatim so validation can report it.
"""
from __future__ import annotations

from typing import Any

from gland_core.units import convert, format_alpha, to_number

LENGTH_FIELDS = (
    "gland_width",
    "gland_depth",
    "gland_top_r",
    "gland_bottom_r",
    "gap",
    "gland_centerline",
    "oring_cs",
    "oring_id",
)
TEMPERATURE_FIELDS = ("temp_min", "temp_nom", "temp_max")
ANGLE_FIELDS = ("gland_angle",)
ALPHA_FIELDS = ("alpha",)

GLAND_FIELDS = (
    "gland_width",
    "gland_depth",
    "gland_angle",
    "gland_top_r",
    "gland_bottom_r",
    "gap",
    "gland_centerline",
)
SEAL_FIELDS = ("oring_cs", "oring_id")


def field_kind(field: str) -> str:
    if field in LENGTH_FIELDS:
        return "length"
    if field in TEMPERATURE_FIELDS:
        return "temperature"
    if field in ANGLE_FIELDS:
        return "angle"
    if field in ALPHA_FIELDS:
        return "alpha"
    raise ValueError(f"Unknown input field: {field}")


def to_display(field: str, canonical: Any, unit: str, temp_unit: str) -> str:
    """Render a stored canonical value in the current display units."""
    if canonical is None:
        return ""
    num = to_number(canonical)
    if num is None:
        return str(canonical)

    kind = field_kind(field)
    if kind == "length":
        return f"{convert(num, 'mm', unit):.3f}"
    if kind == "temperature":
        return f"{convert(num, 'C', temp_unit):.2f}"
    if kind == "alpha":
        return format_alpha(num)
    return f"{num:g}"


def to_canonical(field: str, raw: Any, unit: str, temp_unit: str) -> Any:
    """Parse user text in display units into the canonical stored value."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    num = to_number(raw)
    if num is None:
        return str(raw).strip()

    kind = field_kind(field)
    if kind == "length":
        return convert(num, unit, "mm")
    if kind == "temperature":
        return convert(num, temp_unit, "C")
    return num


def apply_catalog_row(inputs: dict[str, Any], cs: float, id_: float, unit: str) -> dict[str, Any]:
    """Pre-fill seal dimensions from an AS568 row given in `unit`."""
    updated = dict(inputs)
    updated["oring_cs"] = convert(cs, unit, "mm")
    updated["oring_id"] = convert(id_, unit, "mm")
    return updated


def build_request(inputs: dict[str, Any], material: str | None) -> dict[str, Any]:
    """Calculation request mapping (canonical units) for gland_core.run_calculation."""
    request: dict[str, Any] = {"material": material or ""}
    for name in (*GLAND_FIELDS, *SEAL_FIELDS, *ALPHA_FIELDS, *TEMPERATURE_FIELDS):
        request[name] = inputs.get(name)
    return request
