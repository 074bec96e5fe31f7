from __future__ import annotations

import math
from typing import Any

from .errors import UnsupportedUnitPair

IN_TO_MM = 25.4

LENGTH_UNITS = ("in", "mm")
TEMPERATURE_UNITS = ("C", "F")

_ALIASES = {
    "in": "in",
    "inch": "in",
    "inches": "in",
    '"': "in",
    "mm": "mm",
    "millimeter": "mm",
    "millimeters": "mm",
    "millimetre": "mm",
    "c": "C",
    "°c": "C",
    "celsius": "C",
    "f": "F",
    "°f": "F",
    "fahrenheit": "F",
}


def normalize_unit(unit: str) -> str:
    """Canonical unit code ("in", "mm", "C", "F"); unknown names pass through stripped."""
    raw = str(unit or "").strip()
    return _ALIASES.get(raw.lower(), raw)


def to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(num):
        return None
    return num


def convert(value: Any, from_unit: str, to_unit: str) -> float | None:
    """
    Convert a length (in <-> mm) or a temperature (C <-> F).

    Returns None when value is not a finite number; callers must check
    before use. Same unit on both sides returns the number unchanged.
    """
    num = to_number(value)
    if num is None:
        return None

    src = normalize_unit(from_unit)
    dst = normalize_unit(to_unit)
    if src == dst:
        return num

    if src == "in" and dst == "mm":
        return num * IN_TO_MM
    if src == "mm" and dst == "in":
        return num / IN_TO_MM

    if src == "C" and dst == "F":
        return num * 9.0 / 5.0 + 32.0
    if src == "F" and dst == "C":
        return (num - 32.0) * 5.0 / 9.0

    raise UnsupportedUnitPair(str(from_unit), str(to_unit))


def format_alpha(value: Any) -> str:
    """CTE in short scientific notation: 0.000316 -> '3.16e-4'."""
    num = to_number(value)
    if num is None:
        return "" if value is None else str(value)
    mantissa, exponent = f"{num:.2e}".split("e")
    return f"{mantissa}e{int(exponent)}"
