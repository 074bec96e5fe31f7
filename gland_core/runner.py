from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from .errors import ValidationFailed
from .evaluator import Advisory, evaluate, nominal_compression_warnings
from .materials import resolve_alpha
from .thermal import (
    AMBIENT_C,
    CalculationResult,
    GlandGeometry,
    SealGeometry,
    TemperatureResult,
    build_temperature_set,
    compute_results,
)
from .units import to_number
from .validation import validate_request

Translator = Callable[..., str]

ROLE_FIELDS = (
    ("min", "temp_min"),
    ("nominal", "temp_nom"),
    ("max", "temp_max"),
)


@dataclass(frozen=True)
class CalculationOutcome:
    material: str
    alpha: float
    seal: SealGeometry
    gland: GlandGeometry
    temperatures: tuple[float, ...]
    result: CalculationResult
    roles: dict[str, TemperatureResult]
    warnings: list[Advisory]
    advisories: list[Advisory]


def _num(data: Mapping[str, Any], key: str) -> float:
    val = to_number(data.get(key))
    if val is None:
        # validate_request() runs first; reaching here is a caller bug
        raise ValueError(f"{key} must be a finite number")
    return val


def run_calculation(data: Mapping[str, Any], *, translator: Translator | None = None) -> CalculationOutcome:
    """
    Full calculation request in canonical units (mm, °C):

    - validate; raise ValidationFailed with every issue
    - compute stretch / compression / gland fill over the temperature set
    - evaluate engineering warnings, plus the nominal band rule
    """
    validation = validate_request(data, translator=translator)
    if validation.has_errors:
        raise ValidationFailed(validation.errors)

    material = str(data.get("material")).strip().upper()
    alpha = resolve_alpha(material, data.get("alpha"))
    seal = SealGeometry(cs=_num(data, "oring_cs"), id=_num(data, "oring_id"))
    gland = GlandGeometry(
        width=_num(data, "gland_width"),
        depth=_num(data, "gland_depth"),
        angle_deg=_num(data, "gland_angle"),
        r_top=_num(data, "gland_top_r"),
        r_bottom=_num(data, "gland_bottom_r"),
        gap=_num(data, "gap"),
        centerline=_num(data, "gland_centerline"),
    )

    role_temps = {role: to_number(data.get(key)) for role, key in ROLE_FIELDS}
    temperatures = build_temperature_set(role_temps.values())
    result = compute_results(seal, gland, alpha, temperatures)

    roles: dict[str, TemperatureResult] = {}
    ambient = result.entry_for(AMBIENT_C)
    if ambient is not None:
        roles["ambient"] = ambient
    for role, temp_c in role_temps.items():
        if temp_c is None:
            continue
        entry = result.entry_for(temp_c)
        if entry is not None:
            roles[role] = entry

    warnings = evaluate(result, translator=translator)
    warnings += nominal_compression_warnings(roles.get("nominal"), translator=translator)

    return CalculationOutcome(
        material=material,
        alpha=alpha,
        seal=seal,
        gland=gland,
        temperatures=temperatures,
        result=result,
        roles=roles,
        warnings=warnings,
        advisories=validation.warnings,
    )
