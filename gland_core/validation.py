from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .evaluator import Advisory, field_advisories
from .materials import MATERIAL_TO_CTE
from .units import to_number

Translator = Callable[..., str]

MANDATORY_NUMERIC_FIELDS = (
    "gland_width",
    "gland_depth",
    "gland_angle",
    "gland_top_r",
    "gland_bottom_r",
    "gap",
    "gland_centerline",
    "oring_cs",
    "oring_id",
    "alpha",
)

OPTIONAL_TEMPERATURE_FIELDS = ("temp_min", "temp_nom", "temp_max")

_VALIDATION_EN = {
    "validation.material_required": "Missing material group.",
    "validation.material_unknown": "Unknown material group: {material}",
    "validation.field_required": "{field} is required",
    "validation.field_number": "{field} must be a number",
}


def _tr(translator: Translator | None, key: str, **kwargs: Any) -> str:
    if translator is None:
        raw = _VALIDATION_EN.get(key, key)
        return raw.format(**kwargs) if kwargs else raw
    return translator(key, **kwargs)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class ValidationResult:
    errors: list[str]
    warnings: list[Advisory] = field(default_factory=list)
    invalid_fields: tuple[str, ...] = ()

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def validate_request(data: Mapping[str, Any], *, translator: Translator | None = None) -> ValidationResult:
    """
    Pre-calculation gate. Every blocking issue is collected (not only the
    first); non-blocking field hints travel in `warnings`.
    """
    errors: list[str] = []
    invalid: list[str] = []

    material = str(data.get("material") or "").strip().upper()
    if not material:
        errors.append(_tr(translator, "validation.material_required"))
        invalid.append("material")
    elif material not in MATERIAL_TO_CTE:
        errors.append(_tr(translator, "validation.material_unknown", material=material))
        invalid.append("material")

    for name in MANDATORY_NUMERIC_FIELDS:
        val = data.get(name)
        if is_blank(val):
            errors.append(_tr(translator, "validation.field_required", field=name))
            invalid.append(name)
        elif to_number(val) is None:
            errors.append(_tr(translator, "validation.field_number", field=name))
            invalid.append(name)

    for name in OPTIONAL_TEMPERATURE_FIELDS:
        val = data.get(name)
        if is_blank(val):
            continue
        if to_number(val) is None:
            errors.append(_tr(translator, "validation.field_number", field=name))
            invalid.append(name)

    return ValidationResult(
        errors=errors,
        warnings=field_advisories(data, translator=translator),
        invalid_fields=tuple(invalid),
    )
