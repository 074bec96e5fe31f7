"""
Engineering acceptance bands applied to a CalculationResult.

Two layers:
- evaluate(): stretch band + per-temperature compression / gland fill
- nominal_compression_warnings(): target band for the nominal entry only,
  applied by the caller

field_advisories() produces the non-blocking per-field input hints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from .thermal import CalculationResult, TemperatureResult
from .units import to_number

Translator = Callable[..., str]

STRETCH_MIN_PCT = 0.0
STRETCH_MAX_PCT = 5.0
COMPRESSION_MIN_PCT = 15.0
COMPRESSION_MAX_PCT = 30.0
GLAND_FILL_MAX_PCT = 95.0
NOMINAL_COMPRESSION_BAND = (20.0, 25.0)

_EVAL_EN = {
    "warnings.stretch_loose": "O-ring is loose (negative stretch).",
    "warnings.stretch_exceeds": "Stretch exceeds recommended {limit}%.",
    "warnings.compression_low": "Compression {temp}°C < {limit}%",
    "warnings.compression_high": "Compression {temp}°C > {limit}%",
    "warnings.fill_high": "Gland fill {temp}°C > {limit}%",
    "warnings.nominal_band": "Nominal compression {value}% is outside the {lo}–{hi}% band.",
    "advisory.width_negative": "Width is negative; verify sign.",
    "advisory.depth_negative": "Depth is negative; verify sign.",
    "advisory.angle_range": "Angle should be within -180° to 180°.",
    "advisory.radius_negative": "Radius is negative; verify.",
    "advisory.gap_negative": "Gap is negative; verify.",
    "advisory.centerline_negative": "Centerline is negative; verify.",
    "advisory.cs_negative": "Cross-section is negative; verify.",
    "advisory.id_negative": "O-ring ID is negative; verify.",
    "advisory.alpha_negative": "CTE should normally be ≥ 0. Check units/value.",
}

# field -> (min, max, warn_min, message key); min/max violations are "invalid",
# warn_min violations are "warn"
FIELD_HINTS: dict[str, tuple[float | None, float | None, float | None, str]] = {
    "gland_width": (None, None, 0.0, "advisory.width_negative"),
    "gland_depth": (None, None, 0.0, "advisory.depth_negative"),
    "gland_angle": (-180.0, 180.0, None, "advisory.angle_range"),
    "gland_top_r": (None, None, 0.0, "advisory.radius_negative"),
    "gland_bottom_r": (None, None, 0.0, "advisory.radius_negative"),
    "gap": (None, None, 0.0, "advisory.gap_negative"),
    "gland_centerline": (None, None, 0.0, "advisory.centerline_negative"),
    "oring_cs": (None, None, 0.0, "advisory.cs_negative"),
    "oring_id": (None, None, 0.0, "advisory.id_negative"),
    "alpha": (0.0, None, None, "advisory.alpha_negative"),
}


def _tr(translator: Translator | None, key: str, **kwargs: Any) -> str:
    if translator is None:
        raw = _EVAL_EN.get(key, key)
        return raw.format(**kwargs) if kwargs else raw
    return translator(key, **kwargs)


def _fmt_num(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True)
class Advisory:
    code: str
    message: str
    temp_c: float | None = None
    field: str | None = None
    severity: str = "warning"

    def __str__(self) -> str:
        return self.message


def evaluate(result: CalculationResult, *, translator: Translator | None = None) -> list[Advisory]:
    warnings: list[Advisory] = []

    if result.stretch_pct < STRETCH_MIN_PCT:
        warnings.append(Advisory("STRETCH_LOOSE", _tr(translator, "warnings.stretch_loose")))
    elif result.stretch_pct > STRETCH_MAX_PCT:
        warnings.append(
            Advisory(
                "STRETCH_EXCEEDS",
                _tr(translator, "warnings.stretch_exceeds", limit=_fmt_num(STRETCH_MAX_PCT)),
            )
        )

    for entry in result.temperature_results:
        temp = _fmt_num(entry.temp_c)
        if entry.compression_pct < COMPRESSION_MIN_PCT:
            warnings.append(
                Advisory(
                    "COMPRESSION_LOW",
                    _tr(
                        translator,
                        "warnings.compression_low",
                        temp=temp,
                        limit=_fmt_num(COMPRESSION_MIN_PCT),
                    ),
                    temp_c=entry.temp_c,
                )
            )
        if entry.compression_pct > COMPRESSION_MAX_PCT:
            warnings.append(
                Advisory(
                    "COMPRESSION_HIGH",
                    _tr(
                        translator,
                        "warnings.compression_high",
                        temp=temp,
                        limit=_fmt_num(COMPRESSION_MAX_PCT),
                    ),
                    temp_c=entry.temp_c,
                )
            )
        if entry.gland_fill_pct > GLAND_FILL_MAX_PCT:
            warnings.append(
                Advisory(
                    "GLAND_FILL_HIGH",
                    _tr(translator, "warnings.fill_high", temp=temp, limit=_fmt_num(GLAND_FILL_MAX_PCT)),
                    temp_c=entry.temp_c,
                )
            )

    return warnings


def nominal_compression_warnings(
    nominal: TemperatureResult | None,
    *,
    translator: Translator | None = None,
) -> list[Advisory]:
    if nominal is None:
        return []
    lo, hi = NOMINAL_COMPRESSION_BAND
    value = nominal.compression_pct
    if lo <= value <= hi:
        return []
    return [
        Advisory(
            "NOMINAL_COMPRESSION_BAND",
            _tr(
                translator,
                "warnings.nominal_band",
                value=f"{value:.2f}",
                lo=_fmt_num(lo),
                hi=_fmt_num(hi),
            ),
            temp_c=nominal.temp_c,
        )
    ]


def field_advisories(
    values: Mapping[str, Any],
    *,
    translator: Translator | None = None,
) -> list[Advisory]:
    """Per-field input hints; empty or non-numeric fields are left to validation."""
    hints: list[Advisory] = []
    for field, (min_v, max_v, warn_min, key) in FIELD_HINTS.items():
        num = to_number(values.get(field))
        if num is None:
            continue
        if (min_v is not None and num < min_v) or (max_v is not None and num > max_v):
            severity = "invalid"
        elif warn_min is not None and num < warn_min:
            severity = "warn"
        else:
            continue
        hints.append(
            Advisory(
                f"FIELD_{field.upper()}",
                _tr(translator, key),
                field=field,
                severity=severity,
            )
        )
    return hints
