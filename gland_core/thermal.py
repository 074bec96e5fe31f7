from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .errors import DegenerateGeometry
from .geometry import dovetail_cross_section_area

AMBIENT_C = 23.0


@dataclass(frozen=True)
class SealGeometry:
    cs: float
    id: float


@dataclass(frozen=True)
class GlandGeometry:
    width: float
    depth: float
    angle_deg: float
    r_top: float
    r_bottom: float
    gap: float
    centerline: float


@dataclass(frozen=True)
class TemperatureResult:
    temp_c: float
    compression_pct: float
    gland_fill_pct: float


@dataclass(frozen=True)
class CalculationResult:
    stretch_pct: float
    gland_volume: float
    seal_volume: float
    temperature_results: tuple[TemperatureResult, ...]

    def entry_for(self, temp_c: float) -> TemperatureResult | None:
        for entry in self.temperature_results:
            if entry.temp_c == temp_c:
                return entry
        return None


def build_temperature_set(temperatures: Iterable[float | None]) -> tuple[float, ...]:
    """
    Ambient anchor first, then the remaining finite temperatures
    de-duplicated and ascending. A supplied 23 °C collapses into the anchor.
    """
    extra: set[float] = set()
    for temp in temperatures:
        if temp is None:
            continue
        val = float(temp)
        if not math.isfinite(val) or val == AMBIENT_C:
            continue
        extra.add(val)
    return (AMBIENT_C, *sorted(extra))


def seal_volume(seal: SealGeometry) -> float:
    # torus: 2 * pi^2 * r^2 * R
    r = seal.cs / 2.0
    big_r = (seal.id + seal.cs) / 2.0
    return 2.0 * math.pi * math.pi * r * r * big_r


def stretch_pct(seal: SealGeometry, centerline: float) -> float:
    free_dia = seal.id + seal.cs
    if free_dia == 0.0:
        raise DegenerateGeometry("id + cs must be non-zero to compute stretch")
    return (centerline - free_dia) / free_dia * 100.0


def gland_volume(gland: GlandGeometry) -> float:
    area = dovetail_cross_section_area(
        gland.width,
        gland.depth,
        gland.angle_deg,
        gland.r_top,
        gland.r_bottom,
        gland.gap,
    )
    return area * math.pi * gland.centerline


def compute_results(
    seal: SealGeometry,
    gland: GlandGeometry,
    alpha: float,
    temperatures: Iterable[float | None] = (),
) -> CalculationResult:
    """
    Stretch, gland volume and per-temperature compression / gland fill.

    Volumetric expansion uses 3 * alpha while the cross-section uses alpha
    (first-order linear CTE model). Values are returned unclamped.
    """
    if not isinstance(alpha, (int, float)) or isinstance(alpha, bool):
        raise TypeError("alpha must be a number")
    alpha_val = float(alpha)
    if not math.isfinite(alpha_val):
        raise ValueError("alpha must be finite")

    temps = build_temperature_set(temperatures)
    stretch = stretch_pct(seal, gland.centerline)
    v_seal = seal_volume(seal)
    v_gland = gland_volume(gland)
    if v_gland == 0.0 or not math.isfinite(v_gland):
        raise DegenerateGeometry("gland volume is zero or not finite")

    results: list[TemperatureResult] = []
    for temp_c in temps:
        d_t = temp_c - AMBIENT_C
        expanded_cs = seal.cs * (1.0 + alpha_val * d_t)
        if expanded_cs == 0.0:
            raise DegenerateGeometry(f"expanded cross-section is zero at {temp_c} C")
        expanded_vol = v_seal * (1.0 + 3.0 * alpha_val * d_t)
        results.append(
            TemperatureResult(
                temp_c=temp_c,
                compression_pct=(1.0 - gland.depth / expanded_cs) * 100.0,
                gland_fill_pct=expanded_vol / v_gland * 100.0,
            )
        )

    return CalculationResult(
        stretch_pct=stretch,
        gland_volume=v_gland,
        seal_volume=v_seal,
        temperature_results=tuple(results),
    )
