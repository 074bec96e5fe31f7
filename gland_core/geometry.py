from __future__ import annotations

import math

from .errors import DegenerateGeometry


def _as_float(name: str, value: float) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise TypeError(f"{name} must be a number")
    return float(value)


def circular_segment_area(radius: float, included_angle_deg: float) -> float:
    """
    Area of a circular segment with chord height h = r * (1 - cos(theta / 2)).

    Degenerate input (r <= 0, angle <= 0, h <= 0) gives 0, not an error.
    """
    r = _as_float("radius", radius)
    angle = _as_float("included_angle_deg", included_angle_deg)
    if not (math.isfinite(r) and math.isfinite(angle)):
        raise DegenerateGeometry("circular segment inputs must be finite")
    if r <= 0.0 or angle <= 0.0:
        return 0.0

    theta = math.radians(angle)
    h = r * (1.0 - math.cos(theta / 2.0))
    if h <= 0.0:
        return 0.0

    # acos/sqrt arguments are clamped against float noise at h ~ 0 and h ~ 2r
    cos_arg = min(1.0, max(-1.0, (r - h) / r))
    root = math.sqrt(max(0.0, 2.0 * r * h - h * h))
    return r * r * math.acos(cos_arg) - (r - h) * root


def dovetail_cross_section_area(
    gland_width: float,
    gland_depth: float,
    angle_deg: float,
    r_top: float,
    r_bottom: float,
    gap: float,
) -> float:
    """
    Simplified dovetail cross-section:

    - trapezoid, top width widened by 2 * depth / tan(angle)
    - plus two top corner segments, minus two bottom corner segments
    - plus the gap strip (width + 2 * r_top) * gap
    """
    gw = _as_float("gland_width", gland_width)
    gd = _as_float("gland_depth", gland_depth)
    ang = _as_float("angle_deg", angle_deg)
    rt = _as_float("r_top", r_top)
    rb = _as_float("r_bottom", r_bottom)
    g = _as_float("gap", gap)

    if not all(math.isfinite(v) for v in (gw, gd, ang, rt, rb, g)):
        raise DegenerateGeometry("dovetail inputs must be finite")
    if ang <= 0.0 or ang >= 180.0:
        raise DegenerateGeometry(f"dovetail angle must be in (0, 180) degrees, got {ang}")

    tan_val = math.tan(math.radians(ang))
    if tan_val == 0.0 or not math.isfinite(tan_val):
        raise DegenerateGeometry(f"tan({ang} deg) is undefined for the dovetail taper")

    top_width = gw + 2.0 * (gd / tan_val)
    a_trap = 0.5 * (gw + top_width) * gd
    a_top = 2.0 * circular_segment_area(rt, ang)
    a_bottom = 2.0 * circular_segment_area(rb, ang)
    a_gap = (gw + 2.0 * rt) * g

    area = a_trap + a_top - a_bottom + a_gap
    if not math.isfinite(area):
        raise DegenerateGeometry("dovetail cross-section area is not finite")
    return area
