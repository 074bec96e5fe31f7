from __future__ import annotations

from typing import Callable

import streamlit as st

from gland_core.evaluator import GLAND_FILL_MAX_PCT, NOMINAL_COMPRESSION_BAND, Advisory
from gland_core.thermal import TemperatureResult
from gland_core.units import convert

_OOB_COLOR = "#b91c1c"
_OK_COLOR = "inherit"


def clamp_for_display(value: float) -> float:
    """Negative percentages are shown as 0.00; the raw value stays in the result."""
    return value if value >= 0.0 else 0.0


def fmt_pct(value: float) -> str:
    return f"{clamp_for_display(value):.2f}%"


def fmt_temp(temp_c: float, temp_unit: str) -> str:
    if temp_unit == "F":
        return f"{convert(temp_c, 'C', 'F'):.2f} °F"
    return f"{temp_c:.2f} °C"


def stretch_out_of_band(stretch_pct: float) -> bool:
    return stretch_pct < 0.0


def compression_out_of_band(compression_pct: float) -> bool:
    lo, hi = NOMINAL_COMPRESSION_BAND
    return compression_pct < 0.0 or not (lo <= compression_pct <= hi)


def fill_out_of_band(fill_pct: float) -> bool:
    return fill_pct < 0.0 or not (fill_pct <= GLAND_FILL_MAX_PCT)


def _banner(messages: list[str], *, bg: str, icon: str) -> None:
    if not messages:
        return
    items = "".join(
        f'<div style="padding:0.1rem 0;">{icon} {m}</div>' for m in messages
    )
    st.markdown(
        f"""
        <div style="
          border-radius:0.5rem;
          padding:0.6rem 0.9rem;
          margin-bottom:0.75rem;
          background:{bg};
          color:white;
          font-weight:500;
        ">{items}</div>
        """,
        unsafe_allow_html=True,
    )


def render_warnings_banner(messages: list[str]) -> None:
    """RED banner: pre-calculation blockers and engineering warnings."""
    _banner(messages, bg=_OOB_COLOR, icon="❗")


def render_alerts_banner(advisories: list[Advisory]) -> None:
    """AMBER banner: non-blocking field advisories."""
    _banner([a.message for a in advisories], bg="#b45309", icon="⚠️")


def _row(label: str, value: str, out_of_band: bool) -> str:
    color = _OOB_COLOR if out_of_band else _OK_COLOR
    return (
        '<div style="display:flex;justify-content:space-between;">'
        f"<span>{label}</span><span style=\"color:{color};font-weight:600;\">{value}</span>"
        "</div>"
    )


def result_card(
    title: str,
    entry: TemperatureResult,
    *,
    t: Callable[..., str],
    stretch_pct: float | None = None,
) -> None:
    rows: list[str] = []
    if stretch_pct is not None:
        rows.append(_row(t("results.stretch"), fmt_pct(stretch_pct), stretch_out_of_band(stretch_pct)))
    rows.append(
        _row(
            t("results.compression"),
            fmt_pct(entry.compression_pct),
            compression_out_of_band(entry.compression_pct),
        )
    )
    rows.append(
        _row(
            t("results.gland_fill"),
            fmt_pct(entry.gland_fill_pct),
            fill_out_of_band(entry.gland_fill_pct),
        )
    )
    with st.container(border=True):
        st.markdown(f"**{title}**")
        st.markdown("".join(rows), unsafe_allow_html=True)
