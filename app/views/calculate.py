from __future__ import annotations

import streamlit as st

from app.forms import (
    GLAND_FIELDS,
    SEAL_FIELDS,
    TEMPERATURE_FIELDS,
    build_request,
    to_canonical,
    to_display,
)
from app.i18n import t
from app.logging_config import get_logger
from app.ui_components import (
    fmt_temp,
    render_alerts_banner,
    render_warnings_banner,
    result_card,
)
from gland_core import GlandCoreError, ValidationFailed, run_calculation
from gland_core.export_payload import results_frame
from gland_core.materials import hardness_options, material_names, resolve_alpha
from gland_core.validation import validate_request

logger = get_logger("calculate")

_CARD_ROLES = (
    ("min", "results.card_min"),
    ("nominal", "results.card_nominal"),
    ("max", "results.card_max"),
)


def _reset_results(state) -> None:
    state["outcome"] = None
    state["precalc_issues"] = []


def _unit_suffix(field: str, state) -> str:
    if field == "gland_angle":
        return "°"
    if field in TEMPERATURE_FIELDS:
        return f"°{state['temp_unit']}"
    if field == "alpha":
        return "1/°C"
    return state["unit"]


def _field_input(state, field: str) -> None:
    unit = state["unit"]
    temp_unit = state["temp_unit"]
    widget_key = f"field_{field}_{unit}_{temp_unit}_{state['form_version']}"
    if widget_key not in st.session_state:
        st.session_state[widget_key] = to_display(field, state["inputs"].get(field), unit, temp_unit)

    def _on_change() -> None:
        state["inputs"][field] = to_canonical(field, st.session_state[widget_key], unit, temp_unit)
        _reset_results(state)

    st.text_input(
        f"{t(f'fields.{field}')} [{_unit_suffix(field, state)}]",
        key=widget_key,
        on_change=_on_change,
    )


def _on_material_change(state) -> None:
    material = state["material_select"]
    state["material"] = material
    state["hardness"] = ""
    state["inputs"]["alpha"] = resolve_alpha(material) if material else None
    state["form_version"] += 1
    _reset_results(state)


def _reset_form(state) -> None:
    state["inputs"] = {}
    state["material"] = ""
    state["hardness"] = ""
    state["form_version"] += 1
    _reset_results(state)


def _run(state) -> None:
    request = build_request(state["inputs"], state["material"])
    try:
        state["outcome"] = run_calculation(request, translator=t)
        state["precalc_issues"] = []
    except ValidationFailed as exc:
        state["outcome"] = None
        state["precalc_issues"] = exc.issues
    except GlandCoreError as exc:
        logger.warning("calculation failed: %s (%s)", exc.message, exc.kind)
        state["outcome"] = None
        state["precalc_issues"] = [t("errors.calc_failed", kind=exc.kind, exc=exc.message)]


def _render_inputs(state) -> None:
    col_gland, col_seal = st.columns(2)
    with col_gland:
        st.subheader(t("calculate.gland_section"))
        for field in GLAND_FIELDS:
            _field_input(state, field)
    with col_seal:
        st.subheader(t("calculate.seal_section"))
        for field in SEAL_FIELDS:
            _field_input(state, field)
        st.caption(t("calculate.catalog_hint"))

        options = [""] + material_names()
        current = state["material"] if state["material"] in options else ""
        st.session_state["material_select"] = current
        st.selectbox(
            t("fields.material"),
            options,
            key="material_select",
            format_func=lambda m: m or t("common.select"),
            on_change=_on_material_change,
            args=(state,),
        )
        hardness = list(hardness_options(state["material"]))
        st.selectbox(
            t("fields.hardness"),
            [""] + hardness,
            format_func=lambda h: h or t("common.dash"),
            disabled=not hardness,
            key=f"hardness_{state['form_version']}_{state['material']}",
        )
        _field_input(state, "alpha")

        st.subheader(t("calculate.temperature_section"))
        for field in TEMPERATURE_FIELDS:
            _field_input(state, field)


def _render_results(state) -> None:
    outcome = state.get("outcome")
    if outcome is None:
        return

    render_warnings_banner([w.message for w in outcome.warnings])

    st.subheader(t("results.header"))
    ambient = outcome.roles.get("ambient")
    cols = st.columns(4)
    if ambient is not None:
        with cols[0]:
            result_card(
                t("results.card_ambient"),
                ambient,
                t=t,
                stretch_pct=outcome.result.stretch_pct,
            )
    for idx, (role, label_key) in enumerate(_CARD_ROLES, start=1):
        entry = outcome.roles.get(role)
        if entry is None:
            continue
        with cols[idx]:
            result_card(
                f"{t(label_key)} {fmt_temp(entry.temp_c, state['temp_unit'])}",
                entry,
                t=t,
            )

    with st.expander(t("results.details")):
        frame = results_frame(outcome)
        st.dataframe(frame, hide_index=True, use_container_width=True)
        metric_cols = st.columns(2)
        metric_cols[0].metric(t("results.seal_volume"), f"{outcome.result.seal_volume:.3f} mm³")
        metric_cols[1].metric(t("results.gland_volume"), f"{outcome.result.gland_volume:.3f} mm³")
        st.caption(t("results.alpha_used", alpha=f"{outcome.alpha:.3e}"))


def render(state, store) -> None:
    st.header(t("calculate.header"))

    _render_inputs(state)

    request = build_request(state["inputs"], state["material"])
    render_alerts_banner(validate_request(request, translator=t).warnings)
    render_warnings_banner(state.get("precalc_issues") or [])

    action_cols = st.columns([1, 1, 4])
    with action_cols[0]:
        st.button(t("calculate.run_btn"), type="primary", on_click=_run, args=(state,))
    with action_cols[1]:
        st.button(t("calculate.reset_btn"), on_click=_reset_form, args=(state,))

    _render_results(state)
