from __future__ import annotations

import json

import streamlit as st

from app.i18n import t
from gland_core.export_payload import build_payload, results_frame


def render(state, store) -> None:
    st.header(t("export.header"))

    outcome = state.get("outcome")
    if outcome is None:
        st.info(t("export.no_results"))
        return

    payload = build_payload(outcome)
    st.download_button(
        t("export.json_btn"),
        data=json.dumps(payload, ensure_ascii=False, indent=2) + "\n",
        file_name="gland_report.json",
        mime="application/json",
    )
    st.download_button(
        t("export.csv_btn"),
        data=results_frame(outcome).to_csv(index=False),
        file_name="gland_results.csv",
        mime="text/csv",
    )
    with st.expander(t("export.preview")):
        st.json(payload)
