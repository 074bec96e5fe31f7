from __future__ import annotations

import asyncio

import pandas as pd
import streamlit as st

from app.forms import apply_catalog_row
from app.i18n import t
from app.logging_config import get_logger
from gland_core import CatalogLoadFailure, CatalogStore
from gland_core.catalog import filter_rows

logger = get_logger("catalog")


def _load_rows(store: CatalogStore, variant: str):
    if store.is_loaded(variant):
        return store.rows(variant)
    return asyncio.run(store.load(variant))


def render(state, store: CatalogStore) -> None:
    st.header(t("catalog.header"))
    variant = state["unit"]
    st.caption(t("catalog.variant_caption", unit=variant))

    try:
        rows = _load_rows(store, variant)
    except CatalogLoadFailure as exc:
        logger.error("AS568 %s table failed to load: %s", variant, exc.message)
        st.error(t("errors.catalog_failed", exc=exc.message))
        return

    query = st.text_input(t("catalog.search"), key="catalog_query")
    filtered = filter_rows(rows, query)
    if not filtered:
        st.info(t("catalog.no_matches"))
        return

    frame = pd.DataFrame(
        [{"dash": r.dash, "cs": r.cs, "id": r.id} for r in filtered],
        columns=["dash", "cs", "id"],
    )
    st.dataframe(frame, hide_index=True, use_container_width=True)

    labels = [f"{r.dash}  (CS {r.cs:g} / ID {r.id:g} {variant})" for r in filtered]
    choice = st.selectbox(t("catalog.select"), labels, key=f"catalog_choice_{variant}")
    if st.button(t("catalog.apply_btn")):
        row = filtered[labels.index(choice)]
        state["inputs"] = apply_catalog_row(state["inputs"], row.cs, row.id, variant)
        state["form_version"] += 1
        state["outcome"] = None
        state["precalc_issues"] = []
        st.success(t("catalog.applied", dash=row.dash))
