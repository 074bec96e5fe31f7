from __future__ import annotations

import sys
from pathlib import Path
import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.i18n import LANGUAGES, t  # noqa: E402
from app.logging_config import setup_logging  # noqa: E402
from app.views import calculate, catalog, export  # noqa: E402
from gland_core.catalog_store import CatalogConfig, CatalogStore  # noqa: E402


@st.cache_resource
def get_catalog_store() -> CatalogStore:
    """One catalog cache per server process; each table is loaded at most once."""
    return CatalogStore(CatalogConfig.from_env())


def _init_state() -> None:
    state = st.session_state
    state.setdefault("lang", "EN")
    state.setdefault("unit", "in")
    state.setdefault("temp_unit", "C")
    state.setdefault("inputs", {})
    state.setdefault("material", "")
    state.setdefault("hardness", "")
    state.setdefault("form_version", 0)
    state.setdefault("outcome", None)
    state.setdefault("precalc_issues", [])


def main() -> None:
    setup_logging()
    st.set_page_config(page_title="Dovetail Gland Calculator", layout="wide")
    _init_state()
    state = st.session_state

    with st.sidebar:
        st.title(t("app.title"))
        st.selectbox(t("sidebar.language"), list(LANGUAGES), key="lang")
        st.radio(
            t("sidebar.length_unit"),
            ["in", "mm"],
            key="unit",
            horizontal=True,
        )
        st.radio(
            t("sidebar.temp_unit"),
            ["C", "F"],
            key="temp_unit",
            format_func=lambda u: f"°{u}",
            horizontal=True,
        )
        page = st.radio(
            t("sidebar.navigation"),
            ["calculate", "catalog", "export"],
            format_func=lambda p: t(f"nav.{p}"),
        )

    pages = {
        "calculate": calculate,
        "catalog": catalog,
        "export": export,
    }
    store = get_catalog_store()
    pages[page].render(state, store)


if __name__ == "__main__":
    main()
