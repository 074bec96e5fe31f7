#!/usr/bin/env python3

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.logging_config import get_logger, setup_logging  # noqa: E402
from gland_core.catalog import filter_rows, number_text  # noqa: E402
from gland_core.catalog_store import CatalogConfig, CatalogStore  # noqa: E402
from gland_core.errors import CatalogLoadFailure  # noqa: E402

EXIT_CATALOG_FAILURE = 4


def _store_for(variant: str, source: str | None) -> CatalogStore:
    config = CatalogConfig.from_env()
    if source:
        if variant == "mm":
            config = CatalogConfig(config.in_source, source, config.timeout_seconds)
        else:
            config = CatalogConfig(source, config.mm_source, config.timeout_seconds)
    return CatalogStore(config)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Search the AS568 standard O-ring size table.")
    ap.add_argument("--variant", choices=("in", "mm"), default="in", help="Table units (default: in).")
    ap.add_argument("--query", default="", help="Substring of dash number, cross-section or ID.")
    ap.add_argument("--source", default=None, help="CSV file path or http(s) URL overriding the bundled table.")
    args = ap.parse_args(argv)
    setup_logging()
    logger = get_logger("as568_lookup")

    store = _store_for(args.variant, args.source)
    try:
        rows = asyncio.run(store.load(args.variant))
    except CatalogLoadFailure as exc:
        logger.error("catalog_load_failure: %s (source=%s)", exc.message, exc.source)
        return EXIT_CATALOG_FAILURE

    matches = filter_rows(rows, args.query)
    print("OK")
    print("variant:", args.variant)
    print("matches:", len(matches))
    for row in matches:
        print(f"{row.dash}\tcs={number_text(row.cs)}\tid={number_text(row.id)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
