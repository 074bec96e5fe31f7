"""
AS568 standard-size table: parse and filter.

Table format: header row + comma-delimited rows, optional leading BOM.
Malformed rows are dropped silently; a table without a usable header is a
CatalogLoadFailure.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable

from .errors import CatalogLoadFailure

DASH_HEADERS = ("dash", "dash size")
CS_HEADERS = ("cs", "o-ring cross section size", "o-ring cross section")
ID_HEADERS = ("id", "o-ring internal diameter size", "o-ring internal diameter")

_CHUNK_RE = re.compile(r"(\d+)")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class CatalogRow:
    dash: str
    cs: float
    id: float


def _find_column(header: list[str], names: Iterable[str]) -> int | None:
    for name in names:
        if name in header:
            return header.index(name)
    return None


def _parse_number(raw: str) -> float | None:
    if not _NUMBER_RE.fullmatch(raw):
        return None
    num = float(raw)
    return num if math.isfinite(num) else None


def natural_key(text: str) -> tuple:
    """
    Numeric-aware sort key: punctuation < digits < letters, digit runs by
    magnitude, text case-insensitive: '-010' < '1' < '2' < '010' < 'a1'.
    """
    parts = []
    for chunk in _CHUNK_RE.split(text):
        if not chunk:
            continue
        if chunk.isdigit():
            parts.append((1, int(chunk), ""))
        elif chunk[0].isalpha():
            parts.append((2, 0, chunk.casefold()))
        else:
            parts.append((0, 0, chunk.casefold()))
    return (tuple(parts), text)


def parse_catalog(raw: str) -> list[CatalogRow]:
    text = raw[1:] if raw.startswith("\ufeff") else raw
    text = text.strip()
    if not text:
        raise CatalogLoadFailure("catalog table is empty")

    lines = text.splitlines()
    header = [h.strip().lower() for h in lines[0].split(",")]
    i_dash = _find_column(header, DASH_HEADERS)
    i_cs = _find_column(header, CS_HEADERS)
    i_id = _find_column(header, ID_HEADERS)
    missing = [
        name
        for name, idx in (("dash", i_dash), ("cs", i_cs), ("id", i_id))
        if idx is None
    ]
    if missing:
        raise CatalogLoadFailure(f"catalog header is missing columns: {', '.join(missing)}")
    max_idx = max(i_dash, i_cs, i_id)

    rows: list[CatalogRow] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        cols = [c.strip() for c in line.split(",")]
        if len(cols) <= max_idx:
            continue
        dash = cols[i_dash]
        cs = _parse_number(cols[i_cs])
        id_ = _parse_number(cols[i_id])
        if not dash or cs is None or id_ is None:
            continue
        rows.append(CatalogRow(dash=dash, cs=cs, id=id_))

    rows.sort(key=lambda r: natural_key(r.dash))
    return rows


def number_text(value: float) -> str:
    """Default string form of a size value: 2.0 -> '2', 1.78 -> '1.78'."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def filter_rows(rows: Iterable[CatalogRow], query: str) -> list[CatalogRow]:
    q = (query or "").strip().lower()
    return [
        r
        for r in rows
        if q in r.dash.lower() or q in number_text(r.cs) or q in number_text(r.id)
    ]
