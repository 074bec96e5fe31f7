"""
Process-lifetime cache for the two AS568 tables (inch and millimeter).

Each variant is fetched at most once per store, across threads and event
loops: concurrent load() calls for the same variant wait on one shared
in-flight load. Cancelling one caller does not cancel the load for the
others. A failed load leaves the cache untouched so the next call retries.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import os
import threading
from dataclasses import dataclass
from pathlib import Path

import httpx

from .catalog import CatalogRow, filter_rows, parse_catalog
from .errors import CatalogLoadFailure
from .units import LENGTH_UNITS, normalize_unit

DATA_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True)
class CatalogConfig:
    in_source: str = str(DATA_DIR / "as568_in.csv")
    mm_source: str = str(DATA_DIR / "as568_mm.csv")
    timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        return cls(
            in_source=os.getenv("GLAND_AS568_IN", cls.in_source),
            mm_source=os.getenv("GLAND_AS568_MM", cls.mm_source),
            timeout_seconds=float(os.getenv("GLAND_CATALOG_TIMEOUT_SECONDS", str(cls.timeout_seconds))),
        )

    def source_for(self, variant: str) -> str:
        return self.mm_source if variant == "mm" else self.in_source


def _variant(variant: str) -> str:
    norm = normalize_unit(variant)
    if norm not in LENGTH_UNITS:
        raise ValueError(f"catalog variant must be one of {LENGTH_UNITS}, got {variant!r}")
    return norm


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class CatalogStore:
    def __init__(
        self,
        config: CatalogConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or CatalogConfig.from_env()
        self._transport = transport
        self._lock = threading.Lock()
        self._rows: dict[str, tuple[CatalogRow, ...]] = {}
        self._pending: dict[str, concurrent.futures.Future] = {}
        self._fill_tasks: set[asyncio.Task] = set()

    def is_loaded(self, variant: str) -> bool:
        key = _variant(variant)
        with self._lock:
            return key in self._rows

    async def load(self, variant: str) -> list[CatalogRow]:
        key = _variant(variant)
        with self._lock:
            cached = self._rows.get(key)
            if cached is not None:
                return list(cached)
            future = self._pending.get(key)
            owner = future is None
            if owner:
                future = concurrent.futures.Future()
                self._pending[key] = future

        if owner:
            task = asyncio.ensure_future(self._fill(key, future))
            self._fill_tasks.add(task)
            task.add_done_callback(self._fill_tasks.discard)

        # shield: a cancelled caller must not cancel the shared load
        rows = await asyncio.shield(asyncio.wrap_future(future))
        return list(rows)

    async def load_all(self) -> dict[str, list[CatalogRow]]:
        in_rows, mm_rows = await asyncio.gather(self.load("in"), self.load("mm"))
        return {"in": in_rows, "mm": mm_rows}

    def rows(self, variant: str) -> list[CatalogRow]:
        key = _variant(variant)
        with self._lock:
            cached = self._rows.get(key)
        if cached is None:
            raise CatalogLoadFailure(f"catalog variant {key!r} is not loaded")
        return list(cached)

    def search(self, variant: str, query: str) -> list[CatalogRow]:
        return filter_rows(self.rows(variant), query)

    async def _fill(self, key: str, future: concurrent.futures.Future) -> None:
        try:
            rows = await self._load_variant(key)
        except asyncio.CancelledError:
            # the owning event loop is shutting down; waiters elsewhere get a failure
            self._finish(
                key,
                future,
                error=CatalogLoadFailure(
                    f"catalog load for {key!r} was cancelled",
                    source=self.config.source_for(key),
                ),
            )
            raise
        except Exception as exc:
            self._finish(key, future, error=exc)
        else:
            self._finish(key, future, rows=rows)

    def _finish(
        self,
        key: str,
        future: concurrent.futures.Future,
        *,
        rows: tuple[CatalogRow, ...] | None = None,
        error: BaseException | None = None,
    ) -> None:
        with self._lock:
            if error is None:
                self._rows[key] = rows
            if self._pending.get(key) is future:
                del self._pending[key]
        if error is None:
            future.set_result(rows)
        else:
            future.set_exception(error)

    async def _load_variant(self, variant: str) -> tuple[CatalogRow, ...]:
        source = self.config.source_for(variant)
        text = await self._read_source(source)
        try:
            return tuple(parse_catalog(text))
        except CatalogLoadFailure as exc:
            raise CatalogLoadFailure(exc.message, source=source) from exc

    async def _read_source(self, source: str) -> str:
        if _is_url(source):
            try:
                async with httpx.AsyncClient(
                    timeout=httpx.Timeout(self.config.timeout_seconds),
                    transport=self._transport,
                ) as client:
                    resp = await client.get(source)
                    resp.raise_for_status()
                    return resp.text
            except httpx.HTTPError as exc:
                raise CatalogLoadFailure(f"failed to fetch catalog: {exc}", source=source) from exc

        try:
            return await asyncio.to_thread(Path(source).read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogLoadFailure(f"failed to read catalog: {exc}", source=source) from exc
