from __future__ import annotations

from typing import Any


class GlandCoreError(Exception):
    """Structured failure reported to the caller as kind + message."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


class ValidationFailed(GlandCoreError):
    kind = "validation"

    def __init__(self, issues: list[str]) -> None:
        super().__init__("; ".join(issues) if issues else "invalid request")
        self.issues = list(issues)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["issues"] = list(self.issues)
        return data


class DegenerateGeometry(GlandCoreError, ValueError):
    kind = "degenerate_geometry"


class UnsupportedUnitPair(GlandCoreError, ValueError):
    kind = "unsupported_unit_pair"

    def __init__(self, from_unit: str, to_unit: str) -> None:
        super().__init__(f"Unsupported unit pair: {from_unit!r} -> {to_unit!r}")
        self.from_unit = from_unit
        self.to_unit = to_unit


class CatalogLoadFailure(GlandCoreError):
    kind = "catalog_load_failure"

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message if source is None else f"{message} (source={source})")
        self.source = source
