from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from gland_core.validation import MANDATORY_NUMERIC_FIELDS, is_blank, validate_request


def _valid_request() -> dict:
    return {
        "material": "NBR",
        "gland_width": 2.5,
        "gland_depth": 1.8,
        "gland_angle": 45.0,
        "gland_top_r": 0.3,
        "gland_bottom_r": 0.2,
        "gap": 0.1,
        "gland_centerline": 52.0,
        "oring_cs": 2.0,
        "oring_id": 50.0,
        "alpha": 0.000175,
        "temp_min": None,
        "temp_nom": "",
        "temp_max": 80.0,
    }


def test_valid_request_passes() -> None:
    result = validate_request(_valid_request())
    assert not result.has_errors
    assert result.errors == []
    assert result.warnings == []


def test_all_issues_collected() -> None:
    data = _valid_request()
    data["material"] = ""
    data["gland_width"] = None
    data["gland_depth"] = "deep"
    data["temp_max"] = "hot"

    result = validate_request(data)
    assert result.errors == [
        "Missing material group.",
        "gland_width is required",
        "gland_depth must be a number",
        "temp_max must be a number",
    ]
    assert result.invalid_fields == ("material", "gland_width", "gland_depth", "temp_max")


def test_empty_request_reports_every_mandatory_field() -> None:
    result = validate_request({})
    assert result.has_errors
    assert len(result.errors) == 1 + len(MANDATORY_NUMERIC_FIELDS)


def test_unknown_material() -> None:
    data = _valid_request()
    data["material"] = "wood"
    assert validate_request(data).errors == ["Unknown material group: WOOD"]


def test_field_hints_are_non_blocking() -> None:
    data = _valid_request()
    data["gap"] = -0.1
    result = validate_request(data)
    assert not result.has_errors
    assert [w.field for w in result.warnings] == ["gap"]


def test_is_blank() -> None:
    assert is_blank(None)
    assert is_blank("  ")
    assert not is_blank(0)
