from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from gland_core import AMBIENT_C, DegenerateGeometry, ValidationFailed, run_calculation


def _request(**overrides) -> dict:
    data = {
        "material": "nbr",
        "gland_width": 2.5,
        "gland_depth": 1.8,
        "gland_angle": 45.0,
        "gland_top_r": 0.3,
        "gland_bottom_r": 0.2,
        "gap": 0.1,
        "gland_centerline": 52.0,
        "oring_cs": 2.0,
        "oring_id": 50.0,
        "alpha": 0.0,
        "temp_min": -20.0,
        "temp_nom": 23.0,
        "temp_max": 100.0,
    }
    data.update(overrides)
    return data


def test_roles_and_temperature_set() -> None:
    outcome = run_calculation(_request())

    assert outcome.material == "NBR"
    assert outcome.alpha == pytest.approx(0.000175)
    assert outcome.temperatures == (AMBIENT_C, -20.0, 100.0)
    assert set(outcome.roles) == {"ambient", "min", "nominal", "max"}
    assert outcome.roles["nominal"] is outcome.roles["ambient"]
    assert outcome.roles["min"].temp_c == -20.0
    assert outcome.roles["max"].temp_c == 100.0


def test_warnings_include_nominal_band() -> None:
    outcome = run_calculation(_request())
    codes = [w.code for w in outcome.warnings]
    # 10% compression at 23 °C: low band and nominal band both fire
    assert "COMPRESSION_LOW" in codes
    assert codes[-1] == "NOMINAL_COMPRESSION_BAND"


def test_missing_optional_temperatures() -> None:
    outcome = run_calculation(_request(temp_min=None, temp_nom="", temp_max=None))
    assert outcome.temperatures == (AMBIENT_C,)
    assert set(outcome.roles) == {"ambient"}
    assert "NOMINAL_COMPRESSION_BAND" not in [w.code for w in outcome.warnings]


def test_alpha_override_wins() -> None:
    assert run_calculation(_request(alpha=0.0003)).alpha == pytest.approx(0.0003)


def test_validation_failure_lists_every_issue() -> None:
    with pytest.raises(ValidationFailed) as excinfo:
        run_calculation(_request(material="", oring_cs=None))
    assert excinfo.value.issues == ["Missing material group.", "oring_cs is required"]
    assert excinfo.value.to_dict()["kind"] == "validation"


def test_degenerate_geometry_propagates() -> None:
    with pytest.raises(DegenerateGeometry):
        run_calculation(_request(gland_angle=0.0))


def test_advisories_carried() -> None:
    outcome = run_calculation(_request(gland_top_r=-0.1))
    assert [a.field for a in outcome.advisories] == ["gland_top_r"]
