from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from gland_core.evaluator import evaluate, field_advisories, nominal_compression_warnings
from gland_core.thermal import CalculationResult, TemperatureResult


def _result(stretch: float, *entries: tuple[float, float, float]) -> CalculationResult:
    return CalculationResult(
        stretch_pct=stretch,
        gland_volume=100.0,
        seal_volume=80.0,
        temperature_results=tuple(TemperatureResult(t, c, f) for t, c, f in entries),
    )


def _codes(advisories) -> list[str]:
    return [a.code for a in advisories]


def test_in_band_is_silent() -> None:
    for stretch in (0.0, 2.5, 5.0):
        assert evaluate(_result(stretch, (23.0, 15.0, 95.0), (80.0, 30.0, 50.0))) == []


def test_loose_and_exceeds_are_exclusive() -> None:
    loose = evaluate(_result(-0.1))
    assert _codes(loose) == ["STRETCH_LOOSE"]
    assert loose[0].message == "O-ring is loose (negative stretch)."

    tight = evaluate(_result(5.01))
    assert _codes(tight) == ["STRETCH_EXCEEDS"]
    assert tight[0].message == "Stretch exceeds recommended 5%."


def test_per_temperature_warnings_keep_order() -> None:
    warnings = evaluate(
        _result(
            1.0,
            (23.0, 10.0, 96.0),
            (-40.5, 31.0, 50.0),
        )
    )
    assert _codes(warnings) == ["COMPRESSION_LOW", "GLAND_FILL_HIGH", "COMPRESSION_HIGH"]
    assert [w.temp_c for w in warnings] == [23.0, 23.0, -40.5]
    assert warnings[0].message == "Compression 23°C < 15%"
    assert warnings[1].message == "Gland fill 23°C > 95%"
    assert warnings[2].message == "Compression -40.5°C > 30%"


def test_evaluate_is_deterministic() -> None:
    result = _result(7.0, (23.0, 10.0, 99.0))
    assert evaluate(result) == evaluate(result)


def test_nominal_band_closed_interval() -> None:
    assert nominal_compression_warnings(None) == []
    assert nominal_compression_warnings(TemperatureResult(60.0, 20.0, 50.0)) == []
    assert nominal_compression_warnings(TemperatureResult(60.0, 25.0, 50.0)) == []

    out = nominal_compression_warnings(TemperatureResult(60.0, 19.5, 50.0))
    assert _codes(out) == ["NOMINAL_COMPRESSION_BAND"]
    assert out[0].message == "Nominal compression 19.50% is outside the 20–25% band."
    assert out[0].temp_c == 60.0


def test_translator_receives_keys_and_params() -> None:
    calls = []

    def fake_t(key: str, **kwargs) -> str:
        calls.append((key, kwargs))
        return key

    warnings = evaluate(_result(9.0, (23.0, 12.0, 40.0)), translator=fake_t)
    assert [w.message for w in warnings] == ["warnings.stretch_exceeds", "warnings.compression_low"]
    assert calls[1] == ("warnings.compression_low", {"temp": "23", "limit": "15"})


def test_field_advisories_severity() -> None:
    hints = field_advisories(
        {
            "gland_width": -1.0,
            "gland_angle": 270.0,
            "alpha": -0.0001,
            "oring_cs": "abc",
            "gap": 0.1,
        }
    )
    by_field = {h.field: h for h in hints}
    assert set(by_field) == {"gland_width", "gland_angle", "alpha"}
    assert by_field["gland_width"].severity == "warn"
    assert by_field["gland_width"].code == "FIELD_GLAND_WIDTH"
    assert by_field["gland_angle"].severity == "invalid"
    assert by_field["alpha"].severity == "invalid"
    assert str(by_field["gland_width"]) == "Width is negative; verify sign."
