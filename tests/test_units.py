from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from gland_core.errors import UnsupportedUnitPair
from gland_core.units import IN_TO_MM, convert, format_alpha, normalize_unit, to_number


def test_length_conversion_both_ways() -> None:
    assert convert(1.0, "in", "mm") == pytest.approx(25.4)
    assert convert(25.4, "mm", "in") == pytest.approx(1.0)
    assert convert(0.070, "in", "mm") == pytest.approx(0.070 * IN_TO_MM)


def test_temperature_conversion_both_ways() -> None:
    assert convert(100.0, "C", "F") == pytest.approx(212.0)
    assert convert(-40.0, "F", "C") == pytest.approx(-40.0)
    assert convert(32.0, "F", "C") == pytest.approx(0.0)


@pytest.mark.parametrize("value", [0.0, 1.5, -3.2, 123.456])
def test_length_roundtrip_is_lossless(value: float) -> None:
    assert convert(convert(value, "in", "mm"), "mm", "in") == pytest.approx(value)


@pytest.mark.parametrize("value", [-273.15, -40.0, -17.5, 0.0, 23.0, 98.6, 1000.0])
def test_temperature_roundtrip_is_lossless(value: float) -> None:
    assert convert(convert(value, "C", "F"), "F", "C") == pytest.approx(value)
    assert convert(convert(value, "F", "C"), "C", "F") == pytest.approx(value)


def test_same_unit_returns_value_unchanged() -> None:
    assert convert(3.14159, "mm", "mm") == 3.14159
    assert convert(-12.0, "F", "F") == -12.0


@pytest.mark.parametrize("value", [None, "", "abc", math.nan, math.inf, True])
def test_non_finite_input_returns_none(value) -> None:
    assert convert(value, "in", "mm") is None


def test_non_finite_input_short_circuits_unit_check() -> None:
    assert convert(math.nan, "in", "C") is None


def test_unsupported_pair_raises() -> None:
    with pytest.raises(UnsupportedUnitPair) as excinfo:
        convert(1.0, "in", "C")
    assert excinfo.value.kind == "unsupported_unit_pair"
    assert excinfo.value.from_unit == "in"
    assert excinfo.value.to_unit == "C"

    with pytest.raises(UnsupportedUnitPair):
        convert(1.0, "mm", "furlong")


def test_aliases_normalize() -> None:
    assert normalize_unit("Inch") == "in"
    assert normalize_unit(" Millimetre ") == "mm"
    assert normalize_unit("°F") == "F"
    assert normalize_unit("celsius") == "C"
    assert convert(1.0, "inches", "millimeter") == pytest.approx(25.4)


def test_to_number() -> None:
    assert to_number("2.5") == 2.5
    assert to_number(3) == 3.0
    assert to_number(False) is None
    assert to_number("1e999") is None


def test_format_alpha() -> None:
    assert format_alpha(316e-6) == "3.16e-4"
    assert format_alpha(0.000175) == "1.75e-4"
    assert format_alpha(None) == ""
    assert format_alpha("abc") == "abc"
