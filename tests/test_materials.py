from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from gland_core.materials import (
    ALPHA_DEFAULT,
    MATERIAL_TO_CTE,
    hardness_options,
    material_cte,
    material_names,
    resolve_alpha,
)


def test_table_is_positive() -> None:
    assert material_names()[0] == "FFKM"
    assert all(v > 0.0 for v in MATERIAL_TO_CTE.values())


def test_material_cte_case_insensitive() -> None:
    assert material_cte("nbr") == pytest.approx(0.000175)
    with pytest.raises(ValueError):
        material_cte("WOOD")


def test_hardness_options() -> None:
    assert hardness_options("FKM") == ("70", "90")
    assert hardness_options("IIR") == ()
    assert hardness_options(None) == ()


@pytest.mark.parametrize(
    ("material", "override", "expected"),
    [
        ("NBR", 0.0002, 0.0002),
        ("NBR", None, 0.000175),
        ("NBR", 0.0, 0.000175),
        ("NBR", "", 0.000175),
        ("", None, ALPHA_DEFAULT),
        ("WOOD", "nan", ALPHA_DEFAULT),
    ],
)
def test_resolve_alpha_precedence(material, override, expected) -> None:
    assert resolve_alpha(material, override) == pytest.approx(expected)
