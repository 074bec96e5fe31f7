from __future__ import annotations

from .units import to_number

ALPHA_DEFAULT = 316e-6

# linear CTE, 1/°C
MATERIAL_TO_CTE: dict[str, float] = {
    "FFKM": 0.00035,
    "FKM": 0.00025,
    "NBR": 0.000175,
    "VMQ": 0.00021,
    "HNBR": 0.000175,
    "EPDM": 0.000175,
    "PU": 0.000175,
    "ACM": 0.00018,
    "CR": 0.000185,
    "FVMQ": 0.00022,
    "NR": 0.00018,
    "IIR": 0.00013,
    "SBR": 0.00018,
}

# Shore A
MATERIAL_TO_HARDNESS: dict[str, tuple[str, ...]] = {
    "NBR": ("70", "90"),
    "FKM": ("70", "90"),
    "EPDM": ("75",),
    "VMQ": ("70",),
}


def material_names() -> list[str]:
    return list(MATERIAL_TO_CTE)


def _key(material: str | None) -> str:
    return str(material or "").strip().upper()


def material_cte(material: str) -> float:
    key = _key(material)
    if key not in MATERIAL_TO_CTE:
        raise ValueError(f"Unsupported material: {material}")
    return MATERIAL_TO_CTE[key]


def hardness_options(material: str | None) -> tuple[str, ...]:
    return MATERIAL_TO_HARDNESS.get(_key(material), ())


def resolve_alpha(material: str | None, override: object = None) -> float:
    """
    CTE used for the calculation: a finite non-zero override wins, then the
    material table, then ALPHA_DEFAULT.
    """
    alpha = to_number(override)
    if alpha is not None and alpha != 0.0:
        return alpha
    return MATERIAL_TO_CTE.get(_key(material), ALPHA_DEFAULT)
