"""
gland_core: calculation engine for O-ring sizing in dovetail glands.

- unit / temperature conversion
- dovetail cross-section geometry
- thermally compensated stretch, compression and gland fill
- engineering warning bands
- AS568 size catalog parsing, filtering and cached loading

Inputs are canonical (mm, °C). Display units, rounding and clamping belong
to the caller.
"""

from .catalog import CatalogRow, filter_rows, parse_catalog
from .catalog_store import CatalogConfig, CatalogStore
from .errors import (
    CatalogLoadFailure,
    DegenerateGeometry,
    GlandCoreError,
    UnsupportedUnitPair,
    ValidationFailed,
)
from .evaluator import Advisory, evaluate, nominal_compression_warnings
from .geometry import circular_segment_area, dovetail_cross_section_area
from .runner import CalculationOutcome, run_calculation
from .thermal import (
    AMBIENT_C,
    CalculationResult,
    GlandGeometry,
    SealGeometry,
    TemperatureResult,
    build_temperature_set,
    compute_results,
)
from .units import convert

__all__ = [
    "AMBIENT_C",
    "Advisory",
    "CalculationOutcome",
    "CalculationResult",
    "CatalogConfig",
    "CatalogLoadFailure",
    "CatalogRow",
    "CatalogStore",
    "DegenerateGeometry",
    "GlandCoreError",
    "GlandGeometry",
    "SealGeometry",
    "TemperatureResult",
    "UnsupportedUnitPair",
    "ValidationFailed",
    "build_temperature_set",
    "circular_segment_area",
    "compute_results",
    "convert",
    "dovetail_cross_section_area",
    "evaluate",
    "filter_rows",
    "nominal_compression_warnings",
    "parse_catalog",
    "run_calculation",
]
