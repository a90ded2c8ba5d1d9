"""Domain layer - core shelving computation."""

from .entities import (
    DEFAULT_DESIGN,
    MAX_GRID_SIZE,
    DesignParams,
    InvalidMergeError,
    validate_merges,
)
from .services import (
    LayoutResolver,
    MaterialEstimate,
    MaterialEstimator,
    PartsGenerator,
    WarningEngine,
    calculate_dimensions,
    calculate_layout,
    calculate_material_estimate,
    generate_parts,
    generate_warnings,
)
from .value_objects import (
    DerivedDimensions,
    DesignWarning,
    LayoutInfo,
    MaterialOptions,
    MergeSpec,
    Part,
    PartRole,
    ThicknessSpec,
    UnitSystem,
)

__all__ = [
    "DEFAULT_DESIGN",
    "MAX_GRID_SIZE",
    "DerivedDimensions",
    "DesignParams",
    "DesignWarning",
    "InvalidMergeError",
    "LayoutInfo",
    "LayoutResolver",
    "MaterialEstimate",
    "MaterialEstimator",
    "MaterialOptions",
    "MergeSpec",
    "Part",
    "PartRole",
    "PartsGenerator",
    "ThicknessSpec",
    "UnitSystem",
    "WarningEngine",
    "calculate_dimensions",
    "calculate_layout",
    "calculate_material_estimate",
    "generate_parts",
    "generate_warnings",
    "validate_merges",
]
