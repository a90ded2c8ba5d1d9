"""Domain services for shelving layout, parts and estimates."""

from .dimensions import (
    calculate_bay_width,
    calculate_dimensions,
    calculate_exterior_depth,
    calculate_exterior_height,
    calculate_exterior_width,
    calculate_side_height,
    to_inches,
    to_mm,
)
from .layout_resolver import LayoutResolver, calculate_layout
from .material_estimator import (
    MaterialEstimate,
    MaterialEstimator,
    calculate_material_estimate,
)
from .parts_generator import (
    PartsGenerator,
    find_openings,
    generate_parts,
    locate_door_hardware,
    part_id,
)
from .warnings import (
    DEFAULT_RULES,
    GridSizeRule,
    MergeSpanRule,
    WarningEngine,
    WarningRule,
    generate_warnings,
)

__all__ = [
    # Dimensions
    "calculate_bay_width",
    "calculate_dimensions",
    "calculate_exterior_depth",
    "calculate_exterior_height",
    "calculate_exterior_width",
    "calculate_side_height",
    "to_inches",
    "to_mm",
    # Layout
    "LayoutResolver",
    "calculate_layout",
    # Materials
    "MaterialEstimate",
    "MaterialEstimator",
    "calculate_material_estimate",
    # Parts
    "PartsGenerator",
    "find_openings",
    "generate_parts",
    "locate_door_hardware",
    "part_id",
    # Warnings
    "DEFAULT_RULES",
    "GridSizeRule",
    "MergeSpanRule",
    "WarningEngine",
    "WarningRule",
    "generate_warnings",
]
