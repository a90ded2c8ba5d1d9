"""Dimension formulas for the shelving grid.

All calculations are performed in inches regardless of the design's unit
system; metric values are converted before any arithmetic. Formatting
back to the user's preferred unit is a presentation concern.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..value_objects import MM_PER_INCH, DerivedDimensions, UnitSystem

if TYPE_CHECKING:
    from ..entities import DesignParams

__all__ = [
    "calculate_bay_width",
    "calculate_dimensions",
    "calculate_exterior_depth",
    "calculate_exterior_height",
    "calculate_exterior_width",
    "calculate_side_height",
    "to_inches",
    "to_mm",
]


def to_inches(value: float, unit_system: UnitSystem) -> float:
    """Convert a length in the given unit system to inches."""
    if unit_system == UnitSystem.METRIC:
        return value / MM_PER_INCH
    return value


def to_mm(value: float, unit_system: UnitSystem) -> float:
    """Convert a length in the given unit system to millimetres."""
    if unit_system == UnitSystem.IMPERIAL:
        return value * MM_PER_INCH
    return value


def calculate_exterior_width(
    cols: int, interior_clearance: float, frame_thickness: float
) -> float:
    """Exterior width: every module plus a panel on each column boundary."""
    return cols * interior_clearance + (cols + 1) * frame_thickness


def calculate_exterior_height(
    rows: int, interior_clearance: float, frame_thickness: float
) -> float:
    """Exterior height: every module plus a panel on each row boundary."""
    return rows * interior_clearance + (rows + 1) * frame_thickness


def calculate_exterior_depth(
    depth: float, has_back: bool, back_thickness: float
) -> float:
    """Exterior depth including a surface-mounted back."""
    return depth + (back_thickness if has_back else 0.0)


def calculate_bay_width(
    module_count: int, interior_clearance: float, frame_thickness: float
) -> float:
    """Clear span of N contiguous modules with the panels between them removed.

    Also gives the length of a divider running along N rows.
    """
    return module_count * interior_clearance + (module_count - 1) * frame_thickness


def calculate_side_height(ext_height: float, frame_thickness: float) -> float:
    """Side panel length, running between the top and bottom caps."""
    return ext_height - 2 * frame_thickness


def calculate_dimensions(params: "DesignParams") -> DerivedDimensions:
    """Calculate exterior dimensions in inches for a design.

    Args:
        params: Design parameters in any unit system.

    Returns:
        DerivedDimensions with exterior width, height and depth in inches.
    """
    clearance = params.interior_clearance_inches
    frame = params.frame_thickness

    return DerivedDimensions(
        ext_width=calculate_exterior_width(params.cols, clearance, frame),
        ext_height=calculate_exterior_height(params.rows, clearance, frame),
        ext_depth=calculate_exterior_depth(
            params.depth_inches, params.has_back, params.back_thickness
        ),
    )
