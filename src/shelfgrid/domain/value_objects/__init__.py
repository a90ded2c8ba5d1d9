"""Value objects for the shelving domain.

This module provides immutable data types used throughout the shelving
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Design inputs
from ._design import (
    MM_PER_INCH,
    RECOMMENDED_MATERIALS,
    THICKNESS_MAP,
    DoorHardware,
    DoorHardwarePosition,
    DoorHardwareType,
    DoorMode,
    DoorModeType,
    HardwareLocation,
    MaterialOptions,
    MergeSpec,
    NominalThickness,
    Opening,
    ThicknessSpec,
    UnitSystem,
)

# Derived layout
from ._layout import (
    DerivedDimensions,
    HorizontalSegment,
    LayoutInfo,
    VerticalSegment,
)

# Parts and warnings
from ._parts import (
    FRAME_ROLES,
    BayRef,
    DesignWarning,
    Part,
    PartRole,
    WarningSeverity,
)

__all__ = [
    # Design inputs
    "MM_PER_INCH",
    "RECOMMENDED_MATERIALS",
    "THICKNESS_MAP",
    "DoorHardware",
    "DoorHardwarePosition",
    "DoorHardwareType",
    "DoorMode",
    "DoorModeType",
    "HardwareLocation",
    "MaterialOptions",
    "MergeSpec",
    "NominalThickness",
    "Opening",
    "ThicknessSpec",
    "UnitSystem",
    # Layout
    "DerivedDimensions",
    "HorizontalSegment",
    "LayoutInfo",
    "VerticalSegment",
    # Parts
    "FRAME_ROLES",
    "BayRef",
    "DesignWarning",
    "Part",
    "PartRole",
    "WarningSeverity",
]
