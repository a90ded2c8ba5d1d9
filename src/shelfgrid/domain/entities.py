"""Domain entities for shelving unit design."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .value_objects import (
    MM_PER_INCH,
    RECOMMENDED_MATERIALS,
    DoorHardware,
    DoorMode,
    MaterialOptions,
    MergeSpec,
    UnitSystem,
)

# Default Kallax-style module dimensions (inches)
DEFAULT_INTERIOR_CLEARANCE = 13.25
DEFAULT_DEPTH = 15.375

# Grid size limit enforced by configuration and state reducers
MAX_GRID_SIZE = 10


class InvalidMergeError(ValueError):
    """Raised when a merge set is out of bounds or overlapping.

    Attributes:
        merge_index: Index of the offending merge, when known.
    """

    def __init__(self, message: str, merge_index: int | None = None) -> None:
        self.merge_index = merge_index
        super().__init__(message)


def validate_merges(rows: int, cols: int, merges: Sequence[MergeSpec]) -> None:
    """Check that merges lie inside the grid and do not overlap.

    Args:
        rows: Grid row count.
        cols: Grid column count.
        merges: Merge rectangles to check.

    Raises:
        InvalidMergeError: On the first out-of-grid or overlapping merge.
    """
    for index, merge in enumerate(merges):
        if not merge.fits_grid(rows, cols):
            raise InvalidMergeError(
                f"Merge {index} ({merge.r0},{merge.c0})-({merge.r1},{merge.c1}) "
                f"extends outside the {rows}x{cols} grid",
                merge_index=index,
            )
        for other_index in range(index):
            if merge.overlaps(merges[other_index]):
                raise InvalidMergeError(
                    f"Merge {index} overlaps merge {other_index}",
                    merge_index=index,
                )


@dataclass(frozen=True)
class DesignParams:
    """Complete parametric description of a shelving unit.

    Clearance and depth are in the units of ``unit_system``. Door reveal,
    door overlay and hardware inset are always inches. Instances are
    immutable; every change produces a new DesignParams.

    Attributes:
        rows: Grid rows (>= 1).
        cols: Grid columns (>= 1).
        interior_clearance: Clear opening of one module.
        depth: Shelf depth, front to back (excluding any back panel).
        unit_system: Units for clearance and depth.
        has_back: Whether a surface-mounted back panel is built.
        has_doors: Whether each opening gets a door.
        door_mode: Inset or overlay door style.
        door_hardware: Hardware placement on doors.
        materials: Material thickness per component.
        merges: Non-overlapping cell rectangles combined into single openings.

    Raises:
        ValueError: If grid size or lengths are not positive.
        InvalidMergeError: If merges fall outside the grid or overlap.
    """

    rows: int = 2
    cols: int = 2
    interior_clearance: float = DEFAULT_INTERIOR_CLEARANCE
    depth: float = DEFAULT_DEPTH
    unit_system: UnitSystem = UnitSystem.IMPERIAL
    has_back: bool = False
    has_doors: bool = False
    door_mode: DoorMode = field(default_factory=DoorMode)
    door_hardware: DoorHardware | None = None
    materials: MaterialOptions = RECOMMENDED_MATERIALS
    merges: tuple[MergeSpec, ...] = ()

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Grid must have at least one row and one column")
        if self.interior_clearance <= 0:
            raise ValueError("Interior clearance must be positive")
        if self.depth <= 0:
            raise ValueError("Depth must be positive")
        if not isinstance(self.merges, tuple):
            object.__setattr__(self, "merges", tuple(self.merges))
        validate_merges(self.rows, self.cols, self.merges)

    def _to_inches(self, value: float) -> float:
        if self.unit_system == UnitSystem.METRIC:
            return value / MM_PER_INCH
        return value

    @property
    def interior_clearance_inches(self) -> float:
        return self._to_inches(self.interior_clearance)

    @property
    def depth_inches(self) -> float:
        return self._to_inches(self.depth)

    @property
    def door_reveal_inches(self) -> float:
        return self.door_mode.reveal

    @property
    def door_overlay_inches(self) -> float:
        return self.door_mode.overlay

    @property
    def hardware_inset_inches(self) -> float:
        if self.door_hardware is None:
            return 0.0
        return self.door_hardware.inset

    @property
    def frame_thickness(self) -> float:
        """Frame material thickness in inches."""
        return self.materials.frame.inches

    @property
    def back_thickness(self) -> float:
        """Back material thickness in inches, 0 when no back material."""
        return self.materials.back.inches if self.materials.back else 0.0

    @property
    def door_thickness(self) -> float:
        """Door material thickness in inches, 0 when no door material."""
        return self.materials.door.inches if self.materials.door else 0.0

    def merge_at(self, row: int, col: int) -> tuple[int, MergeSpec] | None:
        """Find the merge containing a cell, with its index."""
        for index, merge in enumerate(self.merges):
            if merge.contains(row, col):
                return index, merge
        return None


DEFAULT_DESIGN = DesignParams()
