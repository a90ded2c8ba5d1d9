"""Design input value objects: units, material thickness, doors and merges."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MM_PER_INCH = 25.4


class UnitSystem(str, Enum):
    """Unit system the user enters lengths in.

    Geometry is always computed in inches; metric inputs are converted
    before any calculation.
    """

    IMPERIAL = "imperial"
    METRIC = "metric"


class NominalThickness(str, Enum):
    """Marketed plywood thickness labels."""

    QUARTER = '1/4"'
    HALF = '1/2"'
    THREE_QUARTER = '3/4"'


# Nominal to actual thickness for standard plywood
THICKNESS_MAP: dict[NominalThickness, float] = {
    NominalThickness.QUARTER: 7 / 32,
    NominalThickness.HALF: 15 / 32,
    NominalThickness.THREE_QUARTER: 23 / 32,
}


@dataclass(frozen=True)
class ThicknessSpec:
    """Thickness of a sheet material.

    Either a nominal/actual inch pair (imperial stock) or a millimetre
    value (metric stock). Exactly one form must be given.

    Attributes:
        nominal: Marketed thickness label, for imperial stock.
        actual_inches: Manufactured thickness in inches, for imperial stock.
        mm: Thickness in millimetres, for metric stock.
    """

    nominal: NominalThickness | None = None
    actual_inches: float | None = None
    mm: float | None = None

    def __post_init__(self) -> None:
        if self.mm is None and self.actual_inches is None:
            raise ValueError("Thickness requires actual_inches or mm")
        if self.mm is not None and self.actual_inches is not None:
            raise ValueError("Thickness cannot specify both actual_inches and mm")
        if self.mm is not None and self.mm <= 0:
            raise ValueError("Thickness in mm must be positive")
        if self.actual_inches is not None and self.actual_inches <= 0:
            raise ValueError("Thickness in inches must be positive")

    @classmethod
    def from_nominal(cls, nominal: NominalThickness | str) -> "ThicknessSpec":
        """Standard plywood thickness for a nominal label."""
        nominal = NominalThickness(nominal)
        return cls(nominal=nominal, actual_inches=THICKNESS_MAP[nominal])

    @classmethod
    def from_mm(cls, mm: float) -> "ThicknessSpec":
        """Metric sheet thickness."""
        return cls(mm=mm)

    @property
    def is_metric(self) -> bool:
        return self.mm is not None

    @property
    def inches(self) -> float:
        """Thickness normalized to inches."""
        if self.mm is not None:
            return self.mm / MM_PER_INCH
        return self.actual_inches  # type: ignore[return-value]


@dataclass(frozen=True)
class MaterialOptions:
    """Per-component material thickness.

    Attributes:
        frame: Thickness for top, bottom, sides, dividers and shelves.
        back: Thickness for the back panel, if one can be built.
        door: Thickness for doors, if doors can be built.
    """

    frame: ThicknessSpec
    back: ThicknessSpec | None = None
    door: ThicknessSpec | None = None


RECOMMENDED_MATERIALS = MaterialOptions(
    frame=ThicknessSpec.from_nominal(NominalThickness.THREE_QUARTER),
    back=ThicknessSpec.from_nominal(NominalThickness.QUARTER),
    door=ThicknessSpec.from_nominal(NominalThickness.THREE_QUARTER),
)


class DoorModeType(str, Enum):
    """How doors sit relative to their openings."""

    INSET = "inset"
    OVERLAY = "overlay"


@dataclass(frozen=True)
class DoorMode:
    """Door style and its gap/overlap allowance.

    Reveal and overlay are inches in every unit system.

    Attributes:
        type: Inset doors sit inside the opening, overlay doors cover it.
        reveal: Gap on each edge of an inset door.
        overlay: Overlap on each edge of an overlay door.
    """

    type: DoorModeType = DoorModeType.INSET
    reveal: float = 1 / 16
    overlay: float = 0.5

    def __post_init__(self) -> None:
        if self.reveal < 0:
            raise ValueError("Door reveal must be non-negative")
        if self.overlay < 0:
            raise ValueError("Door overlay must be non-negative")


class DoorHardwarePosition(str, Enum):
    """Hardware location on a door face (3x3 grid without the center)."""

    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    MIDDLE_LEFT = "middle-left"
    MIDDLE_RIGHT = "middle-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"


class DoorHardwareType(str, Enum):
    """Kind of hardware mark made on each door."""

    DRILL_GUIDE = "drill-guide"
    PULL_HOLE = "pull-hole"


@dataclass(frozen=True)
class DoorHardware:
    """Door hardware placement.

    Attributes:
        position: Where on the door face the hardware goes.
        type: Pull hole or drill guide mark.
        inset: Distance from the nearest door edges, in inches.
    """

    position: DoorHardwarePosition = DoorHardwarePosition.TOP_CENTER
    type: DoorHardwareType = DoorHardwareType.PULL_HOLE
    inset: float = 1.0

    def __post_init__(self) -> None:
        if self.inset < 0:
            raise ValueError("Hardware inset must be non-negative")


@dataclass(frozen=True)
class MergeSpec:
    """An inclusive rectangle of grid cells combined into one opening.

    Attributes:
        r0: First row (top).
        c0: First column (left).
        r1: Last row, inclusive.
        c1: Last column, inclusive.
    """

    r0: int
    c0: int
    r1: int
    c1: int

    def __post_init__(self) -> None:
        if min(self.r0, self.c0, self.r1, self.c1) < 0:
            raise ValueError("Merge indices must be non-negative")
        if self.r1 < self.r0 or self.c1 < self.c0:
            raise ValueError(
                f"Merge ({self.r0},{self.c0})-({self.r1},{self.c1}) has end before start"
            )

    @property
    def row_span(self) -> int:
        """Number of rows covered."""
        return self.r1 - self.r0 + 1

    @property
    def col_span(self) -> int:
        """Number of columns covered."""
        return self.c1 - self.c0 + 1

    @property
    def cells(self) -> frozenset[tuple[int, int]]:
        return frozenset(
            (r, c)
            for r in range(self.r0, self.r1 + 1)
            for c in range(self.c0, self.c1 + 1)
        )

    def contains(self, row: int, col: int) -> bool:
        """Check if a cell lies inside this merge."""
        return self.r0 <= row <= self.r1 and self.c0 <= col <= self.c1

    def overlaps(self, other: "MergeSpec") -> bool:
        """Check if two merges share at least one cell."""
        return (
            self.r0 <= other.r1
            and self.r1 >= other.r0
            and self.c0 <= other.c1
            and self.c1 >= other.c0
        )

    def fits_grid(self, rows: int, cols: int) -> bool:
        return self.r1 < rows and self.c1 < cols


@dataclass(frozen=True)
class Opening:
    """Physical gap behind a door: a merge rectangle or a single cell.

    Attributes:
        row: Top row of the opening.
        col: Left column of the opening.
        width: Number of columns spanned.
        height: Number of rows spanned.
    """

    row: int
    col: int
    width: int = 1
    height: int = 1

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Opening must span at least one cell")


@dataclass(frozen=True)
class HardwareLocation:
    """Center of a hardware hole on a door face.

    Coordinates are inches from the door's left edge (x) and top edge (y).
    """

    part_id: str
    x: float
    y: float
    diameter: float
    hardware_type: DoorHardwareType = field(default=DoorHardwareType.PULL_HOLE)
