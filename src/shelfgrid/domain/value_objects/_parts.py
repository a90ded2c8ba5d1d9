"""Cut parts and design warnings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PartRole(str, Enum):
    """Role of a physical part in the shelving unit."""

    TOP = "Top"
    BOTTOM = "Bottom"
    SIDE = "Side"
    VERTICAL_DIVIDER = "VerticalDivider"
    BAY_SHELF = "BayShelf"
    BACK = "Back"
    DOOR = "Door"


# Roles cut from frame stock and measured in board feet
FRAME_ROLES: frozenset[PartRole] = frozenset(
    {
        PartRole.TOP,
        PartRole.BOTTOM,
        PartRole.SIDE,
        PartRole.VERTICAL_DIVIDER,
        PartRole.BAY_SHELF,
    }
)


@dataclass(frozen=True)
class BayRef:
    """Grid location a part belongs to.

    Attributes:
        row: Row (or row boundary for shelves) where the part starts.
        col_start: Starting column boundary.
        col_end: Ending column boundary.
        row_end: Ending row boundary, for parts spanning rows.
    """

    row: int
    col_start: int
    col_end: int
    row_end: int | None = None


@dataclass(frozen=True)
class Part:
    """A physical part to cut.

    Attributes:
        id: Stable identifier, unique within one generation.
        role: Structural role of the part.
        qty: Number of identical pieces.
        length_in: Length in inches.
        width_in: Width in inches.
        thickness_in: Material thickness in inches.
        notes: Human-readable description.
        bay: Grid location the part belongs to.
    """

    id: str
    role: PartRole
    qty: int
    length_in: float
    width_in: float
    thickness_in: float
    notes: str | None = None
    bay: BayRef | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Part id must not be empty")
        if self.qty < 1:
            raise ValueError("Quantity must be at least 1")
        if self.length_in <= 0 or self.width_in <= 0:
            raise ValueError(f"Part '{self.id}' dimensions must be positive")
        if self.thickness_in <= 0:
            raise ValueError(f"Part '{self.id}' thickness must be positive")

    @property
    def area(self) -> float:
        """Face area for all pieces of this part in square inches."""
        return self.length_in * self.width_in * self.qty


class WarningSeverity(str, Enum):
    """How strongly a design warning should be surfaced."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class DesignWarning:
    """Advisory note about a design. Never blocks computation.

    Attributes:
        type: Machine-readable warning category.
        message: Human-readable description.
        severity: Info, warning or error.
        merge_index: Index into the design's merges, when tied to one.
    """

    type: str
    message: str
    severity: WarningSeverity = WarningSeverity.WARNING
    merge_index: int | None = None
