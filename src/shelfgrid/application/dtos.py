"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from shelfgrid.domain import DerivedDimensions, DesignParams, DesignWarning, LayoutInfo, Part
from shelfgrid.domain.services import MaterialEstimate
from shelfgrid.domain.value_objects import HardwareLocation, PartRole, WarningSeverity

if TYPE_CHECKING:
    from shelfgrid.infrastructure.sheet_packing import SheetLayoutResult


@dataclass(frozen=True)
class DesignAnalysis:
    """Everything derived from a design in one pass.

    Attributes:
        params: The design the analysis was computed from.
        dimensions: Exterior dimensions in inches.
        layout: Resolved verticals and shelf/divider segments.
        parts: Cut parts in generation order.
        estimate: Material totals.
        warnings: Advisory structural warnings.
        hardware: Door hardware hole locations.
        sheet_layouts: Packed sheets, or None when packing was skipped.
    """

    params: DesignParams
    dimensions: DerivedDimensions
    layout: LayoutInfo
    parts: tuple[Part, ...]
    estimate: MaterialEstimate
    warnings: tuple[DesignWarning, ...] = ()
    hardware: tuple[HardwareLocation, ...] = ()
    sheet_layouts: "SheetLayoutResult | None" = None

    @property
    def part_count(self) -> int:
        """Total physical pieces, counting quantities."""
        return sum(part.qty for part in self.parts)

    @property
    def has_warnings(self) -> bool:
        return any(w.severity != WarningSeverity.INFO for w in self.warnings)

    def parts_by_role(self, role: PartRole) -> list[Part]:
        """Parts with the given role, in generation order."""
        return [part for part in self.parts if part.role == role]
