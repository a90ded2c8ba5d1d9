"""Material estimation service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from ..fractions import board_feet
from ..value_objects import FRAME_ROLES, PartRole

if TYPE_CHECKING:
    from ..value_objects import Part

__all__ = ["MaterialEstimate", "MaterialEstimator", "calculate_material_estimate"]

SQIN_PER_SQFT = 144


@dataclass(frozen=True)
class MaterialEstimate:
    """Estimate of materials needed for a shelving unit.

    Attributes:
        frame_board_feet: Board feet of frame stock (top, bottom, sides,
            dividers and shelves).
        back_square_feet: Face area of back panels in square feet.
        door_square_feet: Face area of doors in square feet.
        total_frame_parts: Count of frame pieces.
        total_doors: Count of doors.
        has_back: Whether any back panel is present.
    """

    frame_board_feet: float = 0.0
    back_square_feet: float = 0.0
    door_square_feet: float = 0.0
    total_frame_parts: int = 0
    total_doors: int = 0
    has_back: bool = False

    @property
    def description(self) -> str:
        """Human-readable description of material needs."""
        text = (
            f"{self.frame_board_feet:.2f} bd ft frame stock "
            f"({self.total_frame_parts} parts)"
        )
        if self.has_back:
            text += f", {self.back_square_feet:.2f} sq ft back"
        if self.total_doors:
            text += f", {self.door_square_feet:.2f} sq ft doors ({self.total_doors})"
        return text


class MaterialEstimator:
    """Aggregates parts into board-foot and square-foot totals."""

    def estimate(self, parts: Sequence["Part"]) -> MaterialEstimate:
        """Estimate materials for a parts list."""
        frame_board_feet = 0.0
        back_square_feet = 0.0
        door_square_feet = 0.0
        total_frame_parts = 0
        total_doors = 0
        has_back = False

        for part in parts:
            if part.role in FRAME_ROLES:
                frame_board_feet += board_feet(
                    part.length_in, part.width_in, part.thickness_in, part.qty
                )
                total_frame_parts += part.qty
            elif part.role == PartRole.BACK:
                back_square_feet += part.area / SQIN_PER_SQFT
                has_back = True
            elif part.role == PartRole.DOOR:
                door_square_feet += part.area / SQIN_PER_SQFT
                total_doors += part.qty

        return MaterialEstimate(
            frame_board_feet=frame_board_feet,
            back_square_feet=back_square_feet,
            door_square_feet=door_square_feet,
            total_frame_parts=total_frame_parts,
            total_doors=total_doors,
            has_back=has_back,
        )


def calculate_material_estimate(parts: Sequence["Part"]) -> MaterialEstimate:
    """Estimate materials for a parts list."""
    return MaterialEstimator().estimate(parts)
