"""Parts generation for shelving units.

Combines the resolved layout, exterior dimensions and material/door
configuration into the canonical list of physical parts. Part ids are
composed from role, positional index and a descriptive suffix, so the
same design always yields the same id set.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from ..fractions import to_fraction_32
from ..value_objects import (
    BayRef,
    DoorHardware,
    DoorHardwareType,
    DoorModeType,
    HardwareLocation,
    LayoutInfo,
    MergeSpec,
    Opening,
    Part,
    PartRole,
)
from .dimensions import calculate_bay_width, calculate_dimensions, calculate_side_height
from .layout_resolver import LayoutResolver

if TYPE_CHECKING:
    from ..entities import DesignParams

logger = logging.getLogger(__name__)

__all__ = [
    "PartsGenerator",
    "find_openings",
    "generate_parts",
    "locate_door_hardware",
    "part_id",
]

# Hole diameters in inches
PULL_HOLE_DIAMETER = 1.0
DRILL_GUIDE_DIAMETER = 0.125


def part_id(role: str, index: int | None = None, suffix: str | None = None) -> str:
    """Compose a stable part id such as ``Side-0-L`` or ``Bay-1-Col0to2``."""
    segments = [role]
    if index is not None:
        segments.append(str(index))
    if suffix:
        segments.append(suffix)
    return "-".join(segments)


def find_openings(rows: int, cols: int, merges: Sequence[MergeSpec]) -> list[Opening]:
    """Partition the grid into openings.

    Each merge rectangle is one opening; every unmerged cell is a 1x1
    opening. Openings are returned in row-major order of their top-left
    cell.
    """
    openings: list[Opening] = []
    processed: set[tuple[int, int]] = set()

    for row in range(rows):
        for col in range(cols):
            if (row, col) in processed:
                continue

            merge = next((m for m in merges if m.contains(row, col)), None)
            if merge is not None:
                openings.append(
                    Opening(
                        row=merge.r0,
                        col=merge.c0,
                        width=merge.col_span,
                        height=merge.row_span,
                    )
                )
                processed.update(merge.cells)
            else:
                openings.append(Opening(row=row, col=col))
                processed.add((row, col))

    return openings


def locate_door_hardware(
    door: Part, hardware: DoorHardware, inset_inches: float
) -> HardwareLocation:
    """Place a hardware hole on a door face.

    The door's length runs across (x) and its width runs down (y).
    Left/right and top/bottom positions are inset from the matching edge;
    center and middle positions are centered on that axis.

    Args:
        door: Door part to mark.
        hardware: Hardware position and type.
        inset_inches: Hardware inset converted to inches.

    Returns:
        HardwareLocation measured from the door's left and top edges.
    """
    position = hardware.position.value
    door_width = door.length_in
    door_height = door.width_in

    if "left" in position:
        x = inset_inches
    elif "right" in position:
        x = door_width - inset_inches
    else:
        x = door_width / 2

    if position.startswith("top"):
        y = inset_inches
    elif position.startswith("bottom"):
        y = door_height - inset_inches
    else:
        y = door_height / 2

    diameter = (
        PULL_HOLE_DIAMETER
        if hardware.type == DoorHardwareType.PULL_HOLE
        else DRILL_GUIDE_DIAMETER
    )
    return HardwareLocation(
        part_id=door.id, x=x, y=y, diameter=diameter, hardware_type=hardware.type
    )


class PartsGenerator:
    """Generates the physical parts for a design."""

    def generate(
        self, params: "DesignParams", layout: LayoutInfo | None = None
    ) -> list[Part]:
        """Generate all parts for a design.

        Args:
            params: Design parameters.
            layout: Pre-resolved layout; resolved from params when omitted.

        Returns:
            List of parts: top, bottom, two sides, divider pieces, shelves,
            and optionally a back and one door per opening.
        """
        if layout is None:
            layout = LayoutResolver.for_design(params).resolve()
        dimensions = calculate_dimensions(params)

        clearance = params.interior_clearance_inches
        depth = params.depth_inches
        frame = params.frame_thickness

        parts: list[Part] = [
            Part(
                id=part_id("Top", 0),
                role=PartRole.TOP,
                qty=1,
                length_in=dimensions.ext_width,
                width_in=depth,
                thickness_in=frame,
                notes="Full-width top cap",
            ),
            Part(
                id=part_id("Bottom", 0),
                role=PartRole.BOTTOM,
                qty=1,
                length_in=dimensions.ext_width,
                width_in=depth,
                thickness_in=frame,
                notes="Full-width bottom cap",
            ),
        ]

        side_height = calculate_side_height(dimensions.ext_height, frame)
        for index, (suffix, label) in enumerate((("L", "Left"), ("R", "Right"))):
            parts.append(
                Part(
                    id=part_id("Side", index, suffix),
                    role=PartRole.SIDE,
                    qty=1,
                    length_in=side_height,
                    width_in=depth,
                    thickness_in=frame,
                    notes=f"{label} side, runs between top/bottom",
                )
            )

        for segment in layout.vertical_segments:
            parts.append(
                Part(
                    id=part_id(
                        "VDiv",
                        segment.column,
                        f"R{segment.row_start}to{segment.row_end}",
                    ),
                    role=PartRole.VERTICAL_DIVIDER,
                    qty=1,
                    length_in=segment.length_in,
                    width_in=depth,
                    thickness_in=frame,
                    notes=(
                        f"Vertical segment at column {segment.column}, "
                        f"rows {segment.row_start}-{segment.row_end}"
                    ),
                    bay=BayRef(
                        row=segment.row_start,
                        col_start=segment.column,
                        col_end=segment.column,
                        row_end=segment.row_end,
                    ),
                )
            )

        for shelf in layout.horizontal_segments:
            parts.append(
                Part(
                    id=part_id("Bay", shelf.row, f"Col{shelf.col_start}to{shelf.col_end}"),
                    role=PartRole.BAY_SHELF,
                    qty=1,
                    length_in=calculate_bay_width(shelf.module_count, clearance, frame),
                    width_in=depth,
                    thickness_in=frame,
                    notes=f"Shelf segment at row {shelf.row}, runs between verticals",
                    bay=BayRef(
                        row=shelf.row, col_start=shelf.col_start, col_end=shelf.col_end
                    ),
                )
            )

        if params.has_back and params.materials.back is not None:
            parts.append(
                Part(
                    id=part_id("Back", 0),
                    role=PartRole.BACK,
                    qty=1,
                    length_in=dimensions.ext_width,
                    width_in=dimensions.ext_height,
                    thickness_in=params.back_thickness,
                    notes="Surface-mounted back panel",
                )
            )

        if params.has_doors and params.materials.door is not None:
            parts.extend(self._doors(params))

        logger.debug("Generated %d parts for %dx%d design", len(parts), params.rows, params.cols)
        return parts

    def _doors(self, params: "DesignParams") -> list[Part]:
        """One door per opening, sized for the door mode."""
        clearance = params.interior_clearance_inches
        frame = params.frame_thickness
        doors: list[Part] = []

        for index, opening in enumerate(find_openings(params.rows, params.cols, params.merges)):
            opening_width = calculate_bay_width(opening.width, clearance, frame)
            opening_height = calculate_bay_width(opening.height, clearance, frame)

            if params.door_mode.type == DoorModeType.INSET:
                reveal = params.door_reveal_inches
                door_width = opening_width - 2 * reveal
                door_height = opening_height - 2 * reveal
                notes = f"Inset door with {to_fraction_32(reveal)} reveal"
            else:
                overlay = params.door_overlay_inches
                door_width = opening_width + 2 * overlay
                door_height = opening_height + 2 * overlay
                notes = f"Overlay door with {to_fraction_32(overlay)} overlay"

            doors.append(
                Part(
                    id=part_id("Door", index),
                    role=PartRole.DOOR,
                    qty=1,
                    length_in=door_width,
                    width_in=door_height,
                    thickness_in=params.door_thickness,
                    notes=notes,
                    bay=BayRef(
                        row=opening.row,
                        col_start=opening.col,
                        col_end=opening.col + opening.width,
                        row_end=opening.row + opening.height,
                    ),
                )
            )

        logger.info("Generated %d %s doors", len(doors), params.door_mode.type.value)
        return doors

    def hardware_locations(
        self, params: "DesignParams", parts: Sequence[Part]
    ) -> list[HardwareLocation]:
        """Hardware hole for every door, when doors and hardware are configured."""
        if not params.has_doors or params.door_hardware is None:
            return []
        return [
            locate_door_hardware(part, params.door_hardware, params.hardware_inset_inches)
            for part in parts
            if part.role == PartRole.DOOR
        ]


def generate_parts(params: "DesignParams") -> list[Part]:
    """Generate all parts for a design."""
    return PartsGenerator().generate(params)
