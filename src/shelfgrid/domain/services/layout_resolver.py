"""Layout resolution: which dividers and shelves physically exist.

Given a grid size and a set of non-overlapping cell merges, this module
decides which interior column boundaries keep a divider, where shelf
spans run at each row boundary, and how dividers are broken into
separate pieces around the merged openings they cross.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from ..value_objects import (
    THICKNESS_MAP,
    HorizontalSegment,
    LayoutInfo,
    MergeSpec,
    NominalThickness,
    VerticalSegment,
)
from .dimensions import calculate_bay_width

if TYPE_CHECKING:
    from ..entities import DesignParams

logger = logging.getLogger(__name__)

__all__ = ["LayoutResolver", "calculate_layout"]

_DEFAULT_CLEARANCE = 13.25
_DEFAULT_FRAME = THICKNESS_MAP[NominalThickness.THREE_QUARTER]


class LayoutResolver:
    """Resolves present verticals, shelf segments and divider segments.

    The resolver assumes merges are pairwise non-overlapping; DesignParams
    enforces this before a resolver ever sees them.

    Attributes:
        rows: Grid row count.
        cols: Grid column count.
        merges: Merge rectangles.
        interior_clearance: Module clearance in inches.
        frame_thickness: Frame panel thickness in inches.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        merges: Sequence[MergeSpec],
        interior_clearance: float = _DEFAULT_CLEARANCE,
        frame_thickness: float = _DEFAULT_FRAME,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.merges = tuple(merges)
        self.interior_clearance = interior_clearance
        self.frame_thickness = frame_thickness

        # Cell -> index of the merge that owns it
        self._owner: dict[tuple[int, int], int] = {}
        for index, merge in enumerate(self.merges):
            for cell in merge.cells:
                self._owner[cell] = index

    @classmethod
    def for_design(cls, params: "DesignParams") -> "LayoutResolver":
        """Create a resolver from design parameters (lengths in inches)."""
        return cls(
            rows=params.rows,
            cols=params.cols,
            merges=params.merges,
            interior_clearance=params.interior_clearance_inches,
            frame_thickness=params.frame_thickness,
        )

    def resolve(self) -> LayoutInfo:
        """Compute the full layout."""
        present = self.present_verticals()
        horizontals = self.horizontal_segments(present)
        verticals = self.vertical_segments(present)

        logger.debug(
            "Layout %dx%d with %d merges: verticals=%s, %d shelves, %d divider pieces",
            self.rows,
            self.cols,
            len(self.merges),
            sorted(present),
            len(horizontals),
            len(verticals),
        )

        return LayoutInfo(
            present_verticals=present,
            horizontal_segments=horizontals,
            vertical_segments=verticals,
        )

    def cells_merged(self, row1: int, col1: int, row2: int, col2: int) -> bool:
        """Check if two cells belong to the same merge rectangle."""
        owner = self._owner.get((row1, col1))
        return owner is not None and owner == self._owner.get((row2, col2))

    def present_verticals(self) -> frozenset[int]:
        """Column boundaries where a physical divider or side exists.

        Sides (0 and cols) are always present. An interior boundary is
        omitted only when every row is merged across it.
        """
        present = {0, self.cols}
        for col in range(1, self.cols):
            if any(
                not self.cells_merged(row, col - 1, row, col)
                for row in range(self.rows)
            ):
                present.add(col)
        return frozenset(present)

    def horizontal_segments(
        self, present_verticals: frozenset[int]
    ) -> tuple[HorizontalSegment, ...]:
        """Shelf spans at each interior row boundary.

        Columns not merged across the boundary need support. Contiguous
        runs of such columns are widened to the nearest present verticals,
        then cut at every present vertical inside them, so each shelf spans
        exactly one physical bay. A bay reached by two runs gets one shelf.
        """
        verticals = sorted(present_verticals)
        segments: list[HorizontalSegment] = []

        for row in range(1, self.rows):
            bays: set[tuple[int, int]] = set()
            for start, end in self._support_runs(row):
                left = max(v for v in verticals if v <= start)
                right = min(v for v in verticals if v >= end)
                bays.update(_bays_between(verticals, left, right))

            for left, right in sorted(bays):
                segments.append(HorizontalSegment(row=row, col_start=left, col_end=right))

        return tuple(segments)

    def _support_runs(self, row: int) -> list[tuple[int, int]]:
        """Maximal [start, end) column runs needing a shelf at a row boundary."""
        runs: list[tuple[int, int]] = []
        run_start: int | None = None

        for col in range(self.cols + 1):
            needs_support = col < self.cols and not self.cells_merged(
                row - 1, col, row, col
            )
            if needs_support:
                if run_start is None:
                    run_start = col
            elif run_start is not None:
                runs.append((run_start, col))
                run_start = None

        return runs

    def vertical_segments(
        self, present_verticals: frozenset[int]
    ) -> tuple[VerticalSegment, ...]:
        """Physical divider pieces for each present interior vertical.

        A divider not crossed by any merge runs the full interior height.
        Otherwise it is split into one piece per maximal run of rows not
        covered by a crossing merge.
        """
        segments: list[VerticalSegment] = []

        for col in sorted(present_verticals):
            if col in (0, self.cols):
                continue

            crossing = [m for m in self.merges if m.c0 < col <= m.c1]
            if not crossing:
                segments.append(self._segment(col, 0, self.rows))
                continue

            merged_rows = {
                row for merge in crossing for row in range(merge.r0, merge.r1 + 1)
            }
            run_start: int | None = None
            for row in range(self.rows + 1):
                if row < self.rows and row not in merged_rows:
                    if run_start is None:
                        run_start = row
                elif run_start is not None:
                    segments.append(self._segment(col, run_start, row))
                    run_start = None

            logger.debug(
                "Divider at column %d split around merged rows %s",
                col,
                sorted(merged_rows),
            )

        return tuple(segments)

    def _segment(self, col: int, row_start: int, row_end: int) -> VerticalSegment:
        return VerticalSegment(
            column=col,
            row_start=row_start,
            row_end=row_end,
            length_in=calculate_bay_width(
                row_end - row_start, self.interior_clearance, self.frame_thickness
            ),
        )


def _bays_between(verticals: list[int], left: int, right: int) -> list[tuple[int, int]]:
    """Adjacent pairs of present verticals from left to right."""
    inside = [v for v in verticals if left <= v <= right]
    return list(zip(inside, inside[1:]))


def calculate_layout(
    rows: int,
    cols: int,
    merges: Sequence[MergeSpec],
    interior_clearance: float = _DEFAULT_CLEARANCE,
    frame_thickness: float = _DEFAULT_FRAME,
) -> LayoutInfo:
    """Resolve the layout for a grid and merge set.

    Args:
        rows: Grid row count.
        cols: Grid column count.
        merges: Non-overlapping merge rectangles.
        interior_clearance: Module clearance in inches (for divider lengths).
        frame_thickness: Frame thickness in inches (for divider lengths).

    Returns:
        LayoutInfo describing present verticals and segments.
    """
    return LayoutResolver(
        rows, cols, merges, interior_clearance, frame_thickness
    ).resolve()
