"""Rip-strip sheet packing for plywood cut layouts.

Parts are grouped by thickness and packed onto stock sheets with a greedy
strip algorithm: the sheet is first ripped into full-length strips, then
each strip is cross-cut into parts of the same rip width. Every part ends
up either placed on exactly one sheet or reported as oversized.

All result dataclasses are frozen; packing is deterministic for a given
parts list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from shelfgrid.domain.fractions import to_fraction_32
from shelfgrid.domain.value_objects import Part

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetConfig:
    """Stock sheet dimensions and cutting rules.

    Attributes:
        width: Sheet width in inches; rip cuts run across it (default 48").
        height: Sheet length in inches; strips run along it (default 96").
        cut_margin: Spacing in inches before and between cuts.
        rip_threshold: Parts with both sides at or under this length are
            ripped to their short side and cross-cut along their long side.
        width_tolerance: Rip widths closer than this share a strip.
    """

    width: float = 48.0
    height: float = 96.0
    cut_margin: float = 1.0
    rip_threshold: float = 24.0
    width_tolerance: float = 0.001

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Sheet width must be positive")
        if self.height <= 0:
            raise ValueError("Sheet height must be positive")
        if self.cut_margin < 0:
            raise ValueError("Cut margin must be non-negative")
        if self.rip_threshold <= 0:
            raise ValueError("Rip threshold must be positive")
        if self.width_tolerance < 0:
            raise ValueError("Width tolerance must be non-negative")

    @property
    def area(self) -> float:
        """Full sheet area in square inches."""
        return self.width * self.height


@dataclass(frozen=True)
class PlacedPart:
    """A part placed on a sheet.

    Attributes:
        part_id: Id of the placed piece (``<id>#k`` for expanded quantities).
        x: Distance from the sheet's left edge in inches.
        y: Distance from the sheet's bottom edge in inches.
        width: Rip width of the piece as placed.
        length: Cross-cut length of the piece as placed.
        rotated: True if the part was turned to rip along its length.
        original_part: The part this placement came from.
    """

    part_id: str
    x: float
    y: float
    width: float
    length: float
    rotated: bool
    original_part: Part

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def area(self) -> float:
        return self.width * self.length

    @property
    def right_edge(self) -> float:
        return self.x + self.width

    @property
    def top_edge(self) -> float:
        return self.y + self.length


@dataclass(frozen=True)
class RipCut:
    """A full-length rip producing one strip.

    Attributes:
        position: Distance of the strip's left edge from the sheet's left edge.
        width: Strip width in inches.
        label: Strip width as a 1/32" fraction string.
    """

    position: float
    width: float
    label: str


@dataclass(frozen=True)
class SheetLayout:
    """Layout of parts on a single stock sheet.

    Attributes:
        sheet_id: Label such as ``23/32" Sheet 1``.
        thickness: Thickness of the stock in inches.
        parts: Placed parts in placement order.
        rip_cuts: Rip cuts in left-to-right order.
        utilization: Placed part area as a percentage of the sheet area.
    """

    sheet_id: str
    thickness: float
    parts: tuple[PlacedPart, ...]
    rip_cuts: tuple[RipCut, ...]
    utilization: float

    @property
    def part_count(self) -> int:
        return len(self.parts)


@dataclass(frozen=True)
class OversizedPart:
    """A part that cannot be cut from stock sheets.

    Attributes:
        part: The rejected part.
        reason: Human-readable explanation.
    """

    part: Part
    reason: str


@dataclass(frozen=True)
class SheetLayoutResult:
    """Complete result of sheet packing.

    Attributes:
        sheets: Sheet layouts, grouped by thickness in first-seen order.
        oversized_parts: Parts excluded from packing.
    """

    sheets: tuple[SheetLayout, ...] = ()
    oversized_parts: tuple[OversizedPart, ...] = ()

    @property
    def total_sheets(self) -> int:
        return len(self.sheets)

    @property
    def total_parts_placed(self) -> int:
        return sum(sheet.part_count for sheet in self.sheets)

    def sheets_by_thickness(self) -> dict[float, int]:
        """Count of sheets needed per stock thickness."""
        counts: dict[float, int] = {}
        for sheet in self.sheets:
            counts[sheet.thickness] = counts.get(sheet.thickness, 0) + 1
        return counts


@dataclass(frozen=True)
class _ProcessedPart:
    """Internal piece with its rip orientation resolved."""

    piece_id: str
    part: Part
    rip_width: float
    cross_cut_length: float
    rotated: bool


@dataclass
class _Strip:
    """Internal strip state while packing one sheet.

    Attributes:
        x: Left edge of the strip.
        width: Rip width shared by every piece in the strip.
        used_length: Length consumed so far, including margins.
    """

    x: float
    width: float
    used_length: float
    parts: list[PlacedPart] = field(default_factory=list)


def check_sheet_fit(part: Part, config: SheetConfig | None = None) -> str | None:
    """Check whether a part can be cut from a stock sheet in either orientation.

    Returns:
        None when the part fits, otherwise the reason it does not.
    """
    config = config or SheetConfig()
    length = part.length_in
    width = part.width_in
    sheet = f'{config.width:g}" × {config.height:g}"'

    if length > config.width and width > config.height:
        return (
            f'Part dimensions {length:.2f}" × {width:.2f}" '
            f"exceed both sheet dimensions ({sheet})"
        )
    if length > config.height and width > config.width:
        return (
            f'Part dimensions {length:.2f}" × {width:.2f}" '
            "exceed sheet dimensions when rotated"
        )
    if max(length, width) > config.height:
        return (
            f'Longest dimension {max(length, width):.2f}" '
            f'exceeds sheet length ({config.height:g}")'
        )
    if min(length, width) > config.width:
        return (
            f'Shortest dimension {min(length, width):.2f}" '
            f'exceeds sheet width ({config.width:g}")'
        )
    return None


def _margin_fit_reason(
    rip_width: float, cross_cut_length: float, config: SheetConfig
) -> str | None:
    margin = config.cut_margin
    if (
        margin + rip_width + margin <= config.width
        and margin + cross_cut_length + margin <= config.height
    ):
        return None
    return (
        f'Part needs a {rip_width:.2f}" × {cross_cut_length:.2f}" strip plus '
        f'{margin:g}" cut margins, which exceeds the usable sheet area'
    )


def check_margin_fit(part: Part, config: SheetConfig | None = None) -> str | None:
    """Check whether a part fits an empty sheet once cut margins are counted.

    The part is oriented as the packer would orient it. A part can pass
    ``check_sheet_fit`` and still fail here, e.g. a 47.5" rip on a 48"
    sheet with 1" margins.

    Returns:
        None when the part fits, otherwise the reason it does not.
    """
    config = config or SheetConfig()
    rip_width, cross_cut_length, _ = rip_orientation(
        part.length_in, part.width_in, config.rip_threshold
    )
    return _margin_fit_reason(rip_width, cross_cut_length, config)


def rip_orientation(
    length: float, width: float, rip_threshold: float = 24.0
) -> tuple[float, float, bool]:
    """Choose the rip width for a part.

    Parts are ripped to their shorter side, so the longer side runs down
    the strip. The threshold only matters for square parts: one within the
    threshold keeps its orientation, a larger one is rotated.

    Returns:
        Tuple of (rip_width, cross_cut_length, rotated).
    """
    if length <= rip_threshold and width <= rip_threshold:
        if length >= width:
            return width, length, False
        return length, width, True
    if length <= width:
        return length, width, True
    return width, length, False


class RipStripPacker:
    """Greedy first-fit strip packer for one thickness group.

    Pieces are sorted by rip width, then cross-cut length, both descending.
    Each piece goes into the first open strip with a matching width and
    enough remaining length, or opens a new strip while the sheet has room.
    When neither works the sheet is closed and packing continues on a new
    sheet.

    Attributes:
        config: Sheet dimensions and cutting rules.
    """

    def __init__(self, config: SheetConfig | None = None) -> None:
        self.config = config or SheetConfig()

    def pack(
        self, pieces: Sequence[_ProcessedPart], thickness: float
    ) -> tuple[list[SheetLayout], list[OversizedPart]]:
        """Pack one thickness group onto as many sheets as needed.

        Args:
            pieces: Oriented pieces, all of the same thickness.
            thickness: Stock thickness in inches.

        Returns:
            Tuple of (sheet layouts, pieces too large for an empty sheet).
        """
        ordered = sorted(
            pieces,
            key=lambda p: (p.rip_width, p.cross_cut_length),
            reverse=True,
        )
        label = to_fraction_32(thickness)
        sheets: list[SheetLayout] = []
        oversized: list[OversizedPart] = []

        remaining = [p for p in ordered if not self._reject_oversized(p, oversized)]
        while remaining:
            sheet_id = f"{label} Sheet {len(sheets) + 1}"
            layout, remaining = self._pack_sheet(remaining, sheet_id, thickness)
            sheets.append(layout)
            logger.debug(
                "%s: %d parts, %d rips, %.1f%% used",
                sheet_id,
                layout.part_count,
                len(layout.rip_cuts),
                layout.utilization,
            )

        return sheets, oversized

    def _reject_oversized(
        self, piece: _ProcessedPart, oversized: list[OversizedPart]
    ) -> bool:
        # True when the piece cannot fit an empty sheet; it is recorded in oversized.
        reason = _margin_fit_reason(
            piece.rip_width, piece.cross_cut_length, self.config
        )
        if reason is None:
            return False
        oversized.append(OversizedPart(part=piece.part, reason=reason))
        logger.warning("Part '%s' cannot be placed on an empty sheet", piece.piece_id)
        return True

    def _pack_sheet(
        self, pieces: list[_ProcessedPart], sheet_id: str, thickness: float
    ) -> tuple[SheetLayout, list[_ProcessedPart]]:
        """Fill a single sheet, returning its layout and the unplaced pieces."""
        config = self.config
        margin = config.cut_margin
        strips: list[_Strip] = []
        rip_cuts: list[RipCut] = []
        placed: list[PlacedPart] = []
        current_x = margin

        for index, piece in enumerate(pieces):
            strip = next(
                (
                    s
                    for s in strips
                    if abs(s.width - piece.rip_width) < config.width_tolerance
                    and config.height - s.used_length
                    >= piece.cross_cut_length + margin
                ),
                None,
            )

            if strip is None:
                if current_x + piece.rip_width + margin > config.width:
                    # Sheet is full; the rest carry over to the next sheet.
                    return self._layout(sheet_id, thickness, placed, rip_cuts), list(
                        pieces[index:]
                    )
                strip = _Strip(x=current_x, width=piece.rip_width, used_length=margin)
                strips.append(strip)
                rip_cuts.append(
                    RipCut(
                        position=current_x,
                        width=piece.rip_width,
                        label=to_fraction_32(piece.rip_width),
                    )
                )
                current_x += piece.rip_width + margin

            placement = PlacedPart(
                part_id=piece.piece_id,
                x=strip.x,
                y=strip.used_length,
                width=piece.rip_width,
                length=piece.cross_cut_length,
                rotated=piece.rotated,
                original_part=piece.part,
            )
            strip.parts.append(placement)
            strip.used_length += piece.cross_cut_length + margin
            placed.append(placement)

        return self._layout(sheet_id, thickness, placed, rip_cuts), []

    def _layout(
        self,
        sheet_id: str,
        thickness: float,
        placed: list[PlacedPart],
        rip_cuts: list[RipCut],
    ) -> SheetLayout:
        used_area = sum(p.area for p in placed)
        return SheetLayout(
            sheet_id=sheet_id,
            thickness=thickness,
            parts=tuple(placed),
            rip_cuts=tuple(rip_cuts),
            utilization=used_area / self.config.area * 100,
        )


class SheetPackingService:
    """Screens, orients and groups parts, then packs each thickness group.

    Designs use different stock for frame, back and doors. Each thickness
    is a separate raw sheet, so groups are packed independently and their
    layouts concatenated in first-seen thickness order.

    Attributes:
        config: Sheet dimensions and cutting rules.
        packer: RipStripPacker doing the per-group packing.
    """

    def __init__(self, config: SheetConfig | None = None) -> None:
        self.config = config or SheetConfig()
        self.packer = RipStripPacker(self.config)

    def generate(self, parts: Sequence[Part]) -> SheetLayoutResult:
        """Generate sheet layouts for a parts list.

        Args:
            parts: Parts to cut; quantities above one are expanded.

        Returns:
            SheetLayoutResult with sheets and oversized parts.
        """
        if not parts:
            return SheetLayoutResult()

        groups, oversized = self._group_by_thickness(parts)
        logger.info(
            "Packing %d parts across %d thickness groups (%d oversized)",
            len(parts),
            len(groups),
            len(oversized),
        )

        sheets: list[SheetLayout] = []
        for thickness, pieces in groups.items():
            group_sheets, group_oversized = self.packer.pack(pieces, thickness)
            sheets.extend(group_sheets)
            oversized.extend(group_oversized)
            logger.debug(
                'Thickness %s": %d pieces -> %d sheets',
                to_fraction_32(thickness),
                len(pieces),
                len(group_sheets),
            )

        return SheetLayoutResult(sheets=tuple(sheets), oversized_parts=tuple(oversized))

    def _group_by_thickness(
        self, parts: Sequence[Part]
    ) -> tuple[dict[float, list[_ProcessedPart]], list[OversizedPart]]:
        groups: dict[float, list[_ProcessedPart]] = {}
        oversized: list[OversizedPart] = []

        for part in parts:
            reason = check_sheet_fit(part, self.config)
            if reason is not None:
                oversized.append(OversizedPart(part=part, reason=reason))
                continue

            rip_width, cross_cut, rotated = rip_orientation(
                part.length_in, part.width_in, self.config.rip_threshold
            )
            group = groups.setdefault(part.thickness_in, [])
            for copy in range(part.qty):
                piece_id = part.id if part.qty == 1 else f"{part.id}#{copy + 1}"
                group.append(
                    _ProcessedPart(
                        piece_id=piece_id,
                        part=part,
                        rip_width=rip_width,
                        cross_cut_length=cross_cut,
                        rotated=rotated,
                    )
                )

        return groups, oversized


def generate_sheet_layouts(
    parts: Sequence[Part], config: SheetConfig | None = None
) -> SheetLayoutResult:
    """Generate sheet layouts for a parts list."""
    return SheetPackingService(config).generate(parts)
