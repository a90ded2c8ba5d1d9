"""Derived layout value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HorizontalSegment:
    """A physical shelf span at a row boundary between two present verticals.

    Attributes:
        row: Row boundary index (1..rows-1), shelf sits above this row.
        col_start: Column boundary where the shelf starts.
        col_end: Column boundary where the shelf ends.
    """

    row: int
    col_start: int
    col_end: int

    def __post_init__(self) -> None:
        if self.col_end <= self.col_start:
            raise ValueError("Shelf segment must span at least one module")

    @property
    def module_count(self) -> int:
        return self.col_end - self.col_start

    def overlaps(self, other: "HorizontalSegment") -> bool:
        """Check if two segments on the same row share any span."""
        return (
            self.row == other.row
            and self.col_start < other.col_end
            and other.col_start < self.col_end
        )


@dataclass(frozen=True)
class VerticalSegment:
    """A physical piece of an interior divider.

    Attributes:
        column: Column boundary index of the divider.
        row_start: First row the piece runs along.
        row_end: Row boundary where the piece stops (exclusive).
        length_in: Piece length in inches.
    """

    column: int
    row_start: int
    row_end: int
    length_in: float

    def __post_init__(self) -> None:
        if self.row_end <= self.row_start:
            raise ValueError("Vertical segment must span at least one row")
        if self.length_in <= 0:
            raise ValueError("Vertical segment length must be positive")

    @property
    def row_count(self) -> int:
        return self.row_end - self.row_start


@dataclass(frozen=True)
class LayoutInfo:
    """Which structural members exist for a grid and merge set.

    Attributes:
        present_verticals: Column boundaries (0..cols) where a panel exists.
        horizontal_segments: Shelf spans, ordered by row then column.
        vertical_segments: Interior divider pieces, ordered by column then row.
    """

    present_verticals: frozenset[int]
    horizontal_segments: tuple[HorizontalSegment, ...]
    vertical_segments: tuple[VerticalSegment, ...]

    @property
    def interior_verticals(self) -> list[int]:
        """Present column boundaries other than the two sides."""
        if not self.present_verticals:
            return []
        left, right = min(self.present_verticals), max(self.present_verticals)
        return sorted(c for c in self.present_verticals if c not in (left, right))


@dataclass(frozen=True)
class DerivedDimensions:
    """Exterior dimensions of the unit in inches."""

    ext_width: float
    ext_height: float
    ext_depth: float

    def __post_init__(self) -> None:
        if self.ext_width <= 0 or self.ext_height <= 0 or self.ext_depth <= 0:
            raise ValueError("All dimensions must be positive")
