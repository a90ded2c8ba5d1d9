"""Tests for parts generation, openings and door hardware placement."""

from __future__ import annotations

from dataclasses import replace

import pytest

from shelfgrid.domain import DesignParams, MergeSpec, PartRole, generate_parts
from shelfgrid.domain.services import (
    PartsGenerator,
    find_openings,
    locate_door_hardware,
    part_id,
)
from shelfgrid.domain.value_objects import (
    DoorHardware,
    DoorHardwarePosition,
    DoorHardwareType,
    DoorMode,
    DoorModeType,
    MaterialOptions,
    Opening,
    Part,
    ThicknessSpec,
    UnitSystem,
)

FRAME_T = 23 / 32


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def generator() -> PartsGenerator:
    """Create a PartsGenerator."""
    return PartsGenerator()


@pytest.fixture
def door_part() -> Part:
    """A 13 1/8 square inset door."""
    return Part(
        id="Door-0",
        role=PartRole.DOOR,
        qty=1,
        length_in=13.125,
        width_in=13.125,
        thickness_in=FRAME_T,
    )


def _by_role(parts: list[Part], role: PartRole) -> list[Part]:
    return [p for p in parts if p.role == role]


# =============================================================================
# Frame parts
# =============================================================================


class TestFrameParts:
    """Tests for top, bottom, sides, dividers and shelves."""

    def test_default_design_part_ids(self, default_params: DesignParams) -> None:
        """The default 2x2 design has seven frame parts."""
        ids = [p.id for p in generate_parts(default_params)]
        assert ids == [
            "Top-0",
            "Bottom-0",
            "Side-0-L",
            "Side-1-R",
            "VDiv-1-R0to2",
            "Bay-1-Col0to1",
            "Bay-1-Col1to2",
        ]

    def test_top_and_bottom_span_exterior_width(
        self, default_params: DesignParams
    ) -> None:
        """Caps run the full exterior width at the design depth."""
        top = generate_parts(default_params)[0]
        assert top.role == PartRole.TOP
        assert top.length_in == pytest.approx(28.65625)
        assert top.width_in == pytest.approx(15.375)
        assert top.thickness_in == pytest.approx(FRAME_T)

    def test_sides_run_between_caps(self, default_params: DesignParams) -> None:
        """Side length is the exterior height less the two caps."""
        sides = _by_role(generate_parts(default_params), PartRole.SIDE)
        assert len(sides) == 2
        assert all(s.length_in == pytest.approx(27.21875) for s in sides)

    def test_divider_and_shelf_lengths(self, default_params: DesignParams) -> None:
        """Dividers span their rows; shelves span their bay."""
        parts = generate_parts(default_params)
        divider = _by_role(parts, PartRole.VERTICAL_DIVIDER)[0]
        shelf = _by_role(parts, PartRole.BAY_SHELF)[0]
        assert divider.length_in == pytest.approx(2 * 13.25 + FRAME_T)
        assert divider.bay is not None
        assert divider.bay.row_end == 2
        assert shelf.length_in == pytest.approx(13.25)
        assert shelf.bay is not None
        assert (shelf.bay.row, shelf.bay.col_start, shelf.bay.col_end) == (1, 0, 1)

    def test_full_merge_has_no_interior_members(
        self, fully_merged_params: DesignParams
    ) -> None:
        """A fully merged 2x2 has no dividers, no shelves and one door."""
        parts = generate_parts(fully_merged_params)
        assert _by_role(parts, PartRole.VERTICAL_DIVIDER) == []
        assert _by_role(parts, PartRole.BAY_SHELF) == []
        assert len(_by_role(parts, PartRole.DOOR)) == 1

    def test_wide_shelf_across_omitted_divider(self) -> None:
        """A shelf crossing a merged-away divider spans two modules."""
        params = DesignParams(
            rows=3, cols=3, merges=(MergeSpec(0, 0, 1, 1), MergeSpec(2, 0, 2, 1))
        )
        shelves = {p.id: p for p in _by_role(generate_parts(params), PartRole.BAY_SHELF)}
        assert shelves["Bay-2-Col0to2"].length_in == pytest.approx(2 * 13.25 + FRAME_T)

    def test_split_divider_ids(self) -> None:
        """Divider pieces carry their row range in the id."""
        params = DesignParams(rows=3, cols=2, merges=(MergeSpec(1, 0, 1, 1),))
        dividers = _by_role(generate_parts(params), PartRole.VERTICAL_DIVIDER)
        assert [d.id for d in dividers] == ["VDiv-1-R0to1", "VDiv-1-R2to3"]

    def test_ids_unique_and_deterministic(self) -> None:
        """Two generations of the same design produce the same unique ids."""
        params = DesignParams(
            rows=4,
            cols=4,
            has_back=True,
            has_doors=True,
            merges=(MergeSpec(0, 0, 1, 1), MergeSpec(3, 1, 3, 3)),
        )
        first = [p.id for p in generate_parts(params)]
        second = [p.id for p in generate_parts(params)]
        assert first == second
        assert len(set(first)) == len(first)
        assert generate_parts(params) == generate_parts(params)


# =============================================================================
# Back and doors
# =============================================================================


class TestBackAndDoors:
    """Tests for the optional back panel and doors."""

    def test_back_panel(self, default_params: DesignParams) -> None:
        """The back covers the exterior face in back stock."""
        parts = generate_parts(replace(default_params, has_back=True))
        back = _by_role(parts, PartRole.BACK)
        assert len(back) == 1
        assert back[0].id == "Back-0"
        assert back[0].length_in == pytest.approx(28.65625)
        assert back[0].width_in == pytest.approx(28.65625)
        assert back[0].thickness_in == pytest.approx(7 / 32)

    def test_back_requires_material(self) -> None:
        """No back is emitted without back material."""
        params = DesignParams(
            has_back=True,
            materials=MaterialOptions(frame=ThicknessSpec.from_nominal('3/4"')),
        )
        assert _by_role(generate_parts(params), PartRole.BACK) == []

    def test_doors_require_material(self) -> None:
        """No doors are emitted without door material."""
        params = DesignParams(
            has_doors=True,
            materials=MaterialOptions(frame=ThicknessSpec.from_nominal('3/4"')),
        )
        assert _by_role(generate_parts(params), PartRole.DOOR) == []

    def test_one_inset_door_per_cell(self, default_params: DesignParams) -> None:
        """A 2x2 grid without merges gets four inset doors."""
        doors = _by_role(
            generate_parts(replace(default_params, has_doors=True)), PartRole.DOOR
        )
        assert [d.id for d in doors] == ["Door-0", "Door-1", "Door-2", "Door-3"]
        for door in doors:
            assert door.length_in == pytest.approx(13.25 - 2 / 16)
            assert door.width_in == pytest.approx(13.25 - 2 / 16)
            assert door.notes == 'Inset door with 1/16" reveal'

    def test_overlay_doors(self, default_params: DesignParams) -> None:
        """Overlay doors grow by the overlay on every edge."""
        params = replace(
            default_params,
            has_doors=True,
            door_mode=DoorMode(type=DoorModeType.OVERLAY, overlay=0.5),
        )
        door = _by_role(generate_parts(params), PartRole.DOOR)[0]
        assert door.length_in == pytest.approx(14.25)
        assert door.notes == 'Overlay door with 1/2" overlay'

    def test_metric_inset_door(self) -> None:
        """A metric design sizes inset doors with an inch reveal."""
        params = DesignParams(
            interior_clearance=336.55,
            unit_system=UnitSystem.METRIC,
            has_doors=True,
            door_mode=DoorMode(reveal=1 / 8),
        )
        door = _by_role(generate_parts(params), PartRole.DOOR)[0]
        assert door.length_in == pytest.approx(13.25 - 2 / 8)
        assert door.width_in == pytest.approx(13.25 - 2 / 8)
        assert door.notes == 'Inset door with 1/8" reveal'

    def test_metric_overlay_door(self) -> None:
        """A metric design sizes overlay doors with an inch overlay."""
        params = DesignParams(
            interior_clearance=336.55,
            unit_system=UnitSystem.METRIC,
            has_doors=True,
            door_mode=DoorMode(type=DoorModeType.OVERLAY, overlay=0.5),
        )
        door = _by_role(generate_parts(params), PartRole.DOOR)[0]
        assert door.length_in == pytest.approx(14.25)
        assert door.notes == 'Overlay door with 1/2" overlay'

    def test_metric_hardware_inset(self) -> None:
        """Hardware inset stays in inches for metric designs."""
        params = DesignParams(
            interior_clearance=336.55,
            unit_system=UnitSystem.METRIC,
            has_doors=True,
            door_hardware=DoorHardware(
                position=DoorHardwarePosition.TOP_LEFT, inset=1.0
            ),
        )
        location = PartsGenerator().hardware_locations(params, generate_parts(params))[0]
        assert location.x == pytest.approx(1.0)
        assert location.y == pytest.approx(1.0)

    def test_merged_opening_door_size(self, fully_merged_params: DesignParams) -> None:
        """A merged opening gets one door sized to the whole bay."""
        door = _by_role(generate_parts(fully_merged_params), PartRole.DOOR)[0]
        assert door.length_in == pytest.approx(2 * 13.25 + FRAME_T - 2 / 16)
        assert door.bay is not None
        assert (door.bay.col_end, door.bay.row_end) == (2, 2)

    def test_door_count_matches_openings(self) -> None:
        """Door count equals merged rectangles plus unmerged cells."""
        params = DesignParams(
            rows=3, cols=3, has_doors=True, merges=(MergeSpec(0, 0, 1, 1),)
        )
        doors = _by_role(generate_parts(params), PartRole.DOOR)
        assert len(doors) == 1 + 5


# =============================================================================
# Openings and hardware
# =============================================================================


class TestFindOpenings:
    """Tests for find_openings."""

    def test_unmerged_cells(self) -> None:
        """Each cell is its own opening."""
        assert len(find_openings(2, 3, [])) == 6

    def test_merged_opening_in_row_major_order(self) -> None:
        """A merge becomes one opening at its top-left cell."""
        openings = find_openings(2, 3, [MergeSpec(0, 1, 1, 2)])
        assert openings == [
            Opening(row=0, col=0),
            Opening(row=0, col=1, width=2, height=2),
            Opening(row=1, col=0),
        ]


class TestDoorHardware:
    """Tests for locate_door_hardware and hardware_locations."""

    @pytest.mark.parametrize(
        ("position", "x", "y"),
        [
            (DoorHardwarePosition.TOP_CENTER, 6.5625, 1.0),
            (DoorHardwarePosition.TOP_LEFT, 1.0, 1.0),
            (DoorHardwarePosition.MIDDLE_LEFT, 1.0, 6.5625),
            (DoorHardwarePosition.MIDDLE_RIGHT, 12.125, 6.5625),
            (DoorHardwarePosition.BOTTOM_RIGHT, 12.125, 12.125),
            (DoorHardwarePosition.BOTTOM_CENTER, 6.5625, 12.125),
        ],
    )
    def test_positions(
        self, door_part: Part, position: DoorHardwarePosition, x: float, y: float
    ) -> None:
        """Edge positions are inset; center positions are centered."""
        location = locate_door_hardware(door_part, DoorHardware(position=position), 1.0)
        assert location.part_id == "Door-0"
        assert location.x == pytest.approx(x)
        assert location.y == pytest.approx(y)

    def test_diameters(self, door_part: Part) -> None:
        """Pull holes are 1 inch; drill guides are 1/8 inch."""
        pull = locate_door_hardware(door_part, DoorHardware(), 1.0)
        guide = locate_door_hardware(
            door_part, DoorHardware(type=DoorHardwareType.DRILL_GUIDE), 1.0
        )
        assert pull.diameter == 1.0
        assert guide.diameter == 0.125
        assert guide.hardware_type == DoorHardwareType.DRILL_GUIDE

    def test_one_location_per_door(self, generator: PartsGenerator) -> None:
        """Every door gets a hardware location when hardware is configured."""
        params = DesignParams(has_doors=True, door_hardware=DoorHardware())
        parts = generator.generate(params)
        locations = generator.hardware_locations(params, parts)
        assert [loc.part_id for loc in locations] == [
            "Door-0",
            "Door-1",
            "Door-2",
            "Door-3",
        ]

    def test_no_locations_without_hardware(self, generator: PartsGenerator) -> None:
        """No hardware configured means no locations."""
        params = DesignParams(has_doors=True)
        assert generator.hardware_locations(params, generator.generate(params)) == []


class TestPartId:
    """Tests for part_id."""

    def test_compose(self) -> None:
        """Role, index and suffix are joined with dashes."""
        assert part_id("Side", 0, "L") == "Side-0-L"
        assert part_id("Top", 0) == "Top-0"
        assert part_id("Back") == "Back"
