"""Immutable design state and its reducer.

A DesignState pairs the current DesignParams with the analysis derived
from them. Editing happens through action objects passed to ``reduce``,
which returns a new state and recomputes the analysis in one pass.
Nothing here mutates an existing state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Literal, Union

from shelfgrid.application.commands import AnalyzeDesignCommand
from shelfgrid.application.config.adapter import load_design
from shelfgrid.application.dtos import DesignAnalysis
from shelfgrid.domain.entities import (
    DEFAULT_DESIGN,
    MAX_GRID_SIZE,
    DesignParams,
    InvalidMergeError,
)
from shelfgrid.domain.services.dimensions import to_inches, to_mm
from shelfgrid.domain.value_objects import (
    RECOMMENDED_MATERIALS,
    DoorHardware,
    DoorHardwarePosition,
    DoorHardwareType,
    DoorModeType,
    MergeSpec,
    ThicknessSpec,
    UnitSystem,
)

logger = logging.getLogger(__name__)

MIN_LENGTH = 1.0

MaterialSlot = Literal["frame", "back", "door"]


@dataclass(frozen=True)
class DesignState:
    """Current design and everything derived from it.

    Attributes:
        params: The design being edited.
        analysis: Outputs recomputed from ``params``.
    """

    params: DesignParams
    analysis: DesignAnalysis


# Actions


@dataclass(frozen=True)
class SetGridSize:
    """Resize the grid; either dimension may be left unchanged."""

    rows: int | None = None
    cols: int | None = None


@dataclass(frozen=True)
class SetInteriorClearance:
    value: float


@dataclass(frozen=True)
class SetDepth:
    value: float


@dataclass(frozen=True)
class SetUnitSystem:
    """Switch units, converting clearance and depth to the new system."""

    unit_system: UnitSystem


@dataclass(frozen=True)
class SetHasBack:
    enabled: bool


@dataclass(frozen=True)
class SetHasDoors:
    enabled: bool


@dataclass(frozen=True)
class SetDoorMode:
    mode: DoorModeType


@dataclass(frozen=True)
class SetDoorReveal:
    value: float


@dataclass(frozen=True)
class SetDoorOverlay:
    value: float


@dataclass(frozen=True)
class SetDoorHardware:
    """Update door hardware fields, starting from the default placement."""

    position: DoorHardwarePosition | None = None
    type: DoorHardwareType | None = None
    inset: float | None = None


@dataclass(frozen=True)
class SetMaterial:
    """Set or clear the thickness of one component."""

    slot: MaterialSlot
    thickness: ThicknessSpec | None


@dataclass(frozen=True)
class UseRecommendedMaterials:
    pass


@dataclass(frozen=True)
class AddMerge:
    merge: MergeSpec


@dataclass(frozen=True)
class RemoveMerge:
    index: int


@dataclass(frozen=True)
class ReplaceMerge:
    """Swap the merge at ``index`` for a new rectangle, such as a grown one."""

    index: int
    merge: MergeSpec


@dataclass(frozen=True)
class ClearMerges:
    pass


@dataclass(frozen=True)
class ToggleCellMerge:
    """Remove the merge containing a cell, or start a 1x1 merge there.

    Grow a started merge with ``ReplaceMerge``; ``AddMerge`` rejects any
    rectangle overlapping it.
    """

    row: int
    col: int


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class ImportDesign:
    """Replace the design with one parsed from JSON text."""

    data: str


Action = Union[
    SetGridSize,
    SetInteriorClearance,
    SetDepth,
    SetUnitSystem,
    SetHasBack,
    SetHasDoors,
    SetDoorMode,
    SetDoorReveal,
    SetDoorOverlay,
    SetDoorHardware,
    SetMaterial,
    UseRecommendedMaterials,
    AddMerge,
    RemoveMerge,
    ReplaceMerge,
    ClearMerges,
    ToggleCellMerge,
    Reset,
    ImportDesign,
]


def _clamp_grid(value: int) -> int:
    return max(1, min(MAX_GRID_SIZE, value))


def _set_grid_size(params: DesignParams, action: SetGridSize) -> DesignParams:
    rows = _clamp_grid(action.rows) if action.rows is not None else params.rows
    cols = _clamp_grid(action.cols) if action.cols is not None else params.cols
    merges = tuple(m for m in params.merges if m.fits_grid(rows, cols))
    if len(merges) != len(params.merges):
        logger.debug(
            "Dropped %d merges outside the %dx%d grid",
            len(params.merges) - len(merges),
            rows,
            cols,
        )
    return replace(params, rows=rows, cols=cols, merges=merges)


def _set_unit_system(params: DesignParams, action: SetUnitSystem) -> DesignParams:
    if action.unit_system == params.unit_system:
        return params
    convert = to_mm if action.unit_system == UnitSystem.METRIC else to_inches
    return replace(
        params,
        unit_system=action.unit_system,
        interior_clearance=convert(params.interior_clearance, params.unit_system),
        depth=convert(params.depth, params.unit_system),
    )


def _set_has_back(params: DesignParams, action: SetHasBack) -> DesignParams:
    materials = params.materials
    if action.enabled and materials.back is None:
        materials = replace(materials, back=RECOMMENDED_MATERIALS.back)
    return replace(params, has_back=action.enabled, materials=materials)


def _set_has_doors(params: DesignParams, action: SetHasDoors) -> DesignParams:
    materials = params.materials
    hardware = params.door_hardware
    if action.enabled:
        if materials.door is None:
            materials = replace(materials, door=RECOMMENDED_MATERIALS.door)
        if hardware is None:
            hardware = DoorHardware()
    return replace(
        params, has_doors=action.enabled, materials=materials, door_hardware=hardware
    )


def _set_door_hardware(params: DesignParams, action: SetDoorHardware) -> DesignParams:
    hardware = params.door_hardware or DoorHardware()
    updates = {
        name: value
        for name, value in (
            ("position", action.position),
            ("type", action.type),
            ("inset", action.inset),
        )
        if value is not None
    }
    return replace(params, door_hardware=replace(hardware, **updates))


def _set_material(params: DesignParams, action: SetMaterial) -> DesignParams:
    if action.slot == "frame" and action.thickness is None:
        raise ValueError("Frame material cannot be removed")
    materials = replace(params.materials, **{action.slot: action.thickness})
    return replace(params, materials=materials)


def _add_merge(params: DesignParams, action: AddMerge) -> DesignParams:
    for index, existing in enumerate(params.merges):
        if action.merge.overlaps(existing):
            raise InvalidMergeError(
                f"Merge ({action.merge.r0},{action.merge.c0})-"
                f"({action.merge.r1},{action.merge.c1}) overlaps merge {index}",
                merge_index=index,
            )
    return replace(params, merges=params.merges + (action.merge,))


def _remove_merge(params: DesignParams, action: RemoveMerge) -> DesignParams:
    if not 0 <= action.index < len(params.merges):
        raise IndexError(f"No merge at index {action.index}")
    merges = params.merges[: action.index] + params.merges[action.index + 1 :]
    return replace(params, merges=merges)


def _replace_merge(params: DesignParams, action: ReplaceMerge) -> DesignParams:
    if not 0 <= action.index < len(params.merges):
        raise IndexError(f"No merge at index {action.index}")
    for index, existing in enumerate(params.merges):
        if index != action.index and action.merge.overlaps(existing):
            raise InvalidMergeError(
                f"Merge ({action.merge.r0},{action.merge.c0})-"
                f"({action.merge.r1},{action.merge.c1}) overlaps merge {index}",
                merge_index=index,
            )
    merges = list(params.merges)
    merges[action.index] = action.merge
    return replace(params, merges=tuple(merges))


def _toggle_cell_merge(params: DesignParams, action: ToggleCellMerge) -> DesignParams:
    found = params.merge_at(action.row, action.col)
    if found is not None:
        return _remove_merge(params, RemoveMerge(index=found[0]))
    cell = MergeSpec(r0=action.row, c0=action.col, r1=action.row, c1=action.col)
    return _add_merge(params, AddMerge(merge=cell))


_HANDLERS: dict[type, Callable[[DesignParams, Action], DesignParams]] = {
    SetGridSize: _set_grid_size,
    SetInteriorClearance: lambda p, a: replace(
        p, interior_clearance=max(MIN_LENGTH, a.value)
    ),
    SetDepth: lambda p, a: replace(p, depth=max(MIN_LENGTH, a.value)),
    SetUnitSystem: _set_unit_system,
    SetHasBack: _set_has_back,
    SetHasDoors: _set_has_doors,
    SetDoorMode: lambda p, a: replace(p, door_mode=replace(p.door_mode, type=a.mode)),
    SetDoorReveal: lambda p, a: replace(
        p, door_mode=replace(p.door_mode, reveal=a.value)
    ),
    SetDoorOverlay: lambda p, a: replace(
        p, door_mode=replace(p.door_mode, overlay=a.value)
    ),
    SetDoorHardware: _set_door_hardware,
    SetMaterial: _set_material,
    UseRecommendedMaterials: lambda p, a: replace(p, materials=RECOMMENDED_MATERIALS),
    AddMerge: _add_merge,
    RemoveMerge: _remove_merge,
    ReplaceMerge: _replace_merge,
    ClearMerges: lambda p, a: replace(p, merges=()),
    ToggleCellMerge: _toggle_cell_merge,
    Reset: lambda p, a: DEFAULT_DESIGN,
    ImportDesign: lambda p, a: load_design(a.data),
}


def reduce_params(params: DesignParams, action: Action) -> DesignParams:
    """Apply an action to design parameters.

    Raises:
        InvalidMergeError: If an added merge overlaps an existing one.
        ConfigError: If imported JSON is not a valid design.
        TypeError: For unknown action types.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unknown design action: {type(action).__name__}")
    return handler(params, action)


def reduce(
    state: DesignState,
    action: Action,
    command: AnalyzeDesignCommand | None = None,
) -> DesignState:
    """Return the state produced by applying an action.

    The analysis is recomputed from the new parameters. The input state is
    returned unchanged when the action does not alter the design.
    """
    params = reduce_params(state.params, action)
    if params == state.params:
        return state
    logger.debug("Applied %s", type(action).__name__)
    analysis = (command or AnalyzeDesignCommand()).execute(params)
    return DesignState(params=params, analysis=analysis)


def initial_state(
    params: DesignParams = DEFAULT_DESIGN, command: AnalyzeDesignCommand | None = None
) -> DesignState:
    """Build a state for a design, computing its analysis."""
    analysis = (command or AnalyzeDesignCommand()).execute(params)
    return DesignState(params=params, analysis=analysis)
