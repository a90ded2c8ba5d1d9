"""Pydantic configuration schema models for shelving designs.

This module defines the JSON persistence format for a design. Only the
design parameters are stored; layout, parts and sheets are always derived
again on load.

Field names are snake_case in Python and camelCase on the wire
(``interiorClearance``, ``hasBack``); both spellings are accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from shelfgrid.domain.value_objects import (
    DoorHardwarePosition,
    DoorHardwareType,
    DoorModeType,
    NominalThickness,
    UnitSystem,
)

# Supported schema versions for design files
# Version 1.0: Grid, merges, materials, doors and door hardware
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})
CURRENT_VERSION = "1.0"

MAX_GRID_SIZE = 10


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ThicknessConfig(_ConfigModel):
    """Material thickness configuration.

    Give either a nominal label (optionally with the measured actual
    thickness) or a metric thickness in millimetres.

    Attributes:
        nominal: Nominal plywood label such as ``3/4"``.
        actual_inches: Measured thickness; defaults to the standard actual
            thickness for the nominal label.
        mm: Metric thickness in millimetres.
    """

    nominal: NominalThickness | None = None
    actual_inches: float | None = Field(default=None, gt=0, le=2)
    mm: float | None = Field(default=None, gt=0, le=50)

    @model_validator(mode="after")
    def validate_single_form(self) -> "ThicknessConfig":
        """Require exactly one of the imperial or metric forms."""
        imperial = self.nominal is not None or self.actual_inches is not None
        if imperial and self.mm is not None:
            raise ValueError("Specify either nominal/actualInches or mm, not both")
        if not imperial and self.mm is None:
            raise ValueError("Thickness requires nominal, actualInches or mm")
        return self


class MaterialsConfig(_ConfigModel):
    """Material thickness per component.

    Attributes:
        frame: Frame thickness (top, bottom, sides, dividers, shelves).
        back: Back panel thickness; no back is built without it.
        door: Door thickness; no doors are built without it.
    """

    frame: ThicknessConfig = Field(
        default_factory=lambda: ThicknessConfig(nominal=NominalThickness.THREE_QUARTER)
    )
    back: ThicknessConfig | None = Field(
        default_factory=lambda: ThicknessConfig(nominal=NominalThickness.QUARTER)
    )
    door: ThicknessConfig | None = Field(
        default_factory=lambda: ThicknessConfig(nominal=NominalThickness.THREE_QUARTER)
    )


class DoorModeConfig(_ConfigModel):
    """Door style configuration.

    Reveal and overlay are inches in both unit systems.
    """

    type: DoorModeType = DoorModeType.INSET
    reveal: float = Field(default=1 / 16, ge=0, le=2)
    overlay: float = Field(default=0.5, ge=0, le=4)


class DoorHardwareConfig(_ConfigModel):
    """Door hardware placement configuration; ``inset`` is in inches."""

    position: DoorHardwarePosition = DoorHardwarePosition.TOP_CENTER
    type: DoorHardwareType = DoorHardwareType.PULL_HOLE
    inset: float = Field(default=1.0, ge=0)


class MergeConfig(_ConfigModel):
    """Inclusive cell rectangle merged into one opening."""

    r0: int = Field(..., ge=0, lt=MAX_GRID_SIZE)
    c0: int = Field(..., ge=0, lt=MAX_GRID_SIZE)
    r1: int = Field(..., ge=0, lt=MAX_GRID_SIZE)
    c1: int = Field(..., ge=0, lt=MAX_GRID_SIZE)

    @model_validator(mode="after")
    def validate_order(self) -> "MergeConfig":
        """Validate that the end cell is not before the start cell."""
        if self.r1 < self.r0 or self.c1 < self.c0:
            raise ValueError(
                f"merge end ({self.r1},{self.c1}) is before start ({self.r0},{self.c0})"
            )
        return self

    def overlaps(self, other: "MergeConfig") -> bool:
        return (
            self.r0 <= other.r1
            and self.r1 >= other.r0
            and self.c0 <= other.c1
            and self.c1 >= other.c0
        )


class DesignConfig(_ConfigModel):
    """Shelving design configuration.

    Attributes:
        rows: Grid rows (1 to 10).
        cols: Grid columns (1 to 10).
        interior_clearance: Clear opening of one module, in ``unit_system``.
        depth: Shelf depth, in ``unit_system``.
        unit_system: ``imperial`` (inches) or ``metric`` (millimetres).
        has_back: Build a surface-mounted back panel.
        has_doors: Build one door per opening.
        door_mode: Door style.
        door_hardware: Door hardware placement (optional).
        materials: Material thickness per component.
        merges: Non-overlapping merged cell rectangles.
    """

    rows: int = Field(default=2, ge=1, le=MAX_GRID_SIZE)
    cols: int = Field(default=2, ge=1, le=MAX_GRID_SIZE)
    interior_clearance: float = Field(default=13.25, gt=0)
    depth: float = Field(default=15.375, gt=0)
    unit_system: UnitSystem = UnitSystem.IMPERIAL
    has_back: bool = False
    has_doors: bool = False
    door_mode: DoorModeConfig = Field(default_factory=DoorModeConfig)
    door_hardware: DoorHardwareConfig | None = None
    materials: MaterialsConfig = Field(default_factory=MaterialsConfig)
    merges: list[MergeConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_merges(self) -> "DesignConfig":
        """Reject merges outside the grid or overlapping each other."""
        for index, merge in enumerate(self.merges):
            if merge.r1 >= self.rows or merge.c1 >= self.cols:
                raise ValueError(
                    f"merges[{index}] extends outside the {self.rows}x{self.cols} grid"
                )
            for other_index in range(index):
                if merge.overlaps(self.merges[other_index]):
                    raise ValueError(
                        f"merges[{index}] overlaps merges[{other_index}]"
                    )
        return self


class DesignConfiguration(_ConfigModel):
    """Root configuration model for a saved design.

    Example:
        >>> config = DesignConfiguration(
        ...     schema_version="1.0",
        ...     design=DesignConfig(rows=3, cols=4),
        ... )
    """

    schema_version: str = Field(default=CURRENT_VERSION, pattern=r"^\d+\.\d+$")
    design: DesignConfig = Field(default_factory=DesignConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
