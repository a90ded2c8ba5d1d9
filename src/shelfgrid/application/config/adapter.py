"""Adapter between DesignConfiguration and domain DesignParams.

The configuration schema is the persistence boundary: it round-trips
DesignParams to and from JSON. Derived data is never stored.
"""

import json

from shelfgrid.application.config.loader import ConfigError, load_config_from_str
from shelfgrid.application.config.schema import (
    CURRENT_VERSION,
    DesignConfig,
    DesignConfiguration,
    DoorHardwareConfig,
    DoorModeConfig,
    MaterialsConfig,
    MergeConfig,
    ThicknessConfig,
)
from shelfgrid.domain.entities import DesignParams
from shelfgrid.domain.value_objects import (
    THICKNESS_MAP,
    DoorHardware,
    DoorMode,
    MaterialOptions,
    MergeSpec,
    ThicknessSpec,
)


def _thickness_to_domain(config: ThicknessConfig | None) -> ThicknessSpec | None:
    if config is None:
        return None
    if config.mm is not None:
        return ThicknessSpec.from_mm(config.mm)
    if config.actual_inches is not None:
        return ThicknessSpec(nominal=config.nominal, actual_inches=config.actual_inches)
    return ThicknessSpec.from_nominal(config.nominal)  # type: ignore[arg-type]


def _thickness_to_config(spec: ThicknessSpec | None) -> ThicknessConfig | None:
    if spec is None:
        return None
    if spec.mm is not None:
        return ThicknessConfig(mm=spec.mm)
    # Standard actual thickness is implied by the nominal label
    if spec.nominal is not None and THICKNESS_MAP[spec.nominal] == spec.actual_inches:
        return ThicknessConfig(nominal=spec.nominal)
    return ThicknessConfig(nominal=spec.nominal, actual_inches=spec.actual_inches)


def config_to_params(config: DesignConfiguration) -> DesignParams:
    """Convert a validated configuration into domain DesignParams.

    Raises:
        ConfigError: If the domain rejects the design, including overlapping
            or out-of-grid merges (error_type "validation").
    """
    design = config.design
    hardware = design.door_hardware
    try:
        return DesignParams(
            rows=design.rows,
            cols=design.cols,
            interior_clearance=design.interior_clearance,
            depth=design.depth,
            unit_system=design.unit_system,
            has_back=design.has_back,
            has_doors=design.has_doors,
            door_mode=DoorMode(
                type=design.door_mode.type,
                reveal=design.door_mode.reveal,
                overlay=design.door_mode.overlay,
            ),
            door_hardware=(
                DoorHardware(
                    position=hardware.position,
                    type=hardware.type,
                    inset=hardware.inset,
                )
                if hardware is not None
                else None
            ),
            materials=MaterialOptions(
                frame=_thickness_to_domain(design.materials.frame),  # type: ignore[arg-type]
                back=_thickness_to_domain(design.materials.back),
                door=_thickness_to_domain(design.materials.door),
            ),
            merges=tuple(
                MergeSpec(r0=m.r0, c0=m.c0, r1=m.r1, c1=m.c1) for m in design.merges
            ),
        )
    except ValueError as e:
        raise ConfigError(
            message=f"Invalid design: {e}",
            error_type="validation",
            details=[{"path": "design", "message": str(e)}],
        ) from e


def params_to_config(params: DesignParams) -> DesignConfiguration:
    """Convert DesignParams into a serializable configuration."""
    hardware = params.door_hardware
    return DesignConfiguration(
        schema_version=CURRENT_VERSION,
        design=DesignConfig(
            rows=params.rows,
            cols=params.cols,
            interior_clearance=params.interior_clearance,
            depth=params.depth,
            unit_system=params.unit_system,
            has_back=params.has_back,
            has_doors=params.has_doors,
            door_mode=DoorModeConfig(
                type=params.door_mode.type,
                reveal=params.door_mode.reveal,
                overlay=params.door_mode.overlay,
            ),
            door_hardware=(
                DoorHardwareConfig(
                    position=hardware.position,
                    type=hardware.type,
                    inset=hardware.inset,
                )
                if hardware is not None
                else None
            ),
            materials=MaterialsConfig(
                frame=_thickness_to_config(params.materials.frame),
                back=_thickness_to_config(params.materials.back),
                door=_thickness_to_config(params.materials.door),
            ),
            merges=[
                MergeConfig(r0=m.r0, c0=m.c0, r1=m.r1, c1=m.c1) for m in params.merges
            ],
        ),
    )


def dump_design(params: DesignParams, indent: int | None = 2) -> str:
    """Serialize a design to JSON text with camelCase keys."""
    data = params_to_config(params).model_dump(mode="json", by_alias=True)
    return json.dumps(data, indent=indent)


def load_design(content: str) -> DesignParams:
    """Parse JSON text into DesignParams.

    Raises:
        ConfigError: On invalid JSON, schema violations or domain rejection.
    """
    return config_to_params(load_config_from_str(content))
