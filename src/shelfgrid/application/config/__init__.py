"""Design file schema, loading and validation.

Public API:
    - DesignConfiguration: Root configuration model
    - DesignConfig: Design parameters model
    - load_config: Load a design from a JSON file
    - load_config_from_dict: Load a design from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_params / params_to_config: Domain conversion
    - dump_design / load_design: JSON text round trip
    - validate_config: Advisory validation with CLI exit codes

Example:
    >>> from pathlib import Path
    >>> from shelfgrid.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-shelves.json"))
    ...     print(f"Grid: {config.design.rows}x{config.design.cols}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from shelfgrid.application.config.adapter import (
    config_to_params,
    dump_design,
    load_design,
    params_to_config,
)
from shelfgrid.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_config_from_str,
)
from shelfgrid.application.config.schema import (
    SUPPORTED_VERSIONS,
    DesignConfig,
    DesignConfiguration,
    DoorHardwareConfig,
    DoorModeConfig,
    MaterialsConfig,
    MergeConfig,
    ThicknessConfig,
)
from shelfgrid.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "DesignConfig",
    "DesignConfiguration",
    "DoorHardwareConfig",
    "DoorModeConfig",
    "MaterialsConfig",
    "MergeConfig",
    "ThicknessConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "load_config_from_str",
    # Conversion
    "config_to_params",
    "dump_design",
    "load_design",
    "params_to_config",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
]
