"""Validation structures and design advisory checks.

Schema validation happens in pydantic; this module adds the advisory
layer on top: structural warnings from the warning engine and parts that
cannot be cut from standard stock.
"""

from dataclasses import dataclass, field
from typing import Any

from shelfgrid.application.config.adapter import config_to_params
from shelfgrid.application.config.loader import ConfigError
from shelfgrid.application.config.schema import DesignConfiguration
from shelfgrid.domain.services import generate_parts, generate_warnings
from shelfgrid.domain.value_objects import WarningSeverity
from shelfgrid.infrastructure.sheet_packing import (
    SheetConfig,
    check_margin_fit,
    check_sheet_fit,
)


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "design.merges[1]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    @classmethod
    def from_config_error(cls, error: ConfigError) -> "ValidationResult":
        """Build a result holding one error per ConfigError detail."""
        result = cls()
        if not error.details:
            return result.add_error(path="", message=error.message)
        for detail in error.details:
            result.add_error(
                path=detail.get("path", ""),
                message=detail.get("message", error.message),
                value=detail.get("value"),
            )
        return result


def validate_config(
    config: DesignConfiguration, sheet_config: SheetConfig | None = None
) -> ValidationResult:
    """Perform full validation of a design configuration.

    Args:
        config: A DesignConfiguration instance (already validated by pydantic)
        sheet_config: Stock sheet used for the oversized-part check.

    Returns:
        ValidationResult with errors for designs the domain rejects, and
        warnings for structural concerns and parts larger than stock.
    """
    result = ValidationResult()

    try:
        params = config_to_params(config)
    except ConfigError as e:
        return result.merge(ValidationResult.from_config_error(e))

    for warning in generate_warnings(params):
        if warning.severity == WarningSeverity.INFO:
            continue
        path = (
            f"design.merges[{warning.merge_index}]"
            if warning.merge_index is not None
            else "design"
        )
        result.add_warning(
            path=path,
            message=warning.message,
            suggestion="Consider splitting the merge or adding a support divider",
        )

    for part in generate_parts(params):
        reason = check_sheet_fit(part, sheet_config) or check_margin_fit(
            part, sheet_config
        )
        if reason is not None:
            result.add_warning(
                path=f"parts.{part.id}",
                message=reason,
                suggestion="Reduce the grid size or source oversized stock",
            )

    return result
