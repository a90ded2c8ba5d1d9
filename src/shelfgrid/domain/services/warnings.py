"""Heuristic structural warnings for shelving designs.

Warnings are advisory: rules inspect a design and report concerns, but
never raise and never block part generation. The rule set is a plain
sequence so callers can extend it without touching the engine.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, Sequence

from ..value_objects import DesignWarning, WarningSeverity

if TYPE_CHECKING:
    from ..entities import DesignParams

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_RULES",
    "GridSizeRule",
    "MergeSpanRule",
    "WarningEngine",
    "WarningRule",
    "generate_warnings",
]

SPAN_TOO_LARGE = "span_too_large"


class WarningRule(Protocol):
    """A single warning check."""

    @property
    def name(self) -> str: ...

    def check(self, params: "DesignParams") -> list[DesignWarning]: ...


class MergeSpanRule:
    """Warns when a merge spans too many modules in one direction.

    Horizontal and vertical spans are checked separately, so a merge that
    is long in both directions yields two warnings with the same index.

    Attributes:
        max_modules: Spans at or above this count are flagged.
    """

    name = "merge_span"

    def __init__(self, max_modules: int = 3) -> None:
        self.max_modules = max_modules

    def check(self, params: "DesignParams") -> list[DesignWarning]:
        warnings: list[DesignWarning] = []
        for index, merge in enumerate(params.merges):
            if merge.col_span >= self.max_modules:
                warnings.append(
                    DesignWarning(
                        type=SPAN_TOO_LARGE,
                        message=(
                            f"Horizontal span of {merge.col_span} modules "
                            "may require additional support"
                        ),
                        severity=WarningSeverity.WARNING,
                        merge_index=index,
                    )
                )
            if merge.row_span >= self.max_modules:
                warnings.append(
                    DesignWarning(
                        type=SPAN_TOO_LARGE,
                        message=(
                            f"Vertical span of {merge.row_span} modules "
                            "may require additional support"
                        ),
                        severity=WarningSeverity.WARNING,
                        merge_index=index,
                    )
                )
        return warnings


class GridSizeRule:
    """Notes that large grids need extra bracing and assembly care.

    Attributes:
        max_dimension: Grids with more rows or columns than this are noted.
    """

    name = "grid_size"

    def __init__(self, max_dimension: int = 4) -> None:
        self.max_dimension = max_dimension

    def check(self, params: "DesignParams") -> list[DesignWarning]:
        if params.rows > self.max_dimension or params.cols > self.max_dimension:
            return [
                DesignWarning(
                    type=SPAN_TOO_LARGE,
                    message=(
                        "Large shelving units may require additional bracing "
                        "or assembly considerations"
                    ),
                    severity=WarningSeverity.INFO,
                )
            ]
        return []


DEFAULT_RULES: tuple[WarningRule, ...] = (MergeSpanRule(), GridSizeRule())


class WarningEngine:
    """Runs a sequence of warning rules against a design.

    Attributes:
        rules: Rules evaluated in order; their warnings are concatenated.
    """

    def __init__(self, rules: Sequence[WarningRule] = DEFAULT_RULES) -> None:
        self.rules = tuple(rules)

    def with_rules(self, *rules: WarningRule) -> "WarningEngine":
        """New engine with extra rules appended."""
        return WarningEngine(self.rules + rules)

    def generate(self, params: "DesignParams") -> list[DesignWarning]:
        """Collect warnings from every rule."""
        warnings: list[DesignWarning] = []
        for rule in self.rules:
            found = rule.check(params)
            if found:
                logger.debug("Rule '%s' produced %d warnings", rule.name, len(found))
            warnings.extend(found)
        return warnings


def generate_warnings(params: "DesignParams") -> list[DesignWarning]:
    """Generate the default warnings for a design."""
    return WarningEngine().generate(params)
