"""Application commands (use cases) for shelving analysis."""

from __future__ import annotations

import logging

from shelfgrid.domain import DesignParams, LayoutResolver, MaterialEstimator, PartsGenerator
from shelfgrid.domain.services import WarningEngine, calculate_dimensions
from shelfgrid.infrastructure.sheet_packing import SheetPackingService

from .dtos import DesignAnalysis

logger = logging.getLogger(__name__)


class AnalyzeDesignCommand:
    """Command to derive every output of a design in one pure pass.

    Layout, dimensions, parts, estimate, warnings, door hardware and
    (optionally) sheet layouts are recomputed from the parameters on every
    call; nothing is cached between executions.
    """

    def __init__(
        self,
        parts_generator: PartsGenerator | None = None,
        material_estimator: MaterialEstimator | None = None,
        warning_engine: WarningEngine | None = None,
        packing_service: SheetPackingService | None = None,
    ) -> None:
        self.parts_generator = parts_generator or PartsGenerator()
        self.material_estimator = material_estimator or MaterialEstimator()
        self.warning_engine = warning_engine or WarningEngine()
        self.packing_service = packing_service or SheetPackingService()

    def execute(self, params: DesignParams, include_sheets: bool = True) -> DesignAnalysis:
        """Execute the analysis.

        Args:
            params: Validated design parameters.
            include_sheets: Whether to run the sheet packing step.

        Returns:
            DesignAnalysis bundling every derived output.
        """
        layout = LayoutResolver.for_design(params).resolve()
        dimensions = calculate_dimensions(params)
        parts = self.parts_generator.generate(params, layout)
        estimate = self.material_estimator.estimate(parts)
        warnings = self.warning_engine.generate(params)
        hardware = self.parts_generator.hardware_locations(params, parts)
        sheet_layouts = self.packing_service.generate(parts) if include_sheets else None

        logger.debug(
            "Analyzed %dx%d design: %d parts, %d warnings",
            params.rows,
            params.cols,
            len(parts),
            len(warnings),
        )

        return DesignAnalysis(
            params=params,
            dimensions=dimensions,
            layout=layout,
            parts=tuple(parts),
            estimate=estimate,
            warnings=tuple(warnings),
            hardware=tuple(hardware),
            sheet_layouts=sheet_layouts,
        )


def analyze_design(params: DesignParams, include_sheets: bool = True) -> DesignAnalysis:
    """Run the default analysis pipeline for a design."""
    return AnalyzeDesignCommand().execute(params, include_sheets=include_sheets)
