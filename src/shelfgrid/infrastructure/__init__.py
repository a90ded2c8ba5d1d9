"""Infrastructure layer - sheet packing and formatters."""

from .formatters import (
    DesignSummaryFormatter,
    JsonExporter,
    PartsListFormatter,
    SheetLayoutFormatter,
)
from .sheet_packing import (
    OversizedPart,
    PlacedPart,
    RipCut,
    RipStripPacker,
    SheetConfig,
    SheetLayout,
    SheetLayoutResult,
    SheetPackingService,
    check_margin_fit,
    check_sheet_fit,
    generate_sheet_layouts,
    rip_orientation,
)

__all__ = [
    # Sheet packing
    "OversizedPart",
    "PlacedPart",
    "RipCut",
    "RipStripPacker",
    "SheetConfig",
    "SheetLayout",
    "SheetLayoutResult",
    "SheetPackingService",
    "check_margin_fit",
    "check_sheet_fit",
    "generate_sheet_layouts",
    "rip_orientation",
    # Formatters
    "DesignSummaryFormatter",
    "JsonExporter",
    "PartsListFormatter",
    "SheetLayoutFormatter",
]
