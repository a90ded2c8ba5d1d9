"""Output formatters and exporters for shelving analyses."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Sequence

from shelfgrid.domain import DerivedDimensions, DesignWarning, Part
from shelfgrid.domain.fractions import format_dimensions, to_fraction_32
from shelfgrid.domain.services import MaterialEstimate

from .sheet_packing import SheetLayout, SheetLayoutResult

if TYPE_CHECKING:
    from shelfgrid.application.dtos import DesignAnalysis


class PartsListFormatter:
    """Formats the parts list as a table with 1/32" fractions."""

    def format(self, parts: Sequence[Part]) -> str:
        if not parts:
            return "No parts."

        lines = [
            "PARTS LIST",
            "=" * 100,
            f"{'Part':<18} {'Role':<16} {'Qty':<4} {'L x W x T':<34} {'Notes'}",
            "-" * 100,
        ]
        for part in parts:
            size = format_dimensions(part.length_in, part.width_in, part.thickness_in)
            lines.append(
                f"{part.id:<18} {part.role.value:<16} {part.qty:<4} {size:<34} "
                f"{part.notes or ''}"
            )
        lines.append("-" * 100)
        lines.append(f"{'TOTAL':<18} {'':<16} {sum(p.qty for p in parts):<4}")
        return "\n".join(lines)


class DesignSummaryFormatter:
    """Formats exterior dimensions, material estimate and warnings."""

    def format(
        self,
        dimensions: DerivedDimensions,
        estimate: MaterialEstimate,
        warnings: Sequence[DesignWarning] = (),
    ) -> str:
        lines = [
            "DESIGN SUMMARY",
            "=" * 60,
            f"  Exterior width:  {to_fraction_32(dimensions.ext_width)} "
            f"({dimensions.ext_width:.3f} in)",
            f"  Exterior height: {to_fraction_32(dimensions.ext_height)} "
            f"({dimensions.ext_height:.3f} in)",
            f"  Exterior depth:  {to_fraction_32(dimensions.ext_depth)} "
            f"({dimensions.ext_depth:.3f} in)",
            "",
            "MATERIAL ESTIMATE",
            "-" * 60,
            f"  Frame stock: {estimate.frame_board_feet:.2f} bd ft "
            f"({estimate.total_frame_parts} parts)",
        ]
        if estimate.has_back:
            lines.append(f"  Back panel:  {estimate.back_square_feet:.2f} sq ft")
        if estimate.total_doors:
            lines.append(
                f"  Doors:       {estimate.door_square_feet:.2f} sq ft "
                f"({estimate.total_doors} doors)"
            )

        if warnings:
            lines.append("")
            lines.append("WARNINGS")
            lines.append("-" * 60)
            for warning in warnings:
                lines.append(f"  [{warning.severity.value.upper()}] {warning.message}")

        return "\n".join(lines)


class SheetLayoutFormatter:
    """Formats packed sheet layouts as text."""

    def format(self, result: SheetLayoutResult) -> str:
        lines = ["SHEET LAYOUTS", "=" * 70]
        if not result.sheets:
            lines.append("  No sheets required.")

        for sheet in result.sheets:
            lines.extend(self._format_sheet(sheet))

        if result.oversized_parts:
            lines.append("")
            lines.append("OVERSIZED PARTS")
            lines.append("-" * 70)
            for oversized in result.oversized_parts:
                lines.append(f"  {oversized.part.id}: {oversized.reason}")

        lines.append("")
        lines.append(
            f"Total sheets: {result.total_sheets}, "
            f"parts placed: {result.total_parts_placed}"
        )
        return "\n".join(lines)

    def _format_sheet(self, sheet: SheetLayout) -> list[str]:
        rips = ", ".join(cut.label for cut in sheet.rip_cuts)
        lines = [
            "",
            f"{sheet.sheet_id} ({sheet.utilization:.1f}% used)",
            f"  Rips: {rips}",
            f"  {'Part':<22} {'X':>7} {'Y':>7} {'Width':>10} {'Length':>10}  Rotated",
        ]
        for placed in sheet.parts:
            lines.append(
                f"  {placed.part_id:<22} {placed.x:>7.3f} {placed.y:>7.3f} "
                f"{to_fraction_32(placed.width):>10} {to_fraction_32(placed.length):>10}  "
                f"{'yes' if placed.rotated else 'no'}"
            )
        return lines


class JsonExporter:
    """Exports an analysis as JSON."""

    def export(self, analysis: "DesignAnalysis") -> str:
        return json.dumps(self.to_dict(analysis), indent=2)

    def to_dict(self, analysis: "DesignAnalysis") -> dict[str, Any]:
        dimensions = analysis.dimensions
        estimate = analysis.estimate
        data: dict[str, Any] = {
            "dimensions": {
                "ext_width": dimensions.ext_width,
                "ext_height": dimensions.ext_height,
                "ext_depth": dimensions.ext_depth,
            },
            "layout": {
                "present_verticals": sorted(analysis.layout.present_verticals),
                "horizontal_segments": [
                    {"row": s.row, "col_start": s.col_start, "col_end": s.col_end}
                    for s in analysis.layout.horizontal_segments
                ],
                "vertical_segments": [
                    {
                        "column": s.column,
                        "row_start": s.row_start,
                        "row_end": s.row_end,
                        "length_in": s.length_in,
                    }
                    for s in analysis.layout.vertical_segments
                ],
            },
            "parts": [self._format_part(p) for p in analysis.parts],
            "material_estimate": {
                "frame_board_feet": estimate.frame_board_feet,
                "back_square_feet": estimate.back_square_feet,
                "door_square_feet": estimate.door_square_feet,
                "total_frame_parts": estimate.total_frame_parts,
                "total_doors": estimate.total_doors,
                "has_back": estimate.has_back,
            },
            "warnings": [
                {
                    "type": w.type,
                    "message": w.message,
                    "severity": w.severity.value,
                    "merge_index": w.merge_index,
                }
                for w in analysis.warnings
            ],
            "hardware": [
                {
                    "part_id": h.part_id,
                    "x": h.x,
                    "y": h.y,
                    "diameter": h.diameter,
                    "type": h.hardware_type.value,
                }
                for h in analysis.hardware
            ],
        }
        if analysis.sheet_layouts is not None:
            data["sheets"] = [
                self._format_sheet(s) for s in analysis.sheet_layouts.sheets
            ]
            data["oversized_parts"] = [
                {"part_id": o.part.id, "reason": o.reason}
                for o in analysis.sheet_layouts.oversized_parts
            ]
        return data

    def _format_part(self, part: Part) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": part.id,
            "role": part.role.value,
            "qty": part.qty,
            "length_in": part.length_in,
            "width_in": part.width_in,
            "thickness_in": part.thickness_in,
            "label": format_dimensions(part.length_in, part.width_in, part.thickness_in),
        }
        if part.notes:
            result["notes"] = part.notes
        return result

    def _format_sheet(self, sheet: SheetLayout) -> dict[str, Any]:
        return {
            "sheet_id": sheet.sheet_id,
            "thickness": sheet.thickness,
            "utilization": sheet.utilization,
            "rip_cuts": [
                {"position": c.position, "width": c.width, "label": c.label}
                for c in sheet.rip_cuts
            ],
            "parts": [
                {
                    "part_id": p.part_id,
                    "x": p.x,
                    "y": p.y,
                    "width": p.width,
                    "length": p.length,
                    "rotated": p.rotated,
                }
                for p in sheet.parts
            ],
        }
