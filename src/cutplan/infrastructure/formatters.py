"""Output formatters and exporters for optimization outcomes."""

from __future__ import annotations

import csv
import io
import json
from typing import Any, Sequence

from cutplan.domain.value_objects import Material, PartSpec, Rect
from cutplan.infrastructure.bin_packing import (
    OptimizationOutcome,
    Placement,
    SheetLayout,
)


def _rect_to_dict(rect: Rect) -> dict[str, float]:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def material_to_dict(material: Material) -> dict[str, Any]:
    return {
        "id": material.id,
        "name": material.name,
        "width_mm": material.width_mm,
        "height_mm": material.height_mm,
        "thickness_mm": material.thickness_mm,
        "material_type": material.material_type.value,
    }


class JsonExporter:
    """Serializes outcomes to JSON-compatible dictionaries.

    The shape is what renderers and the REST API consume: per-sheet
    placements with their colors, waste areas, and the size color map.
    """

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def to_dict(self, outcome: OptimizationOutcome) -> dict[str, Any]:
        return {
            "sheets_required": outcome.sheets_required,
            "waste_percentage": outcome.waste_percentage,
            "used_percentage": outcome.used_percentage,
            "used_area_mm2": outcome.used_area,
            "total_sheet_area_mm2": outcome.total_sheet_area,
            "kerf_mm": outcome.kerf_mm,
            "sheets": [self._sheet_to_dict(sheet) for sheet in outcome.sheets],
        }

    def _sheet_to_dict(self, sheet: SheetLayout) -> dict[str, Any]:
        return {
            "sheet_index": sheet.sheet_index,
            "material": material_to_dict(sheet.material),
            "placements": [self._placement_to_dict(p) for p in sheet.placements],
            "waste_areas": [_rect_to_dict(rect) for rect in sheet.waste_areas],
            "size_color_map": sheet.size_color_map,
            "used_percentage": sheet.used_percentage,
        }

    def _placement_to_dict(self, placement: Placement) -> dict[str, Any]:
        return {
            "id": placement.unit_id,
            "detail_number": placement.detail_number,
            "source_index": placement.source_index,
            "x": placement.x,
            "y": placement.y,
            "width": placement.width,
            "height": placement.height,
            "rotated": placement.rotated,
            "color": placement.color,
        }

    def format(self, outcome: OptimizationOutcome) -> str:
        return json.dumps(self.to_dict(outcome), indent=self.indent)


class CsvExporter:
    """Exports a cut list and its sheet usage as CSV.

    Layout: the parts table, a summary block (material, sheet count,
    waste and used percentages), then one row per placement.
    """

    def format(
        self,
        parts: Sequence[PartSpec],
        outcome: OptimizationOutcome,
        material: Material,
    ) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")

        writer.writerow(["Part", "Width (mm)", "Height (mm)", "Quantity"])
        for index, part in enumerate(parts):
            writer.writerow(
                [
                    part.label or f"Part {index + 1}",
                    f"{part.width_mm:g}",
                    f"{part.height_mm:g}",
                    part.quantity,
                ]
            )

        writer.writerow([])
        writer.writerow(["Material", material.name or material.description])
        writer.writerow(["Sheets required", outcome.sheets_required])
        writer.writerow(["Waste percentage", f"{outcome.waste_percentage}%"])
        writer.writerow(["Used percentage", f"{outcome.used_percentage}%"])

        writer.writerow([])
        writer.writerow(
            ["Sheet", "Detail", "Part", "X", "Y", "Width", "Height", "Rotated"]
        )
        for sheet in outcome.sheets:
            for placement in sheet.placements:
                writer.writerow(
                    [
                        sheet.sheet_index + 1,
                        f"#{placement.detail_number}",
                        placement.source_index + 1,
                        f"{placement.x:g}",
                        f"{placement.y:g}",
                        f"{placement.width:g}",
                        f"{placement.height:g}",
                        "yes" if placement.rotated else "no",
                    ]
                )

        return buffer.getvalue()


class OutcomeSummaryFormatter:
    """Formats an outcome as a plain-text report."""

    def format(
        self,
        outcome: OptimizationOutcome,
        parts: Sequence[PartSpec] | None = None,
    ) -> str:
        lines: list[str] = [
            "CUT OPTIMIZATION SUMMARY",
            "=" * 60,
            f"Sheets Required: {outcome.sheets_required}",
            f"Used: {outcome.used_percentage:.2f}%",
            f"Waste: {outcome.waste_percentage:.2f}%",
            f"Kerf: {outcome.kerf_mm:g} mm",
        ]

        if outcome.sheets:
            lines.append(f"Material: {outcome.sheets[0].material.description}")
            lines.append("")
            lines.append("Per-Sheet Details:")
            for sheet in outcome.sheets:
                count = sheet.piece_count
                lines.append(
                    f"  Sheet {sheet.sheet_index + 1}: "
                    f"{count} piece{'s' if count != 1 else ''}, "
                    f"{sheet.used_percentage:.1f}% used"
                )

        if parts:
            lines.append("")
            lines.append(self._format_parts(parts))

        return "\n".join(lines)

    def _format_parts(self, parts: Sequence[PartSpec]) -> str:
        lines = [
            "CUT LIST",
            "-" * 60,
            f"{'Part':<20} {'Width':<10} {'Height':<10} {'Qty':<6} {'Area (m2)'}",
            "-" * 60,
        ]
        total_area = 0.0
        for index, part in enumerate(parts):
            label = part.label or f"Part {index + 1}"
            lines.append(
                f"{label:<20} {part.width_mm:<10g} {part.height_mm:<10g} "
                f"{part.quantity:<6} {part.area_mm2 / 1_000_000:.3f}"
            )
            total_area += part.area_mm2
        lines.append("-" * 60)
        lines.append(f"{'TOTAL':<20} {'':<10} {'':<10} {'':<6} {total_area / 1_000_000:.3f}")
        return "\n".join(lines)
