"""Cut diagram rendering for nesting visualization.

This module provides SVG rendering of sheet layouts showing placements
colored by size group, detail numbers, dimensions, rotation indicators,
and waste areas. Geometry is drawn as computed; the engine guarantees
placements are in bounds and non-overlapping.
"""

from __future__ import annotations

from html import escape

from cutplan.infrastructure.bin_packing import (
    OptimizationOutcome,
    Placement,
    SheetLayout,
)


class CutDiagramRenderer:
    """Renders cut diagrams in SVG format.

    Attributes:
        scale: Pixels per millimeter (default 0.25).
        piece_fill: Fill for placements without a group color.
        piece_stroke: Stroke color for piece outlines.
        waste_fill: Fill color for waste areas.
        text_color: Color for labels and dimensions.
        show_dimensions: Whether to show piece dimensions.
        show_labels: Whether to show detail numbers.
        show_legend: Whether to draw the size group legend.
    """

    def __init__(
        self,
        scale: float = 0.25,
        piece_fill: str = "#FFD700",  # Gold
        piece_stroke: str = "#333333",
        waste_fill: str = "#F0F0F0",
        text_color: str = "#000000",
        show_dimensions: bool = True,
        show_labels: bool = True,
        show_legend: bool = True,
    ) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        self.scale = scale
        self.piece_fill = piece_fill
        self.piece_stroke = piece_stroke
        self.waste_fill = waste_fill
        self.text_color = text_color
        self.show_dimensions = show_dimensions
        self.show_labels = show_labels
        self.show_legend = show_legend

    def render_svg(self, layout: SheetLayout, total_sheets: int = 1) -> str:
        """Generate SVG cut diagram for a single sheet.

        Args:
            layout: Sheet layout with placements.
            total_sheets: Total number of sheets (for header display).

        Returns:
            SVG string representation of the layout.
        """
        material = layout.material
        header_height = 30
        legend_height = self._calculate_legend_height(layout)

        svg_width = material.width_mm * self.scale
        sheet_height = material.height_mm * self.scale
        svg_height = sheet_height + header_height + legend_height

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            "",
            self._render_header(layout, total_sheets, svg_width, header_height),
            "  <!-- Sheet outline -->",
            f'  <rect x="0" y="{header_height}" width="{svg_width}" '
            f'height="{sheet_height}" fill="white" stroke="{self.piece_stroke}" '
            f'stroke-width="2"/>',
        ]

        waste_svg = self._render_waste_areas(layout, header_height)
        if waste_svg:
            parts.append("")
            parts.append("  <!-- Waste areas -->")
            parts.append(waste_svg)

        parts.append("")
        parts.append("  <!-- Placed pieces -->")
        for placement in layout.placements:
            parts.append(self._render_piece(placement, header_height))

        if legend_height:
            parts.append("")
            parts.append("  <!-- Legend -->")
            parts.append(
                self._render_legend(layout, svg_width, header_height + sheet_height)
            )

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(self, outcome: OptimizationOutcome) -> list[str]:
        """Generate SVG cut diagrams for all sheets, one string per sheet."""
        total = len(outcome.sheets)
        return [self.render_svg(sheet, total) for sheet in outcome.sheets]

    def render_combined_svg(self, outcome: OptimizationOutcome) -> str:
        """Generate a single SVG with all sheets stacked vertically."""
        if not outcome.sheets:
            return (
                '<svg width="100" height="50" xmlns="http://www.w3.org/2000/svg">'
                '<text x="10" y="30">No sheets to display</text></svg>'
            )

        gap = 20
        total = len(outcome.sheets)
        offsets: list[float] = []
        y = 0.0
        max_width = 0.0
        for sheet in outcome.sheets:
            offsets.append(y)
            y += self._sheet_svg_height(sheet) + gap
            max_width = max(max_width, sheet.material.width_mm * self.scale)
        total_height = y - gap

        parts = [
            f'<svg width="{max_width}" height="{total_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
        ]
        for sheet, offset in zip(outcome.sheets, offsets):
            inner = self.render_svg(sheet, total)
            # Strip the outer <svg> wrapper and translate the content
            body = inner.split("\n", 1)[1].rsplit("</svg>", 1)[0]
            parts.append(f'  <g transform="translate(0, {offset})">')
            parts.append(body)
            parts.append("  </g>")
        parts.append("</svg>")
        return "\n".join(parts)

    def _sheet_svg_height(self, layout: SheetLayout) -> float:
        return 30 + layout.material.height_mm * self.scale + self._calculate_legend_height(
            layout
        )

    def _render_header(
        self,
        layout: SheetLayout,
        total_sheets: int,
        svg_width: float,
        header_height: float,
    ) -> str:
        material = layout.material
        header_text = escape(
            f"Sheet {layout.sheet_index + 1} of {total_sheets} - "
            f"{material.description} - {layout.used_percentage:.1f}% used"
        )
        return (
            f"  <!-- Header -->\n"
            f'  <rect x="0" y="0" width="{svg_width}" height="{header_height}" '
            f'fill="#E0E0E0"/>\n'
            f'  <text x="10" y="{header_height - 8}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.text_color}">{header_text}</text>'
        )

    def _render_piece(self, placement: Placement, header_height: float) -> str:
        """Render a single placement as SVG rect and text."""
        x = placement.x * self.scale
        y = header_height + placement.y * self.scale
        w = placement.width * self.scale
        h = placement.height * self.scale
        fill = placement.color or self.piece_fill

        rect = (
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill}" stroke="{self.piece_stroke}"/>'
        )

        font_size = min(12, min(w, h) / 6)
        if font_size < 6:
            # Too small for text
            return f"  {rect}"

        text_x = x + w / 2
        text_y = y + h / 2
        svg_parts = ["  <g>", f"    {rect}"]

        if self.show_labels:
            svg_parts.append(
                f'    <text x="{text_x}" y="{text_y - font_size / 2}" '
                f'text-anchor="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size}" font-weight="bold" '
                f'fill="{self.text_color}">#{placement.detail_number}</text>'
            )

        if self.show_dimensions:
            dims = f"{placement.original_width:g} x {placement.original_height:g}"
            if placement.rotated:
                dims += " (R)"
            dims_y = text_y + font_size / 2 + 2 if self.show_labels else text_y
            svg_parts.append(
                f'    <text x="{text_x}" y="{dims_y}" '
                f'text-anchor="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size * 0.8}" fill="{self.text_color}">{dims}</text>'
            )

        svg_parts.append("  </g>")
        return "\n".join(svg_parts)

    def _render_waste_areas(self, layout: SheetLayout, header_height: float) -> str:
        """Render waste areas as dashed gray rectangles."""
        parts: list[str] = []
        for waste in layout.waste_areas:
            x = waste.x * self.scale
            y = header_height + waste.y * self.scale
            w = waste.width * self.scale
            h = waste.height * self.scale
            parts.append(
                f'  <rect x="{x}" y="{y}" width="{w}" height="{h}" '
                f'fill="{self.waste_fill}" stroke="#999999" stroke-dasharray="5,5"/>'
            )
        return "\n".join(parts)

    def _calculate_legend_height(self, layout: SheetLayout) -> float:
        """Height in pixels needed for the legend, or 0 if no legend."""
        if not self.show_legend or not layout.color_groups:
            return 0.0

        items_per_row = 3
        num_rows = (len(layout.color_groups) + items_per_row - 1) // items_per_row

        # Title (20px) + padding (10px) + rows (25px each) + bottom padding (10px)
        return 20 + 10 + (num_rows * 25) + 10

    def _render_legend(
        self,
        layout: SheetLayout,
        svg_width: float,
        y_offset: float,
    ) -> str:
        """Render the legend of size group colors."""
        parts: list[str] = []

        legend_height = self._calculate_legend_height(layout)
        parts.append(
            f'  <rect x="0" y="{y_offset}" width="{svg_width}" '
            f'height="{legend_height}" fill="#F5F5F5" stroke="#CCCCCC"/>'
        )
        parts.append(
            f'  <text x="10" y="{y_offset + 18}" '
            f'font-family="Arial, sans-serif" font-size="12" font-weight="bold" '
            f'fill="{self.text_color}">Sizes:</text>'
        )

        items_per_row = 3
        column_width = svg_width / items_per_row
        swatch_size = 15
        start_y = y_offset + 35

        for idx, group in enumerate(layout.color_groups):
            row = idx // items_per_row
            col = idx % items_per_row
            x = col * column_width + 15
            y = start_y + row * 25

            parts.append(
                f'  <rect x="{x}" y="{y}" width="{swatch_size}" height="{swatch_size}" '
                f'fill="{group.color}" stroke="{self.piece_stroke}"/>'
            )
            short, long = group.size_key
            parts.append(
                f'  <text x="{x + swatch_size + 5}" y="{y + swatch_size - 3}" '
                f'font-family="Arial, sans-serif" font-size="10" '
                f'fill="{self.text_color}">{short:g} x {long:g} ({group.count})</text>'
            )

        return "\n".join(parts)
