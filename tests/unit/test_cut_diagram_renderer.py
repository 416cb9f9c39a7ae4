"""Tests for SVG cut diagram rendering."""

from __future__ import annotations

import pytest

from cutplan.domain import Material, PartSpec
from cutplan.infrastructure import CutDiagramRenderer, OptimizationOutcome, optimize


@pytest.fixture
def renderer() -> CutDiagramRenderer:
    return CutDiagramRenderer()


@pytest.fixture
def outcome(standard_material: Material) -> OptimizationOutcome:
    """Two 2000x2000 parts, one per sheet, plus a small filler."""
    return optimize(
        [PartSpec(2000, 2000, quantity=2), PartSpec(300, 1200)], standard_material
    )


class TestRenderSvg:
    """Tests for single-sheet SVG output."""

    def test_basic_structure(
        self, renderer: CutDiagramRenderer, outcome: OptimizationOutcome
    ) -> None:
        svg = renderer.render_svg(outcome.sheets[0], total_sheets=2)

        assert svg.startswith("<svg")
        assert svg.rstrip().endswith("</svg>")
        assert 'width="700.0"' in svg
        assert "Sheet 1 of 2" in svg
        assert "LDSP 16mm 2800x2070" in svg

    def test_pieces_use_group_colors(
        self, renderer: CutDiagramRenderer, outcome: OptimizationOutcome
    ) -> None:
        svg = renderer.render_svg(outcome.sheets[0])
        for placement in outcome.sheets[0].placements:
            assert f'fill="{placement.color}"' in svg
            assert f"#{placement.detail_number}<" in svg

    def test_dimensions_label(
        self, renderer: CutDiagramRenderer, outcome: OptimizationOutcome
    ) -> None:
        svg = renderer.render_svg(outcome.sheets[0])
        assert "2000 x 2000" in svg

    def test_rotated_marker(self, renderer: CutDiagramRenderer) -> None:
        material = Material(width_mm=1000, height_mm=500)
        outcome = optimize([PartSpec(400, 900)], material, kerf_mm=0)

        svg = renderer.render_svg(outcome.sheets[0])
        assert "400 x 900 (R)" in svg

    def test_waste_areas_dashed(
        self, renderer: CutDiagramRenderer, outcome: OptimizationOutcome
    ) -> None:
        svg = renderer.render_svg(outcome.sheets[0])
        assert "<!-- Waste areas -->" in svg
        assert 'stroke-dasharray="5,5"' in svg

    def test_legend(
        self, renderer: CutDiagramRenderer, outcome: OptimizationOutcome
    ) -> None:
        svg = renderer.render_svg(outcome.sheets[0])
        assert "Sizes:" in svg
        assert "2000 x 2000 (1)" in svg

    def test_legend_can_be_hidden(self, outcome: OptimizationOutcome) -> None:
        svg = CutDiagramRenderer(show_legend=False).render_svg(outcome.sheets[0])
        assert "Sizes:" not in svg

    def test_tiny_pieces_skip_text(self) -> None:
        """Pieces too small for readable text are drawn without labels."""
        material = Material(width_mm=2800, height_mm=2070)
        outcome = optimize([PartSpec(20, 20)], material)

        svg = CutDiagramRenderer(show_legend=False).render_svg(outcome.sheets[0])
        assert "#1<" not in svg

    def test_header_escaped(self, renderer: CutDiagramRenderer) -> None:
        material = Material(width_mm=1000, height_mm=1000, name="Oak & Ash")
        outcome = optimize([PartSpec(100, 100)], material)

        svg = renderer.render_svg(outcome.sheets[0])
        assert "Oak &amp; Ash" in svg

    def test_invalid_scale(self) -> None:
        with pytest.raises(ValueError, match="Scale must be positive"):
            CutDiagramRenderer(scale=0)


class TestRenderAll:
    """Tests for multi-sheet output."""

    def test_render_all_svg(
        self, renderer: CutDiagramRenderer, outcome: OptimizationOutcome
    ) -> None:
        svgs = renderer.render_all_svg(outcome)
        assert len(svgs) == outcome.sheets_required == 2
        assert "Sheet 2 of 2" in svgs[1]

    def test_combined_svg(
        self, renderer: CutDiagramRenderer, outcome: OptimizationOutcome
    ) -> None:
        svg = renderer.render_combined_svg(outcome)

        assert svg.count("<svg") == 1
        assert svg.count('<g transform="translate(0, ') == 2
        assert "Sheet 1 of 2" in svg
        assert "Sheet 2 of 2" in svg

    def test_combined_svg_empty(
        self, renderer: CutDiagramRenderer, standard_material: Material
    ) -> None:
        svg = renderer.render_combined_svg(optimize([], standard_material))
        assert "No sheets to display" in svg
