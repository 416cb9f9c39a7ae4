"""Tests for waste region computation and size color grouping."""

from __future__ import annotations

import pytest

from cutplan.domain import Rect
from cutplan.infrastructure.bin_packing import Placement
from cutplan.infrastructure.layout_finalizer import (
    SIZE_GROUP_PALETTE,
    ColorGroup,
    apply_group_colors,
    compute_waste_areas,
    group_by_size,
)


def _placement(x: float, y: float, w: float, h: float, uid: str = "D1") -> Placement:
    return Placement(x, y, w, h, False, uid, 0)


class TestComputeWasteAreas:
    """Tests for compute_waste_areas."""

    def test_right_and_bottom_strips(self) -> None:
        """Waste is a full-height right strip and a bottom strip under the extent."""
        waste = compute_waste_areas([_placement(0, 0, 300, 1200)], 2800, 2070, kerf=3)
        assert waste == (Rect(303, 0, 2497, 2070), Rect(0, 1203, 303, 867))

    def test_extent_uses_furthest_edges(self) -> None:
        """The extent is the maximum over all placements."""
        placements = [
            _placement(0, 0, 1000, 500, "D1"),
            _placement(1003, 0, 200, 900, "D2"),
        ]
        waste = compute_waste_areas(placements, 2800, 2070, kerf=3)
        assert waste == (Rect(1206, 0, 1594, 2070), Rect(0, 903, 1206, 1167))

    def test_no_waste_when_extent_reaches_edges(self) -> None:
        """A full-width, full-height extent yields no strips."""
        waste = compute_waste_areas([_placement(0, 0, 1000, 1000)], 1000, 1000, kerf=0)
        assert waste == ()

    def test_extent_clamped_to_sheet(self) -> None:
        """Kerf past the sheet edge is clamped, never producing negative strips."""
        waste = compute_waste_areas([_placement(0, 0, 1000, 500)], 1000, 1000, kerf=3)
        assert waste == (Rect(0, 503, 1000, 497),)

    def test_empty_sheet_is_all_waste(self) -> None:
        """Without placements the whole sheet is waste."""
        assert compute_waste_areas([], 2800, 2070, kerf=3) == (
            Rect(0, 0, 2800, 2070),
        )


class TestGroupBySize:
    """Tests for group_by_size and ColorGroup."""

    def test_rotated_twins_share_group(self) -> None:
        """300x600 and 600x300 are the same size group."""
        groups = group_by_size(
            [_placement(0, 0, 300, 600, "D1"), _placement(303, 0, 600, 300, "D2")]
        )
        assert groups == (ColorGroup(size_key=(300, 600), palette_index=0, count=2),)

    def test_first_seen_order(self) -> None:
        """Groups get palette colors in first-seen order."""
        groups = group_by_size(
            [
                _placement(0, 0, 500, 500, "D1"),
                _placement(503, 0, 100, 200, "D2"),
                _placement(606, 0, 500, 500, "D3"),
            ]
        )
        assert [g.size_key for g in groups] == [(500, 500), (100, 200)]
        assert [g.color for g in groups] == ["#4ade80", "#60a5fa"]
        assert [g.count for g in groups] == [2, 1]

    def test_palette_cycles(self) -> None:
        """The ninth group wraps around to the first color."""
        placements = [
            _placement(i * 20, 0, 10 + i, 10, f"D{i + 1}") for i in range(9)
        ]
        groups = group_by_size(placements)

        assert len(groups) == 9
        assert groups[8].color == SIZE_GROUP_PALETTE[0]
        assert groups[7].color == SIZE_GROUP_PALETTE[7]

    def test_label(self) -> None:
        """Labels render as short x long."""
        assert ColorGroup(size_key=(300, 1200), palette_index=0).label == "300x1200"
        assert ColorGroup(size_key=(12.5, 40), palette_index=0).label == "12.5x40"

    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_apply_group_colors(self, count: int) -> None:
        """Placements are copied with their group color; inputs are untouched."""
        placements = [_placement(i * 110, 0, 100, 50, f"D{i + 1}") for i in range(count)]
        colored = apply_group_colors(placements, group_by_size(placements))

        assert len(colored) == count
        assert all(p.color == "#4ade80" for p in colored)
        assert all(p.color is None for p in placements)
