"""Post-processing of packed sheets: waste regions and size color groups.

Both results are presentation metadata. Nothing computed here feeds back
into packing decisions.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from cutplan.domain.value_objects import Rect, SizeKey, format_size_key, size_key

if TYPE_CHECKING:
    from cutplan.infrastructure.bin_packing import Placement

# Fixed cyclic palette for size groups, assigned in first-seen order
SIZE_GROUP_PALETTE: tuple[str, ...] = (
    "#4ade80",  # green
    "#60a5fa",  # blue
    "#fbbf24",  # yellow
    "#f472b6",  # pink
    "#a78bfa",  # purple
    "#fb923c",  # orange
    "#34d399",  # emerald
    "#38bdf8",  # sky
)


@dataclass(frozen=True)
class ColorGroup:
    """Placements sharing a size, regardless of rotation.

    Attributes:
        size_key: (short side, long side) of the parts in the group.
        palette_index: Position of the group in first-seen order.
        count: Number of placements in the group on the sheet.
    """

    size_key: SizeKey
    palette_index: int
    count: int = 1

    @property
    def color(self) -> str:
        """Palette color, cycling when there are more groups than colors."""
        return SIZE_GROUP_PALETTE[self.palette_index % len(SIZE_GROUP_PALETTE)]

    @property
    def label(self) -> str:
        return format_size_key(self.size_key)


def compute_waste_areas(
    placements: Sequence[Placement],
    sheet_width: float,
    sheet_height: float,
    kerf: float,
) -> tuple[Rect, ...]:
    """Bounding-box approximation of unused sheet area.

    Emits a right-side strip spanning the full sheet height and a bottom
    strip under the placed extent. The extent includes the kerf after the
    last part and is clamped to the sheet edges.

    Args:
        placements: Placements on one sheet.
        sheet_width: Sheet width in mm.
        sheet_height: Sheet height in mm.
        kerf: Saw kerf in mm.

    Returns:
        Zero, one, or two waste rectangles.
    """
    if not placements:
        return (Rect(0.0, 0.0, sheet_width, sheet_height),)

    max_x = min(max(p.right_edge + kerf for p in placements), sheet_width)
    max_y = min(max(p.bottom_edge + kerf for p in placements), sheet_height)

    waste: list[Rect] = []
    if max_x < sheet_width:
        waste.append(Rect(max_x, 0.0, sheet_width - max_x, sheet_height))
    if max_y < sheet_height:
        waste.append(Rect(0.0, max_y, max_x, sheet_height - max_y))
    return tuple(waste)


def group_by_size(placements: Sequence[Placement]) -> tuple[ColorGroup, ...]:
    """Group placements by normalized size in first-seen order.

    A part and its rotated twin share a group.
    """
    counts: dict[SizeKey, int] = {}
    for placement in placements:
        key = size_key(placement.width, placement.height)
        counts[key] = counts.get(key, 0) + 1

    return tuple(
        ColorGroup(size_key=key, palette_index=index, count=count)
        for index, (key, count) in enumerate(counts.items())
    )


def apply_group_colors(
    placements: Sequence[Placement],
    groups: Sequence[ColorGroup],
) -> tuple[Placement, ...]:
    """Return copies of the placements carrying their group color."""
    colors = {group.size_key: group.color for group in groups}
    return tuple(
        dataclasses.replace(p, color=colors[size_key(p.width, p.height)])
        for p in placements
    )
