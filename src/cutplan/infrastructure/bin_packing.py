"""Bin packing data models and algorithms for sheet cutting optimization.

This module provides the nesting engine: parts are expanded into unit
rectangles, ordered largest-area first, and packed sheet by sheet with a
guillotine free-region split. Finished sheets get waste regions and size
color groups, and the run is summarized as sheet count and waste/used
percentages.

All result dataclasses are frozen (immutable). The optimizer keeps no
mutable state between calls, so one instance can serve concurrent callers.
"""

from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass
from typing import Sequence

from cutplan.domain.errors import InvalidPart, TooManyUnits, UnpackableDimensions
from cutplan.domain.value_objects import (
    Material,
    PartSpec,
    Rect,
    SizeKey,
    is_positive_finite,
    size_key,
)
from cutplan.infrastructure.layout_finalizer import (
    ColorGroup,
    apply_group_colors,
    compute_waste_areas,
    group_by_size,
)

logger = logging.getLogger(__name__)

DEFAULT_KERF_MM = 3.0

# Largest number of units one run may nest
MAX_UNITS = 2000

# Free regions are plain rectangles owned by the packer for one sheet
FreeRegion = Rect


@dataclass(frozen=True)
class NestingConfig:
    """Configuration for a nesting run.

    Attributes:
        kerf_mm: Saw blade kerf width in millimeters (default 3 mm).
        max_units: Largest number of units a run may expand to.
    """

    kerf_mm: float = DEFAULT_KERF_MM
    max_units: int = MAX_UNITS

    def __post_init__(self) -> None:
        if isinstance(self.kerf_mm, bool) or not isinstance(self.kerf_mm, (int, float)):
            raise ValueError("Kerf must be a number")
        if not math.isfinite(self.kerf_mm) or self.kerf_mm < 0:
            raise ValueError("Kerf must be a finite non-negative number")
        if isinstance(self.max_units, bool) or not isinstance(self.max_units, int):
            raise ValueError("Unit limit must be an integer")
        if self.max_units < 1:
            raise ValueError("Unit limit must be at least 1")


@dataclass(frozen=True)
class Unit:
    """One physical copy of a part.

    Attributes:
        id: Run-scoped identifier, ``D1``, ``D2``, ...
        source_index: Index of the originating part in the input list.
        width: Part width in mm.
        height: Part height in mm.
    """

    id: str
    source_index: int
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Placement:
    """A unit placed at a specific position on a sheet.

    Coordinates are measured from the sheet's top-left corner. ``width``
    and ``height`` are the as-placed (post-rotation) dimensions; the kerf
    is not included.

    Attributes:
        x: Horizontal position in mm.
        y: Vertical position in mm.
        width: Placed width in mm.
        height: Placed height in mm.
        rotated: True if the unit is turned 90 degrees.
        unit_id: Id of the placed unit.
        source_index: Index of the originating part.
        color: Size group color, assigned when the sheet is finalized.
    """

    x: float
    y: float
    width: float
    height: float
    rotated: bool
    unit_id: str
    source_index: int
    color: str | None = None

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def detail_number(self) -> int:
        return int(self.unit_id[1:])

    @property
    def right_edge(self) -> float:
        return self.x + self.width

    @property
    def bottom_edge(self) -> float:
        return self.y + self.height

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def original_width(self) -> float:
        """Width of the part before rotation."""
        return self.height if self.rotated else self.width

    @property
    def original_height(self) -> float:
        """Height of the part before rotation."""
        return self.width if self.rotated else self.height

    @property
    def size_key(self) -> SizeKey:
        return size_key(self.width, self.height)


@dataclass(frozen=True)
class SheetPacking:
    """What the packer managed to place on one sheet.

    Attributes:
        placements: Placements in the order they were made.
        packed_ids: Ids of the units consumed by this sheet.
    """

    placements: tuple[Placement, ...]
    packed_ids: frozenset[str]


@dataclass(frozen=True)
class SheetLayout:
    """A closed sheet with its placements and presentation metadata.

    Attributes:
        sheet_index: Zero-based index of this sheet in the outcome.
        material: Material of the sheet.
        placements: Placements on this sheet, each carrying its group color.
        waste_areas: Bounding-box approximation of unused area.
        color_groups: Size groups in first-seen order.
    """

    sheet_index: int
    material: Material
    placements: tuple[Placement, ...]
    waste_areas: tuple[Rect, ...] = ()
    color_groups: tuple[ColorGroup, ...] = ()

    def __post_init__(self) -> None:
        if self.sheet_index < 0:
            raise ValueError("Sheet index must be non-negative")

    @property
    def piece_count(self) -> int:
        return len(self.placements)

    @property
    def used_area(self) -> float:
        """Area covered by placed parts in mm^2."""
        return sum(p.width * p.height for p in self.placements)

    @property
    def used_percentage(self) -> float:
        """Share of this sheet covered by parts."""
        area = self.material.area_mm2
        return round2(self.used_area / area * 100) if area else 0.0

    @property
    def size_color_map(self) -> dict[str, str]:
        """Mapping of ``"short x long"`` size labels to colors, in first-seen order."""
        return {group.label: group.color for group in self.color_groups}


@dataclass(frozen=True)
class OptimizationOutcome:
    """Complete result of one optimization run.

    Attributes:
        sheets: Closed sheet layouts in allocation order.
        sheets_required: Number of sheets.
        waste_percentage: Unused share of all sheet area, 2 decimals.
        used_percentage: Used share of all sheet area, 2 decimals.
        used_area: Sum of unit areas in mm^2.
        total_sheet_area: Sheet count times sheet area in mm^2.
        kerf_mm: Kerf the run was computed with.
        unit_count: Number of units expanded from the input parts.
    """

    sheets: tuple[SheetLayout, ...]
    sheets_required: int
    waste_percentage: float
    used_percentage: float
    used_area: float = 0.0
    total_sheet_area: float = 0.0
    kerf_mm: float = DEFAULT_KERF_MM
    unit_count: int = 0

    def __post_init__(self) -> None:
        if self.waste_percentage < 0 or self.waste_percentage > 100:
            raise ValueError("Waste percentage must be between 0 and 100")

    @property
    def total_pieces_placed(self) -> int:
        return sum(sheet.piece_count for sheet in self.sheets)


def round2(value: float) -> float:
    """Round half away from zero to two decimals."""
    return math.floor(value * 100 + 0.5) / 100


def expand_units(
    parts: Sequence[PartSpec],
    max_units: int = MAX_UNITS,
) -> list[Unit]:
    """Expand parts with quantity N into N individual units.

    Unit ids come from a counter local to this call, so independent runs
    never share state. Every part is validated and the total counted
    before any unit is created.

    Args:
        parts: Parts to cut.
        max_units: Largest number of units allowed.

    Returns:
        Units in input order.

    Raises:
        InvalidPart: If any width, height, or quantity is not a positive
            finite number (quantity must also be whole).
        TooManyUnits: If the quantities add up to more than ``max_units``.
    """
    total = 0
    for index, part in enumerate(parts):
        if not is_positive_finite(part.width_mm):
            raise InvalidPart(index, "width_mm", part.width_mm)
        if not is_positive_finite(part.height_mm):
            raise InvalidPart(index, "height_mm", part.height_mm)
        if not is_positive_finite(part.quantity) or int(part.quantity) != part.quantity:
            raise InvalidPart(index, "quantity", part.quantity)
        total += int(part.quantity)

    if total > max_units:
        raise TooManyUnits(total, max_units)

    counter = itertools.count(1)
    return [
        Unit(
            id=f"D{next(counter)}",
            source_index=index,
            width=part.width_mm,
            height=part.height_mm,
        )
        for index, part in enumerate(parts)
        for _ in range(int(part.quantity))
    ]


def order_units(units: Sequence[Unit]) -> list[Unit]:
    """Sort units by area, largest first.

    The sort is stable, so equal areas keep their encounter order.
    """
    return sorted(units, key=lambda u: u.width * u.height, reverse=True)


class GuillotinePacker:
    """Packs units onto one sheet using guillotine free-region splits.

    The sheet starts as a single free region. Each unit takes the first
    region (largest first) that holds its footprint, trying the natural
    orientation in every region before falling back to the rotated one.
    The used region is replaced by a right remainder and a bottom
    remainder no wider than the footprint.

    The footprint is the unit size plus one kerf on each axis.

    Attributes:
        kerf: Saw blade kerf width in mm.
    """

    def __init__(self, kerf: float = DEFAULT_KERF_MM) -> None:
        self.kerf = kerf

    def pack_sheet(
        self,
        units: Sequence[Unit],
        sheet_width: float,
        sheet_height: float,
    ) -> SheetPacking:
        """Place as many units as possible on one empty sheet.

        Args:
            units: Pending units in placement order.
            sheet_width: Sheet width in mm.
            sheet_height: Sheet height in mm.

        Returns:
            SheetPacking with the placements made and the consumed unit ids.
        """
        regions: list[FreeRegion] = [FreeRegion(0.0, 0.0, sheet_width, sheet_height)]
        placements: list[Placement] = []
        packed: set[str] = set()

        for unit in units:
            if unit.id in packed:
                continue

            placement = self._place(unit, regions, rotated=False)
            if placement is None:
                placement = self._place(unit, regions, rotated=True)

            if placement is not None:
                placements.append(placement)
                packed.add(unit.id)

        return SheetPacking(placements=tuple(placements), packed_ids=frozenset(packed))

    def _place(
        self,
        unit: Unit,
        regions: list[FreeRegion],
        rotated: bool,
    ) -> Placement | None:
        """Fit a unit into the first free region that holds its footprint.

        On success the region list is updated in place: the used region is
        removed, its remainders appended, and the list re-sorted by area.
        """
        width = unit.height if rotated else unit.width
        height = unit.width if rotated else unit.height

        for i, region in enumerate(regions):
            if not self._fits(width, height, region):
                continue

            placement = Placement(
                x=region.x,
                y=region.y,
                width=width,
                height=height,
                rotated=rotated,
                unit_id=unit.id,
                source_index=unit.source_index,
            )
            del regions[i]
            regions.extend(self._split(region, placement))
            regions.sort(key=lambda r: r.area, reverse=True)

            if rotated:
                logger.debug(
                    "Unit %s placed rotated at (%s, %s) as %sx%s",
                    unit.id,
                    placement.x,
                    placement.y,
                    width,
                    height,
                )
            return placement

        return None

    def _fits(self, width: float, height: float, region: FreeRegion) -> bool:
        return width + self.kerf <= region.width and height + self.kerf <= region.height

    def _split(self, region: FreeRegion, placement: Placement) -> list[FreeRegion]:
        """Guillotine split of a region around a placement at its origin.

        Returns:
            The right remainder (full region height) and the bottom
            remainder (footprint width), each only if non-empty.
        """
        w = placement.width + self.kerf
        h = placement.height + self.kerf

        remainders: list[FreeRegion] = []
        if region.width - w > 0:
            remainders.append(
                FreeRegion(region.x + w, region.y, region.width - w, region.height)
            )
        if region.height - h > 0:
            remainders.append(FreeRegion(region.x, region.y + h, w, region.height - h))
        return remainders


class SheetAllocator:
    """Opens sheets until every unit is placed.

    Each iteration either places at least one unit or fails, so the loop
    always terminates.

    Attributes:
        packer: Packer used for each new sheet.
    """

    def __init__(self, packer: GuillotinePacker) -> None:
        self.packer = packer

    def allocate(
        self,
        units: Sequence[Unit],
        sheet_width: float,
        sheet_height: float,
    ) -> list[tuple[Placement, ...]]:
        """Distribute ordered units over as many sheets as needed.

        Args:
            units: Units in placement order.
            sheet_width: Sheet width in mm.
            sheet_height: Sheet height in mm.

        Returns:
            Placements per sheet, in allocation order.

        Raises:
            UnpackableDimensions: If a unit exceeds the sheet in both
                orientations. No partial result is returned.
        """
        pending = list(units)
        sheets: list[tuple[Placement, ...]] = []

        while pending:
            packing = self.packer.pack_sheet(pending, sheet_width, sheet_height)

            if packing.placements:
                sheets.append(packing.placements)
                pending = [u for u in pending if u.id not in packing.packed_ids]
                logger.debug(
                    "Sheet %d: %d units placed, %d pending",
                    len(sheets) - 1,
                    len(packing.placements),
                    len(pending),
                )
                continue

            unit = pending[0]
            forced = self._force_place(unit, sheet_width, sheet_height)
            if forced is None:
                raise UnpackableDimensions(
                    unit.source_index,
                    unit.width,
                    unit.height,
                    sheet_width,
                    sheet_height,
                )

            logger.warning(
                "Unit %s (%sx%s) only fits alone without kerf; "
                "placing it on its own sheet",
                unit.id,
                unit.width,
                unit.height,
            )
            sheets.append((forced,))
            pending.pop(0)

        return sheets

    def _force_place(
        self,
        unit: Unit,
        sheet_width: float,
        sheet_height: float,
    ) -> Placement | None:
        """Place a unit alone at the origin, ignoring kerf."""
        if unit.width <= sheet_width and unit.height <= sheet_height:
            rotated = False
        elif unit.height <= sheet_width and unit.width <= sheet_height:
            rotated = True
        else:
            return None

        return Placement(
            x=0.0,
            y=0.0,
            width=unit.height if rotated else unit.width,
            height=unit.width if rotated else unit.height,
            rotated=rotated,
            unit_id=unit.id,
            source_index=unit.source_index,
        )


def finalize_sheet(
    placements: Sequence[Placement],
    material: Material,
    sheet_index: int,
    kerf: float,
) -> SheetLayout:
    """Close a sheet: attach waste regions and size color groups."""
    groups = group_by_size(placements)
    return SheetLayout(
        sheet_index=sheet_index,
        material=material,
        placements=apply_group_colors(placements, groups),
        waste_areas=compute_waste_areas(
            placements, material.width_mm, material.height_mm, kerf
        ),
        color_groups=groups,
    )


def calculate_metrics(
    units: Sequence[Unit],
    sheets_required: int,
    material: Material,
) -> tuple[float, float, float, float]:
    """Aggregate area figures for a run.

    Used area is the sum of original unit areas (rotation does not change
    area). Percentages are zero when no sheet was produced.

    Returns:
        Tuple of (used_area, total_sheet_area, waste_percentage, used_percentage).
    """
    used_area = sum(u.width * u.height for u in units)
    total_sheet_area = sheets_required * material.width_mm * material.height_mm

    if total_sheet_area == 0:
        return used_area, 0.0, 0.0, 0.0

    waste = round2((total_sheet_area - used_area) / total_sheet_area * 100)
    used = round2(used_area / total_sheet_area * 100)
    return used_area, total_sheet_area, waste, used


class CuttingOptimizer:
    """Runs the whole nesting pipeline for one material.

    Expander, order policy, allocator (driving the packer per sheet),
    finalizer, and metrics, in that order.

    Attributes:
        config: Nesting configuration (kerf).
    """

    def __init__(self, config: NestingConfig | None = None) -> None:
        self.config = config or NestingConfig()

    def optimize(
        self,
        parts: Sequence[PartSpec],
        material: Material,
    ) -> OptimizationOutcome:
        """Nest parts onto as few sheets of the material as the heuristic finds.

        Args:
            parts: Parts to cut, with quantities.
            material: Sheet material; its dimensions bound every placement.

        Returns:
            OptimizationOutcome with per-sheet layouts and metrics.

        Raises:
            InvalidPart: If a part has invalid dimensions or quantity.
            UnpackableDimensions: If a part cannot fit the sheet at all.
            TooManyUnits: If the parts expand to more units than allowed.
        """
        kerf = self.config.kerf_mm
        units = expand_units(parts, self.config.max_units)
        ordered = order_units(units)

        logger.debug(
            "Nesting %d units from %d parts on %s (kerf %s mm)",
            len(units),
            len(parts),
            material.description,
            kerf,
        )

        allocator = SheetAllocator(GuillotinePacker(kerf))
        packed_sheets = allocator.allocate(ordered, material.width_mm, material.height_mm)

        sheets = tuple(
            finalize_sheet(placements, material, index, kerf)
            for index, placements in enumerate(packed_sheets)
        )
        used_area, total_area, waste, used = calculate_metrics(
            units, len(sheets), material
        )

        logger.info(
            "Nested %d units onto %d sheet%s, %.2f%% waste",
            len(units),
            len(sheets),
            "" if len(sheets) == 1 else "s",
            waste,
        )

        return OptimizationOutcome(
            sheets=sheets,
            sheets_required=len(sheets),
            waste_percentage=waste,
            used_percentage=used,
            used_area=used_area,
            total_sheet_area=total_area,
            kerf_mm=kerf,
            unit_count=len(units),
        )


def optimize(
    parts: Sequence[PartSpec],
    material: Material,
    kerf_mm: float = DEFAULT_KERF_MM,
) -> OptimizationOutcome:
    """Nest parts onto sheets of a material.

    Convenience wrapper around ``CuttingOptimizer``.
    """
    return CuttingOptimizer(NestingConfig(kerf_mm=kerf_mm)).optimize(parts, material)
