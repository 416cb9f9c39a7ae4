"""Value objects for sheet cutting.

All dimensions are in millimeters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidMaterial


class MaterialType(str, Enum):
    """Types of sheet material used in furniture construction."""

    LDSP = "ldsp"
    MDF = "mdf"
    HDF = "hdf"
    PLYWOOD = "plywood"
    PARTICLE_BOARD = "particle_board"
    SOLID_WOOD = "solid_wood"


def is_positive_finite(value: object) -> bool:
    """Check that a value is a real number greater than zero and not inf/nan."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


@dataclass(frozen=True)
class Material:
    """A sheet material supplied by the caller.

    The engine only reads ``width_mm`` and ``height_mm``; the remaining
    fields travel with each sheet for reporting and rendering.
    """

    width_mm: float
    height_mm: float
    thickness_mm: float = 16.0
    material_type: MaterialType = MaterialType.LDSP
    name: str = ""
    id: str = ""

    def __post_init__(self) -> None:
        for field_name in ("width_mm", "height_mm", "thickness_mm"):
            value = getattr(self, field_name)
            if not is_positive_finite(value):
                raise InvalidMaterial(field_name, value)

    @property
    def area_mm2(self) -> float:
        """Sheet area in square millimeters."""
        return self.width_mm * self.height_mm

    @property
    def description(self) -> str:
        """Short human readable description, e.g. ``LDSP 16mm 2800x2070``."""
        size = f"{self.width_mm:g}x{self.height_mm:g}"
        if self.name:
            return f"{self.name} {size}"
        return f"{self.material_type.value.upper()} {self.thickness_mm:g}mm {size}"


@dataclass(frozen=True)
class PartSpec:
    """A rectangular part to cut, with the number of copies needed.

    Values are validated when the part is expanded into units, so the
    error can name the part's position in the input list.
    """

    width_mm: float
    height_mm: float
    quantity: int = 1
    label: str | None = None

    @property
    def area_mm2(self) -> float:
        """Area of all copies of this part."""
        return self.width_mm * self.height_mm * self.quantity


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle on a sheet, origin at the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        """True when the interiors of the two rectangles overlap."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def contains(self, other: Rect) -> bool:
        """True when ``other`` lies fully inside this rectangle."""
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


SizeKey = tuple[float, float]


def size_key(width: float, height: float) -> SizeKey:
    """Orientation independent size key: (short side, long side)."""
    return (min(width, height), max(width, height))


def format_size_key(key: SizeKey) -> str:
    """Render a size key as ``"300x1200"``."""
    return f"{key[0]:g}x{key[1]:g}"
