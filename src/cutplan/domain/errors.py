"""Domain errors raised by the nesting engine.

All errors derive from ``NestingError`` (itself a ``ValueError``) so callers
can catch the whole family at once. Each error carries an ``error_type``
string that the CLI and REST API use to report the failure category.
"""

from __future__ import annotations

from typing import Any


class NestingError(ValueError):
    """Base class for errors that terminate an optimization run."""

    error_type: str = "nesting"

    def details(self) -> dict[str, Any]:
        """Structured error details for reporting."""
        return {}


class InvalidPart(NestingError):
    """A part has a non-positive or non-finite width, height, or quantity.

    Attributes:
        part_index: Index of the offending part in the input list.
        field: Name of the invalid attribute.
        value: The rejected value.
    """

    error_type = "invalid_part"

    def __init__(self, part_index: int, field: str, value: Any) -> None:
        self.part_index = part_index
        self.field = field
        self.value = value
        super().__init__(
            f"Part {part_index + 1}: {field} must be a positive finite number "
            f"(got {value!r})"
        )

    def details(self) -> dict[str, Any]:
        return {"part_index": self.part_index, "field": self.field, "value": self.value}


class InvalidMaterial(NestingError):
    """Material dimensions are non-positive or non-finite."""

    error_type = "invalid_material"

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Material {field} must be a positive finite number (got {value!r})"
        )

    def details(self) -> dict[str, Any]:
        return {"field": self.field, "value": self.value}


class UnpackableDimensions(NestingError):
    """A part exceeds the sheet in both orientations and can never be placed.

    Attributes:
        part_index: Index of the originating part in the input list.
        width: Part width in millimeters.
        height: Part height in millimeters.
        sheet_width: Sheet width in millimeters.
        sheet_height: Sheet height in millimeters.
    """

    error_type = "unpackable_dimensions"

    def __init__(
        self,
        part_index: int,
        width: float,
        height: float,
        sheet_width: float,
        sheet_height: float,
    ) -> None:
        self.part_index = part_index
        self.width = width
        self.height = height
        self.sheet_width = sheet_width
        self.sheet_height = sheet_height
        super().__init__(
            f"Part {part_index + 1} ({width:g}x{height:g} mm) does not fit on "
            f"a {sheet_width:g}x{sheet_height:g} mm sheet in either orientation"
        )

    def details(self) -> dict[str, Any]:
        return {
            "part_index": self.part_index,
            "width_mm": self.width,
            "height_mm": self.height,
            "sheet_width_mm": self.sheet_width,
            "sheet_height_mm": self.sheet_height,
        }


class TooManyUnits(NestingError):
    """The parts expand to more units than one run may nest.

    Attributes:
        unit_count: Total number of units requested.
        limit: Maximum number of units per run.
    """

    error_type = "too_many_units"

    def __init__(self, unit_count: int, limit: int) -> None:
        self.unit_count = unit_count
        self.limit = limit
        super().__init__(
            f"Parts expand to {unit_count} pieces; at most {limit} can be "
            f"nested in one run"
        )

    def details(self) -> dict[str, Any]:
        return {"unit_count": self.unit_count, "limit": self.limit}
