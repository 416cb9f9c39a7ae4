"""Tests for domain value objects and errors."""

from __future__ import annotations

import math

import pytest

from cutplan.domain import (
    InvalidMaterial,
    Material,
    MaterialType,
    NestingError,
    PartSpec,
    Rect,
    UnpackableDimensions,
    format_size_key,
    is_positive_finite,
    size_key,
)


class TestMaterial:
    """Tests for Material."""

    def test_defaults(self) -> None:
        """Thickness and type default to 16 mm LDSP."""
        material = Material(width_mm=2800, height_mm=2070)
        assert material.thickness_mm == 16.0
        assert material.material_type == MaterialType.LDSP
        assert material.area_mm2 == 5_796_000

    def test_description_with_name(self) -> None:
        """Named materials describe themselves by name and size."""
        material = Material(2800, 2070, name="LDSP 16mm")
        assert material.description == "LDSP 16mm 2800x2070"

    def test_description_without_name(self) -> None:
        """Unnamed materials fall back to type and thickness."""
        material = Material(2440, 1220, 18, MaterialType.PLYWOOD)
        assert material.description == "PLYWOOD 18mm 2440x1220"

    @pytest.mark.parametrize(
        ("kwargs", "field"),
        [
            ({"width_mm": 0, "height_mm": 100}, "width_mm"),
            ({"width_mm": 100, "height_mm": -1}, "height_mm"),
            ({"width_mm": math.inf, "height_mm": 100}, "width_mm"),
            ({"width_mm": 100, "height_mm": 100, "thickness_mm": 0}, "thickness_mm"),
        ],
    )
    def test_invalid_dimensions(self, kwargs: dict, field: str) -> None:
        """Non-positive or non-finite dimensions raise InvalidMaterial."""
        with pytest.raises(InvalidMaterial) as exc_info:
            Material(**kwargs)
        assert exc_info.value.field == field
        assert exc_info.value.error_type == "invalid_material"

    def test_is_frozen(self) -> None:
        """Materials are immutable."""
        material = Material(100, 100)
        with pytest.raises(AttributeError):
            material.width_mm = 200  # type: ignore[misc]


class TestPartSpec:
    """Tests for PartSpec."""

    def test_area_includes_quantity(self) -> None:
        """Area covers all copies."""
        assert PartSpec(300, 200, quantity=3).area_mm2 == 180_000

    def test_no_validation_on_construction(self) -> None:
        """Invalid values are accepted here and rejected by the expander."""
        assert PartSpec(0, -1, quantity=0).width_mm == 0


class TestRect:
    """Tests for Rect geometry helpers."""

    def test_edges_and_area(self) -> None:
        rect = Rect(10, 20, 30, 40)
        assert rect.right == 40
        assert rect.bottom == 60
        assert rect.area == 1200

    def test_touching_rects_do_not_intersect(self) -> None:
        """Shared edges are not overlap."""
        assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))

    def test_overlapping_rects_intersect(self) -> None:
        assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))

    def test_contains(self) -> None:
        outer = Rect(0, 0, 100, 100)
        assert outer.contains(Rect(0, 0, 100, 100))
        assert outer.contains(Rect(10, 10, 20, 20))
        assert not outer.contains(Rect(90, 90, 20, 5))


class TestSizeKey:
    """Tests for size key helpers."""

    def test_orientation_independent(self) -> None:
        assert size_key(1200, 300) == size_key(300, 1200) == (300, 1200)

    def test_format(self) -> None:
        assert format_size_key((300.0, 1200.0)) == "300x1200"


class TestIsPositiveFinite:
    """Tests for is_positive_finite."""

    @pytest.mark.parametrize("value", [1, 0.5, 2800])
    def test_accepts(self, value: float) -> None:
        assert is_positive_finite(value)

    @pytest.mark.parametrize("value", [0, -1, math.nan, math.inf, True, "5", None])
    def test_rejects(self, value: object) -> None:
        assert not is_positive_finite(value)


class TestErrors:
    """Tests for the nesting error hierarchy."""

    def test_errors_are_value_errors(self) -> None:
        """All nesting errors can be caught as ValueError."""
        error = UnpackableDimensions(0, 2900, 100, 2800, 2070)
        assert isinstance(error, NestingError)
        assert isinstance(error, ValueError)

    def test_unpackable_details(self) -> None:
        error = UnpackableDimensions(2, 2900, 100, 2800, 2070)
        assert error.details() == {
            "part_index": 2,
            "width_mm": 2900,
            "height_mm": 100,
            "sheet_width_mm": 2800,
            "sheet_height_mm": 2070,
        }
        assert "Part 3 (2900x100 mm)" in str(error)
