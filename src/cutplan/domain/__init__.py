"""Domain layer - value objects and errors for sheet cutting."""

from .errors import (
    InvalidMaterial,
    InvalidPart,
    NestingError,
    TooManyUnits,
    UnpackableDimensions,
)
from .value_objects import (
    Material,
    MaterialType,
    PartSpec,
    Rect,
    SizeKey,
    format_size_key,
    is_positive_finite,
    size_key,
)

__all__ = [
    # Errors
    "InvalidMaterial",
    "InvalidPart",
    "NestingError",
    "TooManyUnits",
    "UnpackableDimensions",
    # Value objects
    "Material",
    "MaterialType",
    "PartSpec",
    "Rect",
    "SizeKey",
    "format_size_key",
    "is_positive_finite",
    "size_key",
]
