"""Infrastructure layer - nesting engine, rendering, and formatters."""

from .bin_packing import (
    CuttingOptimizer,
    GuillotinePacker,
    NestingConfig,
    OptimizationOutcome,
    Placement,
    SheetAllocator,
    SheetLayout,
    Unit,
    optimize,
)
from .cut_diagram_renderer import CutDiagramRenderer
from .formatters import CsvExporter, JsonExporter, OutcomeSummaryFormatter
from .layout_finalizer import SIZE_GROUP_PALETTE, ColorGroup

__all__ = [
    # Nesting engine
    "CuttingOptimizer",
    "GuillotinePacker",
    "NestingConfig",
    "OptimizationOutcome",
    "Placement",
    "SheetAllocator",
    "SheetLayout",
    "Unit",
    "optimize",
    # Layout metadata
    "SIZE_GROUP_PALETTE",
    "ColorGroup",
    # Rendering
    "CutDiagramRenderer",
    # Formatters
    "CsvExporter",
    "JsonExporter",
    "OutcomeSummaryFormatter",
]
