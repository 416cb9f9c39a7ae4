"""Pytest configuration and shared fixtures for cutplan tests."""

from __future__ import annotations

import pytest

from cutplan.domain import Material, MaterialType


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests across CLI, command, and engine"
    )


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def standard_material() -> Material:
    """Standard 2800x2070 LDSP sheet, 16 mm thick."""
    return Material(
        width_mm=2800,
        height_mm=2070,
        thickness_mm=16,
        material_type=MaterialType.LDSP,
        name="LDSP 16mm",
        id="ldsp-16",
    )


@pytest.fixture
def portrait_material() -> Material:
    """Same sheet turned on its side, 2070 wide and 2800 tall."""
    return Material(width_mm=2070, height_mm=2800, name="Portrait LDSP", id="portrait")
