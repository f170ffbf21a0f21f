"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import FieldConfig, MineField, VisibleField, mine_field_from_strings


# ============================================================================
# Mine Field Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_field() -> MineField:
    """5x5 field with a single mine at (0, 0)."""
    return mine_field_from_strings([
        "*....",
        ".....",
        ".....",
        ".....",
        ".....",
    ])


@pytest.fixture
def center_mine_field() -> MineField:
    """3x3 field with a single mine in the middle."""
    return mine_field_from_strings([
        "...",
        ".*.",
        "...",
    ])


@pytest.fixture
def mixed_field() -> MineField:
    """4x4 field with mines at (1, 1), (0, 3) and (3, 0)."""
    return mine_field_from_strings([
        "...*",
        ".*..",
        "....",
        "*...",
    ])


@pytest.fixture
def empty_field() -> MineField:
    """9x9 field awaiting 10 mines, seeded for repeatable placement."""
    return MineField.empty(9, 9, 10, seed=1234)


# ============================================================================
# Visible Field Fixtures
# ============================================================================

@pytest.fixture
def corner_visible(corner_mine_field: MineField) -> VisibleField:
    """Covered display over the corner mine field."""
    return VisibleField(corner_mine_field)


@pytest.fixture
def center_visible(center_mine_field: MineField) -> VisibleField:
    """Covered display over the center mine field."""
    return VisibleField(center_mine_field)


@pytest.fixture
def mixed_visible(mixed_field: MineField) -> VisibleField:
    """Covered display over the mixed field."""
    return VisibleField(mixed_field)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> FieldConfig:
    """Create a valid field configuration."""
    return FieldConfig(9, 9, 10)
