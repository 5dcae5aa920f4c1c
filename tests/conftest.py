"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import List, Sequence

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import Cell, FieldConfig, MineField
from tensor import NDArray


# ============================================================================
# Helpers
# ============================================================================

class FixedShuffle:
    """
    Stand-in for random.Random whose shuffle moves chosen indices first.

    Lets tests decide exactly which cells place_mines turns into mines.
    """

    def __init__(self, first: Sequence[int]) -> None:
        self.first = list(first)

    def shuffle(self, values: List[int]) -> None:
        rest = [value for value in values if value not in self.first]
        values[:] = self.first + rest


def field_with_mines(shape, mines) -> MineField:
    """Build a field with mines at the given coordinates."""
    cells = NDArray(shape)
    indices = [cells.linear_index(coord) for coord in mines]
    mine_field = MineField(FieldConfig(shape, len(indices)), FixedShuffle(indices))
    mine_field.place_mines()
    return mine_field


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def default_field(rng: random.Random) -> MineField:
    """Create a default 9x9 field with 10 mines placed."""
    mine_field = MineField(FieldConfig(), rng)
    mine_field.place_mines()
    return mine_field


@pytest.fixture
def small_field(rng: random.Random) -> MineField:
    """Create a 4x4 field with 5 mines placed."""
    mine_field = MineField(FieldConfig((4, 4), 5), rng)
    mine_field.place_mines()
    return mine_field


@pytest.fixture
def empty_field(rng: random.Random) -> MineField:
    """Create a 5x5 field with no mines for cascade testing."""
    mine_field = MineField(FieldConfig((5, 5), 0), rng)
    mine_field.place_mines()
    return mine_field


@pytest.fixture
def make_field():
    """Factory building a field with mines at given coordinates."""
    return field_with_mines


@pytest.fixture
def fixed_shuffle():
    """Factory for a random source that mines the given indices."""
    return FixedShuffle


@pytest.fixture
def corner_mine_field() -> MineField:
    """Create a 5x5 field with a single mine at (0, 0)."""
    return field_with_mines((5, 5), [(0, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create an uncovered cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> FieldConfig:
    """Create a valid field configuration."""
    return FieldConfig((9, 9), 10)


@pytest.fixture
def cube_config() -> FieldConfig:
    """Three-dimensional configuration."""
    return FieldConfig((3, 3, 3), 4)
