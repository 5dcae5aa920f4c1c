"""
Mine field module for N-dimensional Minesweeper.

Implements the field with mine placement, adjacent counts, cell moves
and win/loss detection over a grid of any rank.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, NamedTuple, Sequence, Tuple

import numpy as np

from tensor import NDArray, Coordinate, element_count, neighbors_of, validate_shape

from .cell import Cell, CellState
from .errors import (
    InvalidMineCountError,
    InvalidTransitionError,
    MinesAlreadyPlacedError,
)


# ============================================================================
# Constants
# ============================================================================

@dataclass
class FieldConfig:
    """
    Configuration for a mine field.

    Attributes:
        shape: Size of each axis, any rank (including 0).
        num_mines: Total mines to place.
    """

    shape: Tuple[int, ...] = (9, 9)
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        self.shape = validate_shape(self.shape)
        if isinstance(self.num_mines, bool) or not isinstance(
            self.num_mines, (int, np.integer)
        ):
            raise InvalidMineCountError(
                f"Mine count must be an integer, got {self.num_mines!r}"
            )
        self.num_mines = int(self.num_mines)
        if not 0 <= self.num_mines <= self.element_count:
            raise InvalidMineCountError(
                f"Mine count must be between 0 and {self.element_count}, "
                f"got {self.num_mines}"
            )

    @property
    def element_count(self) -> int:
        """Total number of cells."""
        return element_count(self.shape)


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# Preset fields
BEGINNER = FieldConfig((9, 9), 10)
CUBE = FieldConfig((5, 5, 5), 15)
TESSERACT = FieldConfig((4, 4, 4, 4), 20)


class RevealResult(NamedTuple):
    """Outcome of uncovering one cell."""

    state: CellState
    triggered_loss: bool


# ============================================================================
# MineField Class
# ============================================================================

@dataclass
class MineField:
    """
    N-dimensional Minesweeper field.

    Owns the array of cells exclusively. Cells are always addressed by
    coordinate; algorithms that need to walk the field receive the field
    itself.
    """

    config: FieldConfig = field(default_factory=FieldConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _cells: NDArray[Cell] = field(init=False, repr=False)
    _mines_placed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        """Create the covered cells after dataclass creation."""
        self._cells = NDArray(self.config.shape, Cell)

    # ========================================================================
    # Setup (Low-level)
    # ========================================================================

    def place_mines(self) -> None:
        """
        Place mines uniformly at random and compute adjacent counts.

        Shuffles every linear index and mines the first num_mines of them.

        Raises:
            MinesAlreadyPlacedError: If mines were already placed.
        """
        if self._mines_placed:
            raise MinesAlreadyPlacedError("Mines have already been placed")
        self._mines_placed = True

        indices = list(range(self._cells.size))
        self.rng.shuffle(indices)
        for index in indices[: self.config.num_mines]:
            self._mark_mine(self._cells.coordinate_of(index))

    def _mark_mine(self, coord: Coordinate) -> None:
        """Mine one cell and bump the count of each neighbor."""
        self._cells.get(coord).is_mine = True
        for neighbor in neighbors_of(coord, self.shape):
            self._cells.get(neighbor).adjacent_mines += 1

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, coord: Sequence[int]) -> RevealResult:
        """
        Uncover the cell at the given coordinate.

        Uncovering an already uncovered cell changes nothing.

        Args:
            coord: Coordinate of the cell.

        Returns:
            The cell's state afterwards and whether it was a mine.

        Raises:
            OutOfBoundsError: If coord is not a valid coordinate.
            InvalidTransitionError: If the cell is flagged.
        """
        cell = self._cells.get(coord)
        if cell.is_flagged:
            raise InvalidTransitionError(
                f"Cell {tuple(coord)} is flagged; unflag it before revealing"
            )
        cell.reveal()
        return RevealResult(cell.state, cell.is_mine and cell.is_uncovered)

    def toggle_flag(self, coord: Sequence[int]) -> CellState:
        """
        Flag a covered cell or unflag a flagged one.

        Uncovered cells are left as they are.

        Raises:
            OutOfBoundsError: If coord is not a valid coordinate.
        """
        cell = self._cells.get(coord)
        cell.toggle_flag()
        return cell.state

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def shape(self) -> Tuple[int, ...]:
        """Size of each axis."""
        return self._cells.shape

    @property
    def num_mines(self) -> int:
        """Number of mines the field holds once placed."""
        return self.config.num_mines

    @property
    def cells(self) -> NDArray[Cell]:
        """The underlying cell array."""
        return self._cells

    @property
    def mines_placed(self) -> bool:
        """Whether place_mines has run."""
        return self._mines_placed

    @property
    def mine_observation_value(self) -> int:
        """
        Observation value of an uncovered mine.

        A cell has at most 3**rank - 1 neighbours and fewer than size, so
        the smaller of the two bounds is above any adjacent count.
        """
        return min(3 ** self._cells.rank, self._cells.size)

    def get_cell(self, coord: Sequence[int]) -> Cell:
        """Get cell at a coordinate, raising OutOfBoundsError if invalid."""
        return self._cells.get(coord)

    @property
    def game_state(self) -> GameState:
        """Current game state derived from the cells."""
        if self.is_lost():
            return GameState.LOST
        if self.is_won():
            return GameState.WON
        return GameState.PLAYING

    def is_won(self) -> bool:
        """Check that every mine is still hidden and every safe cell is open."""
        return all(
            not cell.is_uncovered if cell.is_mine else cell.is_uncovered
            for cell in self._cells
        )

    def is_lost(self) -> bool:
        """Check whether any mine has been uncovered."""
        return any(cell.is_mine and cell.is_uncovered for cell in self._cells)

    def count_uncovered(self) -> int:
        """Number of uncovered cells."""
        return sum(1 for cell in self._cells if cell.is_uncovered)

    def covered_indices(self) -> List[int]:
        """
        Get linear indices of cells that can still be revealed.

        Returns:
            Row-major indices of covered (not flagged) cells.
        """
        return [
            index for index, cell in enumerate(self._cells) if cell.is_covered
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get field state as a numpy array for the environment.

        Returns:
            Array of the field's shape where:
                -1 = covered
                -2 = flagged
                0.. = uncovered with adjacent count
                mine_observation_value = uncovered mine
        """
        mine_value = self.mine_observation_value
        return self._cells.map(
            lambda cell: cell.to_observation(mine_value)
        ).to_numpy(np.int64)
