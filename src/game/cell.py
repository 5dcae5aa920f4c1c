"""
Cell module for N-dimensional Minesweeper.

Represents individual cells of the field with their state
(covered/flagged/uncovered) and content (mine/adjacent count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    COVERED = auto()
    FLAGGED = auto()
    UNCOVERED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the mine field.

    Cells carry no coordinate of their own; the field addresses them by
    position.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in the Moore neighborhood.
        state: Current visual state (covered, flagged, or uncovered).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.COVERED

    def reveal(self) -> bool:
        """
        Uncover this cell.

        Returns:
            True if the cell was covered and is now uncovered, False if it
            was already uncovered or is flagged.
        """
        if self.state != CellState.COVERED:
            return False
        self.state = CellState.UNCOVERED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is uncovered.
        """
        if self.state == CellState.UNCOVERED:
            return False
        if self.state == CellState.COVERED:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.COVERED
        return True

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.state == CellState.COVERED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_uncovered(self) -> bool:
        """Check if cell is uncovered."""
        return self.state == CellState.UNCOVERED

    def to_text(self) -> str:
        """
        Printable representation of the cell.

        Returns:
            "X" if covered, "F" if flagged, "B" for an uncovered mine,
            otherwise the adjacent mine count in decimal.
        """
        if self.state == CellState.COVERED:
            return "X"
        if self.state == CellState.FLAGGED:
            return "F"
        if self.is_mine:
            return "B"
        return str(self.adjacent_mines)

    def to_observation(self, mine_value: int) -> int:
        """
        Convert cell to observation value for an agent.

        Args:
            mine_value: Value reported for an uncovered mine. Must exceed
                any possible adjacent count.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0..: Uncovered cell with adjacent mine count
            mine_value: Uncovered mine (game over state)
        """
        if self.state == CellState.COVERED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return mine_value
        return self.adjacent_mines
