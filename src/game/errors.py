"""
Error types raised by the game layer.

Container errors (bad shapes, bad coordinates) come from the tensor package
and pass through the game layer unchanged; they are re-exported here so
callers can catch everything from one place.
"""
from tensor import InvalidShapeError, OutOfBoundsError


class MinesweeperError(Exception):
    """Base class for game errors."""


class InvalidMineCountError(MinesweeperError, ValueError):
    """Mine count is negative or exceeds the number of cells."""


class InvalidTransitionError(MinesweeperError):
    """A move is not allowed from the cell's current state."""


class MinesAlreadyPlacedError(MinesweeperError, RuntimeError):
    """Mines were placed on a field that already has them."""


__all__ = [
    "MinesweeperError",
    "InvalidMineCountError",
    "InvalidTransitionError",
    "MinesAlreadyPlacedError",
    "InvalidShapeError",
    "OutOfBoundsError",
]
