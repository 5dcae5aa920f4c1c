"""
N-dimensional Minesweeper game module.

Provides core game logic including field management, cell state,
flood reveal, text rendering and the terminal game loop.
"""
from .cell import Cell, CellState
from .errors import (
    MinesweeperError,
    InvalidMineCountError,
    InvalidTransitionError,
    MinesAlreadyPlacedError,
    InvalidShapeError,
    OutOfBoundsError,
)
from .minefield import (
    MineField,
    FieldConfig,
    GameState,
    RevealResult,
    BEGINNER,
    CUBE,
    TESSERACT,
)
from .flood import flood_reveal, uncover
from .renderer import render, render_text, render_array
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "MinesweeperError",
    "InvalidMineCountError",
    "InvalidTransitionError",
    "MinesAlreadyPlacedError",
    "InvalidShapeError",
    "OutOfBoundsError",
    "MineField",
    "FieldConfig",
    "GameState",
    "RevealResult",
    "BEGINNER",
    "CUBE",
    "TESSERACT",
    "flood_reveal",
    "uncover",
    "render",
    "render_text",
    "render_array",
    "MinesweeperEnv",
]
