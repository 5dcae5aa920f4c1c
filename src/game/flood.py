"""
Flood reveal for N-dimensional Minesweeper.

Uncovering a safe cell with no adjacent mines opens the connected region of
zero cells around it together with the numbered cells bordering that region.
"""
from typing import List, Sequence

from tensor import Coordinate, neighbors_of

from .minefield import MineField, RevealResult


def flood_reveal(mine_field: MineField, start: Sequence[int]) -> List[Coordinate]:
    """
    Uncover the zero region connected to start and its border.

    The frontier grows in rounds: each round uncovers every frontier cell not
    yet visited and, for those with no adjacent mines, adds their neighbors
    to the frontier. Mines are never uncovered. Flagged cells stay flagged
    and the region does not grow through them.

    Args:
        mine_field: Field to operate on.
        start: Coordinate the flood begins from, normally a cell that was
            just uncovered and has no adjacent mines.

    Returns:
        Coordinates that changed from covered to uncovered, in the order
        they were opened. Empty when the region is already open.

    Raises:
        OutOfBoundsError: If start is not a valid coordinate.
    """
    cells = mine_field.cells
    shape = mine_field.shape
    start = tuple(start)

    frontier = {start}
    visited = set()
    opened = []

    while len(visited) < len(frontier):
        discovered = set()
        for coord in sorted(frontier - visited):
            visited.add(coord)
            cell = cells.get(coord)
            if cell.is_mine or cell.is_flagged:
                continue
            if cell.reveal():
                opened.append(coord)
            if cell.adjacent_mines == 0:
                discovered.update(neighbors_of(coord, shape))
        frontier |= discovered

    return opened


def uncover(mine_field: MineField, coord: Sequence[int]) -> RevealResult:
    """
    Reveal a cell and flood out from it when it is a safe zero.

    This is the complete "uncover" move of a turn.

    Raises:
        OutOfBoundsError: If coord is not a valid coordinate.
        InvalidTransitionError: If the cell is flagged.
    """
    result = mine_field.reveal(coord)
    cell = mine_field.get_cell(coord)
    if not result.triggered_loss and cell.adjacent_mines == 0:
        flood_reveal(mine_field, coord)
    return result
