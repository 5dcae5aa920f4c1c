"""
Text rendering of fields of any rank.

Ranks 0 to 2 print as plain text. Higher ranks are folded: the last two axes
form a plain 2-D panel, and the leading axes are reduced two at a time into
boxed grids of panels until a single block of lines remains.
"""
from functools import reduce
from typing import List, Sequence

from tensor import NDArray

from .cell import Cell
from .minefield import MineField


Block = List[str]


# ============================================================================
# Block Helpers (Low-level)
# ============================================================================

def box_wrap(block: Sequence[str]) -> Block:
    """
    Surround a block with a border.

    Every line is padded with spaces to the longest line, framed with "|",
    and the block gets "+---+" rules above and below.
    """
    width = max((len(line) for line in block), default=0)
    rule = "+" + "-" * width + "+"
    return [rule] + ["|" + line.ljust(width) + "|" for line in block] + [rule]


def join_horizontal(left: Sequence[str], right: Sequence[str], separator: str = " ") -> Block:
    """Concatenate two blocks with the same line count side by side."""
    return [a + separator + b for a, b in zip(left, right)]


def join_vertical(top: Sequence[str], bottom: Sequence[str], separator: str = " ") -> Block:
    """Stack two blocks with a separator line between them."""
    return list(top) + [separator] + list(bottom)


# ============================================================================
# Folding (Mid-level)
# ============================================================================

def _panel(texts: NDArray[str], outer: tuple) -> Block:
    """
    Plain grid over the last two axes at a fixed outer coordinate.

    Cells are not padded, so a multi-digit count makes its line longer than
    the others in the panel and shifts any panel joined to its right.
    """
    rows, cols = texts.shape[-2:]
    return [
        "".join(texts.get(outer + (row, col)) for col in range(cols))
        for row in range(rows)
    ]


def _fold_last_two(blocks: NDArray[Block]) -> NDArray[Block]:
    """Reduce the last two axes of an array of blocks into boxed grids."""
    rows, cols = blocks.shape[-2:]
    remaining = NDArray(blocks.shape[:-2])

    folded = []
    for prefix in remaining.coordinates():
        grid_rows = [
            reduce(
                join_horizontal,
                (blocks.get(prefix + (row, col)) for col in range(cols)),
            )
            for row in range(rows)
        ]
        folded.append(box_wrap(reduce(join_vertical, grid_rows)))
    return NDArray(remaining.shape, folded)


def fold_blocks(blocks: NDArray[Block]) -> Block:
    """
    Collapse an array of equal-height blocks into one block.

    Pairs of trailing axes are folded into boxed grids until at most one
    axis is left. A leftover axis is joined horizontally and boxed.
    """
    while blocks.rank >= 2:
        blocks = _fold_last_two(blocks)
    if blocks.rank == 1:
        return box_wrap(reduce(join_horizontal, blocks))
    return blocks.get(())


# ============================================================================
# Rendering (High-level)
# ============================================================================

def render_array(texts: NDArray[str]) -> Block:
    """
    Render an array of per-cell strings as printable lines.

    Args:
        texts: Array of any rank holding the text of each cell.

    Returns:
        Output lines, top to bottom.
    """
    if texts.rank == 0:
        return [texts.get(())]
    if texts.rank == 1:
        return ["".join(texts)]
    if texts.rank == 2:
        return _panel(texts, ())

    outer = NDArray(texts.shape[:-2])
    panels = [_panel(texts, coord) for coord in outer.coordinates()]
    return fold_blocks(NDArray(outer.shape, panels))


def render(mine_field: MineField) -> Block:
    """Render a field as printable lines."""
    return render_array(mine_field.cells.map(Cell.to_text))


def render_text(mine_field: MineField) -> str:
    """Render a field as a single newline-separated string."""
    return "\n".join(render(mine_field))
