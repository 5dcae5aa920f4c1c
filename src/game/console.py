"""
Terminal game loop for N-dimensional Minesweeper.

Reads the field dimensions, the mine count and moves as whitespace-separated
integers. A move prefixed with "F" toggles a flag; any other move uncovers
the cell. Input and output functions are injectable so the loop can be
driven without a terminal.
"""
import random
from typing import Callable, NamedTuple, Optional, Tuple

from .errors import InvalidTransitionError, OutOfBoundsError
from .flood import uncover
from .minefield import FieldConfig, GameState, MineField
from .renderer import render


FLAG_TOKEN = "F"
QUIT_TOKEN = "q"


class Move(NamedTuple):
    """A parsed player command."""

    coord: Tuple[int, ...]
    flag: bool


# ============================================================================
# Input Parsing (Low-level)
# ============================================================================

def _parse_ints(tokens) -> Tuple[int, ...]:
    try:
        return tuple(int(token) for token in tokens)
    except ValueError:
        raise ValueError("not integers") from None


def parse_shape(text: str) -> Tuple[int, ...]:
    """
    Parse field dimensions.

    An empty line gives a rank-0 field of one cell.

    Raises:
        ValueError: If a token is not an integer.
    """
    return _parse_ints(text.split())


def parse_mine_count(text: str, total_cells: int) -> int:
    """
    Parse the number of mines for a field of total_cells cells.

    Raises:
        ValueError: If text is not an integer or the count does not fit.
    """
    tokens = text.split()
    if len(tokens) != 1:
        raise ValueError("expected a single number")
    (count,) = _parse_ints(tokens)
    if not 0 <= count <= total_cells:
        raise ValueError(f"mine count must be between 0 and {total_cells}")
    return count


def parse_move(text: str, rank: int) -> Move:
    """
    Parse a move for a field of the given rank.

    Args:
        text: Coordinates separated by whitespace, optionally preceded by
            the flag token.
        rank: Number of axes of the field.

    Raises:
        ValueError: If the token count is wrong or a coordinate is not an
            integer.
    """
    tokens = text.split()
    flag = False
    if len(tokens) == rank + 1:
        if tokens[0] != FLAG_TOKEN:
            raise ValueError("long but not a flag command")
        flag = True
        tokens = tokens[1:]
    if len(tokens) != rank:
        raise ValueError(f"expected {rank} coordinates, got {len(tokens)}")
    return Move(_parse_ints(tokens), flag)


# ============================================================================
# Game Loop (High-level)
# ============================================================================

def _ask_config(
    input_fn: Callable[[], str], output_fn: Callable[[str], None]
) -> FieldConfig:
    """Prompt until a valid shape and mine count are entered."""
    while True:
        output_fn("Please enter field dimensions (separated by spaces)")
        try:
            shape = parse_shape(input_fn())
            total = FieldConfig(shape, 0).element_count
            break
        except ValueError as error:
            output_fn(f"Bad dimensions ({error})")
    output_fn(f"Total cells: {total}")

    while True:
        output_fn("Please enter the number of mines")
        try:
            return FieldConfig(shape, parse_mine_count(input_fn(), total))
        except ValueError as error:
            output_fn(f"Bad number of mines ({error})")


def _show(mine_field: MineField, output_fn: Callable[[str], None]) -> None:
    for line in render(mine_field):
        output_fn(line)


def play(
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Run one interactive game.

    Args:
        input_fn: Returns the next line of player input.
        output_fn: Writes one line of output.
        rng: Source for mine placement.

    Returns:
        WON or LOST when the game ends, PLAYING if the player quit.
    """
    config = _ask_config(input_fn, output_fn)
    mine_field = MineField(config, rng or random.Random())
    mine_field.place_mines()
    _show(mine_field, output_fn)

    rank = len(config.shape)
    while True:
        output_fn(
            f"Please enter a cell ({FLAG_TOKEN} first to flag, "
            f"{QUIT_TOKEN} to quit)"
        )
        text = input_fn()
        if text.strip() == QUIT_TOKEN:
            return GameState.PLAYING

        try:
            move = parse_move(text, rank)
            if move.flag:
                mine_field.toggle_flag(move.coord)
            else:
                uncover(mine_field, move.coord)
        except ValueError as error:
            output_fn(f"Bad input ({error})")
            continue
        except OutOfBoundsError:
            output_fn("Bad input (coordinates out of bounds)")
            continue
        except InvalidTransitionError as error:
            output_fn(str(error))
            continue

        _show(mine_field, output_fn)
        state = mine_field.game_state
        if state == GameState.LOST:
            output_fn("BOOM! You lose!")
            return state
        if state == GameState.WON:
            output_fn("You won!")
            return state
