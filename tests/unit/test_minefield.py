"""
Unit tests for FieldConfig and MineField.

Tests configuration validation, mine placement, cell moves,
win/lose detection and observation generation.
"""
import random

import pytest
import numpy as np
from game import (
    CellState,
    FieldConfig,
    GameState,
    InvalidMineCountError,
    InvalidShapeError,
    InvalidTransitionError,
    MineField,
    MinesAlreadyPlacedError,
    OutOfBoundsError,
)
from tensor import neighbors_of


# ============================================================================
# Field Configuration Tests
# ============================================================================

class TestFieldConfig:
    """Test field configuration validation."""

    def test_valid_config_creation(self, valid_config: FieldConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.shape == (9, 9)
        assert valid_config.num_mines == 10
        assert valid_config.element_count == 81

    def test_list_shape_becomes_tuple(self) -> None:
        """Shapes are normalised to tuples."""
        assert FieldConfig([2, 3], 1).shape == (2, 3)

    def test_zero_axis_raises_error(self) -> None:
        """An axis of 0 should raise InvalidShapeError."""
        with pytest.raises(InvalidShapeError):
            FieldConfig((3, 0, 3), 1)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise InvalidMineCountError."""
        with pytest.raises(InvalidMineCountError, match="between 0 and 9"):
            FieldConfig((3, 3), -1)

    def test_too_many_mines_raises_error(self) -> None:
        """More mines than cells should raise InvalidMineCountError."""
        with pytest.raises(InvalidMineCountError):
            FieldConfig((3, 3), 10)

    def test_every_cell_a_mine_is_valid(self) -> None:
        """A field may be filled with mines."""
        assert FieldConfig((3, 3), 9).num_mines == 9

    @pytest.mark.parametrize("count", [2.5, "3", True, None])
    def test_non_integer_mines_raises_error(self, count) -> None:
        """A mine count that is not an int (bool included) is rejected."""
        with pytest.raises(InvalidMineCountError, match="integer"):
            FieldConfig((3, 3), count)

    def test_numpy_integer_mines_accepted(self) -> None:
        """Numpy integer counts are stored as plain ints."""
        config = FieldConfig((3, 3), np.int64(4))
        assert config.num_mines == 4
        assert type(config.num_mines) is int

    def test_rank_zero_config(self) -> None:
        """A zero-dimensional field has one cell."""
        assert FieldConfig((), 1).element_count == 1


# ============================================================================
# Mine Placement Tests
# ============================================================================

class TestPlaceMines:
    """Test mine placement and adjacent counts."""

    def test_new_field_has_no_mines(self, rng: random.Random) -> None:
        """Mines are absent until place_mines runs."""
        mine_field = MineField(FieldConfig((4, 4), 5), rng)
        assert mine_field.mines_placed is False
        assert not any(cell.is_mine for cell in mine_field.cells)

    def test_exact_mine_count(self, small_field: MineField) -> None:
        """Exactly num_mines cells become mines."""
        assert small_field.mines_placed is True
        assert sum(cell.is_mine for cell in small_field.cells) == 5

    @pytest.mark.parametrize("shape,mines", [((4, 4), 5), ((3, 3, 3), 6), ((2, 3, 2, 3), 9)])
    def test_adjacent_counts_match_neighbors(self, shape, mines) -> None:
        """Every safe cell counts the mines in its neighborhood."""
        mine_field = MineField(FieldConfig(shape, mines), random.Random(7))
        mine_field.place_mines()
        cells = mine_field.cells
        for coord in cells.coordinates():
            cell = cells.get(coord)
            if cell.is_mine:
                continue
            expected = sum(
                cells.get(neighbor).is_mine
                for neighbor in neighbors_of(coord, shape)
            )
            assert cell.adjacent_mines == expected

    def test_all_cells_start_covered(self, default_field: MineField) -> None:
        """Placement leaves every cell covered."""
        assert all(cell.is_covered for cell in default_field.cells)

    def test_same_seed_same_layout(self) -> None:
        """Placement depends only on the random source."""
        first = MineField(FieldConfig((6, 6), 8), random.Random(99))
        second = MineField(FieldConfig((6, 6), 8), random.Random(99))
        first.place_mines()
        second.place_mines()
        assert [c.is_mine for c in first.cells] == [c.is_mine for c in second.cells]

    def test_fixed_layout(self, corner_mine_field: MineField) -> None:
        """A single corner mine gives its three neighbors a count of 1."""
        cells = corner_mine_field.cells
        assert cells[0, 0].is_mine is True
        assert cells[0, 1].adjacent_mines == 1
        assert cells[1, 1].adjacent_mines == 1
        assert cells[2, 2].adjacent_mines == 0

    def test_second_placement_rejected(self, small_field: MineField) -> None:
        """Mines can only be placed once."""
        layout = [cell.is_mine for cell in small_field.cells]
        with pytest.raises(MinesAlreadyPlacedError):
            small_field.place_mines()
        assert [cell.is_mine for cell in small_field.cells] == layout


# ============================================================================
# Reveal Tests
# ============================================================================

class TestReveal:
    """Test cell revealing behavior."""

    def test_reveal_safe_cell(self, corner_mine_field: MineField) -> None:
        """Revealing a safe cell uncovers it without a loss."""
        result = corner_mine_field.reveal((4, 4))
        assert result.state == CellState.UNCOVERED
        assert result.triggered_loss is False

    def test_reveal_mine_triggers_loss(self, corner_mine_field: MineField) -> None:
        """Revealing a mine reports a loss."""
        result = corner_mine_field.reveal((0, 0))
        assert result.triggered_loss is True
        assert corner_mine_field.is_lost() is True
        assert corner_mine_field.game_state == GameState.LOST

    def test_reveal_twice_is_noop(self, corner_mine_field: MineField) -> None:
        """Revealing an uncovered cell changes nothing."""
        corner_mine_field.reveal((2, 2))
        result = corner_mine_field.reveal((2, 2))
        assert result.state == CellState.UNCOVERED
        assert corner_mine_field.count_uncovered() == 1

    def test_reveal_does_not_cascade(self, empty_field: MineField) -> None:
        """MineField.reveal opens only the target cell."""
        empty_field.reveal((2, 2))
        assert empty_field.count_uncovered() == 1

    def test_reveal_out_of_bounds_raises(self, small_field: MineField) -> None:
        """Coordinates outside the field are rejected."""
        with pytest.raises(OutOfBoundsError):
            small_field.reveal((5, 5))

    def test_reveal_wrong_rank_raises(self, small_field: MineField) -> None:
        """Coordinates of the wrong rank are rejected."""
        with pytest.raises(OutOfBoundsError):
            small_field.reveal((1, 1, 1))

    def test_reveal_flagged_cell_raises(self, small_field: MineField) -> None:
        """Flagged cells must be unflagged before revealing."""
        small_field.toggle_flag((1, 1))
        with pytest.raises(InvalidTransitionError):
            small_field.reveal((1, 1))
        assert small_field.get_cell((1, 1)).state == CellState.FLAGGED


# ============================================================================
# Flag Tests
# ============================================================================

class TestToggleFlag:
    """Test flagging behavior."""

    def test_flag_and_unflag(self, small_field: MineField) -> None:
        """Flagging toggles between covered and flagged."""
        assert small_field.toggle_flag((0, 0)) == CellState.FLAGGED
        assert small_field.toggle_flag((0, 0)) == CellState.COVERED

    def test_flag_uncovered_cell_is_noop(self, corner_mine_field: MineField) -> None:
        """Uncovered cells cannot be flagged."""
        corner_mine_field.reveal((3, 3))
        assert corner_mine_field.toggle_flag((3, 3)) == CellState.UNCOVERED

    def test_flag_out_of_bounds_raises(self, small_field: MineField) -> None:
        """Flagging outside the field is rejected."""
        with pytest.raises(OutOfBoundsError):
            small_field.toggle_flag((-1, 0))


# ============================================================================
# Win/Lose Condition Tests
# ============================================================================

class TestGameEndConditions:
    """Test win and lose conditions."""

    def _uncover_safe_cells(self, mine_field: MineField) -> None:
        for cell in mine_field.cells:
            if not cell.is_mine:
                cell.reveal()

    def test_new_field_is_playing(self, small_field: MineField) -> None:
        """A fresh field is neither won nor lost."""
        assert small_field.is_won() is False
        assert small_field.is_lost() is False
        assert small_field.game_state == GameState.PLAYING

    def test_all_safe_cells_uncovered_wins(self, small_field: MineField) -> None:
        """Uncovering every safe cell wins."""
        self._uncover_safe_cells(small_field)
        assert small_field.is_won() is True
        assert small_field.game_state == GameState.WON

    def test_flagged_mines_still_win(self, small_field: MineField) -> None:
        """Mines may be covered or flagged in a won field."""
        self._uncover_safe_cells(small_field)
        coord = small_field.cells.find_first(lambda cell: cell.is_mine)
        small_field.toggle_flag(coord)
        assert small_field.is_won() is True

    def test_one_covered_safe_cell_is_not_won(self, small_field: MineField) -> None:
        """A single covered safe cell keeps the game going."""
        self._uncover_safe_cells(small_field)
        coord = small_field.cells.find_first(lambda cell: not cell.is_mine)
        small_field.get_cell(coord).state = CellState.COVERED
        assert small_field.is_won() is False

    def test_uncovered_mine_is_not_won(self, small_field: MineField) -> None:
        """An uncovered mine means a loss, not a win."""
        self._uncover_safe_cells(small_field)
        coord = small_field.cells.find_first(lambda cell: cell.is_mine)
        small_field.reveal(coord)
        assert small_field.is_won() is False
        assert small_field.game_state == GameState.LOST


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test observation array for the environment."""

    def test_observation_shape_matches_field(self, cube_config: FieldConfig) -> None:
        """Observation has the field's shape."""
        mine_field = MineField(cube_config, random.Random(3))
        assert mine_field.get_observation().shape == (3, 3, 3)

    def test_new_field_observation_all_covered(self, default_field: MineField) -> None:
        """New field observation should be all -1."""
        obs = default_field.get_observation()
        assert np.all(obs == -1)
        assert obs.dtype == np.int64

    def test_flagged_cell_in_observation(self, default_field: MineField) -> None:
        """Flagged cell should show -2 in observation."""
        default_field.toggle_flag((0, 0))
        assert default_field.get_observation()[0, 0] == -2

    def test_uncovered_mine_in_observation(self, corner_mine_field: MineField) -> None:
        """An uncovered mine shows 3**rank when the field has that many cells."""
        corner_mine_field.reveal((0, 0))
        assert corner_mine_field.get_observation()[0, 0] == 9

    def test_mine_value_capped_by_cell_count(self) -> None:
        """A thin field caps the mine value at its cell count."""
        mine_field = MineField(FieldConfig((2, 1, 1), 1), random.Random(0))
        assert mine_field.mine_observation_value == 2
        mine_field.place_mines()
        for coord in mine_field.cells.coordinates():
            mine_field.reveal(coord)
        assert sorted(mine_field.get_observation().ravel().tolist()) == [1, 2]

    def test_high_rank_mine_value_fits_observation(self) -> None:
        """A rank-20 field keeps its mine value within the observation dtype."""
        mine_field = MineField(FieldConfig((1,) * 20, 1), random.Random(0))
        assert mine_field.mine_observation_value == 1
        obs = mine_field.get_observation()
        assert obs.shape == (1,) * 20
        assert obs.dtype == np.int64

    def test_covered_indices(self, corner_mine_field: MineField) -> None:
        """Only covered cells are listed, by row-major index."""
        corner_mine_field.reveal((0, 1))
        corner_mine_field.toggle_flag((0, 2))
        indices = corner_mine_field.covered_indices()
        assert 1 not in indices
        assert 2 not in indices
        assert len(indices) == 23
