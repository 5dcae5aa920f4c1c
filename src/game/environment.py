"""
Gymnasium environment wrapper for N-dimensional Minesweeper.

Provides a standard RL interface for playing fields of any rank.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from tensor import Coordinate

from .flood import uncover
from .minefield import FieldConfig, MineField
from .renderer import render_text


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for N-dimensional Minesweeper.

    Observation:
        Array of the field's shape where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0.. = uncovered cell with adjacent mine count
        - min(3**rank, cell count) = uncovered mine

    Actions:
        Discrete action space of size equal to the cell count.
        Action i uncovers the cell at row-major index i.

    Rewards:
        - +1 for uncovering a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already uncovered or flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Field configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or FieldConfig()
        self.field = MineField(self.config)
        self.render_mode = render_mode

        # Define observation space
        self.observation_space = spaces.Box(
            low=-2,
            high=self.field.mine_observation_value,
            shape=self.config.shape,
            dtype=np.int64,
        )

        # Define action space (one action per cell)
        self.action_space = spaces.Discrete(self.config.element_count)

        # Track steps for info
        self._steps = 0
        self._total_safe_cells = (
            self.config.element_count - self.config.num_mines
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Mines are placed from a random.Random seeded by the environment's
        own generator, so a seeded reset reproduces the same field.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(0, 2**31 - 1)))
        self.field = MineField(self.config, rng)
        self.field.place_mines()
        self._steps = 0

        observation = self.field.get_observation()
        info = self._get_info()

        return observation, info

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Row-major index of the cell to uncover.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        coord = self._action_to_coordinate(action)
        self._steps += 1

        # Calculate reward based on action result
        reward = self._calculate_reward(coord)

        # Get new observation
        observation = self.field.get_observation()

        # Check if episode is done
        terminated = self.field.is_lost() or self.field.is_won()
        truncated = False

        info = self._get_info()

        return observation, reward, terminated, truncated, info

    def _action_to_coordinate(self, action: int) -> Coordinate:
        """Convert flat action index to a field coordinate."""
        return self.field.cells.coordinate_of(int(action))

    def _calculate_reward(self, coord: Coordinate) -> float:
        """
        Calculate reward for uncovering a cell.

        Args:
            coord: Coordinate of the cell.

        Returns:
            Reward value.
        """
        cell = self.field.get_cell(coord)

        # Invalid action (already uncovered or flagged)
        if not cell.is_covered:
            return -0.1

        # Perform the move
        result = uncover(self.field, coord)

        # Check game state
        if result.triggered_loss:
            return -10.0
        if self.field.is_won():
            return 10.0

        # Successful safe reveal
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "uncovered": self.field.count_uncovered(),
            "total_safe": self._total_safe_cells,
            "game_state": self.field.game_state.name,
            "valid_actions": len(self.field.covered_indices()),
        }

    def render(self) -> Optional[str]:
        """Render the current field state."""
        if self.render_mode == "ansi":
            return render_text(self.field)
        if self.render_mode == "human":
            print(render_text(self.field))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        mask[self.field.covered_indices()] = True
        return mask
