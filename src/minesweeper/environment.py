"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameEngine through the standard RL interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BoardConfig
from .display import render_board
from .engine import GameEngine


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = open cell with adjacent mine count
        - 9 = open mine (after a loss)

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals cell (i // width, i % width);
        the second half toggles the flag on the same cells.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for invalid action (open cell, flagged reveal)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 30x16 with 99 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.engine = GameEngine(self.config, randint=self._draw)
        self.render_mode = render_mode

        self._num_cells = self.config.height * self.config.width

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def _draw(self, bound: int) -> int:
        """Bounded integer from the environment's seeded generator."""
        return int(self.np_random.integers(bound))

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.engine.reset()
        self._steps = 0

        return self.engine.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal, or cell index plus
                width * height to toggle a flag.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        flag, row, col = self._decode_action(int(action))
        self._steps += 1

        if flag:
            reward = 0.0 if self.engine.toggle_flag(row, col) else -0.1
        else:
            reward = self._reveal_reward(row, col)

        observation = self.engine.get_observation()
        terminated = self.engine.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        flag, index = divmod(action, self._num_cells)
        row, col = divmod(index, self.config.width)
        return bool(flag), row, col

    def _reveal_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the result."""
        if not self.engine.reveal(row, col):
            return -0.1
        if self.engine.is_won:
            return 10.0
        if self.engine.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.engine.opened_count,
            "flagged": self.engine.flagged_count,
            "total_safe": self.engine.target_count,
            "game_state": self.engine.state.name,
            "valid_actions": len(self.engine.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.engine)
        if self.render_mode == "human":
            print(render_board(self.engine))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid reveal actions.

        Returns:
            Boolean array over the full action space where True marks a
            closed, unflagged cell's reveal action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.engine.get_valid_actions():
            mask[row * self.config.width + col] = True
        return mask
