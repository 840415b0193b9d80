"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameEngine through a standard RL interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, DEFAULT_CONFIG
from .engine import GameEngine
from .snapshot import BoardSnapshot


# ============================================================================
# Constants
# ============================================================================

OPEN, FLAG, CHORD = range(3)
ACTION_KINDS = ("open", "flag", "chord")


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = open cell with adjacent mine count
        - 9 = open mine (round lost)

    Actions:
        Discrete action space of size 3 * width * height.
        Action i is kind ``i // (width * height)`` (open, flag, chord)
        applied to cell ``divmod(i % (width * height), width)``.

    Rewards:
        - +1 for an action that changed the board
        - +10 for winning the round
        - -10 for hitting a mine
        - -0.1 for an ignored action
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
            config: Board configuration (default: 10x10 with 13 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or DEFAULT_CONFIG
        self.engine = GameEngine(self.config)
        self.render_mode = render_mode
        self._cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(ACTION_KINDS) * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new round.

        Args:
            seed: Random seed for reproducible boards.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.engine = GameEngine(self.config, rng=self.np_random)
        else:
            self.engine.restart()
        self._steps = 0

        return self.engine.snapshot().to_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Encoded (kind, row, col) action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        kind, row, col = self.decode_action(action)
        self._steps += 1

        reward = self._apply(kind, row, col)
        observation = self.engine.snapshot().to_observation()
        terminated = not self.engine.is_playing

        return observation, reward, terminated, False, self._get_info()

    def decode_action(self, action: int) -> Tuple[int, int, int]:
        """Convert flat action index to (kind, row, col)."""
        kind, cell = divmod(int(action), self._cells)
        row, col = divmod(cell, self.config.width)
        return kind, row, col

    def encode_action(self, kind: int, row: int, col: int) -> int:
        """Convert (kind, row, col) to flat action index."""
        return kind * self._cells + row * self.config.width + col

    def _apply(self, kind: int, row: int, col: int) -> float:
        """Apply an action to the engine and score it."""
        if kind == OPEN:
            changed = self.engine.open(row, col)
        elif kind == FLAG:
            changed = self.engine.toggle_flag(row, col)
        else:
            changed = self.engine.chord(row, col)

        if not changed:
            return -0.1
        if self.engine.is_won:
            return 10.0
        if self.engine.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        snapshot = self.engine.snapshot()
        return {
            "steps": self._steps,
            "open": snapshot.open_count,
            "mines_remaining": snapshot.mines_remaining,
            "outcome": snapshot.outcome.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.engine.snapshot().render_ansi()
        if self.render_mode == "human":
            print(self.engine.snapshot().render_ansi())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions the engine would not ignore.

        Returns:
            int8 array where 1 = valid action, usable as
            ``action_space.sample(mask=...)``.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if not self.engine.is_playing:
            return mask

        snapshot = self.engine.snapshot()
        closed = ~snapshot.is_open
        openable = (closed & ~snapshot.is_flagged).ravel()
        flaggable = closed.ravel()
        chordable = self._chordable(snapshot).ravel()

        mask[: self._cells] = openable
        mask[self._cells: 2 * self._cells] = flaggable
        mask[2 * self._cells:] = chordable
        return mask

    def _chordable(self, snapshot: BoardSnapshot) -> np.ndarray:
        """Open numbered cells whose flagged neighbors match their count."""
        flags = (snapshot.is_flagged & ~snapshot.is_open).astype(np.int16)
        padded = np.pad(flags, 1)
        height, width = flags.shape
        flag_counts = sum(
            padded[1 + dr: 1 + dr + height, 1 + dc: 1 + dc + width]
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if dr or dc
        )
        counts = snapshot.adjacent_mine_count
        return snapshot.is_open & (counts > 0) & (flag_counts == counts)
