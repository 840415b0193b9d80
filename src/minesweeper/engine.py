"""
Game engine for Minesweeper.

Owns the live board and the round outcome, and implements the player
actions: opening cells (with cascading reveal), flagging, chording and
restarting.
"""
import logging
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, DEFAULT_CONFIG, generate_board
from .cell import Cell
from .snapshot import BoardSnapshot


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameOutcome(Enum):
    """Possible outcomes of a round."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Engine
# ============================================================================

class GameEngine:
    """
    Rules engine for a single round at a time.

    All actions are silent no-ops on invalid input (out of bounds,
    wrong cell state, round already over) and return whether they
    changed anything.
    """

    def __init__(
        self,
        config: BoardConfig = DEFAULT_CONFIG,
        rng: Optional[np.random.Generator] = None,
        board: Optional[Board] = None,
    ) -> None:
        """
        Initialize the engine and generate the first board.

        Args:
            config: Board configuration used for every round.
            rng: Random source for mine placement.
            board: Prepared board for the first round. Its configuration
                replaces ``config``; later rounds are generated.
        """
        self.config = board.config if board is not None else config
        self._rng = rng if rng is not None else np.random.default_rng()
        if board is None:
            board = generate_board(self.config, self._rng)
        self._board = board
        self._outcome = GameOutcome.PLAYING
        logger.debug("New round on %s", self.config)

    # ========================================================================
    # Reveal Logic (Low-level)
    # ========================================================================

    def _reveal(self, row: int, col: int) -> None:
        """
        Flood-fill open from a safe cell.

        Opens the connected region of zero-count cells and the ring of
        numbered cells around it. Mines and flagged cells stop the fill.
        """
        stack: List[Tuple[int, int]] = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._board.get_cell(current_row, current_col)
            if cell is None or cell.is_mined or not cell.open():
                continue
            if cell.is_empty:
                stack.extend(self._board.neighbors(current_row, current_col))

    def _open_safe(self, row: int, col: int, cell: Cell) -> None:
        """Open a non-mine cell, cascading from empty cells."""
        if cell.is_empty:
            self._reveal(row, col)
        else:
            cell.open()

    def _reveal_all_mines(self) -> None:
        """Open every mine on the board, flagged or not."""
        for row, col in self._board.mine_positions():
            self._board.get_cell(row, col).is_open = True

    def _lose(self) -> None:
        self._reveal_all_mines()
        self._outcome = GameOutcome.LOST
        logger.info("Round lost")

    def _check_win_condition(self) -> None:
        """Win when every non-mine cell is open."""
        for _, _, cell in self._board.cells():
            if not cell.is_mined and not cell.is_open:
                return
        self._outcome = GameOutcome.WON
        logger.info("Round won")

    def _playable_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell if the round is on and position is valid."""
        if self._outcome != GameOutcome.PLAYING:
            return None
        return self._board.get_cell(row, col)

    # ========================================================================
    # Player Actions
    # ========================================================================

    def open(self, row: int, col: int) -> bool:
        """
        Open a closed, unflagged cell.

        A mine ends the round as lost and opens every mine. An empty
        cell cascades to its neighbors.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the board changed, False if the action was ignored.
        """
        cell = self._playable_cell(row, col)
        if cell is None or cell.is_open or cell.is_flagged:
            return False

        if cell.is_mined:
            self._lose()
            return True

        self._open_safe(row, col, cell)
        self._check_win_condition()
        return True

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a closed cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        cell = self._playable_cell(row, col)
        if cell is None:
            return False
        return cell.toggle_flag()

    def chord(self, row: int, col: int) -> bool:
        """
        Open all unflagged neighbors of an open numbered cell.

        Only acts when the number of flagged neighbors equals the
        cell's adjacent mine count. A wrongly flagged neighborhood
        hits a mine and the remaining neighbors are left untouched.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if chord was performed, False otherwise.
        """
        if not self._can_chord(row, col):
            return False

        for neighbor_row, neighbor_col in self._board.neighbors(row, col):
            neighbor = self._board.get_cell(neighbor_row, neighbor_col)
            if neighbor.is_open or neighbor.is_flagged:
                continue
            if neighbor.is_mined:
                self._lose()
                return True
            self._open_safe(neighbor_row, neighbor_col, neighbor)

        self._check_win_condition()
        return True

    def _can_chord(self, row: int, col: int) -> bool:
        """Check if chord action is valid."""
        cell = self._playable_cell(row, col)
        if cell is None:
            return False
        if not cell.is_open or cell.adjacent_mine_count == 0:
            return False
        return self._count_adjacent_flags(row, col) == cell.adjacent_mine_count

    def _count_adjacent_flags(self, row: int, col: int) -> int:
        """Count flagged cells adjacent to position."""
        count = 0
        for neighbor_row, neighbor_col in self._board.neighbors(row, col):
            if self._board.get_cell(neighbor_row, neighbor_col).is_flagged:
                count += 1
        return count

    def click(self, row: int, col: int) -> bool:
        """
        Primary click: open a closed cell or chord an open one.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the board changed, False otherwise.
        """
        cell = self._playable_cell(row, col)
        if cell is None:
            return False
        if cell.is_open:
            return self.chord(row, col)
        return self.open(row, col)

    def restart(self) -> None:
        """Start a new round on a freshly generated board."""
        self._board = generate_board(self.config, self._rng)
        self._outcome = GameOutcome.PLAYING
        logger.debug("Restarted round on %s", self.config)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def outcome(self) -> GameOutcome:
        """Get current round outcome."""
        return self._outcome

    @property
    def is_playing(self) -> bool:
        """Check if round is still in progress."""
        return self._outcome == GameOutcome.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if round was won."""
        return self._outcome == GameOutcome.WON

    @property
    def is_lost(self) -> bool:
        """Check if round was lost."""
        return self._outcome == GameOutcome.LOST

    def snapshot(self) -> BoardSnapshot:
        """Get a read-only copy of the board and outcome."""
        return BoardSnapshot.capture(self._board, self._outcome)
