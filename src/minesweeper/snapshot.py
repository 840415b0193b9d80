"""
Read-only board snapshots for presentation layers.

A snapshot copies the engine's state into immutable numpy arrays so a
renderer can read it every frame without being able to change the game.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, NamedTuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .board import Board
    from .engine import GameOutcome


# ============================================================================
# Constants
# ============================================================================

class CellIcon(Enum):
    """Icon a renderer should draw for a cell."""

    HIDDEN = auto()
    FLAG = auto()
    MINE = auto()
    REVEALED = auto()
    ONE = auto()
    TWO = auto()
    THREE = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()
    SEVEN = auto()
    EIGHT = auto()


DIGIT_ICONS = (
    CellIcon.ONE,
    CellIcon.TWO,
    CellIcon.THREE,
    CellIcon.FOUR,
    CellIcon.FIVE,
    CellIcon.SIX,
    CellIcon.SEVEN,
    CellIcon.EIGHT,
)

ANSI_SYMBOLS = {
    CellIcon.HIDDEN: ".",
    CellIcon.FLAG: "F",
    CellIcon.MINE: "*",
    CellIcon.REVEALED: " ",
}


class CellView(NamedTuple):
    """Render-relevant state of one cell."""

    is_open: bool
    is_flagged: bool
    is_mined: bool
    adjacent_mine_count: int


def icon_for(cell: CellView) -> CellIcon:
    """Select the icon for a cell's state."""
    if not cell.is_open:
        return CellIcon.FLAG if cell.is_flagged else CellIcon.HIDDEN
    if cell.is_mined:
        return CellIcon.MINE
    if cell.adjacent_mine_count > 0:
        return DIGIT_ICONS[cell.adjacent_mine_count - 1]
    return CellIcon.REVEALED


# ============================================================================
# Snapshot
# ============================================================================

def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class BoardSnapshot:
    """
    Immutable view of a board and the round outcome.

    All arrays have shape (height, width) and are not writeable.
    Snapshots compare equal when outcome and every array match;
    they are not hashable.
    """

    outcome: "GameOutcome"
    num_mines: int
    is_open: np.ndarray
    is_flagged: np.ndarray
    is_mined: np.ndarray
    adjacent_mine_count: np.ndarray

    __hash__ = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardSnapshot):
            return NotImplemented
        return (
            self.outcome == other.outcome
            and self.num_mines == other.num_mines
            and np.array_equal(self.is_open, other.is_open)
            and np.array_equal(self.is_flagged, other.is_flagged)
            and np.array_equal(self.is_mined, other.is_mined)
            and np.array_equal(self.adjacent_mine_count, other.adjacent_mine_count)
        )

    @classmethod
    def capture(cls, board: "Board", outcome: "GameOutcome") -> "BoardSnapshot":
        """Copy the current state of a board."""
        shape = (board.height, board.width)
        is_open = np.zeros(shape, dtype=bool)
        is_flagged = np.zeros(shape, dtype=bool)
        is_mined = np.zeros(shape, dtype=bool)
        counts = np.zeros(shape, dtype=np.uint8)
        for row, col, cell in board.cells():
            is_open[row, col] = cell.is_open
            is_flagged[row, col] = cell.is_flagged
            is_mined[row, col] = cell.is_mined
            counts[row, col] = cell.adjacent_mine_count
        return cls(
            outcome=outcome,
            num_mines=board.num_mines,
            is_open=_frozen(is_open),
            is_flagged=_frozen(is_flagged),
            is_mined=_frozen(is_mined),
            adjacent_mine_count=_frozen(counts),
        )

    # ========================================================================
    # Per-cell Queries
    # ========================================================================

    @property
    def height(self) -> int:
        return self.is_open.shape[0]

    @property
    def width(self) -> int:
        return self.is_open.shape[1]

    def cell(self, row: int, col: int) -> CellView:
        """Get render state of a cell."""
        return CellView(
            bool(self.is_open[row, col]),
            bool(self.is_flagged[row, col]),
            bool(self.is_mined[row, col]),
            int(self.adjacent_mine_count[row, col]),
        )

    def icon(self, row: int, col: int) -> CellIcon:
        """Get the icon for a cell."""
        return icon_for(self.cell(row, col))

    def icons(self) -> List[List[CellIcon]]:
        """Get icons for the whole board, row by row."""
        return [
            [self.icon(row, col) for col in range(self.width)]
            for row in range(self.height)
        ]

    # ========================================================================
    # Aggregates
    # ========================================================================

    @property
    def open_count(self) -> int:
        """Number of open cells."""
        return int(np.count_nonzero(self.is_open))

    @property
    def flag_count(self) -> int:
        """Number of flagged cells that are still closed."""
        return int(np.count_nonzero(self.is_flagged & ~self.is_open))

    @property
    def mines_remaining(self) -> int:
        """Mine count minus placed flags (may go negative)."""
        return self.num_mines - self.flag_count

    def to_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for ML agents.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = open with adjacent count
                9 = open mine
        """
        obs = np.full((self.height, self.width), -1, dtype=np.int8)
        obs[self.is_flagged & ~self.is_open] = -2
        obs[self.is_open] = self.adjacent_mine_count[self.is_open].astype(np.int8)
        obs[self.is_open & self.is_mined] = 9
        return obs

    def render_ansi(self) -> str:
        """Render board as ASCII string."""
        lines = []
        for icon_row in self.icons():
            row_str = ""
            for icon in icon_row:
                if icon in ANSI_SYMBOLS:
                    row_str += ANSI_SYMBOLS[icon]
                else:
                    row_str += str(DIGIT_ICONS.index(icon) + 1)
                row_str += " "
            lines.append(row_str)
        return "\n".join(lines)
