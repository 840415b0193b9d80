"""
Board module for Minesweeper game.

Implements the board configuration, the cell grid with its neighbor
utilities, and random board generation (mine placement plus adjacency
counts).
"""
import logging
from numbers import Integral
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell


logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

class InvalidBoardConfiguration(ValueError):
    """Raised when board dimensions or mine count cannot form a board."""


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 10
    height: int = 10
    num_mines: int = 13

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidBoardConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidBoardConfiguration("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidBoardConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


# Fixed parameters of the game
DEFAULT_CONFIG = BoardConfig(10, 10, 13)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Rectangular grid of cells addressed by (row, col).

    The board only stores cells and answers geometric questions; game
    rules live in the engine.
    """

    config: BoardConfig = field(default_factory=lambda: DEFAULT_CONFIG)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Create an empty grid when none was supplied."""
        if not self._grid:
            self._grid = [
                [Cell() for _ in range(self.config.width)]
                for _ in range(self.config.height)
            ]

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Tuple[int, int]]
    ) -> "Board":
        """
        Build a board with a fixed mine layout.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (row, col) positions of the mines.

        Returns:
            Board with mines placed and adjacency counts computed.

        Raises:
            InvalidBoardConfiguration: If the layout does not fit the board.
        """
        positions = set(mines)
        board = cls(BoardConfig(width, height, len(positions)))
        for row, col in positions:
            if not board.is_valid_position(row, col):
                raise InvalidBoardConfiguration(
                    f"Mine position ({row}, {col}) is outside the board"
                )
            board._grid[row][col].is_mined = True
        board._calculate_adjacent_mines()
        return board

    # ========================================================================
    # Adjacency Counts (Low-level)
    # ========================================================================

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row, col, cell in self.cells():
            cell.adjacent_mine_count = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mined:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors, in
            row-major order.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is an integer pair within board bounds."""
        if not isinstance(row, Integral) or not isinstance(col, Integral):
            return False
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (row, col, cell) in row-major order."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                yield row, col, self._grid[row][col]

    def mine_positions(self) -> Set[Tuple[int, int]]:
        """Positions of every mined cell."""
        return {(row, col) for row, col, cell in self.cells() if cell.is_mined}


# ============================================================================
# Board Generation
# ============================================================================

def generate_board(
    config: BoardConfig = DEFAULT_CONFIG,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Generate a fully populated board.

    Mines are placed uniformly at random, then every cell's adjacent
    mine count is computed.

    Args:
        config: Board dimensions and mine count.
        rng: Random source (default: a fresh numpy generator).

    Returns:
        New board with exactly ``config.num_mines`` mines.
    """
    rng = rng if rng is not None else np.random.default_rng()
    board = Board(config)
    for row, col in _place_mines(config, rng):
        board._grid[row][col].is_mined = True
    board._calculate_adjacent_mines()
    return board


def _place_mines(
    config: BoardConfig, rng: np.random.Generator
) -> Set[Tuple[int, int]]:
    """Choose mine positions, switching to a shuffle on dense boards."""
    if config.num_mines * 2 > config.total_cells:
        logger.debug(
            "Placing %d mines on %dx%d board by shuffle",
            config.num_mines, config.width, config.height,
        )
        flat = rng.choice(config.total_cells, size=config.num_mines, replace=False)
        return {divmod(int(index), config.width) for index in flat}

    logger.debug(
        "Placing %d mines on %dx%d board by rejection sampling",
        config.num_mines, config.width, config.height,
    )
    mines: Set[Tuple[int, int]] = set()
    while len(mines) < config.num_mines:
        row = int(rng.integers(config.height))
        col = int(rng.integers(config.width))
        mines.add((row, col))
    return mines
