"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameEngine


# ============================================================================
# Random Source Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Create a seeded random generator."""
    return np.random.default_rng(1234)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the middle."""
    return Board.from_mines(3, 3, [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the top-left corner."""
    return Board.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def two_mine_board() -> Board:
    """Create a 3x3 board with mines in both top corners."""
    return Board.from_mines(3, 3, [(0, 0), (0, 2)])


@pytest.fixture
def wall_board() -> Board:
    """Create a 5x5 board with a full column of mines in the middle."""
    return Board.from_mines(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board.from_mines(5, 5, [])


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def default_engine(rng: np.random.Generator) -> GameEngine:
    """Create an engine with the default 10x10 board and 13 mines."""
    return GameEngine(rng=rng)


@pytest.fixture
def two_mine_engine(two_mine_board: Board) -> GameEngine:
    """Create an engine playing the two-mine board."""
    return GameEngine(board=two_mine_board)


@pytest.fixture
def wall_engine(wall_board: Board) -> GameEngine:
    """Create an engine playing the wall board."""
    return GameEngine(board=wall_board)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a closed, unflagged cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mined=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(10, 10, 13)


@pytest.fixture
def dense_config() -> BoardConfig:
    """Configuration with more mines than safe cells."""
    return BoardConfig(4, 4, 15)
