"""
Unit tests for Board class and board generation.

Tests configuration validation, neighbor utilities, fixed layouts,
and the mine count and adjacency invariants of generated boards.
"""
import pytest
import numpy as np
from minesweeper import (
    Board,
    BoardConfig,
    DEFAULT_CONFIG,
    InvalidBoardConfiguration,
    generate_board,
)


def mine_array(board: Board) -> np.ndarray:
    """Boolean (height, width) array of mine positions."""
    mines = np.zeros((board.height, board.width), dtype=bool)
    for row, col in board.mine_positions():
        mines[row, col] = True
    return mines


def expected_counts(mines: np.ndarray) -> np.ndarray:
    """Count mined 8-neighbors of every cell, clipped to the grid."""
    padded = np.pad(mines.astype(int), 1)
    height, width = mines.shape
    total = np.zeros((height, width), dtype=int)
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            total += padded[
                1 + delta_row: 1 + delta_row + height,
                1 + delta_col: 1 + delta_col + width,
            ]
    return total


def count_array(board: Board) -> np.ndarray:
    counts = np.zeros((board.height, board.width), dtype=int)
    for row, col, cell in board.cells():
        counts[row, col] = cell.adjacent_mine_count
    return counts


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.width == 10
        assert valid_config.height == 10
        assert valid_config.num_mines == 13

    def test_default_config_is_fixed_game(self) -> None:
        """Default configuration is 10x10 with 13 mines."""
        assert BoardConfig() == DEFAULT_CONFIG
        assert DEFAULT_CONFIG == BoardConfig(10, 10, 13)

    @pytest.mark.parametrize("width, height", [(0, 9), (9, 0), (-1, 3)])
    def test_non_positive_dimensions_raise_error(
        self, width: int, height: int
    ) -> None:
        """Non-positive dimensions should raise InvalidBoardConfiguration."""
        with pytest.raises(InvalidBoardConfiguration, match="dimensions must be positive"):
            BoardConfig(width, height, 1)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise InvalidBoardConfiguration."""
        with pytest.raises(InvalidBoardConfiguration, match="cannot be negative"):
            BoardConfig(9, 9, -1)

    def test_mines_filling_board_raise_error(self) -> None:
        """A mine on every cell is rejected."""
        with pytest.raises(InvalidBoardConfiguration, match="Too many mines"):
            BoardConfig(3, 3, 9)

    def test_error_is_value_error(self) -> None:
        """InvalidBoardConfiguration can be caught as ValueError."""
        with pytest.raises(ValueError):
            BoardConfig(3, 3, 10)

    def test_max_mines_is_valid(self) -> None:
        """One safe cell is the densest valid board."""
        config = BoardConfig(3, 3, 8)
        assert config.num_mines == 8

    def test_zero_mines_is_valid(self) -> None:
        """A board without mines is allowed."""
        assert BoardConfig(1, 1, 0).num_mines == 0


# ============================================================================
# Neighbor Tests
# ============================================================================

class TestNeighbors:
    """Test neighbor enumeration."""

    def test_corner_has_three_neighbors(self, empty_board: Board) -> None:
        """Corner cells have three in-bounds neighbors."""
        assert sorted(empty_board.neighbors(0, 0)) == [(0, 1), (1, 0), (1, 1)]

    def test_edge_has_five_neighbors(self, empty_board: Board) -> None:
        """Edge cells have five in-bounds neighbors."""
        assert len(empty_board.neighbors(0, 2)) == 5

    def test_interior_has_eight_neighbors(self, empty_board: Board) -> None:
        """Interior cells have eight neighbors, excluding themselves."""
        neighbors = empty_board.neighbors(2, 2)
        assert len(neighbors) == 8
        assert (2, 2) not in neighbors

    def test_single_cell_has_no_neighbors(self) -> None:
        """A 1x1 board has no neighbors."""
        board = Board.from_mines(1, 1, [])
        assert board.neighbors(0, 0) == []

    def test_get_cell_out_of_bounds_is_none(self, empty_board: Board) -> None:
        """Out-of-bounds lookups return None."""
        assert empty_board.get_cell(-1, 0) is None
        assert empty_board.get_cell(0, 5) is None
        assert empty_board.get_cell(4, 4) is not None

    @pytest.mark.parametrize("row, col", [(1.5, 1), (1, 2.0), ("1", 1), (None, 0)])
    def test_non_integer_position_is_invalid(
        self, empty_board: Board, row, col
    ) -> None:
        """Only integer coordinates address cells."""
        assert empty_board.is_valid_position(row, col) is False
        assert empty_board.get_cell(row, col) is None

    def test_numpy_integer_position_is_valid(self, empty_board: Board) -> None:
        """numpy integers index the grid like ints."""
        assert empty_board.get_cell(np.int64(1), np.int8(2)) is not None


# ============================================================================
# Fixed Layout Tests
# ============================================================================

class TestFromMines:
    """Test boards built from a fixed mine layout."""

    def test_center_mine_adjacency_grid(self, center_mine_board: Board) -> None:
        """Every cell around a lone center mine counts exactly one."""
        expected = np.array([
            [1, 1, 1],
            [1, 0, 1],
            [1, 1, 1],
        ])
        np.testing.assert_array_equal(count_array(center_mine_board), expected)

    def test_two_mine_adjacency_grid(self, two_mine_board: Board) -> None:
        """Counts for mines in both top corners."""
        expected = np.array([
            [0, 2, 0],
            [1, 2, 1],
            [0, 0, 0],
        ])
        np.testing.assert_array_equal(count_array(two_mine_board), expected)

    def test_config_derived_from_layout(self, wall_board: Board) -> None:
        """Mine count of the config matches the layout."""
        assert wall_board.config == BoardConfig(5, 5, 5)
        assert wall_board.mine_positions() == {(row, 2) for row in range(5)}

    def test_new_board_is_closed(self, wall_board: Board) -> None:
        """All cells start closed and unflagged."""
        for _, _, cell in wall_board.cells():
            assert cell.is_hidden is True

    def test_mine_outside_board_raises_error(self) -> None:
        """A mine position outside the grid is rejected."""
        with pytest.raises(InvalidBoardConfiguration, match="outside the board"):
            Board.from_mines(3, 3, [(3, 0)])


# ============================================================================
# Generation Tests
# ============================================================================

class TestGenerateBoard:
    """Test random board generation."""

    @pytest.mark.parametrize("seed", range(10))
    def test_exact_mine_count(self, seed: int) -> None:
        """Generated boards carry exactly the configured mines."""
        board = generate_board(DEFAULT_CONFIG, np.random.default_rng(seed))
        assert len(board.mine_positions()) == 13

    @pytest.mark.parametrize("seed", range(10))
    def test_adjacency_counts_match_mines(self, seed: int) -> None:
        """Every count equals the number of mined neighbors."""
        board = generate_board(BoardConfig(8, 6, 12), np.random.default_rng(seed))
        np.testing.assert_array_equal(
            count_array(board), expected_counts(mine_array(board))
        )

    def test_dense_board_placement(self, dense_config: BoardConfig) -> None:
        """Dense boards place every mine and leave one safe cell."""
        board = generate_board(dense_config, np.random.default_rng(7))
        assert len(board.mine_positions()) == 15
        np.testing.assert_array_equal(
            count_array(board), expected_counts(mine_array(board))
        )

    def test_generated_cells_are_closed(self, rng: np.random.Generator) -> None:
        """Generation opens and flags nothing."""
        board = generate_board(DEFAULT_CONFIG, rng)
        for _, _, cell in board.cells():
            assert cell.is_open is False
            assert cell.is_flagged is False

    def test_same_seed_same_layout(self) -> None:
        """Generation is a function of the random source."""
        first = generate_board(DEFAULT_CONFIG, np.random.default_rng(99))
        second = generate_board(DEFAULT_CONFIG, np.random.default_rng(99))
        assert first.mine_positions() == second.mine_positions()

    def test_zero_mines(self) -> None:
        """Generating without mines gives an all-zero board."""
        board = generate_board(BoardConfig(4, 3, 0))
        assert board.mine_positions() == set()
        assert not count_array(board).any()
