"""
Minesweeper rules engine.

Provides board generation, cell state, the game engine with cascading
and chorded reveal, read-only snapshots for renderers, and a Gymnasium
environment wrapper.
"""
from .cell import Cell
from .board import (
    Board,
    BoardConfig,
    DEFAULT_CONFIG,
    InvalidBoardConfiguration,
    generate_board,
)
from .engine import GameEngine, GameOutcome
from .snapshot import BoardSnapshot, CellIcon, CellView, icon_for
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Board",
    "BoardConfig",
    "DEFAULT_CONFIG",
    "InvalidBoardConfiguration",
    "generate_board",
    "GameEngine",
    "GameOutcome",
    "BoardSnapshot",
    "CellIcon",
    "CellView",
    "icon_for",
    "MinesweeperEnv",
]
