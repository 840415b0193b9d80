"""
Cell module for Minesweeper game.

Represents individual grid positions with their content (mine/number)
and their open/flag state.
"""
from dataclasses import dataclass


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mined: Whether this cell contains a mine.
        is_open: Whether this cell has been opened. Never reverts.
        is_flagged: Whether the player marked this cell. Ignored once open.
        adjacent_mine_count: Count of mines in neighboring cells (0-8).
    """

    is_mined: bool = False
    is_open: bool = False
    is_flagged: bool = False
    adjacent_mine_count: int = 0

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if cell was opened, False if already open or flagged.
        """
        if self.is_open or self.is_flagged:
            return False
        self.is_open = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is open.
        """
        if self.is_open:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is closed and unflagged."""
        return not self.is_open and not self.is_flagged

    @property
    def is_empty(self) -> bool:
        """Check if cell is safe with no mined neighbors."""
        return not self.is_mined and self.adjacent_mine_count == 0
