"""
Cell module for Minesweeper game.

Coordinates, the visible state of a cell (hidden/revealed/flagged), and the
read-only view a renderer gets for one cell.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, Optional


# ============================================================================
# Constants
# ============================================================================

MINE = -1

# Observation codes shared with Board.to_observation
HIDDEN_CODE = -1
FLAGGED_CODE = -2
REVEALED_MINE_CODE = 9


class Coordinate(NamedTuple):
    """A (row, column) position on the board, 0-indexed."""

    row: int
    column: int


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Snapshot of a single cell as the player may see it.

    Attributes:
        coordinate: Position of the cell.
        state: Current visual state (hidden, revealed, or flagged).
        value: -1 for a mine, otherwise the adjacent mine count. None while
            the cell is not revealed.
        misflagged: True when the game was lost with a flag on a cell that
            is not a mine.
        detonated: True for the mine whose reveal lost the game.
    """

    coordinate: Coordinate
    state: CellState = CellState.HIDDEN
    value: Optional[int] = None
    misflagged: bool = False
    detonated: bool = False

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_mine(self) -> bool:
        """True only for a revealed mine."""
        return self.value == MINE

    def to_observation(self) -> int:
        """
        Convert cell to a single integer code.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_CODE
        if self.state == CellState.FLAGGED:
            return FLAGGED_CODE
        if self.is_mine:
            return REVEALED_MINE_CODE
        return self.value

    def to_symbol(self) -> str:
        """Single-character rendering used by text output."""
        if self.flagged:
            return "X" if self.misflagged else "F"
        if self.is_hidden:
            return "."
        if self.is_mine:
            return "!" if self.detonated else "*"
        return " " if self.value == 0 else str(self.value)
