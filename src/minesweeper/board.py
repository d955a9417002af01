"""
Board module for Minesweeper game.

Implements the minefield grid: mine placement that keeps the first clicked
cell safe, adjacency counts, and neighbour lookups.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import MINE, Coordinate
from .config import BoardConfig
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

SAFE = 0

_NEIGHBOR_OFFSETS = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Grid Construction (Low-level)
# ============================================================================

def _distribute_mines(
    rows: int,
    columns: int,
    mine_count: int,
    safe_cell: Coordinate,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Place mines by flipping randomly drawn cells from the majority value.

    Whichever of mine/non-mine is rarer gets placed, so the number of draws
    tracks min(mines, non-mines) rather than the board size.

    Args:
        rows: Number of rows.
        columns: Number of columns.
        mine_count: Mines to place.
        safe_cell: Cell that must stay free of mines.
        rng: Random generator used for the draws.

    Returns:
        Grid holding MINE for mines and SAFE elsewhere.
    """
    if mine_count < rows * columns / 2:
        majority, minority = SAFE, MINE
        to_distribute = mine_count
    else:
        majority, minority = MINE, SAFE
        to_distribute = rows * columns - mine_count

    grid = np.full((rows, columns), majority, dtype=np.int8)
    distributed = 0
    if majority == MINE:
        grid[safe_cell.row, safe_cell.column] = minority
        distributed = 1

    while distributed < to_distribute:
        row = int(rng.integers(rows))
        col = int(rng.integers(columns))
        if grid[row, col] == majority and (row, col) != safe_cell:
            grid[row, col] = minority
            distributed += 1
    return grid


def _count_adjacent_mines(mines: np.ndarray) -> np.ndarray:
    """Sum each cell's 3x3 neighbourhood of a 0/1 mine mask, minus itself."""
    height, width = mines.shape
    padded = np.pad(mines, 1, mode="constant", constant_values=0)
    total = np.zeros_like(mines)
    for delta_row in range(3):
        for delta_col in range(3):
            total += padded[
                delta_row:delta_row + height, delta_col:delta_col + width
            ]
    return total - mines


def _with_counts(grid: np.ndarray) -> np.ndarray:
    """Replace every non-mine cell by its adjacent mine count."""
    mines = (grid == MINE).astype(np.int8)
    values = np.where(mines == 1, MINE, _count_adjacent_mines(mines))
    values = values.astype(np.int8)
    values.setflags(write=False)
    return values


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True, eq=False)
class Board:
    """
    Minesweeper minefield.

    Holds a rows x columns grid of cell values: -1 for a mine, otherwise the
    number of mines among the cell's up-to-8 neighbours. The grid is
    read-only; a new Board is built whenever the field changes.
    """

    rows: int
    columns: int
    mine_count: int
    _values: np.ndarray = field(repr=False)

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def placeholder(cls, rows: int, columns: int, mine_count: int) -> "Board":
        """
        Create the all-zero grid shown before the first reveal.

        The mine count is recorded but no mines are placed yet.
        """
        BoardConfig(rows, columns, mine_count)
        values = np.zeros((rows, columns), dtype=np.int8)
        values.setflags(write=False)
        return cls(rows, columns, mine_count, values)

    @classmethod
    def generate(
        cls,
        rows: int,
        columns: int,
        mine_count: int,
        safe_cell: Tuple[int, int],
        seed: Optional[int] = None,
    ) -> "Board":
        """
        Generate a random minefield that keeps one cell safe.

        Args:
            rows: Number of rows.
            columns: Number of columns.
            mine_count: Number of mines, 0 <= mine_count < rows * columns.
            safe_cell: (row, column) that must not be a mine.
            seed: Seed for reproducible layouts.

        Returns:
            A board with exactly mine_count mines and exact adjacency counts.

        Raises:
            InvalidConfiguration: If the mine count or dimensions are not
                playable, or safe_cell is outside the board.
        """
        BoardConfig(rows, columns, mine_count)
        safe_cell = Coordinate(*safe_cell)
        if not (0 <= safe_cell.row < rows and 0 <= safe_cell.column < columns):
            raise InvalidConfiguration(
                f"Safe cell {tuple(safe_cell)} is outside a "
                f"{rows}x{columns} board"
            )

        rng = np.random.default_rng(seed)
        grid = _distribute_mines(rows, columns, mine_count, safe_cell, rng)
        logger.debug(
            "Generated %dx%d board with %d mines, safe cell %s",
            rows, columns, mine_count, tuple(safe_cell),
        )
        return cls(rows, columns, mine_count, _with_counts(grid))

    @classmethod
    def from_mines(
        cls,
        rows: int,
        columns: int,
        mines: Iterable[Tuple[int, int]],
    ) -> "Board":
        """
        Build a board from a known mine layout.

        Args:
            rows: Number of rows.
            columns: Number of columns.
            mines: (row, column) positions of the mines.

        Raises:
            InvalidConfiguration: If a mine lies outside the board or the
                layout leaves no safe cell.
        """
        positions = {Coordinate(*mine) for mine in mines}
        BoardConfig(rows, columns, len(positions))
        grid = np.zeros((rows, columns), dtype=np.int8)
        for row, col in positions:
            if not (0 <= row < rows and 0 <= col < columns):
                raise InvalidConfiguration(
                    f"Mine {(row, col)} is outside a {rows}x{columns} board"
                )
            grid[row, col] = MINE
        return cls(rows, columns, len(positions), _with_counts(grid))

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def is_valid_position(self, coord: Tuple[int, int]) -> bool:
        """Check if position is within board bounds."""
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.columns

    def neighbors(self, coord: Tuple[int, int]) -> List[Coordinate]:
        """
        Get valid neighbouring cell positions.

        Args:
            coord: (row, column) of the center cell.

        Returns:
            In-bounds neighbours, in row-major order.
        """
        row, col = coord
        neighbors = []
        for delta_row, delta_col in _NEIGHBOR_OFFSETS:
            candidate = Coordinate(row + delta_row, col + delta_col)
            if self.is_valid_position(candidate):
                neighbors.append(candidate)
        return neighbors

    # ========================================================================
    # Queries
    # ========================================================================

    def value(self, coord: Tuple[int, int]) -> int:
        """Cell value at coord: -1 for a mine, else its adjacency count."""
        row, col = coord
        return int(self._values[row, col])

    def is_mine(self, coord: Tuple[int, int]) -> bool:
        return self.value(coord) == MINE

    def mine_positions(self) -> List[Coordinate]:
        """All mine coordinates, in row-major order."""
        rows, cols = np.nonzero(self._values == MINE)
        return [Coordinate(int(r), int(c)) for r, c in zip(rows, cols)]

    def coordinates(self) -> Iterable[Coordinate]:
        for row in range(self.rows):
            for col in range(self.columns):
                yield Coordinate(row, col)

    def to_array(self) -> np.ndarray:
        """Writable copy of the value grid."""
        return self._values.copy()

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.columns

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.mine_count == other.mine_count
            and self.shape == other.shape
            and bool(np.array_equal(self._values, other._values))
        )

    __hash__ = None
