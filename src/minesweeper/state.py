"""
Game state machine for Minesweeper.

Every game is an immutable GameSnapshot. Commands (reveal, toggle_flag,
reset, reconfigure) take the current snapshot and return a new one; illegal
commands return the snapshot unchanged instead of raising.
"""
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Iterator, List, Optional, Tuple, Union

import numpy as np

from .board import Board
from .cell import HIDDEN_CODE, CellState, CellView, Coordinate
from .config import BoardConfig, Level, config_for_level
from .expander import expand
from .flags import FlagLedger

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Lifecycle of a single match."""

    RESET = "reset"
    IN_PROGRESS = "in progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        """Won and lost games accept no further moves until reset."""
        return self in (GameStatus.WON, GameStatus.LOST)


# ============================================================================
# Command Outcomes
# ============================================================================

@dataclass(frozen=True)
class RevealedCell:
    """A cell uncovered by a reveal, with its value for rendering."""

    coordinate: Coordinate
    value: int


@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a reveal command.

    Attributes:
        snapshot: Game state after the command.
        revealed: Cells uncovered by this command, clicked cell first.
        terminal: WON or LOST if this command ended the game, else None.
    """

    snapshot: "GameSnapshot"
    revealed: Tuple[RevealedCell, ...] = ()
    terminal: Optional[GameStatus] = None

    @property
    def changed(self) -> bool:
        return bool(self.revealed)


@dataclass(frozen=True)
class FlagOutcome:
    """Result of a flag toggle: the new snapshot and the flag counter."""

    snapshot: "GameSnapshot"
    remaining: int
    toggled: bool = False


def _next_seed(seed: Optional[int]) -> Optional[int]:
    """Seed for the following match, derived from the current one."""
    if seed is None:
        return None
    return int(np.random.default_rng(seed).integers(2 ** 32))


# ============================================================================
# Game Snapshot
# ============================================================================

@dataclass(frozen=True)
class GameSnapshot:
    """
    Complete, immutable state of one Minesweeper game.

    The board is an all-zero placeholder until the first reveal, which
    generates the real minefield around the clicked cell.

    Attributes:
        config: Board dimensions and mine count.
        board: Minefield (placeholder while status is RESET).
        flags: Flagged cells and the flag counter.
        status: Current lifecycle state.
        revealed: Coordinates currently revealed, mines included after a
            loss.
        revealed_count: Revealed non-mine cells.
        first_clicked: First revealed cell of the match.
        misflagged: Flagged non-mine cells, filled in on loss.
        detonated: Mine whose reveal lost the game.
        seed: Seed for board generation; None draws a fresh layout.
            Each new match of a seeded game derives its own seed from the
            previous one.
    """

    config: BoardConfig
    board: Board = field(repr=False, hash=False)
    flags: FlagLedger
    status: GameStatus = GameStatus.RESET
    revealed: FrozenSet[Coordinate] = field(default_factory=frozenset)
    revealed_count: int = 0
    first_clicked: Optional[Coordinate] = None
    misflagged: FrozenSet[Coordinate] = field(default_factory=frozenset)
    detonated: Optional[Coordinate] = None
    seed: Optional[int] = None

    @classmethod
    def create(
        cls, config: BoardConfig, seed: Optional[int] = None
    ) -> "GameSnapshot":
        """Fresh RESET snapshot for a configuration."""
        return cls(
            config=config,
            board=Board.placeholder(*config.as_tuple()),
            flags=FlagLedger(config.mine_count),
            seed=seed,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def squares_to_reveal(self) -> int:
        return self.config.squares_to_reveal

    @property
    def remaining(self) -> int:
        """Flag counter shown to the player."""
        return self.flags.remaining

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def contains(self, coord: Tuple[int, int]) -> bool:
        """Check if position is within board bounds."""
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.columns

    def is_revealed(self, coord: Tuple[int, int]) -> bool:
        return Coordinate(*coord) in self.revealed

    def is_flagged(self, coord: Tuple[int, int]) -> bool:
        return self.flags.is_flagged(coord)

    def cell_state(self, coord: Tuple[int, int]) -> Optional[CellView]:
        """
        View of one cell as the player may see it.

        The value is withheld until the cell is revealed.

        Args:
            coord: (row, column) of the cell.

        Returns:
            The cell view, or None if coord is outside the board.
        """
        if not self.contains(coord):
            return None
        coord = Coordinate(*coord)
        if coord in self.flags.flagged:
            return CellView(
                coord,
                CellState.FLAGGED,
                misflagged=coord in self.misflagged,
            )
        if coord in self.revealed:
            return CellView(
                coord,
                CellState.REVEALED,
                value=self.board.value(coord),
                detonated=coord == self.detonated,
            )
        return CellView(coord)

    def cells(self) -> Iterator[CellView]:
        """Views of every cell, in row-major order."""
        for row in range(self.rows):
            for col in range(self.columns):
                yield self.cell_state((row, col))

    def hidden_cells(self) -> List[Coordinate]:
        """
        Get cells that can still be revealed.

        Returns:
            Coordinates that are neither revealed nor flagged. Empty once
            the game is over.
        """
        if self.is_over:
            return []
        return [
            view.coordinate for view in self.cells() if view.is_hidden
        ]

    def to_observation(self) -> np.ndarray:
        """
        Get the visible board as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.full((self.rows, self.columns), HIDDEN_CODE, dtype=np.int8)
        for view in self.cells():
            obs[view.coordinate.row, view.coordinate.column] = (
                view.to_observation()
            )
        return obs

    def render(self) -> str:
        """Render the visible board as plain text, one line per row."""
        lines = []
        for row in range(self.rows):
            symbols = [
                self.cell_state((row, col)).to_symbol()
                for col in range(self.columns)
            ]
            lines.append(" ".join(symbols))
        return "\n".join(lines)

    # ========================================================================
    # Commands
    # ========================================================================

    def reveal(self, coord: Tuple[int, int]) -> RevealOutcome:
        """
        Reveal a cell.

        The first reveal of a match generates the minefield with this cell
        kept safe. A zero-valued cell also reveals its flood-fill region.
        A mine loses the game.

        Args:
            coord: (row, column) to reveal.

        Returns:
            The outcome; its snapshot is self when the command is ignored.
        """
        if not self._can_reveal(coord):
            logger.debug("Ignoring reveal of %s (status %s)",
                         tuple(coord), self.status.value)
            return RevealOutcome(self)

        coord = Coordinate(*coord)
        snapshot = self
        if self.status == GameStatus.RESET:
            snapshot = self._start(coord)

        if snapshot.board.is_mine(coord):
            return snapshot._lose(coord)
        return snapshot._open(coord)

    def toggle_flag(self, coord: Tuple[int, int]) -> FlagOutcome:
        """
        Place or remove a flag.

        Allowed on hidden cells before the first reveal and during play.

        Args:
            coord: (row, column) to flag.

        Returns:
            The outcome with the updated flag counter.
        """
        if not self._can_flag(coord):
            logger.debug("Ignoring flag on %s (status %s)",
                         tuple(coord), self.status.value)
            return FlagOutcome(self, self.remaining)

        flags = self.flags.toggle(coord)
        return FlagOutcome(replace(self, flags=flags), flags.remaining, True)

    def reset(self) -> "GameSnapshot":
        """Start a new match with the same configuration."""
        logger.debug("Resetting %dx%d game with %d mines",
                     *self.config.as_tuple())
        return GameSnapshot.create(self.config, seed=_next_seed(self.seed))

    def reconfigure(
        self, rows: int, columns: int, mine_count: int
    ) -> "GameSnapshot":
        """
        Start a new match with new dimensions.

        Raises:
            InvalidConfiguration: If the triple is not playable.
        """
        config = BoardConfig(rows, columns, mine_count)
        logger.debug("Reconfiguring game to %dx%d with %d mines",
                     rows, columns, mine_count)
        return GameSnapshot.create(config, seed=_next_seed(self.seed))

    # ========================================================================
    # Transitions (Low-level)
    # ========================================================================

    def _can_reveal(self, coord: Tuple[int, int]) -> bool:
        if self.status.is_terminal or not self.contains(coord):
            return False
        return not (self.is_revealed(coord) or self.is_flagged(coord))

    def _can_flag(self, coord: Tuple[int, int]) -> bool:
        if self.status.is_terminal or not self.contains(coord):
            return False
        return not self.is_revealed(coord)

    def _start(self, coord: Coordinate) -> "GameSnapshot":
        """RESET -> IN_PROGRESS: lay the mines around the first click."""
        board = Board.generate(
            self.rows, self.columns, self.mine_count, coord, seed=self.seed
        )
        logger.debug("Game started at %s", tuple(coord))
        return replace(
            self,
            board=board,
            status=GameStatus.IN_PROGRESS,
            first_clicked=coord,
        )

    def _open(self, coord: Coordinate) -> RevealOutcome:
        """Reveal a safe cell, cascading through zero-valued cells."""
        opened = [coord]
        if self.board.value(coord) == 0:
            opened.extend(sorted(
                cell for cell in expand(self.board, coord)
                if cell not in self.revealed and not self.is_flagged(cell)
            ))

        snapshot = replace(
            self,
            revealed=self.revealed | frozenset(opened),
            revealed_count=self.revealed_count + len(opened),
        )
        revealed = tuple(
            RevealedCell(cell, self.board.value(cell)) for cell in opened
        )

        if snapshot.revealed_count == snapshot.squares_to_reveal:
            return RevealOutcome(snapshot._win(), revealed, GameStatus.WON)
        return RevealOutcome(snapshot, revealed)

    def _win(self) -> "GameSnapshot":
        """IN_PROGRESS -> WON: every mine gets a flag."""
        logger.info("Game won after revealing %d cells", self.revealed_count)
        return replace(
            self,
            status=GameStatus.WON,
            flags=self.flags.flag_all(self.board.mine_positions()),
        )

    def _lose(self, coord: Coordinate) -> RevealOutcome:
        """IN_PROGRESS -> LOST: uncover the mines, expose wrong flags."""
        mines = [coord] + [
            mine for mine in self.board.mine_positions()
            if mine != coord and not self.is_flagged(mine)
        ]
        misflagged = frozenset(
            cell for cell in self.flags.flagged
            if not self.board.is_mine(cell)
        )
        snapshot = replace(
            self,
            status=GameStatus.LOST,
            revealed=self.revealed | frozenset(mines),
            misflagged=misflagged,
            detonated=coord,
        )
        logger.info("Game lost on mine at %s", tuple(coord))
        revealed = tuple(RevealedCell(mine, self.board.value(mine))
                         for mine in mines)
        return RevealOutcome(snapshot, revealed, GameStatus.LOST)


# ============================================================================
# Entry Points
# ============================================================================

def new_game(
    rows: int, columns: int, mine_count: int, seed: Optional[int] = None
) -> GameSnapshot:
    """
    Create a fresh game.

    Args:
        rows: Number of rows.
        columns: Number of columns.
        mine_count: Mines to place on the first reveal.
        seed: Seed for reproducible boards.

    Raises:
        InvalidConfiguration: If the triple is not playable.
    """
    return GameSnapshot.create(BoardConfig(rows, columns, mine_count), seed)


def new_game_for_level(
    level: Union[str, Level],
    custom: Optional[Union[BoardConfig, Tuple[int, int, int]]] = None,
    seed: Optional[int] = None,
) -> GameSnapshot:
    """Create a fresh game for a preset or custom level."""
    return GameSnapshot.create(config_for_level(level, custom), seed)
