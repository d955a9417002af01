"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from dataclasses import replace
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    Board,
    BoardConfig,
    GameSession,
    GameSnapshot,
    GameStatus,
    new_game,
)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with a single mine in the bottom-right corner.

    Layout (row 0 at top):
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 1 1
        0 0 0 1 *
    """
    return Board.from_mines(5, 5, [(4, 4)])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board whose middle column is a wall of mines.

    Layout:
        0 2 * 2 0
        0 3 * 3 0
        0 3 * 3 0
        0 3 * 3 0
        0 2 * 2 0
    """
    return Board.from_mines(5, 5, [(row, 2) for row in range(5)])


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def easy_game() -> GameSnapshot:
    """Fresh 9x9 game with 10 mines."""
    return new_game(9, 9, 10, seed=7)


@pytest.fixture
def corner_mine_game(corner_mine_board: Board) -> GameSnapshot:
    """In-progress game on the corner-mine board with nothing revealed."""
    return _started(corner_mine_board)


@pytest.fixture
def walled_game(walled_board: Board) -> GameSnapshot:
    """In-progress game on the walled board with nothing revealed."""
    return _started(walled_board)


@pytest.fixture
def session() -> GameSession:
    """Session on a 9x9 board with 10 mines."""
    return GameSession(BoardConfig(9, 9, 10), seed=11)


def _started(board: Board) -> GameSnapshot:
    """Place a known board into an in-progress game."""
    game = GameSnapshot.create(
        BoardConfig(board.rows, board.columns, board.mine_count)
    )
    return replace(game, board=board, status=GameStatus.IN_PROGRESS)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
