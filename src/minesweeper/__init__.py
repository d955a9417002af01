"""
Minesweeper game module.

Provides the core game logic: minefield generation, flood-fill reveal, flag
bookkeeping and the game state machine.
"""
from .cell import Coordinate, CellState, CellView, MINE
from .config import (
    BoardConfig,
    Level,
    EASY,
    MEDIUM,
    HARD,
    PRESETS,
    config_for_level,
    level_for_config,
)
from .errors import InvalidConfiguration
from .board import Board
from .expander import expand
from .flags import FlagLedger
from .state import (
    GameSnapshot,
    GameStatus,
    RevealOutcome,
    RevealedCell,
    FlagOutcome,
    new_game,
    new_game_for_level,
)
from .session import GameSession, MatchClock

__all__ = [
    "Coordinate",
    "CellState",
    "CellView",
    "MINE",
    "BoardConfig",
    "Level",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "config_for_level",
    "level_for_config",
    "InvalidConfiguration",
    "Board",
    "expand",
    "FlagLedger",
    "GameSnapshot",
    "GameStatus",
    "RevealOutcome",
    "RevealedCell",
    "FlagOutcome",
    "new_game",
    "new_game_for_level",
    "GameSession",
    "MatchClock",
]
