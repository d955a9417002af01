"""
Board configuration and difficulty presets.

A configuration is plain code: a validated, frozen dataclass plus the three
standard levels and a custom level supplied by the caller.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .errors import InvalidConfiguration


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 9
    columns: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.columns < 1:
            raise InvalidConfiguration(InvalidConfiguration.POSITIVE_DIMENSIONS)
        if self.mine_count < 0:
            raise InvalidConfiguration(InvalidConfiguration.NEGATIVE_MINES)
        if self.mine_count >= self.cell_count:
            raise InvalidConfiguration(InvalidConfiguration.TOO_MANY_MINES)

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.rows * self.columns

    @property
    def squares_to_reveal(self) -> int:
        """Number of non-mine cells a player must reveal to win."""
        return self.cell_count - self.mine_count

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.rows, self.columns, self.mine_count


# ============================================================================
# Difficulty Levels
# ============================================================================

class Level(Enum):
    """Selectable difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: Union[str, "Level"]) -> "Level":
        """
        Resolve a level from its name.

        Args:
            value: A Level or its case-insensitive name.

        Returns:
            The matching Level.

        Raises:
            ValueError: If the name is not a known level.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(level.value for level in cls)
            raise ValueError(
                f"Unknown level {value!r} (expected one of: {names})"
            ) from None


# Preset difficulty levels
EASY = BoardConfig(9, 9, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(16, 30, 99)

PRESETS = {
    Level.EASY: EASY,
    Level.MEDIUM: MEDIUM,
    Level.HARD: HARD,
}

# The custom form starts out with the easy field
DEFAULT_CUSTOM = EASY


def level_for_config(config: BoardConfig) -> Level:
    """Preset level whose board matches config, or CUSTOM."""
    for level, preset in PRESETS.items():
        if preset == config:
            return level
    return Level.CUSTOM


def config_for_level(
    level: Union[str, Level],
    custom: Optional[Union[BoardConfig, Tuple[int, int, int]]] = None,
) -> BoardConfig:
    """
    Resolve a difficulty level to a board configuration.

    Args:
        level: Level or level name.
        custom: (rows, columns, mine_count) for the custom level. Ignored
            for the preset levels.

    Returns:
        The board configuration for the level.

    Raises:
        InvalidConfiguration: If the custom triple is not playable.
    """
    level = Level.parse(level)
    if level is not Level.CUSTOM:
        return PRESETS[level]
    if custom is None:
        return DEFAULT_CUSTOM
    if isinstance(custom, BoardConfig):
        return custom
    rows, columns, mine_count = custom
    return BoardConfig(rows, columns, mine_count)
