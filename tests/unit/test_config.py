"""
Unit tests for board configuration and difficulty levels.
"""
import pytest
from minesweeper import (
    BoardConfig,
    EASY,
    HARD,
    InvalidConfiguration,
    Level,
    MEDIUM,
    config_for_level,
    level_for_config,
)


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.rows == 9
        assert valid_config.columns == 9
        assert valid_config.mine_count == 10
        assert valid_config.squares_to_reveal == 71

    @pytest.mark.parametrize("rows,columns", [(0, 9), (9, 0), (-1, 3)])
    def test_non_positive_dimensions_raise(
        self, rows: int, columns: int
    ) -> None:
        """Dimensions must be greater than zero."""
        with pytest.raises(InvalidConfiguration, match="greater than 0"):
            BoardConfig(rows, columns, 1)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise."""
        with pytest.raises(InvalidConfiguration, match="cannot be negative"):
            BoardConfig(9, 9, -1)

    def test_mines_equal_to_cells_raises(self) -> None:
        """Mine count must be below the cell count."""
        with pytest.raises(InvalidConfiguration, match="less than"):
            BoardConfig(5, 5, 25)

    def test_max_mines_is_valid(self) -> None:
        """Cells - 1 mines should be accepted."""
        assert BoardConfig(3, 3, 8).squares_to_reveal == 1

    def test_zero_mines_is_valid(self) -> None:
        """A board may have no mines at all."""
        assert BoardConfig(1, 1, 0).squares_to_reveal == 1

    def test_invalid_configuration_is_value_error(self) -> None:
        """Callers catching ValueError also see configuration errors."""
        with pytest.raises(ValueError):
            BoardConfig(2, 2, 4)


# ============================================================================
# Level Tests
# ============================================================================

class TestLevels:
    """Test preset and custom level resolution."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            (Level.EASY, (9, 9, 10)),
            (Level.MEDIUM, (16, 16, 40)),
            (Level.HARD, (16, 30, 99)),
        ],
    )
    def test_presets(self, level: Level, expected) -> None:
        """Presets match the standard difficulty levels."""
        assert config_for_level(level).as_tuple() == expected

    def test_preset_constants(self) -> None:
        """Module constants are the preset configurations."""
        assert config_for_level("easy") is EASY
        assert config_for_level("medium") is MEDIUM
        assert config_for_level("hard") is HARD

    def test_level_names_are_case_insensitive(self) -> None:
        """Level names parse regardless of case and padding."""
        assert Level.parse(" Hard ") is Level.HARD

    def test_unknown_level_raises(self) -> None:
        """Unknown names are rejected."""
        with pytest.raises(ValueError, match="Unknown level"):
            Level.parse("insane")

    def test_custom_defaults_to_easy_field(self) -> None:
        """Custom level without a triple starts on the easy field."""
        assert config_for_level(Level.CUSTOM).as_tuple() == (9, 9, 10)

    def test_custom_triple(self) -> None:
        """Custom level uses the caller's triple."""
        config = config_for_level("custom", (4, 7, 5))
        assert config == BoardConfig(4, 7, 5)

    def test_custom_triple_is_validated(self) -> None:
        """An unplayable custom triple raises."""
        with pytest.raises(InvalidConfiguration):
            config_for_level(Level.CUSTOM, (3, 3, 9))

    def test_custom_ignored_for_presets(self) -> None:
        """Presets ignore a custom triple."""
        assert config_for_level(Level.EASY, (4, 4, 2)) is EASY

    def test_level_for_preset_config(self) -> None:
        """Preset boards map back to their level."""
        assert level_for_config(BoardConfig(16, 30, 99)) is Level.HARD
        assert level_for_config(EASY) is Level.EASY

    def test_level_for_other_config_is_custom(self) -> None:
        """Any other board is a custom level."""
        assert level_for_config(BoardConfig(9, 9, 11)) is Level.CUSTOM
