"""
Error types raised by the Minesweeper engine.
"""


class InvalidConfiguration(ValueError):
    """Board dimensions or mine count cannot produce a playable field."""

    POSITIVE_DIMENSIONS = "The customized numbers should be greater than 0"
    NEGATIVE_MINES = "The number of mines cannot be negative"
    TOO_MANY_MINES = (
        "The number of mines should be less than the number of squares"
    )
