"""
Flag bookkeeping.

The flag budget equals the mine count. It is a display counter, not a hard
resource: placing more flags than mines drives the remaining count negative.
"""
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Tuple

from .cell import Coordinate


@dataclass(frozen=True)
class FlagLedger:
    """
    Which cells carry a flag, and how many flags are left.

    Attributes:
        mine_count: Size of the flag budget.
        flagged: Coordinates currently flagged.
    """

    mine_count: int
    flagged: FrozenSet[Coordinate] = field(default_factory=frozenset)

    @property
    def remaining(self) -> int:
        """Flags left to place; negative when over-flagged."""
        return self.mine_count - len(self.flagged)

    def is_flagged(self, coord: Tuple[int, int]) -> bool:
        return Coordinate(*coord) in self.flagged

    def toggle(self, coord: Tuple[int, int]) -> "FlagLedger":
        """
        Flip the flag on a cell.

        Legality (cell hidden, game not over) is checked by the caller.

        Returns:
            New ledger with the flag placed or removed.
        """
        coord = Coordinate(*coord)
        if coord in self.flagged:
            return replace(self, flagged=self.flagged - {coord})
        return replace(self, flagged=self.flagged | {coord})

    def flag_all(self, mines: Iterable[Tuple[int, int]]) -> "FlagLedger":
        """Flag exactly the given mines, as shown once a game is won."""
        return replace(
            self, flagged=frozenset(Coordinate(*mine) for mine in mines)
        )
