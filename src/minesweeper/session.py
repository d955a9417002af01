"""
Stateful wrapper around GameSnapshot for a rendering layer.

A GameSession owns the current snapshot, applies commands to it one at a
time and notifies subscribed listeners after each change. It also keeps the
match clock the UI displays.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from .config import BoardConfig, Level, config_for_level, level_for_config
from .state import FlagOutcome, GameSnapshot, GameStatus, RevealOutcome

logger = logging.getLogger(__name__)

Listener = Callable[[GameSnapshot], None]


# ============================================================================
# Match Clock
# ============================================================================

@dataclass
class MatchClock:
    """
    Seconds elapsed in the current match.

    The UI calls tick() once per second; ticks only count while the game is
    in progress.
    """

    elapsed: int = 0

    def tick(self, status: GameStatus) -> int:
        if status == GameStatus.IN_PROGRESS:
            self.elapsed += 1
        return self.elapsed

    def reset(self) -> None:
        self.elapsed = 0


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Single owner of the current game snapshot.

    Each command replaces the snapshot and then calls every listener with
    the new one. Commands that leave the snapshot unchanged notify nobody.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        level: Optional[Union[str, Level]] = None,
    ) -> None:
        """
        Initialize a session.

        Args:
            config: Board configuration (default: the level's preset).
            seed: Seed for reproducible boards.
            level: Level the session starts on. Derived from config when
                only a config is given, easy when neither is.
        """
        if level is not None:
            self.level = Level.parse(level)
            self.config = config or config_for_level(self.level)
        elif config is not None:
            self.level = level_for_config(config)
            self.config = config
        else:
            self.level = Level.EASY
            self.config = config_for_level(self.level)
        self.clock = MatchClock()
        self._listeners: List[Listener] = []
        self._snapshot = GameSnapshot.create(self.config, seed=seed)

    @property
    def snapshot(self) -> GameSnapshot:
        return self._snapshot

    @property
    def status(self) -> GameStatus:
        return self._snapshot.status

    @property
    def elapsed(self) -> int:
        return self.clock.elapsed

    # ========================================================================
    # Observers
    # ========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for snapshot changes.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, snapshot: GameSnapshot) -> None:
        if snapshot is self._snapshot:
            return
        previous = self._snapshot.status
        self._snapshot = snapshot
        if snapshot.status != previous:
            logger.debug("Status %s -> %s", previous.value,
                         snapshot.status.value)
        for listener in list(self._listeners):
            listener(snapshot)

    # ========================================================================
    # Commands
    # ========================================================================

    def reveal(self, coord: Tuple[int, int]) -> RevealOutcome:
        outcome = self._snapshot.reveal(coord)
        if outcome.changed:
            self._publish(outcome.snapshot)
        return outcome

    def toggle_flag(self, coord: Tuple[int, int]) -> FlagOutcome:
        outcome = self._snapshot.toggle_flag(coord)
        self._publish(outcome.snapshot)
        return outcome

    def reset(self) -> GameSnapshot:
        """Start a new match on the same board size (the face button)."""
        self.clock.reset()
        self._publish(self._snapshot.reset())
        return self._snapshot

    def reconfigure(
        self, rows: int, columns: int, mine_count: int
    ) -> GameSnapshot:
        """
        Switch to a custom board size.

        Raises:
            InvalidConfiguration: If the triple is not playable. The current
                game is left untouched.
        """
        snapshot = self._snapshot.reconfigure(rows, columns, mine_count)
        self.level = Level.CUSTOM
        self.config = snapshot.config
        self.clock.reset()
        self._publish(snapshot)
        return snapshot

    def select_level(
        self,
        level: Union[str, Level],
        custom: Optional[Union[BoardConfig, Tuple[int, int, int]]] = None,
    ) -> GameSnapshot:
        """
        Switch difficulty level and start a new match.

        Args:
            level: Level or level name.
            custom: (rows, columns, mine_count) when level is custom.
        """
        config = config_for_level(level, custom)
        snapshot = self._snapshot.reconfigure(*config.as_tuple())
        self.level = Level.parse(level)
        self.config = config
        self.clock.reset()
        self._publish(snapshot)
        return snapshot

    def tick(self) -> int:
        """Advance the match clock by one second if a match is running."""
        return self.clock.tick(self.status)
