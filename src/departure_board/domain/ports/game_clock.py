"""Game clock port."""

from typing import Protocol

from departure_board.domain.models.game_time import GameTime


class GameClock(Protocol):
    """Port for reading the current simulation time."""

    def now(self) -> GameTime:
        """Get the current simulation time."""
        ...
