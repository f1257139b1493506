"""Game time domain model."""

from dataclasses import dataclass

DAY_TICKS = 74


@dataclass(frozen=True)
class GameTime:
    """A point in simulation time: whole days plus ticks into the current day."""

    date: int
    date_fract: int = 0

    @property
    def ticks(self) -> int:
        """Absolute number of ticks since the epoch."""
        return self.date * DAY_TICKS + self.date_fract

    @property
    def day_start_ticks(self) -> int:
        """Absolute ticks at the start of the current day."""
        return self.date * DAY_TICKS
