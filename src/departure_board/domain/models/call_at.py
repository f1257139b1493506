"""Calling point domain model."""

from dataclasses import dataclass, field


@dataclass
class CallAt:
    """A station called at, with the time the vehicle is expected there.

    Two calls are equal when they refer to the same station, regardless of time.
    ``scheduled_date`` is ``None`` when the time cannot be derived from the timetable.
    """

    station: int | None
    scheduled_date: int | None = field(default=None, compare=False)

    def arrives_no_earlier_than(self, other: "CallAt") -> bool:
        """Whether this call reaches the same station as ``other`` at the same time or later."""
        return (
            self.station == other.station
            and self.scheduled_date is not None
            and other.scheduled_date is not None
            and self.scheduled_date >= other.scheduled_date
        )
