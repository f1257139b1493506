"""Scheduled order (per-vehicle candidate) domain model."""

import sys
from dataclasses import dataclass

from .departure_status import DepartureStatus, DepartureType
from .order import Order
from .vehicle import Vehicle

# Expected date of a candidate that has no further qualifying order.
EXHAUSTED_DATE = sys.maxsize


@dataclass
class ScheduledOrder:
    """The next order of a vehicle that qualifies for the board.

    ``expected_date`` is relative to the start of the current day and only ever
    grows while the candidate is advanced.
    """

    vehicle: Vehicle
    order_index: int
    expected_date: int
    lateness: int  # Never negative
    status: DepartureStatus

    @property
    def order(self) -> Order:
        """The tracked order."""
        return self.vehicle.order_at(self.order_index)

    @property
    def scheduled_offset(self) -> int:
        """Scheduled time of the tracked order relative to the start of the day."""
        return self.expected_date - self.lateness

    def sort_key(self, departure_type: DepartureType) -> int:
        """Effective time used to pick the next candidate to materialise."""
        if departure_type == DepartureType.ARRIVAL:
            return self.scheduled_offset - self.order.wait_time
        return self.scheduled_offset

    @property
    def is_exhausted(self) -> bool:
        """Whether the candidate can never be selected again."""
        return self.expected_date == EXHAUSTED_DATE
