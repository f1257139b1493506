"""Departure domain model."""

from dataclasses import dataclass, field

from .call_at import CallAt
from .departure_status import DepartureStatus, DepartureType
from .order import Order
from .vehicle import Vehicle


@dataclass
class Departure:
    """A scheduled departure from (or arrival at) a station.

    For arrivals ``terminus`` holds the origin of the journey. Equality ignores the
    vehicle, the triggering order and the lateness, so that identical services run
    by different vehicles compare equal.
    """

    scheduled_date: int  # Absolute ticks
    status: DepartureStatus
    departure_type: DepartureType
    vehicle: Vehicle = field(compare=False)
    order: Order = field(compare=False)
    lateness: int = field(default=0, compare=False)
    terminus: CallAt | None = None
    via: int | None = None
    calling_at: list[CallAt] = field(default_factory=list)
