"""Order domain model."""

from dataclasses import dataclass
from enum import Enum


class OrderType(Enum):
    """Kind of step in a vehicle's order list."""

    GOTO_STATION = "station"
    GOTO_WAYPOINT = "waypoint"
    GOTO_DEPOT = "depot"
    CONDITIONAL = "conditional"
    IMPLICIT = "implicit"


class OrderLoadType(Enum):
    """Loading behaviour at an order's destination."""

    LOAD_IF_POSSIBLE = "load_if_possible"
    FULL_LOAD = "full_load"
    FULL_LOAD_ANY = "full_load_any"
    NO_LOAD = "no_load"


class OrderUnloadType(Enum):
    """Unloading behaviour at an order's destination."""

    UNLOAD_IF_ACCEPTED = "unload_if_accepted"
    UNLOAD = "unload"  # Unload everything
    TRANSFER = "transfer"
    NO_UNLOAD = "no_unload"


class OrderNonStopType(Enum):
    """Where a vehicle is allowed to stop while executing an order."""

    STOP_EVERYWHERE = "stop_everywhere"
    NO_STOP_AT_INTERMEDIATE_STATIONS = "no_stop_at_intermediate_stations"
    NO_STOP_AT_DESTINATION_STATION = "no_stop_at_destination_station"
    NO_STOP_AT_ANY_STATION = "no_stop_at_any_station"


@dataclass(frozen=True)
class Order:
    """A single step of a vehicle's cyclic order list.

    Times are in ticks. ``travel_time`` is the time to reach the destination and
    ``wait_time`` the time spent there.
    """

    order_type: OrderType
    destination: int | None = None
    load_type: OrderLoadType = OrderLoadType.LOAD_IF_POSSIBLE
    unload_type: OrderUnloadType = OrderUnloadType.UNLOAD_IF_ACCEPTED
    non_stop_type: OrderNonStopType = OrderNonStopType.STOP_EVERYWHERE
    wait_time: int = 0
    travel_time: int = 0
    travel_timetabled: bool = False
    condition_skip_to: int | None = None  # Target index of a conditional order
    depot_halt: bool = False  # Depot order that stops the vehicle in the depot

    @property
    def is_non_stop(self) -> bool:
        """Whether the vehicle passes the destination without stopping."""
        return self.non_stop_type in (
            OrderNonStopType.NO_STOP_AT_ANY_STATION,
            OrderNonStopType.NO_STOP_AT_DESTINATION_STATION,
        )

    @property
    def is_station_or_implicit(self) -> bool:
        """Whether the order represents a visit to a station."""
        return self.order_type in (OrderType.GOTO_STATION, OrderType.IMPLICIT)

    @property
    def duration(self) -> int:
        """Travel plus wait time of this order."""
        return self.travel_time + self.wait_time
