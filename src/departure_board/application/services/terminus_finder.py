"""Walks a vehicle's order list to find where a departure terminates or an arrival began."""

import logging
from dataclasses import dataclass, field

from departure_board.domain.models.call_at import CallAt
from departure_board.domain.models.departure_settings import (
    ConditionalPolicy,
    DepartureSettings,
)
from departure_board.domain.models.order import (
    Order,
    OrderLoadType,
    OrderType,
    OrderUnloadType,
)
from departure_board.domain.models.vehicle import Vehicle

logger = logging.getLogger(__name__)


@dataclass
class Journey:
    """Calling points of a departure or arrival.

    ``terminus`` is the origin for arrivals. ``found`` tells whether the walk
    produced something worth showing.
    """

    found: bool = False
    terminus: CallAt | None = None
    via: int | None = None
    calling_at: list[CallAt] = field(default_factory=list)


def _is_called_at(order: Order, show_all_stops: bool) -> bool:
    """Whether the vehicle genuinely calls at the order's destination."""
    return (
        (order.unload_type != OrderUnloadType.NO_UNLOAD or show_all_stops)
        and order.is_station_or_implicit
        and not order.is_non_stop
    )


def _is_loading_stop(order: Order, show_all_stops: bool) -> bool:
    return order.load_type != OrderLoadType.NO_LOAD or show_all_stops


def find_terminus(
    vehicle: Vehicle,
    trigger_index: int,
    station: int,
    scheduled_date: int,
    settings: DepartureSettings,
) -> Journey:
    """Follow a departure until the last distinct station it calls at.

    The walk starts after the departure's order and ends when the vehicle returns
    to this station, calls somewhere twice, unloads everything, or completes a
    full lap.
    """
    journey = Journey()
    candidate_via: int | None = None
    index = vehicle.next_order_index(trigger_index)
    clock: int | None = scheduled_date

    for _ in range(vehicle.order_count):
        if index == trigger_index:
            journey.found = bool(journey.calling_at)
            return journey

        order = vehicle.order_at(index)

        if order.order_type == OrderType.CONDITIONAL:
            policy = settings.departure_conditionals
            if policy == ConditionalPolicy.TAKE_BRANCH:
                target = order.condition_skip_to
                if target is None or not 0 <= target < vehicle.order_count:
                    return Journey()
                index = target
                continue
            if policy == ConditionalPolicy.SKIP_BRANCH:
                index = vehicle.next_order_index(index)
                continue
            return Journey()

        if (
            order.order_type == OrderType.GOTO_STATION
            and order.destination == station
            and (order.unload_type != OrderUnloadType.NO_UNLOAD or settings.show_all_stops)
            and not order.is_non_stop
        ):
            journey.found = bool(journey.calling_at)
            return journey

        if (
            order.is_non_stop
            and order.order_type == OrderType.GOTO_STATION
            and journey.via is None
        ):
            candidate_via = order.destination

        if clock is not None and (order.travel_time != 0 or order.travel_timetabled):
            clock += order.travel_time
        else:
            clock = None

        if not _is_called_at(order, settings.show_all_stops):
            if clock is not None:
                clock += order.wait_time
            index = vehicle.next_order_index(index)
            continue

        call = CallAt(order.destination, clock)

        # Calling somewhere twice: the last distinct station is the terminus
        if call in journey.calling_at:
            journey.found = True
            return journey

        if journey.via is None and candidate_via == order.destination:
            journey.via = order.destination
        journey.terminus = CallAt(call.station, call.scheduled_date)
        journey.calling_at.append(call)

        if (
            order.order_type == OrderType.GOTO_STATION
            and order.unload_type == OrderUnloadType.UNLOAD
        ):
            journey.found = True
            return journey

        if clock is not None:
            clock += order.wait_time
        index = vehicle.next_order_index(index)

    logger.debug(f"No terminus within one lap for vehicle {vehicle.id}")
    return journey


def find_origin(
    vehicle: Vehicle,
    trigger_index: int,
    station: int,
    settings: DepartureSettings,
) -> Journey:
    """Find where an arriving vehicle's journey began and the stations it called at since.

    A loading stop is the origin if, from there up to the arrival, the vehicle
    neither unloads everything nor visits that stop or this station again.
    """
    show_all_stops = settings.show_all_stops
    origin_index = vehicle.next_order_index(trigger_index)
    found = False

    while origin_index != trigger_index:
        candidate = vehicle.order_at(origin_index)
        if (
            _is_loading_stop(candidate, show_all_stops)
            and candidate.is_station_or_implicit
            and candidate.destination != station
            and not _has_collision(vehicle, origin_index, trigger_index, station)
        ):
            found = True
            break
        origin_index = vehicle.next_order_index(origin_index)

    if not found:
        return Journey()

    calling_at = []
    index = vehicle.next_order_index(origin_index)
    while index != trigger_index:
        order = vehicle.order_at(index)
        if order.order_type == OrderType.GOTO_STATION and _is_loading_stop(order, show_all_stops):
            calling_at.append(CallAt(order.destination))
        index = vehicle.next_order_index(index)

    return Journey(
        found=True,
        terminus=CallAt(vehicle.order_at(origin_index).destination),
        calling_at=calling_at,
    )


def _has_collision(vehicle: Vehicle, origin_index: int, trigger_index: int, station: int) -> bool:
    origin = vehicle.order_at(origin_index).destination
    index = vehicle.next_order_index(origin_index)
    while index != trigger_index:
        order = vehicle.order_at(index)
        if order.unload_type == OrderUnloadType.UNLOAD:
            return True
        if order.is_station_or_implicit and order.destination in (origin, station):
            return True
        index = vehicle.next_order_index(index)
    return False
