"""Predicates deciding whether an order produces a departure, arrival or via entry."""

from departure_board.domain.models.departure_status import DepartureType
from departure_board.domain.models.order import (
    Order,
    OrderLoadType,
    OrderType,
    OrderUnloadType,
)


def is_departure(order: Order, station: int, show_all_stops: bool = False) -> bool:
    """Whether the vehicle stops at and loads from ``station`` with a wait time set."""
    return (
        order.order_type == OrderType.GOTO_STATION
        and order.destination == station
        and (order.load_type != OrderLoadType.NO_LOAD or show_all_stops)
        and order.wait_time != 0
    )


def is_via(order: Order, station: int) -> bool:
    """Whether the vehicle passes ``station`` without stopping."""
    return (
        order.order_type in (OrderType.GOTO_STATION, OrderType.GOTO_WAYPOINT)
        and order.destination == station
        and order.is_non_stop
    )


def is_arrival(order: Order, station: int, show_all_stops: bool = False) -> bool:
    """Whether the vehicle stops at and unloads at ``station`` with a wait time set."""
    return (
        order.order_type == OrderType.GOTO_STATION
        and order.destination == station
        and (order.unload_type != OrderUnloadType.NO_UNLOAD or show_all_stops)
        and order.wait_time != 0
    )


def is_board_order(
    order: Order,
    station: int,
    departure_type: DepartureType,
    show_vehicles_via: bool,
    show_all_stops: bool,
) -> bool:
    """Whether ``order`` qualifies for the board being computed."""
    if departure_type == DepartureType.ARRIVAL:
        return is_arrival(order, station, show_all_stops)
    return is_departure(order, station, show_all_stops) or (
        show_vehicles_via and is_via(order, station)
    )
