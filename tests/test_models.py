"""Tests for domain models."""

import pytest
from pydantic import ValidationError

from departure_board.domain.models import (
    DAY_TICKS,
    EXHAUSTED_DATE,
    CallAt,
    CargoClass,
    ConditionalPolicy,
    Departure,
    DepartureSettings,
    DepartureStatus,
    DepartureType,
    GameTime,
    Order,
    OrderNonStopType,
    OrderType,
    ScheduledOrder,
    Vehicle,
    VehiclePart,
    VehicleType,
)
from tests.builders import make_vehicle, station_order


def test_call_at_equality_ignores_time() -> None:
    """Given two calls at the same station at different times, when compared, then they are equal."""
    assert CallAt(3, 100) == CallAt(3, 250)
    assert CallAt(3, 100) != CallAt(4, 100)
    assert CallAt(3, 100) in [CallAt(2), CallAt(3)]


def test_call_at_arrives_no_earlier_than() -> None:
    """Given calls with known and unknown times, when ordered, then only comparable calls match."""
    assert CallAt(3, 300).arrives_no_earlier_than(CallAt(3, 250))
    assert CallAt(3, 250).arrives_no_earlier_than(CallAt(3, 250))
    assert not CallAt(3, 200).arrives_no_earlier_than(CallAt(3, 250))
    assert not CallAt(3, 300).arrives_no_earlier_than(CallAt(4, 250))
    assert not CallAt(3, None).arrives_no_earlier_than(CallAt(3, 250))
    assert not CallAt(3, 300).arrives_no_earlier_than(CallAt(3, None))


def test_departure_equality_ignores_vehicle_and_lateness() -> None:
    """Given the same service run by two vehicles, when compared, then the departures are equal."""
    order = station_order(1)
    first = Departure(
        scheduled_date=500,
        status=DepartureStatus.TRAVELLING,
        departure_type=DepartureType.DEPARTURE,
        vehicle=make_vehicle([order], vehicle_id=1),
        order=order,
        lateness=0,
        terminus=CallAt(2, 540),
        calling_at=[CallAt(2, 540)],
    )
    second = Departure(
        scheduled_date=500,
        status=DepartureStatus.TRAVELLING,
        departure_type=DepartureType.DEPARTURE,
        vehicle=make_vehicle([order], vehicle_id=2),
        order=order,
        lateness=25,
        terminus=CallAt(2, 560),
        calling_at=[CallAt(2, 560)],
    )

    assert first == second

    second.via = 7
    assert first != second


def test_order_non_stop_helpers() -> None:
    """Given orders with different non-stop types, when checked, then only no-stop ones pass through."""
    assert station_order(1, non_stop_type=OrderNonStopType.NO_STOP_AT_ANY_STATION).is_non_stop
    assert station_order(
        1, non_stop_type=OrderNonStopType.NO_STOP_AT_DESTINATION_STATION
    ).is_non_stop
    assert not station_order(
        1, non_stop_type=OrderNonStopType.NO_STOP_AT_INTERMEDIATE_STATIONS
    ).is_non_stop
    assert station_order(1, travel_time=12, wait_time=5).duration == 17


def test_vehicle_order_list_wraps_around() -> None:
    """Given a vehicle with three orders, when stepping past the last, then it wraps to the first."""
    vehicle = make_vehicle([station_order(1), station_order(2), station_order(3)])

    assert vehicle.order_count == 3
    assert vehicle.next_order_index(0) == 1
    assert vehicle.next_order_index(2) == 0
    assert vehicle.order_at(4).destination == 2


def test_vehicle_heading_to_depot_halt() -> None:
    """Given a vehicle whose current order stops it in a depot, when checked, then it is flagged."""
    depot = Order(order_type=OrderType.GOTO_DEPOT, destination=9, depot_halt=True)
    service = Order(order_type=OrderType.GOTO_DEPOT, destination=9)

    assert make_vehicle([depot, station_order(1)]).is_heading_to_depot_halt
    assert not make_vehicle([service, station_order(1)]).is_heading_to_depot_halt
    assert not make_vehicle([station_order(1), depot]).is_heading_to_depot_halt


def test_vehicle_carries_passengers() -> None:
    """Given vehicle compositions, when checked, then only passenger capacity counts."""
    assert make_vehicle([station_order(1)], cargo=CargoClass.PASSENGERS).carries_passengers
    assert not make_vehicle([station_order(1)], cargo=CargoClass.FREIGHT).carries_passengers

    empty_coach = Vehicle(
        id=1,
        vehicle_type=VehicleType.TRAIN,
        orders=(station_order(1),),
        parts=(VehiclePart(CargoClass.PASSENGERS, capacity=0),),
    )
    assert not empty_coach.carries_passengers


def test_game_time_ticks() -> None:
    """Given a game time, when converted, then ticks count whole days plus the fraction."""
    time = GameTime(date=10, date_fract=5)

    assert time.ticks == 10 * DAY_TICKS + 5
    assert time.day_start_ticks == 10 * DAY_TICKS


def test_scheduled_order_sort_key_subtracts_wait_for_arrivals() -> None:
    """Given a candidate, when ranked for arrivals, then the wait time is taken off."""
    vehicle = make_vehicle([station_order(1, wait_time=15)])
    scheduled = ScheduledOrder(
        vehicle=vehicle,
        order_index=0,
        expected_date=100,
        lateness=20,
        status=DepartureStatus.TRAVELLING,
    )

    assert scheduled.scheduled_offset == 80
    assert scheduled.sort_key(DepartureType.DEPARTURE) == 80
    assert scheduled.sort_key(DepartureType.ARRIVAL) == 65
    assert not scheduled.is_exhausted

    scheduled.expected_date = EXHAUSTED_DATE
    assert scheduled.is_exhausted


def test_conditional_policy_from_setting() -> None:
    """Given raw setting values, when mapped, then unknown values give up."""
    assert ConditionalPolicy.from_setting(0) == ConditionalPolicy.GIVE_UP
    assert ConditionalPolicy.from_setting(1) == ConditionalPolicy.TAKE_BRANCH
    assert ConditionalPolicy.from_setting(2) == ConditionalPolicy.SKIP_BRANCH
    assert ConditionalPolicy.from_setting(7) == ConditionalPolicy.GIVE_UP


def test_departure_settings_are_frozen() -> None:
    """Given settings, when modified, then validation fails."""
    settings = DepartureSettings(max_departure_time=3)

    assert settings.max_date == 3 * DAY_TICKS
    with pytest.raises(ValidationError):
        settings.max_departures = 5  # type: ignore[misc]


def test_departure_settings_reject_negative_limits() -> None:
    """Given a negative limit, when creating settings, then validation fails."""
    with pytest.raises(ValidationError):
        DepartureSettings(max_departures=-1)


def test_departure_settings_unknown_conditional_policy_gives_up() -> None:
    """Given an unknown conditional policy, when creating settings, then branches are given up on."""
    settings = DepartureSettings(departure_conditionals=9)  # type: ignore[arg-type]

    assert settings.departure_conditionals == ConditionalPolicy.GIVE_UP
    assert DepartureSettings(departure_conditionals=2).departure_conditionals == (  # type: ignore[arg-type]
        ConditionalPolicy.SKIP_BRANCH
    )
