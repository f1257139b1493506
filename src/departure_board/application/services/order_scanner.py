"""Bounded forward scan over a vehicle's cyclic order list.

The same scan seeds a vehicle's first candidate and advances it after it has been
put on the board. It never looks at more than one lap of the order list.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from departure_board.domain.models.departure_settings import (
    ConditionalPolicy,
    DepartureSettings,
)
from departure_board.domain.models.departure_status import DepartureStatus, DepartureType
from departure_board.domain.models.order import OrderType
from departure_board.domain.models.scheduled_order import EXHAUSTED_DATE, ScheduledOrder
from departure_board.domain.models.vehicle import Vehicle

from .order_predicates import is_board_order

logger = logging.getLogger(__name__)


class ScanOutcome(Enum):
    """Result kind of a forward scan."""

    FOUND = "found"
    EXHAUSTED = "exhausted"  # A full lap without a qualifying order
    GAVE_UP = "gave_up"  # Horizon passed, no timetable data or unpredictable branch


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a forward scan, with the qualifying order when one was found."""

    outcome: ScanOutcome
    order_index: int = 0
    expected_date: int = 0
    status: DepartureStatus = DepartureStatus.TRAVELLING

    @property
    def found(self) -> bool:
        """Whether a qualifying order was found."""
        return self.outcome == ScanOutcome.FOUND


@dataclass(frozen=True)
class ScanRequest:
    """What the scan is looking for."""

    station: int
    departure_type: DepartureType
    show_vehicles_via: bool
    settings: DepartureSettings


def scan_for_next_order(
    vehicle: Vehicle,
    start_index: int,
    expected_date: int,
    lateness: int,
    status: DepartureStatus,
    request: ScanRequest,
) -> ScanResult:
    """Find the first qualifying order at or after ``start_index``.

    ``expected_date`` must already include the duration of the order at
    ``start_index``. Each further order's travel and wait time is added as the scan
    moves onto it.
    """
    settings = request.settings
    max_date = settings.max_date
    index = start_index

    for _ in range(vehicle.order_count):
        order = vehicle.order_at(index)

        if expected_date - lateness > max_date:
            return ScanResult(ScanOutcome.GAVE_UP)

        if order.order_type == OrderType.CONDITIONAL:
            if status != DepartureStatus.CANCELLED:
                status = DepartureStatus.TRAVELLING
            policy = settings.departure_conditionals
            if policy == ConditionalPolicy.TAKE_BRANCH:
                target = order.condition_skip_to
                if target is None or not 0 <= target < vehicle.order_count:
                    return ScanResult(ScanOutcome.GAVE_UP)
                index = target
                # The branch's own travel time covers the journey to the target
                expected_date += vehicle.order_at(index).wait_time
                continue
            if policy == ConditionalPolicy.SKIP_BRANCH:
                index = vehicle.next_order_index(index)
                expected_date += vehicle.order_at(index).duration
                continue
            return ScanResult(ScanOutcome.GAVE_UP)

        if order.order_type == OrderType.IMPLICIT:
            index = vehicle.next_order_index(index)
            expected_date += vehicle.order_at(index).duration
            continue

        if order.travel_time == 0 and not order.travel_timetabled:
            return ScanResult(ScanOutcome.GAVE_UP)

        if is_board_order(
            order,
            request.station,
            request.departure_type,
            request.show_vehicles_via,
            settings.show_all_stops,
        ):
            return ScanResult(ScanOutcome.FOUND, index, expected_date, status)

        if status != DepartureStatus.CANCELLED:
            status = DepartureStatus.TRAVELLING
        index = vehicle.next_order_index(index)
        expected_date += vehicle.order_at(index).duration

    return ScanResult(ScanOutcome.EXHAUSTED)


def seed_scheduled_order(
    vehicle: Vehicle, day_fract: int, request: ScanRequest
) -> ScheduledOrder | None:
    """Find the first qualifying order of a vehicle.

    Returns None if the vehicle has no order that makes it onto the board.
    """
    if vehicle.order_count == 0:
        return None

    current_order = vehicle.current_order
    start_date = day_fract - vehicle.current_order_time
    status = DepartureStatus.TRAVELLING

    if vehicle.is_heading_to_depot_halt:
        status = DepartureStatus.CANCELLED

    if vehicle.is_loading:
        # The vehicle has already completed the journey to its current order
        status = DepartureStatus.ARRIVED
        start_date -= current_order.travel_time + min(vehicle.lateness, 0)
    elif vehicle.lateness < 0:
        # Early vehicles are expected at their scheduled time
        start_date -= vehicle.lateness

    lateness = max(vehicle.lateness, 0)
    result = scan_for_next_order(
        vehicle,
        vehicle.current_order_index % vehicle.order_count,
        start_date + current_order.duration,
        lateness,
        status,
        request,
    )
    if not result.found:
        logger.debug(f"Vehicle {vehicle.id} has no upcoming order ({result.outcome.value})")
        return None

    if result.status == DepartureStatus.CANCELLED and result.expected_date - lateness < 0:
        logger.debug(f"Vehicle {vehicle.id} was cancelled before its next departure")
        return None

    return ScheduledOrder(
        vehicle=vehicle,
        order_index=result.order_index,
        expected_date=result.expected_date,
        lateness=lateness,
        status=result.status,
    )


def advance_scheduled_order(scheduled: ScheduledOrder, request: ScanRequest) -> None:
    """Move a candidate on to its next qualifying order, or mark it exhausted."""
    vehicle = scheduled.vehicle
    index = vehicle.next_order_index(scheduled.order_index)
    result = scan_for_next_order(
        vehicle,
        index,
        scheduled.expected_date + vehicle.order_at(index).duration,
        scheduled.lateness,
        scheduled.status,
        request,
    )

    if result.found:
        scheduled.order_index = result.order_index
        scheduled.expected_date = result.expected_date
        scheduled.status = result.status
    else:
        logger.debug(f"Vehicle {vehicle.id} has no further orders ({result.outcome.value})")
        scheduled.expected_date = EXHAUSTED_DATE

    # It cannot have arrived at a stop further down its order list yet
    if scheduled.status == DepartureStatus.ARRIVED:
        scheduled.status = DepartureStatus.TRAVELLING
