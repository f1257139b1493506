"""Departure board service."""

import logging
from collections.abc import Collection

from departure_board.domain.models.departure import Departure
from departure_board.domain.models.departure_settings import DepartureSettings
from departure_board.domain.models.departure_status import DepartureType
from departure_board.domain.models.errors import VehicleListError
from departure_board.domain.models.scheduled_order import ScheduledOrder
from departure_board.domain.models.vehicle import Vehicle, VehicleType
from departure_board.domain.ports.game_clock import GameClock
from departure_board.domain.ports.vehicle_repository import VehicleRepository

from .departure_assembler import DepartureAssembler
from .order_scanner import ScanRequest, advance_scheduled_order, seed_scheduled_order
from .terminus_finder import find_origin, find_terminus

logger = logging.getLogger(__name__)

# Safety net for the scheduling loop. Every iteration either adds a departure or
# moves a candidate's expected date forward, so the loop ends well before this.
MAX_SCHEDULING_ITERATIONS = 10000


class DepartureBoardService:
    """Computes the upcoming departures or arrivals of a station.

    Works by repeatedly taking the candidate expected at the station soonest,
    turning it into a departure and moving that vehicle on to its next visit.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        clock: GameClock,
        settings: DepartureSettings | None = None,
    ) -> None:
        """Initialize with a vehicle source, a clock and the board settings."""
        self._vehicle_repository = vehicle_repository
        self._clock = clock
        self._settings = settings or DepartureSettings()

    @property
    def settings(self) -> DepartureSettings:
        """Settings used for every computation of this service."""
        return self._settings

    def make_departure_list(
        self,
        station: int,
        show_vehicle_types: Collection[VehicleType],
        departure_type: DepartureType,
        show_vehicles_via: bool = False,
        show_pax: bool = True,
        show_freight: bool = True,
    ) -> list[Departure]:
        """Compute an up-to-date list of departures (or arrivals) for a station."""
        if not show_pax and not show_freight:
            return []

        now = self._clock.now()
        request = ScanRequest(
            station=station,
            departure_type=departure_type,
            show_vehicles_via=show_vehicles_via,
            settings=self._settings,
        )

        try:
            vehicles = self._collect_vehicles(station, show_vehicle_types, show_pax, show_freight)
        except VehicleListError as e:
            logger.warning(f"Could not list vehicles for station {station}: {e}")
            return []

        candidates: list[ScheduledOrder] = []
        least: ScheduledOrder | None = None
        for vehicle in vehicles:
            scheduled = seed_scheduled_order(vehicle, now.date_fract, request)
            if scheduled is None:
                continue
            candidates.append(scheduled)
            if least is None or least.sort_key(departure_type) > scheduled.sort_key(
                departure_type
            ):
                least = scheduled

        if least is None:
            logger.debug(f"No vehicles scheduled at station {station}")
            return []

        assembler = DepartureAssembler(self._settings)
        max_date = self._settings.max_date

        # Each pass consumes the least candidate and pushes its expected date strictly
        # forward. Dates past the horizon are never selected, so the loop runs out.
        for _ in range(MAX_SCHEDULING_ITERATIONS):
            if (
                len(assembler) >= self._settings.max_departures
                or least.scheduled_offset > max_date
            ):
                break

            departure = self._make_departure(least, station, departure_type, now.day_start_ticks)
            if departure is not None:
                assembler.add(departure)

            advance_scheduled_order(least, request)
            least = self._select_least(least, candidates, departure_type)
        else:
            logger.warning(
                f"Stopped computing departures for station {station} after "
                f"{MAX_SCHEDULING_ITERATIONS} iterations"
            )

        logger.debug(f"Computed {len(assembler)} {departure_type.value}s for station {station}")
        return assembler.departures

    def _collect_vehicles(
        self,
        station: int,
        show_vehicle_types: Collection[VehicleType],
        show_pax: bool,
        show_freight: bool,
    ) -> list[Vehicle]:
        """List the vehicles to consider, in vehicle type order."""
        vehicles = []
        for vehicle_type in VehicleType:
            if vehicle_type not in show_vehicle_types:
                continue
            for vehicle in self._vehicle_repository.get_vehicles_at_station(station, vehicle_type):
                if vehicle.is_stopped_in_depot:
                    continue
                if show_pax != show_freight and vehicle.carries_passengers != show_pax:
                    continue
                vehicles.append(vehicle)
        return vehicles

    def _make_departure(
        self,
        scheduled: ScheduledOrder,
        station: int,
        departure_type: DepartureType,
        day_start: int,
    ) -> Departure | None:
        """Turn a candidate into a departure, or None if it has nowhere to go."""
        vehicle = scheduled.vehicle
        order = scheduled.order
        scheduled_date = day_start + scheduled.scheduled_offset

        if departure_type == DepartureType.DEPARTURE:
            journey = find_terminus(
                vehicle, scheduled.order_index, station, scheduled_date, self._settings
            )
        else:
            # Arrivals are shown by when unloading starts
            scheduled_date -= order.wait_time
            journey = find_origin(vehicle, scheduled.order_index, station, self._settings)

        if not journey.found:
            return None

        return Departure(
            scheduled_date=scheduled_date,
            status=scheduled.status,
            departure_type=departure_type,
            vehicle=vehicle,
            order=order,
            lateness=scheduled.lateness,
            terminus=journey.terminus,
            via=journey.via,
            calling_at=journey.calling_at,
        )

    def _select_least(
        self,
        current: ScheduledOrder,
        candidates: list[ScheduledOrder],
        departure_type: DepartureType,
    ) -> ScheduledOrder:
        """Pick the candidate expected soonest; ties keep ``current``."""
        max_date = self._settings.max_date
        least = current
        for scheduled in candidates:
            if (
                least.sort_key(departure_type) > scheduled.sort_key(departure_type)
                and scheduled.scheduled_offset < max_date
            ):
                least = scheduled
        return least
