"""In-memory repositories backed by a simulation snapshot."""

import logging
from collections.abc import Iterable

from departure_board.domain.models.errors import VehicleListError
from departure_board.domain.models.game_time import GameTime
from departure_board.domain.models.order import OrderType
from departure_board.domain.models.station import Station
from departure_board.domain.models.vehicle import Vehicle, VehicleType

logger = logging.getLogger(__name__)

_STATION_ORDER_TYPES = (OrderType.GOTO_STATION, OrderType.GOTO_WAYPOINT, OrderType.IMPLICIT)


class InMemoryVehicleRepository:
    """Vehicle repository over a fixed set of vehicles."""

    def __init__(self, vehicles: Iterable[Vehicle]) -> None:
        """Initialize with the vehicles of the snapshot."""
        self._vehicles = sorted(vehicles, key=lambda v: v.id)

    def get_vehicles_at_station(self, station_id: int, vehicle_type: VehicleType) -> list[Vehicle]:
        """Get vehicles of a type with a station, waypoint or implicit order for the station."""
        if not isinstance(vehicle_type, VehicleType):
            raise VehicleListError(f"Unknown vehicle type: {vehicle_type!r}")

        vehicles = [
            vehicle
            for vehicle in self._vehicles
            if vehicle.vehicle_type == vehicle_type
            and any(
                order.order_type in _STATION_ORDER_TYPES and order.destination == station_id
                for order in vehicle.orders
            )
        ]
        logger.debug(
            f"Found {len(vehicles)} {vehicle_type.name.lower()} vehicle(s) at station {station_id}"
        )
        return vehicles


class InMemoryStationRepository:
    """Station repository over a fixed set of stations."""

    def __init__(self, stations: Iterable[Station]) -> None:
        """Initialize with the stations of the snapshot."""
        self._stations = {station.id: station for station in stations}

    def get_station(self, station_id: int) -> Station | None:
        """Get a station by its ID."""
        return self._stations.get(station_id)

    def get_all_stations(self) -> list[Station]:
        """Get all known stations, ordered by ID."""
        return [self._stations[station_id] for station_id in sorted(self._stations)]

    def find_station(self, query: str) -> Station | None:
        """Find a station by ID or case-insensitive name."""
        if query.isdigit():
            return self.get_station(int(query))
        query_lower = query.lower()
        for station in self.get_all_stations():
            if station.name.lower() == query_lower:
                return station
        return None


class FixedGameClock:
    """Game clock frozen at the snapshot's time."""

    def __init__(self, time: GameTime) -> None:
        """Initialize with the time to report."""
        self._time = time

    def now(self) -> GameTime:
        """Get the snapshot time."""
        return self._time
