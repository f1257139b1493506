"""Departure board service port."""

from collections.abc import Collection
from typing import Protocol

from departure_board.domain.models.departure import Departure
from departure_board.domain.models.departure_status import DepartureType
from departure_board.domain.models.vehicle import VehicleType


class DepartureBoardService(Protocol):
    """Port for computing the departure or arrival board of a station."""

    def make_departure_list(
        self,
        station: int,
        show_vehicle_types: Collection[VehicleType],
        departure_type: DepartureType,
        show_vehicles_via: bool = False,
        show_pax: bool = True,
        show_freight: bool = True,
    ) -> list[Departure]:
        """Compute an up-to-date list of departures (or arrivals) for a station.

        Args:
            station: ID of the station.
            show_vehicle_types: Vehicle types to include.
            departure_type: Whether to compute departures or arrivals.
            show_vehicles_via: Include vehicles passing the station without stopping.
            show_pax: Include passenger vehicles.
            show_freight: Include freight vehicles.

        Returns:
            Departures ordered by scheduled time, empty if nothing could be computed.
        """
        ...
