"""Vehicle repository port."""

from typing import Protocol

from departure_board.domain.models.vehicle import Vehicle, VehicleType


class VehicleRepository(Protocol):
    """Port for listing the vehicles whose orders visit a station."""

    def get_vehicles_at_station(self, station_id: int, vehicle_type: VehicleType) -> list[Vehicle]:
        """Get vehicles of a type with orders for a station.

        Raises:
            VehicleListError: If the vehicle list cannot be generated.
        """
        ...
