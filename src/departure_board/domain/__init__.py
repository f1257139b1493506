"""Domain layer - core models and ports."""

from departure_board.domain.models import (
    Departure,
    DepartureSettings,
    Order,
    Station,
    Vehicle,
)
from departure_board.domain.ports import (
    DepartureBoardService,
    GameClock,
    StationRepository,
    VehicleRepository,
)

__all__ = [
    "Departure",
    "DepartureBoardService",
    "DepartureSettings",
    "GameClock",
    "Order",
    "Station",
    "StationRepository",
    "Vehicle",
    "VehicleRepository",
]
