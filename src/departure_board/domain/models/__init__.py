"""Domain models for departure boards."""

from departure_board.domain.models.call_at import CallAt
from departure_board.domain.models.departure import Departure
from departure_board.domain.models.departure_settings import ConditionalPolicy, DepartureSettings
from departure_board.domain.models.departure_status import DepartureStatus, DepartureType
from departure_board.domain.models.errors import (
    DepartureBoardError,
    SnapshotError,
    VehicleListError,
)
from departure_board.domain.models.game_time import DAY_TICKS, GameTime
from departure_board.domain.models.order import (
    Order,
    OrderLoadType,
    OrderNonStopType,
    OrderType,
    OrderUnloadType,
)
from departure_board.domain.models.scheduled_order import EXHAUSTED_DATE, ScheduledOrder
from departure_board.domain.models.station import Station
from departure_board.domain.models.vehicle import CargoClass, Vehicle, VehiclePart, VehicleType

__all__ = [
    "DAY_TICKS",
    "EXHAUSTED_DATE",
    "CallAt",
    "CargoClass",
    "ConditionalPolicy",
    "Departure",
    "DepartureBoardError",
    "DepartureSettings",
    "DepartureStatus",
    "DepartureType",
    "GameTime",
    "Order",
    "OrderLoadType",
    "OrderNonStopType",
    "OrderType",
    "OrderUnloadType",
    "ScheduledOrder",
    "SnapshotError",
    "Station",
    "Vehicle",
    "VehicleListError",
    "VehiclePart",
    "VehicleType",
]
