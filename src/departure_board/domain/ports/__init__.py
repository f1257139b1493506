"""Ports (interfaces) for the ports-and-adapters architecture."""

from departure_board.domain.ports.departure_board_service import DepartureBoardService
from departure_board.domain.ports.game_clock import GameClock
from departure_board.domain.ports.station_repository import StationRepository
from departure_board.domain.ports.vehicle_repository import VehicleRepository

__all__ = [
    "DepartureBoardService",
    "GameClock",
    "StationRepository",
    "VehicleRepository",
]
