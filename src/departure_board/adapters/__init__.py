"""Adapters layer - configuration, snapshots and output formatting."""

from departure_board.adapters.config import AppConfig
from departure_board.adapters.formatters import DepartureFormatter
from departure_board.adapters.memory import (
    FixedGameClock,
    InMemoryStationRepository,
    InMemoryVehicleRepository,
)
from departure_board.adapters.snapshot import Snapshot, SnapshotLoader

__all__ = [
    "AppConfig",
    "DepartureFormatter",
    "FixedGameClock",
    "InMemoryStationRepository",
    "InMemoryVehicleRepository",
    "Snapshot",
    "SnapshotLoader",
]
