"""In-memory adapters."""

from departure_board.adapters.memory.in_memory_repositories import (
    FixedGameClock,
    InMemoryStationRepository,
    InMemoryVehicleRepository,
)

__all__ = ["FixedGameClock", "InMemoryStationRepository", "InMemoryVehicleRepository"]
