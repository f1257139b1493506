"""Station repository port."""

from typing import Protocol

from departure_board.domain.models.station import Station


class StationRepository(Protocol):
    """Port for looking up stations."""

    def get_station(self, station_id: int) -> Station | None:
        """Get a station by its ID."""
        ...

    def get_all_stations(self) -> list[Station]:
        """Get all known stations."""
        ...
