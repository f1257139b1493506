"""Formatter for departure board entries."""

from typing import Any

from departure_board.adapters.config.app_config import AppConfig
from departure_board.domain.models.call_at import CallAt
from departure_board.domain.models.departure import Departure
from departure_board.domain.models.departure_status import DepartureStatus, DepartureType
from departure_board.domain.models.game_time import GameTime
from departure_board.domain.ports.station_repository import StationRepository


class DepartureFormatter:
    """Formatter for departure times and board lines based on configuration."""

    def __init__(self, config: AppConfig, stations: StationRepository) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with clock and time format settings.
            stations: Station lookup for showing names instead of IDs.
        """
        self.config = config
        self.stations = stations

    def ticks_to_minutes(self, ticks: int) -> int:
        """Convert ticks to clock minutes, including the configured clock offset."""
        return ticks // self.config.ticks_per_minute + self.config.clock_offset

    def format_clock_time(self, ticks: int) -> str:
        """Format absolute ticks as a 24 hour clock time (HH:MM)."""
        minutes = self.ticks_to_minutes(ticks)
        return f"{(minutes // 60) % 24:02d}:{minutes % 60:02d}"

    def format_compact_duration(self, ticks: int) -> str:
        """Format a tick duration as compact hours and minutes (e.g., '2h40m', '5m', 'now')."""
        if ticks <= 0:
            return "now"

        total_minutes = ticks // self.config.ticks_per_minute
        if total_minutes < 1:
            return "<1m"
        if total_minutes < 60:
            return f"{total_minutes}m"

        hours = total_minutes // 60
        minutes = total_minutes % 60
        if minutes == 0:
            return f"{hours}h"
        return f"{hours}h{minutes}m"

    def format_departure_time(self, departure: Departure, now: GameTime) -> str:
        """Format the scheduled time according to configuration."""
        if self.config.time_format == "minutes":
            return self.format_compact_duration(departure.scheduled_date - now.ticks)
        return self.format_clock_time(departure.scheduled_date)

    def format_status(self, departure: Departure) -> str:
        """Format the status and lateness of a departure."""
        if departure.status == DepartureStatus.CANCELLED:
            return "Cancelled"
        if departure.status == DepartureStatus.ARRIVED:
            return "Arrived"
        if departure.lateness > 0:
            expected = departure.scheduled_date + departure.lateness
            return f"Expt {self.format_clock_time(expected)}"
        return "On time"

    def station_name(self, station_id: int | None) -> str:
        """Name of a station, falling back to its ID."""
        if station_id is None:
            return "?"
        station = self.stations.get_station(station_id)
        return station.name if station else f"#{station_id}"

    def format_departure(self, departure: Departure, now: GameTime) -> str:
        """Format a departure as a single board line."""
        terminus = self.station_name(departure.terminus.station if departure.terminus else None)
        if departure.departure_type == DepartureType.ARRIVAL:
            destination = f"from {terminus}"
        else:
            destination = terminus
        if departure.via is not None:
            destination += f" via {self.station_name(departure.via)}"

        line = (
            f"{self.format_departure_time(departure, now):>6}  {destination:<30} "
            f"{departure.vehicle.name:<16} {self.format_status(departure)}"
        )
        calls = self._format_calls(departure.calling_at)
        if calls:
            label = "Calling at" if departure.departure_type == DepartureType.DEPARTURE else "From"
            line += f"\n{'':8}{label}: {calls}"
        return line

    def _format_calls(self, calling_at: list[CallAt]) -> str:
        parts = []
        for call in calling_at:
            name = self.station_name(call.station)
            if call.scheduled_date is not None:
                name += f" ({self.format_clock_time(call.scheduled_date)})"
            parts.append(name)
        return ", ".join(parts)

    def to_dict(self, departure: Departure) -> dict[str, Any]:
        """Convert a departure to a JSON-serialisable dict."""
        return {
            "type": departure.departure_type.value,
            "scheduled_date": departure.scheduled_date,
            "scheduled_time": self.format_clock_time(departure.scheduled_date),
            "lateness": departure.lateness,
            "status": departure.status.value,
            "vehicle": {"id": departure.vehicle.id, "name": departure.vehicle.name},
            "terminus": self._call_to_dict(departure.terminus) if departure.terminus else None,
            "via": (
                {"id": departure.via, "name": self.station_name(departure.via)}
                if departure.via is not None
                else None
            ),
            "calling_at": [self._call_to_dict(call) for call in departure.calling_at],
        }

    def _call_to_dict(self, call: CallAt) -> dict[str, Any]:
        return {
            "id": call.station,
            "name": self.station_name(call.station),
            "scheduled_date": call.scheduled_date,
        }
