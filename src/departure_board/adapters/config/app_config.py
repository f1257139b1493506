"""12-factor configuration adapter using environment variables and a TOML snapshot."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from departure_board.domain.models.departure_settings import (
    ConditionalPolicy,
    DepartureSettings,
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Departure board configuration
    max_departure_time: int = Field(
        default=2, description="How many days ahead departures are shown"
    )
    max_departures: int = Field(default=10, description="Maximum number of departures shown")
    departure_conditionals: int = Field(
        default=0,
        description="Conditional orders: 0 give up, 1 always take the branch, 2 never take it",
    )
    departure_show_all_stops: bool = Field(
        default=False, description="Show stops where the vehicle does not load or unload"
    )
    departure_merge_identical: bool = Field(
        default=False, description="Merge identical departures run by different vehicles"
    )
    departure_smart_terminus: bool = Field(
        default=False,
        description="Shorten termini of departures overtaken by a later, faster departure",
    )

    # Display configuration
    time_format: str = Field(default="at", description="Time format: 'minutes' or 'at'")
    ticks_per_minute: int = Field(default=74, description="Ticks per displayed clock minute")
    clock_offset: int = Field(default=0, description="Minutes added to the displayed clock")

    # Snapshot file path
    snapshot_file: str | None = Field(
        default=None,
        description="Path to TOML snapshot with the stations, vehicles and clock to use",
    )

    @field_validator("time_format")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        """Validate time format is either 'minutes' or 'at'."""
        if v not in ("minutes", "at"):
            raise ValueError("time_format must be either 'minutes' or 'at'")
        return v

    @field_validator("max_departures", "max_departure_time")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate limits are not negative."""
        if v < 0:
            raise ValueError("departure limits must not be negative")
        return v

    @field_validator("ticks_per_minute")
    @classmethod
    def validate_ticks_per_minute(cls, v: int) -> int:
        """Validate the display clock can advance."""
        if v < 1:
            raise ValueError("ticks_per_minute must be at least 1")
        return v

    def to_departure_settings(self) -> DepartureSettings:
        """Build the settings used for computing departure boards."""
        return DepartureSettings(
            max_departure_time=self.max_departure_time,
            max_departures=self.max_departures,
            departure_conditionals=ConditionalPolicy.from_setting(self.departure_conditionals),
            show_all_stops=self.departure_show_all_stops,
            merge_identical=self.departure_merge_identical,
            smart_terminus=self.departure_smart_terminus,
        )

    def load_toml_data(self) -> dict[str, Any]:
        """Load and parse the snapshot TOML file, applying its settings overrides."""
        if not self.snapshot_file:
            raise ValueError("snapshot_file must be set to load a snapshot")

        snapshot_path = Path(self.snapshot_file)
        if not snapshot_path.exists():
            raise FileNotFoundError(f"Snapshot file not found: {snapshot_path}")

        with open(snapshot_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update departure settings from TOML if present
        departures = toml_data.get("departures", {})
        for key in ("max_departure_time", "max_departures"):
            if key in departures:
                setattr(self, key, self.validate_non_negative(int(departures[key])))
        if "departure_conditionals" in departures:
            self.departure_conditionals = int(departures["departure_conditionals"])
        for key in ("show_all_stops", "merge_identical", "smart_terminus"):
            if key in departures:
                setattr(self, f"departure_{key}", bool(departures[key]))

        # Update display settings from TOML if present
        display = toml_data.get("display", {})
        if "time_format" in display:
            self.time_format = self.validate_time_format(display["time_format"])
        if "ticks_per_minute" in display:
            self.ticks_per_minute = self.validate_ticks_per_minute(int(display["ticks_per_minute"]))
        if "clock_offset" in display:
            self.clock_offset = int(display["clock_offset"])

        return toml_data
