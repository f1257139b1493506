"""Snapshot loader."""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from departure_board.adapters.config.app_config import AppConfig
from departure_board.adapters.memory.in_memory_repositories import (
    FixedGameClock,
    InMemoryStationRepository,
    InMemoryVehicleRepository,
)
from departure_board.domain.models.errors import SnapshotError

from .schema import SnapshotSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Repositories and clock of one loaded simulation snapshot."""

    vehicles: InMemoryVehicleRepository
    stations: InMemoryStationRepository
    clock: FixedGameClock


class SnapshotLoader:
    """Loads a simulation snapshot from the configured TOML file."""

    @staticmethod
    def load(config: AppConfig) -> Snapshot:
        """Load the snapshot named by ``config.snapshot_file``.

        Raises:
            SnapshotError: If the file is missing or does not describe a valid snapshot.
        """
        try:
            toml_data = config.load_toml_data()
        except (FileNotFoundError, ValueError) as e:
            raise SnapshotError(str(e)) from e

        return SnapshotLoader.from_dict(toml_data)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> Snapshot:
        """Build a snapshot from already parsed TOML data."""
        try:
            schema = SnapshotSchema.model_validate(data)
        except ValidationError as e:
            raise SnapshotError(f"Invalid snapshot: {e}") from e

        snapshot = Snapshot(
            vehicles=InMemoryVehicleRepository(v.to_domain() for v in schema.vehicles),
            stations=InMemoryStationRepository(s.to_domain() for s in schema.stations),
            clock=FixedGameClock(schema.clock.to_domain()),
        )
        logger.info(
            f"Loaded snapshot with {len(schema.stations)} station(s) "
            f"and {len(schema.vehicles)} vehicle(s)"
        )
        return snapshot
