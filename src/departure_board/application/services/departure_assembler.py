"""Adds computed departures to a board, merging duplicates and tidying termini."""

import logging

from departure_board.domain.models.departure import Departure
from departure_board.domain.models.departure_settings import DepartureSettings
from departure_board.domain.models.departure_status import DepartureStatus, DepartureType

logger = logging.getLogger(__name__)


class DepartureAssembler:
    """Collects departures for one board computation."""

    def __init__(self, settings: DepartureSettings) -> None:
        """Initialize with the settings of the current computation."""
        self._settings = settings
        self.departures: list[Departure] = []

    def __len__(self) -> int:
        return len(self.departures)

    def is_duplicate(self, departure: Departure) -> bool:
        """Whether an identical departure is already on the board."""
        return any(departure == accepted for accepted in self.departures)

    def add(self, departure: Departure) -> bool:
        """Add a departure to the board.

        Returns:
            False if the departure was merged into an identical one.
        """
        if self._settings.merge_identical and self.is_duplicate(departure):
            logger.debug(f"Merged identical departure of vehicle {departure.vehicle.id}")
            return False

        self.departures.append(departure)

        if departure.departure_type == DepartureType.DEPARTURE:
            if self._settings.smart_terminus:
                self._shorten_earlier_termini(departure)

            # A late vehicle is shown by when it arrives rather than when it leaves
            if departure.status != DepartureStatus.ARRIVED and departure.lateness > 0:
                departure.lateness -= departure.order.wait_time

        return True

    def _shorten_earlier_termini(self, departure: Departure) -> None:
        """Cut back earlier departures' termini to stations this departure reaches first.

        Passengers for a station served sooner by the new departure are better off
        taking it, so the earlier departure is shown as terminating before that
        station. A terminus only ever moves back along its own calling points.
        """
        for earlier in self.departures[:-1]:
            if earlier.terminus is None or earlier.terminus not in earlier.calling_at:
                continue
            # Index of the call before the current terminus
            k = earlier.calling_at.index(earlier.terminus) - 1
            if k < 0:
                continue
            for call in reversed(departure.calling_at):
                if earlier.terminus.arrives_no_earlier_than(call):
                    earlier.terminus = earlier.calling_at[k]
                    if k == 0:
                        break
                    k -= 1
