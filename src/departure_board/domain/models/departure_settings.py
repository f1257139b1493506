"""Departure board settings domain model."""

import logging
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .game_time import DAY_TICKS

logger = logging.getLogger(__name__)


class ConditionalPolicy(IntEnum):
    """How conditional orders are treated when predicting a vehicle's route."""

    GIVE_UP = 0
    TAKE_BRANCH = 1
    SKIP_BRANCH = 2

    @classmethod
    def from_setting(cls, value: int) -> "ConditionalPolicy":
        """Map a raw setting value to a policy; unknown values mean giving up."""
        try:
            return cls(value)
        except (TypeError, ValueError):
            logger.warning(f"Unknown conditional order policy {value!r}, giving up on branches")
            return cls.GIVE_UP


class DepartureSettings(BaseModel):
    """Settings used for one departure board computation."""

    model_config = ConfigDict(frozen=True)

    max_departure_time: int = Field(default=2, ge=0, description="Days of look-ahead")
    max_departures: int = Field(default=10, ge=0, description="Maximum board length")
    departure_conditionals: ConditionalPolicy = ConditionalPolicy.GIVE_UP
    show_all_stops: bool = False
    merge_identical: bool = False
    smart_terminus: bool = False

    @field_validator("departure_conditionals", mode="before")
    @classmethod
    def validate_departure_conditionals(cls, v: int) -> ConditionalPolicy:
        """Map unknown conditional policies to giving up."""
        return ConditionalPolicy.from_setting(v)

    @property
    def max_date(self) -> int:
        """Latest scheduled time, in ticks after the start of today, shown on the board."""
        return self.max_departure_time * DAY_TICKS
