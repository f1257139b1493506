"""Departure status and type enumerations."""

from enum import Enum


class DepartureStatus(Enum):
    """Whether a vehicle has reached the stop it is scheduled to depart from."""

    TRAVELLING = "travelling"
    ARRIVED = "arrived"
    CANCELLED = "cancelled"


class DepartureType(Enum):
    """Which kind of board is being computed."""

    DEPARTURE = "departure"
    ARRIVAL = "arrival"
