"""Application services."""

from departure_board.application.services.departure_assembler import DepartureAssembler
from departure_board.application.services.departure_board_service import (
    MAX_SCHEDULING_ITERATIONS,
    DepartureBoardService,
)
from departure_board.application.services.order_predicates import (
    is_arrival,
    is_departure,
    is_via,
)

__all__ = [
    "MAX_SCHEDULING_ITERATIONS",
    "DepartureAssembler",
    "DepartureBoardService",
    "is_arrival",
    "is_departure",
    "is_via",
]
