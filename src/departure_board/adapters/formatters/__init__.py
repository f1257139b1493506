"""Output formatters."""

from departure_board.adapters.formatters.departure_formatter import DepartureFormatter

__all__ = ["DepartureFormatter"]
