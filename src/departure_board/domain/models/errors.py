"""Domain errors."""


class DepartureBoardError(Exception):
    """Base class for departure board errors."""


class VehicleListError(DepartureBoardError):
    """Raised when the vehicles serving a station cannot be listed."""


class SnapshotError(DepartureBoardError):
    """Raised when a simulation snapshot cannot be loaded."""
