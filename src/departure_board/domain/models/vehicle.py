"""Vehicle domain model."""

from dataclasses import dataclass, field
from enum import Enum

from .order import Order, OrderType


class VehicleType(Enum):
    """Vehicle types that can appear on a departure board."""

    TRAIN = 0
    ROAD = 1
    SHIP = 2
    AIRCRAFT = 3


class CargoClass(Enum):
    """Coarse cargo classification used for passenger/freight filtering."""

    PASSENGERS = "passengers"
    MAIL = "mail"
    FREIGHT = "freight"


@dataclass(frozen=True)
class VehiclePart:
    """One part (engine, wagon, trailer) of a vehicle's composition."""

    cargo_class: CargoClass
    capacity: int = 0


@dataclass(frozen=True)
class Vehicle:
    """A vehicle and its position within its cyclic order list.

    ``lateness`` is signed: positive means late, negative means early.
    """

    id: int
    vehicle_type: VehicleType
    orders: tuple[Order, ...]
    name: str = ""
    current_order_index: int = 0
    current_order_time: int = 0  # Ticks spent on the current order so far
    lateness: int = 0
    is_loading: bool = False
    is_stopped_in_depot: bool = False
    parts: tuple[VehiclePart, ...] = field(default_factory=tuple)

    @property
    def order_count(self) -> int:
        """Number of orders in the order list."""
        return len(self.orders)

    def order_at(self, index: int) -> Order:
        """Return the order at ``index``, wrapping around the order list."""
        return self.orders[index % len(self.orders)]

    def next_order_index(self, index: int) -> int:
        """Return the index following ``index``; the last order wraps to the first."""
        return (index + 1) % len(self.orders)

    @property
    def current_order(self) -> Order:
        """The order the vehicle is currently executing."""
        return self.order_at(self.current_order_index)

    @property
    def is_heading_to_depot_halt(self) -> bool:
        """Whether the vehicle is on its way to stop in a depot."""
        order = self.current_order
        return order.order_type == OrderType.GOTO_DEPOT and order.depot_halt

    @property
    def carries_passengers(self) -> bool:
        """Whether any part of the vehicle has passenger capacity."""
        return any(
            part.capacity > 0 and part.cargo_class == CargoClass.PASSENGERS for part in self.parts
        )
