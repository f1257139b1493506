"""Pydantic schema of a TOML simulation snapshot."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from departure_board.domain.models.game_time import DAY_TICKS, GameTime
from departure_board.domain.models.order import (
    Order,
    OrderLoadType,
    OrderNonStopType,
    OrderType,
    OrderUnloadType,
)
from departure_board.domain.models.station import Station
from departure_board.domain.models.vehicle import CargoClass, Vehicle, VehiclePart, VehicleType

_VEHICLE_TYPES = {
    "train": VehicleType.TRAIN,
    "road": VehicleType.ROAD,
    "ship": VehicleType.SHIP,
    "aircraft": VehicleType.AIRCRAFT,
}


class ClockSchema(BaseModel):
    """``[clock]`` table."""

    model_config = ConfigDict(extra="forbid")

    date: int = 0
    date_fract: int = Field(default=0, ge=0, lt=DAY_TICKS)

    def to_domain(self) -> GameTime:
        return GameTime(date=self.date, date_fract=self.date_fract)


class StationSchema(BaseModel):
    """``[[stations]]`` entry."""

    model_config = ConfigDict(extra="forbid")

    id: int
    name: str

    def to_domain(self) -> Station:
        return Station(id=self.id, name=self.name)


class OrderSchema(BaseModel):
    """``[[vehicles.orders]]`` entry."""

    model_config = ConfigDict(extra="forbid")

    type: OrderType = OrderType.GOTO_STATION
    destination: int | None = None
    load: OrderLoadType = OrderLoadType.LOAD_IF_POSSIBLE
    unload: OrderUnloadType = OrderUnloadType.UNLOAD_IF_ACCEPTED
    non_stop: OrderNonStopType = OrderNonStopType.STOP_EVERYWHERE
    wait_time: int = Field(default=0, ge=0)
    travel_time: int = Field(default=0, ge=0)
    travel_timetabled: bool | None = None  # Defaults to whether travel_time is set
    skip_to: int | None = None
    depot_halt: bool = False

    def to_domain(self) -> Order:
        timetabled = self.travel_timetabled
        if timetabled is None:
            timetabled = self.travel_time > 0
        return Order(
            order_type=self.type,
            destination=self.destination,
            load_type=self.load,
            unload_type=self.unload,
            non_stop_type=self.non_stop,
            wait_time=self.wait_time,
            travel_time=self.travel_time,
            travel_timetabled=timetabled,
            condition_skip_to=self.skip_to,
            depot_halt=self.depot_halt,
        )


class VehiclePartSchema(BaseModel):
    """``[[vehicles.parts]]`` entry."""

    model_config = ConfigDict(extra="forbid")

    cargo: CargoClass
    capacity: int = Field(default=0, ge=0)

    def to_domain(self) -> VehiclePart:
        return VehiclePart(cargo_class=self.cargo, capacity=self.capacity)


class VehicleSchema(BaseModel):
    """``[[vehicles]]`` entry."""

    model_config = ConfigDict(extra="forbid")

    id: int
    name: str = ""
    type: str = "train"
    current_order: int = Field(default=0, ge=0)
    current_order_time: int = Field(default=0, ge=0)
    lateness: int = 0
    loading: bool = False
    stopped_in_depot: bool = False
    orders: list[OrderSchema] = Field(default_factory=list)
    parts: list[VehiclePartSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_vehicle(self) -> "VehicleSchema":
        """Validate the vehicle type and the order references."""
        if self.type.lower() not in _VEHICLE_TYPES:
            raise ValueError(
                f"type must be one of {', '.join(_VEHICLE_TYPES)}, got {self.type!r}"
            )
        if self.orders and self.current_order >= len(self.orders):
            raise ValueError(f"current_order {self.current_order} is out of range")
        return self

    def to_domain(self) -> Vehicle:
        return Vehicle(
            id=self.id,
            name=self.name or f"Vehicle {self.id}",
            vehicle_type=_VEHICLE_TYPES[self.type.lower()],
            orders=tuple(order.to_domain() for order in self.orders),
            current_order_index=self.current_order,
            current_order_time=self.current_order_time,
            lateness=self.lateness,
            is_loading=self.loading,
            is_stopped_in_depot=self.stopped_in_depot,
            parts=tuple(part.to_domain() for part in self.parts),
        )


class SnapshotSchema(BaseModel):
    """Top level of a snapshot file."""

    model_config = ConfigDict(extra="ignore")

    clock: ClockSchema = Field(default_factory=ClockSchema)
    stations: list[StationSchema] = Field(default_factory=list)
    vehicles: list[VehicleSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "SnapshotSchema":
        """Validate station and vehicle IDs are unique."""
        for kind, ids in (
            ("station", [s.id for s in self.stations]),
            ("vehicle", [v.id for v in self.vehicles]),
        ):
            if len(ids) != len(set(ids)):
                duplicates = {i for i in ids if ids.count(i) > 1}
                raise ValueError(f"{kind} IDs must be unique. Duplicate IDs found: {duplicates}")
        return self
