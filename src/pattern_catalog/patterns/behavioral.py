from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Protocol

from ..harness import Transcript


@dataclass(slots=True)
class ServiceDesk:
    """One link of a repair chain; passes what it cannot handle."""

    name: str
    max_cost: int
    successor: "ServiceDesk | None" = None

    def handle(self, cost: int) -> str:
        if cost <= self.max_cost:
            return f"{self.name} approved a repair costing {cost}"
        if self.successor is None:
            return f"Nobody can approve a repair costing {cost}"
        return self.successor.handle(cost)


def chain_of_responsibility() -> list[str]:
    chain = ServiceDesk("Mechanic", 500, ServiceDesk("Workshop manager", 5_000, ServiceDesk("Dealer", 20_000)))
    return [chain.handle(cost) for cost in (200, 3_000, 15_000, 50_000)]


@dataclass(slots=True)
class Radio:
    station: int = 1
    log: list[str] = field(default_factory=list)


def command() -> list[str]:
    radio = Radio()
    history: list[Callable[[], None]] = []

    def tune(station: int) -> None:
        previous = radio.station
        radio.station = station
        radio.log.append(f"Radio tuned to station {station}")
        history.append(lambda: _restore(radio, previous))

    def _restore(target: Radio, station: int) -> None:
        target.station = station
        target.log.append(f"Undo: radio back to station {station}")

    tune(3)
    tune(5)
    history.pop()()
    return radio.log


def interpreter() -> list[str]:
    """Evaluate a tiny route language: ``forward N`` and ``back N``."""
    program = "forward 10 back 3 forward 5"
    tokens = program.split()
    position = 0
    out = Transcript()
    for verb, amount in zip(tokens[::2], tokens[1::2]):
        step = int(amount)
        position += step if verb == "forward" else -step
        out.print(f"{verb} {step} -> position {position}")
    return out.lines


@dataclass(slots=True)
class Fleet:
    vehicles: list[str]

    def __iter__(self) -> Iterator[str]:
        return iter(self.vehicles)


def iterator() -> list[str]:
    fleet = Fleet(["Bus", "Truck", "Taxi"])
    return [f"Vehicle {index}: {vehicle}" for index, vehicle in enumerate(fleet, start=1)]


class ControlTower:
    def __init__(self) -> None:
        self._vehicles: list[str] = []
        self.log = Transcript()

    def join(self, name: str) -> None:
        self._vehicles.append(name)

    def broadcast(self, sender: str, message: str) -> None:
        for vehicle in self._vehicles:
            if vehicle != sender:
                self.log.print(f"{vehicle} received from {sender}: {message}")


def mediator() -> list[str]:
    tower = ControlTower()
    for name in ("Car", "Truck", "Ambulance"):
        tower.join(name)
    tower.broadcast("Ambulance", "clear the lane")
    return tower.log.lines


@dataclass(slots=True, frozen=True)
class SeatPosition:
    height: int
    recline: int


@dataclass(slots=True)
class DriverSeat:
    height: int = 0
    recline: int = 0

    def save(self) -> SeatPosition:
        return SeatPosition(self.height, self.recline)

    def restore(self, memento: SeatPosition) -> None:
        self.height = memento.height
        self.recline = memento.recline

    def describe(self) -> str:
        return f"Seat height {self.height}, recline {self.recline}"


def memento() -> list[str]:
    seat = DriverSeat(height=3, recline=10)
    saved = seat.save()
    out = Transcript()
    out.print(seat.describe())
    seat.height, seat.recline = 7, 25
    out.print(seat.describe())
    seat.restore(saved)
    out.print(seat.describe())
    return out.lines


def observer() -> list[str]:
    out = Transcript()
    subscribers: list[Callable[[int], None]] = [
        lambda speed: out.print(f"Dashboard shows {speed} km/h"),
        lambda speed: out.print("Speed warning!") if speed > 120 else None,
    ]
    for speed in (80, 130):
        for notify in subscribers:
            notify(speed)
    return out.lines


class Gear(Enum):
    PARK = "park"
    DRIVE = "drive"
    REVERSE = "reverse"


_TRANSITIONS = {
    (Gear.PARK, "drive"): Gear.DRIVE,
    (Gear.PARK, "reverse"): Gear.REVERSE,
    (Gear.DRIVE, "park"): Gear.PARK,
    (Gear.REVERSE, "park"): Gear.PARK,
}


def state() -> list[str]:
    gear = Gear.PARK
    out = Transcript()
    for request in ("drive", "reverse", "park", "reverse"):
        target = _TRANSITIONS.get((gear, request))
        if target is None:
            out.print(f"Cannot shift from {gear.value} to {request}")
            continue
        gear = target
        out.print(f"Shifted to {gear.value}")
    return out.lines


class Route(Protocol):
    def __call__(self, distance: int) -> str: ...


def _fastest(distance: int) -> str:
    return f"Highway route: {distance} km in {distance // 100 * 60 + 30} minutes"


def _cheapest(distance: int) -> str:
    return f"Toll-free route: {distance + 40} km"


def strategy() -> list[str]:
    routes: dict[str, Route] = {"fastest": _fastest, "cheapest": _cheapest}
    return [f"{name}: {route(300)}" for name, route in routes.items()]


def _service(vehicle: str, extra_checks: tuple[str, ...]) -> list[str]:
    steps = [f"Servicing {vehicle}", "Change oil"]
    steps.extend(extra_checks)
    steps.append("Wash and return")
    return steps


def template_method() -> list[str]:
    return [
        *_service("car", ("Rotate tyres",)),
        *_service("bike", ("Tighten chain", "Check brakes")),
    ]


class VehicleVisitor(Protocol):
    def visit_car(self, seats: int) -> str: ...

    def visit_truck(self, load_tonnes: int) -> str: ...


@dataclass(slots=True, frozen=True)
class CarEntry:
    seats: int

    def accept(self, visitor: VehicleVisitor) -> str:
        return visitor.visit_car(self.seats)


@dataclass(slots=True, frozen=True)
class TruckEntry:
    load_tonnes: int

    def accept(self, visitor: VehicleVisitor) -> str:
        return visitor.visit_truck(self.load_tonnes)


class TollBooth:
    def visit_car(self, seats: int) -> str:
        return f"Car with {seats} seats pays 5"

    def visit_truck(self, load_tonnes: int) -> str:
        return f"Truck carrying {load_tonnes} t pays {10 + load_tonnes * 2}"


def visitor() -> list[str]:
    booth = TollBooth()
    return [entry.accept(booth) for entry in (CarEntry(seats=4), TruckEntry(load_tonnes=12))]


SCENARIOS = (
    ("chain_of_responsibility", chain_of_responsibility, "Escalate repairs up a chain of approvers"),
    ("command", command, "Tune the radio with undoable commands"),
    ("interpreter", interpreter, "Evaluate a small route language"),
    ("iterator", iterator, "Walk a fleet without exposing its storage"),
    ("mediator", mediator, "Relay messages through a control tower"),
    ("memento", memento, "Save and restore a seat position"),
    ("observer", observer, "Notify subscribers of speed changes"),
    ("state", state, "Shift gears through allowed transitions"),
    ("strategy", strategy, "Swap route planning strategies"),
    ("template_method", template_method, "Share a service routine across vehicles"),
    ("visitor", visitor, "Charge tolls per vehicle variant"),
)
