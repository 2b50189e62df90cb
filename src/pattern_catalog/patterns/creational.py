from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from enum import Enum

from ..harness import Transcript


class VehicleKind(Enum):
    TWO_WHEELER = "two wheeler"
    FOUR_WHEELER = "four wheeler"


@dataclass(slots=True, frozen=True)
class Vehicle:
    kind: VehicleKind
    color: str = "White"

    def describe(self) -> str:
        return f"I am {self.kind.value}"


def make_vehicle(wheels: int) -> Vehicle:
    if wheels == 2:
        return Vehicle(VehicleKind.TWO_WHEELER)
    if wheels == 4:
        return Vehicle(VehicleKind.FOUR_WHEELER)
    msg = f"No vehicle with {wheels} wheels"
    raise ValueError(msg)


def factory() -> list[str]:
    return [make_vehicle(wheels).describe() for wheels in (2, 4)]


@dataclass(slots=True, frozen=True)
class VehicleFamily:
    """Matching parts produced together by one factory."""

    name: str
    engine: str
    tyres: str


FAMILIES = {
    "petrol": VehicleFamily("petrol", engine="Petrol engine", tyres="Tubeless tyres"),
    "electric": VehicleFamily("electric", engine="Electric motor", tyres="Low-resistance tyres"),
}


def abstract_factory() -> list[str]:
    out = Transcript()
    for family in FAMILIES.values():
        out.print(f"The {family.name} factory builds a {family.engine} with {family.tyres}")
    return out.lines


@dataclass(slots=True)
class CarSpec:
    model: str = "Basic"
    seats: int = 4
    sunroof: bool = False
    color: str = "White"


class CarBuilder:
    def __init__(self) -> None:
        self._spec = CarSpec()

    def model(self, name: str) -> "CarBuilder":
        self._spec.model = name
        return self

    def seats(self, count: int) -> "CarBuilder":
        self._spec.seats = count
        return self

    def sunroof(self) -> "CarBuilder":
        self._spec.sunroof = True
        return self

    def paint(self, color: str) -> "CarBuilder":
        self._spec.color = color
        return self

    def build(self) -> CarSpec:
        return replace(self._spec)


def builder() -> list[str]:
    car = CarBuilder().model("Tourer").seats(7).sunroof().paint("Blue").build()
    roof = "with" if car.sunroof else "without"
    return [
        f"Building a {car.color} {car.model}",
        f"It has {car.seats} seats and is {roof} a sunroof",
    ]


@dataclass(slots=True)
class RaceCar:
    number: int
    color: str
    stickers: list[str] = field(default_factory=list)


def prototype() -> list[str]:
    original = RaceCar(number=7, color="Green", stickers=["sponsor"])
    clone = copy.deepcopy(original)
    clone.number = 8
    clone.stickers.append("rookie")
    return [
        f"Original car #{original.number} is {original.color} with {', '.join(original.stickers)}",
        f"Cloned car #{clone.number} is {clone.color} with {', '.join(clone.stickers)}",
    ]


class Garage:
    """The one vehicle shared by everyone given this garage."""

    def __init__(self, color: str) -> None:
        self._vehicle = Vehicle(VehicleKind.FOUR_WHEELER, color=color)

    @property
    def vehicle(self) -> Vehicle:
        return self._vehicle


def _paint_job(garage: Garage) -> str:
    return f"This is a {garage.vehicle.color} vehicle"


def _second_look(garage: Garage) -> str:
    return f"This is still a {garage.vehicle.color} vehicle"


def singleton() -> list[str]:
    garage = Garage("Red")
    return [_paint_job(garage), _second_look(garage)]


SCENARIOS = (
    ("factory", factory, "Choose a vehicle variant by wheel count"),
    ("abstract_factory", abstract_factory, "Build matching parts from one family"),
    ("builder", builder, "Assemble a car step by step"),
    ("prototype", prototype, "Clone a configured car"),
    ("singleton", singleton, "Share one explicitly constructed vehicle"),
)
