from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from ..harness import Transcript


class SpeedReading(Protocol):
    def speed_kmh(self) -> float: ...


@dataclass(slots=True)
class ImperialSpeedometer:
    mph: float


@dataclass(slots=True)
class MetricAdapter:
    meter: ImperialSpeedometer

    def speed_kmh(self) -> float:
        return round(self.meter.mph * 1.609344, 1)


def adapter() -> list[str]:
    reading: SpeedReading = MetricAdapter(ImperialSpeedometer(mph=60))
    return [
        "Imported speedometer reads 60 mph",
        f"Adapted dashboard shows {reading.speed_kmh()} km/h",
    ]


class Workshop(Protocol):
    def work(self, vehicle: str) -> str: ...


class Produce:
    def work(self, vehicle: str) -> str:
        return f"{vehicle} produced"


class Assemble:
    def work(self, vehicle: str) -> str:
        return f"{vehicle} assembled"


def bridge() -> list[str]:
    workshops: list[Workshop] = [Produce(), Assemble()]
    return [workshop.work(vehicle) for vehicle in ("Car", "Bike") for workshop in workshops]


@dataclass(slots=True)
class Part:
    name: str
    price: int
    parts: tuple["Part", ...] = ()

    def total(self) -> int:
        return self.price + sum(part.total() for part in self.parts)

    def walk(self, depth: int = 0) -> list[str]:
        lines = [f"{'  ' * depth}{self.name}: {self.total()}"]
        for part in self.parts:
            lines.extend(part.walk(depth + 1))
        return lines


def composite() -> list[str]:
    wheel = Part("Wheel", 100, (Part("Tyre", 60), Part("Rim", 40)))
    car = Part("Car", 1000, (Part("Engine", 500), wheel, wheel))
    return car.walk()


def _with_feature(name: str, price: int) -> Callable[[tuple[str, int]], tuple[str, int]]:
    def decorate(base: tuple[str, int]) -> tuple[str, int]:
        description, cost = base
        return f"{description} + {name}", cost + price

    return decorate


def decorator() -> list[str]:
    car = ("Basic car", 10_000)
    out = Transcript()
    out.print(f"{car[0]} costs {car[1]}")
    for feature in (_with_feature("air conditioning", 800), _with_feature("sports seats", 1_200)):
        car = feature(car)
        out.print(f"{car[0]} costs {car[1]}")
    return out.lines


def facade() -> list[str]:
    def start_car() -> list[str]:
        return ["Fuel pump primed", "Ignition on", "Engine running"]

    return ["Driver turns the key", *start_car()]


@dataclass(slots=True, frozen=True)
class CarModel:
    make: str
    color: str


class CarModelCache:
    def __init__(self) -> None:
        self._models: dict[tuple[str, str], CarModel] = {}

    def get(self, make: str, color: str) -> CarModel:
        key = (make, color)
        if key not in self._models:
            self._models[key] = CarModel(make, color)
        return self._models[key]

    def __len__(self) -> int:
        return len(self._models)


def flyweight() -> list[str]:
    cache = CarModelCache()
    parked = [cache.get("Hatchback", "Red"), cache.get("Hatchback", "Red"), cache.get("Sedan", "Black")]
    return [
        f"{len(parked)} cars parked",
        f"{len(cache)} shared car models",
        f"First two share a model: {parked[0] is parked[1]}",
    ]


DRIVING_AGE = 18


class Car:
    def drive(self, age: int) -> str:
        return f"Car has been driven by a driver aged {age}"


class CarProxy:
    def __init__(self, car: Car) -> None:
        self._car = car

    def drive(self, age: int) -> str:
        if age < DRIVING_AGE:
            return f"Driver aged {age} is too young to drive"
        return self._car.drive(age)


def proxy() -> list[str]:
    car = CarProxy(Car())
    return [car.drive(age) for age in (16, 25)]


SCENARIOS = (
    ("adapter", adapter, "Read an imperial speedometer through a metric interface"),
    ("bridge", bridge, "Combine vehicles and workshops independently"),
    ("composite", composite, "Price a car as a tree of parts"),
    ("decorator", decorator, "Add optional features to a car"),
    ("facade", facade, "Start a car with one call"),
    ("flyweight", flyweight, "Share car models between parked cars"),
    ("proxy", proxy, "Check the driver before handing over the car"),
)
