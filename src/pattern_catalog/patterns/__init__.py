"""Vehicle-themed design pattern demonstrations, registered as harness scenarios."""

from __future__ import annotations

from ..harness import RunnerConfig, ScenarioRegistry, ScenarioRunner
from . import behavioral, creational, structural

CATALOG = (
    ("creational", creational.SCENARIOS),
    ("structural", structural.SCENARIOS),
    ("behavioral", behavioral.SCENARIOS),
)


def register_catalog(registry: ScenarioRegistry) -> ScenarioRegistry:
    for group, scenarios in CATALOG:
        for name, operation, description in scenarios:
            registry.register(name, operation, group=group, description=description)
    return registry


def default_registry() -> ScenarioRegistry:
    registry = register_catalog(ScenarioRegistry())
    registry.freeze()
    return registry


def default_runner(config: RunnerConfig | None = None) -> ScenarioRunner:
    return ScenarioRunner(default_registry(), config=config)


__all__ = [
    "CATALOG",
    "default_registry",
    "default_runner",
    "register_catalog",
]
