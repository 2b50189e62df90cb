from __future__ import annotations

import pytest

from pattern_catalog.harness import RegistryFrozenError, RunnerConfig
from pattern_catalog.patterns import default_registry, default_runner

EXPECTED_ORDER = [
    "factory", "abstract_factory", "builder", "prototype", "singleton",
    "adapter", "bridge", "composite", "decorator", "facade", "flyweight", "proxy",
    "chain_of_responsibility", "command", "interpreter", "iterator", "mediator",
    "memento", "observer", "state", "strategy", "template_method", "visitor",
]


def test_catalog_registers_every_pattern_in_order() -> None:
    registry = default_registry()
    assert list(registry.names()) == EXPECTED_ORDER
    assert registry.groups() == ("creational", "structural", "behavioral")


def test_default_registry_is_frozen() -> None:
    with pytest.raises(RegistryFrozenError):
        default_registry().register("extra", lambda: [])


def test_every_pattern_runs_and_is_deterministic() -> None:
    runner = default_runner(RunnerConfig(max_workers=4))
    first = runner.run()
    second = runner.run()

    assert [result.name for result in first] == EXPECTED_ORDER
    assert all(result.ok for result in first), [r.failure for r in first if not r.ok]
    assert all(result.lines for result in first)
    assert first == second


def test_factory_and_singleton_transcripts() -> None:
    factory, singleton = default_runner().run(["singleton", "factory"])
    assert factory.lines == ("I am two wheeler", "I am four wheeler")
    assert singleton.lines == ("This is a Red vehicle", "This is still a Red vehicle")


def test_selected_pattern_outputs() -> None:
    results = {result.name: result.lines for result in default_runner().run(
        ["chain_of_responsibility", "memento", "state", "proxy"]
    )}

    assert results["chain_of_responsibility"][-1] == "Nobody can approve a repair costing 50000"
    assert results["memento"][0] == results["memento"][-1]
    assert "Cannot shift from drive to reverse" in results["state"]
    assert results["proxy"] == (
        "Driver aged 16 is too young to drive",
        "Car has been driven by a driver aged 25",
    )
