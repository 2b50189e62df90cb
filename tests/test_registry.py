from __future__ import annotations

import pytest

from pattern_catalog.harness import (
    DuplicateNameError,
    NotFoundError,
    RegistryFrozenError,
    ScenarioRegistry,
    ScenarioRunner,
)


def test_duplicate_registration_keeps_first(runner: ScenarioRunner) -> None:
    with pytest.raises(DuplicateNameError) as excinfo:
        runner.register("factory", lambda: ["impostor"])
    assert excinfo.value.name == "factory"

    [result] = runner.run(["factory"])
    assert result.ok
    assert result.lines == ("I am two wheeler", "I am four wheeler")


def test_list_is_ordered_and_restartable(runner: ScenarioRunner) -> None:
    names = runner.list()
    assert list(names) == ["factory", "singleton"]
    assert list(names) == ["factory", "singleton"]
    assert list(runner.list()) == list(runner.list())
    assert len(names) == 2
    assert "singleton" in names


def test_list_reflects_later_registrations() -> None:
    registry = ScenarioRegistry()
    names = registry.names()
    registry.register("a", lambda: [])
    assert list(names) == ["a"]
    registry.register("b", lambda: [])
    assert list(names) == ["a", "b"]


def test_decorator_registration_defaults_to_function_name() -> None:
    registry = ScenarioRegistry()

    @registry.scenario(group="creational", description="demo")
    def builder() -> list[str]:
        return ["built"]

    scenario = registry.get("builder")
    assert scenario.operation is builder
    assert scenario.group == "creational"
    assert registry.groups() == ("creational",)


def test_get_unknown_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        ScenarioRegistry().get("missing")


def test_frozen_registry_rejects_registration() -> None:
    registry = ScenarioRegistry()
    registry.register("a", lambda: [])
    registry.freeze()
    assert registry.frozen
    with pytest.raises(RegistryFrozenError):
        registry.register("b", lambda: [])
    assert list(registry.names()) == ["a"]


def test_non_callable_operation_is_rejected() -> None:
    with pytest.raises(TypeError):
        ScenarioRegistry().register("a", ["not", "callable"])  # type: ignore[arg-type]
