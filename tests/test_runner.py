from __future__ import annotations

import threading
from collections import Counter

import pytest

from pattern_catalog.harness import (
    NotFoundError,
    RunnerConfig,
    ScenarioFault,
    ScenarioRegistry,
    ScenarioRunner,
    Transcript,
)


def test_run_all_end_to_end(runner: ScenarioRunner) -> None:
    results = runner.run()

    assert [result.name for result in results] == ["factory", "singleton"]
    assert results[0].lines == ("I am two wheeler", "I am four wheeler")
    assert results[1].lines == ("This is a Red vehicle", "This is still a Red vehicle")
    assert all(result.ok and result.error is None for result in results)


def test_run_returns_registration_order(runner: ScenarioRunner) -> None:
    results = runner.run(["singleton", "factory"])
    assert [result.name for result in results] == ["factory", "singleton"]

    results = runner.run({"factory", "singleton"})
    assert [result.name for result in results] == ["factory", "singleton"]


def test_bare_string_name_is_rejected(runner: ScenarioRunner) -> None:
    with pytest.raises(TypeError):
        runner.run("factory")  # type: ignore[arg-type]

    [result] = runner.run(["factory"])
    assert result.ok


def test_repeated_runs_are_identical(runner: ScenarioRunner) -> None:
    first = runner.run(["factory"])
    second = runner.run(["factory"])
    assert first == second


def test_unknown_name_is_reported_without_aborting(runner: ScenarioRunner) -> None:
    results = runner.run(["factory", "teleporter"])

    assert [result.name for result in results] == ["factory", "teleporter"]
    assert results[0].ok
    assert isinstance(results[1].error, NotFoundError)
    assert results[1].lines == ()
    assert results[1].failure is not None and results[1].failure.startswith("NotFoundError")


def test_fault_is_contained(runner: ScenarioRunner) -> None:
    def broken() -> list[str]:
        raise RuntimeError("engine stalled")

    runner.register("broken", broken)
    results = runner.run()

    assert [result.name for result in results] == ["factory", "singleton", "broken"]
    assert results[0].ok and results[1].ok
    fault = results[2].error
    assert isinstance(fault, ScenarioFault)
    assert isinstance(fault.cause, RuntimeError)
    assert "engine stalled" in fault.description


@pytest.mark.parametrize("output", ["a single string", [1, 2], None])
def test_output_that_is_not_lines_is_a_fault(output: object) -> None:
    runner = ScenarioRunner()
    runner.register("odd", lambda: output)

    [result] = runner.run()
    assert isinstance(result.error, ScenarioFault)
    assert isinstance(result.error.cause, TypeError)


def test_generators_and_transcripts_are_accepted() -> None:
    def printed() -> Transcript:
        out = Transcript()
        out.print("two", "wheels")
        out.print("line one\nline two")
        return out

    runner = ScenarioRunner()
    runner.register("generated", lambda: (f"gear {n}" for n in range(1, 3)))
    runner.register("printed", printed)

    generated, transcript = runner.run()
    assert generated.lines == ("gear 1", "gear 2")
    assert transcript.lines == ("two wheels", "line one", "line two")


def test_each_operation_runs_once_per_run() -> None:
    calls: Counter[str] = Counter()
    runner = ScenarioRunner(config=RunnerConfig(max_workers=4))
    for name in ("a", "b", "c"):
        runner.register(name, lambda name=name: calls.update([name]) or [name])

    runner.run(["a", "b", "c", "a"])
    assert calls == Counter({"a": 1, "b": 1, "c": 1})


def test_parallel_results_follow_registration_order() -> None:
    second_done = threading.Event()

    def slow_first() -> list[str]:
        assert second_done.wait(timeout=5)
        return ["first"]

    def fast_second() -> list[str]:
        second_done.set()
        return ["second"]

    registry = ScenarioRegistry()
    registry.register("first", slow_first)
    registry.register("second", fast_second)
    runner = ScenarioRunner(registry, RunnerConfig(max_workers=2))

    results = runner.run(["second", "first"])
    assert [result.name for result in results] == ["first", "second"]
    assert [result.lines for result in results] == [("first",), ("second",)]


def test_run_group_selects_by_group() -> None:
    runner = ScenarioRunner()
    runner.register("a", lambda: ["a"], group="structural")
    runner.register("b", lambda: ["b"], group="behavioral")
    runner.register("c", lambda: ["c"], group="structural")

    assert [result.name for result in runner.run_group("structural")] == ["a", "c"]
    assert runner.run_group("creational") == []


@pytest.mark.parametrize("kwargs", [{"max_workers": 0}, {"parallel_threshold": 0}])
def test_runner_config_validates(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        RunnerConfig(**kwargs)
