from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .errors import HarnessError, NotFoundError, ScenarioFault
from .output import collect_lines
from .registry import Operation, Scenario, ScenarioNames, ScenarioRegistry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunnerConfig:
    max_workers: int = 1
    parallel_threshold: int = 2

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            msg = f"max_workers must be at least 1, got {self.max_workers}"
            raise ValueError(msg)
        if self.parallel_threshold < 1:
            msg = f"parallel_threshold must be at least 1, got {self.parallel_threshold}"
            raise ValueError(msg)


@dataclass(slots=True, frozen=True)
class RunResult:
    name: str
    lines: tuple[str, ...] = ()
    error: HarnessError | None = None
    elapsed: float = field(default=0.0, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failure(self) -> str | None:
        """Textual failure reason, e.g. ``"NotFoundError: ..."``."""
        if self.error is None:
            return None
        return f"{type(self.error).__name__}: {self.error}"


class ScenarioRunner:
    """Run registered scenarios in isolation and collect their output."""

    def __init__(
        self,
        registry: ScenarioRegistry | None = None,
        config: RunnerConfig | None = None,
    ) -> None:
        self._registry = registry if registry is not None else ScenarioRegistry()
        self._config = config or RunnerConfig()

    @property
    def registry(self) -> ScenarioRegistry:
        return self._registry

    def register(
        self,
        name: str,
        operation: Operation,
        *,
        group: str | None = None,
        description: str | None = None,
    ) -> Scenario:
        return self._registry.register(name, operation, group=group, description=description)

    def run(self, names: Iterable[str] | None = None) -> list[RunResult]:
        """Run the requested scenarios, or all of them when ``names`` is None.

        Results follow registration order. Names that were never registered
        come last, in the order they were requested, as ``NotFoundError``
        results.
        """
        scenarios, missing = self._select(names)
        results = self._execute(scenarios)
        for name in missing:
            logger.warning("Requested scenario %r is not registered", name)
            results.append(RunResult(name=name, error=NotFoundError(name)))
        return results

    def run_group(self, group: str) -> list[RunResult]:
        return self._execute([s for s in self._registry.scenarios() if s.group == group])

    def _select(self, names: Iterable[str] | None) -> tuple[list[Scenario], list[str]]:
        registered = self._registry.scenarios()
        if names is None:
            return list(registered), []
        if isinstance(names, str):
            msg = f"expected a collection of scenario names, got str {names!r}"
            raise TypeError(msg)

        requested: dict[str, None] = dict.fromkeys(names)
        selected = [scenario for scenario in registered if scenario.name in requested]
        missing = [name for name in requested if name not in self._registry]
        return selected, missing

    def _execute(self, scenarios: Sequence[Scenario]) -> list[RunResult]:
        workers = self._config.max_workers
        if workers == 1 or len(scenarios) < self._config.parallel_threshold:
            return [_run_scenario(scenario) for scenario in scenarios]

        # map() yields in submission order, whatever order the workers finish in.
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="scenario") as pool:
            return list(pool.map(_run_scenario, scenarios))

    def list(self) -> ScenarioNames:
        return self._registry.names()


def _run_scenario(scenario: Scenario) -> RunResult:
    logger.debug("Running scenario %r", scenario.name)
    started = time.perf_counter()
    try:
        lines = collect_lines(scenario.operation())
    except Exception as exc:  # noqa: BLE001 - runner is the fault boundary
        elapsed = time.perf_counter() - started
        fault = ScenarioFault.from_exception(scenario.name, exc)
        logger.warning("%s", fault)
        return RunResult(name=scenario.name, error=fault, elapsed=elapsed)

    elapsed = time.perf_counter() - started
    logger.debug("Scenario %r produced %d line(s) in %.6fs", scenario.name, len(lines), elapsed)
    return RunResult(name=scenario.name, lines=lines, elapsed=elapsed)
