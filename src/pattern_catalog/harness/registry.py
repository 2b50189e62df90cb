from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from .errors import DuplicateNameError, NotFoundError, RegistryFrozenError

Operation = Callable[[], Iterable[str]]


@dataclass(slots=True, frozen=True)
class Scenario:
    name: str
    operation: Operation
    group: str | None = None
    description: str | None = None


class ScenarioNames:
    """Restartable view over registered names, in registration order."""

    def __init__(self, registry: "ScenarioRegistry") -> None:
        self._registry = registry

    def __iter__(self) -> Iterator[str]:
        for scenario in self._registry.scenarios():
            yield scenario.name

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"ScenarioNames({list(self)!r})"


class ScenarioRegistry:
    """Write-once mapping of scenario name to operation."""

    def __init__(self) -> None:
        self._scenarios: dict[str, Scenario] = {}
        self._lock = threading.Lock()
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(
        self,
        name: str,
        operation: Operation,
        *,
        group: str | None = None,
        description: str | None = None,
    ) -> Scenario:
        if not callable(operation):
            msg = f"Operation for scenario {name!r} is not callable"
            raise TypeError(msg)
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(name)
            if name in self._scenarios:
                raise DuplicateNameError(name)
            scenario = Scenario(name=name, operation=operation, group=group, description=description)
            self._scenarios[name] = scenario
            return scenario

    def scenario(
        self,
        name: str | None = None,
        *,
        group: str | None = None,
        description: str | None = None,
    ) -> Callable[[Operation], Operation]:
        """Decorator form of :meth:`register`; the name defaults to the function name."""

        def decorator(operation: Operation) -> Operation:
            self.register(
                name or operation.__name__,
                operation,
                group=group,
                description=description,
            )
            return operation

        return decorator

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True

    def get(self, name: str) -> Scenario:
        try:
            return self._scenarios[name]
        except KeyError:
            raise NotFoundError(name) from None

    def scenarios(self) -> tuple[Scenario, ...]:
        return tuple(self._scenarios.values())

    def groups(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for scenario in self._scenarios.values():
            if scenario.group is not None:
                seen.setdefault(scenario.group, None)
        return tuple(seen)

    def names(self) -> ScenarioNames:
        return ScenarioNames(self)

    def __contains__(self, name: object) -> bool:
        return name in self._scenarios

    def __len__(self) -> int:
        return len(self._scenarios)
