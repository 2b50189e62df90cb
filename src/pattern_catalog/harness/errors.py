from __future__ import annotations


class HarnessError(Exception):
    """Base class for errors raised by the scenario harness."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class DuplicateNameError(HarnessError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"Scenario already registered: {name!r}")


class NotFoundError(HarnessError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"Scenario not registered: {name!r}")


class RegistryFrozenError(HarnessError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"Registry is frozen; cannot register {name!r}")


class ScenarioFault(HarnessError):
    """A fault raised while a scenario operation was running.

    ``cause`` holds the original exception. Output that could not be turned
    into text lines carries the ``TypeError`` raised while collecting it.
    """

    def __init__(self, name: str, description: str, cause: BaseException | None = None) -> None:
        super().__init__(name, f"Scenario {name!r} failed: {description}")
        self.description = description
        self.cause = cause

    @classmethod
    def from_exception(cls, name: str, exc: BaseException) -> "ScenarioFault":
        return cls(name, f"{type(exc).__name__}: {exc}", cause=exc)
