"""Scenario harness: register named demonstrations, run them, capture their lines."""

from .errors import (
    DuplicateNameError,
    HarnessError,
    NotFoundError,
    RegistryFrozenError,
    ScenarioFault,
)
from .output import Transcript, collect_lines
from .registry import Operation, Scenario, ScenarioNames, ScenarioRegistry
from .runner import RunnerConfig, RunResult, ScenarioRunner

__all__ = [
    "DuplicateNameError",
    "HarnessError",
    "NotFoundError",
    "Operation",
    "RegistryFrozenError",
    "RunResult",
    "RunnerConfig",
    "Scenario",
    "ScenarioFault",
    "ScenarioNames",
    "ScenarioRegistry",
    "ScenarioRunner",
    "Transcript",
    "collect_lines",
]
