from __future__ import annotations

from pathlib import Path

import pytest

from pattern_catalog.harness import ScenarioRegistry, ScenarioRunner


@pytest.fixture()
def artifact_dir(tmp_path: Path) -> Path:
    path = tmp_path / "artifacts"
    path.mkdir()
    return path


@pytest.fixture()
def runner() -> ScenarioRunner:
    runner = ScenarioRunner(ScenarioRegistry())
    runner.register("factory", lambda: ["I am two wheeler", "I am four wheeler"])
    runner.register("singleton", lambda: ["This is a Red vehicle", "This is still a Red vehicle"])
    return runner
