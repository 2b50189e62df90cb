from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

from ..runner import RunResult
from .schema import TRANSCRIPT_VERSION, validate_transcripts


@dataclass(slots=True, frozen=True)
class GoldenTranscript:
    name: str
    lines: tuple[str, ...]


class GoldenTranscripts(Mapping[str, GoldenTranscript]):
    """Expected output per scenario name, in document order."""

    def __init__(self, transcripts: Iterable[GoldenTranscript], description: str | None = None) -> None:
        self._transcripts = {transcript.name: transcript for transcript in transcripts}
        self.description = description

    def __getitem__(self, name: str) -> GoldenTranscript:
        return self._transcripts[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._transcripts)

    def __len__(self) -> int:
        return len(self._transcripts)


def load_transcripts(source: Path | dict[str, Any]) -> GoldenTranscripts:
    if isinstance(source, Path):
        data = json.loads(source.read_text(encoding="utf-8"))
    else:
        data = source
    validate_transcripts(data)

    transcripts = [
        GoldenTranscript(name=str(name), lines=tuple(lines))
        for name, lines in data["scenarios"].items()
    ]
    return GoldenTranscripts(transcripts, description=data.get("description"))


def dump_transcripts(results: Iterable[RunResult], *, description: str | None = None) -> dict[str, Any]:
    """Build a golden document from successful results; failures are left out."""
    payload: dict[str, Any] = {"version": TRANSCRIPT_VERSION}
    if description is not None:
        payload["description"] = description
    payload["scenarios"] = {result.name: list(result.lines) for result in results if result.ok}
    validate_transcripts(payload)
    return payload


def write_transcripts(
    path: Path,
    results: Iterable[RunResult],
    *,
    description: str | None = None,
) -> Path:
    payload = dump_transcripts(results, description=description)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path
