from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..runner import RunResult
from .model import GoldenTranscripts


@dataclass(slots=True, frozen=True)
class TranscriptMismatch:
    name: str
    reason: str
    diff: tuple[str, ...] = ()

    def render(self) -> str:
        header = f"{self.name}: {self.reason}"
        if not self.diff:
            return header
        return "\n".join((header, *self.diff))


def compare_results(results: Iterable[RunResult], golden: GoldenTranscripts) -> list[TranscriptMismatch]:
    mismatches: list[TranscriptMismatch] = []
    for result in results:
        mismatch = _compare_one(result, golden)
        if mismatch is not None:
            mismatches.append(mismatch)
    return mismatches


def _compare_one(result: RunResult, golden: GoldenTranscripts) -> TranscriptMismatch | None:
    if not result.ok:
        return TranscriptMismatch(name=result.name, reason=result.failure or "failed")
    expected = golden.get(result.name)
    if expected is None:
        return TranscriptMismatch(name=result.name, reason="no golden transcript")
    if expected.lines == result.lines:
        return None
    return TranscriptMismatch(
        name=result.name,
        reason="output differs from golden transcript",
        diff=_unified_diff(result.name, expected.lines, result.lines),
    )


def _unified_diff(name: str, expected: Sequence[str], actual: Sequence[str]) -> tuple[str, ...]:
    return tuple(
        difflib.unified_diff(
            list(expected),
            list(actual),
            fromfile=f"{name} (golden)",
            tofile=f"{name} (actual)",
            lineterm="",
        )
    )
