from __future__ import annotations

from .compare import TranscriptMismatch, compare_results
from .model import (
    GoldenTranscript,
    GoldenTranscripts,
    dump_transcripts,
    load_transcripts,
    write_transcripts,
)
from .schema import TRANSCRIPT_SCHEMA, TRANSCRIPT_VERSION, validate_transcripts

__all__ = [
    "GoldenTranscript",
    "GoldenTranscripts",
    "TranscriptMismatch",
    "compare_results",
    "dump_transcripts",
    "load_transcripts",
    "write_transcripts",
    "TRANSCRIPT_SCHEMA",
    "TRANSCRIPT_VERSION",
    "validate_transcripts",
]
