from __future__ import annotations

from typing import Any

import jsonschema

TRANSCRIPT_VERSION = 1

TRANSCRIPT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["version", "scenarios"],
    "properties": {
        "version": {"const": TRANSCRIPT_VERSION},
        "description": {"type": "string"},
        "scenarios": {
            "type": "object",
            "propertyNames": {"minLength": 1},
            "additionalProperties": {"$ref": "#/definitions/lines"},
        },
    },
    "additionalProperties": False,
    "definitions": {
        "lines": {
            "type": "array",
            "items": {"type": "string"},
        }
    },
}


def validate_transcripts(payload: dict[str, Any]) -> None:
    jsonschema.validate(instance=payload, schema=TRANSCRIPT_SCHEMA)
