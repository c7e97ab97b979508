"""Selection log schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

SELECTION_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "request_id",
        "received_at",
        "layer",
        "keyword_hit",
        "default_index",
        "word_count",
        "response_length",
    ],
    "properties": {
        "request_id": {"type": "string"},
        "received_at": {"type": "string", "format": "date-time"},
        "layer": {"type": "string", "enum": ["keyword", "default"]},
        "keyword_hit": {"type": ["string", "null"]},
        "default_index": {"type": ["integer", "null"], "minimum": 0},
        "word_count": {"type": "integer", "minimum": 0},
        "response_length": {"type": "integer", "minimum": 1},
    },
}

_validator = Draft7Validator(SELECTION_SCHEMA)


def validate_selection(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: e.path)
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"selection log validation failed: {messages}")


@dataclass
class SelectionRecord:
    request_id: str
    layer: str
    keyword_hit: Optional[str]
    default_index: Optional[int]
    word_count: int
    response_length: int
    received_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "request_id": self.request_id,
            "received_at": self.received_at,
            "layer": self.layer,
            "keyword_hit": self.keyword_hit,
            "default_index": self.default_index,
            "word_count": self.word_count,
            "response_length": self.response_length,
        }
        validate_selection(payload)
        return payload
