"""Configuration loader for the responder."""

from __future__ import annotations

import codecs
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

WORD_ORDERS = {"sorted", "given"}


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SourceConfig:
    response_map_path: Path
    default_responses_path: Path
    encoding: str
    flush_trailing_block: bool


@dataclass(frozen=True)
class ResponderConfig:
    sources: SourceConfig
    word_order: str
    seed: Optional[int]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponderConfig":
        src_data = data.get("sources", {})
        word_order = data.get("word_order", "sorted")
        if word_order not in WORD_ORDERS:
            raise ValueError(f"word_order must be one of {sorted(WORD_ORDERS)}, got {word_order!r}")
        encoding = src_data.get("encoding", "ascii")
        try:
            codecs.lookup(encoding)
        except (LookupError, TypeError) as exc:
            raise ValueError(f"unknown source encoding: {encoding!r}") from exc
        flush = src_data.get("flush_trailing_block", False)
        if isinstance(flush, str):
            flush = _parse_bool(flush)
        seed = data.get("seed")
        return cls(
            sources=SourceConfig(
                response_map_path=Path(src_data.get("response_map_path", "config/responses.txt")),
                default_responses_path=Path(src_data.get("default_responses_path", "config/default.txt")),
                encoding=encoding,
                flush_trailing_block=bool(flush),
            ),
            word_order=word_order,
            seed=int(seed) if seed is not None else None,
        )


ENV_MAP = {
    "sources.response_map_path": "RESPONSE_MAP_PATH",
    "sources.default_responses_path": "DEFAULT_RESPONSES_PATH",
    "sources.encoding": "RESPONSE_ENCODING",
    "sources.flush_trailing_block": "RESPONDER_FLUSH_TRAILING",
    "word_order": "RESPONDER_WORD_ORDER",
    "seed": "RESPONDER_SEED",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for dotted_key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        target = merged
        parts = dotted_key.split(".")
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        last = parts[-1]
        if last == "seed":
            value = int(value)
        elif last == "flush_trailing_block":
            value = _parse_bool(value)
        target[last] = value

    return merged


def load_config(config_path: str | Path = "config/responder.defaults.yml") -> ResponderConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return ResponderConfig.from_dict(data)
