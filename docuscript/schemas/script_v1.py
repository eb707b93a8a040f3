"""Script schema v1.0.0: load, dump, validate.

Canonical JSON (camelCase keys, sort_keys=True, None fields omitted) gives
byte-identical output for identical models regardless of dict insertion
order.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Union

from pydantic import BaseModel, ValidationError

from docuscript.composition.models import Script

SCHEMA_VERSION = "1.0.0"

Source = Union[str, bytes, dict, list, Path]


def read_source(source: Source) -> Any:
    """Decode a JSON string, bytes or file Path; dicts and lists pass through."""
    if isinstance(source, Path):
        return json.loads(source.read_text(encoding="utf-8"))
    if isinstance(source, (str, bytes)):
        return json.loads(source)
    return source


def canonical_json(raw: Any, *, indent: int = 2) -> str:
    return json.dumps(raw, sort_keys=True, indent=indent, ensure_ascii=False)


def model_to_raw(model: BaseModel) -> dict:
    """Wire-format dict: camelCase aliases, None fields dropped."""
    return json.loads(model.model_dump_json(by_alias=True, exclude_none=True))


def load_script(source: Source) -> Script:
    """Parse a Script from JSON string, bytes, dict, or file Path.

    Raises:
        ValidationError: data does not conform to the Script schema.
        FileNotFoundError: Path does not exist.
    """
    return Script.model_validate(read_source(source))


def dump_script(script: Script, *, indent: int = 2) -> str:
    """Serialize a Script to canonical JSON (sort_keys=True, indent=2)."""
    return canonical_json(model_to_raw(script), indent=indent)


def validate_script(data: dict) -> List[str]:
    """Validate a raw dict against the Script schema.

    Returns a list of human-readable error strings (empty list = valid).
    Does not raise.
    """
    try:
        Script.model_validate(data)
        return []
    except ValidationError as exc:
        return [f"{e['loc']}: {e['msg']}" for e in exc.errors()]
