"""JSON Schema contract checks for raw docuscript artifacts.

The contracts are generated from the pydantic models (wire names, by alias)
so they never drift from what ``docuscript.schemas`` accepts.
"""
import json
from functools import lru_cache
from types import MappingProxyType
from typing import List

import jsonschema
from pydantic import TypeAdapter

from .composition.models import Script, StoryboardFrame, TranscriptionProject
from .schemas.script_v1 import model_to_raw

_CONTRACTS = MappingProxyType({
    "Script.v1.json": TypeAdapter(Script),
    "StoryboardFrames.v1.json": TypeAdapter(List[StoryboardFrame]),
    "TranscriptionProject.v1.json": TypeAdapter(TranscriptionProject),
})


@lru_cache(maxsize=None)
def load_schema(name: str) -> str:
    """Return the contract *name* as a JSON string.

    Raises KeyError for an unknown contract name.
    """
    adapter = _CONTRACTS[name]
    return json.dumps(adapter.json_schema(by_alias=True), sort_keys=True)


def _validate(data, name: str) -> None:
    jsonschema.validate(data, json.loads(load_schema(name)))


def validate_script(data: dict) -> None:
    """Validate a Script dict against the Script.v1.json contract.

    Raises jsonschema.ValidationError if non-conformant.
    """
    _validate(data, "Script.v1.json")


def validate_script_model(script: Script) -> None:
    """Project a Script model to its wire form and validate it.

    Raises jsonschema.ValidationError if the projected artifact is non-conformant.
    """
    validate_script(model_to_raw(script))


def validate_frames(data: list) -> None:
    """Validate a storyboard frame array against StoryboardFrames.v1.json."""
    _validate(data, "StoryboardFrames.v1.json")


def validate_transcription(data: dict) -> None:
    _validate(data, "TranscriptionProject.v1.json")
