"""Transcription project schema v1.0.0."""
from __future__ import annotations

from typing import List

from pydantic import ValidationError

from docuscript.composition.models import TranscriptionProject
from docuscript.schemas.script_v1 import Source, read_source

SCHEMA_VERSION = "1.0.0"


def load_transcription(source: Source) -> TranscriptionProject:
    """Parse a TranscriptionProject from JSON string, bytes, dict, or file Path.

    Raises:
        ValidationError: data does not conform to the project schema.
        FileNotFoundError: Path does not exist.
    """
    return TranscriptionProject.model_validate(read_source(source))


def validate_transcription(data: dict) -> List[str]:
    try:
        TranscriptionProject.model_validate(data)
        return []
    except ValidationError as exc:
        return [f"{e['loc']}: {e['msg']}" for e in exc.errors()]
