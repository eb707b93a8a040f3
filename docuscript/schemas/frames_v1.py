"""Storyboard frame schemas v1.0.0.

Two frame shapes travel through docuscript: the editor's storyboard frames
(input to script composition) and the visual frames the text analyzer
drafts.  Both serialize with the same canonical JSON rules as scripts.
"""
from __future__ import annotations

import json
from typing import List

from pydantic import TypeAdapter

from docuscript.composition.models import StoryboardFrame
from docuscript.schemas.script_v1 import Source, canonical_json, read_source
from docuscript.storyboard.models import AIAnalysis
from docuscript.storyboard.models import StoryboardFrame as VisualFrame

SCHEMA_VERSION = "1.0.0"

_FRAMES = TypeAdapter(List[StoryboardFrame])
_VISUAL_FRAMES = TypeAdapter(List[VisualFrame])


def load_frames(source: Source) -> List[StoryboardFrame]:
    """Parse a JSON array of storyboard frames.

    A single frame object is accepted and wrapped in a list.

    Raises:
        ValidationError: data does not conform to the frame schema.
    """
    data = read_source(source)
    if isinstance(data, dict):
        data = [data]
    return _FRAMES.validate_python(data)


def dump_frames(frames: List[StoryboardFrame], *, indent: int = 2) -> str:
    raw = json.loads(_FRAMES.dump_json(frames, by_alias=True, exclude_none=True))
    return canonical_json(raw, indent=indent)


def dump_storyboard(frames: List[VisualFrame], *, indent: int = 2) -> str:
    """Serialize analyzer-drafted frames; enum fields become their wire values."""
    raw = json.loads(_VISUAL_FRAMES.dump_json(frames, by_alias=True, exclude_none=True))
    return canonical_json(raw, indent=indent)


def dump_analysis(analysis: AIAnalysis, *, indent: int = 2) -> str:
    raw = json.loads(analysis.model_dump_json(by_alias=True, exclude_none=True))
    return canonical_json(raw, indent=indent)
