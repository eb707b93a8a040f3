"""Versioned schema loaders, dumpers and validators."""

from docuscript.schemas.frames_v1 import dump_analysis, dump_frames, dump_storyboard, load_frames
from docuscript.schemas.script_v1 import dump_script, load_script, validate_script
from docuscript.schemas.transcription_v1 import load_transcription, validate_transcription

__all__ = [
    "load_script",
    "dump_script",
    "validate_script",
    "load_frames",
    "dump_frames",
    "dump_storyboard",
    "dump_analysis",
    "load_transcription",
    "validate_transcription",
]
