"""Storyboard / transcript → Script composition package."""

from docuscript.composition.composer import (
    convert_storyboard_to_script,
    process_transcription,
)
from docuscript.composition.converter import apply_conversion_settings, convert_storyboard
from docuscript.composition.models import (
    ABTestVersion,
    AutoSuggestion,
    ConversionSettings,
    ElementType,
    Script,
    ScriptElement,
    StoryboardFrame,
    TranscriptionProject,
    TranscriptSegment,
)
from docuscript.composition.narration import generate_voiceover_narration
from docuscript.composition.suggestions import generate_auto_suggestions
from docuscript.composition.variations import generate_ab_test_versions, generate_variation

__all__ = [
    "convert_storyboard_to_script",
    "process_transcription",
    "apply_conversion_settings",
    "convert_storyboard",
    "generate_voiceover_narration",
    "generate_auto_suggestions",
    "generate_ab_test_versions",
    "generate_variation",
    "ABTestVersion",
    "AutoSuggestion",
    "ConversionSettings",
    "ElementType",
    "Script",
    "ScriptElement",
    "StoryboardFrame",
    "TranscriptionProject",
    "TranscriptSegment",
]
