"""Keyword-driven text → visual storyboard analysis package."""

from docuscript.storyboard.analyzer import analyze_text_description, score_description
from docuscript.storyboard.audio import generate_audio_cues, generate_voiceover_cue
from docuscript.storyboard.camera import (
    generate_shot_sequence,
    suggest_camera_angle,
    suggest_camera_movement,
    suggest_transition,
)
from docuscript.storyboard.frames import generate_frame_from_text, generate_storyboard_from_text
from docuscript.storyboard.look import generate_color_palette, generate_lighting_setup
from docuscript.storyboard.models import (
    AIAnalysis,
    CameraAngle,
    CameraMovement,
    ShotType,
    StoryboardFrame,
    TransitionType,
)
from docuscript.storyboard.staging import generate_character_positions, generate_props

__all__ = [
    "analyze_text_description",
    "score_description",
    "generate_audio_cues",
    "generate_voiceover_cue",
    "generate_shot_sequence",
    "suggest_camera_angle",
    "suggest_camera_movement",
    "suggest_transition",
    "generate_frame_from_text",
    "generate_storyboard_from_text",
    "generate_color_palette",
    "generate_lighting_setup",
    "generate_character_positions",
    "generate_props",
    "AIAnalysis",
    "CameraAngle",
    "CameraMovement",
    "ShotType",
    "StoryboardFrame",
    "TransitionType",
]
