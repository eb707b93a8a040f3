"""Shot, camera and transition decision tables.

Each function scans the lower-cased description for keywords in a fixed
priority order and returns the first match, or a fixed default.
"""
from __future__ import annotations

from typing import List, Optional

from docuscript.storyboard.models import (
    CameraAngle,
    CameraMovement,
    ShotType,
    StoryboardFrame,
    TransitionType,
)


def _any(text: str, *keywords: str) -> bool:
    return any(keyword in text for keyword in keywords)


def generate_shot_sequence(description: str) -> List[ShotType]:
    """Accumulate one shot per matching cue; medium/close-up/medium by default."""
    text = description.lower()
    sequence: List[ShotType] = []

    if _any(text, "location", "setting", "place"):
        sequence.append(ShotType.WIDE)
    if _any(text, "character", "person", "enters"):
        sequence.append(ShotType.MEDIUM)
    if _any(text, "says", "emotion", "reaction"):
        sequence.append(ShotType.CLOSE_UP)
    if _any(text, "object", "item", "detail"):
        sequence.append(ShotType.INSERT)

    return sequence or [ShotType.MEDIUM, ShotType.CLOSE_UP, ShotType.MEDIUM]


def suggest_camera_angle(description: str, shot_type: ShotType) -> CameraAngle:
    text = description.lower()
    if _any(text, "power", "authority", "intimidating"):
        return CameraAngle.LOW_ANGLE
    if _any(text, "vulnerable", "small", "overwhelmed"):
        return CameraAngle.HIGH_ANGLE
    if _any(text, "disorienting", "unstable", "chaos"):
        return CameraAngle.DUTCH_ANGLE
    if _any(text, "overview", "layout") or shot_type == ShotType.EXTREME_WIDE:
        return CameraAngle.BIRDS_EYE
    return CameraAngle.EYE_LEVEL


def suggest_camera_movement(description: str, shot_type: ShotType) -> CameraMovement:
    text = description.lower()
    if _any(text, "follows", "walking", "moving"):
        return CameraMovement.TRACKING
    if _any(text, "reveals", "shows", "discovers"):
        return CameraMovement.ZOOM_OUT if shot_type == ShotType.CLOSE_UP else CameraMovement.PAN_RIGHT
    if _any(text, "focuses", "emphasizes", "important"):
        return CameraMovement.ZOOM_IN
    if _any(text, "energy", "dynamic", "action"):
        return CameraMovement.HANDHELD
    return CameraMovement.STATIC


def suggest_transition(
    current: StoryboardFrame,
    upcoming: Optional[StoryboardFrame] = None,
) -> TransitionType:
    """Transition out of *current*; a plain cut when there is no next frame."""
    if upcoming is None:
        return TransitionType.CUT

    here = current.description.lower()
    there = upcoming.description.lower()

    # Time of day changes
    if ("day" in here and "night" in there) or ("night" in here and "day" in there):
        return TransitionType.DISSOLVE
    # Location changes
    if ("indoor" in here and "outdoor" in there) or ("outdoor" in here and "indoor" in there):
        return TransitionType.FADE_OUT
    # Energy jumps
    if ("calm" in here and "action" in there) or ("quiet" in here and "loud" in there):
        return TransitionType.CUT
    if current.shot_type == upcoming.shot_type:
        return TransitionType.DISSOLVE
    return TransitionType.CUT
