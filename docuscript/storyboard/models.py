"""Visual storyboard data models produced by the text analyzer.

Closed enumerations for shot, angle, movement and transition values; every
other field mirrors the storyboard editor's frame shape.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import ConfigDict

from docuscript.model_base import CamelModel


class ShotType(str, Enum):
    EXTREME_WIDE = "extreme-wide"
    WIDE = "wide"
    MEDIUM_WIDE = "medium-wide"
    MEDIUM = "medium"
    MEDIUM_CLOSE = "medium-close"
    CLOSE_UP = "close-up"
    EXTREME_CLOSE_UP = "extreme-close-up"
    OVER_SHOULDER = "over-shoulder"
    TWO_SHOT = "two-shot"
    INSERT = "insert"


class CameraAngle(str, Enum):
    EYE_LEVEL = "eye-level"
    HIGH_ANGLE = "high-angle"
    LOW_ANGLE = "low-angle"
    BIRDS_EYE = "birds-eye"
    WORMS_EYE = "worms-eye"
    DUTCH_ANGLE = "dutch-angle"
    OVERHEAD = "overhead"


class CameraMovement(str, Enum):
    STATIC = "static"
    PAN_LEFT = "pan-left"
    PAN_RIGHT = "pan-right"
    TILT_UP = "tilt-up"
    TILT_DOWN = "tilt-down"
    ZOOM_IN = "zoom-in"
    ZOOM_OUT = "zoom-out"
    DOLLY_IN = "dolly-in"
    DOLLY_OUT = "dolly-out"
    TRACKING = "tracking"
    HANDHELD = "handheld"


class TransitionType(str, Enum):
    CUT = "cut"
    FADE_IN = "fade-in"
    FADE_OUT = "fade-out"
    DISSOLVE = "dissolve"
    WIPE = "wipe"
    IRIS = "iris"
    MATCH_CUT = "match-cut"
    JUMP_CUT = "jump-cut"


Facing = Literal["left", "right", "forward", "back"]


class LightSource(CamelModel):
    model_config = ConfigDict(frozen=True)

    intensity: float
    color: str
    direction: str
    softness: float


class LightingSetup(CamelModel):
    model_config = ConfigDict(frozen=True)

    mood: Literal["bright", "dim", "dramatic", "natural", "artificial", "golden-hour", "blue-hour"]
    key_light: LightSource
    fill_light: LightSource
    back_light: LightSource
    practical_lights: List[LightSource] = []


class ColorPalette(CamelModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str
    background: str
    mood: Literal[
        "warm", "cool", "neutral", "vibrant", "muted", "monochrome", "dramatic", "natural",
    ]


class CharacterPosition(CamelModel):
    id: str
    name: str
    x: float
    y: float
    facing: Facing
    action: str
    emotion: str


class PropItem(CamelModel):
    id: str
    name: str
    x: float
    y: float
    importance: Literal["primary", "secondary", "background"]


class VoiceoverCue(CamelModel):
    text: str
    start_time: float = 0
    duration: float
    speaker: str = "Narrator"
    tone: str = "neutral"


class AudioCue(CamelModel):
    id: str
    type: Literal["music", "sfx", "ambient"]
    description: str
    start_time: float
    duration: float
    volume: float


class CanvasObject(CamelModel):
    id: str
    type: Literal["character", "prop", "text", "shape", "arrow"]
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0
    color: str = "#000000"
    text: Optional[str] = None
    shape: Optional[str] = None
    z_index: int = 0


class CanvasDimensions(CamelModel):
    width: int
    height: int


class CanvasData(CamelModel):
    objects: List[CanvasObject] = []
    background: str
    dimensions: CanvasDimensions


class StoryboardFrame(CamelModel):
    """One visual storyboard frame drafted from a text description."""

    id: str
    title: str
    description: str
    shot_type: ShotType
    camera_angle: CameraAngle
    camera_movement: CameraMovement
    lighting: LightingSetup
    color_palette: ColorPalette
    characters: List[CharacterPosition] = []
    props: List[PropItem] = []
    transition: TransitionType = TransitionType.CUT
    voiceover: VoiceoverCue
    audio_cues: List[AudioCue] = []
    duration: float
    notes: str = ""
    canvas: CanvasData
    timestamp: int = 0


class AIAnalysis(CamelModel):
    """Keyword-derived production scores for one description.

    scene_complexity, visual_interest and narrative_pacing lie in [0, 1];
    technical_feasibility lies in [0.3, 1].
    """

    scene_complexity: float
    visual_interest: float
    narrative_pacing: float
    technical_feasibility: float
    suggestions: List[str] = []
    warnings: List[str] = []
