"""Script, storyboard-input and transcription data models.

These are the data contracts between the composer and the editor front end.
Field names serialize to camelCase (see ``CamelModel``); element types are a
closed enumeration so dispatch on them is exhaustive.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import ConfigDict

from docuscript.config import DEFAULT_CREATED_AT
from docuscript.model_base import CamelModel


# ── Elements ─────────────────────────────────────────────────────────────────


class ElementType(str, Enum):
    SCENE_HEADING = "scene-heading"
    ACTION = "action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"
    SHOT = "shot"
    VOICEOVER = "voiceover"
    INTERVIEW_QUESTION = "interview-question"
    INTERVIEW_RESPONSE = "interview-response"
    B_ROLL = "b-roll"
    MUSIC = "music"
    SOUND_EFFECT = "sound-effect"
    TITLE = "title"
    SUBTITLE = "subtitle"
    LOWER_THIRD = "lower-third"
    GRAPHICS = "graphics"
    MONTAGE = "montage"
    TIME_CUT = "time-cut"


Pacing = Literal["slow", "normal", "fast"]

ScriptType = Literal[
    "documentary", "narrative", "commercial", "interview",
    "voiceover", "treatment", "outline",
]

ScriptFormat = Literal["fountain", "final-draft", "celtx", "writersduet", "custom"]

NarrationStyle = Literal["documentary", "commercial", "narrative"]


class ElementFormatting(CamelModel):
    """Display style of one element.  Looked up by type, never computed."""

    model_config = ConfigDict(frozen=True)

    font_size: int = 12
    font_family: str = "Courier New"
    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: str = "#000000"
    background_color: Optional[str] = None
    alignment: Literal["left", "center", "right"] = "left"
    indent: int = 0
    spacing: float = 1


class TimingInfo(CamelModel):
    start_time: float
    end_time: float
    duration: float
    estimated_reading_time: float
    voiceover_pacing: Pacing = "normal"


class ScriptElement(CamelModel):
    """One formatted unit of screenplay text."""

    id: str
    type: ElementType
    content: str
    formatting: ElementFormatting
    timing: Optional[TimingInfo] = None
    notes: Optional[List[str]] = None
    locked: bool = False
    order: int
    parent_id: Optional[str] = None
    children: Optional[List[str]] = None


# ── Script ───────────────────────────────────────────────────────────────────


class BudgetCategory(CamelModel):
    name: str
    amount: float
    description: str = ""


class BudgetInfo(CamelModel):
    total: float
    breakdown: List[BudgetCategory] = []
    currency: str = "USD"


class ScriptMetadata(CamelModel):
    author: str = ""
    genre: List[str] = []
    logline: str = ""
    synopsis: str = ""
    target_length: int = 0
    estimated_runtime: float = 0
    budget: Optional[BudgetInfo] = None
    locations: List[str] = []
    characters: List[str] = []
    keywords: List[str] = []
    notes: str = ""


class PageMargins(CamelModel):
    top: float = 1
    bottom: float = 1
    left: float = 1.5
    right: float = 1


class ScriptSettings(CamelModel):
    auto_save: bool = True
    auto_format: bool = True
    spell_check: bool = True
    grammar_check: bool = True
    readability_analysis: bool = True
    collaborative_editing: bool = True
    version_control: bool = True
    export_formats: List[str] = ["pdf", "docx", "fountain"]
    default_font: str = "Courier New"
    default_font_size: int = 12
    page_margins: PageMargins = PageMargins()
    line_spacing: float = 1
    character_spacing: float = 0


class ReadabilityMetrics(CamelModel):
    flesch_kincaid_grade: float
    flesch_reading_ease: float
    average_words_per_sentence: float
    average_syllables_per_word: float
    complex_words: int
    reading_time: float
    speaking_time: float


class PacingAnalysis(CamelModel):
    overall_pacing: Literal["slow", "moderate", "fast", "varied"] = "moderate"
    scene_breakdown: List[Dict[str, Any]] = []
    dialogue_to_action_ratio: float = 0
    average_scene_length: float = 0
    pacing_issues: List[Dict[str, Any]] = []


class StructureAnalysis(CamelModel):
    acts: List[Dict[str, Any]] = []
    plot_points: List[Dict[str, Any]] = []
    character_arcs: List[Dict[str, Any]] = []
    themes: List[Dict[str, Any]] = []
    structural_issues: List[Dict[str, Any]] = []


class DialogueAnalysis(CamelModel):
    total_lines: int = 0
    average_line_length: float = 0
    character_voices: List[Dict[str, Any]] = []
    dialogue_issues: List[Dict[str, Any]] = []
    naturalness: float = 0
    distinctiveness: float = 0


class ScriptAnalysis(CamelModel):
    readability: ReadabilityMetrics
    pacing: PacingAnalysis
    structure: StructureAnalysis
    dialogue: DialogueAnalysis
    suggestions: List[Dict[str, Any]] = []
    issues: List[Dict[str, Any]] = []


class Script(CamelModel):
    """A complete formatted script: ordered elements plus derived metadata."""

    id: str
    title: str
    type: ScriptType = "documentary"
    format: ScriptFormat = "fountain"
    content: List[ScriptElement] = []
    metadata: ScriptMetadata = ScriptMetadata()
    versions: List[Dict[str, Any]] = []
    collaborators: List[Dict[str, Any]] = []
    settings: ScriptSettings = ScriptSettings()
    analysis: Optional[ScriptAnalysis] = None
    created_at: str = DEFAULT_CREATED_AT  # ISO 8601
    updated_at: str = DEFAULT_CREATED_AT


# ── Storyboard input ─────────────────────────────────────────────────────────


class VoiceoverCue(CamelModel):
    text: str
    speaker: str = "Narrator"
    tone: str = "neutral"
    pacing: Optional[Pacing] = None
    emphasis: List[str] = []


class DialogueCue(CamelModel):
    character: str
    text: str
    emotion: str = ""
    delivery: str = ""


class SoundCue(CamelModel):
    type: Literal["sfx", "ambient", "foley"] = "sfx"
    description: str
    volume: float = 1.0
    timing: Literal["sync", "async"] = "sync"


class MusicCue(CamelModel):
    type: Literal["score", "source", "theme"] = "score"
    description: str
    mood: str = ""
    volume: float = 1.0
    fade_in: bool = False
    fade_out: bool = False


class StoryboardFrame(CamelModel):
    """One storyboard frame as handed to the script composer.  Read-only input."""

    id: str = ""
    title: str
    description: str = ""
    shot_type: str = "medium"
    camera_angle: str = "eye-level"
    camera_movement: str = "static"
    duration: float = 0
    voiceover: Optional[VoiceoverCue] = None
    dialogue: Optional[List[DialogueCue]] = None
    sound_effects: Optional[List[SoundCue]] = None
    music: Optional[MusicCue] = None
    notes: str = ""
    order: int = 0


# ── Transcription input ──────────────────────────────────────────────────────


class TranscriptSegment(CamelModel):
    id: str = ""
    start_time: float
    end_time: float
    text: str
    speaker: Optional[str] = None
    confidence: float = 1.0
    edited: bool = False
    locked: bool = False
    notes: Optional[str] = None


class Speaker(CamelModel):
    id: str
    name: str
    color: str = "#000000"
    segments: int = 0
    total_duration: float = 0
    average_confidence: float = 0


class TranscriptionSettings(CamelModel):
    language: str = "en-US"
    speaker_diarization: bool = True
    punctuation: bool = True
    timestamps: bool = True
    confidence: bool = True
    filter_profanity: bool = False
    enhance_audio: bool = False
    custom_vocabulary: List[str] = []


class TranscriptionProject(CamelModel):
    id: str = ""
    name: str
    audio_url: str = ""
    duration: float = 0
    status: Literal[
        "uploading", "processing", "transcribing", "reviewing", "completed", "error",
    ] = "completed"
    transcript: List[TranscriptSegment] = []
    speakers: List[Speaker] = []
    settings: TranscriptionSettings = TranscriptionSettings()
    created_at: str = DEFAULT_CREATED_AT
    updated_at: str = DEFAULT_CREATED_AT


# ── A/B testing and suggestions ──────────────────────────────────────────────


class ABTestMetrics(CamelModel):
    readability_score: float = 0
    engagement_score: float = 0
    clarity_score: float = 0
    pacing_score: float = 0
    overall_score: float = 0
    test_duration: float = 0
    participant_count: int = 0


class ABTestVersion(CamelModel):
    id: str
    name: str
    description: str
    script: Script
    metrics: ABTestMetrics = ABTestMetrics()
    feedback: List[Dict[str, Any]] = []
    status: Literal["draft", "testing", "completed"] = "draft"
    created_at: str = DEFAULT_CREATED_AT


class AutoSuggestion(CamelModel):
    type: Literal["completion", "correction", "enhancement", "formatting"]
    text: str
    confidence: float
    context: str
    reasoning: str


class ConversionSettings(CamelModel):
    """Storyboard-converter options applied after composition."""

    include_voiceover: bool = True
    include_dialogue: bool = True
    include_sound_effects: bool = True
    include_music: bool = True
    include_camera_directions: bool = True
    include_transitions: bool = True
    generate_narration: bool = True
    narrative_style: NarrationStyle = "documentary"
