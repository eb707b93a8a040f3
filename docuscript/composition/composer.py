"""Storyboard → Script and Transcript → Script composition.

Public entry points
-------------------
    convert_storyboard_to_script(frames, ...) -> Script
    process_transcription(project, ...)      -> Script

Both are pure transforms: no I/O, no clock.  Ids are drawn from the injected
``random.Random`` (or the default source), so a seeded source gives
byte-identical output.

Ordering guarantees
-------------------
- ``order`` is one counter shared across the whole conversion, starting at 0
  and incremented once per emitted element.
- Elements are emitted in input order; nothing is sorted afterwards.
"""
from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence

from loguru import logger

from docuscript.composition.analysis import analyze_script
from docuscript.composition.formatting import formatting_for
from docuscript.composition.models import (
    ElementType,
    Pacing,
    Script,
    ScriptElement,
    ScriptMetadata,
    StoryboardFrame,
    TimingInfo,
    TranscriptionProject,
    TranscriptSegment,
)
from docuscript.composition.timing import make_timing
from docuscript.config import DEFAULT_CREATED_AT
from docuscript.ids import make_id

TRANSITION_TEXT = "CUT TO:"
LOW_CONFIDENCE_THRESHOLD = 0.8
LOW_CONFIDENCE_NOTE = "Low confidence transcription"
UNKNOWN_SPEAKER = "UNKNOWN"


class _ElementSink:
    """Accumulates elements and hands out consecutive order values."""

    def __init__(self, rng: Optional[random.Random]) -> None:
        self._rng = rng
        self.elements: List[ScriptElement] = []

    def emit(
        self,
        element_type: ElementType,
        content: str,
        *,
        timing: Optional[TimingInfo] = None,
        notes: Optional[List[str]] = None,
    ) -> None:
        self.elements.append(
            ScriptElement(
                id=make_id(self._rng),
                type=element_type,
                content=content,
                formatting=formatting_for(element_type),
                timing=timing,
                notes=notes,
                order=len(self.elements),
            )
        )


def extract_characters(elements: Sequence[ScriptElement]) -> List[str]:
    """Distinct character-element contents in first-seen order."""
    seen: Dict[str, None] = {}
    for element in elements:
        if element.type == ElementType.CHARACTER:
            seen.setdefault(element.content, None)
    return list(seen)


# ── Storyboard ───────────────────────────────────────────────────────────────


def _shot_line(frame: StoryboardFrame) -> str:
    # Only the first hyphen is spaced out: "birds-eye" -> "BIRDS EYE"
    line = f"{frame.shot_type.upper()} - {frame.camera_angle.replace('-', ' ', 1).upper()}"
    if frame.camera_movement != "static":
        line += f" - {frame.camera_movement.replace('-', ' ', 1).upper()}"
    return line


def _emit_frame(sink: _ElementSink, frame: StoryboardFrame, index: int, is_last: bool) -> None:
    """Emit one frame's elements in fixed beat order.

    Beat order:
        scene heading, shot, action, voiceover?, (character, parenthetical?,
        dialogue)*, sound effects?, music?, note?, transition (not after last)
    """
    sink.emit(ElementType.SCENE_HEADING, f"SCENE {index + 1} - {frame.title.upper()}")
    sink.emit(ElementType.SHOT, _shot_line(frame))
    sink.emit(
        ElementType.ACTION,
        frame.description,
        timing=make_timing(0, frame.duration, frame.description),
    )

    if frame.voiceover:
        vo = frame.voiceover
        pacing: Pacing = vo.pacing or "normal"
        sink.emit(
            ElementType.VOICEOVER,
            f"{vo.speaker.upper()} (V.O.)\n{vo.text}",
            timing=make_timing(0, frame.duration, vo.text, pacing),
        )

    for cue in frame.dialogue or []:
        sink.emit(ElementType.CHARACTER, cue.character.upper())
        if cue.delivery:
            sink.emit(ElementType.PARENTHETICAL, f"({cue.delivery})")
        sink.emit(
            ElementType.DIALOGUE,
            cue.text,
            timing=make_timing(0, frame.duration, cue.text),
        )

    if frame.sound_effects:
        cues = ", ".join(sfx.description for sfx in frame.sound_effects)
        sink.emit(ElementType.SOUND_EFFECT, f"SFX: {cues}")

    if frame.music:
        sink.emit(ElementType.MUSIC, f"MUSIC: {frame.music.description} ({frame.music.mood})")

    if frame.notes:
        sink.emit(ElementType.ACTION, f"NOTE: {frame.notes}", notes=["Production note"])

    if not is_last:
        sink.emit(ElementType.TRANSITION, TRANSITION_TEXT)


def convert_storyboard_to_script(
    frames: Sequence[StoryboardFrame],
    *,
    rng: Optional[random.Random] = None,
    created_at: str = DEFAULT_CREATED_AT,
) -> Script:
    """Convert ordered storyboard frames into a formatted documentary script.

    An empty frame sequence yields a script with no content elements.
    """
    sink = _ElementSink(rng)
    for index, frame in enumerate(frames):
        _emit_frame(sink, frame, index, is_last=index == len(frames) - 1)

    elements = sink.elements
    logger.debug(f"Composed {len(elements)} elements from {len(frames)} storyboard frames")

    return Script(
        id=make_id(rng),
        title="Storyboard Script",
        type="documentary",
        format="fountain",
        content=elements,
        metadata=ScriptMetadata(
            author="AI Script Generator",
            genre=["Documentary"],
            logline="Generated from storyboard frames",
            synopsis="A script automatically generated from visual storyboard elements",
            target_length=len(elements),
            estimated_runtime=sum(frame.duration for frame in frames),
            characters=extract_characters(elements),
            notes="Auto-generated from storyboard",
        ),
        analysis=analyze_script(elements),
        created_at=created_at,
        updated_at=created_at,
    )


# ── Transcription ────────────────────────────────────────────────────────────


def group_by_speaker(segments: Sequence[TranscriptSegment]) -> Dict[str, List[TranscriptSegment]]:
    """Group segments by speaker in first-seen speaker order.

    Segments keep their order inside each group, but groups are not
    re-interleaved: a later speaker's earlier segment still comes after every
    segment of the first speaker.
    """
    groups: Dict[str, List[TranscriptSegment]] = {}
    for segment in segments:
        groups.setdefault(segment.speaker or UNKNOWN_SPEAKER, []).append(segment)
    return groups


def process_transcription(
    project: TranscriptionProject,
    *,
    rng: Optional[random.Random] = None,
    created_at: str = DEFAULT_CREATED_AT,
) -> Script:
    """Convert a transcription project into an interview script."""
    sink = _ElementSink(rng)
    groups = group_by_speaker(project.transcript)

    for speaker, segments in groups.items():
        for segment in segments:
            timing = make_timing(segment.start_time, segment.end_time, segment.text)
            sink.emit(ElementType.CHARACTER, speaker.upper(), timing=timing)
            sink.emit(
                ElementType.DIALOGUE,
                segment.text,
                timing=timing,
                notes=(
                    [LOW_CONFIDENCE_NOTE]
                    if segment.confidence < LOW_CONFIDENCE_THRESHOLD
                    else None
                ),
            )

    elements = sink.elements
    logger.debug(
        f"Composed {len(elements)} elements from {len(project.transcript)} segments "
        f"across {len(groups)} speakers"
    )

    return Script(
        id=make_id(rng),
        title=project.name,
        type="interview",
        format="fountain",
        content=elements,
        metadata=ScriptMetadata(
            author="AI Transcription",
            genre=["Interview", "Documentary"],
            logline="Transcribed interview content",
            synopsis="Auto-generated script from audio transcription",
            target_length=len(elements),
            estimated_runtime=project.duration,
            characters=list(groups),
            notes="Generated from audio transcription",
        ),
        analysis=analyze_script(elements),
        created_at=created_at,
        updated_at=created_at,
    )
