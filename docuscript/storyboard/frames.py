"""Compose analysis and decision tables into visual storyboard frames.

``timestamp`` is caller-supplied (defaults to 0) so output depends only on
the text, the rng and the arguments.
"""
from __future__ import annotations

import random
from typing import List, Optional

from loguru import logger

from docuscript import config
from docuscript.ids import make_id
from docuscript.storyboard.analyzer import analyze_text_description
from docuscript.storyboard.audio import SENTENCE_SPLIT, generate_audio_cues, generate_voiceover_cue
from docuscript.storyboard.camera import (
    generate_shot_sequence,
    suggest_camera_angle,
    suggest_camera_movement,
    suggest_transition,
)
from docuscript.storyboard.look import generate_color_palette, generate_lighting_setup
from docuscript.storyboard.models import (
    CanvasData,
    CanvasDimensions,
    StoryboardFrame,
    TransitionType,
)
from docuscript.storyboard.staging import generate_character_positions, generate_props

MIN_SCENE_CHARS = 10
MAX_EXTRA_SHOTS = 4


def blank_canvas() -> CanvasData:
    return CanvasData(
        objects=[],
        background=config.CANVAS_BACKGROUND,
        dimensions=CanvasDimensions(width=config.CANVAS_WIDTH, height=config.CANVAS_HEIGHT),
    )


async def generate_frame_from_text(
    description: str,
    index: int = 0,
    *,
    rng: Optional[random.Random] = None,
    delay: Optional[float] = None,
    timestamp: int = 0,
) -> StoryboardFrame:
    """Draft one frame titled ``Scene {index + 1}`` from *description*."""
    analysis = await analyze_text_description(description, delay=delay)
    shot_type = generate_shot_sequence(description)[0]
    duration = config.DEFAULT_FRAME_DURATION_SEC

    return StoryboardFrame(
        id=make_id(rng),
        title=f"Scene {index + 1}",
        description=description,
        shot_type=shot_type,
        camera_angle=suggest_camera_angle(description, shot_type),
        camera_movement=suggest_camera_movement(description, shot_type),
        lighting=generate_lighting_setup(description),
        color_palette=generate_color_palette(description),
        characters=generate_character_positions(description, rng=rng),
        props=generate_props(description, rng=rng),
        transition=TransitionType.CUT,
        voiceover=generate_voiceover_cue(description, duration),
        audio_cues=generate_audio_cues(description, duration, rng=rng),
        duration=duration,
        notes="; ".join(analysis.suggestions),
        canvas=blank_canvas(),
        timestamp=timestamp,
    )


def split_scenes(text: str) -> List[str]:
    """Sentence fragments long enough to stand as a scene, stripped."""
    return [
        fragment.strip()
        for fragment in SENTENCE_SPLIT.split(text)
        if len(fragment.strip()) > MIN_SCENE_CHARS
    ]


async def generate_storyboard_from_text(
    text: str,
    *,
    rng: Optional[random.Random] = None,
    delay: Optional[float] = None,
    timestamp: int = 0,
) -> List[StoryboardFrame]:
    """One frame per scene sentence, capped at ``config.MAX_GENERATED_FRAMES``.

    A lone frame is expanded into a short shot sequence drawn from the whole
    text.  Transitions are then chosen pairwise; the last frame keeps a cut.
    """
    scenes = split_scenes(text)[: config.MAX_GENERATED_FRAMES]
    frames: List[StoryboardFrame] = []
    for index, scene in enumerate(scenes):
        frames.append(
            await generate_frame_from_text(
                scene, index, rng=rng, delay=delay, timestamp=timestamp,
            )
        )

    if len(frames) == 1:
        base = frames[0]
        sequence = generate_shot_sequence(text)
        for i in range(1, min(len(sequence), MAX_EXTRA_SHOTS)):
            frames.append(
                base.model_copy(
                    update={
                        "id": make_id(rng),
                        "title": f"{base.title} - Shot {i + 1}",
                        "shot_type": sequence[i],
                        "camera_angle": suggest_camera_angle(text, sequence[i]),
                        "camera_movement": suggest_camera_movement(text, sequence[i]),
                        "timestamp": timestamp + i,
                    },
                    deep=True,
                )
            )

    for current, upcoming in zip(frames, frames[1:]):
        current.transition = suggest_transition(current, upcoming)

    logger.debug(f"Generated {len(frames)} storyboard frames from {len(scenes)} scenes")
    return frames
