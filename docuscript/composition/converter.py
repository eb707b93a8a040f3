"""Storyboard converter: composition plus the converter's output options."""
from __future__ import annotations

import asyncio
import random
from typing import FrozenSet, Optional, Sequence, Set

from loguru import logger

from docuscript import config
from docuscript.composition.composer import convert_storyboard_to_script
from docuscript.composition.editing import renumber_elements
from docuscript.composition.models import (
    ConversionSettings,
    ElementType,
    NarrationStyle,
    Script,
    ScriptElement,
    StoryboardFrame,
)
from docuscript.composition.narration import generate_voiceover_narration
from docuscript.config import DEFAULT_CREATED_AT

_DIALOGUE_TYPES: FrozenSet[ElementType] = frozenset({
    ElementType.CHARACTER,
    ElementType.PARENTHETICAL,
    ElementType.DIALOGUE,
})


def _excluded_types(settings: ConversionSettings) -> Set[ElementType]:
    excluded: Set[ElementType] = set()
    if not settings.include_voiceover:
        excluded.add(ElementType.VOICEOVER)
    if not settings.include_dialogue:
        excluded |= _DIALOGUE_TYPES
    if not settings.include_sound_effects:
        excluded.add(ElementType.SOUND_EFFECT)
    if not settings.include_music:
        excluded.add(ElementType.MUSIC)
    if not settings.include_camera_directions:
        excluded.add(ElementType.SHOT)
    if not settings.include_transitions:
        excluded.add(ElementType.TRANSITION)
    return excluded


def narrate_voiceover(
    element: ScriptElement,
    style: NarrationStyle,
    rng: Optional[random.Random] = None,
) -> ScriptElement:
    """Rewrite the body of a voiceover element; the "NAME (V.O.)" header stays."""
    header, _, body = element.content.partition("\n")
    if not body:
        return element
    narrated = generate_voiceover_narration(body, style, rng=rng)
    return element.model_copy(update={"content": f"{header}\n{narrated}"})


def apply_conversion_settings(
    script: Script,
    settings: ConversionSettings,
    *,
    rng: Optional[random.Random] = None,
) -> Script:
    """Narrate voiceovers and drop excluded element kinds, then renumber."""
    excluded = _excluded_types(settings)
    elements = []
    for element in script.content:
        if element.type in excluded:
            continue
        if settings.generate_narration and element.type == ElementType.VOICEOVER:
            element = narrate_voiceover(element, settings.narrative_style, rng)
        elements.append(element)

    dropped = len(script.content) - len(elements)
    if dropped:
        logger.debug(f"Conversion settings removed {dropped} elements")
    return script.model_copy(update={"content": renumber_elements(elements)}, deep=True)


async def convert_storyboard(
    frames: Sequence[StoryboardFrame],
    settings: Optional[ConversionSettings] = None,
    *,
    rng: Optional[random.Random] = None,
    delay: Optional[float] = None,
    created_at: str = DEFAULT_CREATED_AT,
) -> Script:
    """Full converter run: simulated processing delay, compose, apply settings."""
    await asyncio.sleep(config.CONVERSION_DELAY_SEC if delay is None else delay)
    script = convert_storyboard_to_script(frames, rng=rng, created_at=created_at)
    return apply_conversion_settings(script, settings or ConversionSettings(), rng=rng)
