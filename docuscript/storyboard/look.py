"""Color palette and lighting presets keyed by mood keywords."""
from __future__ import annotations

from typing import Optional

from docuscript.storyboard.models import ColorPalette, LightingSetup, LightSource

# ── Palettes ─────────────────────────────────────────────────────────────────

PALETTE_DRAMATIC = ColorPalette(
    primary="#1a1a1a", secondary="#8b0000", accent="#ffd700", background="#2c2c2c", mood="dramatic",
)
PALETTE_ROMANTIC = ColorPalette(
    primary="#ff69b4", secondary="#ffc0cb", accent="#ffffff", background="#ffe4e1", mood="warm",
)
PALETTE_MYSTERIOUS = ColorPalette(
    primary="#191970", secondary="#483d8b", accent="#9370db", background="#0f0f23", mood="cool",
)
PALETTE_NATURE = ColorPalette(
    primary="#228b22", secondary="#32cd32", accent="#ffff00", background="#f0fff0", mood="natural",
)
PALETTE_URBAN = ColorPalette(
    primary="#708090", secondary="#2f4f4f", accent="#00ced1", background="#f5f5f5", mood="cool",
)
PALETTE_NEUTRAL = ColorPalette(
    primary="#333333", secondary="#666666", accent="#0066cc", background="#ffffff", mood="neutral",
)


def generate_color_palette(description: str, mood: Optional[str] = None) -> ColorPalette:
    """Pick a palette; an explicit *mood* wins over keywords at the same priority."""
    text = description.lower()
    if mood == "dramatic" or "dramatic" in text or "intense" in text:
        return PALETTE_DRAMATIC
    if mood == "romantic" or "love" in text or "romantic" in text:
        return PALETTE_ROMANTIC
    if mood == "mysterious" or "mystery" in text or "dark" in text:
        return PALETTE_MYSTERIOUS
    if "nature" in text or "outdoor" in text or "forest" in text:
        return PALETTE_NATURE
    if "urban" in text or "city" in text or "modern" in text:
        return PALETTE_URBAN
    return PALETTE_NEUTRAL


# ── Lighting ─────────────────────────────────────────────────────────────────


def _light(intensity: float, color: str, direction: str, softness: float) -> LightSource:
    return LightSource(intensity=intensity, color=color, direction=direction, softness=softness)


LIGHTING_NIGHT = LightingSetup(
    mood="dramatic",
    key_light=_light(0.8, "#ffffff", "side", 0.3),
    fill_light=_light(0.2, "#4169e1", "front", 0.8),
    back_light=_light(0.6, "#ffffff", "back", 0.4),
    practical_lights=[_light(0.5, "#ffa500", "point", 0.6)],
)
LIGHTING_GOLDEN_HOUR = LightingSetup(
    mood="golden-hour",
    key_light=_light(0.9, "#ffa500", "side", 0.7),
    fill_light=_light(0.4, "#ffb347", "front", 0.8),
    back_light=_light(0.8, "#ff6347", "back", 0.6),
)
LIGHTING_BRIGHT = LightingSetup(
    mood="bright",
    key_light=_light(1.0, "#ffffff", "top", 0.9),
    fill_light=_light(0.6, "#f0f8ff", "front", 0.9),
    back_light=_light(0.3, "#ffffff", "back", 0.8),
)
LIGHTING_MOODY = LightingSetup(
    mood="dramatic",
    key_light=_light(0.7, "#ffffff", "side", 0.2),
    fill_light=_light(0.1, "#4682b4", "front", 0.9),
    back_light=_light(0.9, "#ffffff", "back", 0.1),
)
LIGHTING_NATURAL = LightingSetup(
    mood="natural",
    key_light=_light(0.8, "#ffffff", "front", 0.7),
    fill_light=_light(0.4, "#f0f8ff", "side", 0.8),
    back_light=_light(0.5, "#ffffff", "back", 0.6),
)


def _pick_lighting(description: str, time_of_day: Optional[str]) -> LightingSetup:
    text = description.lower()
    if time_of_day == "night" or "night" in text or "dark" in text:
        return LIGHTING_NIGHT
    if time_of_day == "golden-hour" or "sunset" in text or "sunrise" in text:
        return LIGHTING_GOLDEN_HOUR
    if "bright" in text or "day" in text or "sunny" in text:
        return LIGHTING_BRIGHT
    if "moody" in text or "atmospheric" in text or "dramatic" in text:
        return LIGHTING_MOODY
    return LIGHTING_NATURAL


def generate_lighting_setup(description: str, time_of_day: Optional[str] = None) -> LightingSetup:
    """A private copy of the matching preset; its light list is the caller's to edit."""
    return _pick_lighting(description, time_of_day).model_copy(deep=True)
