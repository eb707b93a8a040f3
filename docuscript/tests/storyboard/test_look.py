"""Palette and lighting presets."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from docuscript.storyboard.look import (
    LIGHTING_BRIGHT,
    LIGHTING_GOLDEN_HOUR,
    LIGHTING_MOODY,
    LIGHTING_NATURAL,
    LIGHTING_NIGHT,
    PALETTE_DRAMATIC,
    PALETTE_MYSTERIOUS,
    PALETTE_NATURE,
    PALETTE_NEUTRAL,
    PALETTE_ROMANTIC,
    PALETTE_URBAN,
    generate_color_palette,
    generate_lighting_setup,
)


class TestColorPalette:
    @pytest.mark.parametrize("text, expected", [
        ("An intense standoff", PALETTE_DRAMATIC),
        ("Two people in love", PALETTE_ROMANTIC),
        ("A mystery unfolds", PALETTE_MYSTERIOUS),
        ("Deep in the forest", PALETTE_NATURE),
        ("City traffic", PALETTE_URBAN),
        ("A plain wall", PALETTE_NEUTRAL),
    ])
    def test_keywords(self, text, expected):
        assert generate_color_palette(text) == expected

    def test_explicit_mood(self):
        assert generate_color_palette("A plain wall", mood="romantic") == PALETTE_ROMANTIC

    def test_keyword_priority(self):
        assert generate_color_palette("dramatic love in the city") == PALETTE_DRAMATIC

    def test_presets_are_frozen(self):
        with pytest.raises(ValidationError):
            PALETTE_NEUTRAL.primary = "#000000"


class TestLighting:
    @pytest.mark.parametrize("text, expected", [
        ("Streets at night", LIGHTING_NIGHT),
        ("A sunset over the bay", LIGHTING_GOLDEN_HOUR),
        ("A sunny beach", LIGHTING_BRIGHT),
        ("A moody bar", LIGHTING_MOODY),
        ("A plain wall", LIGHTING_NATURAL),
    ])
    def test_keywords(self, text, expected):
        assert generate_lighting_setup(text) == expected

    def test_time_of_day_override(self):
        assert generate_lighting_setup("A plain wall", time_of_day="golden-hour") == LIGHTING_GOLDEN_HOUR
        assert generate_lighting_setup("A sunny beach", time_of_day="night") == LIGHTING_NIGHT

    def test_night_has_practical_light(self):
        assert len(LIGHTING_NIGHT.practical_lights) == 1
        assert LIGHTING_NIGHT.mood == "dramatic"

    def test_returns_private_copy(self):
        lighting = generate_lighting_setup("Streets at night")
        assert lighting == LIGHTING_NIGHT
        assert lighting is not LIGHTING_NIGHT
        lighting.practical_lights.append(lighting.key_light)
        assert len(LIGHTING_NIGHT.practical_lights) == 1
        assert len(generate_lighting_setup("An alley at night").practical_lights) == 1
