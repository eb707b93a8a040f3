"""Voiceover and audio cue drafting."""
from __future__ import annotations

import random

import pytest

from docuscript.storyboard.audio import (
    generate_audio_cues,
    generate_voiceover_cue,
    generate_voiceover_text,
    voiceover_tone,
)


class TestVoiceoverText:
    def test_character_sentence(self):
        assert generate_voiceover_text("A character walks in. Then leaves.") == (
            "We see a character walks in..."
        )

    def test_setting_sentence(self):
        assert generate_voiceover_text("The setting is a Barn") == (
            "The scene opens with the setting is a barn..."
        )

    def test_plain_sentence(self):
        assert generate_voiceover_text("Rain falls!") == "Rain falls..."

    def test_keyword_check_is_case_sensitive(self):
        assert generate_voiceover_text("Character enters") == "Character enters..."

    def test_no_sentences(self):
        assert generate_voiceover_text("...") == "Scene description..."
        assert generate_voiceover_text("") == "Scene description..."


class TestVoiceoverCue:
    def test_cue(self):
        cue = generate_voiceover_cue("A calm lake", 5)
        assert cue.duration == pytest.approx(4.0)
        assert cue.start_time == 0
        assert cue.speaker == "Narrator"
        assert cue.tone == "calm"

    def test_later_tone_overrides(self):
        assert voiceover_tone("calm but intense") == "calm"
        assert voiceover_tone("dramatic and mysterious") == "mysterious"
        assert voiceover_tone("a lake") == "neutral"


class TestAudioCues:
    def test_order_music_sfx_ambient(self):
        cues = generate_audio_cues("A dramatic car chase outside", 5, rng=random.Random(1))
        assert [(c.type, c.description) for c in cues] == [
            ("music", "Dramatic orchestral music"),
            ("sfx", "Car engine sound"),
            ("ambient", "Outdoor ambience"),
        ]
        assert cues[0].volume == 0.6
        assert cues[1].duration == pytest.approx(2.5)

    def test_door_and_phone_timing(self):
        door, phone = generate_audio_cues("A door slams, a phone", 5, rng=random.Random(1))
        assert (door.start_time, door.duration, door.volume) == pytest.approx((1.0, 2, 0.8))
        assert (phone.start_time, phone.duration, phone.volume) == pytest.approx((0, 3, 0.9))

    def test_room_substring(self):
        cues = generate_audio_cues("A quiet bedroom", 5, rng=random.Random(1))
        assert [c.description for c in cues] == ["Room tone"]
        assert cues[0].volume == 0.2

    def test_no_cues(self):
        assert generate_audio_cues("A plain wall", 5) == []

    def test_ids_unique(self):
        cues = generate_audio_cues("calm peaceful dramatic car door phone outdoor indoor", 5)
        assert len({c.id for c in cues}) == len(cues) == 7
