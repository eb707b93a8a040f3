"""Narration templates, scene transitions and narrative bridges."""
from __future__ import annotations

import random

import pytest

from docuscript.composition.narration import (
    GENERIC_BRIDGES,
    GENERIC_TRANSITIONS,
    NARRATION_TEMPLATES,
    generate_narrative_bridges,
    generate_scene_transitions,
    generate_voiceover_narration,
    split_sentences,
)


class TestVoiceoverNarration:
    def test_single_sentence(self):
        result = generate_voiceover_narration("The valley wakes.", rng=random.Random(1))
        assert result.endswith(" the valley wakes.")
        opening = result[: -len(" the valley wakes.")]
        assert opening in NARRATION_TEMPLATES["documentary"].openings

    def test_two_sentences_use_transition(self):
        result = generate_voiceover_narration("Rain falls. Birds sing!", rng=random.Random(2))
        opening, rest = result.split(" rain falls. ", 1)
        assert opening in NARRATION_TEMPLATES["documentary"].openings
        assert rest.endswith(" birds sing.")
        assert rest[: -len(" birds sing.")] in NARRATION_TEMPLATES["documentary"].transitions

    def test_three_sentences_use_closing(self):
        result = generate_voiceover_narration("One. Two. Three.", style="narrative", rng=random.Random(3))
        templates = NARRATION_TEMPLATES["narrative"]
        assert any(result.startswith(f"{o} one. two. ") for o in templates.openings)
        assert any(result.endswith(f"{c} three.") for c in templates.closings)

    @pytest.mark.parametrize("style", ["documentary", "commercial", "narrative"])
    def test_styles_use_own_openings(self, style):
        result = generate_voiceover_narration("It works.", style=style, rng=random.Random(5))
        assert any(result.startswith(o) for o in NARRATION_TEMPLATES[style].openings)

    def test_empty_content_gives_empty_string(self):
        assert generate_voiceover_narration("") == ""
        assert generate_voiceover_narration("?!.") == ""

    def test_seeded_output_repeatable(self):
        a = generate_voiceover_narration("A. B. C. D.", rng=random.Random(9))
        b = generate_voiceover_narration("A. B. C. D.", rng=random.Random(9))
        assert a == b

    def test_split_sentences(self):
        assert split_sentences("  Hi there!! How are you?  Fine. ") == ["Hi there", "How are you", "Fine"]


class TestSceneTransitions:
    def test_day_to_night(self):
        assert generate_scene_transitions("day exterior", "night exterior") == [
            "FADE TO BLACK:", "TIME CUT TO:",
        ]

    def test_rules_accumulate(self):
        result = generate_scene_transitions("dramatic action indoor", "outdoor")
        assert result == [
            "CUT TO EXTERIOR:", "MATCH CUT TO:",
            "SMASH CUT TO:", "QUICK CUT TO:",
            "SLOW FADE TO:", "DISSOLVE TO:",
        ]

    def test_no_match_gives_first_three_generic(self):
        assert generate_scene_transitions("a room", "another room") == list(GENERIC_TRANSITIONS[:3])


class TestNarrativeBridges:
    def test_keyed_bridge(self):
        bridges = generate_narrative_bridges(["interview with expert", "b-roll of the lab"])
        assert bridges == ["As [SUBJECT] explains, we see..."]

    def test_matching_is_case_sensitive(self):
        bridges = generate_narrative_bridges(
            ["Interview with expert", "b-roll of the lab"], rng=random.Random(1),
        )
        assert len(bridges) == 1
        assert bridges[0] in GENERIC_BRIDGES

    def test_one_bridge_per_pair(self):
        scenes = ["the past", "the present", "a problem", "a solution"]
        bridges = generate_narrative_bridges(scenes, rng=random.Random(1))
        assert len(bridges) == 3
        assert bridges[0] == "Fast forward to today..."
        assert bridges[2] == "But there was hope on the horizon..."

    def test_fewer_than_two_scenes(self):
        assert generate_narrative_bridges([]) == []
        assert generate_narrative_bridges(["only"]) == []
