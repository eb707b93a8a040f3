"""Keyword scoring of scene descriptions."""
from __future__ import annotations

import asyncio

import pytest

from docuscript.storyboard.analyzer import (
    analyze_text_description,
    score_description,
    score_narrative_pacing,
    score_scene_complexity,
    score_technical_feasibility,
    score_visual_interest,
)

CHASE = "A dramatic night chase scene with multiple characters"


class TestScores:
    def test_chase_example(self):
        analysis = score_description(CHASE)
        assert analysis.scene_complexity == 0.5
        assert analysis.visual_interest == 0.55
        assert analysis.narrative_pacing == 0.5
        assert analysis.technical_feasibility == 0.8
        assert "Night scenes require additional lighting equipment" in analysis.warnings
        assert analysis.suggestions == []

    def test_empty_description(self):
        analysis = score_description("")
        assert analysis.scene_complexity == 0.3
        assert analysis.visual_interest == 0.4
        assert analysis.narrative_pacing == 0.5
        assert analysis.technical_feasibility == 1.0
        assert analysis.suggestions == [
            "Add more visual elements to enhance scene interest",
            "Consider dynamic camera movements to add energy",
        ]
        assert analysis.warnings == []

    def test_complexity_matches_substrings(self):
        assert score_scene_complexity("endless actions") == 0.5

    def test_visual_matches_whole_tokens(self):
        assert score_visual_interest("dark, stormy") == 0.4
        assert score_visual_interest("dark and stormy") == 0.55

    def test_keyword_counted_once(self):
        assert score_narrative_pacing("then then then") == 0.6

    def test_upper_bounds(self):
        assert score_scene_complexity("multiple crowd action movement complex detailed") == 1.0
        assert score_visual_interest("color light shadow bright dark beautiful stunning dramatic") == 1.0
        assert score_narrative_pacing("suddenly slowly quickly then meanwhile after") == 1.0

    def test_feasibility_floor(self):
        assert score_technical_feasibility("explosion flying underwater fire crowd night") == 0.3

    @pytest.mark.parametrize("text", [
        "",
        CHASE,
        "Suddenly an explosion lights the dark crowd with fire",
        "multiple crowd action movement complex detailed explosion flying",
    ])
    def test_ranges(self, text):
        analysis = score_description(text)
        for score in (analysis.scene_complexity, analysis.visual_interest, analysis.narrative_pacing):
            assert 0 <= score <= 1
        assert 0.3 <= analysis.technical_feasibility <= 1


class TestSuggestionsAndWarnings:
    def test_two_complexity_hits_stay_at_threshold(self):
        analysis = score_description("a complex crowd")
        assert analysis.scene_complexity == 0.7
        assert "Consider breaking this complex scene into multiple shots" not in analysis.suggestions

    def test_high_complexity(self):
        analysis = score_description("multiple complex detailed shots")
        assert analysis.suggestions[:2] == [
            "Consider breaking this complex scene into multiple shots",
            "Use establishing shots to orient the audience",
        ]

    def test_dialogue_and_action_suggestions(self):
        analysis = score_description("dialogue during the action, bright light")
        assert "Plan for over-the-shoulder shots during conversation" in analysis.suggestions
        assert "Use multiple angles to capture action sequence" in analysis.suggestions

    def test_warnings(self):
        analysis = score_description("a crowd in the rain at night, fire explosion")
        assert analysis.warnings == [
            "This scene may require significant budget and planning",
            "Night scenes require additional lighting equipment",
            "Crowd scenes require extensive coordination and permits",
            "Water scenes require waterproof equipment and safety measures",
        ]


class TestAsyncAnalysis:
    def test_matches_sync_scoring(self):
        result = asyncio.run(analyze_text_description(CHASE, delay=0))
        assert result == score_description(CHASE)

    def test_repeat_calls_identical(self):
        first = asyncio.run(analyze_text_description(CHASE, delay=0))
        second = asyncio.run(analyze_text_description(CHASE, delay=0.01))
        assert first == second
