"""Shot, angle, movement and transition decision tables."""
from __future__ import annotations

import asyncio
import random

import pytest

from docuscript.storyboard.camera import (
    generate_shot_sequence,
    suggest_camera_angle,
    suggest_camera_movement,
    suggest_transition,
)
from docuscript.storyboard.frames import generate_frame_from_text
from docuscript.storyboard.models import (
    CameraAngle,
    CameraMovement,
    ShotType,
    TransitionType,
)


def _frame(description: str):
    return asyncio.run(generate_frame_from_text(description, rng=random.Random(0), delay=0))


class TestShotSequence:
    def test_cues_accumulate_in_fixed_order(self):
        sequence = generate_shot_sequence("A detail of the location where a character says hello")
        assert sequence == [ShotType.WIDE, ShotType.MEDIUM, ShotType.CLOSE_UP, ShotType.INSERT]

    def test_default_sequence(self):
        assert generate_shot_sequence("Rain on glass") == [
            ShotType.MEDIUM, ShotType.CLOSE_UP, ShotType.MEDIUM,
        ]

    def test_case_insensitive(self):
        assert generate_shot_sequence("The SETTING") == [ShotType.WIDE]


class TestCameraAngle:
    @pytest.mark.parametrize("text, expected", [
        ("An intimidating figure", CameraAngle.LOW_ANGLE),
        ("She feels small and overwhelmed", CameraAngle.HIGH_ANGLE),
        ("Chaos in the streets", CameraAngle.DUTCH_ANGLE),
        ("An overview of the camp", CameraAngle.BIRDS_EYE),
        ("A quiet kitchen", CameraAngle.EYE_LEVEL),
    ])
    def test_keywords(self, text, expected):
        assert suggest_camera_angle(text, ShotType.MEDIUM) == expected

    def test_extreme_wide_looks_down(self):
        assert suggest_camera_angle("A quiet kitchen", ShotType.EXTREME_WIDE) == CameraAngle.BIRDS_EYE

    def test_priority_order(self):
        assert suggest_camera_angle("power amid chaos", ShotType.MEDIUM) == CameraAngle.LOW_ANGLE


class TestCameraMovement:
    def test_tracking(self):
        assert suggest_camera_movement("The camera follows her", ShotType.MEDIUM) == CameraMovement.TRACKING

    def test_reveal_depends_on_shot(self):
        text = "The drawer reveals a letter"
        assert suggest_camera_movement(text, ShotType.CLOSE_UP) == CameraMovement.ZOOM_OUT
        assert suggest_camera_movement(text, ShotType.WIDE) == CameraMovement.PAN_RIGHT

    def test_zoom_in_and_handheld(self):
        assert suggest_camera_movement("An important clue", ShotType.MEDIUM) == CameraMovement.ZOOM_IN
        assert suggest_camera_movement("Dynamic energy", ShotType.MEDIUM) == CameraMovement.HANDHELD

    def test_static_default(self):
        assert suggest_camera_movement("A still pond", ShotType.MEDIUM) == CameraMovement.STATIC


class TestTransition:
    def test_no_next_frame_cuts(self):
        assert suggest_transition(_frame("A still pond")) == TransitionType.CUT

    def test_day_to_night_dissolves(self):
        assert suggest_transition(_frame("A sunny day"), _frame("Late at night")) == TransitionType.DISSOLVE

    def test_indoor_to_outdoor_fades(self):
        assert suggest_transition(_frame("An indoor studio"), _frame("The outdoor market")) == (
            TransitionType.FADE_OUT
        )

    def test_calm_to_action_cuts_even_with_same_shot(self):
        assert suggest_transition(_frame("A calm pond"), _frame("Sudden action")) == TransitionType.CUT

    def test_same_shot_type_dissolves(self):
        assert suggest_transition(_frame("A quiet street"), _frame("A quiet park")) == TransitionType.DISSOLVE

    def test_different_shot_type_cuts(self):
        assert suggest_transition(_frame("A character waits"), _frame("The location at noon")) == (
            TransitionType.CUT
        )
