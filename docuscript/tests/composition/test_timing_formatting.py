"""Reading time, style lookup and first-pass analysis."""
from __future__ import annotations

import pytest

from docuscript.composition.analysis import analyze_script
from docuscript.composition.editing import new_element
from docuscript.composition.formatting import ELEMENT_FORMATTING, formatting_for
from docuscript.composition.models import ElementType
from docuscript.composition.timing import calculate_reading_time, make_timing


class TestReadingTime:
    def test_default_wpm(self):
        assert calculate_reading_time("one two three four five") == pytest.approx(1.5)

    def test_explicit_wpm(self):
        assert calculate_reading_time("one two three four", 120) == pytest.approx(2.0)

    def test_empty_text(self):
        assert calculate_reading_time("") == 0
        assert calculate_reading_time("   ") == 0

    def test_make_timing(self):
        timing = make_timing(2, 7, "a b", "fast")
        assert timing.duration == 5
        assert timing.voiceover_pacing == "fast"
        assert timing.estimated_reading_time == pytest.approx(0.6)


class TestFormatting:
    def test_scene_heading(self):
        style = formatting_for(ElementType.SCENE_HEADING)
        assert style.bold is True
        assert style.spacing == 1.5
        assert style.font_family == "Courier New"
        assert style.font_size == 12

    def test_shot(self):
        style = formatting_for(ElementType.SHOT)
        assert style.underline is True
        assert style.color == "#cc6600"

    def test_unlisted_type_falls_back_to_action(self):
        assert formatting_for(ElementType.B_ROLL) == ELEMENT_FORMATTING[ElementType.ACTION]
        assert formatting_for(ElementType.LOWER_THIRD) == formatting_for(ElementType.ACTION)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ELEMENT_FORMATTING[ElementType.TITLE] = formatting_for(ElementType.ACTION)  # type: ignore[index]


class TestAnalyzeScript:
    def test_empty_elements(self):
        analysis = analyze_script([])
        assert analysis.pacing.dialogue_to_action_ratio == 0
        assert analysis.pacing.average_scene_length == 0
        assert analysis.dialogue.total_lines == 0
        assert analysis.readability.reading_time == 0

    def test_counts(self):
        elements = [
            new_element(ElementType.SCENE_HEADING, "INT. LAB - DAY"),
            new_element(ElementType.ACTION, "Machines hum."),
            new_element(ElementType.DIALOGUE, "Hello."),
            new_element(ElementType.DIALOGUE, "Hi there."),
        ]
        analysis = analyze_script(elements)
        assert analysis.dialogue.total_lines == 2
        assert analysis.pacing.dialogue_to_action_ratio == 2
        assert analysis.pacing.average_scene_length == 4
        assert analysis.dialogue.average_line_length == pytest.approx((6 + 9) / 2)
        # 4 + 2 + 1 + 2 words
        assert analysis.readability.reading_time == pytest.approx(9 / 200)
