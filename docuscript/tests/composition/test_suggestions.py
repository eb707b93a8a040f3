"""Auto-suggestion rule tests."""
from __future__ import annotations

from docuscript.composition.formatting import formatting_for
from docuscript.composition.models import ElementType, ScriptElement
from docuscript.composition.suggestions import (
    convert_to_active_voice,
    expand_action_description,
    generate_auto_suggestions,
    replace_repeated_words,
    repeated_words,
)


def _element(element_type: ElementType, content: str) -> ScriptElement:
    return ScriptElement(
        id="e001",
        type=element_type,
        content=content,
        formatting=formatting_for(element_type),
        order=0,
    )


class TestProseRules:
    def test_very_adjective_replaced(self):
        suggestions = generate_auto_suggestions(_element(ElementType.DIALOGUE, "It was very good"))
        assert len(suggestions) == 1
        assert suggestions[0].type == "enhancement"
        assert suggestions[0].text == "It was excellent"
        assert suggestions[0].confidence == 0.8

    def test_very_unknown_adjective_keeps_word(self):
        suggestions = generate_auto_suggestions(_element(ElementType.VOICEOVER, "A very odd day"))
        assert suggestions[0].text == "A odd day"

    def test_very_inside_word_ignored(self):
        assert generate_auto_suggestions(_element(ElementType.DIALOGUE, "Every good thing")) == []

    def test_passive_voice(self):
        suggestions = generate_auto_suggestions(
            _element(ElementType.DIALOGUE, "The door was opened by the guard"),
        )
        assert len(suggestions) == 1
        assert suggestions[0].text == "The door opened the guard"
        assert suggestions[0].confidence == 0.7

    def test_repetition(self):
        suggestions = generate_auto_suggestions(_element(ElementType.DIALOGUE, "said said said it"))
        assert len(suggestions) == 1
        assert suggestions[0].text == "said declared expressed it"
        assert suggestions[0].confidence == 0.6

    def test_rules_fire_independently(self):
        content = "It was very bad and it was wanted wanted wanted"
        suggestions = generate_auto_suggestions(_element(ElementType.DIALOGUE, content))
        assert [s.confidence for s in suggestions] == [0.8, 0.7, 0.6]

    def test_prose_rules_skip_action(self):
        suggestions = generate_auto_suggestions(
            _element(ElementType.ACTION, "The door was very slowly opened by the guard"),
        )
        assert suggestions == []

    def test_clean_dialogue_has_no_suggestions(self):
        assert generate_auto_suggestions(_element(ElementType.DIALOGUE, "Look at that.")) == []


class TestCharacterAndAction:
    def test_character_not_caps(self):
        suggestions = generate_auto_suggestions(_element(ElementType.CHARACTER, "Ana"))
        assert len(suggestions) == 1
        assert suggestions[0].type == "formatting"
        assert suggestions[0].text == "ANA"
        assert suggestions[0].confidence == 0.9

    def test_character_caps_ok(self):
        assert generate_auto_suggestions(_element(ElementType.CHARACTER, "DR SMITH")) == []

    def test_brief_action_expanded(self):
        suggestions = generate_auto_suggestions(_element(ElementType.ACTION, "He walks"))
        assert len(suggestions) == 1
        assert suggestions[0].type == "completion"
        assert suggestions[0].text == "he walks purposefully across the room"
        assert suggestions[0].confidence == 0.5

    def test_long_action_not_expanded(self):
        assert generate_auto_suggestions(_element(ElementType.ACTION, "He walks home alone")) == []


class TestHelpers:
    def test_convert_to_active_voice_no_match(self):
        assert convert_to_active_voice("She opened the door") == "She opened the door"

    def test_repeated_words_threshold(self):
        assert repeated_words("look look look the the the") == ["look"]
        assert repeated_words("look look") == []

    def test_replace_repeated_words_without_synonyms(self):
        assert replace_repeated_words("boat boat boat", ["boat"]) == "boat boat boat"

    def test_expand_action_description(self):
        assert expand_action_description("She sits") == "she sits down slowly in the chair"
