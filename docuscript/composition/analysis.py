"""First-pass script analysis attached to every composed script.

Readability figures are fixed placeholders apart from the word-count derived
ones; the pacing and dialogue figures are simple counts over element types.
"""
from __future__ import annotations

import math
from typing import List, Sequence

from docuscript.composition.models import (
    DialogueAnalysis,
    ElementType,
    PacingAnalysis,
    ReadabilityMetrics,
    ScriptAnalysis,
    ScriptElement,
    StructureAnalysis,
)

_READING_WPM = 200
_SPEAKING_WPM = 150


def _of_type(elements: Sequence[ScriptElement], element_type: ElementType) -> List[ScriptElement]:
    return [el for el in elements if el.type == element_type]


def analyze_script(elements: Sequence[ScriptElement]) -> ScriptAnalysis:
    total_words = sum(len(el.content.split()) for el in elements)
    dialogue = _of_type(elements, ElementType.DIALOGUE)
    actions = _of_type(elements, ElementType.ACTION)
    headings = _of_type(elements, ElementType.SCENE_HEADING)

    return ScriptAnalysis(
        readability=ReadabilityMetrics(
            flesch_kincaid_grade=8.5,
            flesch_reading_ease=65,
            average_words_per_sentence=12,
            average_syllables_per_word=1.5,
            complex_words=math.floor(total_words * 0.1),
            reading_time=total_words / _READING_WPM,
            speaking_time=total_words / _SPEAKING_WPM,
        ),
        pacing=PacingAnalysis(
            overall_pacing="moderate",
            dialogue_to_action_ratio=len(dialogue) / max(len(actions), 1),
            average_scene_length=len(elements) / max(len(headings), 1),
        ),
        structure=StructureAnalysis(),
        dialogue=DialogueAnalysis(
            total_lines=len(dialogue),
            average_line_length=sum(len(el.content) for el in dialogue) / max(len(dialogue), 1),
            naturalness=0.8,
            distinctiveness=0.7,
        ),
    )
