"""Rule-based editing suggestions for a single script element.

Each rule is independent: every rule that applies fires, none suppresses
another.  Confidence is a fixed constant per rule.  The passive-voice and
repetition rules are plain regex/word-count heuristics with no grammatical
analysis; their rewrites can be wrong.
"""
from __future__ import annotations

import re
from collections import Counter
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

from docuscript.composition.models import AutoSuggestion, ElementType, ScriptElement

_PROSE_TYPES = frozenset({ElementType.DIALOGUE, ElementType.VOICEOVER})

_STRONGER_WORDS: Mapping[str, str] = MappingProxyType({
    "good": "excellent",
    "bad": "terrible",
    "big": "enormous",
    "small": "tiny",
    "fast": "rapid",
    "slow": "sluggish",
    "hot": "scorching",
    "cold": "freezing",
    "happy": "ecstatic",
    "sad": "devastated",
})

_SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "said": ("stated", "mentioned", "declared", "expressed"),
    "look": ("glance", "gaze", "observe", "examine"),
    "walk": ("stroll", "stride", "march", "pace"),
    "think": ("consider", "ponder", "reflect", "contemplate"),
    "show": ("display", "reveal", "demonstrate", "exhibit"),
})

_ACTION_EXPANSIONS: Mapping[str, str] = MappingProxyType({
    "walks": "walks purposefully across the room",
    "sits": "sits down slowly in the chair",
    "looks": "looks up with a concerned expression",
    "opens": "carefully opens the door",
    "closes": "gently closes the window",
})

_VERY_WORD = re.compile(r"\bvery (\w+)")
_PASSIVE = re.compile(r"\b(was|were|is|are|been)\s+\w+ed\b")
_PASSIVE_BY = re.compile(r"\b(?:was|were|is|are) (\w+ed) by\b")
_ALL_CAPS = re.compile(r"[A-Z\s]+")

_BRIEF_ACTION_LEN = 10


def stronger_word(word: str) -> str:
    """Stronger alternative for *word*, or *word* itself when none is known."""
    return _STRONGER_WORDS.get(word.lower(), word)


def convert_to_active_voice(text: str) -> str:
    """Naive rewrite: "was opened by" -> "opened".  Subjects are not swapped."""
    return _PASSIVE_BY.sub(r"\1", text)


def repeated_words(text: str) -> List[str]:
    """Whitespace tokens longer than 3 characters seen more than twice."""
    counts = Counter(text.lower().split())
    return [word for word, count in counts.items() if count > 2 and len(word) > 3]


def replace_repeated_words(text: str, words: Sequence[str]) -> str:
    """Swap every occurrence after the first for a cycling synonym.

    Words with no synonym list are left unchanged.
    """
    for word in words:
        synonyms = _SYNONYMS.get(word.lower())
        if not synonyms:
            continue
        seen = 0

        def _swap(match: "re.Match[str]") -> str:
            nonlocal seen
            seen += 1
            return synonyms[seen % len(synonyms)] if seen > 1 else match.group(0)

        text = re.sub(rf"\b{re.escape(word)}\b", _swap, text, flags=re.IGNORECASE)
    return text


def expand_action_description(content: str) -> str:
    return " ".join(_ACTION_EXPANSIONS.get(word, word) for word in content.lower().split(" "))


def generate_auto_suggestions(
    element: ScriptElement,
    context: Sequence[ScriptElement] = (),
) -> List[AutoSuggestion]:
    """Run every suggestion rule against *element*.

    *context* (the surrounding script) is accepted for interface stability;
    none of the current rules look at it.
    """
    suggestions: List[AutoSuggestion] = []
    content = element.content

    if element.type in _PROSE_TYPES:
        if _VERY_WORD.search(content):
            suggestions.append(AutoSuggestion(
                type="enhancement",
                text=_VERY_WORD.sub(lambda m: stronger_word(m.group(1)), content),
                confidence=0.8,
                context='Replace "very + adjective" with stronger alternatives',
                reasoning="Stronger vocabulary creates more impact",
            ))

        if _PASSIVE.search(content):
            suggestions.append(AutoSuggestion(
                type="enhancement",
                text=convert_to_active_voice(content),
                confidence=0.7,
                context="Convert passive voice to active voice",
                reasoning="Active voice is more engaging and direct",
            ))

        repeated = repeated_words(content)
        if repeated:
            suggestions.append(AutoSuggestion(
                type="enhancement",
                text=replace_repeated_words(content, repeated),
                confidence=0.6,
                context="Reduce word repetition",
                reasoning="Varied vocabulary improves readability",
            ))

    if element.type == ElementType.CHARACTER and not _ALL_CAPS.fullmatch(content):
        suggestions.append(AutoSuggestion(
            type="formatting",
            text=content.upper(),
            confidence=0.9,
            context="Character names should be in ALL CAPS",
            reasoning="Industry standard formatting",
        ))

    if element.type == ElementType.ACTION and len(content) < _BRIEF_ACTION_LEN:
        suggestions.append(AutoSuggestion(
            type="completion",
            text=expand_action_description(content),
            confidence=0.5,
            context="Expand brief action description",
            reasoning="More detailed actions help with visualization",
        ))

    return suggestions
