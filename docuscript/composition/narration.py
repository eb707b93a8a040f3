"""Template-driven narration, transitions and narrative bridges.

Template choice is random; pass a seeded ``random.Random`` for reproducible
output.
"""
from __future__ import annotations

import random
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from docuscript.composition.models import NarrationStyle
from docuscript.ids import pick

_SENTENCE_BREAK = re.compile(r"[.!?]+")


@dataclass(frozen=True)
class NarrationTemplates:
    openings: Tuple[str, ...]
    transitions: Tuple[str, ...]
    closings: Tuple[str, ...]


NARRATION_TEMPLATES: Mapping[str, NarrationTemplates] = MappingProxyType({
    "documentary": NarrationTemplates(
        (
            "In a world where",
            "This is the story of",
            "What you're about to see",
            "Behind the scenes of",
            "The journey begins",
        ),
        (
            "But what happens next",
            "As we delve deeper",
            "The truth reveals",
            "Meanwhile",
            "In this moment",
        ),
        (
            "This is just the beginning",
            "The story continues",
            "What we've learned",
            "As we reflect on",
            "The impact remains",
        ),
    ),
    "commercial": NarrationTemplates(
        (
            "Imagine a world where",
            "What if we told you",
            "Experience the difference",
            "Discover the power of",
            "Transform your",
        ),
        (
            "That's why",
            "Because you deserve",
            "Now you can",
            "With our solution",
            "The choice is clear",
        ),
        (
            "Don't wait, act now",
            "Your journey starts here",
            "Make the change today",
            "Experience the difference",
            "Choose excellence",
        ),
    ),
    "narrative": NarrationTemplates(
        (
            "Once upon a time",
            "In the beginning",
            "Our story starts",
            "Long ago",
            "It all began when",
        ),
        (
            "Suddenly",
            "As fate would have it",
            "In that moment",
            "Without warning",
            "Then everything changed",
        ),
        (
            "And so our story ends",
            "The adventure continues",
            "What happens next",
            "The end... or is it?",
            "Their legacy lives on",
        ),
    ),
})


def split_sentences(content: str) -> List[str]:
    """Split on runs of . ! ? and return the trimmed, non-empty pieces."""
    return [s.strip() for s in _SENTENCE_BREAK.split(content) if s.strip()]


def generate_voiceover_narration(
    content: str,
    style: NarrationStyle = "documentary",
    *,
    rng: Optional[random.Random] = None,
) -> str:
    """Wrap *content* in a style-specific opening, transition and closing.

    1 sentence   -> "{opening} {s1}."
    2 sentences  -> "{opening} {s1}. {transition} {s2}."
    3+ sentences -> "{opening} {s1}. {middle}. {closing} {sN}."

    Sentence text is lower-cased.  Content with no sentences gives "".
    """
    sentences = [s.lower() for s in split_sentences(content)]
    if not sentences:
        return ""

    templates = NARRATION_TEMPLATES[style]
    opening = pick(templates.openings, rng)
    transition = pick(templates.transitions, rng)
    closing = pick(templates.closings, rng)

    if len(sentences) == 1:
        return f"{opening} {sentences[0]}."
    if len(sentences) == 2:
        return f"{opening} {sentences[0]}. {transition} {sentences[1]}."
    middle = ". ".join(sentences[1:-1])
    return f"{opening} {sentences[0]}. {middle}. {closing} {sentences[-1]}."


# ── Scene transitions ────────────────────────────────────────────────────────

GENERIC_TRANSITIONS: Tuple[str, ...] = (
    "CUT TO:",
    "FADE TO:",
    "DISSOLVE TO:",
    "MATCH CUT TO:",
    "SMASH CUT TO:",
    "JUMP CUT TO:",
    "WIPE TO:",
    "IRIS TO:",
)


def generate_scene_transitions(current_scene: str, next_scene: str) -> List[str]:
    """Transition lines suited to the move from *current_scene* to *next_scene*.

    Every matching rule contributes; with no match the first three generic
    transitions are returned.
    """
    current = current_scene.lower()
    upcoming = next_scene.lower()
    found: List[str] = []

    if "day" in current and "night" in upcoming:
        found += ["FADE TO BLACK:", "TIME CUT TO:"]
    if "indoor" in current and "outdoor" in upcoming:
        found += ["CUT TO EXTERIOR:", "MATCH CUT TO:"]
    if "close" in current and "wide" in upcoming:
        found += ["PULL BACK TO:", "ZOOM OUT TO:"]
    if "action" in current or "fast" in current:
        found += ["SMASH CUT TO:", "QUICK CUT TO:"]
    if "emotional" in current or "dramatic" in current:
        found += ["SLOW FADE TO:", "DISSOLVE TO:"]

    return found or list(GENERIC_TRANSITIONS[:3])


# ── Narrative bridges ────────────────────────────────────────────────────────

# (keyword in current scene, keyword in next scene, bridge line)
_KEYED_BRIDGES: Tuple[Tuple[str, str, str], ...] = (
    ("interview", "b-roll", "As [SUBJECT] explains, we see..."),
    ("action", "reflection", "In the aftermath of these events..."),
    ("past", "present", "Fast forward to today..."),
    ("problem", "solution", "But there was hope on the horizon..."),
    ("setup", "payoff", "Little did they know..."),
)

GENERIC_BRIDGES: Tuple[str, ...] = (
    "Meanwhile...",
    "At the same time...",
    "But the story doesn't end there...",
    "What happened next would change everything...",
    "As we'll soon discover...",
    "The plot thickens...",
    "In a surprising turn of events...",
    "Against all odds...",
)


def generate_narrative_bridges(
    scenes: Sequence[str],
    *,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """One bridge line per consecutive pair of scene descriptions.

    Keyword matching is case-sensitive; the first keyed pair that matches
    wins, otherwise a random generic bridge is used.
    """
    bridges: List[str] = []
    for current, upcoming in zip(scenes, scenes[1:]):
        for here, there, line in _KEYED_BRIDGES:
            if here in current and there in upcoming:
                bridges.append(line)
                break
        else:
            bridges.append(pick(GENERIC_BRIDGES, rng))
    return bridges
