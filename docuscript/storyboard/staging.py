"""Character and prop placement on the storyboard canvas.

Layout is a fixed heuristic, not a solver: no collision avoidance and no
adjustment for aspect ratio.  All characters sit on one line at 70% of the
canvas height.
"""
from __future__ import annotations

import random
import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from docuscript import config
from docuscript.ids import make_id, resolve_rng
from docuscript.storyboard.models import CharacterPosition, Facing, PropItem

CHARACTER_KEYWORDS: Tuple[str, ...] = (
    "person", "character", "actor", "subject", "individual", "man", "woman", "child",
)
MAX_CHARACTERS = 4

# keyword -> (prop name, importance); table position fixes the prop's x slot
PROP_KEYWORDS: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "table": ("Table", "secondary"),
    "chair": ("Chair", "secondary"),
    "car": ("Car", "primary"),
    "phone": ("Phone", "primary"),
    "book": ("Book", "secondary"),
    "computer": ("Computer", "primary"),
    "door": ("Door", "secondary"),
    "window": ("Window", "background"),
    "lamp": ("Lamp", "background"),
    "tree": ("Tree", "background"),
})

# Checked in order; first keyword group present wins
_ACTIONS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("walking",), "walking"),
    (("running",), "running"),
    (("sitting",), "sitting"),
    (("standing",), "standing"),
    (("pointing",), "pointing"),
    (("gesturing",), "gesturing"),
    (("talking", "speaking"), "talking"),
    (("looking",), "looking"),
)

_EMOTIONS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("happy", "joy"), "happy"),
    (("sad", "crying"), "sad"),
    (("angry", "mad"), "angry"),
    (("surprised", "shocked"), "surprised"),
    (("scared", "afraid"), "scared"),
    (("confused", "puzzled"), "confused"),
    (("excited", "enthusiastic"), "excited"),
    (("calm", "peaceful"), "calm"),
)


def _first_match(text: str, table: Tuple[Tuple[Tuple[str, ...], str], ...], default: str) -> str:
    for keywords, label in table:
        if any(keyword in text for keyword in keywords):
            return label
    return default


def count_character_mentions(description: str) -> int:
    """Case-insensitive occurrences of every character keyword.

    Matches are plain substrings, so "woman" also counts once for "man".
    """
    return sum(
        len(re.findall(keyword, description, flags=re.IGNORECASE))
        for keyword in CHARACTER_KEYWORDS
    )


def character_position(
    index: int,
    total: int,
    width: float = config.CANVAS_WIDTH,
    height: float = config.CANVAS_HEIGHT,
) -> Tuple[float, float]:
    """(x, y) for character *index* of *total*."""
    y = height * 0.7
    if total == 1:
        return width / 2, y
    if total == 2:
        return (width * 0.3 if index == 0 else width * 0.7), y
    spacing = width / (total + 1)
    return spacing * (index + 1), y


def infer_facing(description: str, index: int) -> Facing:
    text = description.lower()
    if "conversation" in text or "talking" in text:
        return "right" if index % 2 == 0 else "left"
    if "leaving" in text or "exit" in text:
        return "back"
    return "forward"


def infer_action(description: str) -> str:
    return _first_match(description.lower(), _ACTIONS, "standing")


def infer_emotion(description: str) -> str:
    return _first_match(description.lower(), _EMOTIONS, "neutral")


def generate_character_positions(
    description: str,
    *,
    rng: Optional[random.Random] = None,
) -> List[CharacterPosition]:
    """Place 1-4 characters; the count follows the keyword mentions."""
    total = min(max(count_character_mentions(description), 1), MAX_CHARACTERS)
    action = infer_action(description)
    emotion = infer_emotion(description)

    characters: List[CharacterPosition] = []
    for index in range(total):
        x, y = character_position(index, total)
        characters.append(
            CharacterPosition(
                id=make_id(rng),
                name=f"Character {index + 1}",
                x=x,
                y=y,
                facing=infer_facing(description, index),
                action=action,
                emotion=emotion,
            )
        )
    return characters


def generate_props(
    description: str,
    *,
    rng: Optional[random.Random] = None,
) -> List[PropItem]:
    """One prop per keyword present, in table order.

    x is fixed by the keyword's table slot; y is jittered in [300, 400).
    """
    text = description.lower()
    source = resolve_rng(rng)
    props: List[PropItem] = []
    for slot, (keyword, (name, importance)) in enumerate(PROP_KEYWORDS.items()):
        if keyword in text:
            props.append(
                PropItem(
                    id=make_id(rng),
                    name=name,
                    x=100 + slot * 150,
                    y=300 + source.random() * 100,
                    importance=importance,
                )
            )
    return props
