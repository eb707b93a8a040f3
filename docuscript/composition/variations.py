"""A/B script variants built from fixed string rewrites.

Only dialogue and voiceover text is rewritten; every element (rewritten or
not) gets a fresh id.  Metrics start at zero; nothing is scored here.
"""
from __future__ import annotations

import random
import re
from typing import List, Optional, Pattern, Tuple

from loguru import logger

from docuscript.composition.models import (
    ABTestMetrics,
    ABTestVersion,
    ElementType,
    Script,
)
from docuscript.config import DEFAULT_CREATED_AT
from docuscript.ids import make_id

_Rewrite = Tuple[Pattern[str], str]


def _rules(*pairs: Tuple[str, str]) -> Tuple[_Rewrite, ...]:
    return tuple((re.compile(rf"\b{re.escape(src)}\b"), dst) for src, dst in pairs)


# Indexed by variation type
_VARIATION_RULES: Tuple[Tuple[_Rewrite, ...], ...] = (
    # 0: formal
    _rules(("can't", "cannot"), ("won't", "will not"), ("don't", "do not"), ("it's", "it is")),
    # 1: casual
    _rules(("cannot", "can't"), ("will not", "won't"), ("do not", "don't"), ("it is", "it's")),
    # 2: concise
    _rules(
        ("in order to", "to"),
        ("due to the fact that", "because"),
        ("at this point in time", "now"),
        ("for the purpose of", "for"),
    ),
)

_VARIATION_DESCRIPTIONS: Tuple[str, ...] = (
    "More formal tone with expanded contractions",
    "Casual tone with natural contractions",
    "Concise version with simplified language",
    "Enhanced version with richer vocabulary",
)

_REWRITTEN_TYPES = frozenset({ElementType.DIALOGUE, ElementType.VOICEOVER})


def generate_variation(content: str, variation_type: int) -> str:
    """Apply the rewrite set for *variation_type*; unknown types pass through.

    Matching is case-sensitive, so "Can't" is left alone by the formal set.
    """
    if not 0 <= variation_type < len(_VARIATION_RULES):
        return content
    for pattern, replacement in _VARIATION_RULES[variation_type]:
        content = pattern.sub(replacement, content)
    return content


def variation_description(variation_type: int) -> str:
    if 0 <= variation_type < len(_VARIATION_DESCRIPTIONS):
        return _VARIATION_DESCRIPTIONS[variation_type]
    return "Alternative version"


def _version_name(index: int) -> str:
    return f"Version {chr(ord('A') + index)}"


def generate_ab_test_versions(
    base_script: Script,
    variations: int = 3,
    *,
    rng: Optional[random.Random] = None,
    created_at: str = DEFAULT_CREATED_AT,
) -> List[ABTestVersion]:
    """Produce *variations* draft versions of *base_script*."""
    versions: List[ABTestVersion] = []
    for index in range(variations):
        content = [
            element.model_copy(update={
                "id": make_id(rng),
                "content": (
                    generate_variation(element.content, index)
                    if element.type in _REWRITTEN_TYPES
                    else element.content
                ),
            }, deep=True)
            for element in base_script.content
        ]
        script = base_script.model_copy(update={
            "id": make_id(rng),
            "content": content,
            "updated_at": created_at,
        }, deep=True)
        versions.append(
            ABTestVersion(
                id=make_id(rng),
                name=_version_name(index),
                description=variation_description(index),
                script=script,
                metrics=ABTestMetrics(),
                created_at=created_at,
            )
        )

    logger.debug(f"Generated {len(versions)} A/B versions of script {base_script.id}")
    return versions
