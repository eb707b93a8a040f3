"""Keyword-presence scoring of a scene description.

Scores are additive: a base value plus a fixed increment per keyword present
(each keyword counts once), clamped into range and rounded to 3 dp.  The
complexity keywords are matched as substrings of the lower-cased text; the
other three sets are matched against whitespace tokens, so punctuation glued
to a word ("dark,") prevents a match.
"""
from __future__ import annotations

import asyncio
from typing import Collection, List, Optional, Tuple

from loguru import logger

from docuscript import config
from docuscript.storyboard.models import AIAnalysis

COMPLEXITY_KEYWORDS: Tuple[str, ...] = (
    "multiple", "crowd", "action", "movement", "complex", "detailed",
)
VISUAL_KEYWORDS: Tuple[str, ...] = (
    "color", "light", "shadow", "bright", "dark", "beautiful", "stunning", "dramatic",
)
PACING_KEYWORDS: Tuple[str, ...] = (
    "suddenly", "slowly", "quickly", "then", "meanwhile", "after",
)
CHALLENGE_KEYWORDS: Tuple[str, ...] = (
    "explosion", "flying", "underwater", "fire", "crowd", "night",
)

FEASIBILITY_FLOOR = 0.3


def _hits(keywords: Collection[str], haystack: Collection[str]) -> int:
    """Number of *keywords* found in *haystack* (a string or a token list)."""
    return sum(1 for keyword in keywords if keyword in haystack)


def score_scene_complexity(description: str) -> float:
    hits = _hits(COMPLEXITY_KEYWORDS, description.lower())
    return round(min(0.3 + 0.2 * hits, 1.0), 3)


def score_visual_interest(description: str) -> float:
    hits = _hits(VISUAL_KEYWORDS, description.lower().split())
    return round(min(0.4 + 0.15 * hits, 1.0), 3)


def score_narrative_pacing(description: str) -> float:
    hits = _hits(PACING_KEYWORDS, description.lower().split())
    return round(min(0.5 + 0.1 * hits, 1.0), 3)


def score_technical_feasibility(description: str) -> float:
    hits = _hits(CHALLENGE_KEYWORDS, description.lower().split())
    return round(max(1.0 - 0.2 * hits, FEASIBILITY_FLOOR), 3)


def generate_suggestions(description: str, complexity: float, visual_interest: float) -> List[str]:
    """Production suggestions; every condition is checked independently."""
    text = description.lower()
    suggestions: List[str] = []

    if complexity > 0.7:
        suggestions.append("Consider breaking this complex scene into multiple shots")
        suggestions.append("Use establishing shots to orient the audience")
    if visual_interest < 0.5:
        suggestions.append("Add more visual elements to enhance scene interest")
        suggestions.append("Consider dynamic camera movements to add energy")
    if "dialogue" in text:
        suggestions.append("Plan for over-the-shoulder shots during conversation")
        suggestions.append("Consider reaction shots to show character responses")
    if "action" in text:
        suggestions.append("Use multiple angles to capture action sequence")
        suggestions.append("Consider slow-motion for dramatic effect")

    return suggestions


def generate_warnings(description: str, feasibility: float) -> List[str]:
    """Production warnings; every condition is checked independently."""
    text = description.lower()
    warnings: List[str] = []

    if feasibility < 0.5:
        warnings.append("This scene may require significant budget and planning")
    if "night" in text:
        warnings.append("Night scenes require additional lighting equipment")
    if "crowd" in text:
        warnings.append("Crowd scenes require extensive coordination and permits")
    if "water" in text or "rain" in text:
        warnings.append("Water scenes require waterproof equipment and safety measures")

    return warnings


def score_description(description: str) -> AIAnalysis:
    """Synchronous scoring; the same result ``analyze_text_description`` returns."""
    complexity = score_scene_complexity(description)
    visual = score_visual_interest(description)
    feasibility = score_technical_feasibility(description)
    return AIAnalysis(
        scene_complexity=complexity,
        visual_interest=visual,
        narrative_pacing=score_narrative_pacing(description),
        technical_feasibility=feasibility,
        suggestions=generate_suggestions(description, complexity, visual),
        warnings=generate_warnings(description, feasibility),
    )


async def analyze_text_description(
    description: str,
    *,
    delay: Optional[float] = None,
) -> AIAnalysis:
    """Score *description* after the simulated analysis delay.

    The delay (default ``config.AI_DELAY_SEC``) has no effect on the result.
    """
    await asyncio.sleep(config.AI_DELAY_SEC if delay is None else delay)
    analysis = score_description(description)
    logger.debug(
        f"Analyzed description: complexity={analysis.scene_complexity} "
        f"visual={analysis.visual_interest} pacing={analysis.narrative_pacing} "
        f"feasibility={analysis.technical_feasibility}"
    )
    return analysis
