"""Voiceover and audio cue drafting for a storyboard frame."""
from __future__ import annotations

import random
import re
from typing import List, Optional

from docuscript.ids import make_id
from docuscript.storyboard.models import AudioCue, VoiceoverCue

SENTENCE_SPLIT = re.compile(r"[.!?]+")
VOICEOVER_SHARE = 0.8
PLACEHOLDER_VOICEOVER = "Scene description..."


def voiceover_tone(description: str) -> str:
    """Later keyword groups override earlier ones."""
    text = description.lower()
    tone = "neutral"
    if "dramatic" in text or "intense" in text:
        tone = "dramatic"
    if "calm" in text or "peaceful" in text:
        tone = "calm"
    if "excited" in text or "energetic" in text:
        tone = "energetic"
    if "mysterious" in text or "suspenseful" in text:
        tone = "mysterious"
    return tone


def generate_voiceover_text(description: str) -> str:
    """Narrate the first sentence; the keyword checks are case-sensitive."""
    sentences = [s for s in SENTENCE_SPLIT.split(description) if s.strip()]
    if not sentences:
        return PLACEHOLDER_VOICEOVER

    first = sentences[0].strip()
    if "character" in first or "person" in first:
        return f"We see {first.lower()}..."
    if "location" in first or "setting" in first:
        return f"The scene opens with {first.lower()}..."
    return f"{first}..."


def generate_voiceover_cue(description: str, duration: float) -> VoiceoverCue:
    return VoiceoverCue(
        text=generate_voiceover_text(description),
        start_time=0,
        duration=duration * VOICEOVER_SHARE,
        speaker="Narrator",
        tone=voiceover_tone(description),
    )


def generate_audio_cues(
    description: str,
    duration: float,
    *,
    rng: Optional[random.Random] = None,
) -> List[AudioCue]:
    """Music, effects and ambience cues in a fixed order: music, sfx, ambient."""
    text = description.lower()
    cues: List[AudioCue] = []

    def cue(kind: str, label: str, start: float, length: float, volume: float) -> None:
        cues.append(
            AudioCue(
                id=make_id(rng),
                type=kind,
                description=label,
                start_time=start,
                duration=length,
                volume=volume,
            )
        )

    # ── Music ────────────────────────────────────────────────────────────────
    if "dramatic" in text or "intense" in text:
        cue("music", "Dramatic orchestral music", 0, duration, 0.6)
    if "calm" in text or "peaceful" in text:
        cue("music", "Soft ambient music", 0, duration, 0.4)

    # ── Sound effects ────────────────────────────────────────────────────────
    if "car" in text or "driving" in text:
        cue("sfx", "Car engine sound", 0, duration * 0.5, 0.7)
    if "door" in text:
        cue("sfx", "Door opening/closing", duration * 0.2, 2, 0.8)
    if "phone" in text:
        cue("sfx", "Phone ringing", 0, 3, 0.9)

    # ── Ambience ─────────────────────────────────────────────────────────────
    if "outdoor" in text or "outside" in text:
        cue("ambient", "Outdoor ambience", 0, duration, 0.3)
    if "indoor" in text or "room" in text:
        cue("ambient", "Room tone", 0, duration, 0.2)

    return cues
