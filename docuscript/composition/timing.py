"""Reading-time estimation for script elements.

All functions are pure: no I/O, no external state, no randomness.
"""
from __future__ import annotations

from typing import Optional

from docuscript import config
from docuscript.composition.models import Pacing, TimingInfo


def calculate_reading_time(text: str, words_per_minute: Optional[int] = None) -> float:
    """Seconds needed to read *text* aloud at *words_per_minute* (default 200)."""
    wpm = words_per_minute or config.READING_WPM
    return len(text.split()) / wpm * 60


def make_timing(
    start_time: float,
    end_time: float,
    text: str,
    pacing: Pacing = "normal",
) -> TimingInfo:
    """TimingInfo spanning *start_time*..*end_time* with the reading time of *text*."""
    return TimingInfo(
        start_time=start_time,
        end_time=end_time,
        duration=end_time - start_time,
        estimated_reading_time=calculate_reading_time(text),
        voiceover_pacing=pacing,
    )
