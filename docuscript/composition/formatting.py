"""Element style table.

Formatting is a pure lookup on the element type.  Types without an entry of
their own (b-roll, title, lower-third, ...) take the action style.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from docuscript.composition.models import ElementFormatting, ElementType

_ACTION = ElementFormatting()

ELEMENT_FORMATTING: Mapping[ElementType, ElementFormatting] = MappingProxyType({
    ElementType.SCENE_HEADING: ElementFormatting(bold=True, spacing=1.5),
    ElementType.ACTION: _ACTION,
    ElementType.CHARACTER: ElementFormatting(bold=True, alignment="center", indent=20),
    ElementType.DIALOGUE: ElementFormatting(indent=10),
    ElementType.PARENTHETICAL: ElementFormatting(italic=True, color="#666666", indent=15),
    ElementType.TRANSITION: ElementFormatting(bold=True, alignment="right", spacing=1.5),
    ElementType.VOICEOVER: ElementFormatting(italic=True, color="#0066cc", indent=10),
    ElementType.SHOT: ElementFormatting(bold=True, underline=True, color="#cc6600"),
    ElementType.SOUND_EFFECT: ElementFormatting(italic=True, color="#009900", indent=5),
    ElementType.MUSIC: ElementFormatting(italic=True, color="#9900cc", indent=5),
})


def formatting_for(element_type: ElementType) -> ElementFormatting:
    return ELEMENT_FORMATTING.get(element_type, _ACTION)
