"""Script editor mutations.

Every function returns a new Script and leaves its input untouched.  Orders
are renumbered to 0..k-1 after any insert or delete.  An unknown element id
is a no-op, never an error.
"""
from __future__ import annotations

import random
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from docuscript.composition.formatting import formatting_for
from docuscript.composition.models import (
    AutoSuggestion,
    ElementFormatting,
    ElementType,
    Script,
    ScriptElement,
)
from docuscript.ids import make_id

DEFAULT_CONTENT: Mapping[ElementType, str] = MappingProxyType({
    ElementType.SCENE_HEADING: "INT. LOCATION - DAY",
    ElementType.ACTION: "Description of what happens in the scene.",
    ElementType.CHARACTER: "CHARACTER NAME",
    ElementType.DIALOGUE: "What the character says.",
    ElementType.PARENTHETICAL: "(how they say it)",
    ElementType.TRANSITION: "CUT TO:",
    ElementType.VOICEOVER: "NARRATOR (V.O.)\nVoiceover text.",
    ElementType.SHOT: "MEDIUM SHOT - EYE LEVEL",
    ElementType.SOUND_EFFECT: "SFX: Description of sound effect",
    ElementType.MUSIC: "MUSIC: Description of music cue",
})


def renumber_elements(elements: Sequence[ScriptElement]) -> List[ScriptElement]:
    """Copy *elements* with ``order`` reset to their list position."""
    return [el.model_copy(update={"order": i}, deep=True) for i, el in enumerate(elements)]


def with_elements(script: Script, elements: Sequence[ScriptElement]) -> Script:
    """Deep copy of *script* holding copies of *elements* as its content."""
    return script.model_copy(
        update={"content": [el.model_copy(deep=True) for el in elements]},
        deep=True,
    )


def _with_content(script: Script, elements: Sequence[ScriptElement]) -> Script:
    return script.model_copy(update={"content": renumber_elements(elements)}, deep=True)


def _index_of(script: Script, element_id: str) -> Optional[int]:
    for i, el in enumerate(script.content):
        if el.id == element_id:
            return i
    return None


def new_element(
    element_type: ElementType,
    content: Optional[str] = None,
    *,
    rng: Optional[random.Random] = None,
) -> ScriptElement:
    """A fresh element with the type's default content and formatting."""
    return ScriptElement(
        id=make_id(rng),
        type=element_type,
        content=DEFAULT_CONTENT.get(element_type, "New element") if content is None else content,
        formatting=formatting_for(element_type),
        order=0,
    )


def insert_element(
    script: Script,
    element_type: ElementType,
    after_id: Optional[str] = None,
    *,
    content: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> Script:
    """Insert a new element after *after_id*, or append when it is None/unknown."""
    element = new_element(element_type, content, rng=rng)
    elements = list(script.content)
    index = _index_of(script, after_id) if after_id is not None else None
    if index is None:
        elements.append(element)
    else:
        elements.insert(index + 1, element)
    return _with_content(script, elements)


def delete_element(script: Script, element_id: str) -> Script:
    return _with_content(script, [el for el in script.content if el.id != element_id])


def update_element_content(script: Script, element_id: str, content: str) -> Script:
    return with_elements(script, [
        el.model_copy(update={"content": content}) if el.id == element_id else el
        for el in script.content
    ])


def update_element_formatting(
    script: Script,
    element_id: str,
    formatting: Dict[str, Any],
) -> Script:
    """Merge *formatting* (snake_case or camelCase keys) into one element's style."""
    updated: List[ScriptElement] = []
    for el in script.content:
        if el.id == element_id:
            merged = {**el.formatting.model_dump(), **formatting}
            el = el.model_copy(update={"formatting": ElementFormatting.model_validate(merged)})
        updated.append(el)
    return with_elements(script, updated)


def apply_suggestion(script: Script, element_id: str, suggestion: AutoSuggestion) -> Script:
    """Replace the element's content with the suggested text."""
    return update_element_content(script, element_id, suggestion.text)
