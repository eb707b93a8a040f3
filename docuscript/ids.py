"""Element and artifact id generation.

Every function that mints ids or makes a random choice takes an optional
``random.Random``.  Passing a seeded instance makes the output reproducible;
``None`` uses the module-level default source.
"""
from __future__ import annotations

import random
import string
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 9

_default_rng = random.Random()


def resolve_rng(rng: Optional[random.Random]) -> random.Random:
    """Return *rng*, or the shared default source when it is None."""
    return rng if rng is not None else _default_rng


def make_id(rng: Optional[random.Random] = None) -> str:
    """9-character lowercase base-36 id."""
    source = resolve_rng(rng)
    return "".join(source.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def pick(options: Sequence[T], rng: Optional[random.Random] = None) -> T:
    return resolve_rng(rng).choice(options)
