"""Shared pydantic base for every docuscript data contract.

Attributes are snake_case in Python and camelCase on the wire, so artifacts
stay interchangeable with the editor front end.  extra="ignore" keeps the
models forward-compatible: unknown fields from newer producers are dropped
rather than rejected.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )
