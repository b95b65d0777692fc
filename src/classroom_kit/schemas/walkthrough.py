"""Walkthrough tree models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field


def _as_text(value: object) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value)


# Names, kinds and options are interpolated as-is, so any value is accepted.
Text = Annotated[str, BeforeValidator(_as_text)]


class ItemKind(str, Enum):
    """Presentation formats an item knows how to render."""

    CHECKBOX = "checkbox"
    TEXT = "text"
    RADIO = "radio"


class Item(BaseModel):
    """A leaf observation item.

    ``kind`` is kept as a plain string so outlines with an unfamiliar kind
    still validate; such items render with an empty body.
    """

    name: Text
    kind: Text
    options: list[Text] = Field(default_factory=list)


class ItemGroup(BaseModel):
    """A named group of items inside a section."""

    name: Text
    items: list[Item] = Field(default_factory=list)


class Section(BaseModel):
    """A named section of a walkthrough."""

    name: Text
    item_groups: list[ItemGroup] = Field(default_factory=list)


class Walkthrough(BaseModel):
    """Root of a classroom walkthrough form."""

    name: Text
    sections: list[Section] = Field(default_factory=list)
