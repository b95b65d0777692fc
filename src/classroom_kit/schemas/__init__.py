"""Shared schemas for classroom_kit."""

from classroom_kit.schemas.values import (
    FloatValue,
    IntegerValue,
    OtherValue,
    TaggedValue,
    TextValue,
    tag_value,
)
from classroom_kit.schemas.walkthrough import Item, ItemGroup, ItemKind, Section, Walkthrough

__all__ = [
    "FloatValue",
    "IntegerValue",
    "Item",
    "ItemGroup",
    "ItemKind",
    "OtherValue",
    "Section",
    "TaggedValue",
    "TextValue",
    "Walkthrough",
    "tag_value",
]
