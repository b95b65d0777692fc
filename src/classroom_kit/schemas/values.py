"""Tagged input values for the classifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class IntegerValue:
    """A whole number."""

    value: int


@dataclass(frozen=True)
class FloatValue:
    """A floating-point number, never treated as whole."""

    value: float


@dataclass(frozen=True)
class TextValue:
    """Text input, classified as-is."""

    value: str


@dataclass(frozen=True)
class OtherValue:
    """Anything the classifier does not recognize."""

    value: object


TaggedValue = Union[IntegerValue, FloatValue, TextValue, OtherValue]


def tag_value(raw: object) -> TaggedValue:
    """Tag a raw input once, at the call boundary.

    ``bool`` is an ``int`` subclass in Python but is not a whole number here,
    so ``True`` and ``False`` are tagged as :class:`OtherValue`.
    """
    if isinstance(raw, bool):
        return OtherValue(raw)
    if isinstance(raw, int):
        return IntegerValue(raw)
    if isinstance(raw, float):
        return FloatValue(raw)
    if isinstance(raw, str):
        return TextValue(raw)
    return OtherValue(raw)
