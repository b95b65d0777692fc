"""FizzBuzz classification with flexible input handling."""

from __future__ import annotations

import logging

from classroom_kit.config import DIVISOR_RULES, JOIN_SEPARATOR
from classroom_kit.schemas import IntegerValue, TaggedValue, tag_value

logger = logging.getLogger(__name__)

_EXPANDABLE = (list, tuple, range)


def classify(value: object) -> object:
    """Return the FizzBuzz label for a whole number, or ``value`` unchanged.

    Args:
        value: Any input. Only whole numbers (``int`` but not ``bool``) are
            classified; floats, text and anything else pass straight through.

    Returns:
        ``"FizzBuzz"``, ``"Fizz"`` or ``"Buzz"`` for matching multiples,
        otherwise the original input.
    """
    return classify_value(tag_value(value))


def classify_value(tagged: TaggedValue) -> object:
    """Classify an already tagged value."""
    if not isinstance(tagged, IntegerValue):
        return tagged.value
    for divisor, label in DIVISOR_RULES:
        if tagged.value % divisor == 0:
            return label
    return tagged.value


def expand_items(first: object, *rest: object) -> list[object]:
    """Flatten the accepted argument shapes into one ordered list.

    ``first`` may be a scalar, a list or tuple of values, or a ``range``;
    ``None`` contributes nothing. Strings are never split into characters.
    """
    if first is None:
        items: list[object] = []
    elif isinstance(first, _EXPANDABLE):
        items = list(first)
    else:
        items = [first]
    items.extend(rest)
    return items


def classify_all(first: object, *rest: object) -> str:
    """Classify every item and join the results with ``", "``.

    Accepts ``classify_all(3)``, ``classify_all(1, 2, 3)``,
    ``classify_all([1, 2, 3])`` and ``classify_all(range(1, 21))``.
    """
    items = expand_items(first, *rest)
    logger.debug("Classifying items", extra={"count": len(items)})
    return JOIN_SEPARATOR.join(str(classify(item)) for item in items)
