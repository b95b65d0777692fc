"""Local configuration for classroom_kit."""

from __future__ import annotations

from typing import Final

FIZZ_LABEL: Final = "Fizz"
BUZZ_LABEL: Final = "Buzz"
FIZZBUZZ_LABEL: Final = "FizzBuzz"

# Checked in order; the first matching divisor wins.
DIVISOR_RULES: Final[tuple[tuple[int, str], ...]] = (
    (15, FIZZBUZZ_LABEL),
    (3, FIZZ_LABEL),
    (5, BUZZ_LABEL),
)

JOIN_SEPARATOR: Final = ", "

# node type -> (css class, heading level)
CONTAINER_STYLES: Final[dict[str, tuple[str, int]]] = {
    "walkthrough": ("walkthrough", 1),
    "section": ("section", 2),
    "item_group": ("item_group", 3),
}

CHECKBOX_PREFIX: Final = "[ ] "
TEXT_PREFIX: Final = "___ "
RADIO_OPTION_PREFIX: Final = "( ) "
