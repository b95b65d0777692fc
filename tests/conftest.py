"""Test setup for classroom_kit."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from classroom_kit.schemas import Walkthrough  # noqa: E402
from classroom_kit.walkthrough import item, item_group, section, walkthrough  # noqa: E402

SAMPLE_MARKUP = (
    "<div class='walkthrough'><h1>Sample Walkthrough</h1>"
    "<div class='section'><h2>Section A</h2>"
    "<div class='item_group'><h3>Item Group A</h3>"
    "<div>[ ] First Item</div>"
    "<div>Second Item ( ) First Value ( ) Second Value</div></div>"
    "<div class='item_group'><h3>Item Group B</h3><div>___ Third Item</div></div></div>"
    "<div class='section'><h2>Section B</h2>"
    "<div class='item_group'><h3>Item Group C</h3><div>[ ] Fourth Item</div></div></div>"
    "</div>"
)


@pytest.fixture
def sample_walkthrough() -> Walkthrough:
    """Two sections, three item groups and four items."""
    return walkthrough(
        "Sample Walkthrough",
        section(
            "Section A",
            item_group(
                "Item Group A",
                item("First Item", "checkbox"),
                item("Second Item", "radio", "First Value", "Second Value"),
            ),
            item_group("Item Group B", item("Third Item", "text")),
        ),
        section(
            "Section B",
            item_group("Item Group C", item("Fourth Item", "checkbox")),
        ),
    )


@pytest.fixture
def sample_markup() -> str:
    """Expected markup for ``sample_walkthrough``."""
    return SAMPLE_MARKUP
