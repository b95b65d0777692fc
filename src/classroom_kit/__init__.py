"""classroom_kit: FizzBuzz classification and classroom walkthrough markup."""

from classroom_kit.exceptions import ClassroomKitError, OutlineError
from classroom_kit.fizzbuzz import classify, classify_all, classify_value, expand_items
from classroom_kit.schemas import Item, ItemGroup, ItemKind, Section, Walkthrough, tag_value
from classroom_kit.walkthrough import (
    count_items,
    item,
    item_group,
    load_walkthrough,
    render,
    render_container,
    render_item,
    section,
    walkthrough,
)

__all__ = [
    "ClassroomKitError",
    "Item",
    "ItemGroup",
    "ItemKind",
    "OutlineError",
    "Section",
    "Walkthrough",
    "classify",
    "classify_all",
    "classify_value",
    "count_items",
    "expand_items",
    "item",
    "item_group",
    "load_walkthrough",
    "render",
    "render_container",
    "render_item",
    "section",
    "tag_value",
    "walkthrough",
]
