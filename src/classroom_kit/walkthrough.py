"""Build classroom walkthrough forms and render them to markup."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Union

from pydantic import ValidationError

from classroom_kit.config import (
    CHECKBOX_PREFIX,
    CONTAINER_STYLES,
    RADIO_OPTION_PREFIX,
    TEXT_PREFIX,
)
from classroom_kit.exceptions import OutlineError
from classroom_kit.schemas import Item, ItemGroup, ItemKind, Section, Walkthrough

logger = logging.getLogger(__name__)

Node = Union[Walkthrough, Section, ItemGroup, Item]


def walkthrough(name: object, *sections: Section) -> Walkthrough:
    """Declare a walkthrough made of ``sections``."""
    return Walkthrough(name=name, sections=list(sections))


def section(name: object, *item_groups: ItemGroup) -> Section:
    """Declare a section made of ``item_groups``."""
    return Section(name=name, item_groups=list(item_groups))


def item_group(name: object, *items: Item) -> ItemGroup:
    """Declare an item group made of ``items``."""
    return ItemGroup(name=name, items=list(items))


def item(name: object, kind: str | ItemKind, *options: object) -> Item:
    """Declare an item; ``options`` only matter for radio items."""
    return Item(name=name, kind=kind, options=list(options))


def render_container(
    name: str,
    css_class: str,
    heading_level: int,
    children_block: str | None = None,
) -> str:
    """Wrap already rendered children in a classed div with a heading."""
    tag = f"h{heading_level}"
    return f"<div class='{css_class}'><{tag}>{name}</{tag}>{children_block or ''}</div>"


def render_item(name: object, kind: object, options: Iterable[object] | str = ()) -> str:
    """Render a single item.

    Radio options are each emitted as ``( ) option `` and the final trailing
    space is trimmed, so a radio without options renders just its name.
    A bare string counts as one option. Unknown kinds render an empty item.
    """
    if isinstance(options, str):
        options = [options]
    if kind == ItemKind.CHECKBOX:
        body = f"{CHECKBOX_PREFIX}{name}"
    elif kind == ItemKind.TEXT:
        body = f"{TEXT_PREFIX}{name}"
    elif kind == ItemKind.RADIO:
        parts = [f"{name} "]
        parts.extend(f"{RADIO_OPTION_PREFIX}{option} " for option in options)
        body = "".join(parts)[:-1]
    else:
        body = ""
    return f"<div>{body}</div>"


def render(node: Node) -> str:
    """Render any walkthrough node, depth first, into a fresh string."""
    markup = _render_node(node)
    logger.debug(
        "Rendered walkthrough node",
        extra={"node": type(node).__name__, "node_name": node.name, "length": len(markup)},
    )
    return markup


def _render_node(node: Node) -> str:
    if isinstance(node, Item):
        return render_item(node.name, node.kind, node.options)
    if isinstance(node, Walkthrough):
        style_key, children = "walkthrough", node.sections
    elif isinstance(node, Section):
        style_key, children = "section", node.item_groups
    else:
        style_key, children = "item_group", node.items
    css_class, level = CONTAINER_STYLES[style_key]
    block = "".join(_render_node(child) for child in children)
    return render_container(node.name, css_class, level, block)


def load_walkthrough(outline: Mapping[str, Any] | str | bytes) -> Walkthrough:
    """Validate a walkthrough outline.

    Args:
        outline: A mapping shaped like :class:`Walkthrough`, or the same
            structure as a JSON document.

    Returns:
        The validated walkthrough tree.

    Raises:
        OutlineError: If the outline does not describe a walkthrough.
    """
    try:
        if isinstance(outline, (str, bytes)):
            return Walkthrough.model_validate_json(outline)
        return Walkthrough.model_validate(outline)
    except ValidationError as exc:
        logger.warning("Invalid walkthrough outline", extra={"errors": exc.error_count()})
        raise OutlineError(f"Invalid walkthrough outline: {exc}") from exc


def count_items(node: Node) -> int:
    """Count the leaf items below ``node``."""
    if isinstance(node, Item):
        return 1
    if isinstance(node, Walkthrough):
        return sum(count_items(child) for child in node.sections)
    if isinstance(node, Section):
        return sum(count_items(child) for child in node.item_groups)
    return len(node.items)
