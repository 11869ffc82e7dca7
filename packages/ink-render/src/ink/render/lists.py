"""List layout -- markers, indentation and child placement for list items."""

from __future__ import annotations

from ink.render.nodes import BlockKind, Node
from ink.render.utils import visible_width

BULLET = "• "
INDENT = "  "


def indent(depth: int) -> str:
    """Leading whitespace for an item at nesting *depth*."""
    return INDENT * depth


def list_marker(parent: Node | None, position: int, bullet: str = BULLET) -> str:
    """Marker for the item at *position* among its parent's list items.

    Ordered lists number from ``parent.start``; the number depends only on
    the item's position, so re-entering the recursion per item cannot skew it.
    """
    if parent is not None and parent.ordered:
        return f"{parent.start + position}. "
    return bullet


def split_item_children(item: Node) -> tuple[list[Node], list[Node]]:
    """Partition an item's children into (own content, nested lists)."""
    own: list[Node] = []
    nested: list[Node] = []
    for child in item.children:
        if child.kind is BlockKind.LIST:
            nested.append(child)
        else:
            own.append(child)
    return own, nested


def hang(prefix: str, content: str) -> str:
    """Put *prefix* before the first line of *content*, aligning the rest under it."""
    first, *rest = content.split("\n")
    continuation = " " * visible_width(prefix)
    lines = [prefix + first]
    lines.extend(continuation + line if line else "" for line in rest)
    return "\n".join(lines)
