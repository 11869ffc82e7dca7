"""Inline renderer -- a run of inline nodes to one styled, unwrapped string.

No wrapping happens here: the block renderer wraps once the whole run is
assembled, since only then is its visible width known.
"""

from __future__ import annotations

from typing import Iterable

from ink.render.nodes import InlineKind, Node
from ink.render.styles import DEFAULT_STYLES, StyleRegistry

CHECKED_BOX = "☑ "
UNCHECKED_BOX = "☐ "


def render_inline(nodes: Iterable[Node], styles: StyleRegistry = DEFAULT_STYLES) -> str:
    """Render *nodes* in order and concatenate the results."""
    return "".join(_render_inline_node(node, styles) for node in nodes)


def _render_inline_node(node: Node, styles: StyleRegistry) -> str:
    kind = node.kind

    if kind is InlineKind.TEXT:
        text = node.literal
        if node.soft_break:
            text += " "
        if node.hard_break:
            text += "\n"
        return text

    if kind is InlineKind.CODE_SPAN:
        # Only the literal text; code spans are not re-rendered.
        code = "".join(child.literal for child in node.children_of(InlineKind.TEXT))
        return styles.inline_code.apply(code)

    if kind is InlineKind.EMPHASIS:
        content = render_inline(node.children, styles)
        if node.level >= 2:
            return styles.strong.apply(content)
        return styles.emphasis.apply(content)

    if kind is InlineKind.LINK:
        content = render_inline(node.children, styles)
        return styles.link.apply(f"{content} ({node.destination})")

    if kind is InlineKind.AUTO_LINK:
        return styles.link.apply(node.literal or node.destination)

    if kind is InlineKind.IMAGE:
        alt = render_inline(node.children, styles)
        return f"[image: {alt}]"

    if kind is InlineKind.STRIKETHROUGH:
        return styles.strikethrough.apply(render_inline(node.children, styles))

    if kind is InlineKind.TASK_CHECK_BOX:
        return CHECKED_BOX if node.checked else UNCHECKED_BOX

    if kind is InlineKind.RAW_PASSTHROUGH:
        return node.literal

    # Unknown inline kinds (and stray block nodes): children only.
    return render_inline(node.children, styles)
