"""Parser adapter -- markdown-it-py syntax tree to :class:`~ink.render.nodes.Node`.

markdown-it-py produces a flat open/close token stream; ``SyntaxTreeNode``
nests it (``heading_open``/``heading_close`` become one ``heading`` node, inline
content lives under ``inline`` nodes).  This module maps that tree onto the
closed node kinds the renderer dispatches on.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.tasklists import tasklists_plugin

from ink.render.nodes import Alignment, BlockKind, InlineKind, Node

logger = logging.getLogger(__name__)

# "gfm-like" enables tables, strikethrough and linkify autolinks; task list
# checkboxes come from the tasklists plugin as ``html_inline`` tokens.
_md_parser = MarkdownIt("gfm-like").use(tasklists_plugin)

_ALIGN_RE = re.compile(r"text-align\s*:\s*(left|right|center)")
_TASK_CHECKBOX_CLASS = "task-list-item-checkbox"


def parse(source: str) -> Node:
    """Parse markdown *source* into a ``DOCUMENT`` node."""
    tree = SyntaxTreeNode(_md_parser.parse(source))
    return Node(BlockKind.DOCUMENT, children=_convert_blocks(tree.children))


# ---------------------------------------------------------------------------
# Block nodes
# ---------------------------------------------------------------------------


def _convert_blocks(nodes: list[SyntaxTreeNode]) -> tuple[Node, ...]:
    return tuple(_convert_block(node) for node in nodes)


def _convert_block(node: SyntaxTreeNode) -> Node:
    t = node.type

    if t == "heading":
        level = int(node.tag[1:]) if node.tag[1:].isdigit() else 1
        return Node(BlockKind.HEADING, children=_inline_children(node), level=level)

    if t == "paragraph":
        # Tight list items hide their paragraph wrapper.
        kind = BlockKind.TEXT_BLOCK if node.hidden else BlockKind.PARAGRAPH
        return Node(kind, children=_inline_children(node))

    if t == "fence":
        return Node(BlockKind.FENCED_CODE_BLOCK, literal=node.content, info=node.info.strip())

    if t == "code_block":
        return Node(BlockKind.CODE_BLOCK, literal=node.content)

    if t == "blockquote":
        return Node(BlockKind.BLOCKQUOTE, children=_convert_blocks(node.children))

    if t == "bullet_list":
        return Node(BlockKind.LIST, children=_convert_blocks(node.children))

    if t == "ordered_list":
        start = 1
        start_attr = node.attrs.get("start")
        if start_attr is not None:
            try:
                start = int(start_attr)
            except (ValueError, TypeError):
                start = 1
        return Node(BlockKind.LIST, children=_convert_blocks(node.children), ordered=True, start=start)

    if t == "list_item":
        return Node(BlockKind.LIST_ITEM, children=_convert_blocks(node.children))

    if t == "table":
        return _convert_table(node)

    if t == "hr":
        return Node(BlockKind.THEMATIC_BREAK)

    if t == "html_block":
        return Node(BlockKind.HTML_BLOCK, literal=node.content)

    # A stray inline run at block level renders like tight list text.
    if t == "inline":
        return Node(BlockKind.TEXT_BLOCK, children=_convert_inlines(node.children))

    logger.debug("Unmapped block node type %r", t)
    return Node(BlockKind.UNKNOWN, children=_convert_blocks(node.children), type_name=t)


def _inline_children(node: SyntaxTreeNode) -> tuple[Node, ...]:
    """Inline content of a leaf block (heading, paragraph, table cell)."""
    result: list[Node] = []
    for child in node.children:
        if child.type == "inline":
            result.extend(_convert_inlines(child.children))
    return tuple(result)


def _convert_table(node: SyntaxTreeNode) -> Node:
    rows: list[Node] = []
    alignments: tuple[Alignment, ...] = ()

    for section in node.children:
        header = section.type == "thead"
        for tr in section.children:
            cells = tuple(
                Node(BlockKind.TABLE_CELL, children=_inline_children(cell)) for cell in tr.children
            )
            if header and not alignments:
                alignments = tuple(_cell_alignment(cell) for cell in tr.children)
            rows.append(Node(BlockKind.TABLE_ROW, children=cells, header=header))

    return Node(BlockKind.TABLE, children=tuple(rows), alignments=alignments)


def _cell_alignment(cell: SyntaxTreeNode) -> Alignment:
    match = _ALIGN_RE.search(str(cell.attrs.get("style", "")))
    if match is None:
        return Alignment.NONE
    return Alignment(match.group(1))


# ---------------------------------------------------------------------------
# Inline nodes
# ---------------------------------------------------------------------------


def _convert_inlines(nodes: list[SyntaxTreeNode]) -> tuple[Node, ...]:
    result: list[Node] = []
    for node in nodes:
        converted = _convert_inline(node)
        # The checkbox glyph carries its own trailing space.
        if (
            result
            and result[-1].kind is InlineKind.TASK_CHECK_BOX
            and converted.kind is InlineKind.TEXT
        ):
            converted = replace(converted, literal=converted.literal.lstrip(" \u00a0"))
        if _is_empty_text(converted):
            continue
        result.append(converted)
    return tuple(result)


def _convert_inline(node: SyntaxTreeNode) -> Node:
    t = node.type

    if t == "text":
        return Node(InlineKind.TEXT, literal=node.content)
    if t == "softbreak":
        return Node(InlineKind.TEXT, soft_break=True)
    if t == "hardbreak":
        return Node(InlineKind.TEXT, hard_break=True)

    if t == "code_inline":
        return Node(InlineKind.CODE_SPAN, children=(Node(InlineKind.TEXT, literal=node.content),))

    if t == "em":
        return Node(InlineKind.EMPHASIS, children=_convert_inlines(node.children), level=1)
    if t == "strong":
        return Node(InlineKind.EMPHASIS, children=_convert_inlines(node.children), level=2)
    if t == "s":
        return Node(InlineKind.STRIKETHROUGH, children=_convert_inlines(node.children))

    if t == "link":
        href = str(node.attrs.get("href", ""))
        # <https://...> autolinks and bare URLs found by linkify
        if node.markup in ("autolink", "linkify"):
            return Node(InlineKind.AUTO_LINK, literal=_plain_text(node), destination=href)
        return Node(InlineKind.LINK, children=_convert_inlines(node.children), destination=href)

    if t == "image":
        src = str(node.attrs.get("src", ""))
        return Node(InlineKind.IMAGE, children=_convert_inlines(node.children), destination=src)

    if t == "html_inline":
        if _TASK_CHECKBOX_CLASS in node.content:
            return Node(InlineKind.TASK_CHECK_BOX, checked='checked="checked"' in node.content)
        return Node(InlineKind.RAW_PASSTHROUGH, literal=node.content)

    logger.debug("Unmapped inline node type %r", t)
    return Node(InlineKind.UNKNOWN, children=_convert_inlines(node.children), type_name=t)


def _is_empty_text(node: Node) -> bool:
    return (
        node.kind is InlineKind.TEXT
        and not node.literal
        and not node.soft_break
        and not node.hard_break
    )


def _plain_text(node: SyntaxTreeNode) -> str:
    if node.type == "text":
        return node.content
    return "".join(_plain_text(child) for child in node.children)
