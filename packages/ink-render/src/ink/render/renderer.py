"""Block renderer -- walks the document tree and assembles the final text.

Each block handler appends one chunk to an output buffer.  Chunks end with a
blank line, except list items (one line each) and text blocks (no newline, the
caller places them).  The buffer is joined once at the end and trailing
newlines are trimmed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from ink.render.config import DEFAULT_CONFIG, RenderConfig
from ink.render.frontmatter import strip_front_matter
from ink.render.inline import render_inline
from ink.render.lists import hang, indent, list_marker, split_item_children
from ink.render.nodes import BlockKind, Node
from ink.render.parser import parse
from ink.render.styles import Style, StyleRegistry
from ink.render.tables import render_table
from ink.render.utils import visible_width, wrap_text_with_ansi

logger = logging.getLogger(__name__)

_PLAIN = Style()
_RULE = "─"


@dataclass(frozen=True)
class RenderContext:
    """Per-call layout state; children get a fresh copy, never a shared one."""

    width: int
    depth: int = 0  # list indentation depth
    nesting: int = 0  # recursion depth, bounded by RenderConfig.max_depth
    preceded: bool = False  # output already emitted before this container
    config: RenderConfig = field(default_factory=lambda: DEFAULT_CONFIG)

    @property
    def styles(self) -> StyleRegistry:
        return self.config.styles

    def child(
        self,
        *,
        width: int | None = None,
        depth: int | None = None,
        preceded: bool = False,
    ) -> RenderContext:
        """Context one recursion level down; width may only narrow."""
        new_width = self.width if width is None else max(1, min(width, self.width))
        return replace(
            self,
            width=new_width,
            depth=self.depth if depth is None else depth,
            nesting=self.nesting + 1,
            preceded=self.preceded or preceded,
        )


def _terminated(chunk: str) -> str:
    """End *chunk* with exactly one blank line, whatever margin it carried."""
    return chunk.rstrip("\n") + "\n\n"


def _decode(source: bytes | str) -> str:
    if isinstance(source, bytes):
        return source.decode("utf-8", errors="replace")
    return source


class Renderer:
    """Renders markdown source (or an already parsed tree) to terminal text."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> RenderConfig:
        return self._config

    # -- public API ---------------------------------------------------------

    def render(self, source: bytes | str, max_width: int) -> str:
        """Strip front matter, parse, and render *source* at *max_width* columns."""
        text = _decode(strip_front_matter(source))
        if not text.strip():
            return ""
        return self.render_tree(parse(text), max_width)

    def render_tree(self, tree: Node, max_width: int) -> str:
        """Render a parsed document tree at *max_width* columns (>= 1)."""
        out: list[str] = []
        self._render_node(tree, RenderContext(width=max_width, config=self._config), out)
        return "".join(out).rstrip("\n")

    # -- dispatch -----------------------------------------------------------

    def _render_node(self, node: Node, ctx: RenderContext, out: list[str]) -> None:
        if ctx.nesting > self._config.max_depth:
            logger.debug("Nesting deeper than %d; dropping %s subtree", self._config.max_depth, node.kind)
            return

        kind = node.kind

        if kind is BlockKind.HEADING:
            self._render_heading(node, ctx, out)
        elif kind is BlockKind.PARAGRAPH:
            content = render_inline(node.children, ctx.styles)
            out.append(_terminated(ctx.styles.paragraph.render(content, ctx.width)))
        elif kind in (BlockKind.FENCED_CODE_BLOCK, BlockKind.CODE_BLOCK):
            self._render_code_block(node, ctx, out)
        elif kind is BlockKind.BLOCKQUOTE:
            self._render_blockquote(node, ctx, out)
        elif kind is BlockKind.LIST:
            self._render_list(node, ctx, out)
        elif kind is BlockKind.LIST_ITEM:
            # An item outside a list still renders, with a bullet.
            self._render_list_item(node, None, 0, ctx, out)
        elif kind is BlockKind.TABLE:
            out.append(render_table(node, ctx.styles))
        elif kind is BlockKind.THEMATIC_BREAK:
            self._render_thematic_break(ctx, out)
        elif kind is BlockKind.TEXT_BLOCK:
            out.append(render_inline(node.children, ctx.styles))
        elif kind is BlockKind.HTML_BLOCK:
            content = node.literal.rstrip("\n")
            if content:
                out.append(_terminated(_PLAIN.render(content, ctx.width)))
        elif kind is BlockKind.DOCUMENT:
            self._render_sequence(node.children, ctx, out)
        elif not node.is_block:
            out.append(render_inline([node], ctx.styles))
        else:
            if kind is BlockKind.UNKNOWN:
                logger.debug("Rendering children of unknown block %r", node.type_name)
            self._render_sequence(node.children, ctx.child(preceded=any(out)), out)

    def _render_sequence(self, nodes: tuple[Node, ...] | list[Node], ctx: RenderContext, out: list[str]) -> None:
        for index, node in enumerate(nodes):
            self._render_node(node, ctx, out)
            # Text blocks carry no newline of their own.
            if node.kind is BlockKind.TEXT_BLOCK and index + 1 < len(nodes):
                out.append("\n")

    @staticmethod
    def _leading(style: Style, ctx: RenderContext, out: list[str]) -> Style:
        """Drop *style*'s top margin when nothing precedes it in the document."""
        if style.margin_top and not ctx.preceded and not any(out):
            return replace(style, margin_top=0)
        return style

    # -- block kinds --------------------------------------------------------

    def _render_heading(self, node: Node, ctx: RenderContext, out: list[str]) -> None:
        content = render_inline(node.children, ctx.styles)
        if node.level <= 1:
            h1 = ctx.styles.h1
            # Wrap before badging so every line keeps its padding.
            lines = wrap_text_with_ansi(content, max(1, ctx.width - h1.frame_width))
            badge = h1.render("\n".join(lines))
            styled = _PLAIN.render(badge, ctx.width)
        else:
            style = self._leading(ctx.styles.heading(node.level), ctx, out)
            styled = style.render(content, ctx.width)
        out.append(_terminated(styled))

    def _render_code_block(self, node: Node, ctx: RenderContext, out: list[str]) -> None:
        code = node.literal
        if code.endswith("\n"):
            code = code[:-1]
        out.append(_terminated(ctx.styles.code_block.render(code, ctx.width)))

    def _render_blockquote(self, node: Node, ctx: RenderContext, out: list[str]) -> None:
        inner: list[str] = []
        inner_ctx = ctx.child(width=ctx.width - self._config.blockquote_overhead, preceded=any(out))
        self._render_sequence(node.children, inner_ctx, inner)
        content = "".join(inner).rstrip("\n")
        style = self._leading(ctx.styles.blockquote, ctx, out)
        out.append(_terminated(style.render(content, ctx.width)))

    def _render_list(self, node: Node, ctx: RenderContext, out: list[str]) -> None:
        for position, item in enumerate(node.children_of(BlockKind.LIST_ITEM)):
            self._render_list_item(item, node, position, ctx, out)
        out.append("\n")

    def _render_list_item(
        self,
        item: Node,
        parent: Node | None,
        position: int,
        ctx: RenderContext,
        out: list[str],
    ) -> None:
        own, nested = split_item_children(item)
        prefix = indent(ctx.depth) + list_marker(parent, position, self._config.bullet)
        preceded = any(out)

        own_out: list[str] = []
        content_ctx = ctx.child(
            width=ctx.width - visible_width(prefix), depth=ctx.depth + 1, preceded=preceded
        )
        self._render_sequence(own, content_ctx, own_out)
        content = "".join(own_out).rstrip("\n")
        out.append(hang(prefix, content) + "\n")

        # Nested lists start on their own line, after the item's text, and
        # keep their closing blank line.
        child_ctx = ctx.child(depth=ctx.depth + 1, preceded=True)
        for child in nested:
            self._render_node(child, child_ctx, out)

    def _render_thematic_break(self, ctx: RenderContext, out: list[str]) -> None:
        rule = _RULE * max(1, min(self._config.rule_width, ctx.width))
        style = self._leading(ctx.styles.thematic_break, ctx, out)
        out.append(_terminated(style.render(rule, ctx.width)))


_default_renderer = Renderer()


def render(source: bytes | str, max_width: int, config: RenderConfig | None = None) -> str:
    """Render markdown *source* to styled terminal text at most *max_width* wide."""
    renderer = _default_renderer if config is None else Renderer(config)
    return renderer.render(source, max_width)
