"""ink-render: markdown to width-constrained, ANSI-styled terminal text."""

from ink.render.config import DEFAULT_CONFIG, RenderConfig
from ink.render.frontmatter import strip_front_matter
from ink.render.inline import render_inline
from ink.render.nodes import Alignment, BlockKind, InlineKind, Node
from ink.render.parser import parse
from ink.render.renderer import RenderContext, Renderer, render
from ink.render.styles import DEFAULT_STYLES, Style, StyleRegistry
from ink.render.utils import visible_width, wrap_text_with_ansi

__all__ = [
    "Alignment",
    "BlockKind",
    "DEFAULT_CONFIG",
    "DEFAULT_STYLES",
    "InlineKind",
    "Node",
    "RenderConfig",
    "RenderContext",
    "Renderer",
    "Style",
    "StyleRegistry",
    "parse",
    "render",
    "render_inline",
    "strip_front_matter",
    "visible_width",
    "wrap_text_with_ansi",
]
