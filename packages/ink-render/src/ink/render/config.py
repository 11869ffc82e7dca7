"""Renderer configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from ink.render.lists import BULLET
from ink.render.styles import DEFAULT_STYLES, StyleRegistry


@dataclass(frozen=True)
class RenderConfig:
    """Settings shared by every render call; never mutated after construction."""

    styles: StyleRegistry = field(default_factory=lambda: DEFAULT_STYLES)
    max_depth: int = 64  # deeper block nesting is dropped
    rule_width: int = 40
    # Blockquote left border (1) plus its left padding (2).
    blockquote_overhead: int = 3
    bullet: str = BULLET


DEFAULT_CONFIG = RenderConfig()
