"""Style registry -- semantic roles mapped to terminal styles.

A :class:`Style` is an immutable description (256-colour foreground and
background, text attributes, padding, margins, an optional left border).
:class:`StyleRegistry` binds one style to every role the renderer knows about;
``DEFAULT_STYLES`` is the fixed palette used unless a caller supplies another
registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ink.render.utils import RESET, pad_to_width, visible_width, wrap_text_with_ansi


@dataclass(frozen=True)
class Style:
    """Visual style for one semantic role."""

    foreground: int | None = None  # 256-colour palette index
    background: int | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    padding_top: int = 0
    padding_right: int = 0
    padding_bottom: int = 0
    padding_left: int = 0
    margin_top: int = 0
    margin_bottom: int = 0
    border_left: str | None = None
    border_foreground: int | None = None

    @property
    def sgr(self) -> str:
        """The opening escape sequence for this style ("" when unstyled)."""
        params: list[str] = []
        if self.bold:
            params.append("1")
        if self.italic:
            params.append("3")
        if self.underline:
            params.append("4")
        if self.strikethrough:
            params.append("9")
        if self.foreground is not None:
            params.append(f"38;5;{self.foreground}")
        if self.background is not None:
            params.append(f"48;5;{self.background}")
        if not params:
            return ""
        return f"\x1b[{';'.join(params)}m"

    @property
    def frame_width(self) -> int:
        """Columns taken by horizontal padding and the left border."""
        border = visible_width(self.border_left) if self.border_left else 0
        return self.padding_left + self.padding_right + border

    def apply(self, text: str) -> str:
        """Wrap *text* in this style's attributes without any layout.

        Resets inside *text* (from nested styled runs) re-open this style so
        the outer attributes survive them.
        """
        sgr = self.sgr
        if not sgr or not text:
            return text
        return f"{sgr}{text.replace(RESET, RESET + sgr)}{RESET}"

    def render(self, text: str, width: int | None = None) -> str:
        """Lay *text* out as a styled block.

        With *width*, content is word-wrapped so the block (padding and border
        included) spans exactly *width* columns.  Without it, the block is as
        wide as its widest line.
        """
        if width is not None:
            inner = max(1, width - self.frame_width)
            lines = wrap_text_with_ansi(text, inner)
        else:
            lines = text.split("\n")
            inner = max(visible_width(line) for line in lines)

        blank = " " * inner
        lines = [
            *([blank] * self.padding_top),
            *(pad_to_width(line, inner) for line in lines),
            *([blank] * self.padding_bottom),
        ]

        left = " " * self.padding_left
        right = " " * self.padding_right
        lines = [self.apply(left + line + right) for line in lines]

        if self.border_left:
            border = Style(foreground=self.border_foreground).apply(self.border_left)
            lines = [border + line for line in lines]

        return "\n".join([*([""] * self.margin_top), *lines, *([""] * self.margin_bottom)])


@dataclass(frozen=True)
class StyleRegistry:
    """Fixed mapping from semantic role to :class:`Style`."""

    h1: Style = field(default_factory=lambda: Style(
        bold=True, foreground=230, background=63, padding_left=1, padding_right=1,
    ))
    h2: Style = field(default_factory=lambda: Style(bold=True, foreground=170, margin_top=1))
    h3: Style = field(default_factory=lambda: Style(bold=True, foreground=141, margin_top=1))
    h4: Style = field(default_factory=lambda: Style(bold=True, foreground=105))
    paragraph: Style = field(default_factory=lambda: Style(margin_bottom=1))
    code_block: Style = field(default_factory=lambda: Style(
        foreground=252, background=236,
        padding_top=1, padding_right=2, padding_bottom=1, padding_left=2,
        margin_bottom=1,
    ))
    inline_code: Style = field(default_factory=lambda: Style(foreground=213, background=236))
    blockquote: Style = field(default_factory=lambda: Style(
        border_left="┃", border_foreground=240, padding_left=2,
        margin_top=1, margin_bottom=1,
    ))
    link: Style = field(default_factory=lambda: Style(foreground=87, underline=True))
    emphasis: Style = field(default_factory=lambda: Style(italic=True))
    strong: Style = field(default_factory=lambda: Style(bold=True))
    thematic_break: Style = field(default_factory=lambda: Style(
        foreground=240, margin_top=1, margin_bottom=1,
    ))
    strikethrough: Style = field(default_factory=lambda: Style(strikethrough=True, foreground=245))
    table_header: Style = field(default_factory=lambda: Style(bold=True, foreground=170))
    table_cell: Style = field(default_factory=lambda: Style(foreground=252))
    table_border: Style = field(default_factory=lambda: Style(foreground=240))

    def heading(self, level: int) -> Style:
        """Style for heading *level*; everything past 4 shares the h4 style."""
        if level <= 1:
            return self.h1
        if level == 2:
            return self.h2
        if level == 3:
            return self.h3
        return self.h4


DEFAULT_STYLES = StyleRegistry()
