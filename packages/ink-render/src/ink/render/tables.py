"""Table layout -- column widths, alignment and borders for GFM tables."""

from __future__ import annotations

from ink.render.inline import render_inline
from ink.render.nodes import Alignment, BlockKind, Node
from ink.render.styles import DEFAULT_STYLES, StyleRegistry
from ink.render.utils import visible_width

VERTICAL = "│"
HORIZONTAL = "─"
LEFT_TEE = "├"
CROSS = "┼"
RIGHT_TEE = "┤"


def render_table(table: Node, styles: StyleRegistry = DEFAULT_STYLES) -> str:
    """Render a TABLE node; the result ends with a blank line.

    A table without rows renders as the empty string.
    """
    rows = table.children_of(BlockKind.TABLE_ROW)
    if not rows:
        return ""

    cells = [[render_inline(cell.children, styles) for cell in row.children] for row in rows]
    num_cols = max(len(row_cells) for row_cells in cells)
    widths = column_widths(cells, num_cols)
    alignments = column_alignments(table.alignments, num_cols)

    border = styles.table_border.apply(VERTICAL)
    separator = styles.table_border.apply(separator_line(widths))

    lines: list[str] = []
    for row, row_cells in zip(rows, cells):
        cell_style = styles.table_header if row.header else styles.table_cell
        parts = [border]
        for col in range(num_cols):
            text = row_cells[col] if col < len(row_cells) else ""
            padded = f" {align_cell(text, widths[col], alignments[col])} "
            parts.append(cell_style.apply(padded))
            parts.append(border)
        lines.append("".join(parts))
        if row.header:
            lines.append(separator)

    return "\n".join(lines) + "\n\n"


def column_widths(cells: list[list[str]], num_cols: int) -> list[int]:
    """Widest visible cell per column, header included; missing cells count as empty."""
    widths = [0] * num_cols
    for row_cells in cells:
        for col, text in enumerate(row_cells):
            widths[col] = max(widths[col], visible_width(text))
    return widths


def column_alignments(declared: tuple[Alignment, ...], num_cols: int) -> list[Alignment]:
    """Declared alignments, padded with ``NONE`` up to *num_cols*."""
    alignments = list(declared[:num_cols])
    alignments.extend([Alignment.NONE] * (num_cols - len(alignments)))
    return alignments


def separator_line(widths: list[int]) -> str:
    """``├───┼───┤`` sized to each column plus one space of padding per side."""
    return LEFT_TEE + CROSS.join(HORIZONTAL * (w + 2) for w in widths) + RIGHT_TEE


def align_cell(text: str, width: int, alignment: Alignment) -> str:
    """Pad *text* to *width* columns; an odd centring gap puts the extra space right."""
    gap = width - visible_width(text)
    if gap <= 0:
        return text
    if alignment is Alignment.CENTER:
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    if alignment is Alignment.RIGHT:
        return " " * gap + text
    return text + " " * gap
