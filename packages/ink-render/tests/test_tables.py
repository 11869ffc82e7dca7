"""Tests for GFM table layout."""

from __future__ import annotations

from ink.render import render
from ink.render.nodes import Alignment, BlockKind, InlineKind, Node
from ink.render.tables import (
    align_cell,
    column_alignments,
    column_widths,
    render_table,
    separator_line,
)
from ink.render.utils import strip_ansi


def _row(*cells: str, header: bool = False) -> Node:
    return Node(
        BlockKind.TABLE_ROW,
        children=tuple(
            Node(BlockKind.TABLE_CELL, children=(Node(InlineKind.TEXT, literal=c),)) for c in cells
        ),
        header=header,
    )


def _plain(text: str) -> list[str]:
    return [strip_ansi(line) for line in text.rstrip("\n").split("\n")]


class TestColumnMath:
    def test_widths_include_header(self) -> None:
        assert column_widths([["Name", "Age"], ["Alice", "30"]], 2) == [5, 3]

    def test_widths_ignore_escape_codes(self) -> None:
        assert column_widths([["\x1b[1mab\x1b[0m"]], 1) == [2]

    def test_ragged_rows(self) -> None:
        assert column_widths([["a", "bb", "ccc"], ["dddd"]], 3) == [4, 2, 3]

    def test_alignments_padded_with_none(self) -> None:
        assert column_alignments((Alignment.RIGHT,), 3) == [Alignment.RIGHT, Alignment.NONE, Alignment.NONE]

    def test_extra_declared_alignments_are_dropped(self) -> None:
        assert column_alignments((Alignment.LEFT, Alignment.CENTER), 1) == [Alignment.LEFT]

    def test_separator_line(self) -> None:
        assert separator_line([1, 3]) == "├───┼─────┤"


class TestAlignCell:
    def test_left_and_none_pad_right(self) -> None:
        assert align_cell("ab", 4, Alignment.LEFT) == "ab  "
        assert align_cell("ab", 4, Alignment.NONE) == "ab  "

    def test_right_pads_left(self) -> None:
        assert align_cell("ab", 4, Alignment.RIGHT) == "  ab"

    def test_center_even_gap(self) -> None:
        assert align_cell("ab", 4, Alignment.CENTER) == " ab "

    def test_center_odd_gap_extra_space_right(self) -> None:
        assert align_cell("C", 4, Alignment.CENTER) == " C  "

    def test_full_width_cell_unchanged(self) -> None:
        assert align_cell("abcd", 4, Alignment.CENTER) == "abcd"


class TestRenderTable:
    def test_layout(self) -> None:
        table = Node(
            BlockKind.TABLE,
            children=(_row("Name", "Age", header=True), _row("Alice", "30"), _row("Bob", "25")),
        )
        assert _plain(render_table(table)) == [
            "│ Name  │ Age │",
            "├───────┼─────┤",
            "│ Alice │ 30  │",
            "│ Bob   │ 25  │",
        ]

    def test_ends_with_blank_line(self) -> None:
        table = Node(BlockKind.TABLE, children=(_row("a", header=True),))
        assert render_table(table).endswith("\n\n")

    def test_zero_rows_renders_nothing(self) -> None:
        assert render_table(Node(BlockKind.TABLE)) == ""

    def test_missing_cells_render_empty(self) -> None:
        table = Node(BlockKind.TABLE, children=(_row("a", "b", header=True), _row("c")))
        assert _plain(render_table(table))[-1] == "│ c │   │"

    def test_all_empty_column_keeps_borders(self) -> None:
        table = Node(BlockKind.TABLE, children=(_row("a", "", header=True), _row("b", "")))
        assert _plain(render_table(table)) == ["│ a │  │", "├───┼──┤", "│ b │  │"]

    def test_alignment_applied_to_every_row(self) -> None:
        table = Node(
            BlockKind.TABLE,
            children=(_row("L", "C", "R", header=True), _row("long", "mid", "xy")),
            alignments=(Alignment.LEFT, Alignment.CENTER, Alignment.RIGHT),
        )
        assert _plain(render_table(table)) == [
            "│ L    │  C  │  R │",
            "├──────┼─────┼────┤",
            "│ long │ mid │ xy │",
        ]


class TestRenderedTables:
    SOURCE = "| Name | Age |\n|------|-----|\n| Alice | 30 |\n| Bob | 25 |"

    def test_every_cell_and_border_present(self) -> None:
        out = render(self.SOURCE, 80)
        for cell in ("Name", "Age", "Alice", "30", "Bob", "25"):
            assert cell in out
        assert "│" in out

    def test_exactly_one_separator_after_header(self) -> None:
        lines = _plain(render(self.SOURCE, 80))
        separators = [i for i, line in enumerate(lines) if line.startswith("├")]
        assert separators == [1]
        assert "Name" in lines[0]

    def test_header_uses_header_style(self) -> None:
        out = render(self.SOURCE, 80)
        assert "\x1b[1;38;5;170m Name  " in out

    def test_markdown_alignment_row(self) -> None:
        source = "| a | b |\n|--:|:-:|\n| 100 | xyz |"
        lines = _plain(render(source, 80))
        assert lines[0] == "│   a │  b  │"
        assert lines[2] == "│ 100 │ xyz │"
