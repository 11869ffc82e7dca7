"""Tests for list layout: markers, numbering, indentation and nesting."""

from __future__ import annotations

import re

from ink.render import render
from ink.render.lists import hang, indent, list_marker, split_item_children
from ink.render.nodes import BlockKind, Node
from ink.render.utils import strip_ansi


def _plain_lines(md_text: str, width: int = 80) -> list[str]:
    return [strip_ansi(line).rstrip() for line in render(md_text, width).split("\n")]


class TestListHelpers:
    def test_indent_is_two_spaces_per_level(self) -> None:
        assert indent(0) == ""
        assert indent(3) == "      "

    def test_bullet_marker(self) -> None:
        assert list_marker(Node(BlockKind.LIST), 5) == "• "

    def test_ordered_marker_uses_start_plus_position(self) -> None:
        parent = Node(BlockKind.LIST, ordered=True, start=7)
        assert list_marker(parent, 0) == "7. "
        assert list_marker(parent, 3) == "10. "

    def test_marker_without_parent(self) -> None:
        assert list_marker(None, 2) == "• "

    def test_split_item_children_keeps_order(self) -> None:
        text = Node(BlockKind.TEXT_BLOCK)
        nested = Node(BlockKind.LIST)
        code = Node(BlockKind.CODE_BLOCK)
        item = Node(BlockKind.LIST_ITEM, children=(text, nested, code))
        assert split_item_children(item) == ([text, code], [nested])

    def test_hang_aligns_continuation_lines(self) -> None:
        assert hang("1. ", "one\ntwo\n\nthree") == "1. one\n   two\n\n   three"


class TestRenderedLists:
    def test_unordered_items_have_bullets(self) -> None:
        assert _plain_lines("- alpha\n- beta\n- gamma") == ["• alpha", "• beta", "• gamma"]

    def test_ordered_numbering(self) -> None:
        assert _plain_lines("1. first\n2. second\n3. third") == ["1. first", "2. second", "3. third"]

    def test_ordered_start_value(self) -> None:
        assert _plain_lines("5. five\n6. six") == ["5. five", "6. six"]

    def test_numbering_ignores_source_numbers(self) -> None:
        assert _plain_lines("1. a\n1. b\n1. c") == ["1. a", "2. b", "3. c"]

    def test_nested_list_on_its_own_line(self) -> None:
        assert _plain_lines("- outer\n  - inner") == ["• outer", "  • inner"]

    def test_nested_list_ends_with_blank_line(self) -> None:
        assert _plain_lines("- a\n  - b\n- c") == ["• a", "  • b", "", "• c"]

    def test_nested_ordered_numbering_restarts(self) -> None:
        source = "1. one\n2. two\n   1. sub one\n   2. sub two\n3. three"
        assert _plain_lines(source) == [
            "1. one",
            "2. two",
            "  1. sub one",
            "  2. sub two",
            "",
            "3. three",
        ]

    def test_numbering_strictly_increasing(self) -> None:
        source = "\n".join(f"{n}. item" for n in range(1, 13))
        numbers = [int(re.match(r"(\d+)\.", line).group(1)) for line in _plain_lines(source)]
        assert numbers == list(range(1, 13))

    def test_double_digit_markers_left_align(self) -> None:
        source = "\n".join(f"{n}. item" for n in range(8, 12))
        lines = _plain_lines(source)
        assert all(line[0].isdigit() for line in lines)

    def test_three_levels_of_indentation(self) -> None:
        source = "- a\n  - b\n    - c\n  - d\n- e"
        assert _plain_lines(source) == ["• a", "  • b", "    • c", "", "  • d", "", "• e"]

    def test_task_list(self) -> None:
        assert _plain_lines("- [x] done\n- [ ] todo") == ["• ☑ done", "• ☐ todo"]

    def test_loose_list(self) -> None:
        lines = _plain_lines("- first\n\n- second")
        assert lines == ["• first", "• second"]

    def test_wrapped_item_text_hangs_under_marker(self) -> None:
        source = "- " + " ".join(["word"] * 12) + "\n\n- b"
        lines = _plain_lines(source, width=20)
        assert lines[0].startswith("• word")
        assert lines[1].startswith("  word")
        assert all(len(line) <= 20 for line in lines)

    def test_list_followed_by_paragraph_has_one_blank_line(self) -> None:
        assert _plain_lines("- a\n- b\n\nafter") == ["• a", "• b", "", "after"]
