"""Tests for front matter stripping."""

from __future__ import annotations

import logging

import pytest

from ink.render.frontmatter import strip_front_matter


class TestStripFrontMatter:
    def test_no_front_matter_is_unchanged(self) -> None:
        source = b"# Title\n\nBody"
        assert strip_front_matter(source) is source

    def test_strips_block_and_blank_lines(self) -> None:
        source = b"---\ntitle: Test\nauthor: Me\n---\n\n\n# Hello"
        assert strip_front_matter(source) == b"# Hello"

    def test_crlf_line_endings(self) -> None:
        source = b"---\r\ntitle: Test\r\n---\r\n\r\n# Hello"
        assert strip_front_matter(source) == b"# Hello"

    def test_result_comes_from_normalised_buffer(self) -> None:
        source = b"---\r\na: 1\r\n---\r\nline one\r\nline two"
        assert strip_front_matter(source) == b"line one\nline two"

    def test_missing_closing_delimiter_passes_through(self) -> None:
        source = b"---\nno closing delimiter"
        assert strip_front_matter(source) == source

    def test_crlf_without_closing_delimiter_keeps_original_bytes(self) -> None:
        source = b"---\r\nstill not front matter\r\n"
        assert strip_front_matter(source) == source

    def test_empty_front_matter(self) -> None:
        assert strip_front_matter(b"---\n---\nbody") == b"body"

    def test_accepts_str(self) -> None:
        assert strip_front_matter("---\ntitle: x\n---\nbody") == "body"

    def test_empty_input(self) -> None:
        assert strip_front_matter(b"") == b""

    @pytest.mark.parametrize(
        "source",
        [
            b"---\ntitle: Test\n---\n\n# Hello",
            b"---\r\ntitle: Test\r\n---\r\n\r\n# Hello",
            b"---\nno closing delimiter",
            b"plain text",
            b"",
        ],
    )
    def test_idempotent(self, source: bytes) -> None:
        once = strip_front_matter(source)
        assert strip_front_matter(once) == once

    def test_missing_delimiter_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="ink.render.frontmatter")
        strip_front_matter(b"---\nunterminated")
        assert "no closing delimiter" in caplog.text
