"""Terminal text utilities: ANSI handling, width measurement, word wrapping.

Everything here measures *visible* width: escape sequences count as zero
columns, wide (CJK / emoji) grapheme clusters count as two.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

RESET = "\x1b[0m"

# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC / APC sequences
# ---------------------------------------------------------------------------

_ESCAPE_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"                 # CSI
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"   # OSC (hyperlinks etc.)
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"    # APC
)
_SGR_RE = re.compile(r"\x1b\[([0-9;]*)m")

# A physical line splits into escape codes, runs of blanks and words.
_TOKEN_RE = re.compile(_ESCAPE_RE.pattern + r"|[ \t]+|[^ \t\x1b]+|\x1b")

_TAB = "   "

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Width measurement
# ---------------------------------------------------------------------------


def strip_ansi(text: str) -> str:
    """Remove every escape sequence from *text*."""
    return _ESCAPE_RE.sub("", text)


def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster."""
    if not g:
        return 0

    first = ord(g[0])
    if len(g) == 1:
        if first < 0x20 or 0x7F <= first <= 0x9F:
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    # Multi-codepoint clusters: VS16, ZWJ sequences, skin tones and flags
    # all render as a two-column emoji.
    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2
    if first >= 0x1F000 or 0x2600 <= first <= 0x27BF:
        return 2

    if unicodedata.category(g[0]) in ("Mn", "Mc", "Me", "Cf"):
        return 0
    return max(_wcwidth.wcwidth(g[0]), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    Escape sequences are ignored and tabs count as three columns.  Pure
    printable ASCII takes a fast path; other strings are measured per
    grapheme cluster and cached.
    """
    if not text:
        return 0

    stripped = strip_ansi(text).replace("\t", _TAB)
    if not stripped:
        return 0
    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def pad_to_width(text: str, width: int) -> str:
    """Right-pad *text* with spaces to *width* visible columns."""
    gap = width - visible_width(text)
    if gap <= 0:
        return text
    return text + " " * gap


# ---------------------------------------------------------------------------
# AnsiCodeTracker
# ---------------------------------------------------------------------------

_SGR_ON = {
    1: "bold",
    2: "dim",
    3: "italic",
    4: "underline",
    5: "blink",
    7: "inverse",
    8: "hidden",
    9: "strikethrough",
}
_SGR_OFF = {
    22: ("bold", "dim"),
    23: ("italic",),
    24: ("underline",),
    25: ("blink",),
    27: ("inverse",),
    28: ("hidden",),
    29: ("strikethrough",),
    39: ("fg_color",),
    49: ("bg_color",),
}
_ATTR_ORDER = (*_SGR_ON.values(), "fg_color", "bg_color")


class AnsiCodeTracker:
    """Track active SGR (Select Graphic Rendition) state.

    Feeding every escape code of a line through :meth:`process` lets the
    wrapper close a line with a reset and re-open the same state on the
    next one.
    """

    def __init__(self) -> None:
        self._active: dict[str, str] = {}

    def process(self, code: str) -> None:
        """Update tracked state from an SGR sequence like ``\\x1b[1;31m``."""
        match = _SGR_RE.fullmatch(code)
        if match is None:
            return
        params = [int(p) if p else 0 for p in match.group(1).split(";")]

        i = 0
        while i < len(params):
            val = params[i]
            if val == 0:
                self.clear()
            elif val in _SGR_ON:
                self._active[_SGR_ON[val]] = f"\x1b[{val}m"
            elif val in _SGR_OFF:
                for attr in _SGR_OFF[val]:
                    self._active.pop(attr, None)
            elif val in (38, 48):
                slot = "fg_color" if val == 38 else "bg_color"
                mode = params[i + 1] if i + 1 < len(params) else None
                if mode == 5 and i + 2 < len(params):
                    self._active[slot] = f"\x1b[{val};5;{params[i + 2]}m"
                    i += 2
                elif mode == 2 and i + 4 < len(params):
                    r, g, b = params[i + 2 : i + 5]
                    self._active[slot] = f"\x1b[{val};2;{r};{g};{b}m"
                    i += 4
            elif 30 <= val <= 37 or 90 <= val <= 97:
                self._active["fg_color"] = f"\x1b[{val}m"
            elif 40 <= val <= 47 or 100 <= val <= 107:
                self._active["bg_color"] = f"\x1b[{val}m"
            i += 1

    def clear(self) -> None:
        self._active.clear()

    def get_active_codes(self) -> str:
        """Return a string of codes that reactivate the current state."""
        return "".join(self._active[attr] for attr in _ATTR_ORDER if attr in self._active)

    def get_line_end_reset(self) -> str:
        return RESET if self._active else ""


# ---------------------------------------------------------------------------
# wrap_text_with_ansi
# ---------------------------------------------------------------------------


def wrap_text_with_ansi(text: str, width: int) -> list[str]:
    """Word-wrap *text* to *width* columns, preserving escape codes.

    Each physical line (split on ``\\n``) is wrapped separately.  SGR state
    carries across line boundaries: a wrapped line ends with a reset and the
    next line re-opens whatever was active.  Words wider than *width* are
    broken at grapheme boundaries.
    """
    if width <= 0:
        return [text]

    tracker = AnsiCodeTracker()
    result: list[str] = []
    for physical_line in text.split("\n"):
        result.extend(_wrap_single_line(physical_line, width, tracker))
    return result


def _wrap_single_line(line: str, width: int, tracker: AnsiCodeTracker) -> list[str]:
    if not line:
        return [""]

    lines: list[str] = []
    current: list[str] = [tracker.get_active_codes()]
    current_width = 0
    pending_blank = ""

    def flush() -> None:
        nonlocal current, current_width
        lines.append("".join(current) + tracker.get_line_end_reset())
        current = [tracker.get_active_codes()]
        current_width = 0

    for token in _TOKEN_RE.findall(line):
        if token[0] == "\x1b":
            # Blanks before a code belong to the style they were written in.
            if pending_blank and current_width + len(pending_blank) <= width:
                current.append(pending_blank)
                current_width += len(pending_blank)
            pending_blank = ""
            tracker.process(token)
            current.append(token)
            continue

        if token[0] in " \t":
            pending_blank += token.replace("\t", _TAB)
            continue

        word_width = visible_width(token)
        if current_width + len(pending_blank) + word_width <= width:
            current.append(pending_blank)
            current.append(token)
            current_width += len(pending_blank) + word_width
            pending_blank = ""
            continue

        if current_width > 0:
            # Blanks at a break point are dropped.
            flush()
        elif pending_blank:
            # Leading indentation is kept; the word breaks after it.
            current.append(pending_blank[:width])
            current_width += len(pending_blank[:width])
        pending_blank = ""

        if current_width + word_width <= width:
            current.append(token)
            current_width += word_width
            continue

        for g in grapheme.graphemes(token):
            gw = _grapheme_width(g)
            if current_width + gw > width and current_width > 0:
                flush()
            current.append(g)
            current_width += gw

    if pending_blank and current_width + len(pending_blank) <= width:
        current.append(pending_blank)

    lines.append("".join(current) + tracker.get_line_end_reset())
    return lines
