"""Document tree consumed by the renderer.

The tree is built once per render call (see :mod:`ink.render.parser`) and never
mutated.  Every node carries a closed kind tag; kinds a parser extension adds
without a dedicated tag arrive as ``UNKNOWN`` and render as their children.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class BlockKind(enum.Enum):
    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    FENCED_CODE_BLOCK = "fenced_code_block"
    CODE_BLOCK = "code_block"
    BLOCKQUOTE = "blockquote"
    LIST = "list"
    LIST_ITEM = "list_item"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    THEMATIC_BREAK = "thematic_break"
    TEXT_BLOCK = "text_block"
    HTML_BLOCK = "html_block"
    UNKNOWN = "unknown"


class InlineKind(enum.Enum):
    TEXT = "text"
    CODE_SPAN = "code_span"
    EMPHASIS = "emphasis"
    LINK = "link"
    AUTO_LINK = "auto_link"
    IMAGE = "image"
    STRIKETHROUGH = "strikethrough"
    TASK_CHECK_BOX = "task_check_box"
    RAW_PASSTHROUGH = "raw_passthrough"
    UNKNOWN = "unknown"


class Alignment(enum.Enum):
    """Per-column alignment of a GFM table."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class Node:
    """One block or inline node.

    Only the fields relevant to ``kind`` are meaningful:

    * ``literal`` -- text of TEXT, code of code blocks, raw markup of
      RAW_PASSTHROUGH / HTML_BLOCK, the URL of AUTO_LINK
    * ``level`` -- HEADING level, EMPHASIS level (1 italic, 2 bold)
    * ``ordered`` / ``start`` -- LIST
    * ``checked`` -- TASK_CHECK_BOX
    * ``destination`` -- LINK / AUTO_LINK / IMAGE target
    * ``info`` -- FENCED_CODE_BLOCK info string
    * ``header`` -- TABLE_ROW is the header row
    * ``alignments`` -- TABLE declared column alignments
    * ``soft_break`` / ``hard_break`` -- TEXT line-break flags
    * ``type_name`` -- the parser's own type for UNKNOWN nodes
    """

    kind: BlockKind | InlineKind
    children: tuple[Node, ...] = ()
    literal: str = ""
    level: int = 0
    ordered: bool = False
    start: int = 1
    checked: bool = False
    destination: str = ""
    info: str = ""
    header: bool = False
    alignments: tuple[Alignment, ...] = ()
    soft_break: bool = False
    hard_break: bool = False
    type_name: str = ""

    @property
    def is_block(self) -> bool:
        return isinstance(self.kind, BlockKind)

    def children_of(self, kind: BlockKind | InlineKind) -> list[Node]:
        """Direct children with the given kind, in document order."""
        return [child for child in self.children if child.kind is kind]
