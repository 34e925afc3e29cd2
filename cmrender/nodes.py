"""Node values of the CommonMark syntax tree and helpers for building it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from cmrender.tree import Node


class ListType(enum.Enum):
    """Whether a list is bulleted or numbered."""

    BULLET = "bullet"
    ORDERED = "ordered"


class ListDelimType(enum.Enum):
    """The delimiter after the number of an ordered list item."""

    PERIOD = "period"
    PAREN = "paren"


class TableAlignment(enum.Enum):
    """Alignment of a table column."""

    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class LineColumn:
    """A one-based line and column in the source."""

    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class Sourcepos:
    """The span of source text a node was parsed from."""

    start: LineColumn = field(default_factory=LineColumn)
    end: LineColumn = field(default_factory=LineColumn)

    @classmethod
    def of(cls, start_line: int, start_column: int, end_line: int, end_column: int) -> Sourcepos:
        """Build a span from four numbers."""
        return cls(LineColumn(start_line, start_column), LineColumn(end_line, end_column))

    def __str__(self) -> str:
        return f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"


@dataclass
class Document:
    """The root of every tree."""


@dataclass
class FrontMatter:
    """Front matter copied verbatim from the start of the document."""

    text: str = ""


@dataclass
class BlockQuote:
    """A block quote."""


@dataclass
class _ListAttributes:
    list_type: ListType = ListType.BULLET
    marker_offset: int = 0
    padding: int = 0
    start: int = 1
    delimiter: ListDelimType = ListDelimType.PERIOD
    bullet_char: str = "-"
    tight: bool = False


@dataclass
class ListInfo(_ListAttributes):
    """A bulleted or ordered list."""


@dataclass
class Item(_ListAttributes):
    """An item of a list."""


@dataclass
class DescriptionList:
    """A description list."""


@dataclass
class DescriptionItem:
    """An item of a description list."""

    marker_offset: int = 0
    padding: int = 0


@dataclass
class DescriptionTerm:
    """The term of a description item."""


@dataclass
class DescriptionDetails:
    """The details of a description item."""


@dataclass
class Heading:
    """An ATX or setext heading."""

    level: int = 1
    setext: bool = False


@dataclass
class CodeBlock:
    """A fenced or indented code block."""

    fenced: bool = False
    fence_char: str = ""
    fence_length: int = 0
    fence_offset: int = 0
    info: str = ""
    literal: str = ""


@dataclass
class HtmlBlock:
    """A block of raw HTML."""

    block_type: int = 0
    literal: str = ""


@dataclass
class ThematicBreak:
    """A thematic break."""


@dataclass
class Paragraph:
    """A paragraph."""


@dataclass
class Text:
    """Literal text."""

    literal: str = ""


@dataclass
class LineBreak:
    """A hard line break."""


@dataclass
class SoftBreak:
    """A soft line break."""


@dataclass
class Code:
    """An inline code span."""

    literal: str = ""
    num_backticks: int = 1


@dataclass
class HtmlInline:
    """Inline raw HTML."""

    literal: str = ""


@dataclass
class Strong:
    """Strong emphasis."""


@dataclass
class Emph:
    """Emphasis."""


@dataclass
class Strikethrough:
    """Struck-through text."""


@dataclass
class Superscript:
    """Superscript text."""


@dataclass
class Link:
    """A link."""

    url: str = ""
    title: str = ""


@dataclass
class Image:
    """An image."""

    url: str = ""
    title: str = ""


@dataclass
class Table:
    """A table."""

    alignments: list[TableAlignment] = field(default_factory=list)
    num_columns: int = 0


@dataclass
class TableRow:
    """A table row; ``header`` is true for the header row."""

    header: bool = False


@dataclass
class TableCell:
    """A table cell."""


@dataclass
class FootnoteDefinition:
    """The definition of a footnote."""

    name: str = ""
    total_references: int = 0


@dataclass
class FootnoteReference:
    """A reference to a footnote."""

    name: str = ""
    ref_num: int = 1
    ix: int = 1


@dataclass
class TaskItem:
    """A task-list item; ``symbol`` is the check character, or None when unchecked."""

    symbol: Optional[str] = None


NodeValue = Union[
    Document,
    FrontMatter,
    BlockQuote,
    ListInfo,
    Item,
    DescriptionList,
    DescriptionItem,
    DescriptionTerm,
    DescriptionDetails,
    Heading,
    CodeBlock,
    HtmlBlock,
    ThematicBreak,
    Paragraph,
    Text,
    LineBreak,
    SoftBreak,
    Code,
    HtmlInline,
    Strong,
    Emph,
    Strikethrough,
    Superscript,
    Link,
    Image,
    Table,
    TableRow,
    TableCell,
    FootnoteDefinition,
    FootnoteReference,
    TaskItem,
]

_BLOCK_TYPES = (
    Document,
    BlockQuote,
    FootnoteDefinition,
    ListInfo,
    DescriptionList,
    DescriptionItem,
    DescriptionTerm,
    DescriptionDetails,
    Item,
    CodeBlock,
    HtmlBlock,
    Paragraph,
    Heading,
    ThematicBreak,
    Table,
    TableRow,
    TableCell,
    TaskItem,
)


@dataclass
class Ast:
    """The payload of a tree node: its value and where it came from."""

    value: NodeValue
    sourcepos: Sourcepos = field(default_factory=Sourcepos)


def is_block(value: NodeValue) -> bool:
    """Whether ``value`` is a block-level node value."""
    return isinstance(value, _BLOCK_TYPES)


def new_node(value: NodeValue, sourcepos: Optional[Sourcepos] = None) -> Node[Ast]:
    """Create a detached tree node holding ``value``."""
    return Node(Ast(value, sourcepos if sourcepos is not None else Sourcepos()))


def containing_block(node: Node[Ast]) -> Optional[Node[Ast]]:
    """The nearest block node among ``node`` and its ancestors."""
    return next((n for n in node.ancestors() if is_block(n.data.value)), None)