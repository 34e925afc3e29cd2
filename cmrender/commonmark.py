"""Rendering of the syntax tree back to CommonMark text."""

from __future__ import annotations

import re
from typing import Optional

from cmrender.cmwriter import CommonMarkWriter, Escaping, longest_char_sequence, shortest_unused_sequence
from cmrender.ctype import isspace
from cmrender.nodes import (
    Ast,
    BlockQuote,
    Code,
    CodeBlock,
    DescriptionDetails,
    Emph,
    FootnoteDefinition,
    FootnoteReference,
    FrontMatter,
    Heading,
    HtmlBlock,
    HtmlInline,
    Image,
    Item,
    LineBreak,
    Link,
    ListDelimType,
    ListInfo,
    ListType,
    Paragraph,
    SoftBreak,
    Strikethrough,
    Strong,
    Superscript,
    Table,
    TableAlignment,
    TableCell,
    TableRow,
    TaskItem,
    Text,
    ThematicBreak,
    containing_block,
)
from cmrender.options import Options, Plugins
from cmrender.tree import Node

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9.+\-]{1,31}:")

_ALIGN_MARKERS = {
    TableAlignment.LEFT: ":--",
    TableAlignment.CENTER: ":-:",
    TableAlignment.RIGHT: "--:",
    TableAlignment.NONE: "---",
}

_ITEM_TYPES = (Item, TaskItem)


def is_autolink(node: Node[Ast], link: Link) -> bool:
    """Whether ``node`` can be written as ``<url>`` instead of ``[text](url)``."""
    if not link.url or _SCHEME.match(link.url) is None:
        return False
    if link.title:
        return False
    child = node.first_child
    if child is None or not isinstance(child.data.value, Text):
        return False
    return link.url.removeprefix("mailto:") == child.data.value.literal


def _is_item(node: Optional[Node[Ast]]) -> bool:
    return node is not None and isinstance(node.data.value, _ITEM_TYPES)


def _list_is_tight(node: Optional[Node[Ast]]) -> bool:
    return node is not None and isinstance(node.data.value, ListInfo) and node.data.value.tight


class _CommonMarkFormatter:
    def __init__(self, options: Options) -> None:
        self.options = options
        self.w = CommonMarkWriter(options.render.width)
        self._node: Optional[Node[Ast]] = None
        self.footnote_ix = 0

    def format(self, root: Node[Ast]) -> str:
        stack: list[tuple[Node[Ast], bool]] = [(root, False)]
        while stack:
            node, leaving = stack.pop()
            if leaving:
                self._format_node(node, False)
            elif self._format_node(node, True):
                stack.append((node, True))
                stack.extend((child, False) for child in node.reverse_children())
        text = self.w.getvalue()
        if text and not text.endswith("\n"):
            text += "\n"
        return text

    def _table_escape(self, c: str) -> bool:
        node = self._node
        if node is not None and isinstance(node.data.value, (Table, TableRow, TableCell)):
            return False
        return c == "|"

    def _in_tight_list_item(self, node: Node[Ast]) -> bool:
        block = containing_block(node)
        if block is None:
            return False
        if _is_item(block):
            return _list_is_tight(block.parent)
        parent = block.parent
        if _is_item(parent):
            return _list_is_tight(parent.parent)
        return False

    def _format_node(self, node: Node[Ast], entering: bool) -> bool:
        self._node = node
        w = self.w
        render = self.options.render
        allow_wrap = render.width > 0 and not render.hardbreaks
        value = node.data.value
        parent = node.parent

        if entering:
            if _is_item(parent):
                w.in_tight_list_item = self._in_tight_list_item(node)
        elif isinstance(value, ListInfo):
            w.in_tight_list_item = _is_item(parent) and self._in_tight_list_item(node)

        match value:
            case FrontMatter():
                if entering:
                    w.output(value.text, False, Escaping.LITERAL)
            case BlockQuote():
                if entering:
                    w.write("> ")
                    w.begin_content = True
                    w.prefix += "> "
                else:
                    w.prefix = w.prefix[:-2]
                    w.blankline()
            case ListInfo():
                following = node.next_sibling
                if (
                    not entering
                    and following is not None
                    and isinstance(following.data.value, (CodeBlock, ListInfo))
                ):
                    w.cr()
                    w.write("<!-- end list -->")
                    w.blankline()
            case Item():
                self._format_item(node, entering)
            case TaskItem():
                self._format_item(node, entering)
                if entering:
                    w.write(f"[{value.symbol or ' '}] ")
            case DescriptionDetails():
                if entering:
                    w.write(": ")
            case Heading():
                if entering:
                    w.write("#" * value.level + " ")
                    w.begin_content = True
                    w.no_linebreaks = True
                else:
                    w.no_linebreaks = False
                    w.blankline()
            case CodeBlock():
                if entering:
                    self._format_code_block(node, value)
            case HtmlBlock():
                if entering:
                    w.blankline()
                    w.write(value.literal)
                    w.blankline()
            case ThematicBreak():
                if entering:
                    w.blankline()
                    w.write("-----")
                    w.blankline()
            case Paragraph():
                if not entering:
                    w.blankline()
            case Text():
                if entering:
                    w.output(value.literal, allow_wrap, Escaping.NORMAL)
            case LineBreak():
                if entering:
                    if not render.hardbreaks:
                        w.write("\\")
                    w.cr()
            case SoftBreak():
                if entering:
                    if not w.no_linebreaks and render.width == 0 and not render.hardbreaks:
                        w.cr()
                    else:
                        w.output(" ", allow_wrap, Escaping.LITERAL)
            case Code():
                if entering:
                    self._format_code(value.literal, allow_wrap)
            case HtmlInline():
                if entering:
                    w.write(value.literal)
            case Strong():
                if parent is None or not isinstance(parent.data.value, Strong):
                    w.write("**")
            case Emph():
                nested = (
                    parent is not None
                    and isinstance(parent.data.value, Emph)
                    and node.next_sibling is None
                    and node.previous_sibling is None
                )
                w.write("_" if nested else "*")
            case Strikethrough():
                w.write("~")
            case Superscript():
                w.write("^")
            case Link():
                return self._format_link(node, value, entering)
            case Image():
                if entering:
                    w.write("![")
                else:
                    w.write("](")
                    w.output(value.url, False, Escaping.URL)
                    if value.title:
                        w.output(' "', allow_wrap, Escaping.LITERAL)
                        w.output(value.title, False, Escaping.TITLE)
                        w.write('"')
                    w.write(")")
            case Table():
                w.custom_escape = self._table_escape if entering else None
                w.blankline()
            case TableRow():
                if entering:
                    w.cr()
                    w.write("|")
            case TableCell():
                self._format_table_cell(node, entering)
            case FootnoteDefinition():
                if entering:
                    self.footnote_ix += 1
                    w.write(f"[^{value.name}]:\n")
                    w.prefix += "    "
                else:
                    w.prefix = w.prefix[:-4]
            case FootnoteReference():
                if entering:
                    w.write(f"[^{value.name}]")
        return True

    def _format_item(self, node: Node[Ast], entering: bool) -> None:
        w = self.w
        parent = node.parent
        if parent is None or not isinstance(parent.data.value, ListInfo):
            raise ValueError("list item outside a list")
        info = parent.data.value

        if info.list_type is ListType.BULLET:
            listmarker = ""
            marker_width = 2
        else:
            value = node.data.value
            number = value.start if isinstance(value, Item) else info.start
            delim = ")" if info.delimiter is ListDelimType.PAREN else "."
            listmarker = f"{number}{delim}{'  ' if number < 10 else ' '}"
            marker_width = len(listmarker)

        if entering:
            if info.list_type is ListType.BULLET:
                w.write(f"{self.options.render.list_style.value} ")
            else:
                w.write(listmarker)
            w.begin_content = True
            w.prefix += " " * marker_width
        else:
            w.prefix = w.prefix[: len(w.prefix) - marker_width]
            w.cr()

    def _format_code_block(self, node: Node[Ast], value: CodeBlock) -> None:
        w = self.w
        first_in_list_item = node.previous_sibling is None and _is_item(node.parent)
        if not first_in_list_item:
            w.blankline()

        info = value.info
        literal = value.literal
        indented = (
            not info
            and len(literal) > 2
            and not isspace(literal[0])
            and not (isspace(literal[-1]) and isspace(literal[-2]))
            and not first_in_list_item
        )
        if indented:
            w.write("    ")
            w.prefix += "    "
            w.write(literal)
            w.prefix = w.prefix[:-4]
        else:
            fence_char = "~" if "`" in info else "`"
            fence = fence_char * max(3, longest_char_sequence(literal, fence_char) + 1)
            w.write(fence)
            if info:
                w.write(" ")
                w.write(info)
            w.cr()
            w.write(literal)
            w.cr()
            w.write(fence)
        w.blankline()

    def _format_code(self, literal: str, allow_wrap: bool) -> None:
        w = self.w
        ticks = "`" * shortest_unused_sequence(literal, "`")
        w.write(ticks)
        if literal:
            all_space = all(c in " \r\n" for c in literal)
            has_edge_space = literal[0] == " " or literal[-1] == " "
            has_edge_backtick = literal[0] == "`" or literal[-1] == "`"
            pad = has_edge_backtick or (not all_space and has_edge_space)
        else:
            pad = True
        if pad:
            w.write(" ")
        w.output(literal, allow_wrap, Escaping.LITERAL)
        if pad:
            w.write(" ")
        w.write(ticks)

    def _format_link(self, node: Node[Ast], link: Link, entering: bool) -> bool:
        w = self.w
        if is_autolink(node, link):
            if entering:
                w.write(f"<{link.url.removeprefix('mailto:')}>")
                return False
        elif entering:
            w.write("[")
        else:
            w.write("](")
            w.output(link.url, False, Escaping.URL)
            if link.title:
                w.write(' "')
                w.output(link.title, False, Escaping.TITLE)
                w.write('"')
            w.write(")")
        return True

    def _format_table_cell(self, node: Node[Ast], entering: bool) -> None:
        w = self.w
        if entering:
            w.write(" ")
            return
        w.write(" |")

        row = node.parent
        if row is None or not isinstance(row.data.value, TableRow):
            raise ValueError("table cell outside a table row")
        if row.data.value.header and node.next_sibling is None:
            table = row.parent
            if table is None or not isinstance(table.data.value, Table):
                raise ValueError("table row outside a table")
            w.cr()
            w.write("|")
            for alignment in table.data.value.alignments:
                w.write(f" {_ALIGN_MARKERS[alignment]} |")
            w.cr()


def format_commonmark(
    root: Node[Ast], options: Optional[Options] = None, plugins: Optional[Plugins] = None
) -> str:
    """Render the tree rooted at ``root`` as CommonMark text."""
    return _CommonMarkFormatter(options or Options()).format(root)