"""A line-oriented text sink that knows the rules of CommonMark output.

It keeps track of the current line prefix (block quote markers, list
indentation), pending line breaks, escaping of special characters and
optional wrapping at a fixed width.
"""

from __future__ import annotations

import enum
from typing import Callable, Optional

from cmrender.ctype import isalpha, isdigit, ispunct, isspace

_NORMAL_SPECIALS = frozenset("*_[]#<>\\`!")
_URL_SPECIALS = frozenset("`<>\\)(")
_TITLE_SPECIALS = frozenset('`<>"\\')


class Escaping(enum.Enum):
    """How text handed to the writer is escaped."""

    LITERAL = "literal"
    NORMAL = "normal"
    URL = "url"
    TITLE = "title"


class CommonMarkWriter:
    """Accumulates CommonMark text, applying prefixes, escaping and wrapping.

    ``width`` is the wrap width; 0 turns wrapping off.
    """

    def __init__(self, width: int = 0) -> None:
        if width < 0:
            raise ValueError(f"width must not be negative, got {width}")
        self.width = width
        self.prefix = ""
        self.need_cr = 0
        self.column = 0
        self.last_breakable = 0
        self.begin_line = True
        self.begin_content = True
        self.no_linebreaks = False
        self.in_tight_list_item = False
        self.custom_escape: Optional[Callable[[str], bool]] = None
        self._buf: list[str] = []

    def cr(self) -> None:
        """Ask for a line break before the next output."""
        self.need_cr = max(self.need_cr, 1)

    def blankline(self) -> None:
        """Ask for a blank line before the next output."""
        self.need_cr = max(self.need_cr, 2)

    def getvalue(self) -> str:
        """The text written so far."""
        return "".join(self._buf)

    def write(self, text: str) -> int:
        """Write ``text`` literally, without wrapping."""
        self.output(text, False, Escaping.LITERAL)
        return len(text)

    def _flush_newlines(self) -> None:
        buf = self._buf
        k = len(buf) - 1
        while self.need_cr > 0:
            if k < 0 or buf[k] == "\n":
                k -= 1
            else:
                buf.append("\n")
                if self.need_cr > 1:
                    buf.extend(self.prefix)
            self.column = 0
            self.last_breakable = 0
            self.begin_line = True
            self.begin_content = True
            self.need_cr -= 1

    def output(self, text: str, wrap: bool = False, escaping: Escaping = Escaping.LITERAL) -> None:
        """Write ``text`` with the given escaping, wrapping if allowed."""
        wrap = wrap and not self.no_linebreaks

        if self.in_tight_list_item and self.need_cr > 1:
            self.need_cr = 1
        self._flush_newlines()

        buf = self._buf
        size = len(text)
        i = 0
        while i < size:
            c = text[i]
            if self.begin_line:
                buf.extend(self.prefix)
                self.column = len(self.prefix)

            if self.custom_escape is not None and self.custom_escape(c):
                buf.append("\\")

            nextc = text[i + 1] if i + 1 < size else None
            if c == " " and wrap:
                if not self.begin_line:
                    last_nonspace = len(buf)
                    buf.append(" ")
                    self.column += 1
                    self.begin_line = False
                    self.begin_content = False
                    while i + 1 < size and text[i + 1] == " ":
                        i += 1
                    if not (i + 1 < size and isdigit(text[i + 1])):
                        self.last_breakable = last_nonspace
            elif escaping is Escaping.LITERAL:
                if c == "\n":
                    buf.append("\n")
                    self.column = 0
                    self.begin_line = True
                    self.begin_content = True
                    self.last_breakable = 0
                else:
                    buf.append(c)
                    self.column += 1
                    self.begin_line = False
                    self.begin_content = self.begin_content and isdigit(c)
            else:
                self._outc(c, escaping, nextc)
                self.begin_line = False
                self.begin_content = self.begin_content and isdigit(c)

            if (
                self.width > 0
                and self.column > self.width
                and not self.begin_line
                and self.last_breakable > 0
            ):
                remainder = buf[self.last_breakable + 1 :]
                del buf[self.last_breakable :]
                buf.append("\n")
                buf.extend(self.prefix)
                buf.extend(remainder)
                self.column = len(self.prefix) + len(remainder)
                self.last_breakable = 0
                self.begin_line = False
                self.begin_content = False

            i += 1

    def _needs_escaping(self, c: str, escaping: Escaping, nextc: Optional[str]) -> bool:
        if ord(c) >= 0x80 or escaping is Escaping.LITERAL:
            return False
        if escaping is Escaping.NORMAL:
            follows_digit = bool(self._buf) and isdigit(self._buf[-1])
            return (
                ord(c) < 0x20
                or c in _NORMAL_SPECIALS
                or (c == "&" and nextc is not None and isalpha(nextc))
                or (self.begin_content and c in "-+=" and not follows_digit)
                or (
                    self.begin_content
                    and c in ".)"
                    and follows_digit
                    and (nextc is None or isspace(nextc))
                )
            )
        if escaping is Escaping.URL:
            return c in _URL_SPECIALS or isspace(c)
        return c in _TITLE_SPECIALS

    def _outc(self, c: str, escaping: Escaping, nextc: Optional[str]) -> None:
        if not self._needs_escaping(c, escaping, nextc):
            self._buf.append(c)
            self.column += 1
            return
        if escaping is Escaping.URL and isspace(c):
            encoded = f"%{ord(c):2X}"
        elif ispunct(c):
            encoded = "\\" + c
        else:
            encoded = f"&#{ord(c)};"
        self._buf.extend(encoded)
        self.column += len(encoded)


def longest_char_sequence(literal: str, ch: str) -> int:
    """Length of the longest run of ``ch`` in ``literal``."""
    longest = current = 0
    for c in literal:
        if c == ch:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def shortest_unused_sequence(literal: str, ch: str) -> int:
    """Length of the shortest run of ``ch`` that does not occur in ``literal``."""
    used = {0}
    current = 0
    for c in literal:
        if c == ch:
            current += 1
        else:
            if current:
                used.add(current)
            current = 0
    if current:
        used.add(current)
    length = 0
    while length in used:
        length += 1
    return length