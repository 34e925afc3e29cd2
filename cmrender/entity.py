"""Decoding of HTML character references."""

from __future__ import annotations

import re
from html.entities import html5
from itertools import islice

from cmrender.ctype import isdigit

ENTITY_MIN_LENGTH = 2
ENTITY_MAX_LENGTH = 32

_NUMERIC = re.compile(r"#(?:([0-9]+)|[xX]([0-9a-fA-F]*))", re.ASCII)
_MAX_CODEPOINT = 0x110000
_REPLACEMENT = "\ufffd"


def _unescape_numeric(text: str) -> tuple[str, int] | None:
    if not (isdigit(text[1]) or text[1] in "xX"):
        return None
    match = _NUMERIC.match(text)
    if match is None:
        return None
    decimal, hexadecimal = match.groups()
    digits = decimal if decimal is not None else hexadecimal
    end = match.end()
    if not 1 <= len(digits) <= 8 or text[end : end + 1] != ";":
        return None
    codepoint = min(int(digits, 10 if decimal is not None else 16), _MAX_CODEPOINT)
    if codepoint == 0 or 0xD800 <= codepoint <= 0xE000 or codepoint >= _MAX_CODEPOINT:
        return _REPLACEMENT, end + 1
    return chr(codepoint), end + 1


def unescape(text: str) -> tuple[str, int] | None:
    """Decode the character reference at the start of ``text``.

    ``text`` is what follows the ``&``. Returns the decoded characters and
    the number of characters consumed (including the ``;``), or None.
    """
    if len(text) >= 3 and text[0] == "#":
        numeric = _unescape_numeric(text)
        if numeric is not None:
            return numeric

    size = min(len(text), ENTITY_MAX_LENGTH)
    for i, ch in enumerate(islice(text, ENTITY_MIN_LENGTH, size), start=ENTITY_MIN_LENGTH):
        if ch == " ":
            return None
        if ch == ";":
            characters = html5.get(text[:i] + ";")
            return None if characters is None else (characters, i + 1)
    return None


def unescape_html(src: str) -> str:
    """Replace every valid character reference in ``src`` by its characters."""
    if "&" not in src:
        return src

    parts: list[str] = []
    pos = 0
    while (amp := src.find("&", pos)) != -1:
        parts.append(src[pos:amp])
        start = amp + 1
        decoded = unescape(src[start : start + ENTITY_MAX_LENGTH])
        if decoded is None:
            parts.append("&")
            pos = start
        else:
            characters, consumed = decoded
            parts.append(characters)
            pos = start + consumed
    parts.append(src[pos:])
    return "".join(parts)