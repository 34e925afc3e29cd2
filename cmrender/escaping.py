"""HTML escaping helpers and the GFM tag filter."""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Union

from cmrender.ctype import isspace

_ESCAPES = {'"': "&quot;", "&": "&amp;", "<": "&lt;", ">": "&gt;"}
_NEEDS_ESCAPE = re.compile(r'["&<>]')

_HREF_SAFE = frozenset(
    "-_.+!*(),%#@?=;:/,+$~abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)

_TAGFILTER_BLACKLIST = (
    "title",
    "textarea",
    "style",
    "xmp",
    "iframe",
    "noembed",
    "noframes",
    "script",
    "plaintext",
)

_DANGEROUS_URL = re.compile(
    r"(?:data:(?!image/(?:png|gif|jpeg|webp))|javascript:|vbscript:|file:)",
    re.IGNORECASE,
)

Attributes = Union[Mapping[str, str], Iterable[tuple[str, str]]]


def escape(text: str) -> str:
    """Escape ``"``, ``&``, ``<`` and ``>`` for use in HTML text.

    Suitable for free text, not for URLs in attributes (see ``escape_href``).
    """
    return _NEEDS_ESCAPE.sub(lambda m: _ESCAPES[m.group()], text)


def _href_char(ch: str) -> str:
    if ch in _HREF_SAFE:
        return ch
    if ch == "&":
        return "&amp;"
    if ch == "'":
        return "&#x27;"
    return "".join(f"%{byte:02X}" for byte in ch.encode("utf-8"))


def escape_href(text: str) -> str:
    """Escape a URL for use in an HTML attribute.

    Safe characters, ``%`` among them, pass through, so existing
    percent-encoding is kept; everything else is percent-encoded byte by byte.
    """
    return "".join(_href_char(ch) for ch in text)


def write_opening_tag(tag: str, attributes: Attributes = ()) -> str:
    """Return an opening tag with the given attributes; values are escaped."""
    pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
    rendered = "".join(f' {name}="{escape(value)}"' for name, value in pairs)
    return f"<{tag}{rendered}>"


def tagfilter(literal: str) -> bool:
    """Whether ``literal`` starts with a tag that the GFM tag filter disallows."""
    if len(literal) < 3 or literal[0] != "<":
        return False

    i = 2 if literal[1] == "/" else 1
    lowered = literal[i:].lower()
    for name in _TAGFILTER_BLACKLIST:
        if lowered.startswith(name):
            j = i + len(name)
            if j >= len(literal):
                return False
            return (
                isspace(literal[j])
                or literal[j] == ">"
                or (literal[j] == "/" and len(literal) >= j + 2 and literal[j + 1] == ">")
            )
    return False


def tagfilter_block(text: str) -> str:
    """Replace the ``<`` of every disallowed tag in ``text`` by ``&lt;``."""
    parts: list[str] = []
    pos = 0
    while (lt := text.find("<", pos)) != -1:
        parts.append(text[pos:lt])
        parts.append("&lt;" if tagfilter(text[lt:]) else "<")
        pos = lt + 1
    parts.append(text[pos:])
    return "".join(parts)


def dangerous_url(url: str) -> bool:
    """Whether ``url`` uses a scheme that is unsafe to render as a link."""
    return _DANGEROUS_URL.match(url) is not None