"""Byte-class predicates used by the CommonMark parser and renderers.

Each predicate accepts either an integer code (0-255) or a one-character
string. Anything outside the ASCII range belongs to no class.
"""

from __future__ import annotations

_OTHER, _SPACE, _PUNCT, _DIGIT, _ALPHA = range(5)


def _build_table() -> bytes:
    table = bytearray(256)
    for code in (0x09, 0x0A, 0x0D, 0x20):
        table[code] = _SPACE
    for low, high in ((0x21, 0x2F), (0x3A, 0x40), (0x5B, 0x60), (0x7B, 0x7E)):
        table[low : high + 1] = bytes([_PUNCT]) * (high - low + 1)
    table[0x30:0x3A] = bytes([_DIGIT]) * 10
    table[0x41:0x5B] = bytes([_ALPHA]) * 26
    table[0x61:0x7B] = bytes([_ALPHA]) * 26
    return bytes(table)


_TABLE = _build_table()


def _class_of(ch: int | str) -> int:
    code = ch if isinstance(ch, int) else ord(ch)
    return _TABLE[code] if 0 <= code < 256 else _OTHER


def isspace(ch: int | str) -> bool:
    """Tab, line feed, carriage return or space."""
    return _class_of(ch) == _SPACE


def ispunct(ch: int | str) -> bool:
    """ASCII punctuation."""
    return _class_of(ch) == _PUNCT


def isdigit(ch: int | str) -> bool:
    """ASCII decimal digit."""
    return _class_of(ch) == _DIGIT


def isalpha(ch: int | str) -> bool:
    """ASCII letter."""
    return _class_of(ch) == _ALPHA


def isalnum(ch: int | str) -> bool:
    """ASCII letter or digit."""
    return _class_of(ch) in (_DIGIT, _ALPHA)