"""Turning heading text into unique, human-readable anchors."""

from __future__ import annotations

import regex

_REJECTED_CHARS = regex.compile(r"[^\p{L}\p{M}\p{N}\p{Pc} -]")


class Anchorizer:
    """Converts heading text into canonical anchors that are unique per instance.

    Every anchor handed out is remembered, so use one anchorizer per document.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()

    def anchorize(self, header: str) -> str:
        """Return the anchor for ``header``, suffixed with ``-N`` if already used.

        The text is lower-cased, characters other than letters, marks,
        numbers, connector punctuation, spaces and hyphens are dropped, and
        spaces become hyphens.
        """
        base = _REJECTED_CHARS.sub("", header.lower()).replace(" ", "-")
        anchor = base
        uniq = 0
        while anchor in self._seen:
            uniq += 1
            anchor = f"{base}-{uniq}"
        self._seen.add(anchor)
        return anchor