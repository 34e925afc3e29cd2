"""CommonMark syntax trees: node types, tree operations, CommonMark output and HTML helpers."""

__version__ = "0.1.0"

__all__ = [
    "anchors",
    "cmwriter",
    "commonmark",
    "ctype",
    "entity",
    "escaping",
    "nodes",
    "options",
    "tree",
]