"""Options and plugins that control parsing extensions and rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional


class ListStyleType(enum.Enum):
    """The bullet character used for bulleted lists in CommonMark output."""

    DASH = "-"
    PLUS = "+"
    STAR = "*"


@dataclass
class ExtensionOptions:
    """Which syntax extensions are enabled."""

    strikethrough: bool = False
    tagfilter: bool = False
    table: bool = False
    autolink: bool = False
    tasklist: bool = False
    superscript: bool = False
    header_ids: Optional[str] = None
    footnotes: bool = False
    description_lists: bool = False
    front_matter_delimiter: Optional[str] = None
    shortcodes: bool = False


@dataclass
class RenderOptions:
    """How the tree is rendered."""

    hardbreaks: bool = False
    github_pre_lang: bool = False
    full_info_string: bool = False
    width: int = 0
    unsafe: bool = False
    escape: bool = False
    list_style: ListStyleType = ListStyleType.DASH
    sourcepos: bool = False

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"width must not be negative, got {self.width}")


@dataclass
class Options:
    """All options together."""

    extension: ExtensionOptions = field(default_factory=ExtensionOptions)
    render: RenderOptions = field(default_factory=RenderOptions)


@dataclass
class RenderPlugins:
    """Adapters that take over parts of HTML rendering."""

    codefence_syntax_highlighter: Optional[Any] = None
    heading_adapter: Optional[Any] = None


@dataclass
class Plugins:
    """All plugins together."""

    render: RenderPlugins = field(default_factory=RenderPlugins)