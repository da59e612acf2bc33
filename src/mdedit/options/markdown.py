#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown serialization."""
# src/mdedit/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from mdedit.constants import (
    DEFAULT_BOLD_MARKER,
    DEFAULT_BULLET_MARKER,
    DEFAULT_ITALIC_MARKER,
    DEFAULT_LIST_INDENT,
    BoldMarker,
    BulletMarker,
    ItalicMarker,
)
from mdedit.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownSerializerOptions(BaseRendererOptions):
    """Configuration options for formatting tree to Markdown serialization.

    The defaults produce the editor's canonical output: ``**bold**``,
    ``_italic_``, ``- `` bullets and tab-indented nested lists.

    Parameters
    ----------
    bold_marker : {"**", "__"}, default "**"
        Marker placed around bold text.
    italic_marker : {"_", "*"}, default "_"
        Marker placed around italic text.
    bullet_marker : {"-", "*", "+"}, default "-"
        Marker for unordered list items.
    indent : str, default "\\t"
        Indentation unit for one level of list nesting. Must be whitespace.

    """

    bold_marker: BoldMarker = field(
        default=DEFAULT_BOLD_MARKER,
        metadata={"help": "Marker placed around bold text", "choices": ["**", "__"]},
    )
    italic_marker: ItalicMarker = field(
        default=DEFAULT_ITALIC_MARKER,
        metadata={"help": "Marker placed around italic text", "choices": ["_", "*"]},
    )
    bullet_marker: BulletMarker = field(
        default=DEFAULT_BULLET_MARKER,
        metadata={"help": "Marker for unordered list items", "choices": ["-", "*", "+"]},
    )
    indent: str = field(
        default=DEFAULT_LIST_INDENT,
        metadata={"help": "Indentation unit for nested lists"},
    )

    def __post_init__(self) -> None:
        """Validate marker choices and the indent unit.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.bold_marker not in get_args(BoldMarker):
            raise ValueError(f"bold_marker must be one of {get_args(BoldMarker)}, got {self.bold_marker!r}")
        if self.italic_marker not in get_args(ItalicMarker):
            raise ValueError(f"italic_marker must be one of {get_args(ItalicMarker)}, got {self.italic_marker!r}")
        if self.bullet_marker not in get_args(BulletMarker):
            raise ValueError(f"bullet_marker must be one of {get_args(BulletMarker)}, got {self.bullet_marker!r}")
        if not self.indent or self.indent.strip():
            raise ValueError(f"indent must be non-empty whitespace, got {self.indent!r}")
