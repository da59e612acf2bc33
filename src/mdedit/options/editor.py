#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for editor sessions."""
# src/mdedit/options/editor.py

from __future__ import annotations

from dataclasses import dataclass, field

from mdedit.constants import (
    DEFAULT_IMAGE_SRC,
    DEFAULT_LINK_HREF,
    DEFAULT_LINK_TEXT,
    DEFAULT_LIST_ITEM_PLACEHOLDER,
)
from mdedit.options.base import CloneFrozenMixin
from mdedit.options.markdown import MarkdownSerializerOptions


@dataclass(frozen=True)
class EditorOptions(CloneFrozenMixin):
    """Options for an editor session.

    Parameters
    ----------
    list_item_placeholder : str, default "List item"
        Text of a new list item inserted over an empty selection.
    link_text : str, default "Link"
        Text of a newly inserted link.
    link_href : str, default "#"
        Target of a newly inserted link.
    image_src : str, default "#"
        Source of a newly inserted image.
    markdown : MarkdownSerializerOptions
        Options used by ``Editor.to_markdown``.

    """

    list_item_placeholder: str = field(
        default=DEFAULT_LIST_ITEM_PLACEHOLDER,
        metadata={"help": "Text of a new list item inserted over an empty selection"},
    )
    link_text: str = field(default=DEFAULT_LINK_TEXT, metadata={"help": "Text of a newly inserted link"})
    link_href: str = field(default=DEFAULT_LINK_HREF, metadata={"help": "Target of a newly inserted link"})
    image_src: str = field(default=DEFAULT_IMAGE_SRC, metadata={"help": "Source of a newly inserted image"})
    markdown: MarkdownSerializerOptions = field(
        default_factory=MarkdownSerializerOptions,
        metadata={"help": "Markdown serializer options"},
    )

    def __post_init__(self) -> None:
        """Validate placeholder text.

        Raises
        ------
        ValueError
            If a placeholder is empty.

        """
        if not self.list_item_placeholder:
            raise ValueError("list_item_placeholder must not be empty")
        if not self.link_text:
            raise ValueError("link_text must not be empty")
