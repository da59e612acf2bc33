#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the HTML host adapter."""
# src/mdedit/options/html.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from mdedit.constants import DEFAULT_HTML_PARSER, DEFAULT_UNKNOWN_TAG_MODE, UnknownTagMode
from mdedit.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class HtmlOptions(CloneFrozenMixin):
    """Options for building a formatting tree from editor HTML.

    Parameters
    ----------
    unknown_tags : {"error", "unwrap", "drop"}, default "error"
        What to do with elements that have no formatting node:
        raise UnsupportedTagError, keep their children in place, or drop
        them with their content.
    html_parser : str, default "html.parser"
        BeautifulSoup parser backend.
    keep_whitespace_text : bool, default False
        Keep whitespace-only text between block elements.

    """

    unknown_tags: UnknownTagMode = field(
        default=DEFAULT_UNKNOWN_TAG_MODE,
        metadata={"help": "Handling of elements without a formatting node", "choices": ["error", "unwrap", "drop"]},
    )
    html_parser: str = field(default=DEFAULT_HTML_PARSER, metadata={"help": "BeautifulSoup parser backend"})
    keep_whitespace_text: bool = field(
        default=False,
        metadata={"help": "Keep whitespace-only text between block elements"},
    )

    def __post_init__(self) -> None:
        """Validate the unknown tag mode.

        Raises
        ------
        ValueError
            If unknown_tags is not a supported mode.

        """
        if self.unknown_tags not in get_args(UnknownTagMode):
            raise ValueError(f"unknown_tags must be one of {get_args(UnknownTagMode)}, got {self.unknown_tags!r}")
