#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options classes for mdedit."""

from mdedit.options.base import BaseRendererOptions, CloneFrozenMixin
from mdedit.options.editor import EditorOptions
from mdedit.options.html import HtmlOptions
from mdedit.options.markdown import MarkdownSerializerOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "EditorOptions",
    "HtmlOptions",
    "MarkdownSerializerOptions",
]
