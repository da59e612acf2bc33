#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning formatting trees into output text."""

from mdedit.renderers.markdown import MarkdownSerializer, to_markdown

__all__ = ["MarkdownSerializer", "to_markdown"]
