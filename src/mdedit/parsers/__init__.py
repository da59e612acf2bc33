#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Host adapters that build formatting trees from host content."""

from mdedit.parsers.html import HtmlTreeParser, html_to_tree

__all__ = ["HtmlTreeParser", "html_to_tree"]
