#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/renderers/markdown.py
"""Markdown serialization of formatting trees.

This module provides the MarkdownSerializer class which converts a
formatting tree to Markdown text. Every node kind has an explicit rule; a
node without one (an image, a heading of level 6, a list item outside a
list) aborts the whole serialization with UnsupportedTagError rather than
producing partial output.

The serializer keeps one piece of traversal context, the list indent depth,
which is saved and restored around every recursive call. A fresh instance
is used per call of ``to_markdown``, so serialization is re-entrant and
touches no shared state.

"""

from __future__ import annotations

import logging
from typing import Optional

from mdedit.ast.nodes import (
    Bold,
    Container,
    Division,
    Element,
    Heading,
    Image,
    Italic,
    LineBreak,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Text,
    UnorderedList,
)
from mdedit.ast.utils import extract_text, is_blank
from mdedit.ast.visitors import NodeVisitor
from mdedit.constants import BLOCK_SEPARATOR, MAX_MARKDOWN_HEADING_LEVEL
from mdedit.exceptions import UnsupportedTagError
from mdedit.options.markdown import MarkdownSerializerOptions

logger = logging.getLogger(__name__)


class MarkdownSerializer(NodeVisitor):
    """Serialize formatting tree nodes to Markdown text.

    Parameters
    ----------
    options : MarkdownSerializerOptions or None, default = None
        Marker and indentation options

    Examples
    --------
        >>> from mdedit.ast import Link, Text
        >>> MarkdownSerializer().serialize(Link(href="http://x", children=[Text("go")]))
        '[go](http://x)'

    """

    def __init__(self, options: MarkdownSerializerOptions | None = None):
        """Initialize the serializer with options."""
        self.options: MarkdownSerializerOptions = options or MarkdownSerializerOptions()
        self._indent_depth: int = 0

    def serialize(self, node: Node) -> str:
        """Serialize a node and its subtree.

        Parameters
        ----------
        node : Node
            Subtree root

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        UnsupportedTagError
            If any node in the subtree has no Markdown rule

        """
        self._indent_depth = 0
        return self._node(node)

    def _node(self, node: Node, indent_depth: int = 0) -> str:
        saved_depth = self._indent_depth
        self._indent_depth = indent_depth
        try:
            return node.accept(self)
        finally:
            self._indent_depth = saved_depth

    def _children(self, node: Element, indent_depth: int = 0) -> str:
        return "".join(self._node(child, indent_depth) for child in node.children)

    def _unsupported(self, node: Element) -> UnsupportedTagError:
        return UnsupportedTagError(node.tag_name, extract_text(node))

    def _surround_with_marker(self, node: Element, marker: str) -> str:
        return marker + self._children(node) + marker

    def _list(self, node: Element, indent_depth: int) -> str:
        """Serialize an ordered or unordered list.

        Blank entries are skipped before numbering, so ordered lists count
        only the entries that are written. Children that are not list items
        are nested sublists and are indented one level deeper.
        """
        entries = [child for child in node.children if not is_blank(child)]

        parts = []
        for list_index, entry in enumerate(entries):
            if not isinstance(entry, ListItem):
                parts.append(self._node(entry, indent_depth + 1))
            elif isinstance(node, OrderedList):
                parts.append(self._list_entry(entry, indent_depth, f"{list_index + 1}. "))
            else:
                parts.append(self._list_entry(entry, indent_depth, f"{self.options.bullet_marker} "))

        md = "".join(parts)
        if indent_depth == 0:
            md += "\n"
        return md

    def _list_entry(self, item: ListItem, indent_depth: int, marker: str) -> str:
        indent = self.options.indent * indent_depth
        return indent + marker + self._children(item, indent_depth + 1) + "\n"

    def visit_text(self, node: Text) -> str:
        """Render text literally, without escaping."""
        return node.content

    def visit_heading(self, node: Heading) -> str:
        """Render a heading of level 1 to 5.

        Raises
        ------
        UnsupportedTagError
            For level 6, which has no rule

        """
        if node.level > MAX_MARKDOWN_HEADING_LEVEL:
            raise self._unsupported(node)
        return "#" * node.level + " " + self._children(node) + BLOCK_SEPARATOR

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a paragraph."""
        return self._children(node) + BLOCK_SEPARATOR

    def visit_division(self, node: Division) -> str:
        """Render a generic block container like a paragraph."""
        return self._children(node) + BLOCK_SEPARATOR

    def visit_bold(self, node: Bold) -> str:
        """Render bold text."""
        return self._surround_with_marker(node, self.options.bold_marker)

    def visit_italic(self, node: Italic) -> str:
        """Render italic text."""
        return self._surround_with_marker(node, self.options.italic_marker)

    def visit_unordered_list(self, node: UnorderedList) -> str:
        """Render an unordered list at the current indent depth."""
        return self._list(node, self._indent_depth)

    def visit_ordered_list(self, node: OrderedList) -> str:
        """Render an ordered list at the current indent depth."""
        return self._list(node, self._indent_depth)

    def visit_list_item(self, node: ListItem) -> str:
        # list items are rendered by their list; reaching one here means it is orphaned
        raise self._unsupported(node)

    def visit_link(self, node: Link) -> str:
        """Render an inline link."""
        return "[" + self._children(node) + "](" + node.href + ")"

    def visit_image(self, node: Image) -> str:
        raise self._unsupported(node)

    def visit_line_break(self, node: LineBreak) -> str:
        """Render a hard break as a block separator."""
        return BLOCK_SEPARATOR

    def visit_container(self, node: Container) -> str:
        """Render a transient container as its children, at the current depth."""
        return self._children(node, self._indent_depth)


def to_markdown(node: Node, options: Optional[MarkdownSerializerOptions] = None) -> str:
    """Serialize a formatting tree to Markdown.

    Parameters
    ----------
    node : Node
        Subtree root; not modified
    options : MarkdownSerializerOptions, optional
        Serializer options

    Returns
    -------
    str
        Markdown text

    Raises
    ------
    UnsupportedTagError
        If any node in the subtree has no Markdown rule

    Examples
    --------
        >>> from mdedit.ast import Heading, Text
        >>> to_markdown(Heading(level=5, children=[Text("x")]))
        '##### x\\n\\n'

    """
    try:
        return MarkdownSerializer(options).serialize(node)
    except UnsupportedTagError as e:
        logger.debug("Serialization aborted at <%s>: %s", e.tag_name, e.message)
        raise
