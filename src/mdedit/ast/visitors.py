#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/ast/visitors.py
"""Visitor pattern implementation for formatting tree traversal.

Every node kind has exactly one ``visit_*`` method, and all of them are
abstract, so a visitor that forgets a node kind fails at instantiation.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from mdedit.ast.nodes import (
    Bold,
    Container,
    Division,
    Heading,
    Image,
    Italic,
    LineBreak,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    Text,
    UnorderedList,
)


class NodeVisitor(ABC):
    """Abstract base class for formatting tree visitors.

    Subclasses implement one visit_* method per node kind. Nodes dispatch
    to these methods through ``Node.accept``.

    Examples
    --------
    Visitor that counts text characters:

        >>> class CharCounter(NodeVisitor):
        ...     def visit_text(self, node):
        ...         return len(node.content)
        ...     def generic_visit(self, node):
        ...         return sum(child.accept(self) for child in node.children)
        ...     visit_heading = visit_paragraph = visit_division = generic_visit
        ...     visit_bold = visit_italic = visit_link = visit_image = generic_visit
        ...     visit_unordered_list = visit_ordered_list = visit_list_item = generic_visit
        ...     visit_line_break = visit_container = generic_visit

    """

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_division(self, node: Division) -> Any:
        """Visit a Division node."""
        pass

    @abstractmethod
    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold node."""
        pass

    @abstractmethod
    def visit_italic(self, node: Italic) -> Any:
        """Visit an Italic node."""
        pass

    @abstractmethod
    def visit_unordered_list(self, node: UnorderedList) -> Any:
        """Visit an UnorderedList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_container(self, node: Container) -> Any:
        """Visit a Container node."""
        pass
