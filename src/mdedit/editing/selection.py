#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/editing/selection.py
"""Selection capability and an in-memory implementation.

The edit engine never walks the tree to find where an edit applies. It asks
the host for the current span and works through four primitives:

- ``extract``: remove the spanned nodes and return them as a detached
  fragment (a Container)
- ``insert``: splice a node at the span's location; a Container is unwrapped
  into the parent's children
- ``clone_contents``: copy the spanned nodes without detaching them
- ``is_empty``: True if the spanned text is empty

``TreeRange`` implements the capability over a formatting tree, with
boundary points modelled on DOM ranges: a point inside an element is a child
index, a point inside a text node is a character offset. Both ends of a
range must resolve to the same parent element.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Protocol

from mdedit.ast.nodes import Container, Element, Node, Text
from mdedit.ast.transforms import clone_node, unwrap_containers
from mdedit.ast.utils import contains, extract_text, find_parent
from mdedit.exceptions import InvalidArgumentError, SelectionError

logger = logging.getLogger(__name__)


class Selection(ABC):
    """A contiguous span of the tree chosen by the user."""

    @abstractmethod
    def extract(self) -> Node:
        """Remove the spanned content and return it as a detached subtree.

        After extraction the selection is collapsed at the former location.
        """
        pass

    @abstractmethod
    def insert(self, node: Node) -> None:
        """Insert ``node`` at the selection's location.

        A Container is unwrapped into the surrounding child sequence.
        """
        pass

    @abstractmethod
    def clone_contents(self) -> Node:
        """Return a detached copy of the spanned content."""
        pass

    def is_empty(self) -> bool:
        """Return True if the spanned content has no text."""
        return extract_text(self.clone_contents()) == ""

    def ancestors(self) -> list[Element]:
        """Return the elements enclosing the selection, innermost first.

        Hosts that cannot tell return an empty list.
        """
        return []


class SelectionSource(Protocol):
    """Host side provider of the current selection."""

    def current_span(self) -> Optional[Selection]:
        """Return the active selection, or None if there is no cursor."""
        ...


@dataclass
class BoundaryPoint:
    """One end of a range.

    Parameters
    ----------
    node : Node
        Element (offset is a child index) or Text (offset is a character offset)
    offset : int
        Position inside ``node``

    """

    node: Node
    offset: int


class TreeRange(Selection):
    """Selection over an in-memory formatting tree.

    Parameters
    ----------
    root : Element
        Root of the tree the range lives in
    start : BoundaryPoint
        Start of the range
    end : BoundaryPoint, optional
        End of the range; defaults to ``start`` (a collapsed cursor)

    Raises
    ------
    InvalidArgumentError
        If root is not an Element

    Examples
    --------
    >>> from mdedit.ast import Bold, Division, Text
    >>> root = Division(children=[Text("hello "), Bold(children=[Text("world")])])
    >>> span = TreeRange.spanning(root, root, 0, 2)
    >>> span.extract()
    Container(children=[Text(content='hello '), Bold(children=[Text(content='world')], attributes={})], attributes={})

    """

    def __init__(self, root: Element, start: BoundaryPoint, end: Optional[BoundaryPoint] = None):
        if not isinstance(root, Element):
            raise InvalidArgumentError("Range root must be an element", parameter_name="root", parameter_value=root)
        self.root = root
        self.start = start
        self.end = end if end is not None else BoundaryPoint(start.node, start.offset)

    def __repr__(self) -> str:
        return (
            f"TreeRange(start=({type(self.start.node).__name__}, {self.start.offset}), "
            f"end=({type(self.end.node).__name__}, {self.end.offset}))"
        )

    @classmethod
    def spanning(cls, root: Element, parent: Element, start: int = 0, end: Optional[int] = None) -> TreeRange:
        """Select ``parent.children[start:end]``."""
        if end is None:
            end = len(parent.children)
        return cls(root, BoundaryPoint(parent, start), BoundaryPoint(parent, end))

    @classmethod
    def around(cls, root: Element, node: Node) -> TreeRange:
        """Select exactly ``node``."""
        located = find_parent(root, node)
        if located is None:
            raise SelectionError("Node is not a descendant of the range root", boundary=node)
        parent, index = located
        return cls.spanning(root, parent, index, index + 1)

    @classmethod
    def within_text(cls, root: Element, text: Text, start: int = 0, end: Optional[int] = None) -> TreeRange:
        """Select ``text.content[start:end]``."""
        if end is None:
            end = len(text.content)
        return cls(root, BoundaryPoint(text, start), BoundaryPoint(text, end))

    def ancestors(self) -> list[Element]:
        """Return the elements enclosing the range start, innermost first."""
        parent, _, _ = self._locate(self.start)
        chain = [parent]
        while chain[-1] is not self.root:
            located = find_parent(self.root, chain[-1])
            if located is None:
                break
            chain.append(located[0])
        return chain

    @property
    def collapsed(self) -> bool:
        """True if start and end are the same position."""
        return self._position_key(self.start) == self._position_key(self.end)

    def _locate(self, point: BoundaryPoint) -> tuple[Element, int, Optional[Text]]:
        """Resolve a point to (parent, child index, text) without mutating.

        ``text`` is set when the point falls strictly inside a text node; the
        child index is then the index of that text node.
        """
        node = point.node
        if isinstance(node, Text):
            located = find_parent(self.root, node)
            if located is None:
                raise SelectionError("Boundary text is not part of the tree", boundary=point)
            parent, index = located
            if not 0 <= point.offset <= len(node.content):
                raise SelectionError(f"Text offset {point.offset} out of range", boundary=point)
            if point.offset == 0:
                return parent, index, None
            if point.offset == len(node.content):
                return parent, index + 1, None
            return parent, index, node

        if not isinstance(node, Element) or not contains(self.root, node):
            raise SelectionError("Boundary element is not part of the tree", boundary=point)
        if not 0 <= point.offset <= len(node.children):
            raise SelectionError(f"Child offset {point.offset} out of range", boundary=point)
        return node, point.offset, None

    def _position_key(self, point: BoundaryPoint) -> tuple[int, int, int, int]:
        parent, index, text = self._locate(point)
        if text is None:
            return id(parent), index, 0, 0
        return id(parent), index, 1, point.offset

    def _validate(self) -> Element:
        start_parent, _, _ = self._locate(self.start)
        end_parent, _, _ = self._locate(self.end)
        if start_parent is not end_parent:
            raise SelectionError("Selection must start and end inside the same element", boundary=self.end)
        if self._position_key(self.start)[1:] > self._position_key(self.end)[1:]:
            raise SelectionError("Selection end precedes its start", boundary=self.end)
        return start_parent

    def _split_point(self, point: BoundaryPoint) -> tuple[Element, int, bool]:
        """Resolve a point to (parent, position), splitting text if needed.

        Returns whether a new text node was inserted into the parent.
        """
        parent, index, text = self._locate(point)
        if text is None:
            return parent, index, False
        tail = Text(content=text.content[point.offset :])
        text.content = text.content[: point.offset]
        parent.children.insert(index + 1, tail)
        return parent, index + 1, True

    def _split_boundaries(self) -> tuple[Element, int, int]:
        self._validate()
        # end first: splitting it never moves the start point
        parent, end_pos, _ = self._split_point(self.end)
        _, start_pos, inserted = self._split_point(self.start)
        if inserted and start_pos <= end_pos:
            end_pos += 1
        return parent, start_pos, end_pos

    def clone_contents(self) -> Node:
        """Return a copy of the spanned content as a Container."""
        parent = self._validate()
        _, start_index, start_text = self._locate(self.start)
        _, end_index, end_text = self._locate(self.end)

        if start_text is not None and start_text is end_text:
            return Container(children=[Text(content=start_text.content[self.start.offset : self.end.offset])])

        children: list[Node] = []
        first_whole = start_index
        if start_text is not None:
            children.append(Text(content=start_text.content[self.start.offset :]))
            first_whole += 1
        children.extend(clone_node(child) for child in parent.children[first_whole:end_index])
        if end_text is not None:
            children.append(Text(content=end_text.content[: self.end.offset]))
        return Container(children=children)

    def extract(self) -> Node:
        """Detach the spanned content and collapse the range at its location."""
        parent, start_pos, end_pos = self._split_boundaries()
        nodes = parent.children[start_pos:end_pos]
        del parent.children[start_pos:end_pos]
        self.start = BoundaryPoint(parent, start_pos)
        self.end = BoundaryPoint(parent, start_pos)
        logger.debug("Extracted %d node(s) from <%s>", len(nodes), parent.tag_name)
        return Container(children=nodes)

    def delete_contents(self) -> None:
        """Remove the spanned content without returning it."""
        self.extract()

    def insert(self, node: Node) -> None:
        """Insert a node at the start of the range.

        Any spanned content is deleted first. Afterwards the range spans the
        inserted nodes, so the same span can be edited again.

        Raises
        ------
        SelectionError
            If the node is already part of the tree

        """
        if contains(self.root, node):
            raise SelectionError("Cannot insert a node that is already attached to the tree", boundary=self.start)
        if not self.collapsed:
            self.delete_contents()

        parent, position, _ = self._split_point(self.start)
        nodes = unwrap_containers([node])
        parent.children[position:position] = nodes
        self.start = BoundaryPoint(parent, position)
        self.end = BoundaryPoint(parent, position + len(nodes))
        logger.debug("Inserted %d node(s) into <%s> at %d", len(nodes), parent.tag_name, position)


class TreeSelectionSource:
    """Holds the current selection of an in-memory editing session.

    Tests and non-browser hosts use it in place of a UI cursor.

    Parameters
    ----------
    root : Element
        Root of the edited tree

    """

    def __init__(self, root: Element):
        self.root = root
        self._current: Optional[TreeRange] = None

    def current_span(self) -> Optional[TreeRange]:
        """Return the active range, if any."""
        return self._current

    def set_range(self, span: Optional[TreeRange]) -> Optional[TreeRange]:
        """Make ``span`` the active range (None clears it)."""
        self._current = span
        return span

    def select_children(self, parent: Element, start: int = 0, end: Optional[int] = None) -> TreeRange:
        """Select a run of children of ``parent``."""
        return self.set_range(TreeRange.spanning(self.root, parent, start, end))  # type: ignore[return-value]

    def select_node(self, node: Node) -> TreeRange:
        """Select a single node."""
        return self.set_range(TreeRange.around(self.root, node))  # type: ignore[return-value]

    def select_text(self, text: Text, start: int = 0, end: Optional[int] = None) -> TreeRange:
        """Select part of a text node."""
        return self.set_range(TreeRange.within_text(self.root, text, start, end))  # type: ignore[return-value]

    def place_cursor(self, node: Node, offset: int) -> TreeRange:
        """Place a collapsed cursor."""
        return self.set_range(TreeRange(self.root, BoundaryPoint(node, offset)))  # type: ignore[return-value]

    def clear(self) -> None:
        """Drop the active range."""
        self._current = None
