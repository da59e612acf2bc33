#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/ast/nodes.py
"""Formatting tree node classes.

This module defines the node hierarchy for the formatting tree edited by
mdedit. A formatting tree is a strict ownership tree: every node except the
root has exactly one parent, and nodes are never shared between parents.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Leaf nodes:
    - Text

Element nodes (one class per TagKind):
    - Heading, Paragraph, Division
    - UnorderedList, OrderedList, ListItem
    - Bold, Italic, Link, Image, LineBreak
    - Container (tagless fragment, never persisted)

Tags
----
Every element carries a Tag: its TagKind plus, for headings, a level.
``Tag.parse`` normalizes user-facing names ("B", "strong", "h2") to a
canonical identity so that toggling compares tags, not spellings.

"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional

from mdedit.exceptions import InvalidArgumentError

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


class TagKind(Enum):
    """Kinds of formatting element.

    The value of each member is its canonical tag name (headings append
    their level, e.g. ``h2``).
    """

    HEADING = "h"
    BOLD = "b"
    ITALIC = "i"
    UNORDERED_LIST = "ul"
    ORDERED_LIST = "ol"
    LIST_ITEM = "li"
    LINK = "a"
    IMAGE = "img"
    PARAGRAPH = "p"
    DIVISION = "div"
    LINE_BREAK = "br"
    CONTAINER = "#container"


_TAG_ALIASES: dict[str, TagKind] = {
    "b": TagKind.BOLD,
    "strong": TagKind.BOLD,
    "bold": TagKind.BOLD,
    "i": TagKind.ITALIC,
    "em": TagKind.ITALIC,
    "italic": TagKind.ITALIC,
    "ul": TagKind.UNORDERED_LIST,
    "ol": TagKind.ORDERED_LIST,
    "li": TagKind.LIST_ITEM,
    "a": TagKind.LINK,
    "link": TagKind.LINK,
    "img": TagKind.IMAGE,
    "image": TagKind.IMAGE,
    "p": TagKind.PARAGRAPH,
    "div": TagKind.DIVISION,
    "br": TagKind.LINE_BREAK,
}

_HEADING_NAME_RE = re.compile(r"^(?:h|heading)(\d+)$")


def validate_heading_level(level: Any) -> int:
    """Return ``level`` if it is a valid heading level.

    Raises
    ------
    InvalidArgumentError
        If level is not an integer between 1 and 6

    """
    if isinstance(level, bool) or not isinstance(level, int) or not MIN_HEADING_LEVEL <= level <= MAX_HEADING_LEVEL:
        raise InvalidArgumentError(
            f"Invalid heading level: {level}", parameter_name="level", parameter_value=level
        )
    return level


@dataclass(frozen=True)
class Tag:
    """Canonical tag identity.

    Parameters
    ----------
    kind : TagKind
        Element kind
    level : int or None, default = None
        Heading level; only meaningful for TagKind.HEADING

    """

    kind: TagKind
    level: Optional[int] = None

    @property
    def name(self) -> str:
        """Canonical tag name, e.g. ``"b"`` or ``"h3"``."""
        if self.kind is TagKind.HEADING:
            return f"h{self.level}"
        return self.kind.value

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, name: str | Tag) -> Tag:
        """Normalize a tag name to its canonical identity.

        Matching is case-insensitive and ignores surrounding whitespace.

        Parameters
        ----------
        name : str or Tag
            Tag name such as ``"B"``, ``"strong"`` or ``"h2"``. A Tag is
            returned unchanged.

        Returns
        -------
        Tag
            The canonical tag

        Raises
        ------
        InvalidArgumentError
            If the name is empty or not a recognized tag

        Examples
        --------
        >>> Tag.parse("STRONG") == Tag(TagKind.BOLD)
        True
        >>> Tag.parse("h2").level
        2

        """
        if isinstance(name, Tag):
            return name
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError(
                "Tag name must be a non-empty string", parameter_name="tag_name", parameter_value=name
            )

        normalized = name.strip().lower()
        heading_match = _HEADING_NAME_RE.match(normalized)
        if heading_match:
            level = int(heading_match.group(1))
            try:
                validate_heading_level(level)
            except InvalidArgumentError as e:
                raise InvalidArgumentError(
                    f"Invalid heading tag '{name}'", parameter_name="tag_name", parameter_value=name, original_error=e
                ) from e
            return cls(TagKind.HEADING, level)

        kind = _TAG_ALIASES.get(normalized)
        if kind is None:
            raise InvalidArgumentError(
                f"Unrecognized tag name: '{name}'", parameter_name="tag_name", parameter_value=name
            )
        return cls(kind)


class Node(ABC):
    """Base class for all formatting tree nodes.

    All nodes support the visitor pattern through ``accept``.
    """

    @property
    def tag(self) -> Optional[Tag]:
        """Tag of this node, or None for text."""
        return None

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass
class Text(Node):
    """Literal text leaf.

    Parameters
    ----------
    content : str, default = ""
        The characters of this text run. Empty content is allowed only
        transiently during edits.

    """

    content: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor."""
        return visitor.visit_text(self)


@dataclass
class Element(Node):
    """Tagged container node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Ordered child nodes
    attributes : dict, default = empty dict
        String attributes carried over to the host (e.g. ``class``)

    """

    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    kind: ClassVar[TagKind]

    @property
    def tag(self) -> Tag:
        """Canonical tag of this element."""
        return Tag(self.kind)

    @property
    def tag_name(self) -> str:
        """Canonical tag name of this element."""
        return self.tag.name

    def has_tag(self, tag: Tag) -> bool:
        """Return True if this element carries ``tag``."""
        return self.tag == tag

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor, dispatching on the element kind."""
        return getattr(visitor, f"visit_{self.kind.name.lower()}")(self)


@dataclass
class Heading(Element):
    """Heading element (``h1`` to ``h6``).

    Parameters
    ----------
    level : int, default = 1
        Heading level, 1 to 6

    Raises
    ------
    InvalidArgumentError
        If level is outside 1-6

    """

    level: int = 1

    kind = TagKind.HEADING

    def __post_init__(self) -> None:
        validate_heading_level(self.level)

    @property
    def tag(self) -> Tag:
        """Canonical tag including the heading level."""
        return Tag(self.kind, self.level)


@dataclass
class Paragraph(Element):
    """Paragraph block."""

    kind = TagKind.PARAGRAPH


@dataclass
class Division(Element):
    """Generic block container, such as the editor root."""

    kind = TagKind.DIVISION


@dataclass
class Bold(Element):
    """Bold (strong) inline formatting."""

    kind = TagKind.BOLD


@dataclass
class Italic(Element):
    """Italic (emphasis) inline formatting."""

    kind = TagKind.ITALIC


@dataclass
class UnorderedList(Element):
    """Bulleted list. Children are ListItems or nested sublists."""

    kind = TagKind.UNORDERED_LIST


@dataclass
class OrderedList(Element):
    """Numbered list. Children are ListItems or nested sublists."""

    kind = TagKind.ORDERED_LIST


@dataclass
class ListItem(Element):
    """List entry; only valid as a direct child of a list."""

    kind = TagKind.LIST_ITEM


@dataclass
class Link(Element):
    """Hyperlink.

    Parameters
    ----------
    href : str, default = "#"
        Link target

    """

    href: str = "#"

    kind = TagKind.LINK


@dataclass
class Image(Element):
    """Image reference.

    Parameters
    ----------
    src : str, default = "#"
        Image source

    """

    src: str = "#"

    kind = TagKind.IMAGE


@dataclass
class LineBreak(Element):
    """Hard line break."""

    kind = TagKind.LINE_BREAK


@dataclass
class Container(Element):
    """Tagless grouping node.

    Holds a multi-node fragment between extraction and re-insertion. It is
    unwrapped into the parent's children on insertion and never persisted.
    """

    kind = TagKind.CONTAINER


LIST_KINDS = frozenset({TagKind.UNORDERED_LIST, TagKind.ORDERED_LIST})

_ELEMENT_CLASSES: dict[TagKind, type[Element]] = {
    TagKind.HEADING: Heading,
    TagKind.BOLD: Bold,
    TagKind.ITALIC: Italic,
    TagKind.UNORDERED_LIST: UnorderedList,
    TagKind.ORDERED_LIST: OrderedList,
    TagKind.LIST_ITEM: ListItem,
    TagKind.LINK: Link,
    TagKind.IMAGE: Image,
    TagKind.PARAGRAPH: Paragraph,
    TagKind.DIVISION: Division,
    TagKind.LINE_BREAK: LineBreak,
    TagKind.CONTAINER: Container,
}


def element_class_for(kind: TagKind) -> type[Element]:
    """Return the Element subclass implementing ``kind``."""
    return _ELEMENT_CLASSES[kind]


def is_list(node: Node) -> bool:
    """Return True if node is an ordered or unordered list."""
    return isinstance(node, Element) and node.kind in LIST_KINDS


def get_node_children(node: Node) -> list[Node]:
    """Return the child list of a node (empty for text).

    The returned list is the node's own list, not a copy.
    """
    if isinstance(node, Element):
        return node.children
    return []


class NodeFactory:
    """Explicit constructor for formatting nodes.

    The editor owns one factory and never builds nodes through ambient
    state. Subclass it to customise placeholder text or default attributes.

    Examples
    --------
    >>> factory = NodeFactory()
    >>> factory.create("strong", [factory.text("hi")])
    Bold(children=[Text(content='hi')], attributes={})

    """

    def text(self, content: str) -> Text:
        """Create a text leaf."""
        return Text(content=content)

    def create(
        self,
        tag: Tag | str,
        children: Optional[list[Node]] = None,
        attributes: Optional[dict[str, str]] = None,
    ) -> Element:
        """Create an element for ``tag``.

        ``href`` (links) and ``src`` (images) are taken from ``attributes``;
        all other attributes are stored on the element.

        Parameters
        ----------
        tag : Tag or str
            Tag to construct; names are normalized with ``Tag.parse``
        children : list of Node, optional
            Initial children
        attributes : dict, optional
            Element attributes

        Returns
        -------
        Element
            The new element

        Raises
        ------
        InvalidArgumentError
            If the tag name is not recognized

        """
        tag = Tag.parse(tag)
        attrs = dict(attributes or {})
        kwargs: dict[str, Any] = {"children": list(children or []), "attributes": attrs}

        if tag.kind is TagKind.HEADING:
            kwargs["level"] = tag.level
        elif tag.kind is TagKind.LINK:
            kwargs["href"] = attrs.pop("href", "#")
        elif tag.kind is TagKind.IMAGE:
            kwargs["src"] = attrs.pop("src", "#")

        return element_class_for(tag.kind)(**kwargs)

    def container(self, children: Optional[list[Node]] = None) -> Container:
        """Create a tagless fragment container."""
        return Container(children=list(children or []))
