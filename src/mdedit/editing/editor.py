#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/editing/editor.py
"""Editing session over a formatting tree.

The Editor owns the tree root, asks a SelectionSource for the current span
on every operation, builds nodes through its NodeFactory and notifies
listeners after each successful mutation.

Examples
--------
    >>> from mdedit.ast import Division, Text
    >>> from mdedit.editing import Editor
    >>>
    >>> root = Division(children=[Text("hello world")])
    >>> editor = Editor(root)
    >>> span = editor.selection.select_text(root.children[0], 6, 11)
    >>> editor.toggle_tag("b")
    >>> editor.to_markdown()
    'hello **world**\\n\\n'

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from mdedit.ast.nodes import (
    Container,
    Element,
    Heading,
    Link,
    ListItem,
    Node,
    NodeFactory,
    Tag,
    TagKind,
    get_node_children,
    validate_heading_level,
)
from mdedit.ast.transforms import extract_nodes, normalize_nodes, strip_nodes
from mdedit.ast.utils import extract_text, is_blank
from mdedit.editing.selection import Selection, SelectionSource, TreeSelectionSource
from mdedit.editing.toggle import build_element, check_heading_placement, toggle_tag
from mdedit.events import ContentChangedCallback, ContentChangedEvent, Operation
from mdedit.exceptions import InvalidArgumentError, PreconditionError
from mdedit.options.editor import EditorOptions
from mdedit.renderers.markdown import to_markdown

logger = logging.getLogger(__name__)


class Editor:
    """An editing session.

    Parameters
    ----------
    root : Element
        Root of the edited tree, usually a Division
    selection_source : SelectionSource, optional
        Host provider of the current selection. Defaults to an in-memory
        TreeSelectionSource, available as ``editor.selection``.
    options : EditorOptions, optional
        Placeholder texts and serializer options
    factory : NodeFactory, optional
        Node constructor used for every new node

    Raises
    ------
    InvalidArgumentError
        If root is not an element, or is a Container

    """

    def __init__(
        self,
        root: Element,
        selection_source: Optional[SelectionSource] = None,
        options: Optional[EditorOptions] = None,
        factory: Optional[NodeFactory] = None,
    ):
        if not isinstance(root, Element) or isinstance(root, Container):
            raise InvalidArgumentError(
                "Editor root must be a persistent element", parameter_name="root", parameter_value=root
            )
        self.root = root
        self.selection: SelectionSource = selection_source or TreeSelectionSource(root)
        self.options = options or EditorOptions()
        self.factory = factory or NodeFactory()
        self._listeners: list[ContentChangedCallback] = []

    def add_listener(self, callback: ContentChangedCallback) -> None:
        """Register a content-changed listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: ContentChangedCallback) -> None:
        """Unregister a listener; unknown callbacks are ignored."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def links(self) -> list[Link]:
        """Return every link in the tree, in document order."""
        return extract_nodes(self.root, Link)

    def _require_selection(self) -> Selection:
        span = self.selection.current_span()
        if span is None:
            raise PreconditionError("No active selection or cursor in the editor")
        return span

    def _notify(self, operation: Operation, message: str, node: Optional[Node], **metadata: Any) -> None:
        metadata["links"] = self.links()
        event = ContentChangedEvent(operation=operation, message=message, node=node, metadata=metadata)
        logger.debug("%s", event)
        for listener in list(self._listeners):
            listener(event)

    def _replace_selection(self, build: Callable[[Node], Node]) -> Node:
        """Extract the selection, build a node from it and insert that node.

        If building or inserting fails, the extracted content is put back.
        """
        selection = self._require_selection()
        fragment = selection.extract()
        try:
            node = build(fragment)
            selection.insert(node)
        except Exception:
            logger.debug("Insertion failed; restoring the extracted content")
            selection.insert(fragment)
            raise
        return node

    def toggle_tag(self, tag_name: str | Tag, attributes: Optional[dict[str, str]] = None) -> None:
        """Toggle a tag on the current selection.

        Parameters
        ----------
        tag_name : str or Tag
            Tag to toggle, e.g. ``"b"``, ``"i"``, ``"h2"``, ``"ul"``
        attributes : dict, optional
            Attributes for a newly created element

        Raises
        ------
        InvalidArgumentError
            If the tag name is empty, unknown or not toggleable
        PreconditionError
            If there is no active selection

        """
        selection = self._require_selection()
        node = toggle_tag(selection, tag_name, attributes, factory=self.factory)
        tag = Tag.parse(tag_name)
        self._notify("toggled", f"Toggled <{tag.name}>", node, tag=tag.name)

    def insert_heading(self, level: int) -> None:
        """Insert a heading at the cursor, wrapping the selected content.

        Without selected text the heading reads ``h<level>``.

        Raises
        ------
        InvalidArgumentError
            If level is outside 1-6
        PreconditionError
            If there is no active selection
        SelectionError
            If the cursor is inside a heading

        """
        validate_heading_level(level)
        tag = Tag(TagKind.HEADING, level)
        check_heading_placement(self._require_selection())

        def build(fragment: Node) -> Node:
            if extract_text(fragment) != "":
                children = normalize_nodes(strip_nodes(fragment, lambda element: isinstance(element, Heading)))
            else:
                children = [self.factory.text(tag.name)]
            return self.factory.create(tag, children)

        node = self._replace_selection(build)
        self._notify("inserted", f"Inserted <{tag.name}>", node, tag=tag.name)

    def _insert_list(self, kind: TagKind) -> None:
        tag = Tag(kind)

        def build(fragment: Node) -> Node:
            if extract_text(fragment) != "":
                children = get_node_children(fragment) if isinstance(fragment, Container) else [fragment]
            else:
                children = [self.factory.text(self.options.list_item_placeholder)]
            return build_element(tag, list(children), factory=self.factory)

        node = self._replace_selection(build)
        self._notify("inserted", f"Inserted <{tag.name}>", node, tag=tag.name)

    def insert_unordered_list(self) -> None:
        """Insert a bulleted list with one item holding the selected content."""
        self._insert_list(TagKind.UNORDERED_LIST)

    def insert_ordered_list(self) -> None:
        """Insert a numbered list with one item holding the selected content."""
        self._insert_list(TagKind.ORDERED_LIST)

    def insert_link(self, href: Optional[str] = None, text: Optional[str] = None) -> None:
        """Replace the selection with a new link.

        Parameters
        ----------
        href : str, optional
            Link target; defaults to ``options.link_href``
        text : str, optional
            Link text; defaults to ``options.link_text``

        """
        attributes = {"href": href if href is not None else self.options.link_href}
        link_text = text if text else self.options.link_text
        node = self._replace_selection(
            lambda _: self.factory.create(Tag(TagKind.LINK), [self.factory.text(link_text)], attributes)
        )
        self._notify("inserted", "Inserted <a>", node, tag="a")

    def insert_image(self, src: Optional[str] = None) -> None:
        """Replace the selection with a new image."""
        attributes = {"src": src if src is not None else self.options.image_src}
        node = self._replace_selection(lambda _: self.factory.create(Tag(TagKind.IMAGE), attributes=attributes))
        self._notify("inserted", "Inserted <img>", node, tag="img")

    def indent_selection(self) -> None:
        """Wrap the selected content in a nested bulleted list.

        Selected list items move into the new list as they are; runs of other
        non-blank content become new list items. Inside a list the result is
        a nested sublist.
        """

        def build(fragment: Node) -> Node:
            items: list[Node] = []
            pending: list[Node] = []
            for child in get_node_children(fragment) if isinstance(fragment, Container) else [fragment]:
                if isinstance(child, ListItem):
                    if pending:
                        items.append(self.factory.create(Tag(TagKind.LIST_ITEM), pending))
                        pending = []
                    items.append(child)
                elif pending or not is_blank(child):
                    pending.append(child)
            if pending:
                items.append(self.factory.create(Tag(TagKind.LIST_ITEM), pending))
            return self.factory.create(Tag(TagKind.UNORDERED_LIST), items)

        node = self._replace_selection(build)
        self._notify("indented", "Indented selection into a sublist", node, tag="ul")

    def to_markdown(self) -> str:
        """Serialize the whole tree with the session's serializer options."""
        return to_markdown(self.root, self.options.markdown)
