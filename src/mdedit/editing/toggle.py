#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/editing/toggle.py
"""Tag toggling on a selection.

Toggling applies a tag to the selected content, or removes it when the
content already carries it, without ever producing nested copies of the
same tag.

Algorithm
---------
1. Extract the selection as a detached fragment.
2. Empty fragment (no text): insert a new element whose only content is the
   tag name as placeholder text. Nothing else happens.
3. Otherwise classify the fragment *before* stripping. It is already tagged
   when its root carries the tag, or when every non-blank immediate child
   does.
4. Strip the tag from every node of a copy of the fragment.
5. Wrap the stripped nodes in one new element of the tag, or in a
   Container (tag removed) when the fragment was already tagged.
6. Insert the wrapper where the selection was.

The live tree is only touched by the final insertion; if anything fails
after extraction the original fragment is put back and the error propagates.

"""

from __future__ import annotations

import logging
from typing import Optional

from mdedit.ast.nodes import (
    Element,
    Heading,
    Node,
    NodeFactory,
    Tag,
    TagKind,
    get_node_children,
)
from mdedit.ast.transforms import normalize_nodes, strip_nodes, strip_tag
from mdedit.ast.utils import extract_text, is_blank
from mdedit.editing.selection import Selection
from mdedit.exceptions import InvalidArgumentError, SelectionError

logger = logging.getLogger(__name__)

TOGGLEABLE_KINDS = frozenset(
    {
        TagKind.BOLD,
        TagKind.ITALIC,
        TagKind.HEADING,
        TagKind.UNORDERED_LIST,
        TagKind.ORDERED_LIST,
        TagKind.LINK,
        TagKind.PARAGRAPH,
        TagKind.DIVISION,
    }
)


def resolve_toggle_tag(tag_name: str | Tag) -> Tag:
    """Normalize a tag name and check that it can be toggled.

    Raises
    ------
    InvalidArgumentError
        If the name is empty, unknown, or names a tag that cannot wrap a
        selection (``li``, ``img``, ``br``)

    """
    tag = Tag.parse(tag_name)
    if tag.kind not in TOGGLEABLE_KINDS:
        raise InvalidArgumentError(
            f"Tag '{tag.name}' cannot be toggled", parameter_name="tag_name", parameter_value=tag_name
        )
    return tag


def is_root_of_tag_type(fragment: Node, tag: Tag) -> bool:
    """Return True if the fragment's own root carries ``tag``."""
    return isinstance(fragment, Element) and fragment.tag == tag


def are_all_children_of_tag_type(fragment: Node, tag: Tag) -> bool:
    """Return True if every non-blank immediate child carries ``tag``.

    Blank children (whitespace-only text, empty elements) are ignored. A
    fragment without non-blank children counts as uniformly tagged.
    """
    children = [child for child in get_node_children(fragment) if not is_blank(child)]
    return all(isinstance(child, Element) and child.tag == tag for child in children)


def build_element(
    tag: Tag,
    children: list[Node],
    attributes: Optional[dict[str, str]] = None,
    factory: Optional[NodeFactory] = None,
) -> Element:
    """Create an element of ``tag`` around ``children``.

    List tags place the children in a single ListItem so the list invariant
    holds.
    """
    factory = factory or NodeFactory()
    if tag.kind in (TagKind.UNORDERED_LIST, TagKind.ORDERED_LIST):
        children = [factory.create(Tag(TagKind.LIST_ITEM), children)]
    return factory.create(tag, children, attributes)


def check_heading_placement(selection: Selection) -> None:
    """Refuse to place a heading inside another heading.

    Raises
    ------
    SelectionError
        If an element enclosing the selection is a Heading

    """
    for ancestor in selection.ancestors():
        if isinstance(ancestor, Heading):
            raise SelectionError(f"Cannot place a heading inside <{ancestor.tag_name}>", boundary=ancestor)


def _strip_fragment(fragment: Node, tag: Tag) -> list[Node]:
    stripped = strip_tag(fragment, tag)
    if tag.kind is TagKind.HEADING:
        # headings never nest, whatever their level
        stripped = [node for part in stripped for node in strip_nodes(part, lambda e: isinstance(e, Heading))]
    return normalize_nodes(stripped)


def toggle_tag(
    selection: Selection,
    tag_name: str | Tag,
    attributes: Optional[dict[str, str]] = None,
    factory: Optional[NodeFactory] = None,
) -> Node:
    """Toggle a tag on the selected content.

    Parameters
    ----------
    selection : Selection
        The span to edit
    tag_name : str or Tag
        Tag to toggle; case-insensitive (``"b"``, ``"STRONG"``, ``"h2"``)
    attributes : dict, optional
        Attributes for a newly created element (e.g. ``{"href": ...}``)
    factory : NodeFactory, optional
        Node constructor; a default factory is used when omitted

    Returns
    -------
    Node
        The inserted node: the new element, or a Container holding the
        untagged content when the tag was removed

    Raises
    ------
    InvalidArgumentError
        If the tag name is empty, unknown or not toggleable
    SelectionError
        If the tag is a heading and the selection lies inside a heading

    Examples
    --------
    >>> from mdedit.ast import Bold, Division, Text
    >>> from mdedit.editing.selection import TreeRange
    >>> root = Division(children=[Text("hello "), Bold(children=[Text("world")])])
    >>> toggle_tag(TreeRange.spanning(root, root, 0, 2), "b")
    Bold(children=[Text(content='hello world')], attributes={})

    """
    tag = resolve_toggle_tag(tag_name)
    factory = factory or NodeFactory()
    if tag.kind is TagKind.HEADING:
        check_heading_placement(selection)

    fragment = selection.extract()

    if extract_text(fragment) == "":
        element = build_element(tag, [factory.text(tag.name)], attributes, factory)
        selection.insert(element)
        logger.debug("Inserted placeholder <%s> at empty selection", tag.name)
        return element

    if not isinstance(fragment, Element):
        fragment = factory.container([fragment])

    try:
        already_tagged = is_root_of_tag_type(fragment, tag) or are_all_children_of_tag_type(fragment, tag)
        stripped = _strip_fragment(fragment, tag)
        wrapper: Element
        if already_tagged:
            wrapper = factory.container(stripped)
        else:
            wrapper = build_element(tag, stripped, attributes, factory)
        selection.insert(wrapper)
    except Exception:
        logger.debug("Toggle of <%s> failed; restoring the extracted content", tag.name)
        selection.insert(fragment)
        raise

    logger.debug("%s <%s> on selection", "Removed" if already_tagged else "Applied", tag.name)
    return wrapper
