#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/ast/utils.py
"""Structural queries over formatting trees.

Functions
---------
extract_text : Concatenated text content of a node or list of nodes
is_blank : True if a node's text content is only whitespace
iter_nodes : Pre-order iteration over a subtree
find_parent : Locate the parent and child index of a node by identity

Examples
--------
    >>> from mdedit.ast import Bold, Paragraph, Text
    >>> from mdedit.ast.utils import extract_text
    >>>
    >>> para = Paragraph(children=[Text("hello "), Bold(children=[Text("world")])])
    >>> extract_text(para)
    'hello world'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional, Union

from mdedit.ast.nodes import Element, Text, get_node_children

if TYPE_CHECKING:
    from mdedit.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = "") -> str:
    """Extract the text content of a node or list of nodes.

    Text runs are concatenated in document order, the way a browser
    reports ``textContent``.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes
    joiner : str, default = ""
        String placed between the text of sibling nodes

    Returns
    -------
    str
        The text content

    """
    if isinstance(node_or_nodes, list):
        return joiner.join(extract_text(node, joiner) for node in node_or_nodes)

    if isinstance(node_or_nodes, Text):
        return node_or_nodes.content

    return joiner.join(extract_text(child, joiner) for child in get_node_children(node_or_nodes))


def is_blank(node: Node) -> bool:
    """Return True if the node's trimmed text content is empty."""
    return extract_text(node).strip() == ""


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all its descendants in pre-order."""
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(get_node_children(node)))


def find_parent(root: Node, target: Node) -> Optional[tuple[Element, int]]:
    """Find the parent of ``target`` inside ``root``.

    Nodes are compared by identity, not equality, so structurally equal
    siblings are told apart.

    Parameters
    ----------
    root : Node
        Tree to search
    target : Node
        Node to locate

    Returns
    -------
    tuple of (Element, int) or None
        The parent element and the index of ``target`` in its children,
        or None if ``target`` is the root or not in the tree

    """
    for node in iter_nodes(root):
        if not isinstance(node, Element):
            continue
        for index, child in enumerate(node.children):
            if child is target:
                return node, index
    return None


def contains(root: Node, target: Node) -> bool:
    """Return True if ``target`` is ``root`` or one of its descendants."""
    return any(node is target for node in iter_nodes(root))
