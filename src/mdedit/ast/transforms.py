#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/ast/transforms.py
"""Formatting tree transformation utilities.

Transformers build a new tree and never touch their input, which lets the
edit engine work on a detached copy and only commit at insertion time.

Examples
--------
Strip bold from a fragment:

    >>> from mdedit.ast import Bold, Container, Tag, TagKind, Text
    >>> from mdedit.ast.transforms import strip_tag
    >>> fragment = Container(children=[Text("a "), Bold(children=[Text("b")])])
    >>> strip_tag(fragment, Tag(TagKind.BOLD))
    [Container(children=[Text(content='a '), Text(content='b')], attributes={})]

Collect all links:

    >>> links = extract_nodes(root, Link)

"""

from __future__ import annotations

import copy
import logging
from dataclasses import replace
from typing import Callable, Type, TypeVar, Union

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
    Tag,
    Text,
    UnorderedList,
    is_list,
)
from mdedit.ast.utils import iter_nodes
from mdedit.ast.visitors import NodeVisitor

logger = logging.getLogger(__name__)

TransformResult = Union[Node, list[Node], None]
NodeT = TypeVar("NodeT", bound=Node)


class NodeTransformer(NodeVisitor):
    """Base class for transforming formatting trees.

    visit_* methods return a replacement node, a list of nodes to splice
    in place of the visited node, or None to drop it. The default for every
    element is a copy with transformed children.

    Examples
    --------
    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper())
    >>>
    >>> new_root = UppercaseTransformer().transform(root)

    """

    def transform(self, node: Node) -> TransformResult:
        """Transform a node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node, list of Node, or None
            Replacement for the node

        """
        return node.accept(self)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        """Transform a child sequence, splicing list results in order."""
        result: list[Node] = []
        for child in children:
            transformed = self.transform(child)
            if transformed is None:
                continue
            if isinstance(transformed, list):
                result.extend(transformed)
            else:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Element) -> TransformResult:
        """Copy an element with its children transformed."""
        return replace(node, children=self._transform_children(node.children), attributes=dict(node.attributes))

    def visit_text(self, node: Text) -> TransformResult:
        """Transform a Text node."""
        return Text(content=node.content)

    def visit_heading(self, node: Heading) -> TransformResult:
        """Transform a Heading node."""
        return self._generic_transform(node)

    def visit_paragraph(self, node: Paragraph) -> TransformResult:
        """Transform a Paragraph node."""
        return self._generic_transform(node)

    def visit_division(self, node: Division) -> TransformResult:
        """Transform a Division node."""
        return self._generic_transform(node)

    def visit_bold(self, node: Bold) -> TransformResult:
        """Transform a Bold node."""
        return self._generic_transform(node)

    def visit_italic(self, node: Italic) -> TransformResult:
        """Transform an Italic node."""
        return self._generic_transform(node)

    def visit_unordered_list(self, node: UnorderedList) -> TransformResult:
        """Transform an UnorderedList node."""
        return self._generic_transform(node)

    def visit_ordered_list(self, node: OrderedList) -> TransformResult:
        """Transform an OrderedList node."""
        return self._generic_transform(node)

    def visit_list_item(self, node: ListItem) -> TransformResult:
        """Transform a ListItem node."""
        return self._generic_transform(node)

    def visit_link(self, node: Link) -> TransformResult:
        """Transform a Link node."""
        return self._generic_transform(node)

    def visit_image(self, node: Image) -> TransformResult:
        """Transform an Image node."""
        return self._generic_transform(node)

    def visit_line_break(self, node: LineBreak) -> TransformResult:
        """Transform a LineBreak node."""
        return self._generic_transform(node)

    def visit_container(self, node: Container) -> TransformResult:
        """Transform a Container node."""
        return self._generic_transform(node)


class TagStripper(NodeTransformer):
    """Remove matching elements while promoting their children.

    Applied post-order: children are stripped first, then a matching node is
    replaced by its (already stripped) children in its parent's sequence.
    Sibling order is preserved at every depth.

    A stripped list also releases its direct ListItem children, since list
    items cannot stand outside a list.

    Parameters
    ----------
    predicate : callable
        Returns True for elements to strip

    """

    def __init__(self, predicate: Callable[[Element], bool]):
        self.predicate = predicate

    def _generic_transform(self, node: Element) -> TransformResult:
        children = self._transform_children(node.children)
        if not self.predicate(node):
            return replace(node, children=children, attributes=dict(node.attributes))

        if is_list(node):
            promoted: list[Node] = []
            for child in children:
                if isinstance(child, ListItem):
                    promoted.extend(child.children)
                else:
                    promoted.append(child)
            children = promoted
        return children


class TextNormalizer(NodeTransformer):
    """Tidy a tree for persistence.

    - drops empty Text nodes
    - merges adjacent Text nodes
    - unwraps Container nodes below the root

    """

    def visit_text(self, node: Text) -> TransformResult:
        if not node.content:
            return None
        return Text(content=node.content)

    def visit_container(self, node: Container) -> TransformResult:
        return self._transform_children(node.children)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        return merge_adjacent_text(super()._transform_children(children))


def merge_adjacent_text(nodes: list[Node]) -> list[Node]:
    """Merge runs of adjacent Text nodes into single nodes.

    Parameters
    ----------
    nodes : list of Node
        Nodes to process

    Returns
    -------
    list of Node
        New list with Text runs merged; other nodes are kept as-is

    """
    result: list[Node] = []
    for node in nodes:
        if isinstance(node, Text) and result and isinstance(result[-1], Text):
            result[-1] = Text(content=result[-1].content + node.content)
        else:
            result.append(node)
    return result


def _as_list(result: TransformResult) -> list[Node]:
    if result is None:
        return []
    if isinstance(result, list):
        return result
    return [result]


def strip_nodes(node: Node, predicate: Callable[[Element], bool]) -> list[Node]:
    """Strip every element matching ``predicate`` from a subtree.

    Parameters
    ----------
    node : Node
        Subtree root; not modified
    predicate : callable
        Returns True for elements to strip

    Returns
    -------
    list of Node
        Nodes that replace ``node``: a single copy if the root did not match,
        otherwise the root's stripped children

    """
    return _as_list(TagStripper(predicate).transform(node))


def strip_tag(node: Node, tag: Tag) -> list[Node]:
    """Strip every element carrying ``tag`` from a subtree.

    Stripping is idempotent: stripping the result again yields an equal tree.

    Parameters
    ----------
    node : Node
        Subtree root; not modified
    tag : Tag
        Tag to remove

    Returns
    -------
    list of Node
        Nodes that replace ``node``

    """
    logger.debug("Stripping <%s> from %s", tag.name, type(node).__name__)
    return strip_nodes(node, lambda element: element.tag == tag)


def normalize_nodes(nodes: list[Node]) -> list[Node]:
    """Return normalized copies of a node sequence (see TextNormalizer)."""
    return TextNormalizer()._transform_children(nodes)


def normalize_tree(node: NodeT) -> NodeT:
    """Return a normalized copy of a tree.

    Empty text is pruned, adjacent text merged and nested Containers
    unwrapped. A root Container is kept as the root.
    """
    if isinstance(node, Container):
        return replace(node, children=normalize_nodes(node.children))  # type: ignore[return-value]
    result = _as_list(TextNormalizer().transform(node))
    if len(result) == 1:
        return result[0]  # type: ignore[return-value]
    return Container(children=result)  # type: ignore[return-value]


def unwrap_containers(nodes: list[Node]) -> list[Node]:
    """Replace Container nodes in a sequence by their children, recursively."""
    result: list[Node] = []
    for node in nodes:
        if isinstance(node, Container):
            result.extend(unwrap_containers(node.children))
        else:
            result.append(node)
    return result


def clone_node(node: NodeT) -> NodeT:
    """Create a deep copy of a node and its subtree."""
    return copy.deepcopy(node)


def extract_nodes(root: Node, node_type: Type[NodeT]) -> list[NodeT]:
    """Collect all nodes of ``node_type`` in document order.

    Parameters
    ----------
    root : Node
        Tree to search
    node_type : type
        Node class to collect

    Returns
    -------
    list of Node
        Matching nodes (the tree's own objects, not copies)

    """
    return [node for node in iter_nodes(root) if isinstance(node, node_type)]
