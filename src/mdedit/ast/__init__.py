#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/ast/__init__.py
"""Formatting tree module.

The formatting tree is the in-memory ownership tree of content and markup
nodes that the editor mutates and the Markdown serializer walks.

The module consists of several components:

- nodes: node classes, tag identities and the node factory
- visitors: visitor pattern base class for tree traversal
- transforms: tag stripping, normalization and copying
- utils: structural queries (text content, parent lookup)

Examples
--------
Basic usage:

    >>> from mdedit.ast import Division, Heading, Text
    >>> from mdedit.renderers.markdown import to_markdown
    >>>
    >>> root = Division(children=[Heading(level=1, children=[Text("Title")])])
    >>> to_markdown(root)
    '# Title\\n\\n\\n\\n'

"""

from __future__ import annotations

from mdedit.ast.nodes import (
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
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
    NodeFactory,
    OrderedList,
    Paragraph,
    Tag,
    TagKind,
    Text,
    UnorderedList,
    get_node_children,
    is_list,
    validate_heading_level,
)
from mdedit.ast.transforms import (
    NodeTransformer,
    clone_node,
    extract_nodes,
    merge_adjacent_text,
    normalize_nodes,
    normalize_tree,
    strip_nodes,
    strip_tag,
)
from mdedit.ast.utils import contains, extract_text, find_parent, is_blank, iter_nodes
from mdedit.ast.visitors import NodeVisitor

__all__ = [
    "MAX_HEADING_LEVEL",
    "MIN_HEADING_LEVEL",
    "Bold",
    "Container",
    "Division",
    "Element",
    "Heading",
    "Image",
    "Italic",
    "LineBreak",
    "Link",
    "ListItem",
    "Node",
    "NodeFactory",
    "NodeTransformer",
    "NodeVisitor",
    "OrderedList",
    "Paragraph",
    "Tag",
    "TagKind",
    "Text",
    "UnorderedList",
    "clone_node",
    "contains",
    "extract_nodes",
    "extract_text",
    "find_parent",
    "get_node_children",
    "is_blank",
    "is_list",
    "iter_nodes",
    "merge_adjacent_text",
    "normalize_nodes",
    "normalize_tree",
    "strip_nodes",
    "strip_tag",
    "validate_heading_level",
]
