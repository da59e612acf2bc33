#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/parsers/html.py
"""Editor HTML to formatting tree.

Browser hosts keep the edited content in a contenteditable element. This
module turns that HTML into a formatting tree so it can be edited and
serialized by the core. Only the tags the editor itself produces are
mapped; anything else is handled according to ``HtmlOptions.unknown_tags``.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from mdedit.ast.nodes import Division, Element, Node, NodeFactory, Tag, TagKind
from mdedit.exceptions import ParsingError, UnsupportedTagError
from mdedit.options.html import HtmlOptions

logger = logging.getLogger(__name__)

_SKIPPED_ELEMENTS = frozenset({"script", "style", "template"})

# HTML element names only; toggle aliases such as "bold" or "link" are not HTML
_HTML_TAGS: dict[str, Tag] = {
    **{f"h{level}": Tag(TagKind.HEADING, level) for level in range(1, 7)},
    "b": Tag(TagKind.BOLD),
    "strong": Tag(TagKind.BOLD),
    "i": Tag(TagKind.ITALIC),
    "em": Tag(TagKind.ITALIC),
    "ul": Tag(TagKind.UNORDERED_LIST),
    "ol": Tag(TagKind.ORDERED_LIST),
    "li": Tag(TagKind.LIST_ITEM),
    "a": Tag(TagKind.LINK),
    "img": Tag(TagKind.IMAGE),
    "p": Tag(TagKind.PARAGRAPH),
    "div": Tag(TagKind.DIVISION),
    "br": Tag(TagKind.LINE_BREAK),
}


class HtmlTreeParser:
    """Build formatting trees from editor HTML using BeautifulSoup.

    Parameters
    ----------
    options : HtmlOptions or None, default = None
        Parser options
    factory : NodeFactory or None, default = None
        Node constructor

    Examples
    --------
        >>> parser = HtmlTreeParser()
        >>> root = parser.parse('<div><b>hi</b> there</div>')
        >>> root
        Division(children=[Bold(children=[Text(content='hi')], attributes={}), Text(content=' there')], attributes={})

    """

    def __init__(self, options: HtmlOptions | None = None, factory: NodeFactory | None = None):
        self.options = options or HtmlOptions()
        self.factory = factory or NodeFactory()

    def parse(self, html: str) -> Element:
        """Parse an HTML fragment into a tree rooted at a Division.

        A fragment consisting of a single ``div`` becomes the root itself;
        otherwise the top-level nodes are wrapped in a new Division.

        Parameters
        ----------
        html : str
            HTML markup

        Returns
        -------
        Element
            Tree root

        Raises
        ------
        UnsupportedTagError
            If an unknown element is found and ``unknown_tags`` is "error"
        ParsingError
            If the HTML cannot be parsed

        """
        try:
            from bs4 import BeautifulSoup
        except ImportError as e:
            raise ParsingError(
                "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)", original_error=e
            ) from e

        try:
            soup = BeautifulSoup(html, self.options.html_parser)
        except Exception as e:
            raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="html", original_error=e) from e

        top_level = [child for child in soup.children if not self._is_ignorable(child)]
        if len(top_level) == 1 and getattr(top_level[0], "name", None) == "div":
            root = self._process_node(top_level[0])
            if isinstance(root, Division):
                return root

        children = self._process_children(soup)
        logger.debug("Parsed HTML into %d top-level node(s)", len(children))
        return Division(children=children)

    def _is_ignorable(self, node: Any) -> bool:
        from bs4.element import NavigableString, PreformattedString

        if isinstance(node, PreformattedString):
            return True
        if isinstance(node, NavigableString):
            return not str(node).strip()
        return False

    def _process_children(self, node: Any) -> list[Node]:
        children: list[Node] = []
        for child in node.children:
            processed = self._process_node(child)
            if processed is None:
                continue
            if isinstance(processed, list):
                children.extend(processed)
            else:
                children.append(processed)
        return children

    def _process_node(self, node: Any) -> Node | list[Node] | None:
        """Process a BeautifulSoup node to formatting nodes.

        Parameters
        ----------
        node : Any
            BeautifulSoup node to process

        Returns
        -------
        Node, list of Node, or None
            Resulting node(s)

        """
        from bs4.element import NavigableString, PreformattedString

        # comments, doctypes, CDATA
        if isinstance(node, PreformattedString):
            return None

        if isinstance(node, NavigableString):
            text = str(node)
            # layout whitespace between blocks
            if not text.strip() and "\n" in text and not self.options.keep_whitespace_text:
                return None
            return self.factory.text(text)

        if not hasattr(node, "name") or node.name in _SKIPPED_ELEMENTS:
            return None

        tag = _HTML_TAGS.get(node.name.lower())
        if tag is None:
            return self._handle_unknown(node)

        children = self._process_children(node) if tag.kind not in (TagKind.IMAGE, TagKind.LINE_BREAK) else []
        return self.factory.create(tag, children, self._attributes(node))

    def _handle_unknown(self, node: Any) -> list[Node] | None:
        mode = self.options.unknown_tags
        if mode == "unwrap":
            logger.debug("Unwrapping unknown element <%s>", node.name)
            return self._process_children(node)
        if mode == "drop":
            logger.debug("Dropping unknown element <%s>", node.name)
            return None
        raise UnsupportedTagError(node.name, node.get_text())

    @staticmethod
    def _attributes(node: Any) -> dict[str, str]:
        attributes: dict[str, str] = {}
        for key, value in node.attrs.items():
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            attributes[key] = str(value)
        return attributes


def html_to_tree(html: str, options: Optional[HtmlOptions] = None) -> Element:
    """Parse editor HTML into a formatting tree.

    Parameters
    ----------
    html : str
        HTML markup
    options : HtmlOptions, optional
        Parser options

    Returns
    -------
    Element
        Tree root (a Division)

    """
    return HtmlTreeParser(options).parse(html)
