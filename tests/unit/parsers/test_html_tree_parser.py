#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_html_tree_parser.py
"""Unit tests for building formatting trees from editor HTML."""

import pytest

from mdedit.ast import (
    Bold,
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
from mdedit.exceptions import UnsupportedTagError
from mdedit.options import HtmlOptions
from mdedit.parsers import HtmlTreeParser, html_to_tree
from mdedit.renderers import to_markdown


@pytest.mark.unit
class TestStructure:
    """Tests for mapping elements to nodes."""

    def test_single_div_becomes_root(self):
        root = html_to_tree('<div class="editor"><b>hi</b> there</div>')
        assert root == Division(children=[Bold(children=[Text("hi")]), Text(" there")], attributes={"class": "editor"})

    def test_fragment_is_wrapped(self):
        root = html_to_tree("<p>a</p><p>b</p>")
        assert root == Division(children=[Paragraph(children=[Text("a")]), Paragraph(children=[Text("b")])])

    def test_aliases(self):
        root = html_to_tree("<div><strong>a</strong><em>b</em></div>")
        assert root.children == [Bold(children=[Text("a")]), Italic(children=[Text("b")])]

    def test_headings(self):
        root = html_to_tree("<div><h1>a</h1><h6>b</h6></div>")
        assert root.children == [Heading(level=1, children=[Text("a")]), Heading(level=6, children=[Text("b")])]

    def test_lists(self):
        root = html_to_tree("<div><ul><li>a</li></ul><ol><li>b</li></ol></div>")
        assert root.children == [
            UnorderedList(children=[ListItem(children=[Text("a")])]),
            OrderedList(children=[ListItem(children=[Text("b")])]),
        ]

    def test_link_and_image(self):
        root = html_to_tree('<div><a href="http://x" class="ext">go</a><img src="p.png" alt="pic"></div>')
        assert root.children == [
            Link(href="http://x", children=[Text("go")], attributes={"class": "ext"}),
            Image(src="p.png", attributes={"alt": "pic"}),
        ]

    def test_line_break(self):
        root = html_to_tree("<div>a<br>b</div>")
        assert root.children == [Text("a"), LineBreak(), Text("b")]

    def test_multi_valued_attributes_joined(self):
        root = html_to_tree('<div><p class="one two">x</p></div>')
        assert root.children[0].attributes == {"class": "one two"}


@pytest.mark.unit
class TestWhitespaceAndSkipped:
    """Tests for layout whitespace, comments and scripts."""

    def test_layout_whitespace_dropped(self):
        root = html_to_tree("<div>\n  <p>a</p>\n  <p>b</p>\n</div>")
        assert root.children == [Paragraph(children=[Text("a")]), Paragraph(children=[Text("b")])]

    def test_inline_space_kept(self):
        root = html_to_tree("<div><b>a</b> <i>b</i></div>")
        assert root.children == [Bold(children=[Text("a")]), Text(" "), Italic(children=[Text("b")])]

    def test_keep_whitespace_text(self):
        root = html_to_tree("<div>\n<p>a</p></div>", HtmlOptions(keep_whitespace_text=True))
        assert root.children == [Text("\n"), Paragraph(children=[Text("a")])]

    def test_comments_and_scripts_skipped(self):
        root = html_to_tree("<div><!-- note -->a<script>alert(1)</script><style>p{}</style></div>")
        assert root.children == [Text("a")]


@pytest.mark.unit
class TestUnknownTags:
    """Tests for elements without a formatting node."""

    def test_error_by_default(self):
        with pytest.raises(UnsupportedTagError) as exc_info:
            html_to_tree("<div><span>x</span></div>")
        assert exc_info.value.tag_name == "span"
        assert exc_info.value.text_content == "x"

    def test_unwrap(self):
        root = html_to_tree("<div>a<span>b<b>c</b></span></div>", HtmlOptions(unknown_tags="unwrap"))
        assert root.children == [Text("a"), Text("b"), Bold(children=[Text("c")])]

    def test_drop(self):
        root = html_to_tree("<div>a<span>b</span></div>", HtmlOptions(unknown_tags="drop"))
        assert root.children == [Text("a")]

    @pytest.mark.parametrize("name", ["bold", "heading1", "image", "italic"])
    def test_toggle_aliases_are_not_html(self, name):
        with pytest.raises(UnsupportedTagError) as exc_info:
            html_to_tree(f"<div><{name}>x</{name}></div>")
        assert exc_info.value.tag_name == name

    def test_link_element_is_not_anchor(self):
        root = html_to_tree('<div>a<link href="style.css"></div>', HtmlOptions(unknown_tags="drop"))
        assert root.children == [Text("a")]

    def test_uppercase_html_names(self):
        root = html_to_tree("<DIV><B>x</B></DIV>")
        assert root.children == [Bold(children=[Text("x")])]


@pytest.mark.integration
class TestParseAndSerialize:
    """Tests for HTML to Markdown through the tree."""

    def test_editor_buffer(self):
        html = (
            "<div>"
            "<h2>Plan</h2>"
            "<p>Do <b>this</b> then <i>that</i>.</p>"
            "<ol><li>one</li><li></li><li>two</li></ol>"
            '<p>See <a href="http://x">docs</a></p>'
            "</div>"
        )
        assert to_markdown(html_to_tree(html)) == (
            "## Plan\n\nDo **this** then _that_.\n\n1. one\n2. two\n\nSee [docs](http://x)\n\n\n\n"
        )

    def test_parser_reuse(self):
        parser = HtmlTreeParser()
        assert parser.parse("<p>a</p>") == parser.parse("<p>a</p>")
