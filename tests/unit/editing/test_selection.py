#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/editing/test_selection.py
"""Unit tests for TreeRange and TreeSelectionSource."""

import pytest

from mdedit.ast import Bold, Container, Division, Italic, Paragraph, Text
from mdedit.editing import BoundaryPoint, TreeRange, TreeSelectionSource
from mdedit.exceptions import InvalidArgumentError, PreconditionError, SelectionError


@pytest.mark.unit
class TestTreeRangeConstruction:
    """Tests for range constructors."""

    def test_root_must_be_element(self):
        with pytest.raises(InvalidArgumentError):
            TreeRange(Text("x"), BoundaryPoint(Text("x"), 0))

    def test_collapsed_by_default(self):
        root = Division(children=[Text("abc")])
        assert TreeRange(root, BoundaryPoint(root, 0)).collapsed

    def test_spanning_defaults_to_all_children(self):
        root = Division(children=[Text("a"), Text("b")])
        span = TreeRange.spanning(root, root)
        assert span.start == BoundaryPoint(root, 0)
        assert span.end == BoundaryPoint(root, 2)

    def test_ancestors_innermost_first(self):
        text = Text("abc")
        bold = Bold(children=[text])
        paragraph = Paragraph(children=[bold])
        root = Division(children=[paragraph])
        assert TreeRange.within_text(root, text, 1, 2).ancestors() == [bold, paragraph, root]
        assert TreeRange(root, BoundaryPoint(root, 0)).ancestors() == [root]

    def test_text_edges_are_child_positions(self):
        """Test the end of a text node and the following child index coincide."""
        text = Text("abc")
        root = Division(children=[text, Bold()])
        span = TreeRange(root, BoundaryPoint(text, 3), BoundaryPoint(root, 1))
        assert span.collapsed

    def test_around_requires_descendant(self):
        root = Division(children=[Text("a")])
        with pytest.raises(SelectionError):
            TreeRange.around(root, Text("other"))


@pytest.mark.unit
class TestExtract:
    """Tests for extracting spanned content."""

    def test_extract_children(self):
        root = Division(children=[Text("a"), Bold(children=[Text("b")]), Text("c")])
        fragment = TreeRange.spanning(root, root, 1, 3).extract()
        assert fragment == Container(children=[Bold(children=[Text("b")]), Text("c")])
        assert root.children == [Text("a")]

    def test_extract_inside_text(self):
        text = Text("hello world")
        root = Division(children=[text])
        span = TreeRange.within_text(root, text, 6, 11)
        assert span.extract() == Container(children=[Text("world")])
        assert root.children == [Text("hello ")]
        assert span.collapsed

    def test_extract_middle_of_text(self):
        text = Text("abcde")
        root = Division(children=[text])
        fragment = TreeRange.within_text(root, text, 1, 4).extract()
        assert fragment == Container(children=[Text("bcd")])
        assert root.children == [Text("a"), Text("e")]

    def test_extract_across_text_and_elements(self):
        first, last = Text("hello "), Text("!!")
        root = Division(children=[first, Bold(children=[Text("world")]), last])
        span = TreeRange(root, BoundaryPoint(first, 2), BoundaryPoint(last, 1))
        assert span.extract() == Container(children=[Text("llo "), Bold(children=[Text("world")]), Text("!")])
        assert root.children == [Text("he"), Text("!")]

    def test_extract_collapsed_is_empty(self):
        root = Division(children=[Text("a")])
        assert TreeRange(root, BoundaryPoint(root, 1)).extract() == Container()
        assert root.children == [Text("a")]

    def test_boundaries_in_different_parents(self):
        inner = Text("b")
        root = Division(children=[Text("a"), Bold(children=[inner])])
        span = TreeRange(root, BoundaryPoint(root, 0), BoundaryPoint(inner, 1))
        with pytest.raises(SelectionError):
            span.extract()
        assert root.children == [Text("a"), Bold(children=[Text("b")])]

    def test_end_before_start(self):
        root = Division(children=[Text("a"), Text("b")])
        with pytest.raises(SelectionError):
            TreeRange.spanning(root, root, 2, 1).extract()

    def test_offset_out_of_range(self):
        text = Text("ab")
        root = Division(children=[text])
        with pytest.raises(SelectionError):
            TreeRange.within_text(root, text, 0, 5).extract()

    def test_selection_error_is_precondition(self):
        assert issubclass(SelectionError, PreconditionError)


@pytest.mark.unit
class TestInsert:
    """Tests for inserting at a range."""

    def test_insert_at_cursor(self):
        root = Division(children=[Text("a"), Text("c")])
        span = TreeRange(root, BoundaryPoint(root, 1))
        span.insert(Bold(children=[Text("b")]))
        assert root.children == [Text("a"), Bold(children=[Text("b")]), Text("c")]

    def test_insert_splits_text(self):
        text = Text("ac")
        root = Division(children=[text])
        TreeRange(root, BoundaryPoint(text, 1)).insert(Text("b"))
        assert root.children == [Text("a"), Text("b"), Text("c")]

    def test_insert_unwraps_container(self):
        root = Paragraph()
        span = TreeRange(root, BoundaryPoint(root, 0))
        span.insert(Container(children=[Text("a"), Container(children=[Italic(children=[Text("b")])])]))
        assert root.children == [Text("a"), Italic(children=[Text("b")])]
        assert span.start == BoundaryPoint(root, 0)
        assert span.end == BoundaryPoint(root, 2)

    def test_insert_replaces_spanned_content(self):
        root = Division(children=[Text("a"), Text("b"), Text("c")])
        TreeRange.spanning(root, root, 1, 2).insert(Bold(children=[Text("B")]))
        assert root.children == [Text("a"), Bold(children=[Text("B")]), Text("c")]

    def test_insert_then_extract_same_span(self):
        root = Division(children=[Text("x")])
        span = TreeRange(root, BoundaryPoint(root, 1))
        node = Bold(children=[Text("y")])
        span.insert(node)
        assert span.extract() == Container(children=[node])
        assert root.children == [Text("x")]

    def test_insert_attached_node_rejected(self):
        bold = Bold(children=[Text("b")])
        root = Division(children=[bold])
        with pytest.raises(SelectionError):
            TreeRange(root, BoundaryPoint(root, 0)).insert(bold)


@pytest.mark.unit
class TestCloneContents:
    """Tests for non-destructive copies."""

    def test_clone_leaves_tree_intact(self):
        first, last = Text("hello "), Text("!!")
        root = Division(children=[first, Bold(children=[Text("world")]), last])
        span = TreeRange(root, BoundaryPoint(first, 2), BoundaryPoint(last, 1))
        clone = span.clone_contents()
        assert clone == Container(children=[Text("llo "), Bold(children=[Text("world")]), Text("!")])
        assert root.children == [Text("hello "), Bold(children=[Text("world")]), Text("!!")]
        assert clone.children[1] is not root.children[1]

    def test_clone_within_one_text(self):
        text = Text("abcde")
        root = Division(children=[text])
        assert TreeRange.within_text(root, text, 1, 3).clone_contents() == Container(children=[Text("bc")])

    def test_is_empty(self):
        text = Text("ab")
        root = Division(children=[text, Bold()])
        assert TreeRange(root, BoundaryPoint(text, 1)).is_empty()
        assert TreeRange.around(root, root.children[1]).is_empty()
        assert not TreeRange.within_text(root, text, 0, 1).is_empty()

    def test_whitespace_is_not_empty(self):
        text = Text(" ")
        root = Division(children=[text])
        assert not TreeRange.within_text(root, text).is_empty()


@pytest.mark.unit
class TestTreeSelectionSource:
    """Tests for the in-memory selection source."""

    def test_no_selection_initially(self):
        assert TreeSelectionSource(Division()).current_span() is None

    def test_select_helpers(self):
        text = Text("abc")
        root = Division(children=[text])
        source = TreeSelectionSource(root)

        span = source.select_text(text, 1, 2)
        assert source.current_span() is span
        assert span.clone_contents() == Container(children=[Text("b")])

        assert source.select_node(text).clone_contents() == Container(children=[Text("abc")])
        assert source.select_children(root).clone_contents() == Container(children=[Text("abc")])
        assert source.place_cursor(text, 1).collapsed

    def test_clear(self):
        root = Division(children=[Text("a")])
        source = TreeSelectionSource(root)
        source.select_children(root)
        source.clear()
        assert source.current_span() is None
