#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_exceptions.py
"""Unit tests for the exception hierarchy and content-changed events."""

import pytest

from mdedit.ast import Bold, Text
from mdedit.events import ContentChangedEvent
from mdedit.exceptions import (
    InvalidArgumentError,
    MdEditError,
    ParsingError,
    PreconditionError,
    RenderingError,
    SelectionError,
    UnsupportedTagError,
    ValidationError,
)


@pytest.mark.unit
class TestHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "error_class,parent",
        [
            (ValidationError, MdEditError),
            (InvalidArgumentError, ValidationError),
            (PreconditionError, MdEditError),
            (SelectionError, PreconditionError),
            (RenderingError, MdEditError),
            (UnsupportedTagError, RenderingError),
            (ParsingError, MdEditError),
        ],
    )
    def test_subclass(self, error_class, parent):
        assert issubclass(error_class, parent)

    def test_original_error_kept(self):
        cause = KeyError("x")
        error = MdEditError("failed", original_error=cause)
        assert error.message == "failed"
        assert error.original_error is cause
        assert str(error) == "failed"

    def test_invalid_argument_details(self):
        error = InvalidArgumentError("bad level", parameter_name="level", parameter_value=9)
        assert error.parameter_name == "level"
        assert error.parameter_value == 9

    def test_unsupported_tag_message(self):
        error = UnsupportedTagError("img", "")
        assert str(error) == "Unknown tag 'img' with content ''"
        assert error.rendering_stage == "markdown"

    def test_selection_error_boundary(self):
        assert SelectionError("out of range", boundary=3).boundary == 3


@pytest.mark.unit
class TestContentChangedEvent:
    """Tests for ContentChangedEvent."""

    def test_str(self):
        event = ContentChangedEvent(operation="inserted", message="Inserted <a>")
        assert str(event) == "[INSERTED] Inserted <a>"
        assert event.node is None
        assert event.metadata == {}

    def test_node_and_metadata(self):
        node = Bold(children=[Text("x")])
        event = ContentChangedEvent(operation="toggled", message="Toggled <b>", node=node, metadata={"tag": "b"})
        assert event.node is node
        assert event.metadata["tag"] == "b"
