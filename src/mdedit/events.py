#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/events.py
"""Content-changed notifications for editor hosts.

The editor signals every successful mutation through callbacks instead of
return values, so a host can re-render or re-bind link handlers in one
place.

Examples
--------
    >>> from mdedit.events import ContentChangedEvent
    >>>
    >>> def on_change(event: ContentChangedEvent):
    ...     for link in event.metadata.get("links", []):
    ...         bind_click_handler(link)
    >>>
    >>> editor.add_listener(on_change)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Literal, Optional

if TYPE_CHECKING:
    from mdedit.ast.nodes import Node

# Event operation literals for type safety
Operation = Literal["toggled", "inserted", "indented"]


@dataclass
class ContentChangedEvent:
    """Event emitted after the formatting tree changed.

    Parameters
    ----------
    operation : Operation
        Kind of mutation:

        - "toggled": a tag was toggled on the selection
        - "inserted": a new element was inserted at the cursor
        - "indented": the selection was wrapped in a nested list

    message : str
        Human-readable description of the change
    node : Node or None, default None
        The node that was inserted (a Container when the toggle removed a tag)
    metadata : dict, default empty
        Additional information. ``metadata["links"]`` holds every Link node
        in the tree after the change; ``metadata["tag"]`` the canonical tag
        name involved, if any.

    """

    operation: Operation
    message: str
    node: Optional[Node] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.operation.upper()}] {self.message}"


# Type alias for content-changed callback functions
ContentChangedCallback = Callable[[ContentChangedEvent], None]
"""Type alias for content-changed listeners.

A listener is any callable that accepts a ContentChangedEvent and returns None.
Exceptions raised by a listener propagate to the caller of the edit.
"""
