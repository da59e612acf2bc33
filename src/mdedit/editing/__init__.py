#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Selection-driven edits of formatting trees."""

from mdedit.editing.commands import (
    DEFAULT_COMMANDS,
    BoldItalicCommand,
    HeadingCommand,
    KeyCommand,
    KeyInput,
    TabCommand,
    dispatch_key,
)
from mdedit.editing.editor import Editor
from mdedit.editing.selection import BoundaryPoint, Selection, SelectionSource, TreeRange, TreeSelectionSource
from mdedit.editing.toggle import toggle_tag

__all__ = [
    "DEFAULT_COMMANDS",
    "BoldItalicCommand",
    "BoundaryPoint",
    "Editor",
    "HeadingCommand",
    "KeyCommand",
    "KeyInput",
    "Selection",
    "SelectionSource",
    "TabCommand",
    "TreeRange",
    "TreeSelectionSource",
    "dispatch_key",
    "toggle_tag",
]
