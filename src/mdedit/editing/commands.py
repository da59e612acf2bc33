#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/editing/commands.py
"""Keyboard commands.

A host translates key presses into ``KeyInput`` values and hands them to
``dispatch_key``, which tries each registered command's ``matches`` in the
declared order and applies the first match. Commands hold no state; the
editor is passed to ``apply`` on every call.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from mdedit.editing.editor import Editor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyInput:
    """A key press as reported by the host.

    Parameters
    ----------
    key : str
        Key value, e.g. ``"b"``, ``"1"`` or ``"Tab"``
    ctrl : bool, default False
        Whether the control modifier was held

    """

    key: str
    ctrl: bool = False


class KeyCommand(ABC):
    """Base class for keyboard commands."""

    @abstractmethod
    def matches(self, key_input: KeyInput) -> bool:
        """Return True if this command handles ``key_input``."""
        pass

    @abstractmethod
    def apply(self, editor: Editor, key_input: KeyInput) -> None:
        """Run the command on ``editor``."""
        pass


class BoldItalicCommand(KeyCommand):
    """Ctrl+B / Ctrl+I toggle bold and italic."""

    keys = ("b", "i")

    def matches(self, key_input: KeyInput) -> bool:
        return key_input.ctrl and key_input.key.lower() in self.keys

    def apply(self, editor: Editor, key_input: KeyInput) -> None:
        editor.toggle_tag(key_input.key.lower())


class HeadingCommand(KeyCommand):
    """Ctrl+1 to Ctrl+3 toggle headings of that level."""

    keys = ("1", "2", "3")

    def matches(self, key_input: KeyInput) -> bool:
        return key_input.ctrl and key_input.key in self.keys

    def apply(self, editor: Editor, key_input: KeyInput) -> None:
        editor.toggle_tag(f"h{key_input.key}")


class TabCommand(KeyCommand):
    """Tab nests the selection in a sublist."""

    def matches(self, key_input: KeyInput) -> bool:
        return key_input.key == "Tab"

    def apply(self, editor: Editor, key_input: KeyInput) -> None:
        editor.indent_selection()


DEFAULT_COMMANDS: tuple[KeyCommand, ...] = (HeadingCommand(), TabCommand(), BoldItalicCommand())


def dispatch_key(editor: Editor, key_input: KeyInput, commands: Sequence[KeyCommand] = DEFAULT_COMMANDS) -> bool:
    """Apply the first command matching ``key_input``.

    Parameters
    ----------
    editor : Editor
        Session to act on
    key_input : KeyInput
        The key press
    commands : sequence of KeyCommand, default DEFAULT_COMMANDS
        Commands in priority order

    Returns
    -------
    bool
        True if a command handled the key

    """
    for command in commands:
        if command.matches(key_input):
            logger.debug("Key %r handled by %s", key_input.key, type(command).__name__)
            command.apply(editor, key_input)
            return True
    return False
