#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdedit/constants.py
"""Constants and defaults used across mdedit.

Defaults reproduce the Markdown the editor has always emitted;
options classes refer to these names rather than repeating literals.
"""

from __future__ import annotations

from typing import Literal

# Markdown serializer
BoldMarker = Literal["**", "__"]
ItalicMarker = Literal["_", "*"]
BulletMarker = Literal["-", "*", "+"]

DEFAULT_BOLD_MARKER: BoldMarker = "**"
DEFAULT_ITALIC_MARKER: ItalicMarker = "_"
DEFAULT_BULLET_MARKER: BulletMarker = "-"
DEFAULT_LIST_INDENT = "\t"
BLOCK_SEPARATOR = "\n\n"

# Highest heading level with a Markdown rule; level 6 is rejected on output
MAX_MARKDOWN_HEADING_LEVEL = 5

# Editor placeholders
DEFAULT_LIST_ITEM_PLACEHOLDER = "List item"
DEFAULT_LINK_TEXT = "Link"
DEFAULT_LINK_HREF = "#"
DEFAULT_IMAGE_SRC = "#"

# HTML host adapter
UnknownTagMode = Literal["error", "unwrap", "drop"]
DEFAULT_UNKNOWN_TAG_MODE: UnknownTagMode = "error"
DEFAULT_HTML_PARSER = "html.parser"

# CLI / config discovery
CONFIG_ENV_VAR = "MDEDIT_CONFIG"
CONFIG_FILENAMES = (".mdedit.toml", ".mdedit.yaml", ".mdedit.yml", ".mdedit.json")
PYPROJECT_SECTION = "mdedit"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_INPUT_ERROR = 3
