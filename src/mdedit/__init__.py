"""mdedit - the editing core of a rich-text Markdown editor.

mdedit keeps edited content as a formatting tree, applies and removes
formatting on a selection without ever nesting a tag inside itself, and
serializes the tree to Markdown.

Key Features
------------
- Formatting tree of headings, paragraphs, bold, italic, lists, links and images
- Tag toggling that applies or removes a tag on the selected content
- Editor sessions with keyboard commands and content-changed events
- Markdown serializer with nested, renumbered lists
- HTML host adapter based on BeautifulSoup
- ``mdedit`` command converting editor HTML to Markdown

Requirements
------------
- Python 3.10+

Examples
--------
Toggling bold on part of a paragraph:

    >>> from mdedit import Editor
    >>> from mdedit.ast import Division, Text
    >>>
    >>> root = Division(children=[Text("hello world")])
    >>> editor = Editor(root)
    >>> span = editor.selection.select_text(root.children[0], 0, 5)
    >>> editor.toggle_tag("b")
    >>> editor.to_markdown()
    '**hello** world\\n\\n'

Converting editor HTML:

    >>> from mdedit import html_to_tree, to_markdown
    >>> to_markdown(html_to_tree("<div><h2>Notes</h2><ul><li>one</li></ul></div>"))
    '## Notes\\n\\n- one\\n\\n\\n\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdedit requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from mdedit.editing import Editor, KeyInput, dispatch_key, toggle_tag  # noqa: E402
from mdedit.events import ContentChangedEvent  # noqa: E402
from mdedit.exceptions import (  # noqa: E402
    InvalidArgumentError,
    MdEditError,
    ParsingError,
    PreconditionError,
    RenderingError,
    SelectionError,
    UnsupportedTagError,
    ValidationError,
)
from mdedit.options import EditorOptions, HtmlOptions, MarkdownSerializerOptions  # noqa: E402
from mdedit.parsers import html_to_tree  # noqa: E402
from mdedit.renderers import to_markdown  # noqa: E402

__all__ = [
    "ContentChangedEvent",
    "Editor",
    "EditorOptions",
    "HtmlOptions",
    "InvalidArgumentError",
    "KeyInput",
    "MarkdownSerializerOptions",
    "MdEditError",
    "ParsingError",
    "PreconditionError",
    "RenderingError",
    "SelectionError",
    "UnsupportedTagError",
    "ValidationError",
    "__version__",
    "dispatch_key",
    "html_to_tree",
    "to_markdown",
    "toggle_tag",
]
