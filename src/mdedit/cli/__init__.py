#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for mdedit.

Converts the HTML of an editor's content area to Markdown using the same
formatting tree and serializer an editing session uses.

Configuration files are discovered as described in ``mdedit.cli.config``;
command line flags override file values.

Examples
--------
Convert a saved editor buffer::

    $ mdedit content.html

Write to a file with asterisk emphasis::

    $ mdedit content.html --out notes.md --italic-marker "*"

Read from stdin and keep unknown elements' text::

    $ cat content.html | mdedit - --unknown-tags unwrap

Pretty-print in the terminal::

    $ mdedit content.html --rich

"""

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional, get_args

from mdedit.cli.config import load_config_with_priority, merge_configs
from mdedit.constants import (
    EXIT_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    BoldMarker,
    BulletMarker,
    ItalicMarker,
    UnknownTagMode,
)
from mdedit.exceptions import MdEditError
from mdedit.logging_utils import configure_logging
from mdedit.options.html import HtmlOptions
from mdedit.options.markdown import MarkdownSerializerOptions
from mdedit.parsers.html import html_to_tree
from mdedit.renderers.markdown import to_markdown

logger = logging.getLogger(__name__)

_MARKDOWN_FLAGS = ("bold_marker", "italic_marker", "bullet_marker", "indent")
_HTML_FLAGS = ("unknown_tags", "html_parser")


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``mdedit`` command."""
    parser = argparse.ArgumentParser(
        prog="mdedit",
        description="Convert rich-text editor HTML to Markdown.",
    )
    parser.add_argument("input", help="HTML file to convert, or '-' to read from stdin")
    parser.add_argument("--out", "-o", help="Write Markdown to this file instead of stdout")

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    config_group.add_argument(
        "--no-config", action="store_true", help="Ignore MDEDIT_CONFIG and configuration file discovery"
    )

    markdown_group = parser.add_argument_group("markdown options")
    markdown_group.add_argument("--bold-marker", choices=get_args(BoldMarker), help="Delimiter for bold text")
    markdown_group.add_argument("--italic-marker", choices=get_args(ItalicMarker), help="Delimiter for italic text")
    markdown_group.add_argument("--bullet-marker", choices=get_args(BulletMarker), help="Unordered list marker")
    markdown_group.add_argument("--indent", help="Indentation per nesting level of lists")

    html_group = parser.add_argument_group("html options")
    html_group.add_argument(
        "--unknown-tags", choices=get_args(UnknownTagMode), help="Handling of elements without a formatting node"
    )
    html_group.add_argument("--html-parser", help="BeautifulSoup parser backend")

    output_group = parser.add_argument_group("output")
    output_group.add_argument("--rich", action="store_true", help="Pretty-print the Markdown and log through rich")
    output_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    output_group.add_argument("--log-file", help="Also write log records to this file")
    output_group.add_argument("--trace", action="store_true", help="Include timestamps and logger names in logs")
    return parser


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(f"Config section '{name}' must be a table, got {type(section).__name__}")
    return section


def _overrides(parsed_args: argparse.Namespace, names: tuple[str, ...]) -> dict[str, Any]:
    return {name: getattr(parsed_args, name) for name in names if getattr(parsed_args, name) is not None}


def build_options(
    parsed_args: argparse.Namespace, config: dict[str, Any]
) -> tuple[MarkdownSerializerOptions, HtmlOptions]:
    """Combine configuration file values and command line flags into options.

    Raises
    ------
    argparse.ArgumentTypeError
        If a config section is malformed or an option value is invalid

    """
    merged = merge_configs(
        {"markdown": _section(config, "markdown"), "html": _section(config, "html")},
        {"markdown": _overrides(parsed_args, _MARKDOWN_FLAGS), "html": _overrides(parsed_args, _HTML_FLAGS)},
    )
    markdown_values = merged["markdown"]
    html_values = merged["html"]

    for option_class, values in ((MarkdownSerializerOptions, markdown_values), (HtmlOptions, html_values)):
        known = {f.name for f in fields(option_class)}
        for key in values:
            if key.replace("-", "_") not in known:
                logger.warning("Ignoring unknown %s option '%s'", option_class.__name__, key)

    try:
        return MarkdownSerializerOptions.from_dict(markdown_values), HtmlOptions.from_dict(html_values)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(markdown: str, parsed_args: argparse.Namespace) -> None:
    if parsed_args.out:
        Path(parsed_args.out).write_text(markdown, encoding="utf-8")
        logger.info("Wrote Markdown to %s", parsed_args.out)
    elif parsed_args.rich:
        from rich.console import Console
        from rich.markdown import Markdown

        Console().print(Markdown(markdown))
    else:
        sys.stdout.write(markdown)


def main(args: Optional[list[str]] = None) -> int:
    """Run the ``mdedit`` command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(
        parsed_args.log_level,
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
        rich_output=parsed_args.rich,
    )

    try:
        if parsed_args.no_config:
            config = load_config_with_priority(parsed_args.config, env_var_path="", discover=False)
        else:
            config = load_config_with_priority(parsed_args.config)
        markdown_options, html_options = build_options(parsed_args, config)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        html = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        tree = html_to_tree(html, html_options)
        markdown = to_markdown(tree, markdown_options)
    except MdEditError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        _write_output(markdown, parsed_args)
    except OSError as e:
        print(f"Error: cannot write {parsed_args.out}: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


__all__ = ["build_options", "create_parser", "main"]
