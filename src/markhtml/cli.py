#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/cli.py
"""Command-line interface for markhtml.

Reads a JSON-serialized document tree (see :mod:`markhtml.ast.serialization`)
and writes the rendered HTML to stdout or a file. Every
:class:`~markhtml.options.HtmlRendererOptions` field is exposed as a flag
generated from its metadata.

Environment Variable Support
----------------------------
Renderer options take their defaults from ``MARKHTML_<FIELD_NAME>``
environment variables (e.g. ``MARKHTML_SAFELINK=true``). Command-line flags
always override environment variables.

Examples
--------
Render a tree to stdout::

    $ markhtml document.json

Full page with a table of contents, written to a file::

    $ markhtml document.json --complete-page --toc --title "Report" -o report.html

Read from stdin and highlight the output::

    $ cat document.json | markhtml - --safelink --rich

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import MISSING, Field, fields
from pathlib import Path
from typing import Any, Optional, Sequence

from markhtml import __version__
from markhtml.ast.nodes import Document
from markhtml.ast.serialization import json_to_ast
from markhtml.exceptions import (
    MarkHtmlError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from markhtml.logging_utils import configure_logging
from markhtml.options.html import HtmlRendererOptions
from markhtml.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

ENV_PREFIX = "MARKHTML_"
_TRUE_VALUES = ("true", "1", "yes", "on")


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _env_default(field: Field, default: Any) -> Any:
    env_key = f"{ENV_PREFIX}{field.name.upper()}"
    env_value = os.environ.get(env_key)
    if env_value is None:
        return default
    if isinstance(default, bool):
        return env_value.strip().lower() in _TRUE_VALUES
    return env_value


def add_renderer_options(parser: argparse.ArgumentParser) -> None:
    """Add one flag per HtmlRendererOptions field to ``parser``.

    Boolean fields become ``--flag`` switches, string fields ``--flag VALUE``
    options. Fields marked ``exclude_from_cli`` are skipped.

    """
    group = parser.add_argument_group("HTML renderer options")
    for field in fields(HtmlRendererOptions):
        if field.metadata.get("exclude_from_cli", False):
            continue
        default = field.default if field.default is not MISSING else None
        default = _env_default(field, default)
        cli_name = f"--{field.name.replace('_', '-')}"
        help_text = field.metadata.get("help", f"Configure {field.name}")
        if isinstance(field.default, bool):
            group.add_argument(cli_name, dest=field.name, action="store_true", default=default, help=help_text)
        else:
            group.add_argument(cli_name, dest=field.name, default=default, metavar="VALUE", help=help_text)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="markhtml",
        description="Render a JSON document tree to HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  markhtml document.json
  markhtml document.json --complete-page --toc --title "Report" -o report.html
  cat document.json | markhtml - --safelink --smartypants
        """,
    )
    parser.add_argument("input", help="JSON document tree to render (use '-' for stdin)")
    parser.add_argument("--out", "-o", help="Output file path (default: print to stdout)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose log format with timestamps")
    parser.add_argument("--rich", action="store_true", help="Syntax-highlight HTML printed to the terminal")
    parser.add_argument(
        "--no-strict",
        dest="strict",
        action="store_false",
        help="Ignore unknown node attributes in the input instead of failing",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    add_renderer_options(parser)
    return parser


def options_from_args(args: argparse.Namespace) -> HtmlRendererOptions:
    """Build renderer options from parsed arguments.

    Raises
    ------
    ValidationError
        If the option values are rejected by HtmlRendererOptions

    """
    kwargs = {
        field.name: getattr(args, field.name)
        for field in fields(HtmlRendererOptions)
        if hasattr(args, field.name) and getattr(args, field.name) is not None
    }
    try:
        return HtmlRendererOptions(**kwargs)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid renderer options: {e}", original_error=e) from e


def load_document(source: str, strict_mode: bool = True) -> Document:
    """Load a document tree from a JSON file path or ``-`` for stdin.

    Raises
    ------
    OSError
        If the file cannot be read
    ParsingError
        If the content is not a valid document tree

    """
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")

    node = json_to_ast(text, strict_mode=strict_mode)
    if not isinstance(node, Document):
        raise ParsingError(f"Top-level node must be a Document, got {type(node).__name__}")
    return node


def _render_rich_html_output(text: str) -> bool:
    """Attempt to print HTML with Rich syntax highlighting."""
    try:
        from rich.console import Console
        from rich.syntax import Syntax
    except ImportError:
        print("Warning: Rich library not installed. Install with: pip install markhtml[rich]", file=sys.stderr)
        print(text, end="")
        return False

    console = Console()
    console.print(Syntax(text, "html", theme="monokai", word_wrap=True))
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command-line interface.

    Parameters
    ----------
    argv : sequence of str, optional
        Arguments without the program name (default: ``sys.argv[1:]``)

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        options = options_from_args(args)
        document = load_document(args.input, strict_mode=args.strict)
        renderer = HtmlRenderer(options)
        if args.out:
            renderer.render(document, args.out)
            logger.info(f"Wrote {args.out}")
        else:
            html = renderer.render_to_string(document)
            if args.rich:
                _render_rich_html_output(html)
            else:
                sys.stdout.write(html)
    except (MarkHtmlError, OSError) as e:
        logger.error(str(e))
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


__all__ = [
    "EXIT_SUCCESS",
    "EXIT_ERROR",
    "EXIT_VALIDATION_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_PARSING_ERROR",
    "EXIT_RENDERING_ERROR",
    "add_renderer_options",
    "create_parser",
    "get_exit_code_for_exception",
    "load_document",
    "main",
    "options_from_args",
]
