#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/cli.py
"""Command-line interface for md2delta.

Reads Markdown from a file or stdin and writes the Quill Delta JSON document
(``{"ops": [...]}``) to stdout or a file. Parser and renderer flags are
generated from the option dataclasses, so every option field is reachable
from the command line.

Examples
--------
.. code-block:: console

    $ echo "# Title" | md2delta
    {"ops": [{"insert": "Title"}, {"insert": "\\n", "attributes": {"header": 1}}]}

    $ md2delta notes.md -o notes.json --indent 2 --no-tables

"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import MISSING, fields
from pathlib import Path
from typing import Any

from md2delta import __version__
from md2delta.exceptions import (
    DependencyError,
    Md2DeltaError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2delta.logging_utils import configure_logging
from md2delta.options import DeltaRendererOptions, MarkdownParserOptions
from md2delta.options.base import BaseParserOptions, BaseRendererOptions
from md2delta.parsers.markdown import MarkdownToAstConverter
from md2delta.renderers.delta import DeltaRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map

    Returns
    -------
    int
        The exit code for the exception type

    """
    if isinstance(exception, DependencyError):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, OutputWriteError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _add_options_arguments(
    parser: argparse.ArgumentParser,
    options_class: type[BaseParserOptions] | type[BaseRendererOptions],
    title: str,
) -> None:
    """Add one argument per field of an options dataclass.

    Boolean fields defaulting to True become ``--no-*`` switches. Every
    argument defaults to ``argparse.SUPPRESS`` so only flags given on the
    command line reach the options object.
    """
    group = parser.add_argument_group(title)
    for field in fields(options_class):
        flag = "--" + field.metadata.get("cli_name", field.name.replace("_", "-"))
        help_text = field.metadata.get("help")
        if field.default is not MISSING and isinstance(field.default, bool):
            action = "store_false" if field.default else "store_true"
            group.add_argument(flag, dest=field.name, action=action, default=argparse.SUPPRESS, help=help_text)
        else:
            group.add_argument(
                flag,
                dest=field.name,
                type=field.metadata.get("type", str),
                default=argparse.SUPPRESS,
                help=help_text,
            )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``md2delta`` command."""
    parser = argparse.ArgumentParser(
        prog="md2delta",
        description="Convert Markdown to Quill Delta JSON.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Markdown file to convert ('-' or omitted for stdin)")
    parser.add_argument("-o", "--out", dest="output", help="Output file (default: stdout)")
    parser.add_argument("--version", "-V", action="version", version=f"md2delta {__version__}")

    _add_options_arguments(parser, MarkdownParserOptions, "Markdown parsing options")
    _add_options_arguments(parser, DeltaRendererOptions, "Delta rendering options")

    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log records to this file")
    logging_group.add_argument(
        "--trace", action="store_true", help="Enable DEBUG logging with timestamps and logger names"
    )
    return parser


def _collect_options(parsed_args: argparse.Namespace, options_class: type[Any]) -> Any:
    values = {f.name: getattr(parsed_args, f.name) for f in fields(options_class) if hasattr(parsed_args, f.name)}
    return options_class(**values)


def _read_input(input_arg: str) -> str | Path:
    if input_arg == "-":
        return sys.stdin.read()
    return Path(input_arg)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = "DEBUG" if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        parser_options = _collect_options(parsed_args, MarkdownParserOptions)
        renderer_options = _collect_options(parsed_args, DeltaRendererOptions)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    source = _read_input(parsed_args.input)
    if isinstance(source, Path) and not source.is_file():
        print(f"Error: Input file not found: {source}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        document = MarkdownToAstConverter(parser_options).parse(source)
        renderer = DeltaRenderer(renderer_options)
        if parsed_args.output:
            renderer.render(document, parsed_args.output)
        else:
            print(renderer.render_to_string(document))
    except Md2DeltaError as e:
        logger.error(e.message)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
