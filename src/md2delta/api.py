"""The exported API functions for Markdown to Delta conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2delta/api.py
from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Optional, TypeVar, Union

from md2delta.ast.nodes import Document
from md2delta.delta import Delta
from md2delta.exceptions import ValidationError
from md2delta.options.base import BaseParserOptions, BaseRendererOptions
from md2delta.options.delta import DeltaRendererOptions
from md2delta.options.markdown import MarkdownParserOptions
from md2delta.parsers.markdown import MarkdownToAstConverter
from md2delta.renderers.delta import DeltaRenderer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", BaseParserOptions, BaseRendererOptions)

MarkdownSource = Union[str, Path, IO[bytes], IO[str], bytes]


def _split_kwargs_for_parser_and_renderer(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split keyword arguments between parser and renderer option fields.

    Raises
    ------
    ValidationError
        If a keyword matches no option field

    """
    parser_fields = {f.name for f in fields(MarkdownParserOptions)}
    renderer_fields = {f.name for f in fields(DeltaRendererOptions)}

    parser_kwargs = {}
    renderer_kwargs = {}
    for key, value in kwargs.items():
        if key in parser_fields:
            parser_kwargs[key] = value
        elif key in renderer_fields:
            renderer_kwargs[key] = value
        else:
            raise ValidationError(f"Unknown option: {key}", parameter_name=key, parameter_value=value)
    return parser_kwargs, renderer_kwargs


def _merge_options(options: Optional[OptionsT], options_class: type[OptionsT], overrides: dict[str, Any]) -> OptionsT:
    """Apply keyword overrides on top of an options object (or the defaults)."""
    base = options if options is not None else options_class()
    if not overrides:
        return base
    try:
        return base.create_updated(**overrides)
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def ast_to_delta(document: Document, renderer_options: DeltaRendererOptions | None = None) -> Delta:
    """Render an AST document to a Delta.

    Parameters
    ----------
    document : Document
        AST document, typically produced by ``MarkdownToAstConverter``
    renderer_options : DeltaRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    Delta
        The rendered operations

    Raises
    ------
    InvalidListStartError
        If an ordered list does not start at 1
    UnsupportedNodeKindError
        If the tree contains a node kind with no Delta representation

    """
    return DeltaRenderer(renderer_options).render_to_delta(document)


def to_delta(
    source: MarkdownSource,
    *,
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: DeltaRendererOptions | None = None,
    **kwargs: Any,
) -> Delta:
    """Convert Markdown to a Delta.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown content, a path to a Markdown file, UTF-8 bytes or a
        file-like object
    parser_options : MarkdownParserOptions or None, default = None
        Parsing options
    renderer_options : DeltaRendererOptions or None, default = None
        Rendering options
    **kwargs
        Individual option fields (e.g. ``parse_tables=False``,
        ``monospace_font="Courier"``) overriding the option objects

    Returns
    -------
    Delta
        The rendered operations

    Raises
    ------
    ValidationError
        If a keyword argument is not an option field or has an invalid value
    ParsingError
        If the input cannot be decoded or parsed
    InvalidListStartError
        If an ordered list does not start at 1
    UnsupportedNodeKindError
        If the document uses syntax with no Delta representation

    Examples
    --------
        >>> to_delta("**hi**").to_list()
        [{'insert': 'hi', 'attributes': {'bold': True}}, {'insert': '\\n'}]

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    parser_options = _merge_options(parser_options, MarkdownParserOptions, parser_kwargs)
    renderer_options = _merge_options(renderer_options, DeltaRendererOptions, renderer_kwargs)

    document = MarkdownToAstConverter(parser_options).parse(source)
    delta = ast_to_delta(document, renderer_options)
    logger.debug(f"Converted {len(document.children)} blocks into {len(delta)} ops")
    return delta


def markdown_to_delta(
    source: MarkdownSource,
    *,
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: DeltaRendererOptions | None = None,
    **kwargs: Any,
) -> list[dict[str, Any]]:
    """Convert Markdown to a list of Delta operations as plain dicts.

    Accepts the same arguments as ``to_delta``; the result is ready for
    ``json.dumps`` or for a Quill ``setContents`` call.

    Examples
    --------
        >>> markdown_to_delta("hello")
        [{'insert': 'hello'}, {'insert': '\\n'}]
        >>> markdown_to_delta("- a\\n- b")
        [{'insert': 'a'}, {'insert': '\\n', 'attributes': {'list': 'bullet'}}, {'insert': 'b'}, {'insert': '\\n', 'attributes': {'list': 'bullet'}}]

    """
    return to_delta(source, parser_options=parser_options, renderer_options=renderer_options, **kwargs).to_list()
