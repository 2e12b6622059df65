"""md2delta - convert Markdown to Quill Delta operations.

md2delta parses Markdown with mistune into a small AST and renders that tree
as a flat list of Quill Delta insert operations. Block structure (headings,
list items, quoted lines, code lines) is carried by attributes on the
newline insert that ends each line.

Supported Markdown
------------------
- Paragraphs and ATX/setext headings
- Bold, italic, strikethrough, inline code, links and images
- Fenced and indented code blocks
- Bullet, ordered (starting at 1) and task lists, including nested lists
- Block quotes, including nested quotes

Anything else (tables, thematic breaks, raw HTML, hard line breaks) raises
``UnsupportedNodeKindError``.

Examples
--------
    >>> from md2delta import markdown_to_delta
    >>> markdown_to_delta("# Title")
    [{'insert': 'Title'}, {'insert': '\\n', 'attributes': {'header': 1}}]

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from md2delta.api import ast_to_delta, markdown_to_delta, to_delta
from md2delta.delta import Delta, DeltaOp
from md2delta.exceptions import (
    DependencyError,
    InvalidListStartError,
    InvalidOptionsError,
    Md2DeltaError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    UnsupportedNodeKindError,
    ValidationError,
)
from md2delta.options import DeltaRendererOptions, MarkdownParserOptions
from md2delta.parsers.markdown import MarkdownToAstConverter, markdown_to_ast
from md2delta.renderers.delta import DeltaRenderer

__all__ = [
    "Delta",
    "DeltaOp",
    "DeltaRenderer",
    "DeltaRendererOptions",
    "DependencyError",
    "InvalidListStartError",
    "InvalidOptionsError",
    "MarkdownParserOptions",
    "MarkdownToAstConverter",
    "Md2DeltaError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "UnsupportedNodeKindError",
    "ValidationError",
    "__version__",
    "ast_to_delta",
    "markdown_to_ast",
    "markdown_to_delta",
    "to_delta",
]
