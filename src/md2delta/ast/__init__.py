#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed Markdown.

The parser turns Markdown text into this tree; the Delta renderer walks it
with a visitor and produces a flat list of Delta operations.

Examples
--------
Building a tree by hand:

    >>> from md2delta.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])

"""

from __future__ import annotations

from md2delta.ast.nodes import (
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    SourceLocation,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    TaskStatus,
    Text,
    ThematicBreak,
)
from md2delta.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "HTMLBlock",
    "HTMLInline",
    "Heading",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "SourceLocation",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "TaskStatus",
    "Text",
    "ThematicBreak",
]
