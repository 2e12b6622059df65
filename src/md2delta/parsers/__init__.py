#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2delta/parsers/__init__.py
"""Parsers converting source documents into the md2delta AST.

Examples
--------
    >>> from md2delta.parsers import MarkdownToAstConverter
    >>> doc = MarkdownToAstConverter().parse("> quoted")

"""

from md2delta.parsers.base import BaseParser
from md2delta.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
