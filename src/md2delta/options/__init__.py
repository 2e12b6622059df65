"""Option dataclasses for the md2delta parser and renderer."""

from md2delta.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2delta.options.delta import DeltaRendererOptions
from md2delta.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DeltaRendererOptions",
    "MarkdownParserOptions",
]
