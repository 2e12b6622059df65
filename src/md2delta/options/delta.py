#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Delta rendering.

This module defines options for converting the AST into Quill Delta
operations.
"""
# src/md2delta/options/delta.py


from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from md2delta.constants import (
    DEFAULT_BULLET_INDENT_WIDTH,
    DEFAULT_JSON_INDENT,
    DEFAULT_MONOSPACE_FONT,
    DEFAULT_ORDERED_INDENT_WIDTH,
)
from md2delta.options.base import BaseRendererOptions


@dataclass(frozen=True)
class DeltaRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Delta rendering.

    Parameters
    ----------
    monospace_font : str, default "monospace"
        Value of the ``font`` attribute attached to inline code runs.
    ordered_indent_width : int, default 3
        Source column width of one nesting level in ordered lists. The
        ``indent`` of an ordered item is ``column // ordered_indent_width - 1``.
    bullet_indent_width : int, default 2
        Source column width of one nesting level in unordered lists.
    json_indent : int or None, default None
        Indentation used when the Delta is serialized to JSON. None produces
        compact output.

    """

    monospace_font: str = field(
        default=DEFAULT_MONOSPACE_FONT,
        metadata={"help": "Font attribute value for inline code runs"},
    )
    ordered_indent_width: int = field(
        default=DEFAULT_ORDERED_INDENT_WIDTH,
        metadata={"help": "Source columns per nesting level in ordered lists", "type": int},
    )
    bullet_indent_width: int = field(
        default=DEFAULT_BULLET_INDENT_WIDTH,
        metadata={"help": "Source columns per nesting level in unordered lists", "type": int},
    )
    json_indent: Optional[int] = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "Indentation for JSON output (None for compact)", "type": int, "cli_name": "indent"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for Delta renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if not self.monospace_font:
            raise ValueError("monospace_font must be a non-empty string")

        if self.ordered_indent_width <= 0:
            raise ValueError(f"ordered_indent_width must be positive, got {self.ordered_indent_width}")

        if self.bullet_indent_width <= 0:
            raise ValueError(f"bullet_indent_width must be positive, got {self.bullet_indent_width}")

        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError(f"json_indent must be non-negative, got {self.json_indent}")
