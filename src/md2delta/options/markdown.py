#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

This module defines the options controlling which mistune plugins are
enabled when Markdown is parsed into the AST.
"""
# src/md2delta/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from md2delta.constants import (
    DEFAULT_PARSE_FRONTMATTER,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
    DEFAULT_PARSE_TASK_LISTS,
)
from md2delta.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables). Tables have no Delta
        representation, so a parsed table makes the conversion fail.
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).
    parse_frontmatter : bool, default True
        Whether to strip YAML (---) or TOML (+++) frontmatter into the
        document metadata before parsing.

    """

    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "cli_name": "no-strikethrough"},
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "cli_name": "no-tables"},
    )
    parse_task_lists: bool = field(
        default=DEFAULT_PARSE_TASK_LISTS,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "cli_name": "no-task-lists"},
    )
    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={"help": "Strip YAML/TOML frontmatter at document start", "cli_name": "no-frontmatter"},
    )
