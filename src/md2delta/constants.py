#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/constants.py
"""Constants and default values for md2delta.

This module centralizes the Delta attribute names, the dependency
specifications used by the dependency checks, and the defaults used by the
parser and renderer options.

"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# Delta attribute names
# =============================================================================

ATTR_BOLD = "bold"
ATTR_ITALIC = "italic"
ATTR_STRIKE = "strike"
ATTR_FONT = "font"
ATTR_LINK = "link"
ATTR_ALT = "alt"
ATTR_HEADER = "header"
ATTR_LIST = "list"
ATTR_INDENT = "indent"
ATTR_CODE_BLOCK = "code-block"
ATTR_BLOCKQUOTE = "blockquote"

EMBED_IMAGE = "image"

NEWLINE = "\n"

ListKind = Literal["ordered", "bullet", "checked", "unchecked"]

LIST_ORDERED: ListKind = "ordered"
LIST_BULLET: ListKind = "bullet"
LIST_CHECKED: ListKind = "checked"
LIST_UNCHECKED: ListKind = "unchecked"

# =============================================================================
# Renderer defaults
# =============================================================================

DEFAULT_MONOSPACE_FONT = "monospace"

# Source columns are divided by these widths to recover list nesting depth
DEFAULT_ORDERED_INDENT_WIDTH = 3
DEFAULT_BULLET_INDENT_WIDTH = 2

DEFAULT_JSON_INDENT: int | None = None

# =============================================================================
# Parser defaults
# =============================================================================

DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_TASK_LISTS = True
DEFAULT_PARSE_FRONTMATTER = True

SOURCE_FORMAT_MARKDOWN = "markdown"
