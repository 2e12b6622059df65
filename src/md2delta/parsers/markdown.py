#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/parsers/markdown.py
"""Markdown to AST converter.

This module parses Markdown with mistune (token mode) and builds the md2delta
AST from the token stream. Two properties of the resulting tree matter to the
Delta renderer:

- soft line breaks are folded into the surrounding text, so consecutive
  lines of one paragraph become a single ``Text`` node such as
  ``"line 1\\nline 2"``
- every ``ListItem`` carries the source column where its content starts,
  from which the renderer infers nesting depth

"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import IO, Any, Optional, Union

import yaml

from md2delta.ast import (
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
from md2delta.constants import DEPS_MARKDOWN, NEWLINE, SOURCE_FORMAT_MARKDOWN
from md2delta.exceptions import ParsingError
from md2delta.options.markdown import MarkdownParserOptions
from md2delta.parsers.base import BaseParser
from md2delta.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\n\nThis is **bold**.")

    Without GFM tables:

        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> doc = MarkdownToAstConverter(options).parse(markdown_text)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markdown content, a path to a Markdown file, UTF-8 bytes or a
            file-like object

        Returns
        -------
        Document
            AST document node; frontmatter, when present, is stored in
            ``Document.metadata``

        """
        markdown_content = self._load_text_content(input_data)
        markdown_content, frontmatter = self._extract_frontmatter(markdown_content)

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_task_lists:
            plugins.append("task_lists")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        with debug_timer(logger, "Parsing (markdown)"):
            tokens, _state = markdown.parse(markdown_content)
            children = self._process_tokens(tokens) if isinstance(tokens, list) else []

        logger.debug(f"Parsed {len(children)} top-level blocks")
        return Document(children=children, metadata=frontmatter)

    # Frontmatter

    def _extract_frontmatter(self, content: str) -> tuple[str, dict[str, Any]]:
        """Strip YAML (``---``) or TOML (``+++``) frontmatter from the document start.

        Returns
        -------
        tuple[str, dict]
            Remaining content and the parsed frontmatter mapping. A fenced
            block that is malformed or does not load to a mapping is not
            frontmatter: the content is returned unchanged with empty metadata.

        """
        if not self.options.parse_frontmatter:
            return content, {}

        for fence, loader, error_type in (
            ("---", yaml.safe_load, yaml.YAMLError),
            ("+++", tomllib.loads, tomllib.TOMLDecodeError),
        ):
            block = _split_fenced_block(content, fence)
            if block is None:
                continue
            raw, remaining = block
            try:
                data = loader(raw)
            except error_type as e:
                logger.warning(f"Leaving malformed frontmatter in the document: {e}")
                return content, {}
            if not isinstance(data, dict):
                logger.debug(f"Leading {fence} block is not a mapping; parsing it as Markdown")
                return content, {}
            return remaining, dict(data)

        return content, {}

    # Block tokens

    def _process_tokens(self, tokens: list[dict[str, Any]], content_offset: int = 0) -> list[Node]:
        """Process block tokens into AST nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune block tokens
        content_offset : int, default 0
            Zero-based column where the enclosing list item's content starts

        """
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token, content_offset)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any], content_offset: int = 0) -> Optional[Node]:
        token_type = token.get("type", "")

        if token_type == "blank_line":
            return None
        if token_type == "heading":
            return self._process_heading(token)
        if token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        if token_type == "block_code":
            return self._process_code_block(token)
        if token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        if token_type == "list":
            return self._process_list(token, content_offset)
        if token_type == "table":
            return self._process_table(token)
        if token_type == "thematic_break":
            return ThematicBreak()
        if token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))

        raise ParsingError(f"Unrecognized Markdown block token: {token_type!r}", parsing_stage="tokens")

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1
        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process a fenced or indented code block.

        mistune keeps the newline that ends the last code line in ``raw``;
        it is removed so the content holds exactly the code lines.
        """
        code_content = token.get("raw", "")
        if code_content.endswith(NEWLINE):
            code_content = code_content[:-1]

        info_string = (token.get("attrs", {}).get("info") or "").strip()
        language = info_string.split(maxsplit=1)[0] if info_string else None
        metadata = {"info_string": info_string} if info_string else {}

        return CodeBlock(content=code_content, language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any], content_offset: int = 0) -> List:
        """Process a list token, inferring each item's content column.

        mistune records no source positions, so the column of an item is
        reconstructed from its marker: ``1 + content_offset + marker width``,
        where a bullet marker is its character plus one space and an ordered
        marker is its number plus delimiter and space. Nested lists start at
        the content column of their enclosing item.
        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        bullet = token.get("bullet", "-")

        items = []
        for index, child in enumerate(token.get("children", [])):
            if ordered:
                marker_width = len(str(start + index)) + 2
            else:
                marker_width = len(bullet) + 1
            item_offset = content_offset + marker_width
            items.append(self._process_list_item(child, item_offset))

        return List(ordered=ordered, items=items, start=start, tight=bool(token.get("tight", True)))

    def _process_list_item(self, token: dict[str, Any], item_offset: int) -> ListItem:
        task_status: Optional[TaskStatus] = None
        if token.get("type") == "task_list_item":
            task_status = "checked" if token.get("attrs", {}).get("checked") else "unchecked"

        return ListItem(
            children=self._process_tokens(token.get("children", []), item_offset),
            task_status=task_status,
            source_location=SourceLocation(format=SOURCE_FORMAT_MARKDOWN, column=item_offset + 1),
        )

    def _process_table(self, token: dict[str, Any]) -> Table:
        header = None
        rows = []
        alignments = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # header cells are direct children of table_head
                cells = self._process_table_cells(section.get("children", []))
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif section_type == "table_body":
                for row in section.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row.get("children", []))))

        return Table(rows=rows, header=header, alignments=alignments)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        return [
            TableCell(
                content=self._process_inline_tokens(cell.get("children", [])),
                alignment=cell.get("attrs", {}).get("align"),
            )
            for cell in cell_tokens
        ]

    # Inline tokens

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens, folding soft breaks into adjacent text.

        Runs of ``text`` and ``softbreak`` tokens become a single Text node,
        so a paragraph spanning several source lines yields one multi-line
        Text rather than a sequence of fragments.
        """
        nodes: list[Node] = []
        for token in tokens:
            token_type = token.get("type", "")
            if token_type == "softbreak":
                node: Node = Text(content=NEWLINE)
            else:
                node = self._process_inline_token(token)

            previous = nodes[-1] if nodes else None
            if isinstance(node, Text) and isinstance(previous, Text):
                nodes[-1] = Text(content=previous.content + node.content)
            else:
                nodes.append(node)
        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Node:
        token_type = token.get("type", "")
        children = token.get("children", [])
        attrs = token.get("attrs", {})

        if token_type == "text":
            return Text(content=token.get("raw", ""))
        if token_type == "strong":
            return Strong(content=self._process_inline_tokens(children))
        if token_type == "emphasis":
            return Emphasis(content=self._process_inline_tokens(children))
        if token_type == "strikethrough":
            return Strikethrough(content=self._process_inline_tokens(children))
        if token_type == "codespan":
            return Code(content=token.get("raw", ""))
        if token_type == "link":
            return Link(
                url=attrs.get("url", ""),
                content=self._process_inline_tokens(children),
                title=attrs.get("title"),
            )
        if token_type == "image":
            # alt text lives in the children, not in attrs
            alt_text = _plain_text(children)
            return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))
        if token_type == "linebreak":
            return LineBreak()
        if token_type == "inline_html":
            return HTMLInline(content=token.get("raw", ""))

        raise ParsingError(f"Unrecognized Markdown inline token: {token_type!r}", parsing_stage="tokens")


def _plain_text(tokens: list[dict[str, Any]]) -> str:
    """Concatenate the raw text of inline tokens, descending into styled children."""
    parts = []
    for token in tokens:
        if "children" in token:
            parts.append(_plain_text(token["children"]))
        elif token.get("type") == "softbreak":
            parts.append(" ")
        else:
            parts.append(token.get("raw", ""))
    return "".join(parts)


def _split_fenced_block(content: str, fence: str) -> tuple[str, str] | None:
    """Split a leading block delimited by ``fence`` lines from the rest of ``content``.

    Returns None when ``content`` does not start with the fence or the block
    is never closed.
    """
    if not (content.startswith(fence + "\n") or content.startswith(fence + "\r\n")):
        return None

    lines = content.splitlines(keepends=True)
    for end_index in range(1, len(lines)):
        if lines[end_index].strip() == fence:
            return "".join(lines[1:end_index]), "".join(lines[end_index + 1 :])
    return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to an AST.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from md2delta.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
