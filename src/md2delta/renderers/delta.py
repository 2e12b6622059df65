#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/renderers/delta.py
"""Quill Delta rendering from AST.

This module provides the DeltaRenderer class, which walks a parsed Markdown
AST and produces a flat list of Delta insert operations. Block structure is
encoded on the newline insert terminating each line:

- paragraphs end with a plain ``"\\n"``
- headings end with ``{"header": level}``
- code lines end with ``{"code-block": True}``
- list items end with ``{"list": kind, "indent": depth}``
- quoted lines end with ``{"blockquote": True, "indent": depth}``

Examples
--------
    >>> from md2delta.ast import Document, Paragraph, Text
    >>> renderer = DeltaRenderer()
    >>> renderer.render_to_delta(Document(children=[Paragraph(content=[Text("hello")])])).to_list()
    [{'insert': 'hello'}, {'insert': '\\n'}]

"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from md2delta.ast.nodes import (
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    ListItem,
    Node,
    Paragraph,
)
from md2delta.ast.nodes import List as AstList
from md2delta.ast.visitors import NodeVisitor
from md2delta.constants import (
    ATTR_CODE_BLOCK,
    ATTR_HEADER,
    ATTR_INDENT,
    ATTR_LIST,
    DEFAULT_BULLET_INDENT_WIDTH,
    DEFAULT_ORDERED_INDENT_WIDTH,
    LIST_BULLET,
    LIST_CHECKED,
    LIST_ORDERED,
    LIST_UNCHECKED,
    ListKind,
)
from md2delta.delta import Delta, DeltaOp, newline, quote_terminator
from md2delta.exceptions import InvalidListStartError, UnsupportedNodeKindError
from md2delta.options.delta import DeltaRendererOptions
from md2delta.renderers._inline import InlineRunBuilder
from md2delta.renderers._lines import close_lines, split_quoted_lines
from md2delta.renderers.base import BaseRenderer, OutputTarget
from md2delta.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def depth_from_column(
    column: Optional[int],
    ordered: bool,
    ordered_width: int = DEFAULT_ORDERED_INDENT_WIDTH,
    bullet_width: int = DEFAULT_BULLET_INDENT_WIDTH,
) -> int:
    """Infer the nesting depth of a list item from its content column.

    The tree carries no explicit depth for list items, so depth is recovered
    by integer-dividing the 1-based source column where the item's content
    starts by the width of one nesting level, minus one.

    Parameters
    ----------
    column : int or None
        Source column of the item content; None yields depth 0
    ordered : bool
        Whether the item belongs to an ordered list
    ordered_width : int, default 3
        Columns per nesting level for ordered lists
    bullet_width : int, default 2
        Columns per nesting level for unordered lists

    Returns
    -------
    int
        Non-negative nesting depth

    Examples
    --------
        >>> depth_from_column(3, ordered=False)
        0
        >>> depth_from_column(5, ordered=False)
        1
        >>> depth_from_column(7, ordered=True)
        1

    """
    if column is None:
        return 0
    width = ordered_width if ordered else bullet_width
    return max(column // width - 1, 0)


def _iter_list_items(node: AstList) -> Iterator[tuple[ListItem, AstList]]:
    """Yield every item of a list subtree with its owning list, in document order."""
    for item in node.items:
        yield item, node
        for child in item.children:
            if isinstance(child, AstList):
                yield from _iter_list_items(child)


def _validate_list_starts(node: AstList) -> None:
    """Raise InvalidListStartError for any ordered list in the subtree not starting at 1."""
    if node.ordered and node.start != 1:
        raise InvalidListStartError(node.start)
    for item in node.items:
        for child in item.children:
            if isinstance(child, AstList):
                _validate_list_starts(child)


class DeltaRenderer(NodeVisitor, BaseRenderer):
    """Render an AST Document to Quill Delta operations.

    Each call to ``render_to_delta`` builds a fresh Delta; no state carries
    over between calls. When rendering fails the partially built Delta is
    discarded and the error propagates.

    Parameters
    ----------
    options : DeltaRendererOptions or None, default = None
        Delta rendering options

    Examples
    --------
        >>> from md2delta.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=2, content=[Text("Title")])])
        >>> DeltaRenderer().render_to_string(doc)
        '{"ops": [{"insert": "Title"}, {"insert": "\\\\n", "attributes": {"header": 2}}]}'

    """

    def __init__(self, options: DeltaRendererOptions | None = None):
        """Initialize the Delta renderer with options."""
        BaseRenderer._validate_options_type(options, DeltaRendererOptions, "delta")
        options = options or DeltaRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: DeltaRendererOptions = options
        self._inline = InlineRunBuilder(monospace_font=options.monospace_font)
        self._delta = Delta()
        self._block_index: Optional[int] = None

    def render_to_delta(self, doc: Node) -> Delta:
        """Render an AST document to a Delta.

        Parameters
        ----------
        doc : Node
            AST Document node to render

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
        self._delta = Delta()
        self._block_index = None
        try:
            with debug_timer(logger, "Rendering (delta)"):
                doc.accept(self)
            result = self._delta
        finally:
            self._delta = Delta()
            self._block_index = None

        logger.debug(f"Rendered {type(doc).__name__} into {len(result)} Delta ops")
        return result

    def render_to_string(self, doc: Document) -> str:
        """Render an AST document to Delta JSON (``{"ops": [...]}``)."""
        return self.render_to_delta(doc).to_json(indent=self.options.json_indent)

    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render an AST document to Delta JSON written to ``output``."""
        self.write_text_output(self.render_to_string(doc), output)

    # Block dispatcher

    def visit_document(self, node: Document) -> None:
        """Render top-level blocks followed by their blank separator lines."""
        children = node.children
        for index, child in enumerate(children):
            self._block_index = index
            following = children[index + 1] if index + 1 < len(children) else None
            child.accept(self)
            for _ in range(self._separator_count(child, following)):
                self._delta.push(newline())
        self._block_index = None

    @staticmethod
    def _separator_count(block: Node, following: Optional[Node]) -> int:
        """Number of blank lines appended after ``block`` given its next sibling.

        A block's own terminator already ends its line. Paragraphs before
        another paragraph, code block or heading get one extra blank line.
        Code blocks get one before a paragraph or at the end of the document.
        Adjacent lists are separated by one blank line so Quill does not merge
        them into a single list.
        """
        if isinstance(block, Paragraph):
            return 1 if isinstance(following, (Paragraph, CodeBlock, Heading)) else 0
        if isinstance(block, CodeBlock):
            return 1 if following is None or isinstance(following, Paragraph) else 0
        if isinstance(block, AstList):
            return 1 if isinstance(following, AstList) else 0
        return 0

    def _build_runs(self, nodes: list[Node]) -> list[DeltaOp]:
        self._inline.block_index = self._block_index
        return self._inline.build(nodes)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a paragraph closed by plain line terminators."""
        self._delta.extend(close_lines(self._build_runs(node.content)))

    def visit_heading(self, node: Heading) -> None:
        """Render a heading closed by a ``header`` terminator."""
        self._delta.extend(close_lines(self._build_runs(node.content), {ATTR_HEADER: node.level}))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a code block as one insert and ``code-block`` terminator per line."""
        runs = [DeltaOp(node.content)] if node.content else []
        self._delta.extend(close_lines(runs, {ATTR_CODE_BLOCK: True}))

    # List converter

    def visit_list(self, node: AstList) -> None:
        """Render every item of a list subtree as one Delta list line.

        All start numbers in the subtree are checked before any operation is
        appended. Nested items are rendered after the lines of their parent
        item, their depth coming from their own source column.
        """
        _validate_list_starts(node)
        for item, owner in _iter_list_items(node):
            self._render_list_item(item, owner)

    def _render_list_item(self, item: ListItem, owner: AstList) -> None:
        attributes: dict[str, Any] = {ATTR_LIST: self._list_kind(item, owner)}
        column = item.source_location.column if item.source_location else None
        depth = depth_from_column(
            column,
            owner.ordered,
            ordered_width=self.options.ordered_indent_width,
            bullet_width=self.options.bullet_indent_width,
        )
        if depth > 0:
            attributes[ATTR_INDENT] = depth

        closed = False
        for child in item.children:
            if isinstance(child, Paragraph):
                self._delta.extend(close_lines(self._build_runs(child.content), attributes))
                closed = True
            elif not isinstance(child, AstList):
                raise UnsupportedNodeKindError(
                    child.kind,
                    context="list item",
                    block_index=self._block_index,
                    source_location=child.source_location,
                )

        if not closed:
            self._delta.push(newline(attributes))

    @staticmethod
    def _list_kind(item: ListItem, owner: AstList) -> ListKind:
        if item.task_status == "checked":
            return LIST_CHECKED
        if item.task_status == "unchecked":
            return LIST_UNCHECKED
        return LIST_ORDERED if owner.ordered else LIST_BULLET

    def visit_list_item(self, node: ListItem) -> None:
        """List items are only rendered through their enclosing list."""
        self._reject(node)

    # Block quote converter

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render an outermost block quote."""
        self._render_block_quote(node, 0)

    def _render_block_quote(self, node: BlockQuote, depth: int) -> None:
        """Render one quote level and correct the operations it produced.

        After every child, merged multi-line text produced since this level
        started is split into one quoted line per source line. A level that
        produced no line of its own (``> > text`` at the outer level) is
        closed with a synthesized terminator at its depth.

        Headings inside a quote are rendered as plain quoted lines, since a
        line cannot carry both ``header`` and ``blockquote``.
        """
        start = len(self._delta)
        for child in node.children:
            if isinstance(child, BlockQuote):
                self._render_block_quote(child, depth + 1)
            elif isinstance(child, (Paragraph, Heading)):
                self._delta.extend(self._build_runs(child.content))
                self._delta.push(quote_terminator(depth))
            else:
                raise UnsupportedNodeKindError(
                    child.kind,
                    context="block quote",
                    block_index=self._block_index,
                    source_location=child.source_location,
                )
            self._delta.replace_range(start, len(self._delta), split_quoted_lines(self._delta[start:], depth))

        if not any(op.is_quote_terminator(depth) for op in self._delta[start:]):
            self._delta.push(quote_terminator(depth))

    # Kinds with no Delta representation

    def _reject(self, node: Node) -> None:
        raise UnsupportedNodeKindError(
            node.kind, context="block", block_index=self._block_index, source_location=node.source_location
        )

    visit_table = _reject
    visit_table_row = _reject
    visit_table_cell = _reject
    visit_thematic_break = _reject
    visit_html_block = _reject

    # Inline nodes are only valid inside blocks
    visit_text = _reject
    visit_emphasis = _reject
    visit_strong = _reject
    visit_strikethrough = _reject
    visit_code = _reject
    visit_link = _reject
    visit_image = _reject
    visit_line_break = _reject
    visit_html_inline = _reject
