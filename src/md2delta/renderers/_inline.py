#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/renderers/_inline.py
"""Inline run building for Delta rendering.

This module converts the inline children of one block (text, emphasis,
strong, strikethrough, links, images, inline code) into Delta insert
operations. Style attributes are inherited downward: a nested wrapper adds
its attribute to the map carried from its ancestors and never removes one.

"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from md2delta.ast.nodes import Code, Emphasis, Image, Link, Node, Strikethrough, Strong, Text
from md2delta.ast.visitors import NodeVisitor
from md2delta.constants import (
    ATTR_ALT,
    ATTR_BOLD,
    ATTR_FONT,
    ATTR_ITALIC,
    ATTR_LINK,
    ATTR_STRIKE,
    DEFAULT_MONOSPACE_FONT,
    EMBED_IMAGE,
)
from md2delta.delta import DeltaOp
from md2delta.exceptions import UnsupportedNodeKindError


class InlineRunBuilder(NodeVisitor):
    """Build Delta insert runs from inline AST nodes.

    Each ``visit_*`` method returns the list of runs produced by its node,
    using the attribute map inherited from enclosing style wrappers.

    Parameters
    ----------
    monospace_font : str, default "monospace"
        Value of the ``font`` attribute for inline code

    Examples
    --------
        >>> from md2delta.ast import Strong, Text
        >>> builder = InlineRunBuilder()
        >>> [op.to_dict() for op in builder.build([Text("a "), Strong([Text("b")])])]
        [{'insert': 'a '}, {'insert': 'b', 'attributes': {'bold': True}}]

    """

    def __init__(self, monospace_font: str = DEFAULT_MONOSPACE_FONT):
        """Initialize the builder."""
        self.monospace_font = monospace_font
        self._attributes: dict[str, Any] = {}
        self.block_index: Optional[int] = None

    def build(self, nodes: Iterable[Node], attributes: Optional[dict[str, Any]] = None) -> list[DeltaOp]:
        """Convert inline nodes into insert runs.

        Parameters
        ----------
        nodes : iterable of Node
            Inline children of one block
        attributes : dict or None, default = None
            Initial style attributes for every run

        Returns
        -------
        list of DeltaOp
            One op per run, in document order

        Raises
        ------
        UnsupportedNodeKindError
            If a node has no inline Delta representation

        """
        self._attributes = dict(attributes) if attributes else {}
        return self._visit_all(nodes)

    def _visit_all(self, nodes: Iterable[Node]) -> list[DeltaOp]:
        runs: list[DeltaOp] = []
        for node in nodes:
            runs.extend(node.accept(self))
        return runs

    def _visit_styled(self, nodes: Iterable[Node], name: str) -> list[DeltaOp]:
        """Visit ``nodes`` with ``name`` switched on for every resulting run."""
        saved = self._attributes
        self._attributes = {**saved, name: True}
        runs = self._visit_all(nodes)
        self._attributes = saved
        return runs

    def _reject(self, node: Node) -> list[DeltaOp]:
        raise UnsupportedNodeKindError(
            node.kind, context="inline", block_index=self.block_index, source_location=node.source_location
        )

    def visit_text(self, node: Text) -> list[DeltaOp]:
        """Plain text keeps the inherited attributes; empty text yields no run."""
        if not node.content:
            return []
        return [DeltaOp(node.content, self._attributes)]

    def visit_strong(self, node: Strong) -> list[DeltaOp]:
        """Render bold content."""
        return self._visit_styled(node.content, ATTR_BOLD)

    def visit_emphasis(self, node: Emphasis) -> list[DeltaOp]:
        """Render italic content."""
        return self._visit_styled(node.content, ATTR_ITALIC)

    def visit_strikethrough(self, node: Strikethrough) -> list[DeltaOp]:
        """Render struck-through content."""
        return self._visit_styled(node.content, ATTR_STRIKE)

    def visit_link(self, node: Link) -> list[DeltaOp]:
        """Render a link.

        The ``link`` attribute is attached to a single run: the last one the
        link body produces. When the body expands to several runs (for
        example ``[plain **bold**](url)``) the earlier runs carry no
        ``link`` attribute.
        """
        runs = self._visit_all(node.content)
        if not runs:
            return []
        last = runs[-1]
        runs[-1] = DeltaOp(last.insert, {**(last.attributes or {}), ATTR_LINK: node.url})
        return runs

    def visit_image(self, node: Image) -> list[DeltaOp]:
        """Render an image embed; ``alt`` is set only for non-empty alt text."""
        attributes = {ATTR_ALT: node.alt_text} if node.alt_text else None
        return [DeltaOp({EMBED_IMAGE: node.url}, attributes)]

    def visit_code(self, node: Code) -> list[DeltaOp]:
        """Render inline code with the monospace font marker."""
        if not node.content:
            return []
        return [DeltaOp(node.content, {**self._attributes, ATTR_FONT: self.monospace_font})]

    visit_line_break = _reject
    visit_html_inline = _reject

    # Block-level nodes never appear among inline children
    visit_document = _reject
    visit_heading = _reject
    visit_paragraph = _reject
    visit_code_block = _reject
    visit_block_quote = _reject
    visit_list = _reject
    visit_list_item = _reject
    visit_table = _reject
    visit_table_row = _reject
    visit_table_cell = _reject
    visit_thematic_break = _reject
    visit_html_block = _reject


__all__ = ["InlineRunBuilder"]
