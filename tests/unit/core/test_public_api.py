#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the public conversion functions.

Tests cover:
- markdown_to_delta / to_delta / ast_to_delta results
- Keyword arguments routed to parser or renderer options
- Validation of unknown or invalid keyword arguments
- Package-level exports

"""

import pytest

import md2delta
from md2delta import Delta, ast_to_delta, markdown_to_delta, to_delta
from md2delta.ast import Document, Paragraph, Text
from md2delta.exceptions import UnsupportedNodeKindError, ValidationError
from md2delta.options import DeltaRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestConversionFunctions:
    """Tests for the conversion entry points."""

    def test_markdown_to_delta_returns_dicts(self, op) -> None:
        """Test the plain list result."""
        assert markdown_to_delta("hello") == [op("hello"), op("\n")]

    def test_to_delta_returns_delta(self) -> None:
        """Test the Delta result."""
        result = to_delta("# Title")
        assert isinstance(result, Delta)
        assert result.to_list()[-1]["attributes"] == {"header": 1}

    def test_ast_to_delta(self, op) -> None:
        """Test rendering a hand-built tree."""
        result = ast_to_delta(Document(children=[Paragraph(content=[Text("x")])]))
        assert result.to_list() == [op("x"), op("\n")]

    def test_bytes_source(self, op) -> None:
        """Test conversion from UTF-8 bytes."""
        assert markdown_to_delta(b"hello") == [op("hello"), op("\n")]


@pytest.mark.unit
class TestKeywordOptions:
    """Tests for keyword argument routing."""

    def test_renderer_keyword(self, op) -> None:
        """Test that renderer fields reach the renderer."""
        result = markdown_to_delta("`x`", monospace_font="Courier")
        assert result[0] == op("x", font="Courier")

    def test_parser_keyword(self, op) -> None:
        """Test that parser fields reach the parser."""
        with pytest.raises(UnsupportedNodeKindError):
            markdown_to_delta("| a | b |\n|---|---|\n| 1 | 2 |")
        result = markdown_to_delta("| a | b |\n|---|---|\n| 1 | 2 |", parse_tables=False)
        assert result[-1] == op("\n")

    def test_keywords_override_options(self, op) -> None:
        """Test that keywords win over option objects."""
        result = markdown_to_delta(
            "`x`",
            renderer_options=DeltaRendererOptions(monospace_font="Courier"),
            monospace_font="Menlo",
        )
        assert result[0] == op("x", font="Menlo")

    def test_option_objects_used(self) -> None:
        """Test that option objects alone are honored."""
        result = markdown_to_delta("~~x~~", parser_options=MarkdownParserOptions(parse_strikethrough=False))
        assert "strike" not in result[0].get("attributes", {})

    def test_unknown_keyword(self) -> None:
        """Test that a misspelled option is rejected."""
        with pytest.raises(ValidationError, match="Unknown option: monospace"):
            markdown_to_delta("x", monospace="Courier")

    def test_invalid_keyword_value(self) -> None:
        """Test that invalid option values become ValidationError."""
        with pytest.raises(ValidationError, match="bullet_indent_width"):
            markdown_to_delta("x", bullet_indent_width=0)


@pytest.mark.unit
class TestPackageExports:
    """Tests for names exported from the package root."""

    def test_version(self) -> None:
        """Test that the version string is exposed."""
        assert md2delta.__version__ == "0.1.0"

    def test_all_names_resolve(self) -> None:
        """Test that every name in __all__ exists."""
        for name in md2delta.__all__:
            assert hasattr(md2delta, name), name
