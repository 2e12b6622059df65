#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_markdown_to_ast.py
"""Unit tests for MarkdownToAstConverter.

Tests cover:
- Soft line breaks folded into multi-line Text nodes
- List item content columns and task status
- Code block content and language
- YAML and TOML frontmatter
- Input types and decoding failures
- Parser options and malformed token streams

"""

import logging
from io import BytesIO, StringIO
from pathlib import Path

import pytest

from md2delta.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    Heading,
    HTMLBlock,
    Image,
    LineBreak,
    Link,
    List,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    Text,
    ThematicBreak,
)
from md2delta.exceptions import InvalidOptionsError, ParsingError, ValidationError
from md2delta.options import DeltaRendererOptions, MarkdownParserOptions
from md2delta.parsers.markdown import MarkdownToAstConverter, markdown_to_ast


def parse(markdown: str, **options):
    return MarkdownToAstConverter(MarkdownParserOptions(**options)).parse(markdown)


def item_columns(node: List) -> list:
    return [item.source_location.column for item in node.items]


@pytest.mark.unit
class TestSoftBreaks:
    """Tests for folding consecutive lines into one Text node."""

    def test_two_lines_become_one_text(self) -> None:
        """Test that a two-line paragraph holds a single merged Text."""
        doc = parse("line 1\nline 2")
        paragraph = doc.children[0]
        assert isinstance(paragraph, Paragraph)
        assert len(paragraph.content) == 1
        assert paragraph.content[0].content == "line 1\nline 2"

    def test_break_after_inline_markup(self) -> None:
        """Test that the break joins the text following a styled run."""
        paragraph = parse("a *b*\nc").children[0]
        assert isinstance(paragraph.content[1], Emphasis)
        assert paragraph.content[-1].content == "\nc"

    def test_quoted_lines_are_merged(self) -> None:
        """Test that consecutive quoted lines form one paragraph."""
        quote = parse("> line 1\n> line 2").children[0]
        assert isinstance(quote, BlockQuote)
        assert len(quote.children) == 1
        assert quote.children[0].content[0].content == "line 1\nline 2"

    def test_hard_break_is_kept(self) -> None:
        """Test that a trailing backslash produces a LineBreak node."""
        paragraph = parse("a\\\nb").children[0]
        assert any(isinstance(node, LineBreak) for node in paragraph.content)

    def test_blank_lines_are_dropped(self) -> None:
        """Test that extra blank lines create no nodes."""
        doc = parse("a\n\n\n\nb")
        assert [type(node) for node in doc.children] == [Paragraph, Paragraph]


@pytest.mark.unit
class TestInlineNodes:
    """Tests for inline token conversion."""

    def test_styles(self) -> None:
        """Test strong, emphasis, strikethrough and code spans."""
        content = parse("**b** *i* ~~s~~ `c`").children[0].content
        kinds = [type(node) for node in content if not isinstance(node, Text)]
        assert kinds == [Strong, Emphasis, Strikethrough, Code]

    def test_link(self) -> None:
        """Test link URL and body."""
        link = parse("[site](https://example.com)").children[0].content[0]
        assert isinstance(link, Link)
        assert link.url == "https://example.com"
        assert link.content[0].content == "site"

    def test_image_alt_text(self) -> None:
        """Test that alt text is taken from the image body."""
        image = parse("![a picture](pic.png)").children[0].content[0]
        assert isinstance(image, Image)
        assert image.url == "pic.png"
        assert image.alt_text == "a picture"

    @pytest.mark.parametrize(
        "markdown,alt_text",
        [
            ("![a *b* c](x.png)", "a b c"),
            ("![**bold** and `code`](x.png)", "bold and code"),
            ("![~~old~~ new](x.png)", "old new"),
        ],
    )
    def test_styled_alt_text(self, markdown, alt_text) -> None:
        """Test that styled words in the image body are kept in the alt text."""
        assert parse(markdown).children[0].content[0].alt_text == alt_text

    def test_strikethrough_disabled(self) -> None:
        """Test that tildes stay literal when strikethrough is off."""
        content = parse("~~s~~", parse_strikethrough=False).children[0].content
        assert not any(isinstance(node, Strikethrough) for node in content)
        assert "".join(node.content for node in content if isinstance(node, Text)) == "~~s~~"


@pytest.mark.unit
class TestBlockNodes:
    """Tests for block token conversion."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_level(self, level) -> None:
        """Test ATX heading levels."""
        heading = parse("#" * level + " Title").children[0]
        assert isinstance(heading, Heading)
        assert heading.level == level

    def test_out_of_range_heading_level_clamped(self) -> None:
        """Test that a malformed level falls back to 1."""
        heading = MarkdownToAstConverter()._process_heading({"attrs": {"level": 9}, "children": []})
        assert heading.level == 1

    def test_fenced_code_block(self) -> None:
        """Test that the final newline is dropped and the language kept."""
        block = parse("```python extra\nx = 1\ny = 2\n```").children[0]
        assert isinstance(block, CodeBlock)
        assert block.content == "x = 1\ny = 2"
        assert block.language == "python"
        assert block.metadata["info_string"] == "python extra"

    def test_indented_code_block(self) -> None:
        """Test an indented code block without a language."""
        block = parse("    code here\n").children[0]
        assert isinstance(block, CodeBlock)
        assert block.content == "code here"
        assert block.language is None

    def test_nested_quote(self) -> None:
        """Test that quote levels nest."""
        outer = parse("> > inner").children[0]
        assert isinstance(outer, BlockQuote)
        assert isinstance(outer.children[0], BlockQuote)
        assert outer.children[0].children[0].content[0].content == "inner"

    def test_unsupported_blocks_are_parsed(self) -> None:
        """Test that blocks without a Delta form still reach the tree."""
        doc = parse("***\n\n<div>\nhi\n</div>\n")
        assert isinstance(doc.children[0], ThematicBreak)
        assert isinstance(doc.children[1], HTMLBlock)

    def test_table(self) -> None:
        """Test a GFM table with alignment."""
        table = parse("| a | b |\n|:--|--:|\n| 1 | 2 |").children[0]
        assert isinstance(table, Table)
        assert table.header is not None
        assert len(table.header.cells) == 2
        assert table.alignments == ["left", "right"]
        assert len(table.rows) == 1

    def test_tables_disabled(self) -> None:
        """Test that pipe rows stay a paragraph when tables are off."""
        doc = parse("| a | b |\n|---|---|\n| 1 | 2 |", parse_tables=False)
        assert isinstance(doc.children[0], Paragraph)

    def test_unknown_block_token(self) -> None:
        """Test that an unrecognized token is a parsing error."""
        with pytest.raises(ParsingError) as exc_info:
            MarkdownToAstConverter()._process_token({"type": "mystery"})
        assert exc_info.value.parsing_stage == "tokens"

    def test_unknown_inline_token(self) -> None:
        """Test that an unrecognized inline token is a parsing error."""
        with pytest.raises(ParsingError, match="mystery"):
            MarkdownToAstConverter()._process_inline_tokens([{"type": "mystery"}])


@pytest.mark.unit
class TestListColumns:
    """Tests for list item content columns."""

    def test_top_level_bullets(self) -> None:
        """Test that '- a' starts its content at column 3."""
        node = parse("- a\n- b").children[0]
        assert isinstance(node, List)
        assert not node.ordered
        assert item_columns(node) == [3, 3]

    def test_nested_bullets(self) -> None:
        """Test that a nested bullet starts at column 5."""
        outer = parse("- a\n  - b\n- c").children[0]
        inner = outer.items[0].children[1]
        assert isinstance(inner, List)
        assert item_columns(inner) == [5]
        assert item_columns(outer) == [3, 3]

    def test_ordered(self) -> None:
        """Test that '1. a' starts its content at column 4."""
        node = parse("1. a\n2. b").children[0]
        assert node.ordered
        assert node.start == 1
        assert item_columns(node) == [4, 4]

    def test_ordered_width_follows_number(self) -> None:
        """Test that two-digit numbers widen the marker."""
        node = parse("".join(f"{n}. x\n" for n in range(1, 11))).children[0]
        assert item_columns(node)[8:] == [4, 5]

    def test_nested_ordered(self) -> None:
        """Test that a nested ordered item starts at column 7."""
        outer = parse("1. a\n   1. b").children[0]
        assert item_columns(outer.items[0].children[1]) == [7]

    def test_start_number(self) -> None:
        """Test that the start number is kept for later validation."""
        assert parse("3. a\n4. b").children[0].start == 3

    def test_tight_and_loose(self) -> None:
        """Test tight and loose list detection."""
        assert parse("- a\n- b").children[0].tight
        assert not parse("- a\n\n- b").children[0].tight

    def test_loose_items_hold_paragraphs(self) -> None:
        """Test that blank lines inside loose items are dropped."""
        node = parse("- a\n\n- b").children[0]
        assert all(isinstance(child, Paragraph) for item in node.items for child in item.children)


@pytest.mark.unit
class TestTaskLists:
    """Tests for task list checkboxes."""

    def test_checked_and_unchecked(self) -> None:
        """Test that checkbox markers set the task status."""
        node = parse("- [x] done\n- [ ] todo\n- plain").children[0]
        assert [item.task_status for item in node.items] == ["checked", "unchecked", None]
        assert node.items[0].children[0].content[0].content == "done"

    def test_task_lists_disabled(self) -> None:
        """Test that checkboxes stay literal text when disabled."""
        node = parse("- [x] done", parse_task_lists=False).children[0]
        assert node.items[0].task_status is None


@pytest.mark.unit
class TestFrontmatter:
    """Tests for frontmatter extraction."""

    def test_yaml(self) -> None:
        """Test YAML frontmatter in document metadata."""
        doc = parse("---\ntitle: My Document\ntags:\n  - a\n  - b\n---\n\n# Content\n")
        assert doc.metadata == {"title": "My Document", "tags": ["a", "b"]}
        assert isinstance(doc.children[0], Heading)

    def test_toml(self) -> None:
        """Test TOML frontmatter in document metadata."""
        doc = parse('+++\ntitle = "TOML Document"\ncount = 2\n+++\n\nContent here.')
        assert doc.metadata == {"title": "TOML Document", "count": 2}
        assert isinstance(doc.children[0], Paragraph)

    def test_malformed_yaml_is_kept_with_warning(self, caplog) -> None:
        """Test that unparseable frontmatter stays in the document and is logged."""
        with caplog.at_level(logging.WARNING, logger="md2delta.parsers.markdown"):
            doc = parse("---\nkey: [unclosed\n---\nbody")
        assert doc.metadata == {}
        assert [type(node) for node in doc.children] == [ThematicBreak, Heading, Paragraph]
        assert doc.children[1].content[0].content == "key: [unclosed"
        assert "frontmatter" in caplog.text

    def test_non_mapping_yaml_is_content(self) -> None:
        """Test that a block loading to a plain string is parsed as Markdown."""
        doc = parse("---\nImportant intro\n---\nbody")
        assert doc.metadata == {}
        assert [type(node) for node in doc.children] == [ThematicBreak, Heading, Paragraph]
        assert doc.children[1].content[0].content == "Important intro"

    def test_yaml_list_is_content(self) -> None:
        """Test that a YAML list is not taken as metadata."""
        doc = parse("---\n- a\n- b\n---\nbody")
        assert doc.metadata == {}
        assert isinstance(doc.children[0], ThematicBreak)

    def test_empty_block_is_content(self) -> None:
        """Test that an empty fenced block is not taken as metadata."""
        doc = parse("---\n---\nbody")
        assert doc.metadata == {}
        assert isinstance(doc.children[0], ThematicBreak)

    def test_unclosed_fence_is_content(self) -> None:
        """Test that an unterminated block is left to the Markdown parser."""
        doc = parse("---\ntitle: x\n")
        assert doc.metadata == {}
        assert isinstance(doc.children[0], ThematicBreak)

    def test_frontmatter_disabled(self) -> None:
        """Test that fences are parsed as Markdown when disabled."""
        doc = parse("---\ntitle: Hi\n---\n", parse_frontmatter=False)
        assert doc.metadata == {}
        assert isinstance(doc.children[0], ThematicBreak)


@pytest.mark.unit
class TestInputTypes:
    """Tests for the accepted input types."""

    def test_str_is_content(self) -> None:
        """Test that a string is never treated as a path."""
        doc = parse("README.md")
        assert doc.children[0].content[0].content == "README.md"

    def test_bytes(self) -> None:
        """Test UTF-8 bytes."""
        doc = MarkdownToAstConverter().parse("café".encode("utf-8"))
        assert doc.children[0].content[0].content == "café"

    def test_bytes_with_bom(self) -> None:
        """Test that a UTF-8 byte order mark is removed."""
        doc = MarkdownToAstConverter().parse(b"\xef\xbb\xbf# Title")
        assert isinstance(doc.children[0], Heading)

    def test_path(self, tmp_path: Path) -> None:
        """Test reading from a file path."""
        source = tmp_path / "doc.md"
        source.write_text("# From file\n", encoding="utf-8")
        doc = MarkdownToAstConverter().parse(source)
        assert doc.children[0].content[0].content == "From file"

    def test_missing_path(self, tmp_path: Path) -> None:
        """Test that an unreadable path is a validation error."""
        with pytest.raises(ValidationError, match="Cannot read input file"):
            MarkdownToAstConverter().parse(tmp_path / "missing.md")

    def test_binary_stream(self) -> None:
        """Test a binary file-like object."""
        doc = MarkdownToAstConverter().parse(BytesIO(b"*x*"))
        assert isinstance(doc.children[0].content[0], Emphasis)

    def test_text_stream(self) -> None:
        """Test a text file-like object."""
        doc = MarkdownToAstConverter().parse(StringIO("**x**"))
        assert isinstance(doc.children[0].content[0], Strong)

    def test_invalid_utf8(self) -> None:
        """Test that undecodable bytes are a parsing error."""
        with pytest.raises(ParsingError) as exc_info:
            MarkdownToAstConverter().parse(b"\xff\xfe\xfa")
        assert exc_info.value.parsing_stage == "decoding"
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)

    def test_unsupported_type(self) -> None:
        """Test that other objects are rejected."""
        with pytest.raises(ValidationError, match="Unsupported input type"):
            MarkdownToAstConverter().parse(42)  # type: ignore[arg-type]

    def test_empty_input(self) -> None:
        """Test that empty input yields an empty document."""
        assert parse("").children == []


@pytest.mark.unit
class TestConverterSetup:
    """Tests for converter construction and the helper function."""

    def test_wrong_options_type(self) -> None:
        """Test that renderer options are rejected by the parser."""
        with pytest.raises(InvalidOptionsError):
            MarkdownToAstConverter(DeltaRendererOptions())  # type: ignore[arg-type]

    def test_markdown_to_ast(self) -> None:
        """Test the module-level helper."""
        doc = markdown_to_ast("# Hello\n\nWorld")
        assert len(doc.children) == 2
