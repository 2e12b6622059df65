#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/delta/test_delta_ops.py
"""Unit tests for the Delta operation model.

Tests cover:
- DeltaOp validation and attribute normalization
- Quote terminator detection
- Delta buffer appends, slicing and bounded replacement
- JSON serialization

"""

import json

import pytest

from md2delta.delta import Delta, DeltaOp, newline, quote_terminator


@pytest.mark.unit
class TestDeltaOp:
    """Tests for single insert operations."""

    def test_text_insert_without_attributes(self) -> None:
        """Test that a plain text op serializes without an attributes key."""
        assert DeltaOp("hello").to_dict() == {"insert": "hello"}

    def test_empty_attributes_normalized_to_none(self) -> None:
        """Test that an empty attribute map means no attributes."""
        op = DeltaOp("hello", {})
        assert op.attributes is None
        assert "attributes" not in op.to_dict()

    def test_attributes_are_copied(self) -> None:
        """Test that later changes to the source mapping do not leak into the op."""
        attributes = {"bold": True}
        op = DeltaOp("x", attributes)
        attributes["italic"] = True
        assert op.attributes == {"bold": True}

    def test_empty_text_rejected(self) -> None:
        """Test that an empty text insert is invalid."""
        with pytest.raises(ValueError, match="non-empty"):
            DeltaOp("")

    def test_embed_must_have_single_key(self) -> None:
        """Test that embeds carry exactly one key."""
        with pytest.raises(ValueError, match="exactly one key"):
            DeltaOp({"image": "a.png", "video": "b.mp4"})

    def test_invalid_insert_type(self) -> None:
        """Test that non-str, non-dict inserts are rejected."""
        with pytest.raises(TypeError):
            DeltaOp(42)  # type: ignore[arg-type]

    def test_embed_insert(self) -> None:
        """Test image embed serialization."""
        op = DeltaOp({"image": "cat.png"}, {"alt": "a cat"})
        assert not op.is_text
        assert op.to_dict() == {"insert": {"image": "cat.png"}, "attributes": {"alt": "a cat"}}

    def test_newline_properties(self) -> None:
        """Test newline and embedded newline detection."""
        assert DeltaOp("\n").is_newline
        assert not DeltaOp("\n").has_embedded_newline
        assert DeltaOp("a\nb").has_embedded_newline
        assert not DeltaOp({"image": "x"}).has_embedded_newline

    def test_indent_defaults_to_zero(self) -> None:
        """Test the indent accessor."""
        assert DeltaOp("\n").indent == 0
        assert DeltaOp("\n", {"indent": 2}).indent == 2

    def test_from_dict_round_trip(self) -> None:
        """Test that from_dict accepts the serialized shape."""
        data = {"insert": "\n", "attributes": {"list": "bullet", "indent": 1}}
        assert DeltaOp.from_dict(data).to_dict() == data

    def test_from_dict_requires_insert(self) -> None:
        """Test that a dict without insert is rejected."""
        with pytest.raises(ValueError, match="insert"):
            DeltaOp.from_dict({"retain": 3})


@pytest.mark.unit
class TestQuoteTerminators:
    """Tests for block quote terminator helpers."""

    def test_depth_zero_has_no_indent(self) -> None:
        """Test that the outermost quote level carries no indent attribute."""
        assert quote_terminator(0).to_dict() == {"insert": "\n", "attributes": {"blockquote": True}}

    def test_nested_depth_sets_indent(self) -> None:
        """Test that nested quote levels carry their depth as indent."""
        assert quote_terminator(2).to_dict() == {"insert": "\n", "attributes": {"blockquote": True, "indent": 2}}

    def test_is_quote_terminator(self) -> None:
        """Test detection with and without a depth filter."""
        terminator = quote_terminator(1)
        assert terminator.is_quote_terminator()
        assert terminator.is_quote_terminator(1)
        assert not terminator.is_quote_terminator(0)

    def test_other_newlines_are_not_quote_terminators(self) -> None:
        """Test that list or plain terminators do not count."""
        assert not newline().is_quote_terminator()
        assert not newline({"list": "bullet"}).is_quote_terminator()
        assert not DeltaOp("text", {"blockquote": True}).is_quote_terminator()


@pytest.mark.unit
class TestDelta:
    """Tests for the Delta accumulator."""

    def test_insert_and_push(self) -> None:
        """Test appending operations."""
        delta = Delta()
        delta.insert("hello", {"bold": True})
        delta.push(newline())
        assert delta.to_list() == [
            {"insert": "hello", "attributes": {"bold": True}},
            {"insert": "\n"},
        ]
        assert len(delta) == 2
        assert delta.last == newline()

    def test_empty_delta(self) -> None:
        """Test an empty buffer."""
        delta = Delta()
        assert len(delta) == 0
        assert delta.last is None
        assert delta.to_list() == []

    def test_slice_returns_list(self) -> None:
        """Test that slicing returns plain op lists."""
        delta = Delta([DeltaOp("a"), DeltaOp("b"), DeltaOp("c")])
        assert delta[1:] == [DeltaOp("b"), DeltaOp("c")]
        assert delta[0] == DeltaOp("a")

    def test_ops_property_is_a_copy(self) -> None:
        """Test that mutating the ops copy does not change the buffer."""
        delta = Delta([DeltaOp("a")])
        delta.ops.append(DeltaOp("b"))
        assert len(delta) == 1

    def test_replace_range(self) -> None:
        """Test splicing a bounded range."""
        delta = Delta([DeltaOp("a"), DeltaOp("b\nc"), DeltaOp("d")])
        delta.replace_range(1, 2, [DeltaOp("b"), newline(), DeltaOp("c")])
        assert [op.insert for op in delta] == ["a", "b", "\n", "c", "d"]

    def test_replace_range_rejects_invalid_bounds(self) -> None:
        """Test that out-of-range splices fail."""
        delta = Delta([DeltaOp("a")])
        with pytest.raises(IndexError):
            delta.replace_range(0, 5, [])
        with pytest.raises(IndexError):
            delta.replace_range(1, 0, [])

    def test_equality_with_list(self) -> None:
        """Test comparison against serialized op lists."""
        delta = Delta([DeltaOp("a"), newline()])
        assert delta == [{"insert": "a"}, {"insert": "\n"}]
        assert delta == Delta.from_list([{"insert": "a"}, {"insert": "\n"}])

    def test_to_json(self) -> None:
        """Test Quill document serialization."""
        delta = Delta([DeltaOp("café"), newline({"header": 1})])
        text = delta.to_json()
        assert "café" in text
        assert json.loads(text) == {
            "ops": [{"insert": "café"}, {"insert": "\n", "attributes": {"header": 1}}],
        }

    def test_to_json_indent(self) -> None:
        """Test indented JSON output."""
        assert "\n  " in Delta([DeltaOp("a")]).to_json(indent=2)
