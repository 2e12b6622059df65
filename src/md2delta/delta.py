#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/delta.py
"""Delta operation model.

A Quill Delta document is a flat list of insert operations. Character
styles (bold, links, fonts) live on the text inserts; block formatting
(headings, list items, quoted lines, code lines) lives on the ``"\\n"``
insert that terminates each line.

This module provides:

- ``DeltaOp``: a single insert operation with optional attributes
- ``Delta``: the ordered, mutable operation buffer that the renderer appends
  to and, for block quote post-processing, splices within a bounded range

"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional, Union, overload

from md2delta.constants import ATTR_BLOCKQUOTE, ATTR_INDENT, NEWLINE

InsertValue = Union[str, dict[str, str]]


@dataclass
class DeltaOp:
    """A single Delta insert operation.

    Parameters
    ----------
    insert : str or dict
        Text to insert (never empty), or a single-key embed mapping such as
        ``{"image": url}``
    attributes : dict or None, default = None
        Formatting attributes. An empty mapping is normalized to None, so
        "no attributes" has exactly one representation.

    Examples
    --------
        >>> DeltaOp("hello", {"bold": True}).to_dict()
        {'insert': 'hello', 'attributes': {'bold': True}}
        >>> DeltaOp("\\n", {}).to_dict()
        {'insert': '\\n'}

    """

    insert: InsertValue
    attributes: Optional[dict[str, Any]] = None

    def __post_init__(self) -> None:
        """Validate the insert payload and normalize empty attributes."""
        if isinstance(self.insert, str):
            if not self.insert:
                raise ValueError("Text inserts must be non-empty")
        elif isinstance(self.insert, dict):
            if len(self.insert) != 1:
                raise ValueError(f"Embed inserts must have exactly one key, got {sorted(self.insert)}")
        else:
            raise TypeError(f"Insert must be str or dict, got {type(self.insert).__name__}")

        if not self.attributes:
            self.attributes = None
        else:
            self.attributes = dict(self.attributes)

    @property
    def is_text(self) -> bool:
        """Whether this op inserts text rather than an embed."""
        return isinstance(self.insert, str)

    @property
    def is_newline(self) -> bool:
        """Whether this op is a single newline insert."""
        return self.insert == NEWLINE

    @property
    def has_embedded_newline(self) -> bool:
        """Whether this is a text insert spanning more than one line."""
        return isinstance(self.insert, str) and self.insert != NEWLINE and NEWLINE in self.insert

    @property
    def indent(self) -> int:
        """Value of the ``indent`` attribute, 0 when absent."""
        if not self.attributes:
            return 0
        return int(self.attributes.get(ATTR_INDENT, 0))

    def get(self, name: str, default: Any = None) -> Any:
        """Return an attribute value, or ``default`` when it is not set."""
        if not self.attributes:
            return default
        return self.attributes.get(name, default)

    def is_quote_terminator(self, depth: Optional[int] = None) -> bool:
        """Check whether this op terminates a quoted line.

        Parameters
        ----------
        depth : int or None, default = None
            When given, additionally require the terminator's indent to match.

        """
        if not self.is_newline or not self.get(ATTR_BLOCKQUOTE):
            return False
        return depth is None or self.indent == depth

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape used by Quill."""
        result: dict[str, Any] = {"insert": dict(self.insert) if isinstance(self.insert, dict) else self.insert}
        if self.attributes:
            result["attributes"] = dict(self.attributes)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeltaOp:
        """Create an op from its JSON shape.

        Raises
        ------
        ValueError
            If ``data`` has no ``insert`` key

        """
        if "insert" not in data:
            raise ValueError(f"Delta op is missing 'insert': {dict(data)!r}")
        insert = data["insert"]
        return cls(dict(insert) if isinstance(insert, Mapping) else insert, data.get("attributes"))


def newline(attributes: Optional[Mapping[str, Any]] = None) -> DeltaOp:
    """Create a line terminator carrying block ``attributes``."""
    return DeltaOp(NEWLINE, dict(attributes) if attributes else None)


def quote_terminator(depth: int) -> DeltaOp:
    """Create a quoted-line terminator; ``indent`` is set only for depth > 0."""
    attributes: dict[str, Any] = {ATTR_BLOCKQUOTE: True}
    if depth > 0:
        attributes[ATTR_INDENT] = depth
    return DeltaOp(NEWLINE, attributes)


class Delta:
    """Ordered buffer of Delta operations.

    The renderer appends to the tail during traversal. The only other
    mutation is ``replace_range``, used to splice corrected operations back
    into a range produced by the current block quote level.

    Parameters
    ----------
    ops : iterable of DeltaOp, optional
        Initial operations

    Examples
    --------
        >>> delta = Delta()
        >>> delta.insert("hello")
        >>> delta.insert("\\n")
        >>> delta.to_list()
        [{'insert': 'hello'}, {'insert': '\\n'}]

    """

    def __init__(self, ops: Iterable[DeltaOp] | None = None):
        """Initialize the buffer with optional operations."""
        self._ops: list[DeltaOp] = list(ops) if ops is not None else []

    @property
    def ops(self) -> list[DeltaOp]:
        """Copy of the operations, in order."""
        return list(self._ops)

    @property
    def last(self) -> Optional[DeltaOp]:
        """The most recently appended operation, or None when empty."""
        return self._ops[-1] if self._ops else None

    def push(self, op: DeltaOp) -> None:
        """Append an operation."""
        self._ops.append(op)

    def insert(self, value: InsertValue, attributes: Optional[Mapping[str, Any]] = None) -> None:
        """Append an insert operation built from ``value`` and ``attributes``."""
        self._ops.append(DeltaOp(value, dict(attributes) if attributes else None))

    def extend(self, ops: Iterable[DeltaOp]) -> None:
        """Append several operations in order."""
        self._ops.extend(ops)

    def replace_range(self, start: int, end: int, ops: Iterable[DeltaOp]) -> None:
        """Replace ``self[start:end]`` with ``ops``.

        Raises
        ------
        IndexError
            If the range falls outside the buffer

        """
        if not 0 <= start <= end <= len(self._ops):
            raise IndexError(f"Invalid range [{start}:{end}] for Delta of length {len(self._ops)}")
        self._ops[start:end] = list(ops)

    def to_list(self) -> list[dict[str, Any]]:
        """Serialize every operation to its JSON shape."""
        return [op.to_dict() for op in self._ops]

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize as a Quill Delta JSON document (``{"ops": [...]}``)."""
        return json.dumps({"ops": self.to_list()}, indent=indent, ensure_ascii=False)

    @classmethod
    def from_list(cls, data: Iterable[Mapping[str, Any]]) -> Delta:
        """Build a Delta from a list of JSON-shaped operations."""
        return cls(DeltaOp.from_dict(item) for item in data)

    def __len__(self) -> int:
        return len(self._ops)

    def __iter__(self) -> Iterator[DeltaOp]:
        return iter(self._ops)

    @overload
    def __getitem__(self, index: int) -> DeltaOp: ...

    @overload
    def __getitem__(self, index: slice) -> list[DeltaOp]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[DeltaOp, list[DeltaOp]]:
        return self._ops[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Delta):
            return self._ops == other._ops
        if isinstance(other, list):
            return self.to_list() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Delta({self.to_list()!r})"
