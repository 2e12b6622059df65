#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/renderers/_lines.py
"""Line splitting helpers for Delta rendering.

Delta has no notion of a line break inside a block: every line ends with its
own ``"\\n"`` insert carrying the block attributes. The parser, however,
keeps consecutive source lines of a paragraph together in one text node.
The functions here decompose such multi-line runs into one insert and one
terminator per line. They are pure: they take operations and return new
operations, leaving buffer mutation to the caller.

"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from md2delta.constants import NEWLINE
from md2delta.delta import DeltaOp, newline, quote_terminator


def close_lines(runs: Iterable[DeltaOp], terminator_attributes: Optional[Mapping[str, Any]] = None) -> list[DeltaOp]:
    """Close a block's inline runs with line terminators.

    Every embedded newline inside a text run becomes a terminator carrying
    ``terminator_attributes``, and one final terminator closes the block.
    Attributes of the split runs are kept on each piece; empty pieces emit
    no insert.

    Parameters
    ----------
    runs : iterable of DeltaOp
        Inline runs of one block
    terminator_attributes : mapping or None, default = None
        Block attributes for every terminator (None for plain paragraphs)

    Returns
    -------
    list of DeltaOp
        The runs followed by their terminators

    Examples
    --------
        >>> [op.to_dict() for op in close_lines([DeltaOp("a\\nb")], {"header": 1})]
        [{'insert': 'a'}, {'insert': '\\n', 'attributes': {'header': 1}}, {'insert': 'b'}, {'insert': '\\n', 'attributes': {'header': 1}}]

    """
    result: list[DeltaOp] = []
    for run in runs:
        if not run.has_embedded_newline and not run.is_newline:
            result.append(run)
            continue
        assert isinstance(run.insert, str)
        for index, line in enumerate(run.insert.split(NEWLINE)):
            if index:
                result.append(newline(terminator_attributes))
            if line:
                result.append(DeltaOp(line, run.attributes))
    result.append(newline(terminator_attributes))
    return result


def split_quoted_lines(ops: Sequence[DeltaOp], depth: int) -> list[DeltaOp]:
    """Split merged multi-line text inside a block quote range.

    Consecutive quoted lines reach the renderer as one text insert such as
    ``"line 1\\nline 2"``. Each such insert is replaced by one insert and one
    quote terminator per line. Line ``k`` of the run is terminated at indent
    ``max(base - k, 0)``, where ``base`` is the indent of the terminator that
    followed the merged insert (or ``depth`` when none did): later lines of a
    merged run belong to shallower quote levels as lazy continuation lines
    unwind the nesting.

    When the merged insert was directly followed by a quote terminator, that
    terminator is consumed and the last line's terminator takes its place.
    Otherwise the last line is left open so the runs after it complete it.

    Parameters
    ----------
    ops : sequence of DeltaOp
        Operations produced since the current quote level started
    depth : int
        Nesting depth of the current quote level

    Returns
    -------
    list of DeltaOp
        Replacement operations for the whole range

    """
    result: list[DeltaOp] = []
    index = 0
    while index < len(ops):
        op = ops[index]
        if not _is_merged_text(op):
            result.append(op)
            index += 1
            continue

        following = ops[index + 1] if index + 1 < len(ops) else None
        consumed = following is not None and following.is_quote_terminator()
        base = following.indent if consumed and following is not None else depth

        assert isinstance(op.insert, str)
        lines = op.insert.split(NEWLINE)
        last = len(lines) - 1
        for offset, line in enumerate(lines):
            if line:
                result.append(DeltaOp(line, op.attributes))
            if offset < last or consumed:
                result.append(quote_terminator(max(base - offset, 0)))

        index += 2 if consumed else 1
    return result


def _is_merged_text(op: DeltaOp) -> bool:
    """Text insert carrying a line break that is not a quote terminator."""
    if not op.is_text or NEWLINE not in op.insert:
        return False
    return not op.is_quote_terminator()
