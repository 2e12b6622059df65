#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2delta/renderers/__init__.py
"""AST renderers producing Quill Delta output.

Examples
--------
    >>> from md2delta.ast import Document, Paragraph, Text
    >>> from md2delta.renderers import DeltaRenderer
    >>> delta = DeltaRenderer().render_to_delta(Document(children=[Paragraph(content=[Text("hi")])]))

"""

from md2delta.renderers.base import BaseRenderer
from md2delta.renderers.delta import DeltaRenderer, depth_from_column

__all__ = ["BaseRenderer", "DeltaRenderer", "depth_from_column"]
