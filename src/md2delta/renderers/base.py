#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/renderers/base.py
"""Base class for AST renderers.

The BaseRenderer fixes the interface shared by renderers: ``render`` writes
to a path or stream, ``render_to_string`` returns text, and option objects are
type-checked on construction.

"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union, cast

from md2delta.ast import Document
from md2delta.exceptions import InvalidOptionsError, OutputWriteError
from md2delta.options.base import BaseRendererOptions

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer-specific options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render the AST to a file path or file-like object.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If output cannot be written

        """

    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: OutputTarget) -> None:
        """Write text output to a file path or IO stream.

        Binary streams receive UTF-8 encoded bytes; text streams receive the
        string unchanged.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If a file path cannot be written
        TypeError
            If output type is not supported

        Examples
        --------
            >>> from io import BytesIO
            >>> buffer = BytesIO()
            >>> BaseRenderer.write_text_output('{"ops": []}', buffer)
            >>> buffer.getvalue()
            b'{"ops": []}'

        """
        if isinstance(output, (str, Path)):
            try:
                Path(output).write_text(text, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(str(output), original_error=e) from e
            return

        if not hasattr(output, "write"):
            raise TypeError(f"Unsupported output type: {type(output)}")

        if isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            cast(IO[bytes], output).write(text.encode("utf-8"))
        else:
            cast(IO[str], output).write(text)
