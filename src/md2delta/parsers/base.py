#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/parsers/base.py
"""Base class for document parsers.

A parser turns source input (a string, bytes, a path or a stream) into the
md2delta AST rooted at a Document node.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2delta.ast import Document
from md2delta.exceptions import InvalidOptionsError, ParsingError, ValidationError
from md2delta.options.base import BaseParserOptions

InputSource = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    ``parse()`` accepts:
    - str: document content
    - Path: file to read
    - bytes: UTF-8 encoded content
    - IO[bytes] or IO[str]: file-like object

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: InputSource) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            The input document to parse

        Returns
        -------
        Document
            AST Document node

        Raises
        ------
        ParsingError
            If the input cannot be decoded or parsed
        DependencyError
            If required dependencies are not installed
        ValidationError
            If the input type is not supported

        """
        raise NotImplementedError

    @staticmethod
    def _decode(data: bytes) -> str:
        """Decode UTF-8 input, tolerating a byte order mark."""
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParsingError("Input is not valid UTF-8", parsing_stage="decoding", original_error=e) from e

    @staticmethod
    def _load_text_content(input_data: InputSource) -> str:
        """Load text from the supported input types.

        A ``str`` is always treated as document content, never as a path;
        pass a ``Path`` to read a file.

        Raises
        ------
        ParsingError
            If bytes are not valid UTF-8
        ValidationError
            If the input type is not supported or the file cannot be read

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return BaseParser._decode(input_data)
        if isinstance(input_data, Path):
            try:
                data = input_data.read_bytes()
            except OSError as e:
                raise ValidationError(
                    f"Cannot read input file: {input_data}",
                    parameter_name="input_data",
                    parameter_value=input_data,
                    original_error=e,
                ) from e
            return BaseParser._decode(data)
        if hasattr(input_data, "read"):
            content = input_data.read()
            if isinstance(content, bytes):
                return BaseParser._decode(content)
            return content

        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )
