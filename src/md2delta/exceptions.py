#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2delta library.

This module defines specialized exception classes for the error conditions
that can occur while parsing Markdown and converting it to Delta operations.

Exception Hierarchy
-------------------
- Md2DeltaError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - ParsingError (input document parsing failures)

  - RenderingError (Delta generation failures)
    - InvalidListStartError (ordered list not starting at 1)
    - UnsupportedNodeKindError (node kind with no Delta representation)
    - OutputWriteError (file write failures)

  - DependencyError (missing/incompatible packages)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from md2delta.ast.nodes import SourceLocation


class Md2DeltaError(Exception):
    """Base exception class for all md2delta-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2DeltaError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Md2DeltaError):
    """Exception raised when Markdown parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2DeltaError):
    """Exception raised when Delta generation fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class InvalidListStartError(RenderingError):
    """Exception raised when an ordered list does not start at 1.

    Delta ordered lists are always numbered from 1, so a source list with a
    different start number cannot be represented. The error is raised before
    any operation for the offending list is produced.

    Parameters
    ----------
    start : int
        The declared start number of the list
    message : str, optional
        Custom error message

    Attributes
    ----------
    start : int
        The rejected start number

    """

    def __init__(self, start: int, message: str | None = None):
        """Initialize the invalid list start error."""
        if message is None:
            message = f"Delta ordered lists must start from 1, got a list starting at {start}"
        super().__init__(message, rendering_stage="list")
        self.start = start


class UnsupportedNodeKindError(RenderingError):
    """Exception raised when a node kind has no Delta representation.

    Parameters
    ----------
    node_kind : str
        Name of the offending node kind (e.g. ``"Table"``)
    context : str, default "block"
        Where the node was encountered (``"block"``, ``"inline"``,
        ``"list item"`` or ``"block quote"``)
    block_index : int, optional
        Index of the enclosing top-level block, when known
    source_location : SourceLocation, optional
        Source position of the node, when the parser recorded one

    Attributes
    ----------
    node_kind : str
        The unsupported node kind
    context : str
        Where it was found
    block_index : int or None
        Index of the enclosing top-level block
    source_location : SourceLocation or None
        Source position, if available

    """

    def __init__(
        self,
        node_kind: str,
        context: str = "block",
        block_index: int | None = None,
        source_location: SourceLocation | None = None,
        message: str | None = None,
    ):
        """Initialize the unsupported node kind error."""
        if message is None:
            message = f"Unsupported node kind in {context}: {node_kind}"
            if block_index is not None:
                message += f" (top-level block {block_index})"
            if source_location is not None and source_location.line is not None:
                message += f" at line {source_location.line}"
        super().__init__(message, rendering_stage=context)
        self.node_kind = node_kind
        self.context = context
        self.block_index = block_index
        self.source_location = source_location


class OutputWriteError(RenderingError):
    """Exception raised when writing the output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DependencyError(Md2DeltaError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the converter requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name.upper()} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name.upper()} has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
            if all_packages:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
