#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdedit library.

This module defines specialized exception classes for the error conditions
that can occur while editing a formatting tree or serializing it to Markdown.
These exceptions provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- MdEditError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidArgumentError (bad heading level, unknown tag name)

  - PreconditionError (no active selection or cursor)
    - SelectionError (range cannot be resolved in the tree)

  - RenderingError (output generation failures)
    - UnsupportedTagError (node kind without a Markdown rule)

  - ParsingError (host content could not be turned into a tree)

"""

from typing import Any


class MdEditError(Exception):
    """Base exception class for all mdedit-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(MdEditError):
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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class InvalidArgumentError(ValidationError):
    """Exception raised when an edit operation receives an unusable argument.

    Raised for heading levels outside 1-6 and for tag names that are empty,
    unknown, or cannot be toggled.
    """


class PreconditionError(MdEditError):
    """Exception raised when an operation runs without the context it needs.

    The typical case is an edit invoked while the host reports no active
    selection or cursor.
    """


class SelectionError(PreconditionError):
    """Exception raised when a selection range cannot be resolved.

    Parameters
    ----------
    message : str
        Description of the problem
    boundary : Any, optional
        The boundary point that could not be resolved
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, boundary: Any = None, original_error: Exception | None = None):
        """Initialize the selection error."""
        super().__init__(message, original_error)
        self.boundary = boundary


class RenderingError(MdEditError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnsupportedTagError(RenderingError):
    """Exception raised when a node has no Markdown rule.

    A single unsupported node aborts the whole serialization.

    Parameters
    ----------
    tag_name : str
        Canonical tag name of the offending node (e.g. ``"h6"``)
    text_content : str
        Text content of the offending node, for diagnostics
    message : str, optional
        Custom message; generated from the tag and text when omitted

    Attributes
    ----------
    tag_name : str
        Canonical tag name
    text_content : str
        Text content of the node

    """

    def __init__(self, tag_name: str, text_content: str = "", message: str | None = None):
        """Initialize the error with the offending tag and its text."""
        if message is None:
            message = f"Unknown tag '{tag_name}' with content '{text_content}'"
        super().__init__(message, rendering_stage="markdown")
        self.tag_name = tag_name
        self.text_content = text_content


class ParsingError(MdEditError):
    """Exception raised when host content cannot be parsed into a tree.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage
