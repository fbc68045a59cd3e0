#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/exceptions.py
"""Custom exceptions for the markhtml library.

This module defines the exception classes raised while loading a document
tree and rendering it to HTML. They carry more specific information than the
generic built-ins and share a common base so callers can catch everything the
library raises in one place.

Exception Hierarchy
-------------------
- MarkHtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - ParsingError (serialized tree cannot be loaded)

  - RenderingError (output generation failures)
    - UnknownNodeError (node kind outside the supported set)
    - OutputWriteError (destination write failures)

Unsafe links and heading-ID collisions are rendering policies, not errors,
and never raise.

"""

from typing import Any


class MarkHtmlError(Exception):
    """Base exception class for all markhtml-specific errors.

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


class ValidationError(MarkHtmlError):
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
    """Exception raised when a renderer receives the wrong options class.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(MarkHtmlError):
    """Exception raised when a serialized document tree cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the problem
    node_type : str, optional
        The offending ``node_type`` value, when the failure is tied to one
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, node_type: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error=original_error)
        self.node_type = node_type


class RenderingError(MarkHtmlError):
    """Exception raised when HTML output cannot be produced.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    original_error : Exception, optional
        The original exception that caused this error

    """


class UnknownNodeError(RenderingError):
    """Exception raised when the dispatcher meets a node it cannot render.

    The tree is produced by a trusted parser, so an unknown node kind is a
    contract violation and aborts the whole render.

    Parameters
    ----------
    node : Any
        The object that reached the dispatcher

    """

    def __init__(self, node: Any, message: str | None = None):
        """Initialize the error from the offending node."""
        if message is None:
            message = f"Unknown node type {type(node).__name__}"
        super().__init__(message)
        self.node = node


class OutputWriteError(RenderingError):
    """Exception raised when rendered output cannot be written.

    Parameters
    ----------
    message : str
        Description of the write failure
    output_path : str, optional
        Destination path, when writing to a file

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        super().__init__(message, original_error=original_error)
        self.output_path = output_path


__all__ = [
    "MarkHtmlError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "UnknownNodeError",
    "OutputWriteError",
]
