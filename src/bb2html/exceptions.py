#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the bb2html library.

The markup engine itself never raises: malformed BBCode degrades to literal
text. The exceptions below are raised only at the library boundary, for
invalid configuration or unreadable input.

Exception Hierarchy
-------------------
- Bb2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for the parser)

  - InputError (input cannot be read)

"""

from typing import Any


class Bb2HtmlError(Exception):
    """Base exception class for all bb2html-specific errors.

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


class ValidationError(Bb2HtmlError):
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
    """Exception raised when an options object of the wrong class is given.

    Parameters
    ----------
    converter_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class
    received_type : type
        The options class that was received
    message : str, optional
        Custom error message. If not provided, a helpful one is generated

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize with the expected and received option types."""
        if message is None:
            message = (
                f"Invalid options type for '{converter_name}': "
                f"expected {expected_type.__name__}, got {received_type.__name__}"
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type, original_error=original_error)
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class InputError(Bb2HtmlError):
    """Exception raised when input text cannot be read.

    Parameters
    ----------
    message : str
        Description of the problem
    input_path : str, optional
        Path of the input that failed
    original_error : Exception, optional
        The underlying I/O or decoding error

    """

    def __init__(self, message: str, input_path: str | None = None, original_error: Exception | None = None):
        """Initialize the input error with the failing path."""
        super().__init__(message, original_error=original_error)
        self.input_path = input_path
