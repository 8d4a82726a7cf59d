"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Radix errors (base out of range or wrong type)
        2000-2999: Digit errors (digit sequences passed to undigits)
        3000-3999: Arithmetic errors (division, modulo)
        4000-4999: Parsing errors (text integer parser)
    """

    # Radix errors (1000-1999)
    INVALID_BASE = 1001
    BASE_NOT_INTEGER = 1002

    # Digit errors (2000-2999)
    INVALID_DIGIT = 2001
    DIGIT_NOT_INTEGER = 2002
    DIGITS_NOT_ITERABLE = 2003

    # Arithmetic errors (3000-3999)
    DIVISION_BY_ZERO = 3001
    OPERAND_NOT_INTEGER = 3002

    # Parsing errors (4000-4999)
    INPUT_NOT_TEXT = 4001
    UNEXPECTED_EOF = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        function_name: Public function where the error was detected
        argument_name: Argument name that caused the error
        expected_type: Expected type or range for the argument
        received_type: Actual type or value received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    function_name: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[INVALID_BASE]: invalid base 38
              = function: parse_integer
              = argument: base
              = expected: integer in 2..36
              = received: 38
              = help: Pass a base between 2 and 36

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
