"""Diagnostic system for radixint errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DivisionByZeroError,
    InputTypeError,
    InvalidBaseError,
    InvalidDigitError,
    OperandTypeError,
    RadixIntError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DivisionByZeroError",
    "ErrorTemplate",
    "InputTypeError",
    "InvalidBaseError",
    "InvalidDigitError",
    "OperandTypeError",
    "OutputFormat",
    "RadixIntError",
]
