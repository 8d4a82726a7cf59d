"""radixint - exact integer arithmetic and radix conversion utilities.

Floored division and modulo built from truncating primitives, positional
digit decomposition in any base, and a parser that extracts a leading
integer literal (optional sign, base 2-36) from a text buffer.

Public API:
    floor_div - Quotient rounded toward negative infinity
    mod - Remainder with the sign of the divisor
    mod_branchless - Arithmetic-only equivalent of mod
    digits - Integer -> list of base-b digits
    undigits - Digit sequence -> integer
    parse_integer - Leading integer literal -> ParsedInteger | None
    ParsedInteger - (value, rest) parse result

Exceptions:
    RadixIntError - Base exception class
    InvalidBaseError - Base outside the accepted range
    InvalidDigitError - Digit not valid for its base
    DivisionByZeroError - Zero divisor
    OperandTypeError - Non-integer arithmetic operand
    InputTypeError - Parser input is not str or bytes

Submodules:
    radixint.arithmetic - Truncating/floored division, guard-safe helpers, parity
    radixint.parsing - Text integer parser, cursor, result type guards
    radixint.diagnostics - Diagnostic codes, templates and formatter
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .arithmetic import floor_div, mod, mod_branchless
from .diagnostics import (
    DivisionByZeroError,
    InputTypeError,
    InvalidBaseError,
    InvalidDigitError,
    OperandTypeError,
    RadixIntError,
)
from .digits import digits, undigits
from .parsing import ParsedInteger, parse_integer

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("radixint")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DivisionByZeroError",
    "InputTypeError",
    "InvalidBaseError",
    "InvalidDigitError",
    "OperandTypeError",
    "ParsedInteger",
    "RadixIntError",
    "__version__",
    "digits",
    "floor_div",
    "mod",
    "mod_branchless",
    "parse_integer",
    "undigits",
]
