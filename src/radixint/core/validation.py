"""Unified operand and radix validation.

This module provides the single source of truth for the argument checks
shared by the arithmetic, digit codec and parsing subsystems, so that every
public operation rejects the same inputs with the same diagnostics.

Validation Rules:
    - Integers: instances of int, excluding bool
    - Bases: integers >= MIN_BASE, optionally bounded above
    - Divisors: non-zero integers

Validation happens before any computation. Values are never coerced or
clamped into range.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

from radixint.constants import MIN_BASE
from radixint.diagnostics import (
    DivisionByZeroError,
    ErrorTemplate,
    InvalidBaseError,
    OperandTypeError,
)

__all__ = [
    "is_integer",
    "require_base",
    "require_divisor",
    "require_integer",
]


def is_integer(value: object) -> bool:
    """Check if value is an integer operand.

    bool is a subclass of int in Python but is not accepted as an integer
    operand.

    Example:
        >>> is_integer(5)
        True
        >>> is_integer(True)
        False
        >>> is_integer(5.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def require_integer(value: object, argument_name: str, function_name: str) -> int:
    """Return value unchanged if it is an integer operand.

    Args:
        value: Operand to check
        argument_name: Argument name reported in the diagnostic
        function_name: Public function reported in the diagnostic

    Returns:
        The value, typed as int

    Raises:
        OperandTypeError: If value is not an int (or is a bool)
    """
    if not is_integer(value):
        diagnostic = ErrorTemplate.operand_not_integer(value, argument_name, function_name)
        raise OperandTypeError(diagnostic, operand=value)
    return value  # type: ignore[return-value]


def require_base(base: object, function_name: str, maximum: int | None = None) -> int:
    """Return base unchanged if it lies in [MIN_BASE, maximum].

    Args:
        base: Base to check
        function_name: Public function reported in the diagnostic
        maximum: Largest accepted base, or None for no upper bound

    Returns:
        The base, typed as int

    Raises:
        InvalidBaseError: If base is not an int or is out of range

    Example:
        >>> require_base(16, "digits")
        16
        >>> require_base(38, "parse_integer", 36)
        Traceback (most recent call last):
        ...
        radixint.diagnostics.errors.InvalidBaseError: invalid base 38
    """
    if not is_integer(base):
        raise InvalidBaseError(
            ErrorTemplate.base_not_integer(base, function_name),
            base=base,
            minimum=MIN_BASE,
            maximum=maximum,
        )
    if base < MIN_BASE or (maximum is not None and base > maximum):  # type: ignore[operator]
        diagnostic = ErrorTemplate.invalid_base(base, function_name, MIN_BASE, maximum)  # type: ignore[arg-type]
        raise InvalidBaseError(diagnostic, base=base, minimum=MIN_BASE, maximum=maximum)
    return base  # type: ignore[return-value]


def require_divisor(dividend: object, divisor: object, function_name: str) -> tuple[int, int]:
    """Validate both operands of a division and reject a zero divisor.

    Args:
        dividend: Left operand
        divisor: Right operand
        function_name: Public function reported in the diagnostic

    Returns:
        Tuple of (dividend, divisor), typed as ints

    Raises:
        OperandTypeError: If either operand is not an int
        DivisionByZeroError: If divisor is 0
    """
    a = require_integer(dividend, "dividend", function_name)
    n = require_integer(divisor, "divisor", function_name)
    if n == 0:
        raise DivisionByZeroError(ErrorTemplate.division_by_zero(a, function_name), dividend=a)
    return a, n
