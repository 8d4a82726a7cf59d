"""Positional digit codec: integer <-> ordered digit sequence in any base.

- digits() splits an integer into its base-b digits, most significant first
- undigits() folds a digit sequence back into an integer
- undigits(digits(x, b), b) == x for every int x and base b >= 2

Sign Convention:
    A negative integer yields digits that all carry the negative sign,
    e.g. digits(-170, 2) == [-1, 0, -1, 0, -1, 0, -1, 0], instead of a
    separate sign marker. undigits() accepts such sequences unchanged.

Bases:
    Any int >= 2; there is no upper bound because digits are plain ints,
    not characters.

Both functions are iterative, so call depth does not grow with the number
of digits.

Thread-safe. Pure functions over immutable ints.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from radixint.arithmetic.primitives import _trunc_div
from radixint.constants import DEFAULT_BASE
from radixint.core import is_integer, require_base, require_integer
from radixint.diagnostics import ErrorTemplate, InvalidDigitError, OperandTypeError

__all__ = ["digits", "undigits"]

logger = logging.getLogger(__name__)


def digits(integer: int, base: int = DEFAULT_BASE) -> list[int]:
    """Return the ordered digits for the given integer.

    Args:
        integer: Integer to split (any sign, any magnitude)
        base: Radix of the returned digits, >= 2 (default: 10)

    Returns:
        Non-empty list of digits, most significant first. Each digit lies in
        [0, base - 1] for a non-negative integer and in [-(base - 1), 0] for
        a negative one.

    Raises:
        InvalidBaseError: If base is not an int >= 2
        OperandTypeError: If integer is not an int

    Examples:
        >>> digits(123)
        [1, 2, 3]
        >>> digits(170, 2)
        [1, 0, 1, 0, 1, 0, 1, 0]
        >>> digits(-170, 2)
        [-1, 0, -1, 0, -1, 0, -1, 0]
        >>> digits(0)
        [0]
        >>> digits(-16, 16)
        [-1, 0]
    """
    value = require_integer(integer, "integer", "digits")
    radix = require_base(base, "digits")

    if abs(value) < radix:
        return [value]
    if value == -radix:
        return [-1, 0]
    if value == radix:
        return [1, 0]

    # Truncating division keeps every remainder on the integer's side of zero
    result: list[int] = []
    while value != 0:
        quotient = _trunc_div(value, radix)
        result.append(value - radix * quotient)
        value = quotient
    result.reverse()
    return result


def undigits(digits: Iterable[int], base: int = DEFAULT_BASE) -> int:
    """Return the integer represented by the ordered digits.

    Leading zero digits are skipped. The remaining digits are folded left to
    right as ``acc * base + digit``, so ``[1, 0]`` yields ``base`` and an
    empty sequence yields 0.

    Args:
        digits: Digit values, most significant first
        base: Radix of the digits, >= 2 (default: 10)

    Returns:
        The represented integer

    Raises:
        InvalidBaseError: If base is not an int >= 2
        InvalidDigitError: If any digit is >= base
        OperandTypeError: If any digit is not an int, or digits is not iterable

    Examples:
        >>> undigits([1, 2, 3])
        123
        >>> undigits([1, 4], 16)
        20
        >>> undigits([])
        0
        >>> undigits([10], 10)
        Traceback (most recent call last):
        ...
        radixint.diagnostics.errors.InvalidDigitError: invalid digit 10 in base 10
    """
    radix = require_base(base, "undigits")
    if not isinstance(digits, Iterable):
        raise OperandTypeError(ErrorTemplate.digits_not_iterable(digits), operand=digits)
    sequence = tuple(digits)

    start = 0
    while start < len(sequence) and is_integer(sequence[start]) and sequence[start] == 0:
        start += 1
    if start:
        logger.debug("undigits: skipped %d leading zero digit(s) in base %d", start, radix)

    accumulator = 0
    for digit in sequence[start:]:
        if not is_integer(digit):
            raise OperandTypeError(ErrorTemplate.digit_not_integer(digit), operand=digit)
        if digit >= radix:
            raise InvalidDigitError(
                ErrorTemplate.invalid_digit(digit, radix), digit=digit, base=radix
            )
        accumulator = accumulator * radix + digit
    return accumulator
