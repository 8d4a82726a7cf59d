"""Truncating and guard-safe integer primitives.

Python's ``//`` and ``%`` operators are floored. Floored division in this
package is derived from truncating division instead (quotient rounds toward
zero, remainder takes the sign of the dividend), so truncating ``div``/``rem``
are provided here as the base primitives.

Guard-safe helpers:
    int_max and int_sign use only addition, subtraction, abs and truncating
    division. They contain no conditionals, so they can be composed into a
    single arithmetic expression (see floor_div).

Thread-safe. Pure functions over immutable ints.

Python 3.13+. Zero external dependencies.
"""

from radixint.core import require_divisor, require_integer

__all__ = [
    "int_max",
    "int_sign",
    "is_even",
    "is_odd",
    "trunc_div",
    "trunc_divmod",
    "trunc_rem",
]


# =============================================================================
# UNCHECKED KERNELS
# =============================================================================
# Operands are already validated ints and the divisor is non-zero.


def _trunc_div(a: int, n: int) -> int:
    quotient = abs(a) // abs(n)
    # a ^ n is non-negative exactly when a and n have the same sign
    return quotient if (a ^ n) >= 0 else -quotient


def _trunc_rem(a: int, n: int) -> int:
    return a - n * _trunc_div(a, n)


def _int_max(a: int, b: int) -> int:
    return _trunc_div((a + b) + abs(a - b), 2)


def _int_sign(x: int) -> int:
    # max(abs(x), 1) avoids the division by zero of div(x, abs(x)) at x == 0
    return _trunc_div(x, _int_max(abs(x), 1))


# =============================================================================
# PUBLIC API
# =============================================================================


def trunc_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero.

    Args:
        dividend: Left operand
        divisor: Right operand, non-zero

    Returns:
        Quotient truncated toward zero

    Raises:
        DivisionByZeroError: If divisor is 0
        OperandTypeError: If either operand is not an int

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> -7 // 2
        -4
    """
    a, n = require_divisor(dividend, divisor, "trunc_div")
    return _trunc_div(a, n)


def trunc_rem(dividend: int, divisor: int) -> int:
    """Remainder of truncating division; its sign follows the dividend.

    Examples:
        >>> trunc_rem(-7, 3)
        -1
        >>> trunc_rem(7, -3)
        1
    """
    a, n = require_divisor(dividend, divisor, "trunc_rem")
    return _trunc_rem(a, n)


def trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Return (trunc_div(a, n), trunc_rem(a, n)) in one step.

    Satisfies ``a == n * q + r`` with ``abs(r) < abs(n)``.

    Examples:
        >>> trunc_divmod(-170, 2)
        (-85, 0)
        >>> trunc_divmod(-7, 2)
        (-3, -1)
    """
    a, n = require_divisor(dividend, divisor, "trunc_divmod")
    quotient = _trunc_div(a, n)
    return quotient, a - n * quotient


def int_max(a: int, b: int) -> int:
    """Branch-free maximum of two integers.

    Computes ``div((a + b) + abs(a - b), 2)``.

    Examples:
        >>> int_max(3, -8)
        3
        >>> int_max(-2, -2)
        -2
    """
    return _int_max(require_integer(a, "a", "int_max"), require_integer(b, "b", "int_max"))


def int_sign(x: int) -> int:
    """Branch-free sign of an integer: -1, 0 or 1.

    Computes ``div(x, max(abs(x), 1))``.

    Examples:
        >>> int_sign(-42)
        -1
        >>> int_sign(0)
        0
    """
    return _int_sign(require_integer(x, "x", "int_sign"))


def is_odd(integer: int) -> bool:
    """Determine if integer is odd.

    Examples:
        >>> is_odd(5)
        True
        >>> is_odd(-5)
        True
        >>> is_odd(0)
        False
    """
    return (require_integer(integer, "integer", "is_odd") & 1) == 1


def is_even(integer: int) -> bool:
    """Determine if integer is even.

    Examples:
        >>> is_even(10)
        True
        >>> is_even(-10)
        True
        >>> is_even(5)
        False
    """
    return (require_integer(integer, "integer", "is_even") & 1) == 0
