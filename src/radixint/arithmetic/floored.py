"""Floored division and modulo built on truncating primitives.

Floored division rounds the quotient toward negative infinity, so the
remainder always takes the sign of the divisor. Truncating division rounds
toward zero and its remainder takes the sign of the dividend. The two agree
whenever the truncating remainder is zero or has the divisor's sign.

Two modulo implementations are provided and must agree for every valid
input:

    mod             - branchy, direct: fix up the truncating remainder
    mod_branchless  - a - n * floor_div(a, n), arithmetic only

floor_div itself is branch-free: it corrects the truncating quotient by
``div(sign(rem(a, n) * n) - 1, 2)``, which is -1 when the remainder and the
divisor have opposite signs and 0 otherwise.

See https://en.wikipedia.org/wiki/Modulo_operation

Thread-safe. Pure functions over immutable ints.

Python 3.13+. Zero external dependencies.
"""

from radixint.core import require_divisor

from .primitives import _int_sign, _trunc_div, _trunc_rem

__all__ = ["floor_div", "mod", "mod_branchless"]


def _floor_div(a: int, n: int) -> int:
    return _trunc_div(a, n) + _trunc_div(_int_sign(_trunc_rem(a, n) * n) - 1, 2)


def floor_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward negative infinity.

    Uses only addition, multiplication, truncating div/rem, abs and the
    branch-free max, never a conditional on the operands.

    Args:
        dividend: Left operand
        divisor: Right operand, non-zero

    Returns:
        floor(dividend / divisor), computed exactly

    Raises:
        DivisionByZeroError: If divisor is 0
        OperandTypeError: If either operand is not an int

    Examples:
        >>> floor_div(7, 2)
        3
        >>> floor_div(-7, 2)
        -4
        >>> floor_div(7, -2)
        -4
        >>> floor_div(-8, 2)
        -4
    """
    a, n = require_divisor(dividend, divisor, "floor_div")
    return _floor_div(a, n)


def mod(dividend: int, divisor: int) -> int:
    """Compute the modulo remainder of a floored integer division.

    The result always has the sign of the divisor (or is zero). When only
    non-negative operands are expected, trunc_rem gives the same result.

    Args:
        dividend: Left operand
        divisor: Right operand, non-zero

    Returns:
        Remainder with the sign of divisor

    Raises:
        DivisionByZeroError: If divisor is 0
        OperandTypeError: If either operand is not an int

    Examples:
        >>> mod(5, 2)
        1
        >>> mod(6, -4)
        -2
        >>> mod(-7, 3)
        2
        >>> mod(7, -3)
        -2
    """
    a, n = require_divisor(dividend, divisor, "mod")
    remainder = _trunc_rem(a, n)
    if remainder * n < 0:
        return remainder + n
    return remainder


def mod_branchless(dividend: int, divisor: int) -> int:
    """Floored modulo as a single arithmetic expression.

    Same results as mod(), computed as ``a - n * floor_div(a, n)``.

    Examples:
        >>> mod_branchless(-7, 3)
        2
        >>> mod_branchless(6, -4)
        -2
    """
    a, n = require_divisor(dividend, divisor, "mod_branchless")
    return a - n * _floor_div(a, n)
