"""Exact integer arithmetic: truncating and floored division, modulo, parity.

Public API:
    Truncating (rounds toward zero):
        trunc_div, trunc_rem, trunc_divmod

    Floored (rounds toward negative infinity):
        floor_div - branch-free floored quotient
        mod - floored remainder, direct implementation
        mod_branchless - floored remainder, arithmetic-only implementation

    Guard-safe helpers:
        int_max, int_sign

    Parity:
        is_odd, is_even

Example:
    >>> from radixint.arithmetic import floor_div, mod
    >>> floor_div(-7, 3), mod(-7, 3)
    (-3, 2)

Python 3.13+. Zero external dependencies.
"""

from .floored import floor_div, mod, mod_branchless
from .primitives import (
    int_max,
    int_sign,
    is_even,
    is_odd,
    trunc_div,
    trunc_divmod,
    trunc_rem,
)

__all__ = [
    # Floored
    "floor_div",
    "mod",
    "mod_branchless",
    # Guard-safe helpers
    "int_max",
    "int_sign",
    # Parity
    "is_even",
    "is_odd",
    # Truncating
    "trunc_div",
    "trunc_divmod",
    "trunc_rem",
]
