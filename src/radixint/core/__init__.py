"""Core utilities shared across arithmetic, digit codec and parsing layers.

This package provides the argument validation that every public operation
depends on. By isolating it here, we maintain a clean dependency graph:

    diagnostics <- core <- arithmetic, digits, parsing

Exports:
    is_integer: Integer operand check (rejects bool)
    require_integer: Validate an integer operand
    require_base: Validate a radix against an accepted range
    require_divisor: Validate division operands and reject zero divisors

Python 3.13+.
"""

from .validation import is_integer, require_base, require_divisor, require_integer

__all__ = ["is_integer", "require_base", "require_divisor", "require_integer"]
