"""Shared constants for radixint.

This module provides the radix limits and digit alphabet used across the
arithmetic, digit codec and parsing packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Radix limits: Accepted ranges for the base argument
- Digit alphabet: Characters and values of positional digits

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Radix limits
    "MIN_BASE",
    "MAX_PARSE_BASE",
    "DEFAULT_BASE",
    # Digit alphabet
    "DIGIT_ALPHABET",
    "SIGN_CHARACTERS",
]

# ============================================================================
# RADIX LIMITS
# ============================================================================
#
# The digit codec (digits/undigits) works on integer digit values, so any
# base >= MIN_BASE is meaningful there and there is no upper bound.
#
# The text parser maps characters to values, so its base is bounded by the
# number of symbols in DIGIT_ALPHABET: 10 decimal digits + 26 letters = 36.
#
# ============================================================================

# Smallest positional base. Base 1 has no positional representation.
MIN_BASE: int = 2

# Largest base accepted by parse_integer (0-9 plus A-Z/a-z).
MAX_PARSE_BASE: int = 36

# Base used when the caller does not pass one.
DEFAULT_BASE: int = 10

# ============================================================================
# DIGIT ALPHABET
# ============================================================================

# Digit symbols in value order. Letters are matched case-insensitively.
DIGIT_ALPHABET: str = "0123456789abcdefghijklmnopqrstuvwxyz"

# Optional leading sign characters for parse_integer.
SIGN_CHARACTERS: str = "+-"
