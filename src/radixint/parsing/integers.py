"""Leading integer literal parser for text in bases 2 to 36.

- parse_integer() returns ParsedInteger(value, rest) or None (no match)
- No match is an ordinary result, never an exception
- Only an invalid base or a non-text input raises

Grammar:
    literal = [ "+" | "-" ] digit { digit }
    digit   = any character whose value (0-9 -> 0..9, A-Z/a-z -> 10..35)
              is less than the base

The scan is greedy and single-pass: it consumes the longest run of valid
digits and stops at the first character that is not one, which becomes the
start of the returned remainder. A sign with no digit after it is not a
match.

Thread-safe. Pure function over immutable input.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from radixint.constants import DEFAULT_BASE, DIGIT_ALPHABET, MAX_PARSE_BASE, SIGN_CHARACTERS
from radixint.core import require_base
from radixint.diagnostics import ErrorTemplate, InputTypeError

from .cursor import Cursor

__all__ = ["ParsedInteger", "parse_integer"]

logger = logging.getLogger(__name__)

# Character -> digit value for 0-9, a-z and A-Z. ASCII only.
_DIGIT_VALUES: dict[str, int] = {
    **{ch: value for value, ch in enumerate(DIGIT_ALPHABET)},
    **{ch.upper(): value for value, ch in enumerate(DIGIT_ALPHABET)},
}


class ParsedInteger(NamedTuple):
    """Successful parse: the integer and the unconsumed remainder.

    Compares equal to a plain ``(value, rest)`` tuple.

    Attributes:
        value: Parsed integer, negated when the literal had a leading "-"
        rest: Input remaining after the literal (same type as the input)
    """

    value: int
    rest: str | bytes


def _digit_value(ch: str, base: int) -> int | None:
    """Value of ch as a digit in base, or None if it is not a valid digit."""
    value = _DIGIT_VALUES.get(ch)
    if value is None or value >= base:
        return None
    return value


def parse_integer(text: str | bytes, base: int = DEFAULT_BASE) -> ParsedInteger | None:
    """Parse a leading integer literal from text.

    Args:
        text: Input buffer (str, or bytes scanned as single-byte characters)
        base: Radix of the literal, 2 to 36 (default: 10)

    Returns:
        ParsedInteger(value, rest) on success, or None when the input does
        not start with an integer literal

    Raises:
        InvalidBaseError: If base is not an int in 2..36
        InputTypeError: If text is neither str nor bytes

    Examples:
        >>> parse_integer("34")
        ParsedInteger(value=34, rest='')
        >>> parse_integer("34.5")
        ParsedInteger(value=34, rest='.5')
        >>> parse_integer("three") is None
        True
        >>> parse_integer("f4", 16)
        ParsedInteger(value=244, rest='')
        >>> parse_integer("Awww++", 36)
        ParsedInteger(value=509216, rest='++')
        >>> parse_integer("-12abc")
        ParsedInteger(value=-12, rest='abc')
        >>> parse_integer(b"77 ", 8)
        ParsedInteger(value=63, rest=b' ')
    """
    radix = require_base(base, "parse_integer", MAX_PARSE_BASE)

    if isinstance(text, bytes):
        source = text.decode("latin-1")
    elif isinstance(text, str):
        source = text
    else:
        raise InputTypeError(ErrorTemplate.input_not_text(text))

    if not source:
        logger.debug("parse_integer: empty input (base %d)", radix)
        return None

    cursor = Cursor(source)
    negative = False
    if cursor.current in SIGN_CHARACTERS:
        negative = cursor.current == "-"
        cursor = cursor.advance()

    digits_start = cursor.pos
    value = 0
    while not cursor.is_eof:
        digit = _digit_value(cursor.current, radix)
        if digit is None:
            break
        value = value * radix + digit
        cursor = cursor.advance()

    if cursor.pos == digits_start:
        logger.debug("parse_integer: no base-%d digit at position %d", radix, digits_start)
        return None

    rest = cursor.rest()
    return ParsedInteger(
        -value if negative else value,
        rest.encode("latin-1") if isinstance(text, bytes) else rest,
    )
