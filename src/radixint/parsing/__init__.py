"""Text parsing: extract a leading integer literal from a text buffer.

- parse_integer() NEVER raises for unparseable text - it returns None
- Only an invalid base or a non-text input raises

Public API:
    Parsing Functions:
        parse_integer - Returns ParsedInteger(value, rest) | None

    Result Types:
        ParsedInteger - NamedTuple of the integer and the unconsumed remainder

    Type Guards:
        is_match - TypeIs guard for ParsedInteger (not None)
        is_no_match - True for the no-match result

    Infrastructure:
        Cursor - Immutable scanning cursor

Example:
    >>> from radixint.parsing import parse_integer, is_match
    >>> result = parse_integer("ff:rest", 16)
    >>> if is_match(result):
    ...     value, rest = result  # (255, ':rest')

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor
from .guards import is_match, is_no_match
from .integers import ParsedInteger, parse_integer

__all__ = [
    # Infrastructure
    "Cursor",
    # Result types
    "ParsedInteger",
    # Type guards
    "is_match",
    "is_no_match",
    # Parsing functions
    "parse_integer",
]
