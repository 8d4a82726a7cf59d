"""Type guard functions for parse result type narrowing.

parse_integer() returns ParsedInteger | None. The guards narrow that union
for mypy without an explicit ``is None`` check at every call site.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from radixint.parsing import parse_integer
    >>> from radixint.parsing.guards import is_match
    >>> result = parse_integer("42 apples")
    >>> if is_match(result):
    ...     # mypy knows result is ParsedInteger
    ...     count, rest = result
"""

from typing import TypeIs

from .integers import ParsedInteger

__all__ = ["is_match", "is_no_match"]


def is_match(result: ParsedInteger | None) -> TypeIs[ParsedInteger]:
    """Type guard: Check if parse_integer() found a literal.

    Args:
        result: Return value of parse_integer()

    Returns:
        True if result is a ParsedInteger, False for no match
    """
    return isinstance(result, ParsedInteger)


def is_no_match(result: ParsedInteger | None) -> bool:
    """Check if parse_integer() found no literal.

    Safe to call on any parse_integer() result.
    """
    return result is None
