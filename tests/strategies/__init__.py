"""Hypothesis strategies for radixint property-based testing.

Usage:
    from tests.strategies import divisions, integers, parse_bases
    from tests.strategies.integers import literals
"""

from .integers import (
    any_bases,
    divisions,
    huge_integers,
    integers,
    literals,
    nonzero_integers,
    parse_bases,
)

__all__ = [
    "any_bases",
    "divisions",
    "huge_integers",
    "integers",
    "literals",
    "nonzero_integers",
    "parse_bases",
]
