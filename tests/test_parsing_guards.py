"""Tests for parse result type guards."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from radixint.parsing import ParsedInteger, is_match, is_no_match, parse_integer


class TestGuards:
    """is_match() and is_no_match()."""

    def test_match(self) -> None:
        """A ParsedInteger is a match."""
        result = parse_integer("5")
        assert is_match(result) is True
        assert is_no_match(result) is False

    def test_no_match(self) -> None:
        """None is the no-match result."""
        result = parse_integer("x")
        assert is_match(result) is False
        assert is_no_match(result) is True

    def test_plain_tuple_is_not_a_match(self) -> None:
        """Only ParsedInteger narrows, not any equal tuple."""
        assert is_match((5, "")) is False  # type: ignore[arg-type]
        assert ParsedInteger(5, "") == (5, "")

    @given(text=st.text(max_size=20))
    def test_guards_are_complementary(self, text: str) -> None:
        """PROPERTY: exactly one guard holds for every result."""
        result = parse_integer(text)
        assert is_match(result) != is_no_match(result)
