"""Hypothesis property-based tests for the digit codec.

Tests the round-trip law, digit ranges, and agreement with Python's own
decimal formatting.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from radixint import digits, undigits
from tests.strategies import any_bases, huge_integers, integers, parse_bases


class TestRoundTrip:
    """undigits is the left inverse of digits."""

    @given(x=integers(), base=any_bases())
    def test_undigits_inverts_digits(self, x: int, base: int) -> None:
        """INVARIANT: undigits(digits(x, b), b) == x."""
        assert undigits(digits(x, base), base) == x

    @given(
        sequence=st.lists(st.integers(min_value=0, max_value=15), max_size=30),
    )
    def test_leading_zeros_absorbed(self, sequence: list[int]) -> None:
        """PROPERTY: prefixing zeros never changes the value."""
        assert undigits([0, 0, *sequence], 16) == undigits(sequence, 16)


class TestDigitShape:
    """Shape and range of digits() output."""

    @given(x=integers(), base=any_bases())
    def test_digits_in_range_and_signed_like_input(self, x: int, base: int) -> None:
        """INVARIANT: every digit lies in [0, b-1] (x >= 0) or [-(b-1), 0] (x < 0)."""
        result = digits(x, base)
        assert result
        if x >= 0:
            assert all(0 <= d < base for d in result)
        else:
            assert all(-base < d <= 0 for d in result)
        event(f"digit_count={'one' if len(result) == 1 else 'many'}")

    @given(x=integers(), base=any_bases())
    def test_no_leading_zero(self, x: int, base: int) -> None:
        """PROPERTY: the first digit is zero only for x == 0."""
        assert (digits(x, base)[0] == 0) == (x == 0)

    @given(x=integers())
    def test_decimal_matches_str(self, x: int) -> None:
        """PROPERTY: base-10 digits match the decimal string of abs(x)."""
        sign = -1 if x < 0 else 1
        assert digits(x) == [sign * int(ch) for ch in str(abs(x))]

    @given(x=st.integers(min_value=0, max_value=2**128), base=parse_bases())
    def test_matches_int_parsing(self, x: int, base: int) -> None:
        """PROPERTY: digits rendered with 0-9a-z parse back with int(s, base)."""
        text = "".join("0123456789abcdefghijklmnopqrstuvwxyz"[d] for d in digits(x, base))
        assert int(text, base) == x


@pytest.mark.fuzz
class TestDigitsFuzz:
    """Intensive round trips over 400-digit integers."""

    @given(x=huge_integers, base=st.integers(min_value=2, max_value=10**6))
    @settings(max_examples=1000)
    def test_round_trip_huge(self, x: int, base: int) -> None:
        """INVARIANT: round trip holds for very large integers."""
        assert undigits(digits(x, base), base) == x
