"""Hypothesis property-based tests for floored and truncating arithmetic.

Tests the division identity, remainder sign, and agreement between the
branchy and branch-free modulo implementations.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from radixint.arithmetic import (
    floor_div,
    int_max,
    int_sign,
    mod,
    mod_branchless,
    trunc_div,
    trunc_divmod,
    trunc_rem,
)
from tests.strategies import divisions, huge_integers, integers

# ============================================================================
# PROPERTY TESTS - FLOORED DIVISION
# ============================================================================


class TestFlooredDivisionProperties:
    """Division identity and rounding properties."""

    @given(pair=divisions())
    def test_division_identity(self, pair: tuple[int, int]) -> None:
        """INVARIANT: a == n * floor_div(a, n) + mod(a, n)."""
        a, n = pair
        assert a == n * floor_div(a, n) + mod(a, n)

    @given(pair=divisions())
    def test_remainder_sign_matches_divisor(self, pair: tuple[int, int]) -> None:
        """INVARIANT: mod(a, n) is zero or has the sign of n."""
        a, n = pair
        r = mod(a, n)
        assert r == 0 or int_sign(r) == int_sign(n)
        assert abs(r) < abs(n)
        event(f"remainder={'zero' if r == 0 else 'nonzero'}")

    @given(pair=divisions())
    def test_floor_div_matches_python_floor_division(self, pair: tuple[int, int]) -> None:
        """PROPERTY: floor_div agrees with Python's // on all ints."""
        a, n = pair
        assert floor_div(a, n) == a // n

    @given(pair=divisions())
    def test_mod_implementations_agree(self, pair: tuple[int, int]) -> None:
        """INVARIANT: branchy and branch-free modulo agree on every input."""
        a, n = pair
        assert mod(a, n) == mod_branchless(a, n) == a % n


# ============================================================================
# PROPERTY TESTS - TRUNCATING DIVISION
# ============================================================================


class TestTruncatingDivisionProperties:
    """Truncating primitives."""

    @given(pair=divisions())
    def test_truncating_identity(self, pair: tuple[int, int]) -> None:
        """INVARIANT: a == n * trunc_div(a, n) + trunc_rem(a, n)."""
        a, n = pair
        q, r = trunc_divmod(a, n)
        assert (q, r) == (trunc_div(a, n), trunc_rem(a, n))
        assert a == n * q + r
        assert abs(r) < abs(n)
        assert r == 0 or int_sign(r) == int_sign(a)

    @given(pair=divisions())
    def test_quotient_magnitude_is_floor_of_magnitudes(self, pair: tuple[int, int]) -> None:
        """PROPERTY: abs(trunc_div(a, n)) == abs(a) // abs(n)."""
        a, n = pair
        assert abs(trunc_div(a, n)) == abs(a) // abs(n)


class TestGuardSafeProperties:
    """int_max and int_sign against builtins."""

    @given(a=integers(), b=integers())
    def test_int_max(self, a: int, b: int) -> None:
        """PROPERTY: int_max equals max."""
        assert int_max(a, b) == max(a, b)

    @given(x=integers())
    def test_int_sign(self, x: int) -> None:
        """PROPERTY: int_sign equals (x > 0) - (x < 0)."""
        assert int_sign(x) == (x > 0) - (x < 0)


@pytest.mark.fuzz
class TestArithmeticFuzz:
    """Intensive runs over very large operands."""

    @given(a=huge_integers, n=huge_integers.filter(lambda v: v != 0))
    @settings(max_examples=1500)
    def test_floored_identity_huge(self, a: int, n: int) -> None:
        """INVARIANT: division identity holds for 400-digit operands."""
        assert a == n * floor_div(a, n) + mod_branchless(a, n)
        assert mod(a, n) == a % n

    @given(a=st.integers(), n=st.integers().filter(lambda v: v != 0))
    @settings(max_examples=1500)
    def test_floor_div_unbounded(self, a: int, n: int) -> None:
        """PROPERTY: floor_div == // for unconstrained integers."""
        assert floor_div(a, n) == a // n
