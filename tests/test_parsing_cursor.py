"""Tests for the immutable scanning Cursor."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from radixint.parsing import Cursor


class TestCursor:
    """Cursor navigation and EOF handling."""

    def test_current_and_advance(self) -> None:
        """advance() returns a new cursor; the original is unchanged."""
        cursor = Cursor("34.5")
        moved = cursor.advance(2)
        assert cursor.current == "3"
        assert moved.current == "."
        assert moved.rest() == ".5"

    def test_advance_clamps_at_eof(self) -> None:
        """Advancing past the end stops at len(source)."""
        cursor = Cursor("ab").advance(10)
        assert cursor.pos == 2
        assert cursor.is_eof
        assert cursor.rest() == ""

    def test_current_at_eof_raises(self) -> None:
        """Reading past the end raises EOFError with the position."""
        with pytest.raises(EOFError, match="Unexpected EOF at position 0"):
            _ = Cursor("").current

    def test_peek(self) -> None:
        """peek() looks ahead without moving and returns None past EOF."""
        cursor = Cursor("xy")
        assert cursor.peek() == "x"
        assert cursor.peek(1) == "y"
        assert cursor.peek(2) is None
        assert cursor.pos == 0

    def test_immutable(self) -> None:
        """Cursor fields cannot be reassigned."""
        cursor = Cursor("x")
        with pytest.raises(AttributeError):
            cursor.pos = 1  # type: ignore[misc]

    @given(source=st.text(max_size=50))
    def test_walk_reaches_eof(self, source: str) -> None:
        """INVARIANT: advancing once per character consumes the source."""
        cursor = Cursor(source)
        seen = []
        while not cursor.is_eof:
            seen.append(cursor.current)
            cursor = cursor.advance()
        assert "".join(seen) == source
        assert cursor.rest() == ""
