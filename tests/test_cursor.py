"""Tests for the mutable cursor.

Validates position tracking, EOF detection by length (not sentinel), and the
mark/reset pair used by the backtracking combinators.
"""

from __future__ import annotations

import pytest

from simparse import Cursor

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor_defaults_to_start(self) -> None:
        """Cursor starts at offset 0 unless told otherwise."""
        cursor = Cursor("hello")

        assert cursor.source == "hello"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_create_cursor_at_middle(self) -> None:
        """Create cursor at middle of source."""
        cursor = Cursor("hello", 2)

        assert cursor.current == "l"

    def test_create_cursor_at_end_is_allowed(self) -> None:
        """A cursor may sit exactly at end of input."""
        cursor = Cursor("hello", 5)

        assert cursor.is_eof

    @pytest.mark.parametrize("pos", [-1, 6, 100])
    def test_create_cursor_outside_source_rejected(self, pos: int) -> None:
        """Positions outside [0, len(source)] are rejected."""
        with pytest.raises(ValueError, match="outside source"):
            Cursor("hello", pos)

    def test_cursor_is_mutable_in_place(self) -> None:
        """advance() mutates the same instance and returns None."""
        cursor = Cursor("hello")
        alias = cursor

        result = cursor.advance()

        assert result is None
        assert alias.pos == 1


# ============================================================================
# EOF DETECTION
# ============================================================================


class TestCursorEOF:
    """Test EOF detection."""

    def test_is_eof_true_for_empty_source(self) -> None:
        """is_eof is True for empty source at position 0."""
        assert Cursor("").is_eof

    def test_null_character_is_not_eof(self) -> None:
        """An embedded NUL is ordinary input, not an end marker."""
        cursor = Cursor("a\x00b", 1)

        assert not cursor.is_eof
        assert cursor.current == "\x00"

    def test_current_raises_eof_error_at_end(self) -> None:
        """Accessing current at EOF raises EOFError."""
        cursor = Cursor("hi", 2)

        with pytest.raises(EOFError, match="Unexpected end of input"):
            _ = cursor.current


# ============================================================================
# NAVIGATION
# ============================================================================


class TestCursorNavigation:
    """Test advance, peek, mark and reset."""

    def test_advance_by_count(self) -> None:
        """advance(n) moves n characters."""
        cursor = Cursor("hello")
        cursor.advance(3)

        assert cursor.pos == 3
        assert cursor.current == "l"

    def test_advance_clamps_at_end(self) -> None:
        """advance() never moves past end of input."""
        cursor = Cursor("hi")
        cursor.advance(10)

        assert cursor.pos == 2
        assert cursor.is_eof

    def test_advance_negative_rejected(self) -> None:
        """advance() is forward-only."""
        cursor = Cursor("hello", 3)

        with pytest.raises(ValueError, match="negative"):
            cursor.advance(-1)
        assert cursor.pos == 3

    def test_peek_does_not_move(self) -> None:
        """peek() looks ahead without advancing."""
        cursor = Cursor("hello", 1)

        assert cursor.peek() == "e"
        assert cursor.peek(2) == "l"
        assert cursor.pos == 1

    def test_peek_beyond_end_returns_none(self) -> None:
        """peek() past the end returns None."""
        cursor = Cursor("hi", 1)

        assert cursor.peek(1) is None

    def test_peek_before_start_returns_none(self) -> None:
        """Negative offsets reaching before the start return None."""
        cursor = Cursor("hi")

        assert cursor.peek(-1) is None

    def test_mark_and_reset_round_trip(self) -> None:
        """reset() returns to a marked position."""
        cursor = Cursor("hello")
        saved = cursor.mark()
        cursor.advance(4)

        cursor.reset(saved)

        assert cursor.pos == 0

    def test_reset_outside_source_rejected(self) -> None:
        """reset() validates the target position."""
        cursor = Cursor("hi")

        with pytest.raises(ValueError, match="outside source"):
            cursor.reset(3)


# ============================================================================
# PUBLIC SURFACE
# ============================================================================


class TestCursorSurface:
    """The cursor exposes only what parsers and combinators use."""

    def test_public_members(self) -> None:
        """Position state, EOF check, single-step reads and mark/reset."""
        public = {name for name in dir(Cursor) if not name.startswith("_")}

        assert public == {
            "advance",
            "current",
            "is_eof",
            "mark",
            "peek",
            "pos",
            "reset",
            "source",
        }
