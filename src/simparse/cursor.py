"""Mutable cursor shared by every parser in a chain.

A Cursor is a position into an immutable string. Parsers receive the same
Cursor instance and advance it in place, so each parser in a sequence sees
what earlier parsers consumed. The cursor only moves forward, except through
reset(), which the backtracking and lookahead combinators use to restore a
position saved with mark().

Design:
    - source is immutable (str); pos is the only mutable state
    - EOF is a state (is_eof), decided by len(source), never by a sentinel
      character; "\\x00" is ordinary input

Thread Safety:
    None. A cursor belongs to one parse running on one thread.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from simparse.diagnostics.templates import ErrorTemplate

__all__ = ["Cursor"]


@dataclass(slots=True)
class Cursor:
    """Forward-only source position tracker.

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.current
        'h'
        >>> cursor.advance()
        >>> cursor.current
        'e'
        >>> saved = cursor.mark()
        >>> cursor.advance(3)
        >>> cursor.is_eof
        True
        >>> cursor.reset(saved)
        >>> cursor.pos
        1
    """

    source: str
    pos: int = 0

    def __post_init__(self) -> None:
        """Reject positions outside the source."""
        if not 0 <= self.pos <= len(self.source):
            msg = f"Cursor position {self.pos} outside source of length {len(self.source)}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character at the cursor.

        Raises:
            EOFError: If at end of input. Check is_eof first.
        """
        if self.is_eof:
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos))
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at pos + offset without advancing, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos < 0 or target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> None:
        """Move forward by count characters, stopping at end of input."""
        if count < 0:
            msg = f"Cursor cannot advance by a negative count ({count})"
            raise ValueError(msg)
        self.pos = min(self.pos + count, len(self.source))

    def mark(self) -> int:
        """Return the current position for a later reset()."""
        return self.pos

    def reset(self, pos: int) -> None:
        """Move back to a position previously returned by mark().

        Only back() and peek() rewind; ordinary parsers never call this.
        """
        if not 0 <= pos <= len(self.source):
            msg = f"Cursor position {pos} outside source of length {len(self.source)}"
            raise ValueError(msg)
        self.pos = pos
