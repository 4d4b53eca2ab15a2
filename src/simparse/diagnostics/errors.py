"""simparse exception hierarchy.

A single failure kind, ParseError, signals every parser failure. Combinators
treat all failures alike: alternation moves on to the next branch, many()
stops its loop, back() and peek() restore the cursor and re-raise.

Python 3.13+. Zero external dependencies.
"""

from simparse.position import get_error_context, line_col

__all__ = ["ParseError", "SimparseError"]


class SimparseError(Exception):
    """Base exception for all simparse errors."""


class ParseError(SimparseError):
    """A parser failed to match at the current cursor position.

    Attributes:
        message: Human-readable description of the unmet expectation
        position: Character offset at which the failure occurred
        source: The text being parsed (None when raised without a cursor)

    Example:
        >>> error = ParseError("Expected digit", position=7, source="hello\\nworld")
        >>> error.format_error()
        '2:2: Expected digit'
    """

    def __init__(self, message: str, position: int = 0, source: str | None = None) -> None:
        """Initialize ParseError.

        Args:
            message: Error message (built via ErrorTemplate)
            position: Offset of the failure
            source: Source text, used for line:column rendering
        """
        super().__init__(message)
        self.message = message
        self.position = position
        self.source = source

    def format_error(self) -> str:
        """Format error with line:column prefix.

        Falls back to the bare message when no source is attached.
        """
        if self.source is None:
            return self.message
        line, col = line_col(self.source, self.position)
        return f"{line}:{col}: {self.message}"

    def format_with_context(self, context_lines: int = 1) -> str:
        """Format error with a source excerpt and a caret under the position."""
        if self.source is None:
            return self.message
        context = get_error_context(self.source, self.position, context_lines)
        return f"{self.format_error()}\n\n{context}"
