"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All parse failure messages are created here. NO f-strings in exception
    constructors! Raise sites call one of these builders so that:
        - Messages are testable in isolation
        - Wording stays consistent across primitives
        - Every failure case is documented in one place
    """

    @staticmethod
    def unexpected_eof(position: int, expected: str | None = None) -> str:
        """Input exhausted before a parser could match.

        Args:
            position: Offset at which end of input was reached
            expected: Description of what was being matched (optional)

        Returns:
            Human-readable message
        """
        if expected is None:
            return f"Unexpected end of input at position {position}"
        return f"Unexpected end of input at position {position} (expected {expected})"

    @staticmethod
    def predicate_failed(char: str, position: int, expected: str) -> str:
        """Current character did not satisfy a predicate.

        Args:
            char: The character found at the cursor
            position: Offset of that character
            expected: Description of the predicate (usually the parser name)
        """
        return f"Expected {expected} at position {position}, found {char!r}"

    @staticmethod
    def string_mismatch(expected: str, position: int, found: str | None) -> str:
        """Literal string did not match the input.

        Args:
            expected: The full target string
            position: Offset of the first differing character
            found: Character found there, or None at end of input
        """
        if found is None:
            return f"String not matched: {expected!r} (end of input at position {position})"
        return f"String not matched: {expected!r} (found {found!r} at position {position})"

    @staticmethod
    def invalid_repeat_count(count: int) -> str:
        """rep() was given a negative repeat count."""
        return f"Repeat count must be >= 0, got {count}"

    @staticmethod
    def not_a_single_character(value: str, context: str) -> str:
        """A single-character argument was given something else.

        Args:
            value: The offending argument
            context: Name of the constructor that rejected it
        """
        return f"{context}() expects a single character, got {value!r}"

    @staticmethod
    def not_a_parser(value: object) -> str:
        """A combinator was handed something that is not callable."""
        return f"Expected a parser (callable taking a Cursor), got {type(value).__name__}"
