"""Primitive single-character and literal parsers.

Everything here except :func:`string` is built on :func:`satisfy`: inspect
the character under the cursor, advance by one and return it if the
predicate holds, otherwise raise ParseError with the cursor untouched.

Character classes are ASCII / C-locale (see :mod:`simparse.constants`);
no Unicode-aware classification is performed.
"""

from collections.abc import Callable

from simparse.constants import ASCII_ALNUM, ASCII_DIGITS, ASCII_LETTERS, WHITESPACE
from simparse.cursor import Cursor
from simparse.diagnostics import ErrorTemplate, ParseError
from simparse.parser.core import Parser

__all__ = [
    "alphanumeric",
    "any_char",
    "character",
    "digit",
    "exclude",
    "letter",
    "satisfy",
    "string",
    "whitespace",
]


def _describe(predicate: Callable[[str], bool]) -> str:
    name = getattr(predicate, "__name__", "<lambda>")
    if name == "<lambda>":
        return "character satisfying predicate"
    return f"character satisfying {name}"


def _require_single_char(value: str, context: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(ErrorTemplate.not_a_single_character(value, context))


def satisfy(predicate: Callable[[str], bool], name: str | None = None) -> Parser:
    """Match one character for which predicate returns True.

    End of input is detected from the source length, so an embedded
    ``"\\x00"`` is matched like any other character.

    Args:
        predicate: Test applied to the character under the cursor
        name: Description used in failure messages (optional)

    Returns:
        Parser yielding the matched character

    Example:
        >>> from simparse import Cursor
        >>> vowel = satisfy(lambda c: c in "aeiou", "vowel")
        >>> cursor = Cursor("ab")
        >>> vowel(cursor)
        'a'
        >>> cursor.pos
        1
    """
    expected = name or _describe(predicate)

    def run(cursor: Cursor) -> str:
        if cursor.is_eof:
            raise ParseError(
                ErrorTemplate.unexpected_eof(cursor.pos, expected), cursor.pos, cursor.source
            )
        ch = cursor.current
        if not predicate(ch):
            raise ParseError(
                ErrorTemplate.predicate_failed(ch, cursor.pos, expected),
                cursor.pos,
                cursor.source,
            )
        cursor.advance()
        return ch

    return Parser(run, expected)


def character(c: str) -> Parser:
    """Match exactly the character c.

    Raises:
        ValueError: If c is not a single character
    """
    _require_single_char(c, "character")
    return satisfy(lambda s: s == c, repr(c))


def exclude(c: str) -> Parser:
    """Match any single character except c.

    Typical use is scanning up to a delimiter: ``many(exclude('"'))``.

    Raises:
        ValueError: If c is not a single character
    """
    _require_single_char(c, "exclude")
    return satisfy(lambda s: s != c, f"any character except {c!r}")


def string(s: str) -> Parser:
    """Match the literal string s.

    Characters are compared one at a time. On the first mismatch the parser
    fails with the cursor left at the differing character: characters
    already matched stay consumed. Wrap in ``back`` for an all-or-nothing
    match.

    Example:
        >>> from simparse import Cursor
        >>> cursor = Cursor("abX")
        >>> string("abc")(cursor)
        Traceback (most recent call last):
        ...
        simparse.diagnostics.errors.ParseError: String not matched: 'abc' (found 'X' at position 2)
        >>> cursor.pos
        2
    """

    def run(cursor: Cursor) -> str:
        for expected_char in s:
            found = cursor.peek()
            if found != expected_char:
                raise ParseError(
                    ErrorTemplate.string_mismatch(s, cursor.pos, found), cursor.pos, cursor.source
                )
            cursor.advance()
        return s

    return Parser(run, repr(s))


any_char: Parser = satisfy(lambda _: True, "any character")
digit: Parser = satisfy(ASCII_DIGITS.__contains__, "digit")
letter: Parser = satisfy(ASCII_LETTERS.__contains__, "letter")
alphanumeric: Parser = satisfy(ASCII_ALNUM.__contains__, "alphanumeric character")
whitespace: Parser = satisfy(WHITESPACE.__contains__, "whitespace")
