"""Repetition, result-shaping, backtracking and lookahead combinators.

Cursor behaviour on failure, per combinator:
    rep     no rewind; the partial consumption of the failing round stays
    many    no rewind; the failure only ends the loop and is swallowed
    ignore  whatever the wrapped parser left
    back    restores the position saved before the attempt
    peek    always restores, on success and on failure

``back`` and ``peek`` are the only places that move a cursor backwards.
"""

import logging

from simparse.cursor import Cursor
from simparse.diagnostics import ErrorTemplate, ParseError
from simparse.parser.core import Parser, ParserLike, as_parser

__all__ = ["back", "ignore", "many", "peek", "rep"]

logger = logging.getLogger(__name__)


def rep(n: int, parser: ParserLike) -> Parser:
    """Apply parser exactly n times and concatenate the results.

    Fails with the sub-parser's ParseError as soon as one application
    fails; no partial result is returned and nothing is rewound.

    Args:
        n: Number of applications (0 matches the empty string)
        parser: Parser to repeat

    Raises:
        ValueError: If n is negative

    Example:
        >>> from simparse import Cursor, any_char
        >>> cursor = Cursor("abc")
        >>> rep(2, any_char)(cursor)
        'ab'
        >>> cursor.pos
        2
    """
    if n < 0:
        raise ValueError(ErrorTemplate.invalid_repeat_count(n))
    inner = as_parser(parser)

    def run(cursor: Cursor) -> str:
        parts: list[str] = []
        for _ in range(n):
            parts.append(inner(cursor))
        return "".join(parts)

    return Parser(run, f"rep({n}, {inner.name})")


def many(parser: ParserLike) -> Parser:
    """Apply parser until it fails; return everything matched before that.

    Never fails. The failing attempt is not rewound, so a sub-parser that
    can consume input before failing should be wrapped in ``back``.

    Unlike a plain loop-until-failure, the loop also ends when an
    application succeeds without moving the cursor (e.g.
    ``many(many(digit))`` or ``many(string(""))``), which would otherwise
    repeat forever. That application's result is kept once and no
    failure is needed to stop.

    Example:
        >>> from simparse import Cursor, digit
        >>> cursor = Cursor("123x")
        >>> many(digit)(cursor)
        '123'
        >>> many(digit)(cursor)
        ''
    """
    inner = as_parser(parser)

    def run(cursor: Cursor) -> str:
        parts: list[str] = []
        while True:
            start = cursor.mark()
            try:
                parts.append(inner(cursor))
            except ParseError:
                break
            if cursor.pos == start:
                logger.debug("many(%s) matched without consuming at %d; stopping", inner.name, start)
                break
        return "".join(parts)

    return Parser(run, f"many({inner.name})")


def ignore(parser: ParserLike) -> Parser:
    """Run parser for its cursor movement and return the empty string."""
    inner = as_parser(parser)

    def run(cursor: Cursor) -> str:
        inner(cursor)
        return ""

    return Parser(run, f"ignore({inner.name})")


def back(parser: ParserLike) -> Parser:
    """Make parser all-or-nothing.

    On success the cursor advances normally. On failure the cursor is reset
    to where the attempt started and the ParseError is re-raised.

    Example:
        >>> from simparse import Cursor, string
        >>> cursor = Cursor("abX")
        >>> (back(string("abc")) | string("abX"))(cursor)
        'abX'
    """
    inner = as_parser(parser)

    def run(cursor: Cursor) -> str:
        saved = cursor.mark()
        try:
            return inner(cursor)
        except ParseError:
            if cursor.pos != saved:
                logger.debug("Backtracking %s from %d to %d", inner.name, cursor.pos, saved)
                cursor.reset(saved)
            raise

    return Parser(run, f"back({inner.name})")


def peek(parser: ParserLike) -> Parser:
    """Run parser as lookahead: return its result without consuming input.

    The cursor is restored whether the parser succeeds or fails; failures
    are re-raised after the restore.

    Example:
        >>> from simparse import Cursor, string
        >>> cursor = Cursor("abc")
        >>> peek(string("ab"))(cursor)
        'ab'
        >>> cursor.pos
        0
    """
    inner = as_parser(parser)

    def run(cursor: Cursor) -> str:
        saved = cursor.mark()
        try:
            return inner(cursor)
        finally:
            if cursor.pos != saved:
                logger.debug("Lookahead %s restoring %d to %d", inner.name, cursor.pos, saved)
                cursor.reset(saved)

    return Parser(run, f"peek({inner.name})")
