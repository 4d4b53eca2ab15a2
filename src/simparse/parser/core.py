"""Parser value type, sequencing and alternation.

A parser is any callable taking a :class:`~simparse.cursor.Cursor` and
returning a string, raising :class:`~simparse.diagnostics.ParseError` on
failure. :class:`Parser` wraps such a callable so it gains the ``+``
(sequence) and ``|`` (alternation) operators and a descriptive name used in
error messages and logs.

Architecture:
    Every parser in a chain receives the same mutable cursor. Primitives
    (:mod:`~simparse.parser.primitives`) advance it on success and leave it
    untouched on failure. Combinators (:mod:`~simparse.parser.combinators`)
    build new Parser values from existing ones; only ``back`` and ``peek``
    ever move the cursor backwards.

Rewinding:
    Neither sequencing nor alternation rewinds. ``a | b`` runs ``b`` from
    wherever ``a`` stopped when it failed; wrap ``a`` in ``back`` to get an
    all-or-nothing alternative.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TypeAlias

from simparse.cursor import Cursor
from simparse.diagnostics import ErrorTemplate, ParseError

__all__ = ["Parser", "ParserLike", "alt", "as_parser", "parse", "seq"]

logger = logging.getLogger(__name__)

ParserLike: TypeAlias = Callable[[Cursor], str]


@dataclass(frozen=True, slots=True)
class Parser:
    """Composable parser value.

    Frozen: a Parser closes over its configuration and holds no parse
    state, so one instance can be reused across calls and cursors.

    Attributes:
        fn: Callable doing the work; advances the cursor, returns the match
        name: Description used in error messages and repr

    Example:
        >>> from simparse import Cursor, digit, letter
        >>> ident = letter + digit
        >>> cursor = Cursor("a1b")
        >>> ident(cursor)
        'a1'
        >>> cursor.pos
        2
    """

    fn: ParserLike
    name: str = "parser"

    def __call__(self, cursor: Cursor) -> str:
        return self.fn(cursor)

    def __add__(self, other: ParserLike) -> Parser:
        return seq(self, other)

    def __radd__(self, other: ParserLike) -> Parser:
        return seq(other, self)

    def __or__(self, other: ParserLike) -> Parser:
        return alt(self, other)

    def __ror__(self, other: ParserLike) -> Parser:
        return alt(other, self)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"

    def named(self, name: str) -> Parser:
        """Return the same parser under a different name."""
        return replace(self, name=name)


def as_parser(value: ParserLike) -> Parser:
    """Wrap a plain callable as a Parser; Parser values pass through.

    Raises:
        TypeError: If value is not callable
    """
    if isinstance(value, Parser):
        return value
    if not callable(value):
        raise TypeError(ErrorTemplate.not_a_parser(value))
    return Parser(value, getattr(value, "__name__", "parser"))


def seq(*parsers: ParserLike) -> Parser:
    """Run parsers left to right and concatenate their results.

    The first failure propagates and the cursor stays wherever the failing
    parser left it. ``seq()`` matches the empty string.
    """
    items = tuple(as_parser(p) for p in parsers)

    def run(cursor: Cursor) -> str:
        parts: list[str] = []
        for parser in items:
            parts.append(parser(cursor))
        return "".join(parts)

    return Parser(run, " + ".join(p.name for p in items) or "seq()")


def alt(*parsers: ParserLike) -> Parser:
    """Try parsers in order, returning the first success.

    Each branch starts from the cursor's current position, which is not
    restored after a failed branch. If every branch fails, the last
    branch's ParseError propagates.

    Raises:
        ValueError: If no parsers are given
    """
    if not parsers:
        msg = "alt() requires at least one parser"
        raise ValueError(msg)
    items = tuple(as_parser(p) for p in parsers)
    *first, last = items

    def run(cursor: Cursor) -> str:
        for parser in first:
            try:
                return parser(cursor)
            except ParseError:
                continue
        return last(cursor)

    return Parser(run, " | ".join(p.name for p in items))


def parse(parser: ParserLike, text: str) -> tuple[str, Cursor]:
    """Run a parser over text from offset 0.

    Args:
        parser: Parser (or plain callable) to run
        text: Input text

    Returns:
        (value, cursor) where cursor sits after the consumed input

    Raises:
        ParseError: If the parser fails

    Example:
        >>> from simparse import string
        >>> value, cursor = parse(string("ab"), "abc")
        >>> value, cursor.pos
        ('ab', 2)
    """
    runner = as_parser(parser)
    cursor = Cursor(text)
    logger.debug("Parsing %d characters with %s", len(text), runner.name)
    value = runner(cursor)
    logger.debug("Parsed %d of %d characters", cursor.pos, len(text))
    return value, cursor
