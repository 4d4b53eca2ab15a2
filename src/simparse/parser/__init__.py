"""Parser combinator engine.

Module Organization:
- core.py: Parser value type, seq/alt (the + and | operators), parse()
- primitives.py: satisfy and the single-character / literal parsers
- combinators.py: rep, many, ignore, back, peek

Public API:
    Parser: Composable parser value
    parse: Run a parser over a string from offset 0
"""

from simparse.parser.combinators import back, ignore, many, peek, rep
from simparse.parser.core import Parser, ParserLike, alt, as_parser, parse, seq
from simparse.parser.primitives import (
    alphanumeric,
    any_char,
    character,
    digit,
    exclude,
    letter,
    satisfy,
    string,
    whitespace,
)

__all__ = [
    "Parser",
    "ParserLike",
    "alphanumeric",
    "alt",
    "any_char",
    "as_parser",
    "back",
    "character",
    "digit",
    "exclude",
    "ignore",
    "letter",
    "many",
    "parse",
    "peek",
    "rep",
    "satisfy",
    "seq",
    "string",
    "whitespace",
]
