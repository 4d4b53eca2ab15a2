"""simparse - small parser combinators over a shared mutable cursor.

Hand-rolled grammars without a grammar file or code generation step:
parsers are values, combinators build new parsers from old ones, and every
parser in a chain advances the same Cursor.

Public API:
    Cursor - Mutable position into the input string
    Parser - Composable parser value (supports ``+`` and ``|``)
    parse - Run a parser over a string from offset 0
    satisfy, character, string, exclude - Primitive constructors
    any_char, digit, letter, alphanumeric, whitespace - Named primitives
    rep, many, ignore, back, peek, seq, alt - Combinators

Exceptions:
    SimparseError - Base exception class
    ParseError - Any parser failure

Example:
    >>> from simparse import Cursor, back, digit, ignore, many, string
    >>> key = back(string("size") + ignore(string("=")))
    >>> value = digit + many(digit)
    >>> cursor = Cursor("size=42")
    >>> key(cursor), value(cursor)
    ('size', '42')
"""

from .cursor import Cursor
from .diagnostics import ParseError, SimparseError
from .parser import (
    Parser,
    alphanumeric,
    alt,
    any_char,
    back,
    character,
    digit,
    exclude,
    ignore,
    letter,
    many,
    parse,
    peek,
    rep,
    satisfy,
    seq,
    string,
    whitespace,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("simparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Cursor",
    "ParseError",
    "Parser",
    "SimparseError",
    "__version__",
    "alphanumeric",
    "alt",
    "any_char",
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
