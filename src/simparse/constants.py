"""Shared constants for simparse.

Character classes used by the named primitives. Classification is
deliberately ASCII / C-locale only: ``str.isdigit()`` and friends accept Unicode digits and
letters, which the primitives must not.

Python 3.13+. Zero external dependencies.
"""

from typing import Final

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character classes
    "ASCII_DIGITS",
    "ASCII_LETTERS",
    "ASCII_ALNUM",
    "WHITESPACE",
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# 0-9 only; "²".isdigit() is True, which is not a decimal digit here.
ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

ASCII_LETTERS: Final[frozenset[str]] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

ASCII_ALNUM: Final[frozenset[str]] = ASCII_DIGITS | ASCII_LETTERS

# C-locale isspace(): space, \t, \n, \v, \f, \r
WHITESPACE: Final[frozenset[str]] = frozenset(" \t\n\v\f\r")
