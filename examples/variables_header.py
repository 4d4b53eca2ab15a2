"""Variables Header Example - Token Extraction With Backtracking.

Demonstrates the core combinators on a Tecplot-style header line:

1. Match a label all-or-nothing with back()
2. Pull quoted names out one at a time
3. Report a located error for malformed input

Python 3.13+.
"""

from __future__ import annotations

from simparse import (
    Cursor,
    ParseError,
    alphanumeric,
    back,
    ignore,
    many,
    string,
    whitespace,
)

LABEL = back(string("VARIABLES") + many(whitespace) + string("=") + many(whitespace))

ITEM = back(
    ignore(string('"'))
    + many(alphanumeric)
    + ignore(string('"'))
    + ignore(many(whitespace) + many(string(",")) + many(whitespace))
)


def extract_names(line: str) -> list[str]:
    """Return the quoted names of a VARIABLES= header line."""
    cursor = Cursor(line)
    LABEL(cursor)
    names: list[str] = []
    while not cursor.is_eof:
        names.append(ITEM(cursor))
    return names


def main() -> None:
    print("=" * 60)
    print("Example 1: Step by step")
    print("=" * 60)

    cursor = Cursor('VARIABLES= "var1", "var2" ,"var3" , "var4"')
    print(f"label:  {LABEL(cursor)!r} (cursor at {cursor.pos})")
    for _ in range(4):
        print(f"item:   {ITEM(cursor)!r} (cursor at {cursor.pos})")
    try:
        ITEM(cursor)
    except ParseError as e:
        print(f"done:   {e.message}")

    print()
    print("=" * 60)
    print("Example 2: Whole line")
    print("=" * 60)
    print(extract_names('VARIABLES = "x" "y","z"'))

    print()
    print("=" * 60)
    print("Example 3: Malformed input")
    print("=" * 60)
    try:
        extract_names('VARIABLES= "x", "y')
    except ParseError as e:
        print(e.format_with_context())


if __name__ == "__main__":
    main()
