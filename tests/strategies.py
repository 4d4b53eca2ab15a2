"""Hypothesis strategies for parser inputs.

Provides text strategies split by the ASCII character classes the named
primitives recognise, so property tests can generate inputs that are known
to match or known not to match.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

# Printable input plus the characters that trip sentinel-based EOF checks.
source_text = st.text(
    alphabet=st.characters(codec="utf-8"),
    min_size=0,
    max_size=100,
)

ascii_digits = st.text(alphabet=string.digits, min_size=1, max_size=20)
ascii_letters = st.text(alphabet=string.ascii_letters, min_size=1, max_size=20)
ascii_alnum = st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=20)
blanks = st.text(alphabet=" \t\n\v\f\r", min_size=0, max_size=10)


@composite
def text_with_prefix(draw: st.DrawFn) -> tuple[str, str]:
    """Generate (prefix, source) where source starts with prefix."""
    prefix = draw(source_text)
    suffix = draw(source_text)
    return prefix, prefix + suffix


@composite
def mismatching_text(draw: st.DrawFn) -> tuple[str, str, int]:
    """Generate (target, source, index) where source first differs at index.

    source agrees with target on target[:index] and then has a different
    character (or ends) at index.
    """
    target = draw(st.text(min_size=1, max_size=20))
    index = draw(st.integers(min_value=0, max_value=len(target) - 1))
    ends_early = draw(st.booleans())
    if ends_early:
        return target, target[:index], index
    wrong = draw(st.characters(codec="utf-8").filter(
        lambda c: c != target[index]
    ))
    tail = draw(source_text)
    return target, target[:index] + wrong + tail, index
