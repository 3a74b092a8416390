"""Whitespace-preserving tokenization for word-level comparison."""

from __future__ import annotations

import re

# Browser regex `\s`: includes U+FEFF, excludes \x1c-\x1f and \x85.
_WHITESPACE = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"

_WHITESPACE_SPLIT_PATTERN = re.compile(f"({_WHITESPACE}+)")
_BLANK_PATTERN = re.compile(f"{_WHITESPACE}*")


def tokenize(text: str) -> list[str]:
    """Split text into alternating word and whitespace tokens.

    Whitespace runs are kept as their own tokens, so ``"".join(tokenize(s)) == s``.
    Leading or trailing whitespace produces an empty edge token and ``""``
    yields ``[""]``; callers compare those like any other token.
    """
    return _WHITESPACE_SPLIT_PATTERN.split(text)


def is_blank(text: str) -> bool:
    """Return True when text is empty or made only of whitespace tokens."""
    return _BLANK_PATTERN.fullmatch(text) is not None
