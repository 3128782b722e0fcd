"""Text predicates."""

from __future__ import annotations

from strct.text.words import WHITESPACE

_WHITESPACE = frozenset(WHITESPACE)


def is_palindrome(text: str) -> bool:
    """Return True if *text* reads the same backwards once whitespace is removed.

    The comparison is exact, so case matters: ``"race car"`` is a
    palindrome, ``"Race car"`` is not.
    """
    stripped = "".join(ch for ch in text if ch not in _WHITESPACE)
    return stripped == stripped[::-1]
