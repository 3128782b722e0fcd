"""Capitalization, counting, and the two word tokenizers.

strct has two notions of "word" and keeps them apart:

- *whitespace words* (``whitespace_words``): maximal runs of non-whitespace.
  Used by ``word_frequency`` and the spoonerize word-count guard.
- *alphabetic runs* (``alpha_runs``): maximal runs of ASCII letters, split on
  anything else (digits and punctuation included).  Used by ``longest_word``.
"""

from __future__ import annotations

import re

# Same set as C isspace() in the default locale
WHITESPACE = " \t\n\v\f\r"

_WHITESPACE_WORD_RE = re.compile(r"[^ \t\n\v\f\r]+")
_ALPHA_RUN_RE = re.compile(r"[A-Za-z]+")
_VOWELS = frozenset("AEIOUaeiou")
_ASCII_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")


def _ascii_upper(ch: str) -> str:
    return ch.upper() if ch in _ASCII_LOWER else ch


def whitespace_words(text: str) -> list[str]:
    """Split *text* on runs of ``WHITESPACE``, dropping empty tokens.

    Other separators such as ``\\x1f`` or a non-breaking space stay inside
    the word.
    """
    return _WHITESPACE_WORD_RE.findall(text)


def alpha_runs(text: str) -> list[str]:
    """Return every maximal run of ASCII letters in *text*, in order."""
    return _ALPHA_RUN_RE.findall(text)


def first_char_to_upper(text: str) -> str:
    """Uppercase the first character and every character following a space.

    Only the literal space starts a new word; a letter after a tab or
    newline is left alone.  Empty text is returned unchanged.
    """
    if not text:
        return text
    chars = [_ascii_upper(text[0])]
    for prev, ch in zip(text, text[1:]):
        chars.append(_ascii_upper(ch) if prev == " " else ch)
    return "".join(chars)


def word_frequency(text: str) -> int:
    return len(whitespace_words(text))


def vowel_frequency(text: str) -> int:
    return sum(1 for ch in text if ch in _VOWELS)


def longest_word(text: str) -> str:
    """Return the longest alphabetic run; the first one wins a tie."""
    return max(alpha_runs(text), key=len, default="")
