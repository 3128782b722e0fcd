"""Pure text operations -- every function takes a string and returns a new value."""

from __future__ import annotations

from strct.text.checks import is_palindrome
from strct.text.scramble import scramble
from strct.text.slicing import distribute, reverse_all, slice_after, slice_before
from strct.text.spoonerize import spoonerize
from strct.text.timefmt import time_to_string
from strct.text.words import (
    alpha_runs,
    first_char_to_upper,
    longest_word,
    vowel_frequency,
    whitespace_words,
    word_frequency,
)

__all__ = [
    "alpha_runs",
    "distribute",
    "first_char_to_upper",
    "is_palindrome",
    "longest_word",
    "reverse_all",
    "scramble",
    "slice_after",
    "slice_before",
    "spoonerize",
    "time_to_string",
    "vowel_frequency",
    "whitespace_words",
    "word_frequency",
]
