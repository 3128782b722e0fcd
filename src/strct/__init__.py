"""strct -- common string manipulation tasks."""

from strct.errors import (
    DelimiterNotFoundError,
    EmptyInputError,
    InvalidArgumentError,
    StrctError,
)
from strct.text import (
    alpha_runs,
    distribute,
    first_char_to_upper,
    is_palindrome,
    longest_word,
    reverse_all,
    scramble,
    slice_after,
    slice_before,
    spoonerize,
    time_to_string,
    vowel_frequency,
    whitespace_words,
    word_frequency,
)

__all__ = [
    "DelimiterNotFoundError",
    "EmptyInputError",
    "InvalidArgumentError",
    "StrctError",
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
