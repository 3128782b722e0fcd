"""Spoonerisms -- swap the leading letters of two words."""

from __future__ import annotations

from strct.errors import InvalidArgumentError
from strct.logging import get_logger
from strct.text.words import whitespace_words, word_frequency

_log = get_logger("text.spoonerize")

SWAP_LENGTHS = (1, 2)


def spoonerize(text: str, first_len: int = 1, second_len: int = 1) -> str:
    """Swap the first *first_len* letters of word one with the first *second_len* of word two.

    ``spoonerize("cat dog")`` gives ``"dat cog"``; ``spoonerize("cat dog", 2, 2)``
    gives ``"dot cag"``.

    Text with more than two whitespace words, or a length outside
    ``SWAP_LENGTHS``, is returned unchanged.  Otherwise the text must be two
    words joined by a single space, each at least as long as its swap
    length, or ``InvalidArgumentError`` is raised.

    Lengths that are not plain ints (``bool`` and ``float`` included) raise
    ``InvalidArgumentError`` before any other check.
    """
    for name, value in (("first_len", first_len), ("second_len", second_len)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    if word_frequency(text) > 2:
        _log.debug("spoonerize: more than two words, returning input")
        return text
    if first_len not in SWAP_LENGTHS or second_len not in SWAP_LENGTHS:
        _log.debug(
            "spoonerize: lengths (%r, %r) out of range, returning input", first_len, second_len
        )
        return text

    first, _, second = text.partition(" ")
    if whitespace_words(text) != [first, second]:
        raise InvalidArgumentError(f"expected two words separated by one space, got {text!r}")
    if len(first) < first_len:
        raise InvalidArgumentError(f"first word {first!r} is shorter than {first_len}")
    if len(second) < second_len:
        raise InvalidArgumentError(f"second word {second!r} is shorter than {second_len}")

    return second[:second_len] + first[first_len:] + " " + first[:first_len] + second[second_len:]
