"""Reversal and delimiter-based slicing."""

from __future__ import annotations

from strct.errors import DelimiterNotFoundError, InvalidArgumentError
from strct.logging import get_logger

_log = get_logger("text.slicing")


def _check_delimiter(delimiter: str) -> None:
    if not delimiter:
        raise InvalidArgumentError("delimiter must be a non-empty string")


def reverse_all(text: str) -> str:
    return text[::-1]


def slice_before(text: str, delimiter: str) -> str:
    """Return the part of *text* before the first *delimiter*.

    The whole of *text* is returned when the delimiter does not occur.
    """
    _check_delimiter(delimiter)
    pos = text.find(delimiter)
    if pos == -1:
        return text
    return text[:pos]


def slice_after(text: str, delimiter: str) -> str:
    """Return the part of *text* after the first *delimiter*.

    Raises ``DelimiterNotFoundError`` when the delimiter does not occur.
    """
    _check_delimiter(delimiter)
    pos = text.find(delimiter)
    if pos == -1:
        _log.debug("slice_after: %r not in text of length %d", delimiter, len(text))
        raise DelimiterNotFoundError(delimiter)
    return text[pos + len(delimiter) :]


def distribute(text: str, delimiter: str, keep_trailing: bool = True) -> list[str]:
    """Split *text* at every occurrence of *delimiter*.

    Occurrences are found left to right and never overlap.  With
    *keep_trailing* (the default) the remainder after the last delimiter is
    included, so joining the result with *delimiter* rebuilds *text*.
    ``keep_trailing=False`` keeps only segments that were terminated by a
    delimiter: ``"a,b,c"`` gives ``["a", "b"]`` and text without any
    delimiter gives ``[]``.
    """
    _check_delimiter(delimiter)
    slices: list[str] = []
    start = 0
    while (pos := text.find(delimiter, start)) != -1:
        slices.append(text[start:pos])
        start = pos + len(delimiter)
    if keep_trailing:
        slices.append(text[start:])
    return slices
