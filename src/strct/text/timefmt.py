"""Seconds-to-clock formatting."""

from __future__ import annotations

from strct.errors import InvalidArgumentError


def time_to_string(total_seconds: int) -> str:
    """Format *total_seconds* as ``"<minutes>:<seconds>"`` without padding.

    Works equally for minutes to ``hours:minutes``.  Negative input uses
    truncating division: the quotient rounds toward zero and the remainder
    keeps the sign of the input, so ``-125`` gives ``"-2:-5"``.
    """
    if isinstance(total_seconds, bool) or not isinstance(total_seconds, int):
        raise InvalidArgumentError(
            f"total_seconds must be an int, got {type(total_seconds).__name__}"
        )
    quotient = abs(total_seconds) // 60
    if total_seconds < 0:
        quotient = -quotient
    remainder = total_seconds - quotient * 60
    return f"{quotient}:{remainder}"
