"""Deterministic, content-seeded character shuffle.

``scramble`` is a Fisher-Yates style pass whose random source is seeded
from the characters of the string itself.  The engine is reseeded from the
same seed sequence before every swap, so each step restarts the same
stream; the result is reproducible but not a uniform shuffle.

The three building blocks follow the C++ standard library (libstdc++)
exactly, so the output matches a ``std::seed_seq`` /
``std::default_random_engine`` / ``std::uniform_int_distribution``
implementation character for character.
"""

from __future__ import annotations

from collections.abc import Iterable

from strct.errors import InvalidArgumentError
from strct.logging import get_logger

_log = get_logger("text.scramble")

_MASK32 = 0xFFFFFFFF


def _mix(value: int) -> int:
    return value ^ (value >> 27)


class SeedSequence:
    """Seed sequence that spreads a list of 32-bit values over *n* outputs."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values = [v & _MASK32 for v in values]

    @classmethod
    def from_text(cls, text: str) -> SeedSequence:
        return cls(ord(ch) for ch in text)

    def __len__(self) -> int:
        return len(self._values)

    def generate(self, n: int) -> list[int]:
        """Return *n* well-mixed 32-bit values derived from the seed values."""
        if n <= 0:
            return []
        out = [0x8B8B8B8B] * n
        s = len(self._values)
        if n >= 623:
            t = 11
        elif n >= 68:
            t = 7
        elif n >= 39:
            t = 5
        elif n >= 7:
            t = 3
        else:
            t = (n - 1) // 2
        p = (n - t) // 2
        q = p + t
        m = max(s + 1, n)

        for k in range(m):
            r1 = (1664525 * _mix(out[k % n] ^ out[(k + p) % n] ^ out[(k - 1) % n])) & _MASK32
            if k == 0:
                r2 = r1 + s
            elif k <= s:
                r2 = r1 + k % n + self._values[k - 1]
            else:
                r2 = r1 + k % n
            r2 &= _MASK32
            out[(k + p) % n] = (out[(k + p) % n] + r1) & _MASK32
            out[(k + q) % n] = (out[(k + q) % n] + r2) & _MASK32
            out[k % n] = r2

        for k in range(m, m + n):
            arg = (out[k % n] + out[(k + p) % n] + out[(k - 1) % n]) & _MASK32
            r3 = (1566083941 * _mix(arg)) & _MASK32
            r4 = (r3 - k % n) & _MASK32
            out[(k + p) % n] ^= r3
            out[(k + q) % n] ^= r4
            out[k % n] = r4

        return out


class MinStdRand0:
    """Park-Miller "minimal standard" generator (multiplier 16807)."""

    multiplier = 16807
    modulus = 2**31 - 1
    min = 1
    max = modulus - 1

    def __init__(self, seed: int = 1) -> None:
        self._state = 1
        self.seed(seed)

    @property
    def state(self) -> int:
        return self._state

    def seed(self, value: int) -> None:
        value %= self.modulus
        self._state = value if value else 1

    def seed_from(self, seq: SeedSequence) -> None:
        # A 31-bit modulus needs one 32-bit word, taken after three skipped
        seed_words = seq.generate(4)
        self.seed(seed_words[3])

    def __call__(self) -> int:
        self._state = (self._state * self.multiplier) % self.modulus
        return self._state

    def discard(self, count: int) -> None:
        for _ in range(count):
            self()


def uniform_int(engine: MinStdRand0, low: int, high: int) -> int:
    """Draw an integer from ``[low, high]`` by rejection-sampled downscaling."""
    if low > high:
        raise InvalidArgumentError(f"empty range [{low}, {high}]")
    engine_range = engine.max - engine.min
    span = high - low + 1
    if span > engine_range + 1:
        raise InvalidArgumentError(f"range [{low}, {high}] exceeds engine range")
    if span == engine_range + 1:
        return low + engine() - engine.min
    scaling = engine_range // span
    past = span * scaling
    while True:
        drawn = engine() - engine.min
        if drawn < past:
            return low + drawn // scaling


def scramble(text: str) -> str:
    """Return a deterministic permutation of *text* seeded by its own content."""
    chars = list(text)
    engine = MinStdRand0()
    # Reseeding from the same sequence always lands on the same state
    engine.seed_from(SeedSequence.from_text(text))
    start_state = engine.state
    for i in range(len(chars) - 1, 0, -1):
        engine.seed(start_state)
        j = uniform_int(engine, 0, i)
        chars[i], chars[j] = chars[j], chars[i]
    result = "".join(chars)
    _log.debug("scramble: %d chars", len(chars))
    return result
