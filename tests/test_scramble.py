"""Tests for strct.text.scramble -- seed sequence, engine, distribution, scramble."""

from __future__ import annotations

import pytest

from strct.errors import InvalidArgumentError
from strct.text.scramble import MinStdRand0, SeedSequence, scramble, uniform_int


class _FixedEngine:
    """Engine stub returning a scripted sequence of raw values."""

    min = 1
    max = 2147483646

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self._values.pop(0)


class TestSeedSequence:
    def test_generate_from_abcd(self):
        seq = SeedSequence([ord(c) for c in "abcd"])
        assert seq.generate(4) == [3308100581, 4110335688, 2584188858, 3587252015]

    def test_generate_empty_sequence(self):
        assert SeedSequence().generate(4) == [719821457, 1889219533, 3532099774, 3895714911]

    def test_from_text_matches_ord_values(self):
        assert SeedSequence.from_text("abcd").generate(4) == SeedSequence(
            [97, 98, 99, 100]
        ).generate(4)

    def test_values_masked_to_32_bits(self):
        assert SeedSequence([2**32 + 5]).generate(4) == SeedSequence([5]).generate(4)

    def test_outputs_are_32_bit(self):
        out = SeedSequence(range(50)).generate(10)
        assert len(out) == 10
        assert all(0 <= v <= 0xFFFFFFFF for v in out)

    def test_generate_zero(self):
        assert SeedSequence([1, 2]).generate(0) == []

    def test_len(self):
        assert len(SeedSequence.from_text("hello")) == 5


class TestMinStdRand0:
    def test_default_seed_first_output(self):
        assert MinStdRand0()() == 16807

    def test_ten_thousandth_output(self):
        engine = MinStdRand0()
        engine.discard(9999)
        assert engine() == 1043618065

    def test_zero_seed_maps_to_one(self):
        engine = MinStdRand0(0)
        assert engine.state == 1
        engine.seed(MinStdRand0.modulus)
        assert engine.state == 1

    def test_seed_from_sequence(self):
        engine = MinStdRand0()
        engine.seed_from(SeedSequence.from_text("abcd"))
        assert engine() == 341226580
        assert engine() == 1213792570

    def test_reseed_restarts_stream(self):
        engine = MinStdRand0(42)
        first = engine()
        engine.seed(42)
        assert engine() == first


class TestUniformInt:
    def test_downscales(self):
        # span 2 -> scaling 1073741822; raw 1073741822 - 1 lands in bucket 0
        engine = _FixedEngine([1073741822])
        assert uniform_int(engine, 0, 1) == 0

    def test_rejects_values_past_last_bucket(self):
        # span 2 -> past 2147483644, so raw 2147483646 (2147483645 after min) is redrawn
        engine = _FixedEngine([2147483646, 2147483644])
        assert uniform_int(engine, 0, 1) == 1
        assert engine.calls == 2

    def test_offset_by_low(self):
        engine = _FixedEngine([1])
        assert uniform_int(engine, 10, 20) == 10

    def test_single_value_range(self):
        assert uniform_int(MinStdRand0(), 3, 3) == 3

    def test_empty_range_rejected(self):
        with pytest.raises(InvalidArgumentError):
            uniform_int(MinStdRand0(), 5, 4)

    def test_stays_in_range(self):
        engine = MinStdRand0(7)
        draws = [uniform_int(engine, 0, 9) for _ in range(500)]
        assert min(draws) >= 0
        assert max(draws) <= 9


class TestScramble:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("abcd", "bcda"),
            ("scramble", "scraembl"),
            ("hello world", "rhwedlollo "),
            ("ab", "ba"),
            ("The quick brown fox", "okwTuich broen f xq"),
        ],
    )
    def test_reference_vectors(self, text, expected):
        assert scramble(text) == expected

    def test_short_strings_unchanged(self):
        assert scramble("") == ""
        assert scramble("a") == "a"

    def test_deterministic(self):
        text = "deterministic output"
        assert scramble(text) == scramble(text)

    @pytest.mark.parametrize("text", ["abcdefghij", "Mississippi", "a b c", "12345!"])
    def test_is_permutation(self, text):
        assert sorted(scramble(text)) == sorted(text)
