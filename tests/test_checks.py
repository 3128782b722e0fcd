"""Tests for strct.text.checks and strct.text.timefmt."""

from __future__ import annotations

import pytest

from strct.errors import InvalidArgumentError
from strct.text.checks import is_palindrome
from strct.text.timefmt import time_to_string


class TestIsPalindrome:
    def test_spaces_removed(self):
        assert is_palindrome("race car") is True

    def test_case_sensitive(self):
        assert is_palindrome("Race car") is False

    def test_all_whitespace_kinds_removed(self):
        assert is_palindrome("ab\tc\nb a") is True

    def test_vertical_tab_form_feed_and_cr_removed(self):
        assert is_palindrome("ab\vc\fb\ra") is True

    def test_non_c_whitespace_is_kept(self):
        assert is_palindrome("a\x1fb\xa0a") is False
        assert is_palindrome("a\x1fa") is True

    def test_punctuation_is_significant(self):
        assert is_palindrome("ab,a") is False

    def test_trivial(self):
        assert is_palindrome("") is True
        assert is_palindrome("   ") is True
        assert is_palindrome("x") is True

    def test_not_palindrome(self):
        assert is_palindrome("hello") is False


class TestTimeToString:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (125, "2:5"),
            (59, "0:59"),
            (60, "1:0"),
            (0, "0:0"),
            (3600, "60:0"),
        ],
    )
    def test_positive(self, seconds, expected):
        assert time_to_string(seconds) == expected

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (-125, "-2:-5"),
            (-59, "0:-59"),
            (-60, "-1:0"),
            (-61, "-1:-1"),
        ],
    )
    def test_negative_truncates_toward_zero(self, seconds, expected):
        assert time_to_string(seconds) == expected

    def test_rejects_float(self):
        with pytest.raises(InvalidArgumentError):
            time_to_string(12.5)

    def test_rejects_bool(self):
        with pytest.raises(InvalidArgumentError):
            time_to_string(True)

    def test_rejects_str(self):
        with pytest.raises(InvalidArgumentError, match="str"):
            time_to_string("60")
