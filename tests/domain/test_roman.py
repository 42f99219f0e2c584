"""Tests for Roman numeral conversion."""

import pytest

from numeral.domain.errors import NegativeInputError, ZeroInputError
from numeral.domain.roman import ROMAN_NUMERALS, roman


class TestRoman:
    @pytest.mark.parametrize(
        "n,expected",
        [
            (1, "I"),
            (3, "III"),
            (4, "IV"),
            (5, "V"),
            (9, "IX"),
            (11, "XI"),
            (40, "XL"),
            (294, "CCXCIV"),
            (442, "CDXLII"),
            (467, "CDLXVII"),
            (900, "CM"),
            (1989, "MCMLXXXIX"),
            (1991, "MCMXCI"),
            (3999, "MMMCMXCIX"),
        ],
    )
    def test_values(self, n: int, expected: str) -> None:
        assert roman(n) == expected

    @pytest.mark.parametrize(
        "n,expected",
        [
            (4000, "MMMM"),
            (4859, "MMMMDCCCLIX"),
            (7412, "MMMMMMMCDXII"),
        ],
    )
    def test_large_values_repeat_m(self, n: int, expected: str) -> None:
        assert roman(n) == expected

    def test_zero(self) -> None:
        with pytest.raises(ZeroInputError, match="cannot be zero"):
            roman(0)

    def test_negative(self) -> None:
        with pytest.raises(NegativeInputError, match="Got -1"):
            roman(-1)


class TestRomanTable:
    def test_thirteen_descending_pairs(self) -> None:
        magnitudes = [m for m, _ in ROMAN_NUMERALS]
        assert len(magnitudes) == 13
        assert magnitudes == sorted(magnitudes, reverse=True)
