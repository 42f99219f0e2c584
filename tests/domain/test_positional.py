"""Tests for positional encoding and the base-52 alpha encoding."""

from __future__ import annotations

import pytest

from numeral.domain.errors import (
    AlphabetTooShortError,
    EmptyAlphabetError,
    InvalidAlphabetError,
    NegativeInputError,
)
from numeral.domain.graphemes import split_graphemes
from numeral.domain.positional import ALPHA_ALPHABET, alpha, encode

KANJI = "世界地球風火災水稲妻太陽"
EMOJI = "😀😁😂🤣😄😅"


class TestEncode:
    @pytest.mark.parametrize(
        "n,alphabet,expected",
        [
            (0, "世界", "世"),
            (1, "世界", "界"),
            (2, "世界", "界世"),
            (3, "世界", "界界"),
            (4, "世界", "界世世"),
            (0, KANJI, "世"),
            (4, KANJI, "風"),
            (13, KANJI, "界界"),
            (0, "0123456789", "0"),
            (1, "0123456789", "1"),
            (10, "0123456789", "10"),
            (11, "0123456789", "11"),
            (100, "0123456789", "100"),
            (298648, "0123456789", "298648"),
            (2, "!@#$%^&*()", "#"),
            (11, "!@#$%^&*()", "@@"),
            (99, "!@#$%^&*()", "))"),
            (67427, "!@#$%^&*()", "&*%#*"),
            (2, EMOJI, "😂"),
            (6, EMOJI, "😁😀"),
            (255, "0123456789abcdef", "ff"),
            (5, "01", "101"),
        ],
    )
    def test_worked_examples(self, n: int, alphabet: str, expected: str) -> None:
        assert encode(n, alphabet) == expected

    def test_radix_value_is_place_value_not_bijective(self) -> None:
        """Value b is "10" in base b: second symbol then the zero digit."""
        assert encode(3, "xyz") == "yx"

    def test_zero_is_first_symbol(self) -> None:
        assert encode(0, "ab") == "a"

    def test_combining_alphabet_uses_composed_symbols(self) -> None:
        assert encode(1, "ae\u0301") == "\u00e9"

    def test_large_value(self) -> None:
        assert encode(2**63 - 1, "0123456789") == str(2**63 - 1)

    @pytest.mark.parametrize("alphabet", ["", "a", "aa", "世界", "0123456789"])
    def test_negative_input_for_any_alphabet(self, alphabet: str) -> None:
        with pytest.raises(NegativeInputError, match="Got -1"):
            encode(-1, alphabet)

    @pytest.mark.parametrize("n", [0, 1, 42])
    def test_empty_alphabet(self, n: int) -> None:
        with pytest.raises(EmptyAlphabetError):
            encode(n, "")

    @pytest.mark.parametrize("n", [0, 1, 42])
    def test_duplicate_alphabet(self, n: int) -> None:
        with pytest.raises(InvalidAlphabetError):
            encode(n, "aa")

    def test_single_symbol_strict(self) -> None:
        with pytest.raises(AlphabetTooShortError):
            encode(0, "a")

    def test_single_symbol_permissive_zero(self) -> None:
        assert encode(0, "a", strict=False) == "a"

    def test_single_symbol_permissive_positive_fails(self) -> None:
        with pytest.raises(AlphabetTooShortError, match="only encode zero"):
            encode(5, "a", strict=False)


class TestEncodeProperties:
    ALPHABETS = ["01", "xyz", "世界地", EMOJI, "!@#$%^&*()"]

    @pytest.mark.parametrize("alphabet", ALPHABETS)
    def test_uses_only_alphabet_symbols(self, alphabet: str) -> None:
        symbols = set(split_graphemes(alphabet))
        for n in range(300):
            assert set(split_graphemes(encode(n, alphabet))) <= symbols

    @pytest.mark.parametrize("alphabet", ALPHABETS)
    def test_monotonic(self, alphabet: str) -> None:
        """Longer means larger; equal length compares by alphabet position."""
        symbols = split_graphemes(alphabet)

        def key(n: int) -> tuple[int, list[int]]:
            digits = split_graphemes(encode(n, alphabet))
            return len(digits), [symbols.index(d) for d in digits]

        for n in range(300):
            assert key(n) < key(n + 1)

    def test_idempotent(self) -> None:
        assert encode(67427, "!@#$%^&*()") == encode(67427, "!@#$%^&*()")


class TestAlpha:
    @pytest.mark.parametrize(
        "n,expected",
        [
            (0, "A"),
            (3, "D"),
            (4, "E"),
            (25, "Z"),
            (26, "a"),
            (51, "z"),
            (52, "BA"),
            (53, "BB"),
            (52 * 52, "BAA"),
        ],
    )
    def test_values(self, n: int, expected: str) -> None:
        assert alpha(n) == expected

    def test_negative(self) -> None:
        with pytest.raises(NegativeInputError):
            alpha(-1)

    def test_alphabet_is_52_distinct_letters(self) -> None:
        assert len(set(ALPHA_ALPHABET)) == 52
