"""Alphabet validation for positional encoding.

An alphabet is an ordered run of distinct graphemes. Its first symbol is
the zero digit and its length is the radix.
"""

from __future__ import annotations

from numeral.domain.errors import (
    AlphabetTooShortError,
    EmptyAlphabetError,
    InvalidAlphabetError,
)
from numeral.domain.graphemes import split_graphemes

MIN_RADIX = 2


def validate_alphabet(alphabet: str, *, strict: bool = True) -> list[str]:
    """Split *alphabet* into graphemes and check it can serve as a numeral set.

    Checks run in order: empty input, repeated grapheme, then (strict only)
    fewer than :data:`MIN_RADIX` symbols. Permissive mode lets a
    single-symbol alphabet through; it can only ever encode zero.

    Args:
        alphabet: Candidate numeral set, zero digit first.
        strict: Reject single-symbol alphabets up front.

    Returns:
        The alphabet's symbols in order.

    Raises:
        EmptyAlphabetError: *alphabet* is the empty string.
        InvalidAlphabetError: A grapheme occurs more than once.
        AlphabetTooShortError: Strict mode and fewer than two symbols.
    """
    if not alphabet:
        msg = "Alphabet cannot be empty."
        raise EmptyAlphabetError(msg)

    symbols = split_graphemes(alphabet)

    seen: set[str] = set()
    for position, symbol in enumerate(symbols):
        if symbol in seen:
            msg = f"Alphabet contains duplicate character {symbol!r}."
            raise InvalidAlphabetError(msg, duplicate=symbol, position=position)
        seen.add(symbol)

    if strict and len(symbols) < MIN_RADIX:
        msg = f"Alphabet needs at least {MIN_RADIX} characters. Got {len(symbols)}."
        raise AlphabetTooShortError(msg, length=len(symbols))

    return symbols
