"""Positional encoding over an arbitrary alphabet.

Direct place-value conversion: the alphabet's first symbol is the zero
digit, so in base ``b`` the value ``b`` is written as the second symbol
followed by the first, exactly like decimal "10". This is not a bijective
(zero-less) numeral system and the two are not interchangeable.
"""

from __future__ import annotations

from numeral.domain.alphabet import validate_alphabet
from numeral.domain.errors import AlphabetTooShortError, NegativeInputError

ALPHA_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def encode(n: int, alphabet: str, *, strict: bool = True) -> str:
    """Convert *n* to a string that uses the characters of *alphabet* as numerals.

    The radix is the number of graphemes (not code points or bytes) in
    *alphabet*, so kanji, emoji and accented letters each count once.

    Examples:
        >>> encode(0, "世界")
        '世'
        >>> encode(4, "世界")
        '界世世'
        >>> encode(67427, "!@#$%^&*()")
        '&*%#*'

    Raises:
        NegativeInputError: *n* is negative (checked before the alphabet).
        EmptyAlphabetError: *alphabet* is empty.
        InvalidAlphabetError: *alphabet* repeats a character.
        AlphabetTooShortError: *alphabet* has a single symbol and either
            *strict* is set or *n* is positive.
    """
    if n < 0:
        msg = f"Input number cannot be negative. Got {n}."
        raise NegativeInputError(msg, value=n)

    symbols = validate_alphabet(alphabet, strict=strict)
    if n == 0:
        return symbols[0]

    base = len(symbols)
    if base < 2:
        msg = f"A single-character alphabet can only encode zero. Got {n}."
        raise AlphabetTooShortError(msg, length=base, value=n)

    digits: list[str] = []
    while n:
        n, remainder = divmod(n, base)
        digits.append(symbols[remainder])
    return "".join(reversed(digits))


def alpha(n: int) -> str:
    """Convert *n* to base 52 using upper then lower case Latin letters.

    Examples:
        >>> alpha(0)
        'A'
        >>> alpha(25)
        'Z'
        >>> alpha(52)
        'BA'
    """
    return encode(n, ALPHA_ALPHABET)
