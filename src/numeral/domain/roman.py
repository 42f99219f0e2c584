"""Roman numerals via greedy subtractive-pair lookup."""

from __future__ import annotations

from numeral.domain.errors import NegativeInputError, ZeroInputError

ROMAN_NUMERALS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

# Largest value with a conventional spelling; above it "M" just repeats.
ROMAN_STANDARD_MAX = 3999


def roman(n: int) -> str:
    """Convert *n* to a Roman numeral.

    There is no numeral for zero, and M (1000) is the largest single
    numeral, so values over a few thousand repeat it: ``roman(7412)`` is
    ``"MMMMMMMCDXII"``.

    Examples:
        >>> roman(4)
        'IV'
        >>> roman(1991)
        'MCMXCI'

    Raises:
        ZeroInputError: *n* is zero.
        NegativeInputError: *n* is negative.
    """
    if n == 0:
        msg = "Input cannot be zero."
        raise ZeroInputError(msg, value=n)
    if n < 0:
        msg = f"Input cannot be a negative number. Got {n}."
        raise NegativeInputError(msg, value=n)

    parts: list[str] = []
    for magnitude, letters in ROMAN_NUMERALS:
        count, n = divmod(n, magnitude)
        parts.append(letters * count)
    return "".join(parts)
