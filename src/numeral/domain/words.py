"""English cardinal numbers, with a decimal extension.

Rendering walks a descending unit table. Multipliers above one are
rendered recursively ("two million"), so recursion depth is bounded by the
four scale units.
"""

from __future__ import annotations

from decimal import Decimal

from numeral.domain.errors import NegativeInputError

ZERO_WORD = "zero"
NEGATIVE_WORD = "negative"
POINT_WORD = "point"

DIGIT_WORDS: tuple[str, ...] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

WORD_UNITS: tuple[tuple[int, str], ...] = (
    (1_000_000_000, "billion"),
    (1_000_000, "million"),
    (1_000, "thousand"),
    (100, "hundred"),
    (90, "ninety"),
    (80, "eighty"),
    (70, "seventy"),
    (60, "sixty"),
    (50, "fifty"),
    (40, "forty"),
    (30, "thirty"),
    (20, "twenty"),
    (19, "nineteen"),
    (18, "eighteen"),
    (17, "seventeen"),
    (16, "sixteen"),
    (15, "fifteen"),
    (14, "fourteen"),
    (13, "thirteen"),
    (12, "twelve"),
    (11, "eleven"),
    (10, "ten"),
    (9, "nine"),
    (8, "eight"),
    (7, "seven"),
    (6, "six"),
    (5, "five"),
    (4, "four"),
    (3, "three"),
    (2, "two"),
    (1, "one"),
)


def word(n: int) -> str:
    """Spell out *n* in English.

    Examples:
        >>> word(0)
        'zero'
        >>> word(-5)
        'negative five'
        >>> word(7232)
        'seven thousand two hundred and thirty-two'
    """
    if n == 0:
        return ZERO_WORD
    if n < 0:
        return f"{NEGATIVE_WORD} {word(-n)}"

    out = ""
    for magnitude, name in WORD_UNITS:
        instances, n = divmod(n, magnitude)
        if not instances:
            continue

        if out and not out.endswith("-"):
            out += " and " if magnitude < 100 else " "

        if instances == 1:
            if magnitude >= 100:
                out += "one "
            out += name
            # Compound tens: "sixty-nine".
            if magnitude < 100 and n:
                out += "-"
        else:
            out += f"{word(instances)} {name}"
    return out


def word_float(n: int | float, precision: int) -> str:
    """Spell out *n* with *precision* digits after the decimal point.

    The whole part goes through :func:`word`. Each fractional digit is the
    integer part of the remaining fraction times ten. The fraction is read
    from ``str(n)`` so binary float noise does not show up as digits.

    Examples:
        >>> word_float(3.14, 2)
        'three point one four'
        >>> word_float(12, 0)
        'twelve'
        >>> word_float(-0.5, 1)
        'negative zero point five'

    Raises:
        NegativeInputError: *precision* is negative.
    """
    if precision < 0:
        msg = f"Precision cannot be negative. Got {precision}."
        raise NegativeInputError(msg, precision=precision)

    value = Decimal(str(n))
    whole = int(value)
    text = word(whole)
    if value < 0 and whole == 0:
        text = f"{NEGATIVE_WORD} {text}"
    if precision == 0:
        return text

    fraction = abs(value - whole)
    digits: list[str] = []
    for _ in range(precision):
        fraction *= 10
        digit = int(fraction)
        fraction -= digit
        digits.append(DIGIT_WORDS[digit])
    return f"{text} {POINT_WORD} {' '.join(digits)}"
