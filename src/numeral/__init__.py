"""Numeral-representation converters.

Turns base-10 integers into Roman numerals, English words, human-readable
byte sizes, and positional encodings over any alphabet of graphemes.

Example
-------
>>> from numeral import encode, roman, word
>>> encode(4, "世界")
'界世世'
>>> roman(1991)
'MCMXCI'
>>> word(69)
'sixty-nine'
"""

from numeral.config.logging import configure_logging, configure_logging_from
from numeral.config.settings import NumeralSettings
from numeral.domain.alphabet import validate_alphabet
from numeral.domain.bytesize import format_bytes
from numeral.domain.errors import (
    AlphabetTooShortError,
    EmptyAlphabetError,
    ErrorCode,
    InvalidAlphabetError,
    NegativeInputError,
    NumeralError,
    ZeroInputError,
)
from numeral.domain.graphemes import split_graphemes
from numeral.domain.positional import ALPHA_ALPHABET, alpha, encode
from numeral.domain.roman import roman
from numeral.domain.words import word, word_float
from numeral.services.convert import ConvertService
from numeral.services.result import ServiceError, ServiceResult

__version__ = "1.0.0"

__all__ = [
    # Converters
    "alpha",
    "encode",
    "format_bytes",
    "roman",
    "word",
    "word_float",
    # Helpers
    "ALPHA_ALPHABET",
    "split_graphemes",
    "validate_alphabet",
    # Errors
    "AlphabetTooShortError",
    "EmptyAlphabetError",
    "ErrorCode",
    "InvalidAlphabetError",
    "NegativeInputError",
    "NumeralError",
    "ZeroInputError",
    # Service layer
    "ConvertService",
    "ServiceError",
    "ServiceResult",
    # Config
    "NumeralSettings",
    "configure_logging",
    "configure_logging_from",
]
