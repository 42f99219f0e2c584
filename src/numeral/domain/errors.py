"""Error codes and exceptions raised by the domain converters.

Every failure is a :class:`NumeralError` carrying a stable
:class:`ErrorCode`. The service layer turns these into ``ServiceError``
payloads without inspecting the message text.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar


class ErrorCode(StrEnum):
    """Stable identifiers for every conversion failure."""

    NEGATIVE_INPUT = "NEGATIVE_INPUT"
    ZERO_INPUT = "ZERO_INPUT"
    EMPTY_ALPHABET = "EMPTY_ALPHABET"
    ALPHABET_TOO_SHORT = "ALPHABET_TOO_SHORT"
    INVALID_ALPHABET = "INVALID_ALPHABET"


class NumeralError(ValueError):
    """Base class for conversion failures.

    Attributes:
        code: The :class:`ErrorCode` for this failure kind.
        detail: Offending values, safe to serialize.
    """

    code: ClassVar[ErrorCode]

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class NegativeInputError(NumeralError):
    code = ErrorCode.NEGATIVE_INPUT


class ZeroInputError(NumeralError):
    code = ErrorCode.ZERO_INPUT


class EmptyAlphabetError(NumeralError):
    code = ErrorCode.EMPTY_ALPHABET


class AlphabetTooShortError(NumeralError):
    code = ErrorCode.ALPHABET_TOO_SHORT


class InvalidAlphabetError(NumeralError):
    code = ErrorCode.INVALID_ALPHABET
