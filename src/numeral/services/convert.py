"""ConvertService: every numeral conversion as a ServiceResult.

Wraps the pure converters in :mod:`numeral.domain` and applies
:class:`~numeral.config.settings.NumeralSettings` (alphabet strictness,
default word precision, byte-size thresholds). Domain failures come back
as ``ok=False`` results carrying the failure's :class:`ErrorCode`; any
other exception propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from numeral.config.settings import NumeralSettings
from numeral.domain.bytesize import format_bytes
from numeral.domain.errors import NumeralError
from numeral.domain.graphemes import split_graphemes
from numeral.domain.positional import ALPHA_ALPHABET, encode
from numeral.domain.roman import ROMAN_STANDARD_MAX, roman
from numeral.domain.words import word, word_float
from numeral.services.result import ServiceResult
from numeral.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class ConvertService:
    """Runs numeral conversions and reports them as ServiceResult values.

    Usage::

        service = ConvertService()
        result = service.roman(1991)
        if result.ok:
            print(result.output)  # MCMXCI
    """

    def __init__(self, settings: NumeralSettings | None = None) -> None:
        self._settings = settings or NumeralSettings.load()

    @property
    def settings(self) -> NumeralSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _run(
        op: str,
        convert: Callable[[], str],
        data: dict[str, Any],
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Call *convert* and package its output or its NumeralError."""
        try:
            output = convert()
        except NumeralError as exc:
            logger.debug("%s failed: %s %s", op, exc.code, exc.message)
            return ServiceResult.failure(op, exc)
        return ServiceResult.success(op, output, warnings=warnings, **data)

    # ------------------------------------------------------------------
    # Positional encodings
    # ------------------------------------------------------------------

    @traced
    def encode(self, n: int, alphabet: str, *, strict: bool | None = None) -> ServiceResult:
        """Encode *n* using *alphabet* as its numerals.

        Args:
            n: Non-negative integer to encode.
            alphabet: Numeral set, zero digit first.
            strict: Override ``[encode] strict`` for this call.
        """
        if strict is None:
            strict = self._settings.encode.strict

        def _convert() -> str:
            with trace_span("positional_encode") as span:
                output = encode(n, alphabet, strict=strict)
                if span is not None:
                    span.annotate("digits", len(split_graphemes(output)))
            return output

        return self._run("encode", _convert, {"input": n, "alphabet": alphabet})

    @traced
    def alpha(self, n: int) -> ServiceResult:
        """Encode *n* in base 52 over ``A-Za-z``."""
        return self._run("alpha", lambda: encode(n, ALPHA_ALPHABET), {"input": n})

    # ------------------------------------------------------------------
    # Table-lookup renderings
    # ------------------------------------------------------------------

    @traced
    def roman(self, n: int) -> ServiceResult:
        """Render *n* as a Roman numeral.

        Values above 3999 still convert but carry a warning, since they
        rely on repeating "M".
        """
        warnings: list[str] = []
        if n > ROMAN_STANDARD_MAX:
            warnings.append(f"{n} exceeds {ROMAN_STANDARD_MAX}; repeating 'M' is non-standard")
        return self._run("roman", lambda: roman(n), {"input": n}, warnings=warnings)

    @traced
    def word(self, n: int) -> ServiceResult:
        """Spell out *n* in English."""
        return self._run("word", lambda: word(n), {"input": n})

    @traced
    def word_float(self, n: int | float, precision: int | None = None) -> ServiceResult:
        """Spell out *n* with *precision* decimal digits.

        *precision* defaults to ``[words] precision``.
        """
        if precision is None:
            precision = self._settings.words.precision
        return self._run(
            "word_float",
            lambda: word_float(n, precision),
            {"input": n, "precision": precision},
        )

    @traced
    def format_bytes(self, n: int) -> ServiceResult:
        """Render a byte count with the largest fitting unit."""
        sizes = self._settings.sizes
        return self._run(
            "format_bytes",
            lambda: format_bytes(n, threshold=sizes.threshold, margin=sizes.margin),
            {"input": n},
        )
