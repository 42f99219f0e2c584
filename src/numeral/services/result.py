"""ServiceResult and ServiceError: what every ConvertService call returns.

A conversion either succeeds with ``data["output"]`` holding the rendered
string, or fails with an ``error`` whose ``code`` is one of
:class:`~numeral.domain.errors.ErrorCode`. Domain exceptions never cross
this boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from numeral.domain.errors import NumeralError


class ServiceError(BaseModel):
    """Why a conversion was refused."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: NumeralError) -> ServiceError:
        return cls(code=exc.code.value, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Outcome of one conversion.

    Attributes:
        ok: Whether the conversion produced output.
        op: Service method name, e.g. ``"roman"``.
        data: Input echo plus ``output`` on success.
        warnings: Output was produced but is non-standard.
        error: Set when ``ok`` is False.
        meta: Span telemetry when enabled.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls, op: str, output: str, *, warnings: list[str] | None = None, **data: Any
    ) -> ServiceResult:
        return cls(ok=True, op=op, data={**data, "output": output}, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, exc: NumeralError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))

    @property
    def output(self) -> str | None:
        """The converted string, or None for a failed result."""
        return self.data.get("output") if self.ok else None
