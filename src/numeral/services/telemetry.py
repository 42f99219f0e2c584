"""Span telemetry for ConvertService calls.

Off by default. While off, ``@traced`` and ``trace_span`` cost one
ContextVar lookup. While on, each traced call builds a span tree (the
service method at the root, stages such as ``positional_encode`` below it),
attaches it to ``ServiceResult.meta["telemetry"]`` and logs a
``span.complete`` event.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from numeral.services.result import ServiceResult

log = structlog.get_logger("numeral.telemetry")

# ── Context variables ────────────────────────────────────────────────

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)


# ── Span ─────────────────────────────────────────────────────────────


@dataclass
class Span:
    """One timed stage of a conversion."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            out["annotations"] = dict(self.annotations)
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


# ── Nested stages ────────────────────────────────────────────────────


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Open a child span under the active one.

    Yields None when telemetry is off or nothing is being traced, so
    callers guard annotations with ``if span is not None``.
    """
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name, parent=parent)
    parent.children.append(child)
    token = _current_span.set(child)
    try:
        yield child
    finally:
        child.end()
        _current_span.reset(token)


# ── @traced ──────────────────────────────────────────────────────────


def _log_span(span: Span, *, ok: bool, error: str | None = None) -> None:
    fields: dict[str, Any] = {
        "span_name": span.name,
        "duration_ms": round(span.duration_ms, 3),
        "ok": ok,
        "children": len(span.children),
    }
    if error is not None:
        fields["error"] = error
    log.debug("span.complete", **fields)


def _with_telemetry(result: ServiceResult, span: Span) -> ServiceResult:
    """Copy *result* with the span tree merged into its meta."""
    meta = {**(result.meta or {}), "telemetry": span.to_dict()}
    return result.model_copy(update={"meta": meta})


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and attach its span tree to the returned result.

    A failed ``ServiceResult`` is traced like a successful one and logged
    with its error code. An exception escaping *func* is logged with its
    type name and re-raised.
    """

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        span = Span(name=func.__qualname__)
        token = _current_span.set(span)
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            span.end()
            _current_span.reset(token)
            _log_span(span, ok=False, error=type(exc).__name__)
            raise

        span.end()
        _current_span.reset(token)
        if not isinstance(result, ServiceResult):
            _log_span(span, ok=True)
            return result

        error = result.error.code if result.error is not None else None
        _log_span(span, ok=result.ok, error=error)
        return _with_telemetry(result, span)  # type: ignore[return-value]

    return wrapper


# ── Switches ─────────────────────────────────────────────────────────


def enable_telemetry() -> None:
    """Turn span telemetry on for the current context."""
    _enabled.set(True)


def disable_telemetry() -> None:
    """Turn span telemetry off for the current context."""
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The active span, for manual annotation; None when telemetry is off."""
    if not _enabled.get():
        return None
    return _current_span.get()
