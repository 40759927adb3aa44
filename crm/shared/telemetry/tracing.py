"""Span helpers for application code.

Without a configured tracer provider the OpenTelemetry API hands out no-op
spans, so decorated code runs unchanged when telemetry is off.
"""

import inspect
from collections.abc import Awaitable, Callable, Iterable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

P = ParamSpec("P")
R = TypeVar("R")

# Arguments that are safe to record. Search text is user content and never is.
DEFAULT_RECORDED_ARGS = ("limit",)


def traced(
    span_name: str, record_args: Iterable[str] = DEFAULT_RECORDED_ARGS
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Run an async function inside a span named span_name.

    Arguments named in record_args are set as "arg.<name>" attributes when
    present in the call (positionally or by keyword). Exceptions mark the
    span as failed and are re-raised.
    """
    recorded = tuple(record_args)

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        tracer = trace.get_tracer(func.__module__)
        signature = inspect.signature(func)

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with tracer.start_as_current_span(
                span_name, record_exception=False, set_status_on_exception=False
            ) as span:
                _record_args(span, signature, recorded, args, kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, type(e).__name__))
                    span.record_exception(e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper

    return decorator


def _record_args(
    span: trace.Span,
    signature: inspect.Signature,
    names: tuple[str, ...],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> None:
    if not names or not span.is_recording():
        return
    bound = signature.bind_partial(*args, **kwargs)
    for name in names:
        if name in bound.arguments:
            span.set_attribute(f"arg.{name}", str(bound.arguments[name]))


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span (no-op when nothing is recording)."""
    span = trace.get_current_span()
    if span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
