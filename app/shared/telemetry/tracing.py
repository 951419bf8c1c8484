"""Span helpers for search code paths.

Both helpers are no-ops when no tracer provider is registered, so the
search core can call them unconditionally.
"""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

AttributeValue = str | int | float | bool


def traced(span_name: str, **static_attributes: AttributeValue) -> Callable:
    """Run an async function inside a span named span_name.

    Failures are recorded on the span (exception type as status
    description) and re-raised unchanged. Query text is never recorded.

    Args:
        span_name: Span name, e.g. "search.optimized.execute".
        **static_attributes: Attributes set on every span.
    """

    def decorator(func: Callable) -> Callable:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"traced() supports async functions only: {func.__qualname__}")
        tracer = trace.get_tracer(func.__module__)

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(
                span_name,
                attributes=static_attributes or None,
                record_exception=False,
                set_status_on_exception=False,
            ) as span:
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.record_exception(e)
                    span.set_status(Status(StatusCode.ERROR, type(e).__name__))
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper

    return decorator


def add_span_attributes(**attributes: AttributeValue) -> None:
    """Set attributes on the current span if it is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(attributes)
