"""Request ID middleware.

Forwards a client X-Request-ID when it is safe to log, otherwise issues a new
one. The value is stored on scope state and echoed on the response.
Raw ASGI (no BaseHTTPMiddleware) so streaming responses are untouched.
"""

from typing import Callable

from app.middleware.headers import append_header, clean_trace_id, new_trace_id, read_header


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request ID on each request and response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = clean_trace_id(read_header(scope, header_name)) or new_trace_id()
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                append_header(message, header_name, request_id)
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
