"""Security headers middleware for a read-only JSON API.

The strict CSP is skipped on the interactive docs pages, which load scripts.
"""

from typing import Callable, Iterable

DEFAULT_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}
DOCS_PATHS = ("/docs", "/redoc")


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    csp_exempt_paths: Iterable[str] = DOCS_PATHS,
) -> Callable:
    """Set security headers on responses that do not already carry them. Raw ASGI."""
    resolved = headers if headers is not None else DEFAULT_HEADERS.copy()
    full = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]
    without_csp = [h for h in full if h[0] != b"content-security-policy"]
    exempt = tuple(csp_exempt_paths)

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        path = scope.get("path", "")
        header_list = without_csp if path.startswith(exempt) else full

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {name.lower() for name, _ in headers}
                headers.extend(h for h in header_list if h[0] not in seen)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
