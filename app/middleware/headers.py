"""Raw ASGI header helpers shared by the middleware."""

import re
import uuid

# Safe for logging: alphanumeric, hyphen, underscore, dot; bounded length.
TRACE_ID_MAX_LENGTH = 64
TRACE_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_.-]{1,%d}$" % TRACE_ID_MAX_LENGTH)


def read_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == want:
            return value.decode("utf-8", errors="replace")
    return None


def clean_trace_id(raw: str | None) -> str | None:
    """Return the stripped value if it is safe to log, otherwise None."""
    if raw is None:
        return None
    value = raw.strip()
    if not TRACE_ID_PATTERN.match(value):
        return None
    return value


def new_trace_id() -> str:
    return str(uuid.uuid4())


def append_header(message: dict, name: str, value: str) -> None:
    """Append a header to an http.response.start message in place."""
    headers = list(message.get("headers", []))
    headers.append((name.encode(), value.encode()))
    message["headers"] = headers
