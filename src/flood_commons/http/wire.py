"""HTTP – validation of user-built requests and HTTP/1.1 rendering.

A load script returns either a :class:`RequestDescriptor` or a plain mapping
with ``method``, ``path``, ``headers`` and ``body``.  :func:`validate_request`
checks that shape and :func:`render_request` turns it into the bytes written
to the socket::

    GET /x?a=1 HTTP/1.1\\r\\n
    Host: localhost\\r\\n
    Connection: keep-alive\\r\\n
    Accept: */*\\r\\n
    User-Agent: flood\\r\\n
    Content-Type: text/plain\\r\\n
    Content-Length: 0\\r\\n
    \\r\\n
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any, Final

from flood_commons.config.settings import FloodSettings
from flood_commons.http.request import RequestDescriptor
from flood_commons.kernel.errors import InvalidRequestError

REQUIRED_KEYS: Final = ("method", "path", "headers", "body")

# Written by the renderer itself; user values for these are dropped.
_RESERVED_HEADERS: Final = frozenset({"host", "connection", "content-length"})


@dataclasses.dataclass(frozen=True)
class WireRequest:
    """A request whose shape has been checked and can be rendered."""

    method: str
    path: str
    headers: dict[str, str]
    body: str


def _expect_str(value: Any, field: str, message: str) -> str:
    if not isinstance(value, str):
        raise InvalidRequestError(message, field=field)
    return value


def validate_request(request: RequestDescriptor | Mapping[str, Any]) -> WireRequest:
    """Check the shape of *request* and return it as a :class:`WireRequest`.

    Raises:
        InvalidRequestError: on a missing key or a value of the wrong type.
    """
    if isinstance(request, RequestDescriptor):
        data: Mapping[str, Any] = request.to_dict()
    elif isinstance(request, Mapping):
        data = request
    else:
        raise InvalidRequestError(
            f"Request must be a mapping or RequestDescriptor, got {type(request).__name__}"
        )

    for key in REQUIRED_KEYS:
        if key not in data:
            raise InvalidRequestError(f"Returned object must contain `{key}`", field=key)

    method = data["method"]
    if isinstance(method, Enum):
        method = method.value
    method = _expect_str(method, "method", "`method` must be a string")
    path = _expect_str(data["path"], "path", "`path` must be a string")
    body = _expect_str(data["body"], "body", "`body` must be a string")

    raw_headers = data["headers"]
    if not isinstance(raw_headers, Mapping):
        raise InvalidRequestError("`headers` must be an object", field="headers")
    headers: dict[str, str] = {}
    for name, value in raw_headers.items():
        headers[_expect_str(name, "headers", "header name must be a string")] = _expect_str(
            value, "headers", "header value must be a string"
        )

    return WireRequest(method=method, path=path, headers=headers, body=body)


def render_request(
    request: RequestDescriptor | Mapping[str, Any] | WireRequest,
    settings: FloodSettings | None = None,
) -> bytes:
    """Render *request* as raw HTTP/1.1 bytes for ``settings.host``."""
    settings = settings or FloodSettings()
    wire = request if isinstance(request, WireRequest) else validate_request(request)

    lines = [
        f"{wire.method} {wire.path} HTTP/1.1",
        f"Host: {settings.host}",
        f"Connection: {'keep-alive' if settings.keep_alive else 'close'}",
    ]
    seen: set[str] = set()
    for name, value in wire.headers.items():
        lowered = name.lower()
        if lowered in _RESERVED_HEADERS:
            continue
        seen.add(lowered)
        lines.append(f"{name}: {value}")

    if "accept" not in seen:
        lines.append(f"Accept: {settings.accept}")
    if "user-agent" not in seen:
        lines.append(f"User-Agent: {settings.user_agent}")
    if "content-type" not in seen:
        lines.append(f"Content-Type: {settings.default_content_type}")

    body = wire.body.encode("utf-8")
    lines.append(f"Content-Length: {len(body)}")
    head = "\r\n".join(lines) + "\r\n\r\n"
    return head.encode("utf-8") + body


__all__ = ["REQUIRED_KEYS", "WireRequest", "render_request", "validate_request"]
