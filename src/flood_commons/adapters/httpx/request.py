"""httpx adapter – build an ``httpx.Request`` from a descriptor."""
from __future__ import annotations

import httpx

from flood_commons.http.request import RequestDescriptor


def to_httpx_request(descriptor: RequestDescriptor, base_url: str) -> httpx.Request:
    """Return an unsent ``httpx.Request`` for ``base_url`` + ``descriptor.path``.

    The body is sent as UTF-8 ``content``; httpx adds ``Content-Length``
    and ``Host``.
    """
    url = base_url.rstrip("/") + descriptor.path
    content = descriptor.body.encode("utf-8") if descriptor.body else None
    return httpx.Request(
        descriptor.method.value,
        url,
        headers=descriptor.headers,
        content=content,
    )


__all__ = ["to_httpx_request"]
