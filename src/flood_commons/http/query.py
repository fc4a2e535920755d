"""HTTP – query string / form body encoding."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from flood_commons.kernel.errors import SerializationError

# Characters left untouched by URI-component encoding, besides ASCII alphanumerics.
_UNRESERVED = "-_.!~*'()"


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def encode_component(value: Any) -> str:
    """Percent-encode a single key or value (space becomes ``%20``).

    Non-string values go through ``str()`` except ``bool`` (``true``/``false``)
    and ``None`` (``null``), so ``1.0`` encodes as ``1.0``, not ``1``.  Pass
    strings when the exact text matters.
    """
    text = _stringify(value)
    try:
        return quote(text, safe=_UNRESERVED, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise SerializationError(
            f"Cannot percent-encode {text!r}: not valid UTF-8 text",
            payload_type=type(value).__name__,
            cause=exc,
        ) from exc


def encode_uri_params(params: Mapping[str, Any]) -> str:
    """Encode *params* as ``k1=v1&k2=v2`` in the mapping's iteration order."""
    return "&".join(
        f"{encode_component(key)}={encode_component(value)}"
        for key, value in params.items()
    )


__all__ = ["encode_component", "encode_uri_params"]
