"""HTTP – GET/POST request descriptor builders.

The builders are forgiving: absent fields take defaults and nothing about the
input is validated.  The only failure is a body that cannot be serialised,
reported as :class:`~flood_commons.kernel.errors.SerializationError`.

Usage::

    build_get({"path": "/search", "qs": {"q": "flood"}})
    build_post(RequestArgs(path="/login", params={"user": "u", "pw": "p"}))
"""
from __future__ import annotations

import json as jsonlib
from collections.abc import Mapping
from typing import Any

from flood_commons.http.query import encode_uri_params
from flood_commons.http.request import (
    DEFAULT_PATH,
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    HttpMethod,
    RequestArgs,
    RequestDescriptor,
)
from flood_commons.kernel.errors import SerializationError

ArgsLike = RequestArgs | Mapping[str, Any] | None


def _base(args: RequestArgs) -> tuple[str, dict[str, str]]:
    path = args.path if args.path is not None else DEFAULT_PATH
    headers = dict(args.headers) if args.headers is not None else {}
    if args.qs is not None:
        path = f"{path}?{encode_uri_params(args.qs)}"
    return path, headers


def dump_json(value: Any) -> str:
    """Compact JSON text, keys in insertion order, non-ASCII kept as-is."""
    try:
        return jsonlib.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"JSON serialization failed for {type(value).__name__} body: {exc}",
            payload_type=type(value).__name__,
            cause=exc,
        ) from exc


def build_get(args: ArgsLike = None) -> RequestDescriptor:
    """Build a GET descriptor; the body is always empty."""
    path, headers = _base(RequestArgs.coerce(args))
    return RequestDescriptor(method=HttpMethod.GET, path=path, headers=headers, body="")


def build_post(args: ArgsLike = None) -> RequestDescriptor:
    """Build a POST descriptor.

    ``params`` produces a form-urlencoded body, otherwise ``json`` produces a
    JSON body, otherwise the body is empty and no ``Content-Type`` is set.
    The query string from ``qs`` is applied independently of the body.
    """
    request_args = RequestArgs.coerce(args)
    path, headers = _base(request_args)
    body = ""
    if request_args.params is not None:
        headers["Content-Type"] = FORM_CONTENT_TYPE
        body = encode_uri_params(request_args.params)
    elif request_args.json is not None:
        headers["Content-Type"] = JSON_CONTENT_TYPE
        body = dump_json(request_args.json)
    return RequestDescriptor(method=HttpMethod.POST, path=path, headers=headers, body=body)


_BUILDERS = {
    HttpMethod.GET: build_get,
    HttpMethod.POST: build_post,
}


def build_request(method: HttpMethod | str, args: ArgsLike = None) -> RequestDescriptor:
    """Dispatch to :func:`build_get` or :func:`build_post`.

    Raises:
        ValueError: if *method* is not GET or POST.
    """
    if not isinstance(method, HttpMethod):
        method = HttpMethod(method.upper())
    return _BUILDERS[method](args)


__all__ = ["build_get", "build_post", "build_request", "dump_json"]
