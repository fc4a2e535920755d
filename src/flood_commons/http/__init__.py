"""HTTP – request descriptors, builders and HTTP/1.1 rendering."""
from flood_commons.http.builder import build_get, build_post, build_request, dump_json
from flood_commons.http.generator import RequestFactory, RequestGenerator
from flood_commons.http.query import encode_component, encode_uri_params
from flood_commons.http.request import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    HttpMethod,
    RequestArgs,
    RequestDescriptor,
)
from flood_commons.http.wire import WireRequest, render_request, validate_request

__all__ = [
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "HttpMethod",
    "RequestArgs",
    "RequestDescriptor",
    "RequestFactory",
    "RequestGenerator",
    "WireRequest",
    "build_get",
    "build_post",
    "build_request",
    "dump_json",
    "encode_component",
    "encode_uri_params",
    "render_request",
    "validate_request",
]
