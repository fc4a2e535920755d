"""httpx adapter."""
from flood_commons.adapters.httpx.request import to_httpx_request

__all__ = ["to_httpx_request"]
