"""HTTP – RequestGenerator: turns a user request factory into wire bytes."""
from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from flood_commons.config.settings import FloodSettings
from flood_commons.http.request import RequestDescriptor
from flood_commons.http.wire import render_request, validate_request
from flood_commons.kernel.errors import InvalidRequestError, RequestFactoryError
from flood_commons.observability.logging import get_logger

RequestFactory = Callable[[], RequestDescriptor | Mapping[str, Any]]

_log = get_logger(__name__)


class RequestGenerator:
    """Produce rendered HTTP/1.1 requests from a zero-argument *factory*.

    Call :meth:`check` once before load starts so a broken factory fails
    early::

        def new_request():
            return build_get({"path": "/item/" + rand_digit_string(6)})

        gen = RequestGenerator(new_request, FloodSettings(host="example.com"))
        gen.check()
        payloads = gen.take(100)
    """

    def __init__(self, factory: RequestFactory, settings: FloodSettings | None = None) -> None:
        self._factory = factory
        self._settings = settings or FloodSettings()
        self._generated = 0
        self._log = _log.bind(host=self._settings.host)

    @property
    def settings(self) -> FloodSettings:
        return self._settings

    @property
    def generated(self) -> int:
        """Number of requests rendered so far (including the :meth:`check` probe)."""
        return self._generated

    def _produce(self) -> bytes:
        try:
            request = self._factory()
        except Exception as exc:
            raise RequestFactoryError(
                f"Request factory raised {type(exc).__name__}: {exc}", cause=exc
            ) from exc
        try:
            wire = validate_request(request)
        except InvalidRequestError as exc:
            self._log.warning("request_generator.invalid_request", error=exc.message, field=exc.field)
            raise
        data = render_request(wire, self._settings)
        self._generated += 1
        return data

    def check(self) -> bytes:
        """Run the factory once and return the rendered probe request."""
        data = self._produce()
        self._log.info("request_generator.checked", size=len(data))
        return data

    def next_request(self) -> bytes:
        return self._produce()

    def take(self, count: int) -> list[bytes]:
        return [self._produce() for _ in range(count)]

    def __iter__(self) -> Iterator[bytes]:
        while True:
            yield self._produce()


__all__ = ["RequestFactory", "RequestGenerator"]
