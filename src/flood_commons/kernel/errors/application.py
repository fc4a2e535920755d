"""Application-layer errors."""

from __future__ import annotations

from flood_commons.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Failure in how the library is wired together by the caller."""

    default_code = "application_error"


class RequestFactoryError(ApplicationError):
    """A user-supplied request factory raised while producing a request."""

    default_code = "request_factory_error"


__all__ = ["ApplicationError", "RequestFactoryError"]
