"""Domain errors — invalid arguments and malformed requests."""

from __future__ import annotations

from typing import Any

from flood_commons.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when caller input breaks a rule of the library."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """An argument is outside the range an operation accepts.

    ``errors`` lists field-level failures as ``{"field": ..., "reason": ...}``.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(message, detail={"errors": errors or []}, **kwargs)

    @property
    def errors(self) -> list[dict[str, Any]]:
        return self.detail["errors"]


class InvalidRequestError(DomainError):
    """A request descriptor returned by user code has the wrong shape."""

    default_code = "invalid_request"

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, detail={"field": field}, **kwargs)

    @property
    def field(self) -> str | None:
        return self.detail.get("field")


__all__ = ["DomainError", "InvalidRequestError", "ValidationError"]
