"""Infrastructure errors — encoding and serialisation failures."""

from __future__ import annotations

from typing import Any

from flood_commons.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Failure that is not a rule violation by the caller."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """A request body or query value could not be encoded.

    ``payload_type`` names the Python type that failed.
    """

    default_code = "serialization_error"

    def __init__(self, message: str, *, payload_type: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, detail={"payload_type": payload_type}, **kwargs)

    @property
    def payload_type(self) -> str | None:
        return self.detail.get("payload_type")


__all__ = ["InfrastructureError", "SerializationError"]
