"""Root error class for the flood-commons error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Subclasses keep their structured fields (``payload_type``, ``field``,
    ``errors`` ...) in :attr:`detail`; :meth:`to_dict` flattens them next to
    ``code`` and ``message`` so they survive into logs and ``str()``.

    Args:
        message: Human-readable description.
        detail: Structured context; ``None`` values are dropped.
        cause: Original exception, chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = {k: v for k, v in (detail or {}).items() if v is not None}
        if cause is not None:
            self.__cause__ = cause

    @property
    def code(self) -> str:
        return self.default_code

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, **self.detail}
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
