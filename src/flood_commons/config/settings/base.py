"""Config settings – Settings base class and FloodSettings."""
from __future__ import annotations

import dataclasses

from flood_commons.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FloodSettings(Settings):
    """Values stamped onto every rendered HTTP/1.1 request.

    ``accept``, ``user_agent`` and ``default_content_type`` are only written
    when the request does not carry its own header of that name.
    ``keep_alive`` selects the ``Connection`` header (``keep-alive`` or
    ``close``).
    """

    _prefix: dataclasses.ClassVar[str] = "FLOOD"

    host: str = "localhost"
    user_agent: str = "flood"
    accept: str = "*/*"
    default_content_type: str = "text/plain"
    keep_alive: bool = True

    def _validate(self) -> None:
        if not self.host.strip():
            raise InvalidSettingValueError("host", self.host, "must not be empty")


__all__ = ["FloodSettings", "Settings"]
