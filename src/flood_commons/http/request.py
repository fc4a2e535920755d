"""HTTP – request arguments and request descriptors."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any, Final

DEFAULT_PATH: Final = "/"

FORM_CONTENT_TYPE: Final = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE: Final = "application/json"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


@dataclasses.dataclass(frozen=True)
class RequestArgs:
    """Declarative input for the request builders.

    Every field is optional; ``None`` means absent.  Absent ``path`` becomes
    ``"/"`` and absent ``headers`` an empty dict.  When both ``params`` and
    ``json`` are given, ``params`` wins.
    """

    path: str | None = None
    headers: Mapping[str, str] | None = None
    qs: Mapping[str, Any] | None = None
    params: Mapping[str, Any] | None = None
    json: Any | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RequestArgs":
        """Build from a loose mapping, ignoring keys that are not fields."""
        names = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    @classmethod
    def coerce(cls, args: "RequestArgs | Mapping[str, Any] | None") -> "RequestArgs":
        if args is None:
            return cls()
        if isinstance(args, RequestArgs):
            return args
        return cls.from_mapping(args)


@dataclasses.dataclass
class RequestDescriptor:
    """Normalized request handed to a transport: method, path, headers, body.

    ``path`` is a relative URI reference including any query string.
    ``headers`` is owned by the descriptor and never aliases caller input;
    scripts may amend it (or ``body``) before handing the request on.
    A plain ``"GET"``/``"POST"`` string for ``method`` is converted to
    :class:`HttpMethod`; any other method raises ``ValueError``.
    """

    method: HttpMethod
    path: str
    headers: dict[str, str] = dataclasses.field(default_factory=dict)
    body: str = ""

    def __post_init__(self) -> None:
        self.method = HttpMethod(self.method)

    @property
    def content_type(self) -> str | None:
        return self.headers.get("Content-Type")

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method.value if isinstance(self.method, HttpMethod) else self.method,
            "path": self.path,
            "headers": dict(self.headers),
            "body": self.body,
        }


__all__ = [
    "DEFAULT_PATH",
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "HttpMethod",
    "RequestArgs",
    "RequestDescriptor",
]
