from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

from httpx import URL

from ._json import JSON


@runtime_checkable
class Domain(Protocol):
    """Root of an API: every endpoint path is resolved against `base_url`."""

    @property
    def base_url(self) -> URL: ...


@dataclass(frozen=True)
class URLDomain:
    base_url: URL

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, URL):
            object.__setattr__(self, "base_url", URL(self.base_url))


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestContent:
    """Body of a request: a JSON value, or nothing at all."""

    payload: Optional[JSON] = None

    @classmethod
    def json(
        cls, value: Union[JSON, Mapping[str, Any], Sequence[Any]]
    ) -> "RequestContent":
        return cls(payload=value if isinstance(value, JSON) else JSON(value))

    @classmethod
    def from_dict(cls, dictionary: Mapping[str, Any]) -> "RequestContent":
        return cls(payload=JSON(dict(dictionary)))

    @classmethod
    def none(cls) -> "RequestContent":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.payload is None

    @property
    def http_header_field(self) -> Optional[str]:
        if self.payload is None:
            return None
        return "application/json"
