"""Keyed, typed access to JSON objects.

Each scalar type has two accessors: ``get_<type>`` returns ``None`` on any
failure, ``require_<type>`` raises a :class:`RestKitError` subclass describing
what went wrong. Keys are plain strings or any object exposing ``coding_key``,
typically a :class:`CodingKeys` enum naming the fields of a model:

```python
class Keys(CodingKeys):
    NAME = "name"
    NICKNAME = "nickname"

name = payload.require_string(Keys.NAME)
nickname = payload.get_string(Keys.NICKNAME)
```
"""

import re
from datetime import datetime
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Iterable,
    Optional,
    Protocol,
    TypeVar,
    Union,
    runtime_checkable,
)

from httpx import URL, InvalidURL
from pydantic import AnyUrl, TypeAdapter, ValidationError

from .models.errors import (
    AwkwardURLError,
    FailedToInitializeRawRepresentableError,
    NoValueForKeyError,
    WrongDateFormatError,
)

if TYPE_CHECKING:
    from ._json import JSON

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

DateFormat = Union[str, Callable[[str], Optional[datetime]]]


@runtime_checkable
class KeyCodable(Protocol):
    @property
    def coding_key(self) -> str: ...


class CodingKeys(str, Enum):
    """Enum base whose member values are the wire-format field names."""

    @property
    def coding_key(self) -> str:
        return self.value


Key = Union[str, KeyCodable]


def coding_key_name(key: Key) -> str:
    if isinstance(key, str) and not isinstance(key, Enum):
        return key
    if isinstance(key, KeyCodable):
        return key.coding_key
    if isinstance(key, Enum) and isinstance(key.value, str):
        return key.value
    raise TypeError(f"{key!r} cannot be used as a JSON key")


_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

# RFC 3986 unreserved and reserved characters, plus percent-escapes
_URL_REFERENCE = re.compile(r"(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})+")


def parse_url(value: str) -> Optional[URL]:
    """Return the URL for `value`, or None if it is not syntactically a URL.

    Absolute URLs are validated by pydantic; relative references such as
    ``/images/a.png`` are accepted when they only hold legal URL characters.
    """
    try:
        _url_adapter.validate_python(value)
        return URL(value)
    except (ValidationError, InvalidURL):
        pass

    if not _URL_REFERENCE.fullmatch(value):
        return None
    try:
        return URL(value)
    except InvalidURL:
        return None


def _matches_member_type(enum_type: type[Enum], raw_value: Any) -> bool:
    # exact types, so bool, int and float never stand in for one another
    return type(raw_value) in {type(member.value) for member in enum_type}


def parse_date(value: str, date_format: DateFormat) -> Optional[datetime]:
    """Parse `value` with a strptime format or a parsing callable."""
    try:
        if isinstance(date_format, str):
            return datetime.strptime(value, date_format)
        return date_format(value)
    except ValueError:
        return None


class KeyedAccessMixin:
    __slots__ = ()

    def __getitem__(self, key: Any) -> "JSON":
        raise NotImplementedError

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Key, Any]]) -> "JSON":
        """Build a JSON object from (key, value) pairs. Later duplicates win."""
        dictionary: dict[str, Any] = {}
        for key, value in pairs:
            dictionary[coding_key_name(key)] = value
        return cls(dictionary)  # type: ignore[call-arg, return-value]

    @classmethod
    def from_key_codables(cls, *pairs: tuple[Key, Any]) -> "JSON":
        return cls.from_pairs(pairs)

    def require(self, key: Key, modifier: Callable[["JSON"], Optional[T]]) -> T:
        value = modifier(self[key])
        if value is None:
            raise NoValueForKeyError(coding_key_name(key))
        return value

    def require_value(self, key: Key, value_type: Any) -> Any:
        """Decode the value under `key` into `value_type`.

        `value_type` may be anything :func:`convenient_restkit.decode` accepts:
        a `JSONInitializable` subclass, a pydantic model, or a list of either.
        """
        from ._coding import decode

        node = self[key]
        if not node.exists():
            raise NoValueForKeyError(coding_key_name(key))
        return decode(value_type, node)

    def get_string(self, key: Key) -> Optional[str]:
        return self[key].string

    def require_string(self, key: Key) -> str:
        return self.require(key, lambda node: node.string)

    def get_int(self, key: Key) -> Optional[int]:
        return self[key].integer

    def require_int(self, key: Key) -> int:
        return self.require(key, lambda node: node.integer)

    def get_bool(self, key: Key) -> Optional[bool]:
        return self[key].boolean

    def require_bool(self, key: Key) -> bool:
        return self.require(key, lambda node: node.boolean)

    def get_float(self, key: Key) -> Optional[float]:
        return self[key].number

    def require_float(self, key: Key) -> float:
        return self.require(key, lambda node: node.number)

    def get_url(self, key: Key) -> Optional[URL]:
        string = self.get_string(key)
        if string is None:
            return None
        return parse_url(string)

    def require_url(self, key: Key) -> URL:
        string = self.require_string(key)
        url = parse_url(string)
        if url is None:
            raise AwkwardURLError(string)
        return url

    def get_date(self, key: Key, date_format: DateFormat) -> Optional[datetime]:
        string = self.get_string(key)
        if string is None:
            return None
        return parse_date(string, date_format)

    def require_date(self, key: Key, date_format: DateFormat) -> datetime:
        string = self.require_string(key)
        date = parse_date(string, date_format)
        if date is None:
            raise WrongDateFormatError()
        return date

    def get_enum(
        self,
        key: Key,
        enum_type: type[E],
        raw: Optional[Callable[["JSON"], Any]] = None,
    ) -> Optional[E]:
        raw_value = (raw or (lambda node: node.scalar))(self[key])
        if raw_value is None:
            return None
        if raw is None and not _matches_member_type(enum_type, raw_value):
            return None
        try:
            return enum_type(raw_value)
        except ValueError:
            return None

    def require_enum(
        self,
        key: Key,
        enum_type: type[E],
        raw: Optional[Callable[["JSON"], Any]] = None,
    ) -> E:
        """Map the raw JSON scalar under `key` onto a member of `enum_type`.

        `raw` picks the raw value out of the node. By default any scalar is
        taken, but only if its type matches the type of the member values, so
        ``true`` or ``1.0`` never select a member whose value is ``1``.
        """
        raw_value = self.require(key, raw or (lambda node: node.scalar))
        if raw is None and not _matches_member_type(enum_type, raw_value):
            raise FailedToInitializeRawRepresentableError()
        try:
            return enum_type(raw_value)
        except ValueError as e:
            raise FailedToInitializeRawRepresentableError() from e
