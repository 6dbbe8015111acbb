"""Generic JSON value used by the decoding helpers.

`JSON` wraps a plain Python tree as produced by :func:`json.loads`. Looking up a
missing key or index never raises: it yields a null value whose
:meth:`JSON.exists` is ``False``, so lookups can be chained freely and the
typed getters simply return ``None``.
"""

import json
import math
from typing import Any, Optional, Union

from ._keyed import KeyCodable, KeyedAccessMixin, coding_key_name


def _plain(value: Any) -> Any:
    """Strip nested `JSON` wrappers so the tree only holds plain values."""
    if isinstance(value, JSON):
        return value.value
    if isinstance(value, dict):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class JSON(KeyedAccessMixin):
    __slots__ = ("_value", "_exists")

    def __init__(self, value: Any = None, *, exists: bool = True) -> None:
        self._value = _plain(value)
        self._exists = exists

    @classmethod
    def _wrap(cls, value: Any, *, exists: bool = True) -> "JSON":
        # `value` must already be a plain tree
        node = cls.__new__(cls)
        node._value = value
        node._exists = exists
        return node

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, str]) -> "JSON":
        """Parse raw bytes into a JSON value.

        Raises:
            json.JSONDecodeError: If the data is not valid JSON.
        """
        return cls._wrap(json.loads(data))

    @classmethod
    def missing(cls) -> "JSON":
        return cls._wrap(None, exists=False)

    @property
    def value(self) -> Any:
        return self._value

    def exists(self) -> bool:
        return self._exists

    @property
    def is_null(self) -> bool:
        return self._value is None

    def __getitem__(self, key: Union[int, str, KeyCodable]) -> "JSON":
        if isinstance(key, int) and not isinstance(key, bool):
            if isinstance(self._value, list) and -len(self._value) <= key < len(
                self._value
            ):
                return JSON._wrap(self._value[key])
            return JSON.missing()

        name = coding_key_name(key)
        if isinstance(self._value, dict) and name in self._value:
            return JSON._wrap(self._value[name])
        return JSON.missing()

    @property
    def string(self) -> Optional[str]:
        return self._value if isinstance(self._value, str) else None

    @property
    def integer(self) -> Optional[int]:
        # floats are truncated
        if isinstance(self._value, float):
            return int(self._value) if math.isfinite(self._value) else None
        if _is_number(self._value):
            return int(self._value)
        return None

    @property
    def boolean(self) -> Optional[bool]:
        return self._value if isinstance(self._value, bool) else None

    @property
    def number(self) -> Optional[float]:
        return float(self._value) if _is_number(self._value) else None

    @property
    def scalar(self) -> Union[str, int, float, bool, None]:
        if isinstance(self._value, (str, int, float, bool)):
            return self._value
        return None

    @property
    def array(self) -> Optional[list["JSON"]]:
        if isinstance(self._value, list):
            return [JSON._wrap(item) for item in self._value]
        return None

    @property
    def dictionary(self) -> Optional[dict[str, "JSON"]]:
        if isinstance(self._value, dict):
            return {key: JSON._wrap(item) for key, item in self._value.items()}
        return None

    def raw_bytes(self) -> bytes:
        """Serialize to compact UTF-8 JSON.

        Raises:
            TypeError: If the tree holds a value the json module cannot encode.
        """
        return json.dumps(
            self._value, separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")

    def raw_string(self) -> str:
        return self.raw_bytes().decode("utf-8")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JSON):
            return self._value == other._value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self._exists:
            return "JSON(<missing>)"
        return f"JSON({self._value!r})"
