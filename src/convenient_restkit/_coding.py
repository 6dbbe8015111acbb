"""Capabilities for building values from JSON and rendering them back."""

from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel

from ._json import JSON
from .models.errors import WrongJSONFormatError

InitT = TypeVar("InitT", bound="JSONInitializable")

FilePath = Union[str, PathLike[str]]


class JSONInitializable(ABC):
    """A type that can be constructed from a JSON value."""

    @classmethod
    @abstractmethod
    def from_json(cls: type[InitT], json: JSON) -> InitT:
        """Build an instance, raising on any structural problem."""

    @classmethod
    def from_file(cls: type[InitT], path: FilePath) -> InitT:
        data = Path(path).read_bytes()
        return cls.from_json(JSON.from_bytes(data))


class JSONRepresentable(ABC):
    """A type that can always be rendered as a JSON value."""

    @abstractmethod
    def to_json(self) -> JSON: ...

    def write_to_file(self, path: FilePath) -> None:
        Path(path).write_bytes(self.to_json().raw_bytes())


class JSONCoding(JSONInitializable, JSONRepresentable):
    pass


def decode(value_type: Any, json: JSON) -> Any:
    """Construct `value_type` from `json`.

    Supported targets are `JSON` itself, `JSONInitializable` subclasses,
    pydantic models and `list[...]` of any of those.

    Raises:
        WrongJSONFormatError: If a list is requested and the root is not an array.
        TypeError: If `value_type` cannot be built from JSON.
    """
    if get_origin(value_type) is list:
        (element_type,) = get_args(value_type)
        return decode_list(element_type, json)

    if value_type is JSON:
        return json
    if isinstance(value_type, type):
        if issubclass(value_type, JSONInitializable):
            return value_type.from_json(json)
        if issubclass(value_type, BaseModel):
            return value_type.model_validate(json.value)

    raise TypeError(f"{value_type!r} cannot be constructed from JSON")


def encode(value: Any) -> JSON:
    """Render `value` as JSON.

    Raises:
        TypeError: If `value` has no JSON representation.
    """
    if isinstance(value, JSON):
        return value
    if isinstance(value, JSONRepresentable):
        return value.to_json()
    if isinstance(value, BaseModel):
        return JSON(value.model_dump(mode="json", by_alias=True))
    if isinstance(value, (list, tuple)):
        return encode_list(value)

    raise TypeError(f"{type(value).__name__} cannot be rendered as JSON")


def decode_list(element_type: Any, json: JSON) -> list[Any]:
    elements = json.array
    if elements is None:
        raise WrongJSONFormatError()
    return [decode(element_type, element) for element in elements]


def encode_list(items: Iterable[Any]) -> JSON:
    return JSON([encode(item).value for item in items])


def read_list_from_file(element_type: Any, path: FilePath) -> list[Any]:
    data = Path(path).read_bytes()
    return decode_list(element_type, JSON.from_bytes(data))


def write_list_to_file(items: Iterable[Any], path: FilePath) -> None:
    Path(path).write_bytes(encode_list(items).raw_bytes())
