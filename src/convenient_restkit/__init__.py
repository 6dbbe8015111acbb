"""Declarative REST requests and typed JSON decoding on top of httpx."""

from ._coding import (
    JSONCoding,
    JSONInitializable,
    JSONRepresentable,
    decode,
    decode_list,
    encode,
    encode_list,
    read_list_from_file,
    write_list_to_file,
)
from ._config import Config, __version__
from ._domain import Domain, HTTPMethod, RequestContent, URLDomain
from ._json import JSON
from ._keyed import CodingKeys, DateFormat, KeyCodable
from ._services import GetRequestConfiguration, RequestConfiguration
from ._session import create_session
from ._utils import append_path_component, build_request, setup_logging
from .models.errors import (
    AwkwardURLError,
    FailedToInitializeRawRepresentableError,
    NoDataInResponseError,
    NoValueForKeyError,
    RestKitError,
    UnexpectedStatusCodeError,
    WrongDateFormatError,
    WrongJSONFormatError,
)

__all__ = [
    "AwkwardURLError",
    "CodingKeys",
    "Config",
    "DateFormat",
    "Domain",
    "FailedToInitializeRawRepresentableError",
    "GetRequestConfiguration",
    "HTTPMethod",
    "JSON",
    "JSONCoding",
    "JSONInitializable",
    "JSONRepresentable",
    "KeyCodable",
    "NoDataInResponseError",
    "NoValueForKeyError",
    "RequestConfiguration",
    "RequestContent",
    "RestKitError",
    "URLDomain",
    "UnexpectedStatusCodeError",
    "WrongDateFormatError",
    "WrongJSONFormatError",
    "__version__",
    "append_path_component",
    "build_request",
    "create_session",
    "decode",
    "decode_list",
    "encode",
    "encode_list",
    "read_list_from_file",
    "setup_logging",
    "write_list_to_file",
]
