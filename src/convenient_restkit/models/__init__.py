from .errors import (
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
    "FailedToInitializeRawRepresentableError",
    "NoDataInResponseError",
    "NoValueForKeyError",
    "RestKitError",
    "UnexpectedStatusCodeError",
    "WrongDateFormatError",
    "WrongJSONFormatError",
]
