from typing import Optional


class RestKitError(Exception):
    """Base class for every decoding and response-processing failure."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NoValueForKeyError(RestKitError):
    """Raised when a required keyed accessor finds no usable value."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No value for key {key}")


class WrongDateFormatError(RestKitError):
    def __init__(self, message: str = "Wrong date format"):
        super().__init__(message)


class NoDataInResponseError(RestKitError):
    def __init__(self, message: str = "No data"):
        super().__init__(message)


class UnexpectedStatusCodeError(RestKitError):
    """Raised when a response carries a status code the endpoint does not accept.

    The raw body is kept so callers can inspect server-side error payloads.
    """

    def __init__(self, code: int, body: Optional[bytes] = None):
        self.code = code
        self.body = body

        text: Optional[str] = None
        if body:
            try:
                text = body.decode("utf-8")
            except UnicodeDecodeError:
                text = None

        if text is not None:
            message = f"Unexpected code {code} with message {text}"
        else:
            message = f"Unexpected code {code}"
        super().__init__(message)


class WrongJSONFormatError(RestKitError):
    def __init__(self, message: str = "Wrong json format"):
        super().__init__(message)


class FailedToInitializeRawRepresentableError(RestKitError):
    def __init__(self, message: str = "Failed to create from raw representable"):
        super().__init__(message)


class AwkwardURLError(RestKitError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Awkward url {value}")
