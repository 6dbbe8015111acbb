import asyncio
from abc import ABC, abstractmethod
from logging import getLogger
from typing import (
    Any,
    Callable,
    ClassVar,
    Coroutine,
    Generic,
    Optional,
    TypeVar,
    get_args,
    get_origin,
)

from httpx import URL, AsyncClient, Request, Response

from .._coding import decode, decode_list
from .._domain import Domain, HTTPMethod, RequestContent
from .._json import JSON
from .._utils._request_spec import append_path_component, build_request
from .._utils.constants import LOGGER_NAME
from ..models.errors import NoDataInResponseError, UnexpectedStatusCodeError

ResultT = TypeVar("ResultT")

ErrorHandler = Callable[[BaseException], Any]
SuccessHandler = Callable[[ResultT], Any]


class RequestConfiguration(Generic[ResultT], ABC):
    """Declarative description of a single endpoint call.

    Subclasses describe *what* to call (domain, path, method, body) and *what*
    comes back (the generic result type); this class turns that description
    into a request, sends it on the injected session and decodes the response.

    The result type is taken from the generic parameter, or from an explicit
    ``result_type`` class attribute when it cannot be expressed that way.

    Examples:
        ```python
        class GetScarers(RequestConfiguration[list[Scarer]]):
            domain = URLDomain("https://example.test")
            api_path = "scarers"
            method = HTTPMethod.GET

        scarers = await GetScarers(session).send()
        ```
    """

    domain: Domain
    api_path: str = ""
    method: HTTPMethod
    content: RequestContent = RequestContent()
    compress_content: bool = False
    result_type: ClassVar[Any] = None

    # the event loop only keeps weak references to tasks
    _pending_tasks: ClassVar[set["asyncio.Task[None]"]] = set()

    def __init__(self, session: AsyncClient) -> None:
        self.session = session
        self._logger = getLogger(LOGGER_NAME)

    @property
    def url(self) -> URL:
        base_url = self.domain.base_url
        if not self.api_path:
            return base_url
        return append_path_component(base_url, self.api_path)

    def url_request(self) -> Request:
        return build_request(
            self.url, self.method, self.content, compress=self.compress_content
        )

    @classmethod
    def resolve_result_type(cls) -> Any:
        """Return the type responses are decoded into.

        Raises:
            TypeError: If the class names no concrete result type.
        """
        if cls.result_type is not None:
            return cls.result_type

        for klass in cls.__mro__:
            for base in klass.__dict__.get("__orig_bases__", ()):
                origin = get_origin(base)
                if not isinstance(origin, type):
                    continue
                if not issubclass(origin, RequestConfiguration):
                    continue
                args = get_args(base)
                if args and not isinstance(args[0], TypeVar):
                    return args[0]

        raise TypeError(
            f"{cls.__name__} must specify a result type "
            f"(e.g., RequestConfiguration[MyModel])"
        )

    @classmethod
    def process_response(cls, response: Response) -> ResultT:
        """Decode the body of `response` into the result type.

        The status code is not interpreted here.

        Raises:
            NoDataInResponseError: If the response has no body.
        """
        return decode(cls.resolve_result_type(), cls.json_for_data(response.content))

    @classmethod
    def json_for_data(cls, data: Optional[bytes]) -> JSON:
        if not data:
            raise NoDataInResponseError()
        return JSON.from_bytes(data)

    @classmethod
    def parsed_object(cls, value_type: Any, data: Optional[bytes]) -> Any:
        return decode(value_type, cls.json_for_data(data))

    @classmethod
    def parsed_objects(
        cls, element_type: Any, data: Optional[bytes], key: Optional[str] = None
    ) -> list[Any]:
        return cls.parsed_objects_for_json(element_type, cls.json_for_data(data), key)

    @classmethod
    def parsed_objects_for_json(
        cls, element_type: Any, json: JSON, key: Optional[str] = None
    ) -> list[Any]:
        return decode_list(element_type, json[key] if key is not None else json)

    async def send(self) -> ResultT:
        """Send the request and return the decoded result.

        Transport errors raised by httpx propagate unchanged.
        """
        request = self.url_request()
        response = await self._send(request)
        return self.process_response(response)

    def data_task(
        self,
        on_error: ErrorHandler,
        on_success: SuccessHandler[ResultT],
    ) -> Coroutine[Any, Any, None]:
        """Build the request and return a coroutine that performs the call.

        The request is built eagerly, so construction errors raise here. The
        returned coroutine has not started; once awaited or scheduled, it calls
        exactly one of `on_error` or `on_success`.
        """
        request = self.url_request()
        return self._complete(request, on_error, on_success)

    def perform_task(
        self,
        on_error: ErrorHandler,
        on_success: SuccessHandler[ResultT],
    ) -> Optional["asyncio.Task[None]"]:
        """Schedule the call on the running event loop.

        If the request cannot be built, `on_error` is called right away and no
        task is created.

        Returns:
            The scheduled task, or None if the request could not be built.
        """
        loop = asyncio.get_running_loop()
        try:
            coroutine = self.data_task(on_error, on_success)
        except Exception as e:
            on_error(e)
            return None
        task = loop.create_task(coroutine)
        self._pending_tasks.add(task)
        task.add_done_callback(self._pending_tasks.discard)
        return task

    async def _send(self, request: Request) -> Response:
        self._logger.debug(f"Request: {request.method} {request.url}")
        response = await self.session.send(request)
        self._logger.debug(
            f"Response: {response.status_code} {request.method} {request.url}"
        )
        return response

    async def _complete(
        self,
        request: Request,
        on_error: ErrorHandler,
        on_success: SuccessHandler[ResultT],
    ) -> None:
        try:
            response = await self._send(request)
        except Exception as e:
            self._logger.debug(f"Transport error for {request.url}: {e!r}")
            on_error(e)
            return

        try:
            result = self.process_response(response)
        except Exception as e:
            self._logger.debug(f"Failed to process response from {request.url}: {e}")
            on_error(e)
            return

        on_success(result)


class GetRequestConfiguration(RequestConfiguration[ResultT], ABC):
    """Endpoint fetched with GET and no body, decoded by :meth:`parse_result`."""

    method = HTTPMethod.GET
    content = RequestContent()

    SUCCESS_STATUS_CODES: ClassVar[tuple[int, ...]] = (200, 201)

    @classmethod
    @abstractmethod
    def parse_result(cls, data: bytes) -> ResultT:
        """Turn the raw response body into the result."""

    @classmethod
    def process_response(cls, response: Response) -> ResultT:
        """Validate the status code and delegate to :meth:`parse_result`.

        Raises:
            UnexpectedStatusCodeError: If the status is not 200 or 201.
            NoDataInResponseError: If the response has no body.
        """
        if response.status_code not in cls.SUCCESS_STATUS_CODES:
            raise UnexpectedStatusCodeError(
                response.status_code, response.content or None
            )
        if not response.content:
            raise NoDataInResponseError()
        return cls.parse_result(response.content)
