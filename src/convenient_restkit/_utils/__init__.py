from ._logs import setup_logging
from ._request_spec import append_path_component, build_request
from ._ssl_context import create_ssl_context, get_httpx_client_kwargs

__all__ = [
    "append_path_component",
    "build_request",
    "create_ssl_context",
    "get_httpx_client_kwargs",
    "setup_logging",
]
