from logging import getLogger
from typing import Optional

from httpx import AsyncClient, Headers

from ._config import Config
from ._utils._logs import setup_logging
from ._utils._ssl_context import get_httpx_client_kwargs
from ._utils.constants import HEADER_ACCEPT, HEADER_USER_AGENT, LOGGER_NAME


def create_session(config: Optional[Config] = None) -> AsyncClient:
    """Create the shared transport session for request configurations.

    The returned client is owned by the caller, who is responsible for closing
    it (``await session.aclose()`` or ``async with``).

    Examples:
        ```python
        from convenient_restkit import Config, create_session

        async with create_session(Config(timeout=10)) as session:
            scarers = await GetScarers(session).send()
        ```
    """
    config = config or Config()
    if config.debug:
        setup_logging(should_debug=True)

    headers = Headers(
        {
            HEADER_ACCEPT: "application/json",
            HEADER_USER_AGENT: config.user_agent,
        }
    )
    getLogger(LOGGER_NAME).debug(f"HEADERS: {dict(headers)}")

    return AsyncClient(**get_httpx_client_kwargs(config), headers=headers)
