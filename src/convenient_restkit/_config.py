from os import environ as env
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel

from ._utils.constants import (
    ENV_DEBUG,
    ENV_FOLLOW_REDIRECTS,
    ENV_TIMEOUT,
    ENV_USER_AGENT,
    ENV_VERIFY,
)

__version__ = "0.1.0"

DEFAULT_USER_AGENT = f"ConvenientRestKit.Python/{__version__}"


class Config(BaseModel):
    """Settings applied to sessions built by :func:`create_session`."""

    timeout: float = 30.0
    follow_redirects: bool = True
    verify: bool = True
    debug: bool = False
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Read settings from ``RESTKIT_*`` variables, loading a ``.env`` file first.

        Keyword arguments take precedence over the environment.
        """
        load_dotenv()

        values: dict[str, Any] = {}
        for field, variable in (
            ("timeout", ENV_TIMEOUT),
            ("follow_redirects", ENV_FOLLOW_REDIRECTS),
            ("verify", ENV_VERIFY),
            ("debug", ENV_DEBUG),
            ("user_agent", ENV_USER_AGENT),
        ):
            value = env.get(variable)
            if value:
                values[field] = value

        values.update(overrides)
        return cls.model_validate(values)
