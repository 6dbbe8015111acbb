import os
import ssl
from typing import TYPE_CHECKING, Any, Union

import certifi
import truststore

if TYPE_CHECKING:
    from .._config import Config


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    # Expand environment variables like $HOME
    path = os.path.expandvars(path)
    # Expand user home directory ~
    path = os.path.expanduser(path)
    return path


def create_ssl_context() -> ssl.SSLContext:
    """Build the TLS context used by every session.

    Explicit certificate locations from the environment take precedence;
    otherwise the operating system trust store is used.
    """
    ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
    requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
    ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

    if ssl_cert_file or requests_ca_bundle or ssl_cert_dir:
        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )

    return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)


def get_httpx_client_kwargs(config: "Config") -> dict[str, Any]:
    verify: Union[bool, ssl.SSLContext] = (
        create_ssl_context() if config.verify else False
    )
    return {
        "verify": verify,
        "timeout": config.timeout,
        "follow_redirects": config.follow_redirects,
    }
