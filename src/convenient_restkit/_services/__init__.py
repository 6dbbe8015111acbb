from ._request_configuration import GetRequestConfiguration, RequestConfiguration

__all__ = ["GetRequestConfiguration", "RequestConfiguration"]
