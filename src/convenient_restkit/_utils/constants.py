LOGGER_NAME = "convenient_restkit"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CACHE_CONTROL = "Cache-Control"
HEADER_CONTENT_ENCODING = "Content-Encoding"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_IF_NONE_MATCH = "If-None-Match"
HEADER_USER_AGENT = "User-Agent"

CACHE_CONTROL_NO_CACHE = "no-cache"

# Environment variables
ENV_TIMEOUT = "RESTKIT_TIMEOUT"
ENV_FOLLOW_REDIRECTS = "RESTKIT_FOLLOW_REDIRECTS"
ENV_VERIFY = "RESTKIT_VERIFY"
ENV_DEBUG = "RESTKIT_DEBUG"
ENV_USER_AGENT = "RESTKIT_USER_AGENT"
