# Environment variables
ENV_HOST = "REQUESTBUILDER_HOST"
ENV_BASE_PATH = "REQUESTBUILDER_BASE_PATH"
ENV_PORT = "REQUESTBUILDER_PORT"
ENV_SCHEME = "REQUESTBUILDER_SCHEME"
ENV_ERROR_HEADER = "REQUESTBUILDER_ERROR_HEADER"

# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"

# Defaults
DEFAULT_SCHEME = "http"
DEFAULT_ERROR_HEADER = "ERROR"
USER_AGENT_PREFIX = "RequestBuilder.Python"
PACKAGE_NAME = "requestbuilder"
