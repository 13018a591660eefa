# Environment variables
ENV_BASE_URL = "HATSTALL_URL"
ENV_TIMEOUT = "HATSTALL_TIMEOUT"
ENV_APP_NAME = "HATSTALL_APP_NAME"
ENV_DEBUG = "HATSTALL_DEBUG"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"

# Content types
CONTENT_TYPE_JSON = "application/json"

# Defaults
DEFAULT_TIMEOUT = 30.0
RESULT_KEY = "result"
APP_NAME_PARAM = "app_name"
