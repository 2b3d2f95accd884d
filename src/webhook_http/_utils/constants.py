# headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"
HEADER_API_KEY = "X-Api-Key"

# content types
APPLICATION_JSON = "application/json"

# authorization
AUTH_SCHEME_BASIC = "Basic"
AUTH_SCHEME_BEARER = "Bearer"
AUTH_STRING_SEPARATOR = ":"

# retries
DEFAULT_RETRY_ATTEMPTS = 3

# logging
LOGGER_NAME = "webhook_http"
MASKED_VALUE = "***"
