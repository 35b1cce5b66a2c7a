# Environment variables
ENV_BASE_URL = "GREST_URL"
ENV_AUTHORIZATION = "GREST_AUTHORIZATION"
ENV_DISABLE_SSL_VERIFY = "GREST_DISABLE_SSL_VERIFY"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_REQUESTED_WITH = "X-Requested-With"
HEADER_USER_AGENT = "User-Agent"

REQUESTED_WITH_VALUE = "XMLHttpRequest"

# Messages
NETWORK_ERROR_MESSAGE = "Network Error"
GENERIC_ERROR_MESSAGE = "Error"
TRANSPORT_CLOSED_MESSAGE = "Transport is closed"
