# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_AUTHENTICATION = "AuthenticationHeader"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_IMAGE = "image/*"

# Environment variables
ENV_ENDPOINT = "HTTPAPIS_ENDPOINT"
ENV_ACCESS_TOKEN = "HTTPAPIS_ACCESS_TOKEN"
ENV_TIMEOUT = "HTTPAPIS_TIMEOUT"
ENV_IMAGE_MAX_ATTEMPTS = "HTTPAPIS_IMAGE_MAX_ATTEMPTS"
ENV_IMAGE_RETRY_BACKOFF = "HTTPAPIS_IMAGE_RETRY_BACKOFF"

# Files
DOTENV_FILE = ".env"

# Diagnostics
NO_UPLOADED_DATA = "no uploaded data"
NO_DOWNLOADED_DATA = "no downloaded data"
SENSITIVE_HEADERS = frozenset(
    {HEADER_AUTHORIZATION.lower(), HEADER_AUTHENTICATION.lower()}
)

# Images
PLACEHOLDER_IMAGE_SIZE = (8, 8)
DEFAULT_IMAGE_MAX_ATTEMPTS = 3

USER_AGENT = "httpapis.Python"
