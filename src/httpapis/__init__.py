"""Asynchronous HTTP client core for JSON APIs.

Example:
    ```python
    from httpapis import Config, HttpApi

    async with HttpApi(Config(endpoint="https://api.example.com")) as api:
        api.set_authorization("Bearer <token>")
        response = await api.get("/users/me")
        user = response.json()
    ```
"""

from ._config import Config
from ._execution_context import ExecutionContext
from ._services import (
    HttpApi,
    HttpxTransport,
    ImagesService,
    Transport,
    TransportResult,
    is_placeholder_image,
)
from ._utils import HeaderPolicy, RequestSpec, build_url
from .models import (
    ContentValidationError,
    ContextInactiveError,
    HttpApiError,
    HttpResponse,
    ResponseProcessingError,
    RetryExhaustedError,
    TransportError,
    TransportOutcome,
    parse_json,
    parse_json_array,
)

__all__ = [
    "Config",
    "ContentValidationError",
    "ContextInactiveError",
    "ExecutionContext",
    "HeaderPolicy",
    "HttpApi",
    "HttpApiError",
    "HttpResponse",
    "HttpxTransport",
    "ImagesService",
    "RequestSpec",
    "ResponseProcessingError",
    "RetryExhaustedError",
    "Transport",
    "TransportError",
    "TransportOutcome",
    "TransportResult",
    "build_url",
    "is_placeholder_image",
    "parse_json",
    "parse_json_array",
]
