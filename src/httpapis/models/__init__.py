from .exceptions import (
    ContentValidationError,
    ContextInactiveError,
    HttpApiError,
    ResponseProcessingError,
    RetryExhaustedError,
    TransportError,
)
from .response import HttpResponse, TransportOutcome, parse_json, parse_json_array

__all__ = [
    "ContentValidationError",
    "ContextInactiveError",
    "HttpApiError",
    "HttpResponse",
    "ResponseProcessingError",
    "RetryExhaustedError",
    "TransportError",
    "TransportOutcome",
    "parse_json",
    "parse_json_array",
]
