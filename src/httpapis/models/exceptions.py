from typing import Optional

from .._utils.constants import NO_DOWNLOADED_DATA, NO_UPLOADED_DATA


def _render_body(content: Optional[bytes], marker: str) -> str:
    if not content:
        return marker
    return content.decode("utf-8", errors="replace")


class HttpApiError(Exception):
    """Base class for every error raised by the HTTP client."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class TransportError(HttpApiError):
    """Raised when an exchange did not complete with a success outcome.

    The message lists the status code, the transport error, the request line and
    both bodies, so it can be logged as is. The same values are available as
    attributes for callers that want to inspect them.
    """

    def __init__(
        self,
        *,
        status_code: int,
        error: Optional[str],
        method: str,
        url: str,
        request_content: Optional[bytes] = None,
        response_content: Optional[bytes] = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.method = method
        self.url = url
        self.request_content = request_content
        self.response_content = response_content
        super().__init__(
            f"{status_code}: {error}\n"
            f"{method} {url}\n"
            f"{_render_body(request_content, NO_UPLOADED_DATA)}\n"
            f"{_render_body(response_content, NO_DOWNLOADED_DATA)}"
        )


class ContentValidationError(HttpApiError):
    """Raised when a download succeeded but its payload is not usable."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"fetch failed: {reason} ({url})")


class ContextInactiveError(HttpApiError):
    """Raised when the owner of the client is no longer active."""

    def __init__(self, message: str = "context inactive") -> None:
        super().__init__(message)


class RetryExhaustedError(HttpApiError):
    """Raised when a retrying fetch used up its attempt budget."""

    def __init__(self, url: str, attempts: int) -> None:
        self.url = url
        self.attempts = attempts
        super().__init__(f"fetch failed after {attempts} attempts ({url})")


class ResponseProcessingError(HttpApiError):
    """Raised when a completed exchange could not be turned into a response."""

    def __init__(self, method: str, url: str) -> None:
        self.method = method
        self.url = url
        super().__init__(f"Failed to process the response of {method} {url}")
