from typing import Mapping

from .constants import (
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_AUTHENTICATION,
    HEADER_AUTHORIZATION,
    SENSITIVE_HEADERS,
)


class HeaderPolicy:
    """Default headers sent with every request.

    The mapping is only changed through the setters below. Each request takes a
    copy through :meth:`merged_headers` when it is built, so later changes never
    affect a request that is already in flight.
    """

    def __init__(self, headers: Mapping[str, str] | None = None) -> None:
        self._headers = merge_headers(headers or {})

    @property
    def headers(self) -> dict[str, str]:
        return self._headers

    def set_header(self, name: str, value: str) -> None:
        _discard(self._headers, name)
        self._headers[name] = value

    def remove_header(self, name: str) -> None:
        _discard(self._headers, name)

    def set_authorization(self, token: str) -> None:
        """Shorthand to write the ``Authorization`` header value."""
        self.set_header(HEADER_AUTHORIZATION, token)

    def set_authentication_header(self, token: str) -> None:
        """Shorthand to write the ``AuthenticationHeader`` header value."""
        self.set_header(HEADER_AUTHENTICATION, token)

    def merged_headers(self) -> dict[str, str]:
        return merge_headers({HEADER_ACCEPT: CONTENT_TYPE_JSON}, self._headers)


def merge_headers(*layers: Mapping[str, str]) -> dict[str, str]:
    """Merge header mappings, later layers winning.

    Names are compared case-insensitively, and the winning entry keeps its own
    spelling.
    """
    merged: dict[str, str] = {}
    for layer in layers:
        for name, value in layer.items():
            _discard(merged, name)
            merged[name] = value
    return merged


def _discard(headers: dict[str, str], name: str) -> None:
    for existing in [key for key in headers if key.lower() == name.lower()]:
        del headers[existing]


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy of ``headers`` that is safe to write to the logs."""
    return {
        name: "***" if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }
