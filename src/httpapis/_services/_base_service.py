import json
import os
from logging import getLogger
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, Optional, Type, Union

from .._config import Config
from .._execution_context import ExecutionContext
from .._utils import (
    HeaderPolicy,
    HttpMethod,
    RequestSpec,
    build_url,
    mask_headers,
    merge_headers,
)
from .._utils.constants import CONTENT_TYPE_JSON, ENV_ACCESS_TOKEN
from ..models.exceptions import (
    ContextInactiveError,
    HttpApiError,
    ResponseProcessingError,
    TransportError,
)
from ..models.response import HttpResponse, TransportOutcome
from ._transport import HttpxTransport, Transport, TransportResult
from .images_service import ImagesService

if TYPE_CHECKING:
    from PIL import Image

RequestBody = Union[str, bytes, dict, list, int, float, bool, None]


def encode_body(body: RequestBody) -> bytes:
    """Encode a request body the way the API expects it.

    Strings are sent as UTF-8, bytes unchanged and anything else is serialized
    as JSON. A missing body is sent as an empty JSON object.
    """
    if body is None:
        return b"{}"
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")


class HttpApi:
    """Asynchronous client for a JSON API living under a single endpoint.

    Concrete API clients are built by creating an instance with the right
    configuration and wrapping its verb methods, e.g.::

        async with HttpApi(Config(endpoint="https://api.example.com")) as api:
            api.set_authorization(f"Bearer {token}")
            user = (await api.get("/users/me")).json()

    Each verb call runs a single exchange and raises :class:`TransportError` on
    failure. Only :meth:`fetch_image` retries.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        execution_context: Optional[ExecutionContext] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self._logger = getLogger("httpapis")
        self._config = config or Config()
        self._execution_context = execution_context or ExecutionContext()
        self._headers = HeaderPolicy()
        self._transport: Transport = transport or HttpxTransport(
            timeout=self._config.timeout,
            follow_redirects=self._config.follow_redirects,
        )
        self._images: Optional[ImagesService] = None

    @classmethod
    def from_env(
        cls,
        dotenv_path: Optional[Union[str, Path]] = None,
        execution_context: Optional[ExecutionContext] = None,
        transport: Optional[Transport] = None,
    ) -> "HttpApi":
        """Create a client configured from ``HTTPAPIS_*`` environment variables.

        ``HTTPAPIS_ACCESS_TOKEN``, when set, becomes the ``Authorization`` header.
        """
        config = Config.from_env(dotenv_path)
        api = cls(config, execution_context=execution_context, transport=transport)
        token = os.environ.get(ENV_ACCESS_TOKEN)
        if token:
            api.set_authorization(token)
        return api

    @property
    def config(self) -> Config:
        return self._config

    @property
    def execution_context(self) -> ExecutionContext:
        return self._execution_context

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    @endpoint.setter
    def endpoint(self, value: str) -> None:
        self._config.endpoint = value

    @property
    def default_headers(self) -> dict[str, str]:
        return self._headers.headers

    @property
    def images(self) -> ImagesService:
        if self._images is None:
            self._images = ImagesService(self)
        return self._images

    def set_header(self, name: str, value: str) -> None:
        self._headers.set_header(name, value)

    def remove_header(self, name: str) -> None:
        self._headers.remove_header(name)

    def set_authorization(self, token: str) -> None:
        """Shorthand to write the ``Authorization`` default header."""
        self._headers.set_authorization(token)

    def set_authentication_header(self, token: str) -> None:
        """Shorthand to write the ``AuthenticationHeader`` default header."""
        self._headers.set_authentication_header(token)

    def merged_headers(self) -> dict[str, str]:
        return self._headers.merged_headers()

    def build_url(self, path: str) -> str:
        return build_url(self._config.endpoint, path)

    def build_spec(
        self,
        method: HttpMethod,
        path: str,
        *,
        content: Optional[bytes] = None,
        content_type: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> RequestSpec:
        return RequestSpec(
            method=method,
            url=self.build_url(path),
            headers=merge_headers(self.merged_headers(), headers or {}),
            content=content,
            content_type=content_type,
        )

    async def execute(self, spec: RequestSpec) -> HttpResponse:
        """Run a single exchange and wait for it to complete.

        Args:
            spec: The request to send.

        Returns:
            HttpResponse: The response of a successful (2xx) exchange.

        Raises:
            ContextInactiveError: The execution context is inactive, either before
                the request is sent or by the time it completes.
            TransportError: The exchange failed or returned a non-2xx status.
            ResponseProcessingError: The completed exchange could not be
                interpreted. The underlying exception is logged and chained.
        """
        self._execution_context.ensure_active()

        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(f"HEADERS: {mask_headers(spec.request_headers)}")

        result = await self._transport.send(spec)
        try:
            return self._interpret(spec, result)
        except HttpApiError:
            raise
        except Exception as e:
            self._logger.exception(
                f"Unexpected error while processing {spec.method} {spec.url}"
            )
            raise ResponseProcessingError(spec.method, spec.url) from e
        finally:
            await result.aclose()

    def _interpret(self, spec: RequestSpec, result: TransportResult) -> HttpResponse:
        if (
            result.outcome is TransportOutcome.CANCELLED
            or not self._execution_context.is_active
        ):
            raise ContextInactiveError(
                f"context inactive, dropped {spec.method} {spec.url}"
            )

        if result.outcome is not TransportOutcome.SUCCESS:
            raise TransportError(
                status_code=result.status_code,
                error=result.error,
                method=spec.method,
                url=spec.url,
                request_content=result.request_content,
                response_content=result.content,
            )

        self._logger.debug(f"Response: {result.status_code} {spec.method} {spec.url}")
        return HttpResponse(
            outcome=result.outcome,
            status_code=result.status_code,
            content=result.content,
        )

    async def _send_with_body(
        self, method: HttpMethod, path: str, body: RequestBody
    ) -> HttpResponse:
        spec = self.build_spec(
            method,
            path,
            content=encode_body(body),
            content_type=CONTENT_TYPE_JSON,
        )
        return await self.execute(spec)

    async def get(self, path: str) -> HttpResponse:
        """Perform an HTTP GET request."""
        return await self.execute(self.build_spec("GET", path))

    async def post(self, path: str, body: RequestBody = None) -> HttpResponse:
        """Perform an HTTP POST request.

        Args:
            path: Path relative to the endpoint, or an absolute URL.
            body: The request body. ``dict``/``list`` values are serialized as
                JSON; ``None`` sends ``{}``.
        """
        return await self._send_with_body("POST", path, body)

    async def put(self, path: str, body: RequestBody = None) -> HttpResponse:
        """Perform an HTTP PUT request. See :meth:`post` for the body rules."""
        return await self._send_with_body("PUT", path, body)

    async def patch(self, path: str, body: RequestBody = None) -> HttpResponse:
        """Perform an HTTP PATCH request. See :meth:`post` for the body rules."""
        return await self._send_with_body("PATCH", path, body)

    async def delete(self, path: str) -> None:
        """Perform an HTTP DELETE request."""
        await self.execute(self.build_spec("DELETE", path))

    async def fetch_image(
        self, url: str, max_attempts: Optional[int] = None
    ) -> "Image.Image":
        """Download and decode an image, retrying transport failures.

        See :meth:`ImagesService.fetch`.
        """
        return await self.images.fetch(url, max_attempts=max_attempts)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "HttpApi":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self._config.endpoint!r})"

