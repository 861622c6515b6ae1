from dataclasses import dataclass
from logging import getLogger
from typing import Any, Awaitable, Callable, Optional, Protocol, runtime_checkable

from httpx import AsyncClient, Response
from httpx import RequestError

from .._utils import RequestSpec
from .._utils.constants import HEADER_USER_AGENT, USER_AGENT
from ..models.response import TransportOutcome

logger = getLogger(__name__)


@dataclass(frozen=True)
class TransportResult:
    """Outcome of one exchange, as reported by a transport.

    The result owns the underlying exchange until :meth:`aclose` is awaited.
    """

    status_code: int
    outcome: TransportOutcome
    content: Optional[bytes] = None
    request_content: Optional[bytes] = None
    error: Optional[str] = None
    release: Optional[Callable[[], Awaitable[None]]] = None

    async def aclose(self) -> None:
        if self.release is not None:
            await self.release()


@runtime_checkable
class Transport(Protocol):
    async def send(self, spec: RequestSpec) -> TransportResult: ...

    async def aclose(self) -> None: ...


class HttpxTransport:
    """Transport backed by :class:`httpx.AsyncClient`.

    Any :class:`httpx.RequestError` (connection failures, timeouts, redirect
    loops, undecodable bodies) is reported as a ``TRANSPORT_ERROR`` outcome with
    status ``0``. Responses outside the 2xx range are reported as
    ``TRANSPORT_ERROR`` with their status and body.
    """

    def __init__(
        self,
        client: Optional[AsyncClient] = None,
        *,
        timeout: float = 30.0,
        follow_redirects: bool = True,
    ) -> None:
        self._owns_client = client is None
        self._client = client or AsyncClient(
            **self._client_kwargs(timeout, follow_redirects)
        )

    @staticmethod
    def _client_kwargs(timeout: float, follow_redirects: bool) -> dict[str, Any]:
        return {
            "timeout": timeout,
            "follow_redirects": follow_redirects,
            "headers": {HEADER_USER_AGENT: USER_AGENT},
        }

    async def send(self, spec: RequestSpec) -> TransportResult:
        request = self._client.build_request(
            spec.method,
            spec.url,
            headers=spec.request_headers,
            content=spec.content,
        )

        try:
            response = await self._client.send(request)
        except RequestError as e:
            logger.debug(f"Transport failure for {spec.method} {spec.url}: {e!r}")
            return TransportResult(
                status_code=0,
                outcome=TransportOutcome.TRANSPORT_ERROR,
                request_content=spec.content,
                error=f"{e.__class__.__name__}: {e}",
            )

        return self._to_result(spec, response)

    @staticmethod
    def _to_result(spec: RequestSpec, response: Response) -> TransportResult:
        if response.is_success:
            outcome, error = TransportOutcome.SUCCESS, None
        else:
            outcome, error = TransportOutcome.TRANSPORT_ERROR, response.reason_phrase

        return TransportResult(
            status_code=response.status_code,
            outcome=outcome,
            content=response.content,
            request_content=spec.content,
            error=error,
            release=response.aclose,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
