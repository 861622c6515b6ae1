from io import BytesIO
from logging import getLogger
from typing import TYPE_CHECKING, Callable, Optional

from PIL import Image, UnidentifiedImageError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_none,
)
from tenacity.wait import wait_base

from .._utils import RequestSpec
from .._utils.constants import (
    CONTENT_TYPE_IMAGE,
    HEADER_ACCEPT,
    PLACEHOLDER_IMAGE_SIZE,
)
from ..models.exceptions import (
    ContentValidationError,
    RetryExhaustedError,
    TransportError,
)
from ..models.response import HttpResponse

if TYPE_CHECKING:
    from ._base_service import HttpApi

logger = getLogger(__name__)

PlaceholderCheck = Callable[[Image.Image], bool]


def is_placeholder_image(image: Image.Image) -> bool:
    """Whether ``image`` is the stand-in some servers and caches return on failure.

    These placeholders come back with a 2xx status, so they can only be told
    apart from real content by their fixed 8x8 size.
    """
    return image.size == PLACEHOLDER_IMAGE_SIZE


class ImagesService:
    """Downloads images, retrying transport failures up to an attempt budget.

    The budget only counts transport attempts. A payload that arrives but cannot
    be decoded, or that is a placeholder, fails the call right away with
    :class:`ContentValidationError` and is not retried.
    """

    def __init__(
        self,
        api: "HttpApi",
        is_placeholder: PlaceholderCheck = is_placeholder_image,
    ) -> None:
        self._api = api
        self._is_placeholder = is_placeholder

    async def fetch(
        self, url: str, *, max_attempts: Optional[int] = None
    ) -> Image.Image:
        """Download and decode the image at ``url``.

        Args:
            url: Absolute URL of the image, or a path relative to the endpoint.
            max_attempts: Maximum number of exchanges to run. Defaults to the
                ``image_max_attempts`` configuration value.

        Returns:
            Image.Image: The decoded image.

        Raises:
            ContextInactiveError: The execution context is inactive. Checked before
                every attempt.
            RetryExhaustedError: Every attempt failed at the transport level. The
                last :class:`TransportError` is chained as the cause.
            ContentValidationError: The payload is not a usable image.
        """
        attempts = max_attempts
        if attempts is None:
            attempts = self._api.config.image_max_attempts
        if attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {attempts}")

        spec = self._api.build_spec(
            "GET", url, headers={HEADER_ACCEPT: CONTENT_TYPE_IMAGE}
        )
        response = await self._download(spec, attempts)
        return self._decode(spec.url, response)

    async def _download(self, spec: RequestSpec, attempts: int) -> HttpResponse:
        def log_retry(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception() if retry_state.outcome else None
            logger.warning(
                f"Image fetch failed, retrying {spec.url} "
                f"(attempt {retry_state.attempt_number}/{attempts}): "
                f"{getattr(error, 'status_code', '?')} {getattr(error, 'error', '')}"
            )

        retrying = AsyncRetrying(
            stop=stop_after_attempt(attempts),
            wait=self._wait_strategy(),
            retry=retry_if_exception_type(TransportError),
            before_sleep=log_retry,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    response = await self._api.execute(spec)
        except RetryError as e:
            last_error = e.last_attempt.exception()
            raise RetryExhaustedError(spec.url, attempts) from last_error

        return response

    def _wait_strategy(self) -> wait_base:
        backoff = self._api.config.image_retry_backoff
        if backoff <= 0:
            return wait_none()
        return wait_exponential(multiplier=backoff, max=10)

    def _decode(self, url: str, response: HttpResponse) -> Image.Image:
        try:
            image = Image.open(BytesIO(response.content))
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise ContentValidationError(
                url, "payload is not a decodable image"
            ) from e

        if self._is_placeholder(image):
            raise ContentValidationError(
                url, f"received a {image.width}x{image.height} placeholder image"
            )

        return image
