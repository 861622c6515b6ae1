import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

from httpapis import Config, ExecutionContext, HttpApi, RequestSpec
from tests.utils.transport import Reply, StubTransport

# Ensure local source package (src/httpapis) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "HTTPAPIS_ENDPOINT",
        "HTTPAPIS_ACCESS_TOKEN",
        "HTTPAPIS_TIMEOUT",
        "HTTPAPIS_IMAGE_MAX_ATTEMPTS",
        "HTTPAPIS_IMAGE_RETRY_BACKOFF",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def endpoint() -> str:
    return "https://api.example.com/v1"


@pytest.fixture
def config(endpoint: str) -> Config:
    return Config(endpoint=endpoint)


@pytest.fixture
def execution_context() -> ExecutionContext:
    return ExecutionContext()


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def api(
    config: Config, execution_context: ExecutionContext, transport: StubTransport
) -> HttpApi:
    return HttpApi(config, execution_context=execution_context, transport=transport)


@pytest.fixture
def make_api(
    config: Config, execution_context: ExecutionContext
) -> Callable[..., tuple[HttpApi, StubTransport]]:
    """Build a client over a stub transport replaying ``replies``."""

    def factory(
        *replies: Reply, on_send: Optional[Callable[[RequestSpec], None]] = None
    ) -> tuple[HttpApi, StubTransport]:
        transport = StubTransport(*replies, on_send=on_send)
        return HttpApi(config, execution_context, transport), transport

    return factory
