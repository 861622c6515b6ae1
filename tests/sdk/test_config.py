from pathlib import Path

import pytest
from pydantic import ValidationError

from httpapis import Config, HttpApi
from tests.utils.transport import StubTransport


class TestConfig:
    def test_defaults(self):
        config = Config()

        assert config.endpoint == ""
        assert config.timeout == 30.0
        assert config.follow_redirects is True
        assert config.image_max_attempts == 3
        assert config.image_retry_backoff == 0.0

    @pytest.mark.parametrize(
        "field, value",
        [("image_max_attempts", 0), ("timeout", 0), ("image_retry_backoff", -1)],
    )
    def test_invalid_values_are_rejected(self, field: str, value: float):
        with pytest.raises(ValidationError):
            Config(**{field: value})

    def test_assignment_is_validated(self):
        config = Config()

        with pytest.raises(ValidationError):
            config.image_max_attempts = 0

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("HTTPAPIS_ENDPOINT", "https://env.example.com")
        monkeypatch.setenv("HTTPAPIS_TIMEOUT", "5")
        monkeypatch.setenv("HTTPAPIS_IMAGE_MAX_ATTEMPTS", "4")
        monkeypatch.setenv("HTTPAPIS_IMAGE_RETRY_BACKOFF", "0.5")

        config = Config.from_env(tmp_path / "missing.env")

        assert config.endpoint == "https://env.example.com"
        assert config.timeout == 5.0
        assert config.image_max_attempts == 4
        assert config.image_retry_backoff == 0.5

    def test_from_env_reads_dotenv_file(self, tmp_path: Path):
        dotenv = tmp_path / ".env"
        dotenv.write_text("HTTPAPIS_ENDPOINT=https://dotenv.example.com\n")

        config = Config.from_env(dotenv)

        assert config.endpoint == "https://dotenv.example.com"

    def test_from_env_without_variables_uses_defaults(self, tmp_path: Path):
        assert Config.from_env(tmp_path / "missing.env") == Config()


class TestHttpApiFromEnv:
    def test_access_token_becomes_authorization(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ):
        monkeypatch.setenv("HTTPAPIS_ENDPOINT", "https://env.example.com")
        monkeypatch.setenv("HTTPAPIS_ACCESS_TOKEN", "Bearer env-token")

        api = HttpApi.from_env(tmp_path / "missing.env", transport=StubTransport())

        assert api.endpoint == "https://env.example.com"
        assert api.default_headers == {"Authorization": "Bearer env-token"}

    def test_without_token_no_authorization(self, tmp_path: Path):
        api = HttpApi.from_env(tmp_path / "missing.env", transport=StubTransport())

        assert api.default_headers == {}
