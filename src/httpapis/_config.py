import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import (
    DEFAULT_IMAGE_MAX_ATTEMPTS,
    DOTENV_FILE,
    ENV_ENDPOINT,
    ENV_IMAGE_MAX_ATTEMPTS,
    ENV_IMAGE_RETRY_BACKOFF,
    ENV_TIMEOUT,
)


class Config(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    endpoint: str = ""
    timeout: float = Field(default=30.0, gt=0)
    follow_redirects: bool = True
    image_max_attempts: int = Field(default=DEFAULT_IMAGE_MAX_ATTEMPTS, ge=1)
    image_retry_backoff: float = Field(default=0.0, ge=0)

    @classmethod
    def from_env(cls, dotenv_path: Optional[Union[str, Path]] = None) -> "Config":
        """Build a configuration from the environment.

        Values from a ``.env`` file are loaded first (without overriding variables
        that are already set), then ``HTTPAPIS_*`` variables are read. Variables
        that are not set keep the model defaults.

        Args:
            dotenv_path: Location of the ``.env`` file. Defaults to ``.env`` in the
                current working directory.

        Returns:
            Config: The validated configuration.
        """
        load_dotenv(dotenv_path=dotenv_path or Path.cwd() / DOTENV_FILE)

        values: dict[str, str] = {}
        for field_name, env_name in (
            ("endpoint", ENV_ENDPOINT),
            ("timeout", ENV_TIMEOUT),
            ("image_max_attempts", ENV_IMAGE_MAX_ATTEMPTS),
            ("image_retry_backoff", ENV_IMAGE_RETRY_BACKOFF),
        ):
            value = os.environ.get(env_name)
            if value:
                values[field_name] = value

        return cls.model_validate(values)
