import json
from enum import Enum
from http import HTTPStatus
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class TransportOutcome(str, Enum):
    """How a single HTTP exchange ended."""

    SUCCESS = "success"
    TRANSPORT_ERROR = "transport_error"
    CANCELLED = "cancelled"


def parse_json(text: str) -> Dict[str, Any]:
    """Parse a JSON object, returning an empty dict for anything else.

    Malformed payloads are common enough on the endpoints this client talks to
    that callers check for an empty result instead of catching exceptions.
    """
    try:
        value = json.loads(text)
    except (TypeError, ValueError):
        return {}
    return value if isinstance(value, dict) else {}


def parse_json_array(text: str) -> List[Any]:
    """Parse a JSON array, returning an empty list for anything else."""
    try:
        value = json.loads(text)
    except (TypeError, ValueError):
        return []
    return value if isinstance(value, list) else []


class HttpResponse(BaseModel):
    """Snapshot of a completed exchange.

    ``content`` is never ``None``: a response without a body has ``b""``.
    """

    model_config = ConfigDict(frozen=True)

    outcome: TransportOutcome
    status_code: int
    content: bytes = b""

    @field_validator("content", mode="before")
    @classmethod
    def _empty_when_missing(cls, value: Any) -> Any:
        return b"" if value is None else value

    @property
    def is_success(self) -> bool:
        return self.outcome is TransportOutcome.SUCCESS

    @property
    def status(self) -> Optional[HTTPStatus]:
        try:
            return HTTPStatus(self.status_code)
        except ValueError:
            return None

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Dict[str, Any]:  # type: ignore[override]
        return parse_json(self.text)

    def json_array(self) -> List[Any]:
        return parse_json_array(self.text)
