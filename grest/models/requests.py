from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class RequestStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    OK = "ok"
    FAIL = "fail"


class ResponseMeta(BaseModel):
    """Metadata delivered next to the response data on success."""

    model_config = ConfigDict(frozen=True)

    status: int
    headers: Dict[str, str] = {}


class RequestError(BaseModel):
    """Normalized error delivered to ``fail`` callbacks.

    ``message`` is always present. ``status``, ``data`` and ``headers`` are
    only filled when the server actually answered.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    message: str
    status: Optional[int] = None
    data: Optional[Any] = None
    headers: Optional[Dict[str, str]] = None


class LifecycleMessage(BaseModel):
    """What observers receive on every request transition."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    endpoint: Optional[str] = None
    method: str
    status: RequestStatus
