from ._transport import Transport
from .endpoint_service import Endpoint
from .request_service import AsyncRequest, Request

__all__ = [
    "Transport",
    "Endpoint",
    "AsyncRequest",
    "Request",
]
