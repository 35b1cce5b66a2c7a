from .errors import BaseUrlMissingError, EndpointConflictError, EndpointNotFoundError
from .exceptions import TransportError
from .requests import LifecycleMessage, RequestError, RequestStatus, ResponseMeta

__all__ = [
    "BaseUrlMissingError",
    "EndpointConflictError",
    "EndpointNotFoundError",
    "TransportError",
    "LifecycleMessage",
    "RequestError",
    "RequestStatus",
    "ResponseMeta",
]
