"""GRest for Python.

REST APIs made easy: declare the endpoints of an API once, share headers and
authorization across them, and observe every request they make.

The main entry point is the GRest class.

Example:
```python
    # Optionally set these environment variables:
    # export GREST_URL="https://api.net"
    # export GREST_AUTHORIZATION="Bearer your_**_token"

    from grest import GRest
    api = GRest().endpoints(["users", "auth/login"])
    api.subscribe("busy", lambda message: print(message.status))
    api.authLogin.post({"email": "ann@api.net", "pass": "secret"}).ok(
        lambda data, meta: print(meta.status, data)
    )
```
"""

from ._grest import GRest
from ._observable import Observable
from ._services import AsyncRequest, Endpoint, Request, Transport
from ._utils import RequestSpec
from .models import (
    BaseUrlMissingError,
    EndpointConflictError,
    EndpointNotFoundError,
    LifecycleMessage,
    RequestError,
    RequestStatus,
    ResponseMeta,
    TransportError,
)

__all__ = [
    "GRest",
    "Observable",
    "AsyncRequest",
    "Endpoint",
    "Request",
    "RequestSpec",
    "Transport",
    "BaseUrlMissingError",
    "EndpointConflictError",
    "EndpointNotFoundError",
    "LifecycleMessage",
    "RequestError",
    "RequestStatus",
    "ResponseMeta",
    "TransportError",
]
