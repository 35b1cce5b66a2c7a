from ._endpoint import EndpointName, accessor_key
from ._logs import setup_logging
from ._request_spec import QueryOrSuffix, RequestSpec
from ._ssl_context import get_httpx_client_kwargs
from ._url import BaseUrl
from ._user_agent import header_user_agent, user_agent_value

__all__ = [
    "EndpointName",
    "accessor_key",
    "setup_logging",
    "QueryOrSuffix",
    "RequestSpec",
    "get_httpx_client_kwargs",
    "BaseUrl",
    "header_user_agent",
    "user_agent_value",
]
