from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, Union

from .._utils import EndpointName, QueryOrSuffix, RequestSpec
from .._utils.constants import (
    HEADER_AUTHORIZATION,
    HEADER_REQUESTED_WITH,
    REQUESTED_WITH_VALUE,
)
from .request_service import AsyncRequest, Request

if TYPE_CHECKING:
    from .._grest import GRest


def _has_header(headers: Mapping[str, Any], name: str) -> bool:
    name = name.lower()
    return any(key.lower() == name for key in headers)


class Endpoint:
    """One REST resource of the API, e.g. ``users`` or ``auth/login``.

    Every verb method builds a fresh request configuration from the client's
    current headers and authorization and sends it right away, returning the
    resulting ``Request``. The ``*_async`` variants return an
    ``AsyncRequest`` and must be called from a running event loop.

    Args:
        name (str): Name of the endpoint exactly as the API provides it.
        api (GRest): The client the endpoint belongs to.
    """

    def __init__(self, name: str, api: "GRest") -> None:
        self.name = EndpointName(name)
        self._api: Optional["GRest"] = api
        self._url = api.url.endpoint_url(name)

    def __repr__(self) -> str:
        return f"Endpoint({self.name!r}, url={self._url!r})"

    @property
    def url(self) -> str:
        return self._url

    @property
    def released(self) -> bool:
        return self._api is None

    def build_spec(
        self,
        method: str,
        query: QueryOrSuffix = None,
        *,
        data: Optional[Any] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        timeout: Optional[Union[int, float]] = None,
    ) -> RequestSpec:
        """Build the request configuration for one call on this endpoint.

        The client's global headers are copied and the caller's ``headers``
        overlay them key by key. ``X-Requested-With`` is always set, and the
        client's ``authorization`` is added unless the call already carries
        an ``Authorization`` header.

        ``query`` may be a mapping, sent as query parameters (an empty
        mapping still counts as a query), or any other value, appended
        verbatim to the URL (``"?foo=bar"`` or a resource id).
        """
        api = self._require_api()

        merged = {**api.headers(), **(headers or {})}
        merged = {key: value for key, value in merged.items() if value is not None}

        merged[HEADER_REQUESTED_WITH] = REQUESTED_WITH_VALUE

        if api.authorization and not _has_header(merged, HEADER_AUTHORIZATION):
            merged[HEADER_AUTHORIZATION] = api.authorization

        url = self._url
        params = None

        if isinstance(query, Mapping):
            params = dict(query)
        elif query is not None:
            url += str(query)

        return RequestSpec(
            method=method,
            url=url,
            headers=merged,
            params=params,
            data=data,
            endpoint=str(self.name),
            timeout=timeout,
        )

    def http(
        self,
        method: str,
        query: QueryOrSuffix = None,
        *,
        data: Optional[Any] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        timeout: Optional[Union[int, float]] = None,
    ) -> Request:
        """Send a custom request to this endpoint.

        Args:
            method (str): HTTP method, e.g. ``"patch"``.
            query: Query parameters mapping, or a string/id appended to the URL.
            data: Request body. ``str``/``bytes`` go out raw, anything else as JSON.
            headers: Headers overriding the client's global ones for this call.
            timeout: Transport timeout for this call.

        Returns:
            Request: The request, already sent.
        """
        spec = self.build_spec(
            method, query, data=data, headers=headers, timeout=timeout
        )
        api = self._require_api()
        return Request(spec, api.transport, api.observable)

    def http_async(
        self,
        method: str,
        query: QueryOrSuffix = None,
        *,
        data: Optional[Any] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        timeout: Optional[Union[int, float]] = None,
    ) -> AsyncRequest:
        """Asynchronously send a custom request to this endpoint.

        The returned request is already scheduled; await it to wait for the
        outcome.
        """
        spec = self.build_spec(
            method, query, data=data, headers=headers, timeout=timeout
        )
        api = self._require_api()
        return AsyncRequest(spec, api.transport, api.observable)

    def get(self, query: QueryOrSuffix = None) -> Request:
        """Performs a GET request."""
        return self.http("get", query)

    def delete(self, query: QueryOrSuffix = None) -> Request:
        """Performs a DELETE request."""
        return self.http("delete", query)

    def post(self, data: Optional[Any] = None, *, query: QueryOrSuffix = None) -> Request:
        """Performs a POST request.

        Examples:
            ```python
            api.authLogin.post({"email": email, "pass": password})
            api.users.post({"name": "Ann"}, query=42)
            ```
        """
        return self.http("post", query, data=data)

    def put(self, data: Optional[Any] = None, *, query: QueryOrSuffix = None) -> Request:
        """Performs a PUT request."""
        return self.http("put", query, data=data)

    def get_async(self, query: QueryOrSuffix = None) -> AsyncRequest:
        return self.http_async("get", query)

    def delete_async(self, query: QueryOrSuffix = None) -> AsyncRequest:
        return self.http_async("delete", query)

    def post_async(
        self, data: Optional[Any] = None, *, query: QueryOrSuffix = None
    ) -> AsyncRequest:
        return self.http_async("post", query, data=data)

    def put_async(
        self, data: Optional[Any] = None, *, query: QueryOrSuffix = None
    ) -> AsyncRequest:
        return self.http_async("put", query, data=data)

    def release(self) -> None:
        self._api = None

    def _require_api(self) -> "GRest":
        if self._api is None:
            raise RuntimeError(f"Endpoint '{self.name}' was released")
        return self._api
