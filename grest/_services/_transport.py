from logging import getLogger
from typing import Any, Optional

from httpx import (
    AsyncBaseTransport,
    AsyncClient,
    BaseTransport,
    Client,
    Headers,
    HTTPError,
    HTTPStatusError,
    InvalidURL,
    Response,
)

from .._utils import RequestSpec, get_httpx_client_kwargs, header_user_agent
from .._utils._ssl_context import DEFAULT_TIMEOUT, VerifyTypes
from .._utils.constants import TRANSPORT_CLOSED_MESSAGE
from ..models.exceptions import TransportError


def build_request_kwargs(spec: RequestSpec) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"headers": dict(spec.headers)}

    if spec.params is not None:
        kwargs["params"] = dict(spec.params)

    if spec.data is not None:
        if isinstance(spec.data, (str, bytes)):
            kwargs["content"] = spec.data
        else:
            kwargs["json"] = spec.data

    if spec.timeout is not None:
        kwargs["timeout"] = spec.timeout

    return kwargs


def response_data(response: Response) -> Any:
    """Decode a response body the way callers expect it.

    JSON bodies are parsed, anything else is returned as text, and an empty
    body gives ``None``.
    """
    if not response.content:
        return None

    if "json" in response.headers.get("content-type", ""):
        try:
            return response.json()
        except ValueError:
            return response.text

    return response.text

class Transport:
    """Executes request specs over httpx.

    One sync and one async httpx client are kept for the lifetime of the
    transport. Any outcome other than a 2xx response is raised as
    ``TransportError``: error statuses, network failures, URLs httpx cannot
    build and requests sent after ``close()``.

    Args:
        transport: Optional sync httpx transport, e.g. ``httpx.MockTransport``.
        async_transport: Optional async httpx transport. Defaults to
            ``transport`` when that one also handles async requests.
        verify: SSL verification, see ``get_httpx_client_kwargs``.
        timeout: Default request timeout in seconds.
        **client_kwargs: Extra keyword arguments for both httpx clients.
    """

    def __init__(
        self,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
        *,
        verify: Optional[VerifyTypes] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        **client_kwargs: Any,
    ) -> None:
        self._logger = getLogger("grest")

        if async_transport is None and isinstance(transport, AsyncBaseTransport):
            async_transport = transport

        default_client_kwargs = {
            **get_httpx_client_kwargs(verify=verify, timeout=timeout),
            "headers": Headers(header_user_agent()),
            **client_kwargs,
        }

        self._client = Client(**default_client_kwargs, transport=transport)
        self._client_async = AsyncClient(
            **default_client_kwargs, transport=async_transport
        )

    def perform_request(self, spec: RequestSpec) -> Response:
        self._logger.debug(f"Request: {spec.method.upper()} {spec.url}")
        self._logger.debug(f"HEADERS: {dict(spec.headers)}")

        if self._client.is_closed:
            raise TransportError(TRANSPORT_CLOSED_MESSAGE)

        try:
            response = self._client.request(
                spec.method, spec.url, **build_request_kwargs(spec)
            )
            response.raise_for_status()
        except (HTTPError, InvalidURL) as e:
            self._log_failure(spec, e)
            raise TransportError.from_httpx(e) from e

        self._logger.debug(f"Response: {response.status_code} {spec.url}")
        return response

    async def perform_request_async(self, spec: RequestSpec) -> Response:
        self._logger.debug(f"Request: {spec.method.upper()} {spec.url}")
        self._logger.debug(f"HEADERS: {dict(spec.headers)}")

        if self._client_async.is_closed:
            raise TransportError(TRANSPORT_CLOSED_MESSAGE)

        try:
            response = await self._client_async.request(
                spec.method, spec.url, **build_request_kwargs(spec)
            )
            response.raise_for_status()
        except (HTTPError, InvalidURL) as e:
            self._log_failure(spec, e)
            raise TransportError.from_httpx(e) from e

        self._logger.debug(f"Response: {response.status_code} {spec.url}")
        return response

    def close(self) -> None:
        self._client.close()

    async def aclose(self) -> None:
        await self._client_async.aclose()

    def _log_failure(self, spec: RequestSpec, error: Exception) -> None:
        self._logger.debug(f"Request failed: {spec.method.upper()} {spec.url}: {error}")

        if isinstance(error, HTTPStatusError):
            response = error.response
            content = (
                response.content.decode("utf-8", errors="replace")
                if response.content
                else "No content"
            )
            self._logger.debug(
                f"Status Code: {response.status_code}, Response Content: {content}"
            )
