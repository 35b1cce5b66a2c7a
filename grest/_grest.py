from os import environ as env
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, overload

from dotenv import load_dotenv
from pydantic import ValidationError

from ._config import Config
from ._observable import Observable, Observer
from ._services import Endpoint, Transport
from ._utils import BaseUrl, EndpointName, setup_logging
from ._utils._ssl_context import VerifyTypes
from ._utils.constants import ENV_AUTHORIZATION, ENV_BASE_URL
from .models.errors import (
    BaseUrlMissingError,
    EndpointConflictError,
    EndpointNotFoundError,
)

load_dotenv()


class GRest:
    """Client for a REST API made of named endpoints.

    Register the endpoints once and call them through their camelCase
    accessor. ``authorization``, when set, is sent as the ``Authorization``
    header of every request; it can be changed at any time. Every request
    built through this client reports its activity to the observers
    registered with ``subscribe()``, which is handy for a "network busy"
    indicator.

    Examples:
        ```python
        from grest import GRest

        api = GRest("https://api.net", "Bearer token")
        api.endpoints(["users", "support-tickets", "auth/login"])

        api.users.get(42).ok(lambda data, meta: print(data))
        api.supportTickets.post({"subject": "Help"})
        api.authLogin.post({"email": email, "pass": password})
        ```

    Args:
        base_url (Optional[str]): Root URL of the API. Defaults to ``GREST_URL``.
        authorization (Optional[str]): Value of the ``Authorization`` header.
            Defaults to ``GREST_AUTHORIZATION``.
        transport (Optional[Transport]): Transport the requests go through.
        verify (Optional[VerifyTypes]): SSL verification of the default
            transport: ``False``, a CA bundle path or an ``ssl.SSLContext``.
            Ignored when ``transport`` is given.
        debug (bool): Log at debug level.

    Raises:
        BaseUrlMissingError: No base URL was given or configured.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        authorization: Optional[str] = None,
        *,
        transport: Optional[Transport] = None,
        verify: Optional[VerifyTypes] = None,
        debug: bool = False,
    ) -> None:
        base_url_value = base_url or env.get(ENV_BASE_URL)
        authorization_value = authorization or env.get(ENV_AUTHORIZATION)

        try:
            self._config = Config(
                base_url=base_url_value,  # type: ignore
                authorization=authorization_value,
            )
        except ValidationError as e:
            raise BaseUrlMissingError() from e

        setup_logging(debug)

        self.url = BaseUrl(self._config.base_url)
        self.authorization: Optional[str] = self._config.authorization

        self._names: List[str] = []
        self._accessors: Dict[str, Endpoint] = {}
        self._headers: Dict[str, str] = {}

        self._observable = Observable()
        self._transport = transport or Transport(verify=verify)

    def __repr__(self) -> str:
        return f"GRest({str(self.url)!r}, endpoints={self._names!r})"

    def __getattr__(self, key: str) -> Endpoint:
        # Only reached for names that are not real attributes
        if key.startswith("_"):
            raise AttributeError(key)
        try:
            return self.endpoint(key)
        except EndpointNotFoundError as e:
            raise AttributeError(e.message) from e

    def __getitem__(self, key: str) -> Endpoint:
        return self.endpoint(key)

    def __contains__(self, key: object) -> bool:
        return key in self._accessors

    def __enter__(self) -> "GRest":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "GRest":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def observable(self) -> Observable:
        return self._observable

    @property
    def accessors(self) -> Dict[str, Endpoint]:
        return dict(self._accessors)

    @overload
    def endpoints(self) -> List[str]: ...

    @overload
    def endpoints(self, names: Iterable[str]) -> "GRest": ...

    def endpoints(self, names: Optional[Iterable[str]] = None) -> Any:
        """Get or register the endpoints of the API.

        Pass the endpoint names exactly as the API provides them. Each one
        becomes reachable through its camelCase accessor, e.g. ``"users"``,
        ``"support-tickets"`` and ``"auth/login"`` become ``users``,
        ``supportTickets`` and ``authLogin``. Registering a name twice is a
        no-op.

        Args:
            names: Endpoint names to register. Omit to list the registered ones.

        Returns:
            The registered names when ``names`` is omitted, else the client.

        Raises:
            EndpointConflictError: Two different names map to the same
                accessor. Nothing from ``names`` is registered in that case.
        """
        if names is None:
            return list(self._names)

        incoming: Dict[str, EndpointName] = {}
        for raw in names:
            name = EndpointName(raw)
            if name in self._names or name in incoming.values():
                continue

            key = name.accessor_key
            taken_by = (
                self._accessors[key].name if key in self._accessors else incoming.get(key)
            )
            if taken_by is not None:
                raise EndpointConflictError(key, str(taken_by), str(name))
            incoming[key] = name

        for key, name in incoming.items():
            self._names.append(str(name))
            self._accessors[key] = Endpoint(name, self)

        return self

    def endpoint(self, key: str) -> Endpoint:
        """Get the endpoint registered under the accessor ``key``."""
        try:
            return self._accessors[key]
        except KeyError:
            raise EndpointNotFoundError(key) from None

    @overload
    def headers(self) -> Dict[str, str]: ...

    @overload
    def headers(self, mapping: Mapping[str, Optional[str]]) -> "GRest": ...

    def headers(self, mapping: Optional[Mapping[str, Optional[str]]] = None) -> Any:
        """Get or update the headers sent with every request.

        Headers set to ``None`` are removed, which is also how an
        ``Authorization`` header set here gets unset.
        """
        if mapping is None:
            return dict(self._headers)

        merged = {**self._headers, **mapping}
        self._headers = {key: value for key, value in merged.items() if value is not None}

        return self

    def subscribe(self, id: Hashable, callback: Observer) -> None:
        """Receive every ``LifecycleMessage`` of every request of this client."""
        self._observable.subscribe(id, callback)

    def unsubscribe(self, id: Hashable) -> bool:
        return self._observable.unsubscribe(id)

    def release(self) -> None:
        """Detach every endpoint and observer from the client."""
        for endpoint in self._accessors.values():
            endpoint.release()

        self._accessors.clear()
        self._names.clear()
        self._observable.clear()

    def close(self) -> None:
        self.release()
        self._transport.close()

    async def aclose(self) -> None:
        self.release()
        await self._transport.aclose()
