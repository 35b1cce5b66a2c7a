import asyncio
from logging import getLogger
from typing import Any, Callable, List, Optional, Tuple

from httpx import Response

from .._observable import Observable
from .._utils import RequestSpec
from .._utils.constants import GENERIC_ERROR_MESSAGE, NETWORK_ERROR_MESSAGE
from ..models import LifecycleMessage, RequestError, RequestStatus, ResponseMeta
from ..models.exceptions import TransportError
from ._transport import Transport, response_data

SuccessCallback = Callable[[Any, ResponseMeta], Any]
FailureCallback = Callable[[RequestError], Any]


def normalize_error(error: TransportError) -> RequestError:
    response = error.response
    if response is None:
        return RequestError(message=error.message or NETWORK_ERROR_MESSAGE)

    return RequestError(
        message=response.reason_phrase or GENERIC_ERROR_MESSAGE,
        status=response.status_code,
        data=response_data(response),
        headers=dict(response.headers),
    )


class _BaseRequest:
    """One HTTP call that keeps its outcome and can be issued again.

    The request is sent as soon as it is built. Callbacks attached with
    ``ok()`` and ``fail()`` run in the order they were attached and each gets
    the same original outcome. Once an outcome exists, new callbacks run
    immediately against it without touching the network; ``again()`` forgets
    the outcome and re-sends the exact same configuration.

    Every transition is broadcast to ``observable`` as a
    ``LifecycleMessage``.
    """

    def __init__(
        self,
        config: RequestSpec,
        transport: Transport,
        observable: Optional[Observable] = None,
    ) -> None:
        self._logger = getLogger("grest")
        self._config = config
        self._transport = transport
        self._observable = observable

        self._status = RequestStatus.IDLE
        self._result: Optional[Tuple[Any, ResponseMeta]] = None
        self._error: Optional[RequestError] = None
        self._on_ok: List[SuccessCallback] = []
        self._on_fail: List[FailureCallback] = []
        self._generation = 0

        self.again()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._config.method.upper()} "
            f"{self._config.url}, status={self._status.value})"
        )

    @property
    def config(self) -> RequestSpec:
        return self._config

    @property
    def status(self) -> RequestStatus:
        return self._status

    @property
    def result(self) -> Optional[Tuple[Any, ResponseMeta]]:
        return self._result

    @property
    def error(self) -> Optional[RequestError]:
        return self._error

    def again(self):
        """Send the stored configuration again."""
        self._result = None
        self._error = None
        self._on_ok = []
        self._on_fail = []
        self._generation += 1

        self._status = RequestStatus.PENDING
        self._notify(RequestStatus.PENDING)

        self._dispatch()
        return self

    def ok(self, callback: SuccessCallback):
        """Call ``callback(data, meta)`` once the request succeeds."""
        if self._result is not None:
            callback(*self._result)
        else:
            self._on_ok.append(callback)
        return self

    def fail(self, callback: FailureCallback):
        """Call ``callback(error)`` once the request fails."""
        if self._error is not None:
            callback(self._error)
        else:
            self._on_fail.append(callback)
        return self

    def _dispatch(self) -> None:
        raise NotImplementedError

    def _resolve(self, response: Response) -> None:
        result = (
            response_data(response),
            ResponseMeta(status=response.status_code, headers=dict(response.headers)),
        )
        self._result = result
        self._status = RequestStatus.OK
        generation = self._generation

        # Cleared before running so a callback may call again()
        callbacks, self._on_ok = self._on_ok, []
        self._on_fail = []
        for callback in callbacks:
            self._run_callback(callback, *result)

        # A callback that called again() already reported the newer run
        if generation == self._generation:
            self._notify(RequestStatus.OK)

    def _reject(self, error: TransportError) -> None:
        normalized = normalize_error(error)
        self._error = normalized
        self._status = RequestStatus.FAIL
        generation = self._generation

        callbacks, self._on_fail = self._on_fail, []
        self._on_ok = []
        for callback in callbacks:
            self._run_callback(callback, normalized)

        if generation == self._generation:
            self._notify(RequestStatus.FAIL)

    def _run_callback(self, callback: Callable[..., Any], *args: Any) -> None:
        try:
            callback(*args)
        except Exception:
            self._logger.exception(
                f"Callback failed for {self._config.method.upper()} {self._config.url}"
            )

    def _notify(self, status: RequestStatus) -> None:
        if self._observable is None:
            return

        self._observable.notify(
            LifecycleMessage(
                endpoint=self._config.endpoint,
                method=self._config.method,
                status=status,
            )
        )


class Request(_BaseRequest):
    """A request sent synchronously through the transport.

    ``again()`` blocks until the transport answers, so by the time the
    request is returned its outcome is already known.

    Examples:
        ```python
        api.users.get(42).ok(lambda data, meta: print(data)).fail(print)
        ```
    """

    def _dispatch(self) -> None:
        try:
            response = self._transport.perform_request(self._config)
        except TransportError as e:
            self._reject(e)
        else:
            self._resolve(response)


class AsyncRequest(_BaseRequest):
    """A request sent as a task on the running event loop.

    Building one outside a running loop raises ``RuntimeError``. Awaiting the
    request waits for the latest execution to settle and returns the request
    itself. When ``again()`` is called while an earlier execution is still in
    flight, the earlier outcome is discarded.

    Examples:
        ```python
        request = await api.users.get_async(42)
        data, meta = request.result
        ```
    """

    def __init__(
        self,
        config: RequestSpec,
        transport: Transport,
        observable: Optional[Observable] = None,
    ) -> None:
        self._loop = asyncio.get_running_loop()
        self._task: Optional["asyncio.Task[None]"] = None
        super().__init__(config, transport, observable)

    def __await__(self):
        return self.wait().__await__()

    async def wait(self) -> "AsyncRequest":
        task = None
        while task is not self._task:
            task = self._task
            if task is not None:
                await task
        return self

    def _dispatch(self) -> None:
        self._task = self._loop.create_task(self._run(self._generation))

    async def _run(self, generation: int) -> None:
        try:
            response = await self._transport.perform_request_async(self._config)
        except TransportError as e:
            if self._is_stale(generation):
                return
            self._reject(e)
        else:
            if self._is_stale(generation):
                return
            self._resolve(response)

    def _is_stale(self, generation: int) -> bool:
        if generation == self._generation:
            return False

        self._logger.debug(
            f"Discarding superseded outcome of {self._config.method.upper()} {self._config.url}"
        )
        return True
