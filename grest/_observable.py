from logging import getLogger
from typing import Any, Callable, Dict, Hashable

Observer = Callable[[Any], None]


class Observable:
    """Synchronous publish/subscribe primitive.

    Observers are keyed by an id so the same party can replace or remove its
    callback. ``notify`` fans a message out to every observer in subscription
    order; an observer that raises is logged and skipped so the rest still
    get the message.
    """

    def __init__(self) -> None:
        self._logger = getLogger("grest")
        self._observers: Dict[Hashable, Observer] = {}

    def subscribe(self, id: Hashable, callback: Observer) -> None:
        self._observers[id] = callback

    def unsubscribe(self, id: Hashable) -> bool:
        return self._observers.pop(id, None) is not None

    def clear(self) -> None:
        self._observers.clear()

    @property
    def observers(self) -> list[Hashable]:
        return list(self._observers)

    def notify(self, message: Any) -> None:
        # Copy so observers may (un)subscribe while being notified
        for id, callback in list(self._observers.items()):
            try:
                callback(message)
            except Exception:
                self._logger.exception(f"Observer {id!r} failed on {message!r}")
