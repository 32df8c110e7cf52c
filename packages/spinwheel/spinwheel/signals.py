"""Notification bus for wheel state changes and winners."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from spinwheel.types import Entry

Handler = Callable[[str, dict[str, Any]], None]

STATE_CHANGED = "wheel.state_changed"
WINNER = "wheel.winner"


class SignalBus:
    """Queued publish/subscribe bus for controller notifications.

    The controller publishes on two channels:

    ``STATE_CHANGED``
        data ``running: bool`` and ``stop_enabled: bool``.
    ``WINNER``
        data ``entry: Entry`` and ``index: int``; once per run.

    Published signals are queued and delivered on ``flush()``, so a handler
    never runs in the middle of a transition.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> Callable[[], None]:
        """Register ``handler``. Returns a callable that unsubscribes it."""
        self._subscribers.setdefault(signal_name, []).append(handler)
        return lambda: self.unsubscribe(signal_name, handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        # Signals published by handlers go to the next flush.
        batch, self._queue = self._queue, []
        for signal_name, data in batch:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()


def state_change_handler(
    callback: Callable[[bool, dict[str, bool]], None],
) -> Handler:
    """Adapt ``callback(running, {"stop_enabled": ...})`` to a bus handler."""

    def handler(signal_name: str, data: dict[str, Any]) -> None:
        callback(data["running"], {"stop_enabled": data["stop_enabled"]})

    return handler


def winner_handler(callback: Callable[[Entry], None]) -> Handler:
    """Adapt ``callback(entry)`` to a bus handler."""

    def handler(signal_name: str, data: dict[str, Any]) -> None:
        callback(data["entry"])

    return handler
