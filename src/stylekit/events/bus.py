"""Synchronous event bus for style provider lifecycle events."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus dispatching on the exact event type.

    Listeners run synchronously, in subscription order, on the emitting call
    stack. Exceptions raised by a listener propagate to the emitter.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns an unsubscribe function."""
        listeners = self._listeners.setdefault(event_type, [])
        listeners.append(callback)
        return lambda: listeners.remove(callback)

    def on_all(self, callback: Listener) -> Callable[[], None]:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)
        return lambda: self._global_listeners.remove(callback)

    def emit(self, event: Any) -> None:
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), ())):
            cb(event)
