"""Synchronous event emitter base with per-event subscriber lists."""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import MethodType
from typing import Any

logger = logging.getLogger("emitter.core")

Listener = Callable[..., Any]


class EventEmitterError(Exception):
    """Base class for emitter programming errors."""


class InvalidConfiguration(EventEmitterError, ValueError):
    """Raised when an emitter is built without a usable allow-list."""


class UnknownEventType(EventEmitterError, LookupError):
    """Raised when subscribing to an event the emitter does not declare."""

    def __init__(self, event_type: Any) -> None:
        super().__init__(f"Unknown event: {event_type}")
        self.event_type = event_type


@dataclass
class Subscription:
    """One registered listener and the receiver it is called with."""

    callback: Listener
    context: Any = None

    def invoke(self, args: Sequence[Any]) -> Any:
        # Bound methods already carry their receiver.
        if self.context is None or inspect.ismethod(self.callback):
            return self.callback(*args)
        return MethodType(self.callback, self.context)(*args)

    def matches(self, callback: Listener, context: Any = None) -> bool:
        if self.callback != callback:
            return False
        return not context or context is self.context


class EventEmitter(ABC):
    """Base class for objects that emit a fixed set of named events.

    Subclasses pass the allowed event names to the constructor and call
    ``trigger`` when something changes. ``get_initial_event`` lets a new
    subscriber learn the current state as soon as it subscribes.
    """

    def __init__(self, allowed_events: Sequence[str]) -> None:
        if isinstance(allowed_events, (str, bytes)) or not isinstance(allowed_events, Sequence):
            raise InvalidConfiguration("Requires a non-empty sequence of event names.")
        if not allowed_events:
            raise InvalidConfiguration("Requires a non-empty sequence of event names.")
        if not all(isinstance(name, str) for name in allowed_events):
            raise InvalidConfiguration("Event names must be strings.")
        self._allowed_events: tuple[str, ...] = tuple(allowed_events)
        self._listeners: dict[str, list[Subscription]] = {}

    @property
    def allowed_events(self) -> tuple[str, ...]:
        return self._allowed_events

    @abstractmethod
    def get_initial_event(self, event_type: str) -> Sequence[Any] | None:
        """Return arguments to replay to a new subscriber, or None."""

    def trigger(self, event_type: str, *args: Any) -> None:
        """Call every current listener of ``event_type`` with ``args``."""
        listeners = self._listeners.get(event_type)
        if listeners is None:
            return
        # Listeners may subscribe or unsubscribe while we dispatch.
        for subscription in list(listeners):
            subscription.invoke(args)

    def on(self, event_type: str, callback: Listener, context: Any = None) -> None:
        """Subscribe ``callback`` and replay the initial event to it, if any."""
        self._validate_event_type(event_type)
        self._listeners.setdefault(event_type, []).append(Subscription(callback, context))
        logger.debug("Subscribed %r to '%s'", callback, event_type)

        event_data = self.get_initial_event(event_type)
        if event_data is not None:
            Subscription(callback, context).invoke(event_data)

    def off(self, event_type: str, callback: Listener, context: Any = None) -> None:
        """Remove the first subscription matching ``callback`` and ``context``."""
        self._validate_event_type(event_type)
        listeners = self._listeners.get(event_type, [])
        for index, subscription in enumerate(listeners):
            if subscription.matches(callback, context):
                del listeners[index]
                logger.debug("Unsubscribed %r from '%s'", callback, event_type)
                return

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def _validate_event_type(self, event_type: str) -> None:
        if event_type not in self._allowed_events:
            raise UnknownEventType(event_type)
