"""Container-owned event mechanism.

Publishers and dispatchers, typed listener helpers, synchronous ordered
dispatch, and the built-in container and bean lifecycle event payloads.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from iockit.ordering import sort_by_order

PUBLISHER_BEAN_NAME = "iockitEventPublisher"
"""Built-in bean name under which the default publisher is registered."""

DISPATCHER_BEAN_NAME = "iockitEventDispatcher"
"""Built-in bean name under which the default dispatcher is registered."""


@runtime_checkable
class Publisher(Protocol):
    """Publishes an event into the container event system."""

    def publish(self, event: Any) -> None:
        """Deliver ``event`` to every interested listener."""


@runtime_checkable
class Listener(Protocol):
    """Receives events of one exact runtime type."""

    event_type: type | None

    def handle(self, event: Any) -> None:
        """Process a single event."""


@runtime_checkable
class Dispatcher(Publisher, Protocol):
    """A publisher that also accepts listener registrations."""

    def register(self, listener: Listener | None) -> None:
        """Add one listener."""

    def register_all(self, *listeners: Listener | None) -> None:
        """Add several listeners in order."""


@dataclass(frozen=True)
class ListenerFunc:
    """Adapts a plain function into an ordered listener."""

    event_type: type | None
    fn: Callable[[Any], Any]
    sort_order: int = 0

    def handle(self, event: Any) -> None:
        """Invoke the wrapped function with ``event``."""
        self.fn(event)

    def order(self) -> int:
        """Return the configured sort value of this listener."""
        return self.sort_order


@dataclass(frozen=True)
class PriorityListenerFunc(ListenerFunc):
    """A function listener that belongs to the priority ordering tier."""

    def priority_order(self) -> None:
        """Mark this listener as part of the priority tier."""


def new_listener(event_type: type, fn: Callable[[Any], Any], order: int = 0) -> ListenerFunc:
    """Create a listener for events whose type is exactly ``event_type``."""
    return ListenerFunc(event_type=event_type, fn=fn, sort_order=order)


def new_priority_listener(
    event_type: type, fn: Callable[[Any], Any], order: int = 0
) -> PriorityListenerFunc:
    """Create a listener in the priority tier for ``event_type`` events."""
    return PriorityListenerFunc(event_type=event_type, fn=fn, sort_order=order)


class SyncDispatcher:
    """Dispatches events synchronously to listeners in the shared order.

    Listeners are matched on the exact type of the event. Priority-ordered
    listeners run first, then ordered ones by their order value; ties keep
    registration order. The first listener that raises stops dispatch.
    """

    def __init__(self, *listeners: Listener | None) -> None:
        self._lock = threading.Lock()
        self._listeners: dict[type, list[Listener]] = {}
        self.register_all(*listeners)

    def register(self, listener: Listener | None) -> None:
        """Register ``listener``; None and listeners without a type are ignored."""
        if listener is None:
            return
        event_type = getattr(listener, "event_type", None)
        if event_type is None:
            return
        with self._lock:
            self._listeners.setdefault(event_type, []).append(listener)

    def register_all(self, *listeners: Listener | None) -> None:
        """Register each of ``listeners`` in turn."""
        for listener in listeners:
            self.register(listener)

    def publish(self, event: Any) -> None:
        """Deliver ``event`` to every listener registered for its type."""
        if event is None:
            return
        with self._lock:
            current = list(self._listeners.get(type(event), ()))
        sort_by_order(current)
        for listener in current:
            listener.handle(event)


@dataclass(frozen=True)
class ContainerBootingEvent:
    """Published before eager singleton creation begins."""

    at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class ContainerBootedEvent:
    """Published after container boot completes."""

    at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class ContainerShuttingDownEvent:
    """Published before singleton destruction starts."""

    at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class ContainerShutdownEvent:
    """Published after container shutdown completes."""

    at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class BeanInitializedEvent:
    """Published after a bean finishes initialization."""

    bean_name: str
    bean_type: type
    at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class BeanDestroyedEvent:
    """Published after a singleton bean finishes destruction."""

    bean_name: str
    bean_type: type
    at: datetime = field(default_factory=datetime.now)