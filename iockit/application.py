"""The application container: registration, boot, lookup and shutdown."""

from __future__ import annotations

import threading
from typing import Any

from iockit.bootstrap import default_bootstrap_registry
from iockit.definition import BeanDefinition, define
from iockit.events import (
    DISPATCHER_BEAN_NAME,
    PUBLISHER_BEAN_NAME,
    ContainerBootedEvent,
    ContainerBootingEvent,
    ContainerShutdownEvent,
    ContainerShuttingDownEvent,
    Dispatcher,
    Listener,
    Publisher,
    SyncDispatcher,
)
from iockit.factory import BeanFactory, ContainerError


class Application:
    """A container that owns a bean factory and the built-in event dispatcher.

    The dispatcher is registered as a bean under both the publisher and the
    dispatcher names, so injected publishers, discovered listeners and
    lifecycle events share one event mechanism.
    """

    def __init__(self) -> None:
        self._events = SyncDispatcher()
        self._factory = BeanFactory(event_publisher=self._events)
        self._lock = threading.Lock()
        self._booted = False
        self._factory.register(
            define(PUBLISHER_BEAN_NAME, Publisher, lambda _resolver: self._events),
            define(DISPATCHER_BEAN_NAME, Dispatcher, lambda _resolver: self._events),
        )

    def __enter__(self) -> Application:
        self.boot()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()

    def register(self, *definitions: BeanDefinition) -> None:
        """Add bean definitions to the container."""
        self._factory.register(*definitions)

    def boot(self) -> None:
        """Run bootstrap registrars, discover listeners and create eager singletons.

        Booting an already booted application does nothing.
        """
        with self._lock:
            if self._booted:
                return

        snapshot = default_bootstrap_registry().snapshot()
        for registrar in snapshot.bean_registrars:
            try:
                registrar.register(self)
            except Exception as exc:
                raise ContainerError(
                    f"register beans for module {registrar.module!r}: {exc}"
                ) from exc
        for registrar in snapshot.starter_registrars:
            try:
                registrar.register(self)
            except Exception as exc:
                raise ContainerError(f"register starter {registrar.module!r}: {exc}") from exc

        self._register_listener_beans()
        self._events.publish(ContainerBootingEvent())
        self._factory.pre_instantiate_singletons()

        with self._lock:
            self._booted = True
        self._events.publish(ContainerBootedEvent())

    def shutdown(self) -> None:
        """Destroy managed singletons; does nothing unless the application is booted."""
        with self._lock:
            if not self._booted:
                return
            self._booted = False
        self._events.publish(ContainerShuttingDownEvent())
        self._factory.destroy_singletons()
        self._events.publish(ContainerShutdownEvent())

    def resolve(self, bean_type: Any, name: str | None = None) -> Any:
        """Return one bean by exposed type and optional name."""
        return self._factory.resolve(bean_type, name)

    def resolve_all(self, bean_type: Any) -> list[Any]:
        """Return every bean exposing ``bean_type`` in the shared order."""
        return self._factory.resolve_all(bean_type)

    def definitions(self) -> list[BeanDefinition]:
        """Return the bean definitions in registration order."""
        return self._factory.definitions()

    def publish(self, event: Any) -> None:
        """Publish ``event`` through the built-in dispatcher."""
        self._events.publish(event)

    def dispatcher(self) -> SyncDispatcher:
        """Return the built-in dispatcher."""
        return self._events

    def _register_listener_beans(self) -> None:
        for definition in self._factory.definitions():
            if not definition.exposes(Listener):
                continue
            try:
                bean = self.resolve(Listener, definition.name)
            except Exception as exc:
                raise ContainerError(
                    f"resolve listener bean {definition.name!r}: {exc}"
                ) from exc
            if not isinstance(bean, Listener):
                raise ContainerError(f"bean {definition.name!r} does not implement Listener")
            self._events.register(bean)


_default_application: Application | None = None


def start() -> Application:
    """Boot a new default application from the process-wide bootstrap registrars."""
    global _default_application
    app = Application()
    app.boot()
    _default_application = app
    return app


def default_application() -> Application | None:
    """Return the application booted by start(), if any."""
    return _default_application