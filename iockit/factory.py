"""The bean factory: registration, resolution, caching and destruction of beans."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from contextlib import suppress
from typing import Any

from iockit.definition import BeanDefinition
from iockit.events import BeanDestroyedEvent, BeanInitializedEvent, Publisher
from iockit.lifecycle import DisposableBean, InitializingBean
from iockit.ordering import sort_by_order
from iockit.scope import Scope


class ContainerError(Exception):
    """Base class of errors raised while resolving or managing beans."""


class DuplicateBeanError(ContainerError):
    """Raised when a bean name is registered twice."""


class BeanNotFoundError(ContainerError, LookupError):
    """Raised when no bean matches a name or type."""


class AmbiguousBeanError(ContainerError, LookupError):
    """Raised when several beans match a type and no single primary wins."""


class BeanCycleError(ContainerError):
    """Raised when bean creation would depend on itself."""

    def __init__(self, path: Iterable[str]) -> None:
        self.path = tuple(path)
        super().__init__("bean cycle detected: " + " -> ".join(self.path))


class BeanCreationError(ContainerError):
    """Raised when a bean's factory, injector or init hook fails."""

    def __init__(self, bean_name: str, stage: str, cause: BaseException) -> None:
        self.bean_name = bean_name
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage} bean {bean_name!r}: {cause}")


class DestroySingletonsError(ContainerError):
    """Raised after shutdown when one or more destroy steps failed."""

    def __init__(self, errors: Iterable[BaseException]) -> None:
        self.errors = tuple(errors)
        super().__init__("destroy singletons: " + "; ".join(str(err) for err in self.errors))


def _type_name(bean_type: Any) -> str:
    return getattr(bean_type, "__qualname__", None) or repr(bean_type)


class _TrailResolver:
    """Resolver handed to factories; it carries the chain of beans being built."""

    def __init__(self, factory: BeanFactory, trail: tuple[str, ...]) -> None:
        self._factory = factory
        self._trail = trail

    def resolve(self, bean_type: Any, name: str | None = None) -> Any:
        definition = self._factory._select_definition(bean_type, name)
        return self._factory._resolve_definition(definition.name, self._trail)

    def resolve_all(self, bean_type: Any) -> list[Any]:
        return self._factory._resolve_all(bean_type, self._trail)


class BeanFactory:
    """Holds bean definitions and the singletons created from them.

    Definitions are kept in registration order; singletons are destroyed in
    the reverse of the order in which they were created.
    """

    def __init__(self, event_publisher: Publisher | None = None) -> None:
        self._lock = threading.RLock()
        self._definitions: dict[str, BeanDefinition] = {}
        self._type_index: dict[Any, list[str]] = {}
        self._singletons: dict[str, Any] = {}
        self._bean_locks: dict[str, threading.Lock] = {}
        self._event_publisher = event_publisher

    @property
    def event_publisher(self) -> Publisher | None:
        """The publisher that receives bean lifecycle events, if any."""
        with self._lock:
            return self._event_publisher

    @event_publisher.setter
    def event_publisher(self, publisher: Publisher | None) -> None:
        with self._lock:
            self._event_publisher = publisher

    def register(self, *definitions: BeanDefinition) -> None:
        """Validate and add definitions in order.

        Definitions before a failing one stay registered.
        """
        with self._lock:
            for definition in definitions:
                definition.validate()
                if definition.name in self._definitions:
                    raise DuplicateBeanError(f"duplicate bean definition {definition.name!r}")
                self._definitions[definition.name] = definition
                for bean_type in definition.exposed_types:
                    names = self._type_index.setdefault(bean_type, [])
                    if definition.name not in names:
                        names.append(definition.name)
                self._bean_locks.setdefault(definition.name, threading.Lock())

    def resolve(self, bean_type: Any, name: str | None = None) -> Any:
        """Return the bean named ``name``, or the single/primary bean of ``bean_type``."""
        definition = self._select_definition(bean_type, name)
        return self._resolve_definition(definition.name, ())

    def resolve_all(self, bean_type: Any) -> list[Any]:
        """Return every bean exposing ``bean_type`` in the shared order."""
        return self._resolve_all(bean_type, ())

    def pre_instantiate_singletons(self) -> None:
        """Create every non-lazy singleton in registration order."""
        with self._lock:
            definitions = list(self._definitions.values())
        for definition in definitions:
            if definition.scope is Scope.SINGLETON and not definition.lazy:
                self._resolve_definition(definition.name, ())

    def destroy_singletons(self) -> None:
        """Destroy singletons in reverse creation order and forget them.

        Failing destroy hooks and event listeners do not stop the others;
        their errors are raised together as DestroySingletonsError.
        """
        with self._lock:
            created = list(self._singletons.items())
            definitions = dict(self._definitions)

        errors: list[BaseException] = []
        for name, bean in reversed(created):
            if isinstance(bean, DisposableBean):
                bean.destroy()
            hook = definitions[name].destroy_hook if name in definitions else None
            if hook is not None:
                try:
                    hook(bean)
                except Exception as exc:
                    errors.append(exc)
            publisher = self.event_publisher
            if publisher is not None:
                try:
                    publisher.publish(BeanDestroyedEvent(bean_name=name, bean_type=type(bean)))
                except Exception as exc:
                    errors.append(exc)

        with self._lock:
            self._singletons = {}

        if errors:
            raise DestroySingletonsError(errors)

    def definitions(self) -> list[BeanDefinition]:
        """Return the registered definitions in registration order."""
        with self._lock:
            return list(self._definitions.values())

    def _resolve_all(self, bean_type: Any, trail: tuple[str, ...]) -> list[Any]:
        with self._lock:
            names = list(self._type_index.get(bean_type, ()))
        if not names:
            raise BeanNotFoundError(f"no beans found for type {_type_name(bean_type)}")
        beans = [self._resolve_definition(name, trail) for name in names]
        sort_by_order(beans)
        return beans

    def _select_definition(self, bean_type: Any, name: str | None) -> BeanDefinition:
        with self._lock:
            if name:
                definition = self._definitions.get(name)
                if definition is None:
                    raise BeanNotFoundError(f"bean {name!r} is not registered")
                if bean_type is not None and not definition.exposes(bean_type):
                    raise BeanNotFoundError(
                        f"bean {name!r} does not expose type {_type_name(bean_type)}"
                    )
                return definition

            candidates = self._type_index.get(bean_type, [])
            if not candidates:
                raise BeanNotFoundError(f"no beans found for type {_type_name(bean_type)}")
            if len(candidates) == 1:
                return self._definitions[candidates[0]]

            primaries = [
                self._definitions[candidate]
                for candidate in candidates
                if self._definitions[candidate].primary
            ]
            if len(primaries) > 1:
                raise AmbiguousBeanError(
                    f"multiple primary beans found for type {_type_name(bean_type)}"
                )
            if primaries:
                return primaries[0]
            raise AmbiguousBeanError(
                f"multiple beans found for type {_type_name(bean_type)}: {', '.join(candidates)}"
            )

    def _resolve_definition(self, name: str, trail: tuple[str, ...]) -> Any:
        if name in trail:
            raise BeanCycleError([*trail, name])

        with self._lock:
            definition = self._definitions.get(name)
            if definition is None:
                raise BeanNotFoundError(f"bean {name!r} is not registered")
            if name in self._singletons:
                return self._singletons[name]

        if definition.scope is not Scope.SINGLETON:
            return self._create(definition, trail)

        with self._bean_lock(name):
            with self._lock:
                if name in self._singletons:
                    return self._singletons[name]
            return self._create(definition, trail)

    def _create(self, definition: BeanDefinition, trail: tuple[str, ...]) -> Any:
        name = definition.name
        resolver = _TrailResolver(self, (*trail, name))

        try:
            bean = definition.factory(resolver)
        except Exception as exc:
            raise BeanCreationError(name, "create", exc) from exc

        if definition.injector is not None:
            try:
                definition.injector(resolver, bean)
            except Exception as exc:
                raise BeanCreationError(name, "inject", exc) from exc

        if isinstance(bean, InitializingBean):
            bean.after_properties_set()

        if definition.init_hook is not None:
            try:
                definition.init_hook(bean)
            except Exception as exc:
                raise BeanCreationError(name, "initialize", exc) from exc

        if definition.scope is Scope.SINGLETON:
            with self._lock:
                self._singletons.setdefault(name, bean)

        publisher = self.event_publisher
        if publisher is not None:
            # A failing listener must not fail bean creation.
            with suppress(Exception):
                publisher.publish(BeanInitializedEvent(bean_name=name, bean_type=type(bean)))

        return bean

    def _bean_lock(self, name: str) -> threading.Lock:
        with self._lock:
            return self._bean_locks.setdefault(name, threading.Lock())