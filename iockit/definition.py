"""Bean definitions: how a managed bean is created, exposed and resolved."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from iockit.scope import Scope


@runtime_checkable
class Resolver(Protocol):
    """Looks up beans by exposed type and optional name."""

    def resolve(self, bean_type: Any, name: str | None = None) -> Any:
        """Return the single bean exposing ``bean_type`` (or named ``name``)."""

    def resolve_all(self, bean_type: Any) -> list[Any]:
        """Return every bean exposing ``bean_type`` in the shared order."""


FactoryFunc = Callable[[Resolver], Any]
InjectorFunc = Callable[[Resolver, Any], None]
Hook = Callable[[Any], None]


class DependencyKind(Enum):
    """How a dependency is handed to the bean."""

    DIRECT = 1
    PROVIDER = 2
    LAZY = 3


@dataclass(frozen=True)
class Dependency:
    """A declared dependency of a bean."""

    name: str
    type: Any
    bean_name: str = ""
    optional: bool = False
    kind: DependencyKind = DependencyKind.DIRECT


@dataclass(frozen=True)
class SourceInfo:
    """Where a bean definition came from."""

    package: str = ""
    file: str = ""
    symbol: str = ""


class InvalidDefinitionError(ValueError):
    """Raised when a bean definition is incomplete or inconsistent."""


def _scope_name(scope: Any) -> str:
    return str(scope) if isinstance(scope, Scope) else "unknown"


@dataclass
class BeanDefinition:
    """Describes how a managed bean is created and resolved."""

    name: str
    scope: Scope = Scope.SINGLETON
    primary: bool = False
    lazy: bool = False
    exposed_types: list[Any] = field(default_factory=list)
    dependencies: list[Dependency] = field(default_factory=list)
    factory: FactoryFunc | None = None
    injector: InjectorFunc | None = None
    init_hook: Hook | None = None
    destroy_hook: Hook | None = None
    source: SourceInfo = field(default_factory=SourceInfo)

    def validate(self) -> None:
        """Raise InvalidDefinitionError if the definition cannot be registered."""
        if not self.name:
            raise InvalidDefinitionError("bean definition requires a name")
        if not isinstance(self.scope, Scope):
            raise InvalidDefinitionError(
                f"bean {self.name!r} uses invalid scope {_scope_name(self.scope)!r}"
            )
        if not self.exposed_types:
            raise InvalidDefinitionError(f"bean {self.name!r} must expose at least one type")
        if self.factory is None:
            raise InvalidDefinitionError(f"bean {self.name!r} requires a factory")
        if any(bean_type is None for bean_type in self.exposed_types):
            raise InvalidDefinitionError(f"bean {self.name!r} contains a None exposed type")

    def exposes(self, bean_type: Any) -> bool:
        """Report whether the bean can be resolved as ``bean_type``."""
        if bean_type is None:
            return False
        return any(candidate == bean_type for candidate in self.exposed_types)

    def description(self) -> str:
        """Return a short ``name|scope[|package:symbol]`` summary."""
        parts = [self.name, _scope_name(self.scope)]
        if self.source.package or self.source.symbol:
            parts.append(f"{self.source.package}:{self.source.symbol}")
        return "|".join(parts)


def _unique_types(types: Iterable[Any]) -> list[Any]:
    unique: list[Any] = []
    for bean_type in types:
        if bean_type is None or bean_type in unique:
            continue
        unique.append(bean_type)
    return unique


def define(
    name: str,
    bean_type: Any,
    factory: FactoryFunc,
    *,
    scope: Scope = Scope.SINGLETON,
    primary: bool = False,
    lazy: bool = False,
    exposed_types: Iterable[Any] = (),
    dependencies: Iterable[Dependency] = (),
    injector: InjectorFunc | None = None,
    init_hook: Hook | None = None,
    destroy_hook: Hook | None = None,
    source: SourceInfo | None = None,
) -> BeanDefinition:
    """Build a bean definition exposing ``bean_type`` plus any extra types.

    Exposed types are de-duplicated in first-seen order and None is dropped.
    """
    return BeanDefinition(
        name=name,
        scope=scope,
        primary=primary,
        lazy=lazy,
        exposed_types=_unique_types([bean_type, *exposed_types]),
        dependencies=list(dependencies),
        factory=factory,
        injector=injector,
        init_hook=init_hook,
        destroy_hook=destroy_hook,
        source=source if source is not None else SourceInfo(),
    )