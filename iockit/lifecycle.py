"""Lifecycle callbacks a bean may implement.

Both contracts are structural: any object with the right method counts,
whether or not its class inherits from these bases.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


def _defines_method(klass: type, name: str) -> bool:
    return any(callable(base.__dict__.get(name)) for base in klass.__mro__)


class InitializingBean(ABC):
    """A bean that wants a callback once its properties have been set."""

    @abstractmethod
    def after_properties_set(self) -> None:
        """Run after the container has injected the bean's dependencies."""

    @classmethod
    def __subclasshook__(cls, subclass: Any) -> Any:
        if cls is InitializingBean and _defines_method(subclass, "after_properties_set"):
            return True
        return NotImplemented


class DisposableBean(ABC):
    """A bean that wants a callback before the container discards it."""

    @abstractmethod
    def destroy(self) -> None:
        """Release resources held by the bean."""

    @classmethod
    def __subclasshook__(cls, subclass: Any) -> Any:
        if cls is DisposableBean and _defines_method(subclass, "destroy"):
            return True
        return NotImplemented