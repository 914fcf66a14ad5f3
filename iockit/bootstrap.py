"""Process-wide registry of module registrars that contribute beans at boot."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

RegistrarFunc = Callable[[Any], None]
"""Receives a registry and registers bean definitions on it."""


@dataclass(frozen=True)
class Registrar:
    """A named module together with the function that registers its beans."""

    module: str
    register: RegistrarFunc


@dataclass(frozen=True)
class BootstrapSnapshot:
    """The registrars known at one moment, each kind in registration order."""

    bean_registrars: tuple[Registrar, ...] = ()
    starter_registrars: tuple[Registrar, ...] = ()


class BootstrapRegistry:
    """Collects bean and starter registrars, one per module name."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bean_registrars: dict[str, Registrar] = {}
        self._starter_registrars: dict[str, Registrar] = {}

    def register_beans(self, module: str, fn: RegistrarFunc | None) -> None:
        """Add the bean registrar of ``module``; each module registers once."""
        if not module:
            raise ValueError("bootstrap bean registrar requires a module name")
        if fn is None:
            raise ValueError(f"bootstrap bean registrar {module!r} requires a register function")
        with self._lock:
            if module in self._bean_registrars:
                raise ValueError(f"bootstrap bean registrar {module!r} already exists")
            self._bean_registrars[module] = Registrar(module, fn)

    def register_starter(self, module: str, fn: RegistrarFunc | None) -> None:
        """Add the starter registrar of ``module``; each module registers once."""
        if not module:
            raise ValueError("starter registrar requires a module name")
        if fn is None:
            raise ValueError(f"starter registrar {module!r} requires a register function")
        with self._lock:
            if module in self._starter_registrars:
                raise ValueError(f"starter registrar {module!r} already exists")
            self._starter_registrars[module] = Registrar(module, fn)

    def snapshot(self) -> BootstrapSnapshot:
        """Return the current registrars; later changes do not affect it."""
        with self._lock:
            return BootstrapSnapshot(
                bean_registrars=tuple(self._bean_registrars.values()),
                starter_registrars=tuple(self._starter_registrars.values()),
            )

    def reset(self) -> None:
        """Forget every registrar."""
        with self._lock:
            self._bean_registrars = {}
            self._starter_registrars = {}


_default_registry = BootstrapRegistry()


def default_bootstrap_registry() -> BootstrapRegistry:
    """Return the process-wide registry applications read at boot."""
    return _default_registry


def register_beans(module: str, fn: RegistrarFunc | None) -> None:
    """Add a bean registrar to the process-wide registry."""
    _default_registry.register_beans(module, fn)


def register_starter(module: str, fn: RegistrarFunc | None) -> None:
    """Add a starter registrar to the process-wide registry."""
    _default_registry.register_starter(module, fn)


def reset_bootstrap() -> None:
    """Clear the process-wide registry."""
    _default_registry.reset()