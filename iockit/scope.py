"""Bean scopes."""

from __future__ import annotations

from enum import Enum


class Scope(Enum):
    """How many instances of a bean the container creates."""

    SINGLETON = "singleton"
    PROTOTYPE = "prototype"

    def __str__(self) -> str:
        return self.value


def parse_scope(src: str) -> Scope:
    """Parse a scope name; an empty name means singleton."""
    if src in ("", "singleton"):
        return Scope.SINGLETON
    if src == "prototype":
        return Scope.PROTOTYPE
    raise ValueError(f"unsupported scope {src!r}")