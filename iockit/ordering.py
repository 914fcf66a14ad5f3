"""Shared ordering model for extension points, listeners and resolved beans.

Priority-ordered values come first, then ordered values, then everything
else.  Ties keep their original relative order.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Protocol, runtime_checkable

HIGHEST_PRECEDENCE = -(1 << 31)
"""Sorts before every other ordered value."""

LOWEST_PRECEDENCE = (1 << 31) - 1
"""Sorts after every other ordered value."""

_PRIORITY_TIER = 0
_ORDERED_TIER = 1


@runtime_checkable
class Ordered(Protocol):
    """A value with a numeric order; lower values come first."""

    def order(self) -> int:
        """Return the sort value of this object."""


@runtime_checkable
class PriorityOrdered(Ordered, Protocol):
    """An ordered value that belongs to the highest-priority tier."""

    def priority_order(self) -> None:
        """Mark the object as part of the priority tier."""


@dataclass(frozen=True)
class OrderMetadata:
    """The ordering tier and sort value of a candidate."""

    tier: int
    order: int


def _has_method(value: Any, name: str) -> bool:
    return callable(getattr(value, name, None))


def metadata_of(value: Any) -> OrderMetadata | None:
    """Return ordering metadata for ``value``, or None if it is unordered."""
    if not _has_method(value, "order"):
        return None
    if _has_method(value, "priority_order"):
        return OrderMetadata(tier=_PRIORITY_TIER, order=value.order())
    return OrderMetadata(tier=_ORDERED_TIER, order=value.order())


def compare(left: Any, right: Any) -> int:
    """Compare two values under the shared ordering model.

    Negative when ``left`` sorts first, zero for the same position and
    positive when ``left`` sorts after ``right``.
    """
    left_meta = metadata_of(left)
    right_meta = metadata_of(right)
    if left_meta is not None and right_meta is not None:
        if left_meta.tier != right_meta.tier:
            return left_meta.tier - right_meta.tier
        return left_meta.order - right_meta.order
    if left_meta is not None:
        return -1
    if right_meta is not None:
        return 1
    return 0


def sort_by_order(values: list[Any]) -> None:
    """Sort ``values`` in place, keeping original order for ties."""
    values.sort(key=cmp_to_key(compare))