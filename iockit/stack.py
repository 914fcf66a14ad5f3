"""A simple last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Stack:
    """A LIFO stack whose pop and peek return None when empty."""

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(elements)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def push(self, element: Any) -> None:
        self._items.append(element)

    def push_list(self, *elements: Any) -> None:
        self._items.extend(elements)

    def pop(self) -> Any:
        """Remove and return the top element, or None if the stack is empty."""
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it, or None if empty."""
        if not self._items:
            return None
        return self._items[-1]

    def clear(self) -> None:
        self._items = []


def to_element(element: Any) -> Any:
    """Return ``element`` as a single stack element."""
    (converted,) = to_elements(element)
    return converted


def to_elements(*elements: Any) -> list[Any]:
    """Collect the given values into a list of stack elements."""
    return list(elements)