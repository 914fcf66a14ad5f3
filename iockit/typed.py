"""Type-checked lookups on top of any resolver."""

from __future__ import annotations

from typing import Any

from iockit.definition import Resolver


def _type_name(bean_type: Any) -> str:
    return getattr(bean_type, "__qualname__", None) or repr(bean_type)


def _conforms(bean: Any, bean_type: Any) -> bool:
    try:
        return isinstance(bean, bean_type)
    except TypeError:
        # Keys that are not classes cannot be checked; accept the bean.
        return True


def get(resolver: Resolver, bean_type: Any, name: str | None = None) -> Any:
    """Resolve one bean and check that it is an instance of ``bean_type``."""
    bean = resolver.resolve(bean_type, name)
    if not _conforms(bean, bean_type):
        raise TypeError(f"bean {name or ''!r} cannot be converted to {_type_name(bean_type)}")
    return bean


def get_all(resolver: Resolver, bean_type: Any) -> list[Any]:
    """Resolve every bean of ``bean_type`` and check each one's type."""
    beans = resolver.resolve_all(bean_type)
    for bean in beans:
        if not _conforms(bean, bean_type):
            raise TypeError(f"bean cannot be converted to {_type_name(bean_type)}")
    return list(beans)