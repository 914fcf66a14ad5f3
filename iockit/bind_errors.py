"""Errors raised when binding configuration properties onto a bean."""

from __future__ import annotations


class ConfigurationBindError(Exception):
    """Configuration binding failed for a bean, with where and why."""

    def __init__(self, bean_name: str, type_name: str, prefix: str, cause: BaseException) -> None:
        self.bean_name = bean_name
        self.type_name = type_name
        self.prefix = prefix
        self.cause = cause
        super().__init__(bean_name, type_name, prefix, cause)
        self.__cause__ = cause

    def __str__(self) -> str:
        if not self.bean_name:
            return (
                f"nemo starter bind failed for type {self.type_name!r} "
                f"at prefix {self.prefix!r}: {self.cause}"
            )
        return (
            f"nemo starter bind failed for bean {self.bean_name!r} "
            f"(type {self.type_name!r}, prefix {self.prefix!r}): {self.cause}"
        )


def wrap_bind_error(
    bean_name: str, type_name: str, prefix: str, err: BaseException | None
) -> ConfigurationBindError | None:
    """Wrap ``err`` with binding context; None stays None."""
    if err is None:
        return None
    return ConfigurationBindError(bean_name, type_name, prefix, err)


def as_configuration_bind_error(err: BaseException | None) -> ConfigurationBindError | None:
    """Return the first ConfigurationBindError in ``err``'s cause chain, if any."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, ConfigurationBindError):
            return current
        seen.add(id(current))
        current = current.__cause__
    return None