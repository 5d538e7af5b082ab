"""Config settings – dataclass settings read from the environment.

Every field of a :class:`Settings` subclass maps to the variable
``<PREFIX>_<FIELD>`` (upper-cased).  Values are parsed according to the
field's annotation; only ``str``, ``int``, ``float`` and ``bool`` fields
are supported.
"""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, Callable, ClassVar, Mapping, TypeVar

from dotenv import dotenv_values

from seat_inventory.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound="Settings")

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _parse_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"expected one of {sorted(_TRUE | _FALSE)}")


_PARSERS: dict[Any, Callable[[str], Any]] = {
    str: str,
    int: int,
    float: float,
    bool: _parse_bool,
}


@dataclasses.dataclass
class Settings:
    """Base for settings dataclasses; override :meth:`_validate` for range checks."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


class SettingsLoader(abc.ABC):
    """Port: build a settings object from some external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read settings from *environ* (``os.environ`` when omitted)."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        hints = typing.get_type_hints(settings_class)
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            raw = environ.get(key)
            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING
                ):
                    raise MissingRequiredSettingError(key)
                continue

            parser = _PARSERS.get(hints[field.name])
            if parser is None:
                raise ConfigError(
                    f"{settings_class.__name__}.{field.name} has an unsupported type",
                    setting=key,
                )
            try:
                values[field.name] = parser(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc

        return settings_class(**values)


class DotenvSettingsLoader(SettingsLoader):
    """Read settings from a ``.env`` file layered under the process environment.

    Real environment variables win unless *override* is set.  The file is
    only read; ``os.environ`` is never modified.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        from_file = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            merged = {**os.environ, **from_file}
        else:
            merged = {**from_file, **os.environ}
        return EnvSettingsLoader(merged).load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
