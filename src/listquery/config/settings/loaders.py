"""Config settings – environment and dotenv loaders."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from collections.abc import Mapping
from typing import Any, TypeVar

from dotenv import dotenv_values

from listquery.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from listquery.config.settings.base import Settings

S = TypeVar("S", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class SettingsLoader(abc.ABC):
    @abc.abstractmethod
    def load(self, settings_class: type[S]) -> S: ...


class EnvSettingsLoader(SettingsLoader):
    """Build settings from an environment mapping (``os.environ`` by default).

    Values are coerced to the field's annotation: ``bool``, ``int``,
    ``float``, ``str`` or ``list[str]`` (comma separated, blanks dropped).
    Unset variables leave the field default in place.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[S]) -> S:
        environ = os.environ if self._environ is None else self._environ
        hints = typing.get_type_hints(settings_class)
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            env_key = settings_class.env_key(field.name)
            raw = environ.get(env_key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(env_key)
                continue
            values[field.name] = _coerce(field.name, raw, hints.get(field.name, str))
        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Overlay a ``.env`` file on the process environment, then load.

    Process variables win unless *override* is set. ``os.environ`` itself is
    left untouched.
    """

    def __init__(self, env_file: str = ".env", *, override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[S]) -> S:
        file_values = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            environ = {**os.environ, **file_values}
        else:
            environ = {**file_values, **os.environ}
        return EnvSettingsLoader(environ).load(settings_class)


def _coerce(name: str, raw: str, hint: Any) -> Any:
    if hint is bool:
        text = raw.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise InvalidSettingValueError(name, raw, "expected a boolean")
    if hint in (int, float):
        try:
            return hint(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(name, raw, f"expected {hint.__name__}") from exc
    if typing.get_origin(hint) in (list, tuple):
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
