"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from dotenv import load_dotenv

from kafka_rpc.config.settings.base import Settings
from kafka_rpc.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_BOOLEANS = {
    "1": True, "true": True, "yes": True, "on": True,
    "0": False, "false": False, "no": False, "off": False,
}


def _parse_bool(raw: str) -> bool:
    try:
        return _BOOLEANS[raw.strip().lower()]
    except KeyError:
        raise ValueError("expected a boolean") from None


def _parse_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


_PARSERS: dict[str, Callable[[str], Any]] = {
    "bool": _parse_bool,
    "int": int,
    "float": float,
    "str": str,
}


def _type_name(annotation: Any) -> str:
    # Annotations are strings under ``from __future__ import annotations``.
    name = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", str(annotation))
    return name.replace(" ", "")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Build settings from environment variables named by ``Settings.env_key``.

    Unset variables fall back to the field default. An empty value for an
    ``X | None`` field means ``None``; ``list[...]`` fields are comma-separated.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = settings_class.env_key(field.name)
            if key in environ:
                values[field.name] = self._parse(key, environ[key], _type_name(field.type))
            elif field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:  # type: ignore[misc]
                raise MissingRequiredSettingError(key)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__} from the environment", cause=exc) from exc

    @staticmethod
    def _parse(key: str, raw: str, type_name: str) -> Any:
        if type_name.endswith("|None"):
            if raw == "":
                return None
            type_name = type_name.removesuffix("|None")
        if type_name.startswith("list"):
            return _parse_list(raw)
        parser = _PARSERS.get(type_name, str)
        try:
            return parser(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(key, raw, f"expected {type_name}") from exc


class DotenvSettingsLoader(SettingsLoader):
    """Merge a ``.env`` file into the process environment, then load from it.

    Variables already set in the environment win unless ``override`` is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
