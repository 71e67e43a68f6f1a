"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from kafka_rpc.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings.

    Each field maps to ``<PREFIX>_<FIELD>``: ``bootstrap_servers`` on a class
    with ``_prefix = "KAFKA"`` is read from ``KAFKA_BOOTSTRAP_SERVERS``.
    ``_validate`` runs after construction, whichever way the instance is built.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to reject inconsistent values with ``InvalidSettingValueError``."""

    def _require_positive(self, *names: str) -> None:
        for name in names:
            value = getattr(self, name)
            if value <= 0:
                raise InvalidSettingValueError(name, value, "must be positive")


__all__ = ["Settings"]
