"""Config settings – Settings base class and FactorySettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from factory_muffin.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FactorySettings(Settings):
    """Engine configuration, read from ``FACTORY_MUFFIN_*`` variables.

    ``factory_paths`` is a comma-separated list when loaded from the
    environment.
    """

    _prefix: ClassVar[str] = "FACTORY_MUFFIN"

    faker_locale: str = "en_US"
    faker_seed: int | None = None
    save_method: str = "save"
    delete_method: str = "delete"
    factory_paths: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        for name in ("faker_locale", "save_method", "delete_method"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidSettingValueError(name, value, "must be a non-empty string")
        if not self.save_method.isidentifier():
            raise InvalidSettingValueError("save_method", self.save_method, "not a method name")
        if not self.delete_method.isidentifier():
            raise InvalidSettingValueError("delete_method", self.delete_method, "not a method name")


__all__ = ["FactorySettings", "Settings"]
