"""Definition errors: registry lookups, model classes and definition files."""

from __future__ import annotations

from typing import Any

from factory_muffin.errors.base import FactoryMuffinError


class DefinitionError(FactoryMuffinError):
    """Raised when a factory definition cannot be found or loaded."""

    default_code = "definition_error"


class NoDefinedFactoryError(DefinitionError):
    """No definition is registered under the requested model id."""

    default_code = "no_defined_factory"

    def __init__(self, model: str, **kwargs: Any) -> None:
        super().__init__(
            f"No factory definition found for model '{model}'",
            detail={"model": model},
            **kwargs,
        )
        self.model = model


class ClassNotFoundError(DefinitionError):
    """The bare model name does not resolve to a Python class."""

    default_code = "class_not_found"

    def __init__(self, model: str, **kwargs: Any) -> None:
        super().__init__(
            f"No class could be found for model '{model}'",
            detail={"model": model},
            **kwargs,
        )
        self.model = model


class DirectoryNotFoundError(DefinitionError):
    """A factory path passed to ``load_factories`` is not a directory."""

    default_code = "directory_not_found"

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            f"The directory '{path}' was not found",
            detail={"path": path},
            **kwargs,
        )
        self.path = path


__all__ = [
    "ClassNotFoundError",
    "DefinitionError",
    "DirectoryNotFoundError",
    "NoDefinedFactoryError",
]
