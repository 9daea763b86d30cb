"""Factory registry – model definitions and model class resolution."""
from __future__ import annotations

import importlib
from typing import Any, Mapping

from factory_muffin.errors import ClassNotFoundError, NoDefinedFactoryError
from factory_muffin.generators import Generator, parse_definition

ModelLike = str | type

__all__ = ["FactoryRegistry", "ModelLike", "split_model_id"]


def split_model_id(model_id: str) -> tuple[str | None, str]:
    """Split ``group:Name`` on the first colon.

    >>> split_model_id("admin:User")
    ('admin', 'User')
    >>> split_model_id("User")
    (None, 'User')
    """
    group, sep, name = model_id.partition(":")
    if not sep:
        return None, model_id
    return group, name


class FactoryRegistry:
    """Stores definitions keyed by full model id (group prefix included).

    Definitions are kept verbatim for :meth:`get_definition` and parsed once
    into generators for resolution.  Classes are registered by bare name so
    ``"User"`` and ``"admin:User"`` both construct the same type.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, dict[str, Any]] = {}
        self._generators: dict[str, dict[str, Generator]] = {}
        self._classes: dict[str, type] = {}
        self._names: dict[type, str] = {}

    # ------------------------------------------------------------------
    # Model ids
    # ------------------------------------------------------------------

    def model_id(self, model: ModelLike, group: str | None = None) -> str:
        """Normalise *model* to a string id, registering classes on the way."""
        if isinstance(model, type):
            name = self._names.get(model) or self.register_model(model)
        else:
            name = model
        return f"{group}:{name}" if group else name

    def register_model(self, cls: type, name: str | None = None) -> str:
        """Make *cls* resolvable by *name* (defaults to ``cls.__name__``)."""
        name = name or cls.__name__
        self._classes[name] = cls
        self._names[cls] = name
        return name

    def name_for(self, obj: Any) -> str:
        """Return the bare model name an object's class is registered under."""
        cls = type(obj)
        return self._names.get(cls, cls.__name__)

    def resolve_class(self, name: str) -> type:
        """Return the class for a bare model name.

        Registered classes win; otherwise ``package.module.Class`` is imported.
        """
        cls = self._classes.get(name)
        if cls is not None:
            return cls

        module_path, _, attr = name.rpartition(".")
        if not module_path:
            raise ClassNotFoundError(name)
        try:
            module = importlib.import_module(module_path)
        except ImportError as exc:
            raise ClassNotFoundError(name, cause=exc) from exc
        cls = getattr(module, attr, None)
        if not isinstance(cls, type):
            raise ClassNotFoundError(name)
        self._classes[name] = cls
        # an earlier registration keeps its name
        self._names.setdefault(cls, name)
        return cls

    # ------------------------------------------------------------------
    # Definitions
    # ------------------------------------------------------------------

    def define(self, model_id: str, definition: Mapping[str, Any] | None = None) -> None:
        """Store *definition* under *model_id*, replacing any previous one.

        Kinds are parsed before anything is stored, so a malformed kind
        leaves the previous definition in place.
        """
        raw = dict(definition or {})
        generators = parse_definition(raw)
        self._definitions[model_id] = raw
        self._generators[model_id] = generators

    def has_definition(self, model_id: str) -> bool:
        return model_id in self._definitions

    def get_definition(self, model_id: str) -> dict[str, Any]:
        """Return the definition stored under exactly *model_id*."""
        try:
            return dict(self._definitions[model_id])
        except KeyError:
            raise NoDefinedFactoryError(model_id) from None

    def generators_for(self, model_id: str) -> dict[str, Generator]:
        """Return the parsed generators for *model_id*.

        For ``group:Name`` the bare ``Name`` definition (when present) is
        applied first and the group definition is layered over it.
        """
        if model_id not in self._generators:
            raise NoDefinedFactoryError(model_id)
        group, name = split_model_id(model_id)
        if group is None or name not in self._generators:
            return dict(self._generators[model_id])
        return {**self._generators[name], **self._generators[model_id]}

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
