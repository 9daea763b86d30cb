"""Module-level API bound to a process-wide default engine.

Convenient for definition files and small suites::

    from factory_muffin import facade as fm

    fm.define("myapp.models.User", {"email": "email"})
    user = fm.create("myapp.models.User")
    fm.delete_saved()

Suites that need isolation should hold their own :class:`FactoryMuffin`.
"""
from __future__ import annotations

import os
from typing import Any, Iterable, Mapping

from factory_muffin.factory import FactoryMuffin
from factory_muffin.registry import ModelLike

_engine: FactoryMuffin | None = None


def get_engine() -> FactoryMuffin:
    """Return the default engine, creating it from the environment once."""
    global _engine
    if _engine is None:
        _engine = FactoryMuffin.from_settings()
    return _engine


def reset_engine(engine: FactoryMuffin | None = None) -> FactoryMuffin | None:
    """Replace the default engine (``None`` rebuilds it lazily)."""
    global _engine
    previous, _engine = _engine, engine
    return previous


def define(model: ModelLike, definition: Mapping[str, Any] | None = None, *, group: str | None = None) -> FactoryMuffin:
    return get_engine().define(model, definition, group=group)


def instance(model: ModelLike, attrs: Mapping[str, Any] | None = None) -> Any:
    return get_engine().instance(model, attrs)


def create(model: ModelLike, attrs: Mapping[str, Any] | None = None) -> Any:
    return get_engine().create(model, attrs)


def seed(times: int, model: ModelLike, attrs: Mapping[str, Any] | None = None) -> list[Any]:
    return get_engine().seed(times, model, attrs)


def attributes_for(obj: Any, attrs: Mapping[str, Any] | None = None, *, model: ModelLike | None = None) -> dict[str, Any]:
    return get_engine().attributes_for(obj, attrs, model=model)


def generate_attr(kind: Any, obj: Any = None) -> Any:
    return get_engine().generate_attr(kind, obj)


def saved() -> list[Any]:
    return get_engine().saved()


def is_saved(obj: Any) -> bool:
    return get_engine().is_saved(obj)


def delete_saved() -> FactoryMuffin:
    return get_engine().delete_saved()


def set_faker_locale(locale: str) -> FactoryMuffin:
    return get_engine().set_faker_locale(locale)


def set_save_method(method: str) -> FactoryMuffin:
    return get_engine().set_save_method(method)


def set_delete_method(method: str) -> FactoryMuffin:
    return get_engine().set_delete_method(method)


def load_factories(paths: str | os.PathLike[str] | Iterable[str | os.PathLike[str]]) -> FactoryMuffin:
    return get_engine().load_factories(paths)


__all__ = [
    "attributes_for",
    "create",
    "define",
    "delete_saved",
    "generate_attr",
    "get_engine",
    "instance",
    "is_saved",
    "load_factories",
    "reset_engine",
    "saved",
    "seed",
    "set_delete_method",
    "set_faker_locale",
    "set_save_method",
]
