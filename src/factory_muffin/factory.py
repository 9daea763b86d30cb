"""FactoryMuffin – the fixture engine.

One engine owns its definitions, its faker provider and the list of objects
it created::

    factory = FactoryMuffin()
    factory.define(User, {"name": "name", "email": "email"})
    factory.define("Post", {"title": "sentence", "author": "factory|User"})

    post = factory.create("Post")      # saves the Post and its User
    draft = factory.instance("Post")   # nothing saved or tracked
    factory.delete_saved()             # deletes everything create() made
"""
from __future__ import annotations

import importlib.util
import os
from pathlib import Path
from typing import Any, Iterable, Mapping

from faker import Faker

from factory_muffin.config import EnvSettingsLoader, FactorySettings
from factory_muffin.errors import (
    DefinitionError,
    DirectoryNotFoundError,
    RecursiveDefinitionError,
)
from factory_muffin.generators import BareWord, GenerationContext, Generator, parse_kind
from factory_muffin.observability.logging import get_logger
from factory_muffin.registry import FactoryRegistry, ModelLike, split_model_id
from factory_muffin.tracker import LifecycleTracker

logger = get_logger(__name__)

__all__ = ["FactoryMuffin"]


def _override(value: Any) -> Generator:
    # a plain word naming no provider method or model stays as given
    if isinstance(value, str) and "|" not in value:
        return BareWord(value)
    return parse_kind(value)


class FactoryMuffin:
    """Defines model factories, builds objects and tracks the ones it saved.

    Parameters
    ----------
    faker_locale:
        Locale handed to :class:`faker.Faker`.
    faker_seed:
        Optional seed for reproducible fake values.
    save_method / delete_method:
        Names of the methods called on created objects to persist and remove
        them.
    """

    def __init__(
        self,
        *,
        faker_locale: str = "en_US",
        faker_seed: int | None = None,
        save_method: str = "save",
        delete_method: str = "delete",
    ) -> None:
        self._registry = FactoryRegistry()
        self._tracker = LifecycleTracker(save_method, delete_method)
        self._faker_locale = faker_locale
        self._faker_seed = faker_seed
        self._faker: Faker | None = None
        self._loaded_files: set[Path] = set()
        self._building: list[str] = []

    @classmethod
    def from_settings(cls, settings: FactorySettings | None = None) -> "FactoryMuffin":
        """Build an engine from *settings* (or ``FACTORY_MUFFIN_*`` env vars)
        and load any configured ``factory_paths``."""
        settings = settings or EnvSettingsLoader().load(FactorySettings)
        engine = cls(
            faker_locale=settings.faker_locale,
            faker_seed=settings.faker_seed,
            save_method=settings.save_method,
            delete_method=settings.delete_method,
        )
        if settings.factory_paths:
            engine.load_factories(settings.factory_paths)
        return engine

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def faker(self) -> Faker:
        """The provider, built on first use for the current locale."""
        if self._faker is None:
            self._faker = Faker(self._faker_locale)
            if self._faker_seed is not None:
                self._faker.seed_instance(self._faker_seed)
            logger.debug("faker.created", locale=self._faker_locale, seed=self._faker_seed)
        return self._faker

    @property
    def faker_locale(self) -> str:
        return self._faker_locale

    @property
    def save_method(self) -> str:
        return self._tracker.save_method

    @property
    def delete_method(self) -> str:
        return self._tracker.delete_method

    @property
    def registry(self) -> FactoryRegistry:
        return self._registry

    def set_faker_locale(self, locale: str) -> "FactoryMuffin":
        self._faker_locale = locale
        # rebuilt lazily with the new locale
        self._faker = None
        return self

    def set_faker_seed(self, seed: int | None) -> "FactoryMuffin":
        self._faker_seed = seed
        if self._faker is not None and seed is not None:
            self._faker.seed_instance(seed)
        return self

    def set_save_method(self, method: str) -> "FactoryMuffin":
        self._tracker.save_method = method
        return self

    def set_delete_method(self, method: str) -> "FactoryMuffin":
        self._tracker.delete_method = method
        return self

    # ------------------------------------------------------------------
    # Definitions
    # ------------------------------------------------------------------

    def define(
        self,
        model: ModelLike,
        definition: Mapping[str, Any] | None = None,
        *,
        group: str | None = None,
    ) -> "FactoryMuffin":
        """Define (or redefine) the factory for *model*.

        *model* is a class, a bare name, a dotted import path or a
        ``group:Name`` id.  Values of *definition* are kind descriptors
        (``"email"``, ``"numberBetween|1|10"``, ``"factory|User"``,
        ``"arrayparam|,|a,b;c"``), callables taking the object, or literals.
        """
        model_id = self._registry.model_id(model, group)
        self._registry.define(model_id, definition)
        logger.debug("factory.defined", model=model_id, attributes=len(definition or {}))
        return self

    def get_definition(self, model: ModelLike, *, group: str | None = None) -> dict[str, Any]:
        return self._registry.get_definition(self._registry.model_id(model, group))

    def register_model(self, cls: type, name: str | None = None) -> "FactoryMuffin":
        """Make *cls* constructible under *name* without defining it yet."""
        self._registry.register_model(cls, name)
        return self

    def load_factories(self, paths: str | os.PathLike[str] | Iterable[str | os.PathLike[str]]) -> "FactoryMuffin":
        """Execute every ``*.py`` file below each directory in *paths*.

        Files run once per engine with a ``factory`` global bound to this
        engine; they register definitions by calling ``factory.define``.
        """
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        for path in paths:
            directory = Path(path)
            if not directory.is_dir() or not os.access(directory, os.R_OK):
                raise DirectoryNotFoundError(str(path))
            self._load_directory(directory)
        return self

    def _load_directory(self, directory: Path) -> None:
        for file in sorted(directory.rglob("*.py")):
            resolved = file.resolve()
            if resolved in self._loaded_files:
                continue
            module_name = f"_factory_muffin_definitions_{len(self._loaded_files)}_{file.stem}"
            spec = importlib.util.spec_from_file_location(module_name, resolved)
            if spec is None or spec.loader is None:
                raise DefinitionError(f"Could not load factory file '{file}'", detail={"path": str(file)})
            module = importlib.util.module_from_spec(spec)
            module.factory = self  # type: ignore[attr-defined]
            try:
                spec.loader.exec_module(module)
            except Exception as exc:
                raise DefinitionError(
                    f"Failed to execute factory file '{file}': {exc}",
                    detail={"path": str(file)},
                    cause=exc,
                ) from exc
            self._loaded_files.add(resolved)
            logger.debug("factory.loaded", path=str(file))

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def instance(self, model: ModelLike, attrs: Mapping[str, Any] | None = None) -> Any:
        """Return a populated object of *model*; nothing is saved or tracked."""
        return self._make(self._registry.model_id(model), attrs, save=False)

    def create(self, model: ModelLike, attrs: Mapping[str, Any] | None = None) -> Any:
        """Build, track and save an object of *model*.

        The object is tracked as soon as it is constructed, so it is still in
        :meth:`saved` when attribute generation or saving fails.

        Raises
        ------
        SaveMethodNotFoundError
        SaveFailedError
        """
        model_id = self._registry.model_id(model)
        obj = self._make(model_id, attrs, save=True)
        self._tracker.save(obj, model_id)
        return obj

    def seed(self, times: int, model: ModelLike, attrs: Mapping[str, Any] | None = None) -> list[Any]:
        """Call :meth:`create` *times* times and return the objects in order."""
        return [self.create(model, attrs) for _ in range(times)]

    def attributes_for(
        self,
        obj: Any,
        attrs: Mapping[str, Any] | None = None,
        *,
        model: ModelLike | None = None,
    ) -> dict[str, Any]:
        """Generate attribute values for *obj* without assigning them.

        The definition is the one for *model*, defaulting to the name the
        object's class is registered under.
        """
        model_id = self._registry.model_id(model) if model is not None else self._registry.name_for(obj)
        return self._resolve(obj, model_id, attrs, save=False)

    def generate_attr(self, kind: Any, obj: Any = None) -> Any:
        """Generate a single value from *kind* with *obj* as context."""
        return parse_kind(kind).generate(self._context(obj, save=False))

    # ------------------------------------------------------------------
    # Tracking
    # ------------------------------------------------------------------

    def saved(self) -> list[Any]:
        return self._tracker.saved()

    def is_saved(self, obj: Any) -> bool:
        return self._tracker.is_saved(obj)

    def delete_saved(self) -> "FactoryMuffin":
        """Delete every object :meth:`create` tracked.

        Raises
        ------
        DeletingFailedError
            After the full sweep, when at least one delete failed.
        """
        self._tracker.delete_saved()
        return self

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _make(self, model_id: str, attrs: Mapping[str, Any] | None, *, save: bool) -> Any:
        if model_id in self._building:
            raise RecursiveDefinitionError([*self._building, model_id])

        _, name = split_model_id(model_id)
        cls = self._registry.resolve_class(name)
        try:
            obj = cls()
        except TypeError as exc:
            raise DefinitionError(
                f"Could not instantiate model '{name}': {exc}",
                detail={"model": model_id},
                cause=exc,
            ) from exc

        if save:
            self._tracker.track(obj)

        self._building.append(model_id)
        try:
            attributes = self._resolve(obj, model_id, attrs, save=save)
        finally:
            self._building.pop()

        for key, value in attributes.items():
            setattr(obj, key, value)
        logger.debug("instance.created", model=model_id, tracked=save)
        return obj

    def _resolve(
        self,
        obj: Any,
        model_id: str,
        attrs: Mapping[str, Any] | None,
        *,
        save: bool,
    ) -> dict[str, Any]:
        generators = self._registry.generators_for(model_id)
        for key, value in (attrs or {}).items():
            generators[key] = _override(value)

        context = self._context(obj, save=save)
        return {key: generator.generate(context) for key, generator in generators.items()}

    def _context(self, obj: Any, *, save: bool) -> GenerationContext:
        def build_model(model_id: str) -> Any:
            if save:
                return self.create(model_id)
            return self.instance(model_id)

        return GenerationContext(
            obj=obj,
            provider=self.faker,
            build_model=build_model,
            has_model=self._registry.has_definition,
        )
