"""Generators – calls into the faker provider."""
from __future__ import annotations

import dataclasses
import re
from typing import Any, Callable

from factory_muffin.errors import MalformedDescriptorError, UnknownGeneratorError
from factory_muffin.generators.base import GenerationContext, Generator

_INT_RE = re.compile(r"-?\d+")
_FLOAT_RE = re.compile(r"-?\d+\.\d+")
_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")

# Names from the PHP faker library mapped to their Python faker methods;
# checked before the snake_case fallback.
ALIASES: dict[str, str] = {
    "numberBetween": "random_int",
    "randomNumber": "random_number",
    "randomElement": "random_element",
    "randomDigit": "random_digit",
    "uuid": "uuid4",
}


def coerce_arg(raw: str) -> int | float | str:
    """Turn a numeric-looking descriptor argument into a number."""
    if _INT_RE.fullmatch(raw):
        return int(raw)
    if _FLOAT_RE.fullmatch(raw):
        return float(raw)
    return raw


def snake_case(name: str) -> str:
    """``numberBetween`` -> ``number_between``."""
    return _CAMEL_RE.sub("_", name).lower()


def lookup(provider: Any, name: str) -> Callable[..., Any] | None:
    """Return the provider method for *name*, or ``None``.

    Tries *name* itself, its alias, then its snake_case spelling.  Private
    names never resolve.
    """
    if not name or name.startswith("_"):
        return None
    for candidate in dict.fromkeys((name, ALIASES.get(name, name), snake_case(name))):
        try:
            method = getattr(provider, candidate, None)
        except TypeError:
            # Faker refuses instance-level ``seed`` lookups
            continue
        if callable(method):
            return method
    return None


@dataclasses.dataclass(frozen=True)
class ProviderCall(Generator):
    """``<method>[|arg...]``: call ``method`` on the provider.

    A bare name with no arguments that matches a defined model id builds that
    model instead, so ``"author": "User"`` works without the ``factory|``
    prefix.  The model wins over a provider method of the same name: once a
    model called ``word`` is defined, every bare ``"word"`` kind builds it.
    Pass arguments or pick another model name to keep the provider call.
    """

    name: str
    args: tuple[Any, ...] = ()

    @classmethod
    def parse(cls, kind: str) -> "ProviderCall":
        name, *args = kind.split("|")
        name = name.strip()
        if not name:
            raise MalformedDescriptorError(kind, "missing generator name")
        return cls(name, tuple(coerce_arg(arg) for arg in args))

    @property
    def kind(self) -> str:
        return "|".join([self.name, *(str(arg) for arg in self.args)])

    def generate(self, context: GenerationContext) -> Any:
        if not self.args and context.has_model(self.name):
            return context.build_model(self.name)
        method = lookup(context.provider, self.name)
        if method is None:
            raise UnknownGeneratorError(self.kind)
        return method(*self.args)


@dataclasses.dataclass(frozen=True)
class BareWord(Generator):
    """A plain caller-supplied string with no ``|`` in it.

    Builds the model or calls the provider method it names, like
    :class:`ProviderCall`; a word that names neither is returned unchanged,
    so ``{"name": "John"}`` sets ``"John"``.
    """

    value: str

    def generate(self, context: GenerationContext) -> Any:
        name = self.value.strip()
        if name and context.has_model(name):
            return context.build_model(name)
        method = lookup(context.provider, name)
        if method is None:
            return self.value
        return method()


__all__ = ["ALIASES", "BareWord", "ProviderCall", "coerce_arg", "lookup", "snake_case"]
