"""Generators – literal values and lazy callables."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

from factory_muffin.generators.base import GenerationContext, Generator


@dataclasses.dataclass(frozen=True)
class Literal(Generator):
    """Return ``value`` unchanged."""

    value: Any

    def generate(self, context: GenerationContext) -> Any:
        return self.value


@dataclasses.dataclass(frozen=True)
class Lazy(Generator):
    """Call ``func`` with the object being built and return the result::

        factory.define("User", {
            "email": "email",
            "slug": lambda user: user.__class__.__name__.lower(),
        })
    """

    func: Callable[[Any], Any]

    def generate(self, context: GenerationContext) -> Any:
        return self.func(context.obj)


__all__ = ["Lazy", "Literal"]
