"""Generators – Generator base class and GenerationContext."""
from __future__ import annotations

import abc
import dataclasses
from typing import Any, Callable


@dataclasses.dataclass(frozen=True)
class GenerationContext:
    """Everything a generator may need while producing one value.

    ``build_model`` builds (and, on the create path, saves) a referenced
    model; ``has_model`` reports whether a model id has a definition.
    """

    obj: Any
    provider: Any
    build_model: Callable[[str], Any]
    has_model: Callable[[str], bool]


class Generator(abc.ABC):
    """A parsed kind descriptor.

    Instances are immutable and reusable: the same generator may produce
    values for any number of objects.
    """

    @abc.abstractmethod
    def generate(self, context: GenerationContext) -> Any:
        """Produce one attribute value."""


__all__ = ["GenerationContext", "Generator"]
