"""Generators – references to other defined models."""
from __future__ import annotations

import dataclasses
from typing import Any

from factory_muffin.errors import MalformedDescriptorError
from factory_muffin.generators.base import GenerationContext, Generator


@dataclasses.dataclass(frozen=True)
class ModelRef(Generator):
    """Build another defined model and use it as the attribute value.

    The explicit form is ``factory|<model id>``, e.g. ``factory|admin:User``.
    """

    PREFIX = "factory|"

    model_id: str

    @classmethod
    def parse(cls, kind: str) -> "ModelRef":
        if not kind.startswith(cls.PREFIX):
            raise MalformedDescriptorError(kind, f"expected the prefix {cls.PREFIX!r}")
        model_id = kind[len(cls.PREFIX):].strip()
        if not model_id:
            raise MalformedDescriptorError(kind, "missing model id")
        return cls(model_id)

    def generate(self, context: GenerationContext) -> Any:
        return context.build_model(self.model_id)


__all__ = ["ModelRef"]
