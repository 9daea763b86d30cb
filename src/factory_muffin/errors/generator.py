"""Generator errors: bad kind descriptors and unresolvable strategies."""

from __future__ import annotations

from typing import Any, Sequence

from factory_muffin.errors.base import FactoryMuffinError


class GeneratorError(FactoryMuffinError):
    """Raised when an attribute value cannot be generated."""

    default_code = "generator_error"


class MalformedDescriptorError(GeneratorError):
    """The kind string does not follow the descriptor grammar."""

    default_code = "malformed_descriptor"

    def __init__(self, kind: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Malformed kind descriptor {kind!r}: {reason}",
            detail={"kind": kind, "reason": reason},
            **kwargs,
        )
        self.kind = kind
        self.reason = reason


class UnknownGeneratorError(GeneratorError):
    """No provider method or model matches the kind."""

    default_code = "unknown_generator"

    def __init__(self, kind: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unable to find a generator for kind {kind!r}",
            detail={"kind": kind},
            **kwargs,
        )
        self.kind = kind


class RecursiveDefinitionError(GeneratorError):
    """A model reference re-enters a model already being built."""

    default_code = "recursive_definition"

    def __init__(self, chain: Sequence[str], **kwargs: Any) -> None:
        path = " -> ".join(chain)
        super().__init__(
            f"Cyclic model reference detected: {path}",
            detail={"chain": list(chain)},
            **kwargs,
        )
        self.chain = list(chain)


__all__ = [
    "GeneratorError",
    "MalformedDescriptorError",
    "RecursiveDefinitionError",
    "UnknownGeneratorError",
]
